"""Static reference data: movement catalogue and muscle guidelines."""

from app.catalog.guidelines import MUSCLE_GUIDELINES, get_guidelines, is_large
from app.catalog.movements import DEFAULT_CATALOG, MovementCatalog

__all__ = [
    "MUSCLE_GUIDELINES",
    "get_guidelines",
    "is_large",
    "DEFAULT_CATALOG",
    "MovementCatalog",
]
