"""
Shared API dependencies.

Reusable FastAPI dependencies for the plan service.
"""

from functools import lru_cache

from app.core.config import settings
from app.services.plan_service import PlanService


@lru_cache
def get_plan_service() -> PlanService:
    """Return the process-wide plan service built from the global settings."""
    return PlanService(settings)
