"""
Muscle group schemas.

Every muscle the planner can target is a :class:`MuscleGroup`.  Volume
decisions are driven by a :class:`TrainingGuidelines` record per muscle
(see :mod:`app.catalog.guidelines` for the built-in table).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ======================================================================
# Enums
# ======================================================================

class MuscleGroup(str, Enum):
    """Trainable muscle group."""
    CHEST = "chest"
    BACK = "back"
    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CALVES = "calves"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    SHOULDERS = "shoulders"
    ABS = "abs"
    FOREARMS = "forearms"
    TRAPS = "traps"
    OBLIQUES = "obliques"
    LOWER_BACK = "lower_back"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


class MuscleSize(str, Enum):
    """Size class used for ordering and rep-range selection."""
    SMALL = "small"
    LARGE = "large"


class MuscleGoal(str, Enum):
    """Per-muscle intent inside a plan."""
    GROW = "grow"
    MAINTAIN = "maintain"


# ======================================================================
# Guidelines
# ======================================================================

class SetRange(BaseModel):
    """Inclusive range of weekly working sets."""

    model_config = ConfigDict(frozen=True)

    minimum: int = Field(..., ge=0)
    maximum: int = Field(..., ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> SetRange:
        if self.maximum < self.minimum:
            raise ValueError(
                f"maximum ({self.maximum}) must be >= minimum ({self.minimum})"
            )
        return self

    def __contains__(self, sets: int) -> bool:
        return self.minimum <= sets <= self.maximum


class TrainingGuidelines(BaseModel):
    """Weekly set landmarks for one muscle group."""

    model_config = ConfigDict(frozen=True)

    maintenance_sets: SetRange
    hypertrophy_sets: SetRange
    muscle_size: MuscleSize

    @model_validator(mode="after")
    def _hypertrophy_covers_maintenance(self) -> TrainingGuidelines:
        if self.hypertrophy_sets.maximum < self.maintenance_sets.maximum:
            raise ValueError(
                "hypertrophy upper bound must be >= maintenance upper bound"
            )
        return self


class MuscleTrainingPreference(BaseModel):
    """Whether a muscle should be grown or maintained by a plan."""

    muscle_group: MuscleGroup
    goal: MuscleGoal
