"""
Plan input schemas.

:class:`PlanInput` is the immutable snapshot of the questionnaire answers
that drives plan generation.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.movement import EquipmentType
from app.schemas.muscle import MuscleGroup


class TrainingGoal(str, Enum):
    HYPERTROPHY = "hypertrophy"
    STRENGTH = "strength"


class WorkoutDuration(str, Enum):
    """Session length; bounds the number of exercises per workout."""
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class SplitStyle(str, Enum):
    FULL_BODY = "full_body"
    UPPER_LOWER = "upper_lower"
    PUSH_PULL_LEGS = "push_pull_legs"


class TrainingExperience(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def training_age(self) -> int:
        """Representative years of consistent training for the tier."""
        return _TRAINING_AGE[self]


_TRAINING_AGE: dict[TrainingExperience, int] = {
    TrainingExperience.BEGINNER: 0,
    TrainingExperience.INTERMEDIATE: 2,
    TrainingExperience.ADVANCED: 4,
}


class PlanInput(BaseModel):
    """User choices consumed by the plan generator.

    Empty ``prioritized_muscles`` yields a maintenance-only (static) plan.
    Empty ``available_equipment`` is accepted; every muscle target is then
    simply left unmet.
    """

    model_config = ConfigDict(frozen=True)

    goal: TrainingGoal
    prioritized_muscles: frozenset[MuscleGroup] = Field(default_factory=frozenset)
    training_days_per_week: int = Field(..., ge=2, le=6)
    workout_duration: WorkoutDuration = WorkoutDuration.MEDIUM
    available_equipment: frozenset[EquipmentType]
    preferred_split: SplitStyle
    training_experience: TrainingExperience

    def is_prioritized(self, muscle: MuscleGroup) -> bool:
        return muscle in self.prioritized_muscles
