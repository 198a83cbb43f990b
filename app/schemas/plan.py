"""
Training plan schemas.

A :class:`TrainingPlan` is a list of weeks, each a list of
:class:`Workout` objects in schedule order.  Workouts own their
:class:`ExerciseInstance` list, which in turn owns its sets.  The
generator never shares set or exercise lists between weeks.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.feedback import (
    ExerciseFeedback,
    PostWorkoutFeedback,
    PreWorkoutFeedback,
    ProgressionReport,
)
from app.schemas.movement import MovementDefinition
from app.schemas.muscle import MuscleGroup, MuscleTrainingPreference
from app.schemas.plan_input import PlanInput, TrainingGoal


class WorkoutDayType(str, Enum):
    FULL_BODY = "full_body"
    UPPER = "upper"
    LOWER = "lower"
    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"


# ======================================================================
# Workout content
# ======================================================================

class ExerciseSet(BaseModel):
    """One working set.  ``completed_reps`` of -1 means not recorded."""

    weight: float = Field(0.0, ge=0.0)
    target_reps: int = Field(..., gt=0)
    completed_reps: int = Field(0, ge=-1)
    is_complete: bool = False


class ExerciseInstance(BaseModel):
    """A movement scheduled inside a workout, with its sets."""

    movement: MovementDefinition
    sets: list[ExerciseSet] = Field(default_factory=list)
    exercise_type: str = "Normal"
    note: Optional[str] = None
    feedback: Optional[ExerciseFeedback] = None
    show_joint_warning: bool = False

    @property
    def set_count(self) -> int:
        return len(self.sets)


class Workout(BaseModel):
    title: str
    description: str = ""
    scheduled_date: Optional[datetime.date] = None
    is_complete: bool = False
    day_type: Optional[WorkoutDayType] = None
    exercises: list[ExerciseInstance] = Field(default_factory=list)
    pre_feedback: Optional[PreWorkoutFeedback] = None
    post_feedback: Optional[PostWorkoutFeedback] = None

    @property
    def primary_muscles(self) -> set[MuscleGroup]:
        """Every muscle trained as primary by at least one exercise."""
        return {m for ex in self.exercises for m in ex.movement.primary_muscles}

    def total_sets(self) -> int:
        return sum(ex.set_count for ex in self.exercises)


class TrainingPlan(BaseModel):
    name: str
    start_date: datetime.date
    days_per_week: int = Field(..., ge=1, le=7)
    weeks: list[list[Workout]] = Field(default_factory=list)
    muscle_preferences: list[MuscleTrainingPreference] = Field(default_factory=list)
    goal: Optional[TrainingGoal] = None

    @property
    def workouts(self) -> list[Workout]:
        """All workouts in schedule order."""
        return [w for week in self.weeks for w in week]

    @property
    def week_count(self) -> int:
        return len(self.weeks)

    def week(self, number: int) -> list[Workout]:
        """Workouts of week *number* (1-based).

        Raises :class:`ValueError` if the week does not exist.
        """
        if not 1 <= number <= len(self.weeks):
            raise ValueError(
                f"Week {number} out of range (plan has {len(self.weeks)} weeks)"
            )
        return self.weeks[number - 1]


# ======================================================================
# Requests / responses
# ======================================================================

class PlanGenerationRequest(BaseModel):
    plan_input: PlanInput
    weeks: Optional[int] = Field(
        None, ge=1, le=52,
        description="Number of weeks to generate (defaults to DEFAULT_PLAN_WEEKS)",
    )
    start_date: Optional[datetime.date] = Field(
        None, description="First training day (defaults to today)",
    )


class ProgressionRequest(BaseModel):
    plan: TrainingPlan
    week: int = Field(
        ..., ge=1,
        description="Completed week whose feedback adjusts the next one",
    )


class ProgressionResponse(BaseModel):
    plan: TrainingPlan
    report: ProgressionReport


class WeekSummary(BaseModel):
    week: int
    workouts: int
    exercises: int
    total_sets: int
    sets_by_muscle: dict[MuscleGroup, int]


class PlanSummary(BaseModel):
    name: str
    start_date: datetime.date
    end_date: Optional[datetime.date]
    total_workouts: int
    weeks: list[WeekSummary]
