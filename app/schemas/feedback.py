"""
Workout feedback schemas.

Feedback is captured before a workout (soreness, joint pain), per
exercise (load and set-volume ratings) and after the workout (session
fatigue).  The feedback progression step in
:mod:`app.planner.feedback` reads these to adjust the following week.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from app.schemas.muscle import MuscleGroup


class ExerciseIntensity(str, Enum):
    """How heavy the load felt."""
    TOO_EASY = "too_easy"
    MODERATE = "moderate"
    CHALLENGING = "challenging"
    FAILED = "failed"


class SetVolumeRating(str, Enum):
    """How the number of sets felt."""
    TOO_EASY = "too_easy"
    MODERATE = "moderate"
    CHALLENGING = "challenging"
    TOO_MUCH = "too_much"


class JointArea(str, Enum):
    KNEE = "knee"
    ELBOW = "elbow"
    SHOULDER = "shoulder"


class FatigueLevel(str, Enum):
    FRESH = "fresh"
    NORMAL = "normal"
    WIPED = "wiped"
    COMPLETELY_DRAINED = "completely_drained"


class PreWorkoutFeedback(BaseModel):
    sore_muscles: list[MuscleGroup] = Field(default_factory=list)
    joint_pain_areas: list[JointArea] = Field(default_factory=list)

    @property
    def has_muscle_or_joint_issues(self) -> bool:
        return bool(self.sore_muscles or self.joint_pain_areas)


class ExerciseFeedback(BaseModel):
    intensity: ExerciseIntensity
    set_volume: SetVolumeRating


class PostWorkoutFeedback(BaseModel):
    session_fatigue: FatigueLevel


class JointWarning(BaseModel):
    """Muscles flagged because of reported joint pain."""

    pain_area: JointArea
    affected_muscles: list[MuscleGroup]
    severity: int = Field(2, ge=1, le=3, description="1 (mild) to 3 (severe)")


class MuscleProgression(BaseModel):
    """Net set change applied to a muscle for the following week."""

    muscle: MuscleGroup
    current_volume: int = Field(..., ge=0, description="Weekly sets credited this week")
    sets_added: int = 0
    sets_removed: int = 0

    @property
    def is_progressing(self) -> bool:
        return self.sets_added > 0

    @property
    def is_regressing(self) -> bool:
        return self.sets_removed > 0

    @property
    def net_change(self) -> int:
        return self.sets_added - self.sets_removed


class ProgressionReport(BaseModel):
    """Outcome of one feedback-driven progression step."""

    muscle_progressions: list[MuscleProgression] = Field(default_factory=list)
    joint_warnings: list[JointWarning] = Field(default_factory=list)
    fatigue_reduced_workouts: list[int] = Field(
        default_factory=list,
        description="Indices (within the week) of workouts cut for fatigue",
    )
    log: list[str] = Field(default_factory=list)
