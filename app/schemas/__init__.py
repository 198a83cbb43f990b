"""Pydantic schemas for request/response validation."""

from app.schemas.muscle import (
    MuscleGoal,
    MuscleGroup,
    MuscleSize,
    MuscleTrainingPreference,
    SetRange,
    TrainingGuidelines,
)
from app.schemas.movement import (
    EquipmentType,
    MovementDefinition,
    MovementPattern,
    MovementSuggestion,
)
from app.schemas.plan_input import (
    PlanInput,
    SplitStyle,
    TrainingExperience,
    TrainingGoal,
    WorkoutDuration,
)
from app.schemas.feedback import (
    ExerciseFeedback,
    ExerciseIntensity,
    FatigueLevel,
    JointArea,
    PostWorkoutFeedback,
    PreWorkoutFeedback,
    ProgressionReport,
    SetVolumeRating,
)
from app.schemas.plan import (
    ExerciseInstance,
    ExerciseSet,
    PlanGenerationRequest,
    PlanSummary,
    ProgressionRequest,
    ProgressionResponse,
    TrainingPlan,
    Workout,
    WorkoutDayType,
)
from app.schemas.volume import VolumeRecommendation

__all__ = [
    "MuscleGoal",
    "MuscleGroup",
    "MuscleSize",
    "MuscleTrainingPreference",
    "SetRange",
    "TrainingGuidelines",
    "EquipmentType",
    "MovementDefinition",
    "MovementPattern",
    "MovementSuggestion",
    "PlanInput",
    "SplitStyle",
    "TrainingExperience",
    "TrainingGoal",
    "WorkoutDuration",
    "ExerciseFeedback",
    "ExerciseIntensity",
    "FatigueLevel",
    "JointArea",
    "PostWorkoutFeedback",
    "PreWorkoutFeedback",
    "ProgressionReport",
    "SetVolumeRating",
    "ExerciseInstance",
    "ExerciseSet",
    "PlanGenerationRequest",
    "PlanSummary",
    "ProgressionRequest",
    "ProgressionResponse",
    "TrainingPlan",
    "Workout",
    "WorkoutDayType",
    "VolumeRecommendation",
]
