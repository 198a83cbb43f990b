"""Plan generation core: volume, selection, composition, progression."""

from app.planner.composer import StandardWorkoutComposer
from app.planner.feedback import apply_feedback_progression, progress_plan_week
from app.planner.generator import PlanGenerationOptions, PlanGenerator, generate_plan
from app.planner.selector import CatalogExerciseSelector
from app.planner.volume import StandardVolumeRampStrategy

__all__ = [
    "StandardWorkoutComposer",
    "apply_feedback_progression",
    "progress_plan_week",
    "PlanGenerationOptions",
    "PlanGenerator",
    "generate_plan",
    "CatalogExerciseSelector",
    "StandardVolumeRampStrategy",
]
