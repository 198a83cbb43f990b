"""
Plan service.

Bridges the HTTP layer and the planning core: maps application settings
onto generation options and turns engine ``ValueError`` / ``KeyError``
into HTTP errors.  The planning core itself never sees settings.
"""

from typing import Optional

from fastapi import HTTPException, status

from app.catalog.guidelines import MUSCLE_GUIDELINES
from app.catalog.movements import DEFAULT_CATALOG, MovementCatalog
from app.core.config import Settings, settings as default_settings
from app.planner.feedback import progress_plan_week
from app.planner.generator import PlanGenerationOptions, PlanGenerator
from app.planner.selector import CatalogExerciseSelector
from app.planner.stats import summarize_plan
from app.planner.composer import StandardWorkoutComposer
from app.schemas.movement import (
    EquipmentType,
    MovementDefinition,
    MovementPattern,
    MovementSuggestion,
)
from app.schemas.muscle import MuscleGroup, TrainingGuidelines
from app.schemas.plan import (
    PlanGenerationRequest,
    PlanSummary,
    ProgressionRequest,
    ProgressionResponse,
    TrainingPlan,
)


class PlanService:
    """Service for plan generation, progression and catalogue queries."""

    def __init__(self, config: Settings = default_settings, catalog: MovementCatalog = DEFAULT_CATALOG):
        self.settings = config
        self.catalog = catalog
        self.selector = CatalogExerciseSelector(catalog)
        self.generator = PlanGenerator(
            composer=StandardWorkoutComposer(selector=self.selector),
            selector=self.selector,
        )

    # ------------------------------------------------------------------
    # Plans
    # ------------------------------------------------------------------

    def generation_options(self) -> PlanGenerationOptions:
        return PlanGenerationOptions(
            avoid_back_to_back=self.settings.AVOID_BACK_TO_BACK,
            enforce_movement_variety=self.settings.ENFORCE_MOVEMENT_VARIETY,
            enforce_equipment_variety=self.settings.ENFORCE_EQUIPMENT_VARIETY,
        )

    def generate(self, request: PlanGenerationRequest) -> TrainingPlan:
        weeks = request.weeks or self.settings.DEFAULT_PLAN_WEEKS
        if weeks > self.settings.MAX_PLAN_WEEKS:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Plans are limited to {self.settings.MAX_PLAN_WEEKS} weeks",
            )
        try:
            return self.generator.generate_plan(
                request.plan_input,
                weeks,
                start_date=request.start_date,
                options=self.generation_options(),
            )
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    def summarize(self, plan: TrainingPlan) -> PlanSummary:
        return summarize_plan(plan)

    def progress(self, request: ProgressionRequest) -> ProgressionResponse:
        try:
            plan, report = progress_plan_week(request.plan, request.week)
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
        if not self.settings.PROGRESSION_LOG_IN_RESPONSE:
            report.log = []
        return ProgressionResponse(plan=plan, report=report)

    # ------------------------------------------------------------------
    # Catalogue
    # ------------------------------------------------------------------

    def list_movements(
        self,
        muscle: Optional[MuscleGroup] = None,
        equipment: Optional[list[EquipmentType]] = None,
        pattern: Optional[MovementPattern] = None,
        is_compound: Optional[bool] = None,
    ) -> list[MovementDefinition]:
        return self.catalog.filter(
            muscle=muscle,
            equipment=equipment or None,
            pattern=pattern,
            is_compound=is_compound,
        )

    def get_movement(self, movement_id: str) -> MovementDefinition:
        try:
            return self.catalog.get_or_raise(movement_id)
        except KeyError:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown movement: '{movement_id}'",
            )

    def guidelines(self) -> dict[MuscleGroup, TrainingGuidelines]:
        return dict(MUSCLE_GUIDELINES)

    def suggest(
        self,
        muscles: list[MuscleGroup],
        equipment: list[EquipmentType],
        priority: Optional[list[MuscleGroup]] = None,
        count: int = 5,
    ) -> list[MovementSuggestion]:
        return self.selector.score_movements(muscles, equipment, priority or (), count)
