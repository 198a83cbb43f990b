"""
Movement catalogue and training guideline endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_plan_service
from app.schemas.movement import (
    EquipmentType,
    MovementDefinition,
    MovementPattern,
    MovementSuggestion,
)
from app.schemas.muscle import MuscleGroup, TrainingGuidelines
from app.services.plan_service import PlanService

router = APIRouter()


@router.get(
    "/movements",
    summary="List catalogue movements, optionally filtered.",
    response_model=list[MovementDefinition],
)
def list_movements(
    muscle: Optional[MuscleGroup] = Query(None, description="Primary muscle trained"),
    equipment: Optional[list[EquipmentType]] = Query(None, description="Allowed equipment"),
    pattern: Optional[MovementPattern] = Query(None, description="Movement pattern"),
    compound: Optional[bool] = Query(None, description="Compound (true) or isolation (false)"),
    service: PlanService = Depends(get_plan_service),
):
    return service.list_movements(muscle, equipment, pattern, compound)


@router.get(
    "/movements/{movement_id}",
    summary="Get a single movement by id.",
    response_model=MovementDefinition,
)
def get_movement(
    movement_id: str,
    service: PlanService = Depends(get_plan_service),
):
    return service.get_movement(movement_id)


@router.get(
    "/guidelines",
    summary="Weekly set guidelines per muscle group.",
    response_model=dict[MuscleGroup, TrainingGuidelines],
)
def get_guidelines(service: PlanService = Depends(get_plan_service)):
    return service.guidelines()


@router.get(
    "/suggestions",
    summary="Rank movements against a set of target muscles.",
    response_model=list[MovementSuggestion],
)
def suggest_movements(
    muscles: list[MuscleGroup] = Query(..., description="Target muscles"),
    equipment: list[EquipmentType] = Query(..., description="Available equipment"),
    priority: Optional[list[MuscleGroup]] = Query(None, description="Prioritized muscles"),
    count: int = Query(5, ge=1, le=50),
    service: PlanService = Depends(get_plan_service),
):
    return service.suggest(muscles, equipment, priority, count)
