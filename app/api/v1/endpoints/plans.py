"""
Plan generation, summary and feedback progression endpoints.
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_plan_service
from app.schemas.plan import (
    PlanGenerationRequest,
    PlanSummary,
    ProgressionRequest,
    ProgressionResponse,
    TrainingPlan,
)
from app.services.plan_service import PlanService

router = APIRouter()


@router.post(
    "/generate",
    summary="Generate a multi-week training plan.",
    response_model=TrainingPlan,
    status_code=status.HTTP_201_CREATED,
)
def generate_plan(
    request: PlanGenerationRequest,
    service: PlanService = Depends(get_plan_service),
):
    return service.generate(request)


@router.post(
    "/summary",
    summary="Summarize a plan: dates, workout count, sets per muscle and week.",
    response_model=PlanSummary,
)
def summarize_plan(
    plan: TrainingPlan,
    service: PlanService = Depends(get_plan_service),
):
    return service.summarize(plan)


@router.post(
    "/progression",
    summary="Apply a completed week's feedback to the following week.",
    response_model=ProgressionResponse,
)
def progress_plan(
    request: ProgressionRequest,
    service: PlanService = Depends(get_plan_service),
):
    """Returns the updated plan together with the adjustments that were made."""
    return service.progress(request)
