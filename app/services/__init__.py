"""Business logic services."""

from app.services.plan_service import PlanService

__all__ = [
    "PlanService",
]
