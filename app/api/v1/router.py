"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import catalog, plans

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    plans.router, prefix="/plans", tags=["Plans"]
)
api_router.include_router(
    catalog.router, prefix="/catalog", tags=["Catalogue"]
)
