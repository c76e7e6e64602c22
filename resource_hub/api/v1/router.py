"""API v1 router aggregating all endpoints."""

from fastapi import APIRouter

from resource_hub.api.v1 import health, recommendations, resources

api_router = APIRouter()

# Health check
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"],
)

# Resource library
api_router.include_router(
    resources.router,
    prefix="/resources",
    tags=["resources"],
)

# Recommendations
api_router.include_router(
    recommendations.router,
    prefix="/recommendations",
    tags=["recommendations"],
)
