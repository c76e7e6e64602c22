"""Health check endpoints."""

from fastapi import APIRouter, status
from pydantic import BaseModel

from resource_hub.api.deps import Engine

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


class ReadinessResponse(HealthResponse):
    """Readiness response with catalog details."""

    resources: int
    catalog_hash: str


@router.get(
    "",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Returns service health status",
)
async def health_check() -> HealthResponse:
    """Check if the service is healthy."""
    return HealthResponse(status="ok")


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    status_code=status.HTTP_200_OK,
    summary="Readiness check",
    description="Returns readiness once the resource catalog is loaded",
)
async def readiness_check(engine: Engine) -> ReadinessResponse:
    """Check if the service is ready to accept requests.

    Returns:
        Readiness status with catalog size and content hash
    """
    return ReadinessResponse(
        status="ok",
        resources=len(engine.catalog),
        catalog_hash=engine.catalog.content_hash,
    )
