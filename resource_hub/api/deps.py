"""FastAPI dependency injection utilities."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from resource_hub.recommendation.engine import RecommendationEngine


def get_engine(request: Request) -> RecommendationEngine:
    """Get the recommendation engine created at startup.

    Raises:
        HTTPException: If the catalog has not been loaded
    """
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Resource catalog not loaded",
        )
    return engine


Engine = Annotated[RecommendationEngine, Depends(get_engine)]
