"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from resource_hub import __version__
from resource_hub.api.v1.router import api_router
from resource_hub.catalog.catalog import ResourceCatalog
from resource_hub.core.config import settings
from resource_hub.core.logging import setup_logging
from resource_hub.recommendation.engine import RecommendationEngine

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Starting Resource Hub API (env={settings.env})")

    # Catalog errors abort startup
    catalog = ResourceCatalog.from_file(settings.resolved_catalog_path)
    app.state.engine = RecommendationEngine(catalog)

    yield

    logger.info("Shutting down Resource Hub API")


app = FastAPI(
    title="Resource Hub API",
    description="Personalized mental health support resource recommendations",
    version=__version__,
    docs_url="/docs" if settings.is_dev else None,
    redoc_url="/redoc" if settings.is_dev else None,
    openapi_url="/openapi.json" if settings.is_dev else None,
    lifespan=lifespan,
)

if settings.is_dev:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions."""
    logger.exception(f"Unhandled exception: {exc}")

    # Don't expose internal errors in production
    if settings.is_prod:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


app.include_router(api_router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def root() -> dict:
    """Service information."""
    return {
        "service": "Resource Hub API",
        "version": __version__,
        "docs": "/docs" if settings.is_dev else "Disabled in production",
    }
