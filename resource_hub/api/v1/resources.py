"""Resource library endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from resource_hub.api.deps import Engine
from resource_hub.core.config import settings
from resource_hub.schemas.recommendation import ResourceRead, ScoredResourceRead

router = APIRouter()


@router.get(
    "",
    response_model=list[ResourceRead],
    summary="List resources",
)
async def list_resources(
    engine: Engine,
    resource_type: Optional[str] = Query(None, alias="type", description="Exact type, any case"),
    difficulty: Optional[str] = Query(None, description="beginner, intermediate or advanced"),
    q: Optional[str] = Query(None, description="Keyword in title, description or tags"),
) -> list[ResourceRead]:
    """List catalog resources, optionally filtered.

    Filters combine with AND and keep catalog order.
    """
    items = engine.get_all()

    if resource_type is not None:
        wanted = {item.id for item in engine.by_type(resource_type)}
        items = [item for item in items if item.id in wanted]
    if difficulty is not None:
        wanted = {item.id for item in engine.by_difficulty(difficulty)}
        items = [item for item in items if item.id in wanted]
    if q is not None:
        wanted = {item.id for item in engine.search(q)}
        items = [item for item in items if item.id in wanted]

    return [ResourceRead.model_validate(item.to_dict()) for item in items]


@router.get(
    "/by-tags",
    response_model=list[ScoredResourceRead],
    summary="Rank resources by tag overlap",
)
async def list_resources_by_tags(
    engine: Engine,
    tags: Optional[list[str]] = Query(None, description="Repeat for several tags"),
    limit: Optional[int] = Query(None, ge=1),
) -> list[ScoredResourceRead]:
    """Rank resources by the share of query tags their tags relate to."""
    if limit is None:
        limit = settings.by_tags_default_limit

    ranked = engine.by_tags(tags or [], limit)
    return [ScoredResourceRead.model_validate(item.to_dict()) for item in ranked]


@router.get(
    "/{resource_id}",
    response_model=ResourceRead,
    summary="Get a resource",
)
async def get_resource(resource_id: int, engine: Engine) -> ResourceRead:
    """Get a single resource by id."""
    item = engine.catalog.get_by_id(resource_id)
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Resource not found",
        )
    return ResourceRead.model_validate(item.to_dict())
