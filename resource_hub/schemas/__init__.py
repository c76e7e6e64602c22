"""Pydantic schemas for request/response validation."""

from resource_hub.schemas.recommendation import (
    AssessmentIn,
    QuestionnaireIn,
    RecommendationRequest,
    RecommendationResponse,
    ResourceRead,
    ScoredResourceRead,
)

__all__ = [
    "AssessmentIn",
    "QuestionnaireIn",
    "RecommendationRequest",
    "RecommendationResponse",
    "ResourceRead",
    "ScoredResourceRead",
]
