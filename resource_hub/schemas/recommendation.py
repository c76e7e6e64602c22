"""Pydantic schemas for recommendation and resource endpoints."""

from typing import Optional

from pydantic import BaseModel, Field

from resource_hub.recommendation.models import (
    AgeGroup,
    AssessmentScore,
    QuestionnaireResponse,
    TimeAvailable,
)


class QuestionnaireIn(BaseModel):
    """Questionnaire answers submitted for recommendations."""

    concerns: list[str] = Field(default_factory=list, description="Selected concern themes")
    preferred_formats: list[str] = Field(default_factory=list, description="Preferred content formats")
    age_group: Optional[AgeGroup] = None
    time_available: Optional[TimeAvailable] = Field(
        None, description="Accepted for completeness; not used in scoring"
    )

    def to_domain(self) -> QuestionnaireResponse:
        """Convert to the engine's questionnaire model."""
        return QuestionnaireResponse(
            concerns=list(self.concerns),
            preferred_formats=list(self.preferred_formats),
            age_group=self.age_group.value if self.age_group else None,
            time_available=self.time_available.value if self.time_available else None,
        )


class AssessmentIn(BaseModel):
    """Normalized assessment scores (0-100, higher is more severe)."""

    anxiety: Optional[int] = Field(None, ge=0, le=100)
    depression: Optional[int] = Field(None, ge=0, le=100)
    stress: Optional[int] = Field(None, ge=0, le=100)
    overall: Optional[int] = Field(None, ge=0, le=100)

    def to_domain(self) -> AssessmentScore:
        """Convert to the engine's assessment model."""
        return AssessmentScore(
            anxiety=self.anxiety,
            depression=self.depression,
            stress=self.stress,
            overall=self.overall,
        )


class RecommendationRequest(BaseModel):
    """Request body for recommendations."""

    questionnaire: QuestionnaireIn
    assessment: Optional[AssessmentIn] = None


class ResourceRead(BaseModel):
    """Schema for reading a catalog resource."""

    id: int
    title: str
    type: str
    url: str
    description: str
    tags: list[str]
    difficulty_level: str


class ScoredResourceRead(ResourceRead):
    """Catalog resource with its relevance score."""

    score: float
    matched_tags: list[str]


class RecommendationResponse(BaseModel):
    """Ranked and bucketed recommendations."""

    high_priority: list[ScoredResourceRead]
    recommended: list[ScoredResourceRead]
    additional: list[ScoredResourceRead]
    all_resources: list[ScoredResourceRead]
    summary: str
    severity: Optional[str] = None
