"""Recommendation endpoints."""

from fastapi import APIRouter, status

from resource_hub.api.deps import Engine
from resource_hub.recommendation.engine import generate_recommendation_summary
from resource_hub.recommendation.models import ScoredResource
from resource_hub.recommendation.severity import get_assessment_severity
from resource_hub.schemas.recommendation import (
    RecommendationRequest,
    RecommendationResponse,
    ScoredResourceRead,
)

router = APIRouter()


def _to_read(items: list[ScoredResource]) -> list[ScoredResourceRead]:
    return [ScoredResourceRead.model_validate(item.to_dict()) for item in items]


@router.post(
    "",
    response_model=RecommendationResponse,
    status_code=status.HTTP_200_OK,
    summary="Get personalized recommendations",
)
async def get_recommendations(
    body: RecommendationRequest,
    engine: Engine,
) -> RecommendationResponse:
    """Rank the resource catalog for a questionnaire and optional assessment.

    Resources are split into high priority (score > 80), recommended
    (50-80) and additional (< 50) buckets.
    """
    questionnaire = body.questionnaire.to_domain()
    assessment = body.assessment.to_domain() if body.assessment else None

    result = engine.recommend(questionnaire, assessment)

    severity = None
    if assessment is not None and assessment.overall is not None:
        severity = get_assessment_severity(assessment.overall).value

    return RecommendationResponse(
        high_priority=_to_read(result.high_priority),
        recommended=_to_read(result.recommended),
        additional=_to_read(result.additional),
        all_resources=_to_read(result.all_resources),
        summary=generate_recommendation_summary(result, questionnaire, assessment),
        severity=severity,
    )
