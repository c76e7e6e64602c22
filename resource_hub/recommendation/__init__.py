"""Recommendation scoring and ranking."""

from resource_hub.recommendation.engine import (
    RecommendationEngine,
    generate_recommendation_summary,
)
from resource_hub.recommendation.models import (
    AgeGroup,
    AssessmentScore,
    QuestionnaireResponse,
    RecommendationResult,
    ScoredResource,
    TimeAvailable,
)
from resource_hub.recommendation.scoring import score_breakdown, score_resource
from resource_hub.recommendation.severity import Severity, get_assessment_severity

__all__ = [
    "RecommendationEngine",
    "generate_recommendation_summary",
    "AgeGroup",
    "AssessmentScore",
    "QuestionnaireResponse",
    "RecommendationResult",
    "ScoredResource",
    "TimeAvailable",
    "score_breakdown",
    "score_resource",
    "Severity",
    "get_assessment_severity",
]
