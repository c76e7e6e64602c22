"""Resource recommendation engine.

Scores every catalog resource against a user's questionnaire answers and
optional assessment, sorts the results and splits them into priority
buckets. The engine holds only a reference to the immutable catalog, so
calls are independent and safe to run concurrently.
"""

import logging
from typing import Optional, Sequence

from resource_hub.catalog.catalog import ResourceCatalog
from resource_hub.catalog.models import ResourceItem
from resource_hub.recommendation.matching import is_related
from resource_hub.recommendation.models import (
    AssessmentScore,
    QuestionnaireResponse,
    RecommendationResult,
    ScoredResource,
)
from resource_hub.recommendation.scoring import matched_tags, score_resource
from resource_hub.recommendation.severity import (
    get_assessment_severity,
    needs_professional_support,
)

logger = logging.getLogger(__name__)

# Bucket thresholds
HIGH_PRIORITY_MIN_EXCLUSIVE = 80
RECOMMENDED_MIN = 50


def sort_by_score(scored: Sequence[ScoredResource]) -> list[ScoredResource]:
    """Sort highest score first; equal scores keep their catalog order."""
    return sorted(scored, key=lambda r: r.score, reverse=True)


def partition(scored: list[ScoredResource]) -> RecommendationResult:
    """Split sorted resources into high priority, recommended and additional."""
    result = RecommendationResult(all_resources=scored)

    for item in scored:
        if item.score > HIGH_PRIORITY_MIN_EXCLUSIVE:
            result.high_priority.append(item)
        elif item.score >= RECOMMENDED_MIN:
            result.recommended.append(item)
        else:
            result.additional.append(item)

    return result


class RecommendationEngine:
    """Stateless recommendation service over a loaded catalog."""

    def __init__(self, catalog: ResourceCatalog) -> None:
        """Initialize engine.

        Args:
            catalog: Loaded resource catalog
        """
        self.catalog = catalog

    def recommend(
        self,
        questionnaire: QuestionnaireResponse,
        assessment: Optional[AssessmentScore] = None,
    ) -> RecommendationResult:
        """Score, rank and bucket every catalog resource.

        Args:
            questionnaire: User's questionnaire answers
            assessment: Optional normalized assessment scores

        Returns:
            RecommendationResult with all resources sorted by score
        """
        scored = [
            ScoredResource(
                resource=resource,
                score=score_resource(resource, questionnaire, assessment),
                matched_tags=tuple(matched_tags(resource, questionnaire, assessment)),
            )
            for resource in self.catalog
        ]

        result = partition(sort_by_score(scored))

        logger.debug(
            f"Recommended {len(result.all_resources)} resources "
            f"(high={len(result.high_priority)} recommended={len(result.recommended)} "
            f"additional={len(result.additional)})"
        )
        return result

    def by_tags(self, tags: Sequence[str], limit: Optional[int] = None) -> list[ScoredResource]:
        """Rank resources by how many of their tags relate to the query tags.

        Score is the count of matching resource tags over the number of
        query tags, times 100. Several tags relating to one query tag can
        push a score past 100, so richer matches rank first. Resources with
        no match are dropped.

        Args:
            tags: Query tags
            limit: Maximum number of results

        Returns:
            Matching resources, highest score first
        """
        if not tags:
            return []

        scored = []
        for resource in self.catalog:
            hits = tuple(
                tag for tag in resource.tags
                if any(is_related(tag, query) for query in tags)
            )
            if not hits:
                continue
            score = len(hits) / len(tags) * 100
            scored.append(ScoredResource(resource=resource, score=score, matched_tags=hits))

        ranked = sort_by_score(scored)
        return ranked[:limit] if limit is not None else ranked

    def by_type(self, resource_type: str) -> list[ResourceItem]:
        """Resources of the given type."""
        return self.catalog.get_by_type(resource_type)

    def by_difficulty(self, level: str) -> list[ResourceItem]:
        """Resources at the given difficulty level."""
        return self.catalog.get_by_difficulty(level)

    def search(self, keyword: str) -> list[ResourceItem]:
        """Keyword search over titles, descriptions and tags."""
        return self.catalog.search(keyword)

    def get_all(self) -> list[ResourceItem]:
        """Every catalog resource."""
        return self.catalog.get_all()


def generate_recommendation_summary(
    result: RecommendationResult,
    questionnaire: QuestionnaireResponse,
    assessment: Optional[AssessmentScore] = None,
) -> str:
    """Build a short user-facing summary of a recommendation result."""
    concerns_text = ", ".join(questionnaire.concerns)
    summary = (
        f"Based on your concerns ({concerns_text}), we found "
        f"{len(result.all_resources)} resources for you. "
    )

    if result.high_priority:
        summary += (
            f"{len(result.high_priority)} are highly recommended and match "
            f"your needs closely. "
        )

    if assessment is not None and assessment.overall is not None:
        severity = get_assessment_severity(assessment.overall)
        summary += f"Your assessment indicates {severity.value} symptoms. "

        if needs_professional_support(severity):
            summary += (
                "We recommend starting with professional support resources "
                "and beginner-level content. "
            )

    return summary
