"""Resource relevance scoring.

A resource score (0-100) is a weighted sum of five sub-scores, each a
fraction in [0, 1]:

- Concern match (40): resource tags vs. user concerns
- Format match (20): resource type vs. preferred formats
- Assessment alignment (25): resource tags vs. measured symptom dimensions;
  the concern match fraction stands in when no assessment is supplied
- Difficulty (10): difficulty level vs. overall severity
- Age group (5): only added when an age group is given, so the maximum
  without one is 95

All scoring is deterministic and has no side effects.
"""

import math
from typing import Optional, Sequence

from resource_hub.catalog.models import DifficultyLevel, ResourceItem
from resource_hub.recommendation.matching import (
    AGE_GROUP_TAG_KEYWORDS,
    ASSESSMENT_MATCH_TERMS,
    ASSESSMENT_TAG_KEYWORDS,
    any_related,
    is_related,
)
from resource_hub.recommendation.models import (
    AssessmentScore,
    QuestionnaireResponse,
    ScoreBreakdown,
)

WEIGHTS = {
    "concern": 40,
    "format": 20,
    "assessment": 25,
    "difficulty": 10,
    "age": 5,
}

MAX_SCORE = 100

# Neutral fraction used when there is nothing to compare against
NEUTRAL = 0.5

# Difficulty fractions by overall severity bucket: (upper bound, {level: fraction})
DIFFICULTY_BUCKETS = [
    (33, {"beginner": 1.0, "intermediate": 0.5, "advanced": 0.3}),
    (66, {"intermediate": 1.0, "beginner": 0.8, "advanced": 0.5}),
    (math.inf, {"intermediate": 1.0, "advanced": 0.9, "beginner": 0.7}),
]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return int(math.floor(value + 0.5))


def concern_match(resource: ResourceItem, concerns: Sequence[str]) -> float:
    """Fraction of concerns matched by resource tags.

    Exact tag matches count 1, substring matches count 0.5. A concern
    counted as exact is never also counted as partial.
    """
    if not concerns:
        return NEUTRAL

    tags = [tag.lower() for tag in resource.tags]
    exact = 0
    partial = 0

    for concern in concerns:
        concern_lower = concern.lower()
        if concern_lower in tags:
            exact += 1
        elif any(is_related(tag, concern_lower) for tag in tags):
            partial += 1

    total = len(concerns)
    return min(1.0, exact / total + 0.5 * partial / total)


def format_match(resource: ResourceItem, preferred_formats: Sequence[str]) -> float:
    """How well the resource type fits the preferred formats.

    Plural forms such as "videos" relate to "video" via substring matching.
    """
    if not preferred_formats:
        return NEUTRAL

    formats = [fmt.lower() for fmt in preferred_formats]
    resource_type = resource.type.lower()

    if resource_type in formats:
        return 1.0

    if any(is_related(fmt, resource_type) for fmt in formats):
        return 0.7

    return 0.3


def assessment_alignment(resource: ResourceItem, assessment: AssessmentScore) -> float:
    """Average severity of the measured dimensions the resource addresses.

    Higher severity on a relevant dimension raises the fraction. Returns
    the neutral fraction when the resource addresses none of them.
    """
    total = 0.0
    count = 0

    for dimension, value in assessment.measured_dimensions():
        if any_related(resource.tags, ASSESSMENT_TAG_KEYWORDS[dimension]):
            total += value / 100
            count += 1

    return total / count if count > 0 else NEUTRAL


def difficulty_appropriateness(
    resource: ResourceItem,
    assessment: Optional[AssessmentScore] = None,
) -> float:
    """Fit of the resource difficulty to overall severity.

    Without an overall score, beginner material is preferred.
    """
    level = resource.difficulty_level.lower()

    if assessment is None or assessment.overall is None:
        return 1.0 if level == DifficultyLevel.BEGINNER.value else 0.5

    fractions = next(
        bucket for upper, bucket in DIFFICULTY_BUCKETS if assessment.overall <= upper
    )
    return fractions.get(level, _fallback_fraction(fractions))


def _fallback_fraction(fractions: dict[str, float]) -> float:
    """Fraction for a level outside the known three.

    Each bucket assigns its last-listed fraction to "anything else".
    """
    return list(fractions.values())[-1]


def age_relevance(resource: ResourceItem, age_group: str) -> float:
    """1.0 if any tag relates to the age group's keywords, else 0.5."""
    keywords = AGE_GROUP_TAG_KEYWORDS.get(age_group.lower(), ())
    return 1.0 if any_related(resource.tags, keywords) else NEUTRAL


def score_breakdown(
    resource: ResourceItem,
    questionnaire: QuestionnaireResponse,
    assessment: Optional[AssessmentScore] = None,
) -> ScoreBreakdown:
    """Compute every sub-score and the final score for a resource."""
    concern = concern_match(resource, questionnaire.concerns)
    fmt = format_match(resource, questionnaire.preferred_formats)

    if assessment is not None:
        alignment = assessment_alignment(resource, assessment)
    else:
        # No assessment: concerns drive this weight too
        alignment = concern

    difficulty = difficulty_appropriateness(resource, assessment)

    age = age_relevance(resource, questionnaire.age_group) if questionnaire.age_group else None

    weighted = (
        concern * WEIGHTS["concern"]
        + fmt * WEIGHTS["format"]
        + alignment * WEIGHTS["assessment"]
        + difficulty * WEIGHTS["difficulty"]
    )
    if age is not None:
        weighted += age * WEIGHTS["age"]

    total = max(0, min(MAX_SCORE, round_half_up(weighted)))

    return ScoreBreakdown(
        concern=concern,
        format=fmt,
        assessment=alignment,
        difficulty=difficulty,
        age=age,
        total=total,
    )


def score_resource(
    resource: ResourceItem,
    questionnaire: QuestionnaireResponse,
    assessment: Optional[AssessmentScore] = None,
) -> int:
    """Relevance score (0-100) of a resource for a user profile."""
    return score_breakdown(resource, questionnaire, assessment).total


def matched_tags(
    resource: ResourceItem,
    questionnaire: QuestionnaireResponse,
    assessment: Optional[AssessmentScore] = None,
) -> list[str]:
    """Resource tags that relate to the user's concerns or assessment.

    Returned in first-seen order without duplicates, original casing kept.
    """
    matched: dict[str, None] = {}

    for concern in questionnaire.concerns:
        for tag in resource.tags:
            if is_related(tag, concern):
                matched[tag] = None

    if assessment is not None:
        for tag in resource.tags:
            tag_lower = tag.lower()
            if any(term in tag_lower for term in ASSESSMENT_MATCH_TERMS):
                matched[tag] = None

    return list(matched)
