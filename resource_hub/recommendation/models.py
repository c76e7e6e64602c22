"""Recommendation input and output models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional

from resource_hub.catalog.models import ResourceItem


class AgeGroup(str, Enum):
    """Age group selected in the questionnaire."""

    CHILDREN = "children"
    TEENS = "teens"
    COLLEGE = "college"
    ADULT = "adult"


class TimeAvailable(str, Enum):
    """Time the user has available. Accepted but not used in scoring."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


@dataclass
class QuestionnaireResponse:
    """Answers from the resource questionnaire."""

    concerns: list[str] = field(default_factory=list)
    preferred_formats: list[str] = field(default_factory=list)
    age_group: Optional[str] = None
    time_available: Optional[str] = None


# Symptom dimensions used for assessment alignment ("overall" is excluded)
ASSESSMENT_DIMENSIONS = ("anxiety", "depression", "stress")


@dataclass
class AssessmentScore:
    """Normalized 0-100 symptom severity scores.

    A field left as None was not measured; it is never treated as zero.
    """

    anxiety: Optional[int] = None
    depression: Optional[int] = None
    stress: Optional[int] = None
    overall: Optional[int] = None

    def measured_dimensions(self) -> Iterator[tuple[str, int]]:
        """Yield (dimension, value) for each measured symptom dimension."""
        for name in ASSESSMENT_DIMENSIONS:
            value = getattr(self, name)
            if value is not None:
                yield name, value


@dataclass(frozen=True)
class ScoreBreakdown:
    """Sub-score fractions (0-1) behind a resource score."""

    concern: float
    format: float
    assessment: float
    difficulty: float
    age: Optional[float]
    total: int


@dataclass(frozen=True)
class ScoredResource:
    """A catalog resource with its computed score and matched tags."""

    resource: ResourceItem
    score: float
    matched_tags: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Flatten into the resource record plus score fields."""
        data = self.resource.to_dict()
        data["score"] = self.score
        data["matched_tags"] = list(self.matched_tags)
        return data


@dataclass
class RecommendationResult:
    """Scored resources sorted and bucketed by priority.

    Attributes:
        high_priority: score > 80
        recommended: 50 <= score <= 80
        additional: score < 50
        all_resources: every scored resource, highest score first
    """

    high_priority: list[ScoredResource] = field(default_factory=list)
    recommended: list[ScoredResource] = field(default_factory=list)
    additional: list[ScoredResource] = field(default_factory=list)
    all_resources: list[ScoredResource] = field(default_factory=list)
