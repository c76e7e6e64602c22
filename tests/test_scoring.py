"""Unit tests for resource relevance scoring.

Tests the pure scoring logic from resource_hub.recommendation.scoring.
"""

import pytest

from resource_hub.catalog.models import ResourceItem
from resource_hub.recommendation.models import AssessmentScore, QuestionnaireResponse
from resource_hub.recommendation.scoring import (
    WEIGHTS,
    age_relevance,
    assessment_alignment,
    concern_match,
    difficulty_appropriateness,
    format_match,
    matched_tags,
    round_half_up,
    score_breakdown,
    score_resource,
)


def make_resource(
    tags: list[str],
    resource_type: str = "video",
    difficulty_level: str = "beginner",
) -> ResourceItem:
    """Build a resource with only the scoring-relevant fields varied."""
    return ResourceItem(
        id=1,
        title="Test resource",
        type=resource_type,
        url="https://example.org/test",
        description="A resource used in tests.",
        tags=tuple(tags),
        difficulty_level=difficulty_level,
    )


class TestConcernMatch:
    """Tests for concern/tag matching."""

    def test_empty_concerns_is_neutral(self) -> None:
        """No concerns gives 0.5 even when nothing could match."""
        resource = make_resource(["journaling"])

        assert concern_match(resource, []) == 0.5

    def test_all_exact_matches(self) -> None:
        """Every concern found as a tag gives 1.0."""
        resource = make_resource(["anxiety", "stress"])

        assert concern_match(resource, ["anxiety", "stress"]) == 1.0

    def test_partial_match_counts_half(self) -> None:
        """A substring match counts as half a match."""
        resource = make_resource(["stress management"])

        assert concern_match(resource, ["stress"]) == 0.5

    def test_partial_match_either_direction(self) -> None:
        """A tag contained in the concern is also a partial match."""
        resource = make_resource(["pressure"])

        assert concern_match(resource, ["academic pressure"]) == 0.5

    def test_mixed_exact_partial_and_miss(self) -> None:
        """Exact, partial and unmatched concerns combine."""
        resource = make_resource(["anxiety", "stress management"])

        result = concern_match(resource, ["anxiety", "stress", "sleep"])

        assert result == pytest.approx(1 / 3 + 0.5 / 3)

    def test_exact_match_not_also_partial(self) -> None:
        """A concern matched exactly is not counted again as partial."""
        resource = make_resource(["anxiety", "anxiety relief"])

        assert concern_match(resource, ["anxiety", "grief"]) == 0.5

    def test_case_insensitive(self) -> None:
        """Matching ignores case."""
        resource = make_resource(["Anxiety"])

        assert concern_match(resource, ["ANXIETY"]) == 1.0

    def test_no_match(self) -> None:
        """Unrelated concerns give 0."""
        resource = make_resource(["sleep"])

        assert concern_match(resource, ["grief"]) == 0.0


class TestFormatMatch:
    """Tests for format preference matching."""

    def test_exact_type(self) -> None:
        """Type equal to a preferred format gives 1.0."""
        assert format_match(make_resource([], "Video"), ["video", "blog"]) == 1.0

    def test_plural_format_is_partial(self) -> None:
        """Plural format relates to singular type by substring."""
        assert format_match(make_resource([], "video"), ["videos"]) == 0.7

    def test_unrelated_format(self) -> None:
        """Unrelated format gives 0.3."""
        assert format_match(make_resource([], "video"), ["audio"]) == 0.3

    def test_no_preference_is_neutral(self) -> None:
        """No preferred formats gives 0.5."""
        assert format_match(make_resource([], "video"), []) == 0.5


class TestAssessmentAlignment:
    """Tests for assessment score alignment."""

    def test_sole_relevant_dimension_maxed(self) -> None:
        """Only anxiety relates to the tags, and it is 100."""
        resource = make_resource(["anxiety", "breathing"])
        assessment = AssessmentScore(anxiety=100, depression=0, stress=0, overall=100)

        assert assessment_alignment(resource, assessment) == 1.0

    def test_no_relevant_dimension_is_neutral(self) -> None:
        """Tags unrelated to every dimension give 0.5."""
        resource = make_resource(["journaling"])
        assessment = AssessmentScore(anxiety=80, depression=80, stress=80)

        assert assessment_alignment(resource, assessment) == 0.5

    def test_unmeasured_dimensions_skipped(self) -> None:
        """Missing fields are not treated as zero."""
        resource = make_resource(["stress"])

        assert assessment_alignment(resource, AssessmentScore(stress=40)) == pytest.approx(0.4)

    def test_average_of_relevant_dimensions(self) -> None:
        """A stress tag relates to both anxiety and stress keyword sets."""
        resource = make_resource(["stress"])
        assessment = AssessmentScore(anxiety=80, stress=40)

        assert assessment_alignment(resource, assessment) == pytest.approx(0.6)

    def test_zero_is_a_measured_value(self) -> None:
        """A measured zero contributes zero rather than the neutral default."""
        resource = make_resource(["anxiety"])

        assert assessment_alignment(resource, AssessmentScore(anxiety=0)) == 0.0

    def test_overall_is_ignored(self) -> None:
        """Overall alone never counts toward alignment."""
        resource = make_resource(["anxiety"])

        assert assessment_alignment(resource, AssessmentScore(overall=90)) == 0.5


class TestDifficultyAppropriateness:
    """Tests for difficulty level scoring."""

    def test_no_assessment_prefers_beginner(self) -> None:
        """Without an assessment beginner is 1.0 and others 0.5."""
        assert difficulty_appropriateness(make_resource([], difficulty_level="beginner")) == 1.0
        assert difficulty_appropriateness(make_resource([], difficulty_level="advanced")) == 0.5
        assert difficulty_appropriateness(make_resource([], difficulty_level="intermediate")) == 0.5

    def test_assessment_without_overall(self) -> None:
        """An assessment lacking overall uses the same defaults."""
        assessment = AssessmentScore(anxiety=90)

        assert difficulty_appropriateness(make_resource([], difficulty_level="advanced"), assessment) == 0.5

    @pytest.mark.parametrize(
        "overall,level,expected",
        [
            (0, "advanced", 0.3),
            (33, "beginner", 1.0),
            (33, "intermediate", 0.5),
            (33, "advanced", 0.3),
            (34, "intermediate", 1.0),
            (34, "beginner", 0.8),
            (66, "advanced", 0.5),
            (67, "intermediate", 1.0),
            (67, "advanced", 0.9),
            (100, "beginner", 0.7),
        ],
    )
    def test_overall_buckets(self, overall: int, level: str, expected: float) -> None:
        """Bucket boundaries at 33/34 and 66/67."""
        resource = make_resource([], difficulty_level=level)

        assert difficulty_appropriateness(resource, AssessmentScore(overall=overall)) == expected

    def test_level_case_insensitive(self) -> None:
        """Difficulty level comparison ignores case."""
        resource = make_resource([], difficulty_level="Beginner")

        assert difficulty_appropriateness(resource) == 1.0


class TestAgeRelevance:
    """Tests for age group relevance."""

    def test_matching_tag(self) -> None:
        """College tag for a college user gives 1.0."""
        assert age_relevance(make_resource(["college"]), "college") == 1.0

    def test_keyword_inside_tag(self) -> None:
        """Keyword contained in a longer tag matches."""
        assert age_relevance(make_resource(["work-life balance"]), "adult") == 1.0

    def test_no_matching_tag(self) -> None:
        """Unrelated tags give 0.5."""
        assert age_relevance(make_resource(["sleep"]), "teens") == 0.5

    def test_unknown_group(self) -> None:
        """Unknown age groups have no keywords."""
        assert age_relevance(make_resource(["college"]), "seniors") == 0.5


class TestRounding:
    """Tests for half-up rounding."""

    def test_half_rounds_up(self) -> None:
        """Halves round away from zero for positive values."""
        assert round_half_up(62.5) == 63
        assert round_half_up(2.5) == 3

    def test_below_half_rounds_down(self) -> None:
        """Values below .5 round down."""
        assert round_half_up(2.4) == 2


class TestScoreResource:
    """Tests for the combined resource score."""

    def test_max_without_age_group_is_95(self) -> None:
        """The age weight is dropped when no age group is given."""
        resource = make_resource(["anxiety"], "video", "beginner")
        questionnaire = QuestionnaireResponse(concerns=["anxiety"], preferred_formats=["video"])

        assert score_resource(resource, questionnaire) == 95

    def test_perfect_match_with_age_group(self) -> None:
        """Every sub-score at 1.0 gives 100."""
        resource = make_resource(["anxiety", "college"], "video", "beginner")
        questionnaire = QuestionnaireResponse(
            concerns=["anxiety"],
            preferred_formats=["video"],
            age_group="college",
        )

        assert score_resource(resource, questionnaire) == 100

    def test_empty_profile_uses_neutral_defaults(self) -> None:
        """20 + 10 + 12.5 + 5 = 47.5, rounded up."""
        resource = make_resource(["journaling"], "tool", "advanced")

        assert score_resource(resource, QuestionnaireResponse()) == 48

    def test_half_point_rounds_up(self) -> None:
        """20 + 20 + 12.5 + 10 = 62.5 rounds to 63."""
        resource = make_resource(["journaling"], "video", "beginner")
        questionnaire = QuestionnaireResponse(preferred_formats=["video"])

        assert score_resource(resource, questionnaire) == 63

    def test_concern_drives_assessment_weight_without_assessment(self) -> None:
        """The concern fraction fills the assessment slot."""
        resource = make_resource(["sleep"], "video", "beginner")
        questionnaire = QuestionnaireResponse(concerns=["grief"], preferred_formats=["video"])

        breakdown = score_breakdown(resource, questionnaire)

        assert breakdown.concern == 0.0
        assert breakdown.assessment == 0.0
        assert breakdown.age is None
        assert breakdown.total == 30

    def test_time_available_does_not_change_score(self) -> None:
        """time_available is accepted but not weighted."""
        resource = make_resource(["anxiety"], "video", "beginner")
        base = QuestionnaireResponse(concerns=["anxiety"], preferred_formats=["video"])
        timed = QuestionnaireResponse(
            concerns=["anxiety"], preferred_formats=["video"], time_available="short"
        )

        assert score_resource(resource, base) == score_resource(resource, timed)

    def test_anxious_college_student_is_high_priority(self) -> None:
        """Concerns fully matched, video, intermediate at overall 57, college tag."""
        resource = make_resource(["anxiety", "stress", "college", "coping"], "video", "intermediate")
        questionnaire = QuestionnaireResponse(
            concerns=["anxiety", "stress"],
            preferred_formats=["video"],
            age_group="college",
        )
        assessment = AssessmentScore(anxiety=75, depression=30, stress=65, overall=57)

        breakdown = score_breakdown(resource, questionnaire, assessment)

        assert breakdown.concern == 1.0
        assert breakdown.format == 1.0
        assert breakdown.assessment == pytest.approx(0.70)
        assert breakdown.difficulty == 1.0
        assert breakdown.age == 1.0
        assert breakdown.total > 80

    def test_score_within_bounds(self) -> None:
        """Scores stay within 0-100 for extreme inputs."""
        resource = make_resource(["anxiety", "stress", "depression", "college"], "video", "intermediate")
        questionnaire = QuestionnaireResponse(
            concerns=["anxiety", "stress", "depression"],
            preferred_formats=["video"],
            age_group="college",
        )
        assessment = AssessmentScore(anxiety=100, depression=100, stress=100, overall=100)

        assert 0 <= score_resource(resource, questionnaire, assessment) <= 100
        assert 0 <= score_resource(make_resource([], "x", "x"), QuestionnaireResponse(concerns=["a"])) <= 100

    def test_weights_sum_to_100(self) -> None:
        """Weights add up to the maximum score."""
        assert sum(WEIGHTS.values()) == 100


class TestMatchedTags:
    """Tests for matched tag reporting."""

    def test_concern_matches_keep_original_case(self) -> None:
        """Matched tags are returned as written in the catalog."""
        resource = make_resource(["Workplace", "burnout"])
        questionnaire = QuestionnaireResponse(concerns=["workplace"])

        assert matched_tags(resource, questionnaire) == ["Workplace"]

    def test_assessment_terms_added_when_assessment_given(self) -> None:
        """Tags containing assessment terms are included with an assessment."""
        resource = make_resource(["depression", "mental health", "sleep"])
        questionnaire = QuestionnaireResponse(concerns=["sleep"])

        without = matched_tags(resource, questionnaire)
        with_assessment = matched_tags(resource, questionnaire, AssessmentScore())

        assert without == ["sleep"]
        assert with_assessment == ["sleep", "depression", "mental health"]

    def test_no_duplicates(self) -> None:
        """A tag matched by several rules appears once."""
        resource = make_resource(["anxiety"])
        questionnaire = QuestionnaireResponse(concerns=["anxiety", "anx"])

        assert matched_tags(resource, questionnaire, AssessmentScore(anxiety=50)) == ["anxiety"]
