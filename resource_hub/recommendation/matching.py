"""Tag matching helpers.

Matching is plain case-insensitive substring containment in either
direction: "stress" relates to "stress management" and "art" relates to
"art therapy". It is intentionally not token or fuzzy matching, since
changing it changes which resources surface.
"""

from typing import Iterable

# Tags that indicate relevance to each assessment dimension
ASSESSMENT_TAG_KEYWORDS: dict[str, tuple[str, ...]] = {
    "anxiety": ("anxiety", "stress", "worry", "panic", "calm", "relaxation", "breathing"),
    "depression": ("depression", "mood", "sadness", "motivation", "happiness"),
    "stress": ("stress", "burnout", "overwhelm", "pressure", "coping", "relaxation"),
}

# Tags that indicate relevance to each age group
AGE_GROUP_TAG_KEYWORDS: dict[str, tuple[str, ...]] = {
    "children": ("children", "child", "kids", "young"),
    "teens": ("teens", "teenager", "adolescent", "youth"),
    "college": ("college", "university", "student", "campus"),
    "adult": ("adult", "professional", "workplace", "work-life"),
}

# Tag fragments reported as matched whenever an assessment is supplied
ASSESSMENT_MATCH_TERMS = ("anxiety", "depression", "stress", "mental health")


def is_related(a: str, b: str) -> bool:
    """Check if two labels contain one another, ignoring case."""
    a_lower = a.lower()
    b_lower = b.lower()
    return a_lower in b_lower or b_lower in a_lower


def any_related(tags: Iterable[str], keywords: Iterable[str]) -> bool:
    """Check if any tag relates to any keyword."""
    keywords = list(keywords)
    return any(is_related(tag, keyword) for tag in tags for keyword in keywords)
