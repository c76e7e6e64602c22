"""Severity banding for normalized 0-100 assessment scores.

Severity bands:
- 0-24: Minimal
- 25-49: Mild
- 50-74: Moderate
- 75-100: Severe
"""

from enum import Enum


class Severity(str, Enum):
    """Severity band of an assessment score."""

    MINIMAL = "minimal"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


# Exclusive upper bounds for each band
SEVERITY_BANDS = [
    (25, Severity.MINIMAL),
    (50, Severity.MILD),
    (75, Severity.MODERATE),
]


def get_assessment_severity(score: float) -> Severity:
    """Determine severity band from a normalized score."""
    for upper, band in SEVERITY_BANDS:
        if score < upper:
            return band
    return Severity.SEVERE


def needs_professional_support(severity: Severity) -> bool:
    """Moderate and severe bands should lead with professional support."""
    return severity in (Severity.MODERATE, Severity.SEVERE)
