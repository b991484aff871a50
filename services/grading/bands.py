"""
services/grading/bands.py

- The single grade table for the whole application (A1 ... F9).
- Thresholds are inclusive lower bounds checked from the top; first match wins.
- Total function over all real numbers: anything below 40 (negatives included)
  is F9, anything at or above 80 (values over 100 included) is A1.
"""

from typing import NamedTuple

from services.grading.types import GradeTier


class GradeBand(NamedTuple):
    min_total: float
    grade: GradeTier
    interpretation: str
    is_pass: bool


# (min_total, grade, interpretation, pass) - ordered high to low
GRADE_BANDS = (
    GradeBand(80, "A1", "Excellent", True),
    GradeBand(70, "B2", "Very Good", True),
    GradeBand(65, "B3", "Good", True),
    GradeBand(60, "C4", "Credit", True),
    GradeBand(55, "C5", "Credit", True),
    GradeBand(50, "C6", "Credit", True),
    GradeBand(45, "D7", "Pass", True),
    GradeBand(40, "E8", "Pass", True),
)

FAIL_BAND = GradeBand(float("-inf"), "F9", "Fail", False)


def band_of(total: float) -> GradeBand:
    """Return the full band (grade, interpretation, pass flag) for a total."""
    for band in GRADE_BANDS:
        if total >= band.min_total:
            return band
    return FAIL_BAND


def grade_of(total: float) -> GradeTier:
    return band_of(total).grade
