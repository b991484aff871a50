"""
services/grading/attendance.py

- Attendance percentage for one student/term: round(present / total_days x 100).
- total_days must be positive; zero or negative raises InvalidArgument
  instead of producing NaN.
"""

from services.grading.errors import InvalidArgument
from services.grading.normalizer import round_half_up


def percentage_of(present: float, total_days: float) -> int:
    if total_days <= 0:
        raise InvalidArgument(f"total_days must be greater than 0 (got {total_days})")
    return round_half_up((present / total_days) * 100)


def average_percentage(percentages) -> int:
    """Rounded mean of stored percentages; 0 for an empty list (dashboard figure)."""
    values = list(percentages)
    if not values:
        return 0
    return round_half_up(sum(values) / len(values))
