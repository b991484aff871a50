"""
services/grading/normalizer.py

- Converts raw class/exam scores (each 0-100) into weighted contributions.
- Each component is rounded half-up on its own BEFORE summing:
  62 x 40 / 100 = 24.8 -> 25, so normalize(62, 0).total == 25.
- Out-of-range raw scores are not rejected here; range checks happen at entry.
"""

import math

from services.grading.bands import grade_of
from services.grading.types import ScoreBreakdown, ScoreEntry

CLASS_SCORE_WEIGHT = 40
EXAM_SCORE_WEIGHT = 60


def round_half_up(value: float) -> int:
    """Round .5 upwards (2.5 -> 3, -2.5 -> -2); Python's round() is banker's rounding."""
    return int(math.floor(value + 0.5))


def convert(raw: float, weight: float) -> int:
    return round_half_up((raw * weight) / 100)


def normalize(
    class_score_raw: float,
    exam_score_raw: float,
    class_weight: float = CLASS_SCORE_WEIGHT,
    exam_weight: float = EXAM_SCORE_WEIGHT,
) -> ScoreBreakdown:
    converted_class = convert(class_score_raw, class_weight)
    converted_exam = convert(exam_score_raw, exam_weight)
    total = converted_class + converted_exam
    return ScoreBreakdown(
        converted_class=converted_class,
        converted_exam=converted_exam,
        total=total,
        grade=grade_of(total),
    )


def make_entry(
    student_id: int,
    subject_id: int,
    term: str,
    academic_year: str,
    class_score: float,
    exam_score: float,
    class_weight: float = CLASS_SCORE_WEIGHT,
    exam_weight: float = EXAM_SCORE_WEIGHT,
) -> ScoreEntry:
    """Build a ScoreEntry with every derived field filled in."""
    breakdown = normalize(class_score, exam_score, class_weight, exam_weight)
    return ScoreEntry(
        student_id=student_id,
        subject_id=subject_id,
        term=term,
        academic_year=academic_year,
        class_score=class_score,
        exam_score=exam_score,
        converted_class_score=breakdown.converted_class,
        converted_exam_score=breakdown.converted_exam,
        total=breakdown.total,
        grade=breakdown.grade,
    )
