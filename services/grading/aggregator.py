"""
services/grading/aggregator.py

- Builds per-student performance from score entries and turns a class worth
  of them into a ranking.
- Anything with a `.total` attribute counts as a score entry (ScoreEntry,
  the Score ORM model, ...).
"""

from typing import Iterable, List, Sequence

from services.grading.bands import grade_of
from services.grading.ranker import rank
from services.grading.types import ClassSummary, StudentPerformance


def aggregate(student_id: int, entries: Iterable) -> StudentPerformance:
    """Total, average and grade of one student's entries; position is left unset."""
    totals = [entry.total for entry in entries]
    total_score = sum(totals)
    count = len(totals)
    average_score = total_score / count if count else 0
    return StudentPerformance(
        student_id=student_id,
        total_score=total_score,
        average_score=average_score,
        subject_count=count,
        grade=grade_of(average_score),
    )


def build_class_ranking(performances: Sequence[StudentPerformance]) -> List[StudentPerformance]:
    """Rank the class and return it in display order (position ascending)."""
    ranked = rank(performances)
    return sorted(ranked, key=lambda p: p.position)


def summarize_class(ranking: Sequence[StudentPerformance]) -> ClassSummary:
    count = len(ranking)
    if not count:
        return ClassSummary(student_count=0, highest_total=0, average_total=0, overall_grade=grade_of(0))

    average_of_averages = sum(p.average_score for p in ranking) / count
    return ClassSummary(
        student_count=count,
        highest_total=max(p.total_score for p in ranking),
        average_total=sum(p.total_score for p in ranking) / count,
        overall_grade=grade_of(average_of_averages),
    )
