"""
services/grading/ranker.py

- Orders a class roster by total score (highest first) and assigns positions.
- Dense sequential ranking with a stable tie-break: equal totals do NOT share
  a position; they get consecutive positions in the order they were passed in.
  rank([A:50, B:50, C:40]) -> A=1, B=2, C=3.
"""

from typing import List, Optional, Sequence, TypeVar

from services.grading.types import StudentTotal

T = TypeVar("T", bound=StudentTotal)


def rank(students: Sequence[T]) -> List[T]:
    """
    Return copies of the input records, sorted descending by total_score,
    with position = 1-based index. The input records are left untouched and
    the output keeps their concrete type (StudentTotal or StudentPerformance).
    """
    # sorted() is stable, so ties keep enumeration order
    ordered = sorted(students, key=lambda s: s.total_score, reverse=True)
    return [s.model_copy(update={"position": idx}) for idx, s in enumerate(ordered, start=1)]


def position_of(ranking: Sequence[StudentTotal], student_id: int) -> Optional[int]:
    for entry in ranking:
        if entry.student_id == student_id:
            return entry.position
    return None
