"""
services/grading/types.py

- Value records consumed and produced by the grading core.
- Pydantic v2 models; the core never keeps references to them after a call.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

GradeTier = Literal["A1", "B2", "B3", "C4", "C5", "C6", "D7", "E8", "F9"]
Term = Literal["First Term", "Second Term", "Third Term"]

TERMS = ("First Term", "Second Term", "Third Term")


class ScoreBreakdown(BaseModel):
    """Weighted contributions of one subject score."""
    converted_class: int = Field(..., description="Class score after weighting (out of 40)")
    converted_exam: int = Field(..., description="Exam score after weighting (out of 60)")
    total: int = Field(..., description="converted_class + converted_exam")
    grade: GradeTier


class ScoreEntry(BaseModel):
    """One subject score for one student in one term/year."""
    student_id: int
    subject_id: int
    term: Term
    academic_year: str
    class_score: float = Field(..., description="Raw class score (0-100)")
    exam_score: float = Field(..., description="Raw exam score (0-100)")
    converted_class_score: int = 0
    converted_exam_score: int = 0
    total: int = Field(0, description="Derived total, see normalizer.make_entry()")
    grade: GradeTier = "F9"

    model_config = ConfigDict(from_attributes=True)


class AttendanceRecord(BaseModel):
    student_id: int
    term: Term
    academic_year: str
    total_days_present: int
    total_days_in_term: int

    model_config = ConfigDict(from_attributes=True)


class StudentTotal(BaseModel):
    """Minimal input to the ranker: who, how much, and (after ranking) where."""
    student_id: int
    total_score: float = Field(..., allow_inf_nan=False)
    position: Optional[int] = Field(default=None, description="1-based rank within the class")


class StudentPerformance(StudentTotal):
    average_score: float = 0
    subject_count: int = 0
    grade: GradeTier = "F9"


class ClassSummary(BaseModel):
    student_count: int
    highest_total: float
    average_total: float
    overall_grade: GradeTier
