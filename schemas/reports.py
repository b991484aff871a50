"""
schemas/reports.py

- Structured report data (class report, report card, dashboard, teacher classes).
- Only numbers and labels; rendering is left to the client.
"""

from pydantic import BaseModel
from typing import List, Optional

from schemas.attendance import Attendance
from schemas.comments import Comment
from schemas.subjects import Subject
from services.grading.types import ClassSummary, GradeTier, StudentPerformance


# =========================================================
# Class report
# =========================================================

class ClassReportRow(StudentPerformance):
    full_name: str


class ClassReport(BaseModel):
    class_id: int
    class_name: str
    term: str
    academic_year: str
    summary: ClassSummary
    students: List[ClassReportRow]      # position ascending


# =========================================================
# Student report card
# =========================================================

class ReportCardLine(BaseModel):
    subject_id: int
    subject_name: str
    class_score: float
    exam_score: float
    converted_class_score: int
    converted_exam_score: int
    total: int
    grade: GradeTier
    interpretation: str


class ReportCard(BaseModel):
    student_id: int
    full_name: str
    class_id: Optional[int] = None
    class_name: Optional[str] = None
    term: str
    academic_year: str
    lines: List[ReportCardLine]
    total_score: float
    average_score: float
    grade: GradeTier
    position: Optional[int] = None
    total_students: int
    attendance: Optional[Attendance] = None
    comment: Optional[Comment] = None


# =========================================================
# Dashboard
# =========================================================

class DashboardSummary(BaseModel):
    total_students: int
    total_teachers: int
    total_classes: int
    total_subjects: int
    average_score: int          # rounded mean of all score totals
    average_attendance: int     # rounded mean of all attendance percentages


# =========================================================
# Teacher's classes
# =========================================================

class TeacherClassStudent(BaseModel):
    student_id: int
    full_name: str
    subject_count: int
    average_score: int          # rounded
    total_score: float
    grade: GradeTier


class TeacherClass(BaseModel):
    class_id: int
    class_name: str
    level: str
    students: List[TeacherClassStudent]     # enrolment order


class TeacherClasses(BaseModel):
    teacher_id: int
    full_name: str
    term: str
    academic_year: str
    subjects: List[Subject]
    classes: List[TeacherClass]
    total_students: int
