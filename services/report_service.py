"""
services/report_service.py

- Report data for the class report, the student report card, a teacher's
  assigned classes and the dashboard.
- Reads snapshots through the injected RecordsRepository and hands them to the
  grading core (aggregate -> rank). Nothing computed here is stored.
"""

import logging
from collections import defaultdict
from typing import Dict, List

from models.classes import Class as ClassModel
from models.students import Student as StudentModel
from models.teachers import Teacher as TeacherModel
from schemas.attendance import Attendance
from schemas.comments import Comment
from schemas.reports import (
    ClassReport, ClassReportRow, DashboardSummary, ReportCard, ReportCardLine,
    TeacherClass, TeacherClasses, TeacherClassStudent,
)
from schemas.subjects import Subject
from schemas.teachers import Teacher
from services.grading.aggregator import aggregate, build_class_ranking, summarize_class
from services.grading.attendance import average_percentage
from services.grading.bands import band_of
from services.grading.normalizer import round_half_up
from services.grading.ranker import position_of
from services.grading.types import StudentPerformance
from services.repository import RecordsRepository

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(self, repo: RecordsRepository):
        self.repo = repo

    def _scores_by_student(self, class_id: int, term: str, academic_year: str) -> Dict[int, list]:
        scores_by_student: Dict[int, list] = defaultdict(list)
        for score in self.repo.scores_for_class(class_id, term, academic_year):
            scores_by_student[score.student_id].append(score)
        return scores_by_student

    def class_ranking(self, class_id: int, term: str, academic_year: str) -> List[StudentPerformance]:
        """Every student of the class (scored or not), ranked by term total."""
        students = self.repo.students_in_class(class_id)
        scores_by_student = self._scores_by_student(class_id, term, academic_year)

        performances = [aggregate(s.id, scores_by_student.get(s.id, [])) for s in students]
        ranking = build_class_ranking(performances)
        logger.debug("Ranked class %s (%s %s): %d students", class_id, term, academic_year, len(ranking))
        return ranking

    # ==========================================================
    # [CLASS REPORT] positions + class summary
    # ==========================================================
    def class_report(self, class_id: int, term: str, academic_year: str) -> ClassReport:
        cls = self.repo.get(ClassModel, class_id)
        names = {s.id: s.full_name for s in self.repo.students_in_class(class_id)}
        ranking = self.class_ranking(class_id, term, academic_year)

        return ClassReport(
            class_id=cls.id,
            class_name=cls.name,
            term=term,
            academic_year=academic_year,
            summary=summarize_class(ranking),
            students=[ClassReportRow(**p.model_dump(), full_name=names[p.student_id]) for p in ranking],
        )

    # ==========================================================
    # [REPORT CARD] one student, one term
    # ==========================================================
    def report_card(self, student_id: int, term: str, academic_year: str) -> ReportCard:
        student = self.repo.get(StudentModel, student_id)
        scores = self.repo.scores_for_student(student_id, term, academic_year)
        subjects = self.repo.subjects_by_id()

        lines = []
        for score in scores:
            subject = subjects.get(score.subject_id)
            lines.append(
                ReportCardLine(
                    subject_id=score.subject_id,
                    subject_name=subject.name if subject else f"Subject {score.subject_id}",
                    class_score=score.class_score,
                    exam_score=score.exam_score,
                    converted_class_score=score.converted_class_score,
                    converted_exam_score=score.converted_exam_score,
                    total=score.total,
                    grade=score.grade,
                    interpretation=band_of(score.total).interpretation,
                )
            )

        performance = aggregate(student_id, scores)

        class_name = None
        position = None
        total_students = 0
        cls = self.repo.find(ClassModel, student.class_id) if student.class_id is not None else None
        if cls is not None:
            class_name = cls.name
            ranking = self.class_ranking(student.class_id, term, academic_year)
            position = position_of(ranking, student_id)
            total_students = len(ranking)

        attendance = self.repo.find_attendance(student_id, term, academic_year)
        comment = self.repo.find_comment(student_id, term, academic_year)

        return ReportCard(
            student_id=student.id,
            full_name=student.full_name,
            class_id=student.class_id,
            class_name=class_name,
            term=term,
            academic_year=academic_year,
            lines=lines,
            total_score=performance.total_score,
            average_score=performance.average_score,
            grade=performance.grade,
            position=position,
            total_students=total_students,
            attendance=Attendance.model_validate(attendance) if attendance else None,
            comment=Comment.model_validate(comment) if comment else None,
        )

    # ==========================================================
    # [TEACHER CLASSES] assigned classes with per-student performance
    # ==========================================================
    def teacher_classes(self, teacher_id: int, term: str, academic_year: str) -> TeacherClasses:
        teacher = Teacher.model_validate(self.repo.get(TeacherModel, teacher_id))
        subjects = self.repo.subjects_by_id()

        classes = []
        for class_id in teacher.assigned_class_ids:
            cls = self.repo.find(ClassModel, class_id)
            if cls is None:
                logger.warning("Teacher %s is assigned to missing class %s", teacher_id, class_id)
                continue

            scores_by_student = self._scores_by_student(class_id, term, academic_year)
            rows = []
            for student in self.repo.students_in_class(class_id):
                performance = aggregate(student.id, scores_by_student.get(student.id, []))
                rows.append(
                    TeacherClassStudent(
                        student_id=student.id,
                        full_name=student.full_name,
                        subject_count=performance.subject_count,
                        average_score=round_half_up(performance.average_score),
                        total_score=performance.total_score,
                        grade=performance.grade,
                    )
                )
            classes.append(TeacherClass(class_id=cls.id, class_name=cls.name, level=cls.level, students=rows))

        return TeacherClasses(
            teacher_id=teacher.id,
            full_name=teacher.full_name,
            term=term,
            academic_year=academic_year,
            subjects=[Subject.model_validate(subjects[i]) for i in teacher.assigned_subject_ids if i in subjects],
            classes=classes,
            total_students=sum(len(c.students) for c in classes),
        )

    # ==========================================================
    # [DASHBOARD] school wide counts and averages
    # ==========================================================
    def dashboard(self) -> DashboardSummary:
        counts = self.repo.counts()
        totals = self.repo.all_score_totals()
        return DashboardSummary(
            total_students=counts["students"],
            total_teachers=counts["teachers"],
            total_classes=counts["classes"],
            total_subjects=counts["subjects"],
            average_score=round_half_up(sum(totals) / len(totals)) if totals else 0,
            average_attendance=average_percentage(self.repo.all_attendance_percentages()),
        )
