"""
services/records_service.py

- Writes term scoped records (scores, attendance, comments).
- One row per natural key: saving an existing key updates it in place.
- Derived columns (converted scores, total, grade, attendance percentage)
  are always recomputed through the grading core on save; callers never set them.
"""

import logging
from typing import List

from config.settings import settings
from models.attendance import Attendance as AttendanceModel
from models.comments import Comment as CommentModel
from models.scores import Score as ScoreModel
from models.students import Student as StudentModel
from models.subjects import Subject as SubjectModel
from schemas.attendance import AttendanceCreate, AttendanceUpdate
from schemas.comments import CommentCreate, CommentUpdate
from schemas.scores import ScoreCreate, ScoreSheet, ScoreUpdate
from services.grading.attendance import percentage_of
from services.grading.errors import InvalidArgument
from services.grading.normalizer import normalize
from services.repository import RecordsRepository

logger = logging.getLogger(__name__)


class RecordsService:
    def __init__(
        self,
        repo: RecordsRepository,
        class_weight: int = settings.CLASS_SCORE_WEIGHT,
        exam_weight: int = settings.EXAM_SCORE_WEIGHT,
    ):
        self.repo = repo
        self.class_weight = class_weight
        self.exam_weight = exam_weight

    # ==========================================================
    # Scores
    # ==========================================================
    def _apply_score(self, score: ScoreModel) -> ScoreModel:
        breakdown = normalize(score.class_score, score.exam_score, self.class_weight, self.exam_weight)
        score.converted_class_score = breakdown.converted_class
        score.converted_exam_score = breakdown.converted_exam
        score.total = breakdown.total
        score.grade = breakdown.grade
        return score

    def record_score(self, payload: ScoreCreate) -> ScoreModel:
        self.repo.get(StudentModel, payload.student_id)
        self.repo.get(SubjectModel, payload.subject_id)

        score = self.repo.find_score(payload.student_id, payload.subject_id, payload.term, payload.academic_year)
        if score is None:
            score = ScoreModel(
                student_id=payload.student_id,
                subject_id=payload.subject_id,
                term=payload.term,
                academic_year=payload.academic_year,
            )
            action = "created"
        else:
            action = "updated"

        score.class_score = payload.class_score
        score.exam_score = payload.exam_score
        score = self.repo.save(self._apply_score(score))
        logger.info(
            "Score %s: student=%s subject=%s %s %s total=%s grade=%s",
            action, score.student_id, score.subject_id, score.term, score.academic_year, score.total, score.grade,
        )
        return score

    def update_score(self, score_id: int, changes: ScoreUpdate) -> ScoreModel:
        score = self.repo.get(ScoreModel, score_id)
        if changes.class_score is not None:
            score.class_score = changes.class_score
        if changes.exam_score is not None:
            score.exam_score = changes.exam_score
        score = self.repo.save(self._apply_score(score))
        logger.info("Score %s recomputed: total=%s grade=%s", score.id, score.total, score.grade)
        return score

    def save_score_sheet(self, sheet: ScoreSheet) -> List[ScoreModel]:
        """Save a whole class sheet for one subject/term/year."""
        saved = []
        for row in sheet.entries:
            saved.append(
                self.record_score(
                    ScoreCreate(
                        student_id=row.student_id,
                        subject_id=sheet.subject_id,
                        term=sheet.term,
                        academic_year=sheet.academic_year,
                        class_score=row.class_score,
                        exam_score=row.exam_score,
                    )
                )
            )
        return saved

    # ==========================================================
    # Attendance
    # ==========================================================
    def record_attendance(self, payload: AttendanceCreate) -> AttendanceModel:
        self.repo.get(StudentModel, payload.student_id)

        record = self.repo.find_attendance(payload.student_id, payload.term, payload.academic_year)
        if record is None:
            record = AttendanceModel(
                student_id=payload.student_id,
                term=payload.term,
                academic_year=payload.academic_year,
            )

        record.total_days_present = payload.total_days_present
        record.total_days_in_term = payload.total_days_in_term
        record.percentage = percentage_of(record.total_days_present, record.total_days_in_term)
        record = self.repo.save(record)
        logger.info(
            "Attendance saved: student=%s %s %s %s/%s (%s%%)",
            record.student_id, record.term, record.academic_year,
            record.total_days_present, record.total_days_in_term, record.percentage,
        )
        return record

    def update_attendance(self, attendance_id: int, changes: AttendanceUpdate) -> AttendanceModel:
        record = self.repo.get(AttendanceModel, attendance_id)
        present = changes.total_days_present if changes.total_days_present is not None else record.total_days_present
        days = changes.total_days_in_term if changes.total_days_in_term is not None else record.total_days_in_term
        if present > days:
            raise InvalidArgument("total_days_present cannot exceed total_days_in_term")

        record.total_days_present = present
        record.total_days_in_term = days
        record.percentage = percentage_of(present, days)
        return self.repo.save(record)

    # ==========================================================
    # Comments
    # ==========================================================
    def record_comment(self, payload: CommentCreate) -> CommentModel:
        self.repo.get(StudentModel, payload.student_id)

        comment = self.repo.find_comment(payload.student_id, payload.term, payload.academic_year)
        if comment is None:
            comment = CommentModel(
                student_id=payload.student_id,
                term=payload.term,
                academic_year=payload.academic_year,
            )
        comment.interest = payload.interest
        comment.class_teacher_comment = payload.class_teacher_comment
        comment.headmaster_comment = payload.headmaster_comment
        return self.repo.save(comment)

    def update_comment(self, comment_id: int, changes: CommentUpdate) -> CommentModel:
        comment = self.repo.get(CommentModel, comment_id)
        for key, value in changes.model_dump(exclude_none=True).items():
            setattr(comment, key, value)
        return self.repo.save(comment)
