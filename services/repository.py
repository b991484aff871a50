"""
services/repository.py

- Storage boundary for the services. The grading core never sees this; the
  report and records services receive a RecordsRepository and hand plain
  snapshots (lists of rows) to the pure functions.
- SqlRecordsRepository is the SQLAlchemy implementation used by the API.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from models.attendance import Attendance as AttendanceModel
from models.classes import Class as ClassModel
from models.comments import Comment as CommentModel
from models.scores import Score as ScoreModel
from models.students import Student as StudentModel
from models.subjects import Subject as SubjectModel
from models.teachers import Teacher as TeacherModel

logger = logging.getLogger(__name__)


class RecordNotFound(LookupError):
    def __init__(self, entity: str, record_id):
        super().__init__(f"{entity} {record_id} not found")
        self.entity = entity
        self.record_id = record_id


class RecordsRepository(ABC):
    # ---- lookups ----
    @abstractmethod
    def find(self, model, record_id: int): ...
    @abstractmethod
    def get(self, model, record_id: int): ...
    @abstractmethod
    def students_in_class(self, class_id: int) -> List[StudentModel]: ...
    @abstractmethod
    def subjects_by_id(self) -> Dict[int, SubjectModel]: ...

    # ---- term scoped records ----
    @abstractmethod
    def scores_for_student(self, student_id: int, term: str, academic_year: str) -> List[ScoreModel]: ...
    @abstractmethod
    def scores_for_class(self, class_id: int, term: str, academic_year: str) -> List[ScoreModel]: ...
    @abstractmethod
    def find_score(self, student_id: int, subject_id: int, term: str, academic_year: str) -> Optional[ScoreModel]: ...
    @abstractmethod
    def find_attendance(self, student_id: int, term: str, academic_year: str) -> Optional[AttendanceModel]: ...
    @abstractmethod
    def find_comment(self, student_id: int, term: str, academic_year: str) -> Optional[CommentModel]: ...

    # ---- dashboard ----
    @abstractmethod
    def counts(self) -> Dict[str, int]: ...
    @abstractmethod
    def all_score_totals(self) -> List[int]: ...
    @abstractmethod
    def all_attendance_percentages(self) -> List[int]: ...

    # ---- writes ----
    @abstractmethod
    def save(self, record): ...
    @abstractmethod
    def delete(self, record) -> None: ...
    @abstractmethod
    def delete_student(self, student_id: int) -> None: ...
    @abstractmethod
    def delete_teacher(self, teacher_id: int) -> None: ...


class SqlRecordsRepository(RecordsRepository):
    def __init__(self, db: Session):
        self.db = db

    def find(self, model, record_id: int):
        return self.db.get(model, record_id)

    def get(self, model, record_id: int):
        record = self.find(model, record_id)
        if record is None:
            raise RecordNotFound(model.__name__, record_id)
        return record

    def students_in_class(self, class_id: int) -> List[StudentModel]:
        # id order = enrolment order, which decides ranking ties
        return (
            self.db.query(StudentModel)
            .filter(StudentModel.class_id == class_id)
            .order_by(StudentModel.id)
            .all()
        )

    def subjects_by_id(self) -> Dict[int, SubjectModel]:
        return {s.id: s for s in self.db.query(SubjectModel).all()}

    def scores_for_student(self, student_id: int, term: str, academic_year: str) -> List[ScoreModel]:
        return (
            self.db.query(ScoreModel)
            .filter(
                ScoreModel.student_id == student_id,
                ScoreModel.term == term,
                ScoreModel.academic_year == academic_year,
            )
            .order_by(ScoreModel.subject_id)
            .all()
        )

    def scores_for_class(self, class_id: int, term: str, academic_year: str) -> List[ScoreModel]:
        return (
            self.db.query(ScoreModel)
            .join(StudentModel, StudentModel.id == ScoreModel.student_id)
            .filter(
                StudentModel.class_id == class_id,
                ScoreModel.term == term,
                ScoreModel.academic_year == academic_year,
            )
            .order_by(ScoreModel.student_id, ScoreModel.subject_id)
            .all()
        )

    def find_score(self, student_id: int, subject_id: int, term: str, academic_year: str) -> Optional[ScoreModel]:
        return (
            self.db.query(ScoreModel)
            .filter(
                ScoreModel.student_id == student_id,
                ScoreModel.subject_id == subject_id,
                ScoreModel.term == term,
                ScoreModel.academic_year == academic_year,
            )
            .first()
        )

    def find_attendance(self, student_id: int, term: str, academic_year: str) -> Optional[AttendanceModel]:
        return (
            self.db.query(AttendanceModel)
            .filter(
                AttendanceModel.student_id == student_id,
                AttendanceModel.term == term,
                AttendanceModel.academic_year == academic_year,
            )
            .first()
        )

    def find_comment(self, student_id: int, term: str, academic_year: str) -> Optional[CommentModel]:
        return (
            self.db.query(CommentModel)
            .filter(
                CommentModel.student_id == student_id,
                CommentModel.term == term,
                CommentModel.academic_year == academic_year,
            )
            .first()
        )

    def counts(self) -> Dict[str, int]:
        return {
            "students": self.db.query(func.count(StudentModel.id)).scalar() or 0,
            "teachers": self.db.query(func.count(TeacherModel.id)).scalar() or 0,
            "classes": self.db.query(func.count(ClassModel.id)).scalar() or 0,
            "subjects": self.db.query(func.count(SubjectModel.id)).scalar() or 0,
        }

    def all_score_totals(self) -> List[int]:
        return [row[0] for row in self.db.query(ScoreModel.total).all()]

    def all_attendance_percentages(self) -> List[int]:
        return [row[0] for row in self.db.query(AttendanceModel.percentage).all()]

    def save(self, record):
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def delete(self, record) -> None:
        self.db.delete(record)
        self.db.commit()

    def delete_student(self, student_id: int) -> None:
        student = self.get(StudentModel, student_id)
        # a student's term records go with the student
        for model in (ScoreModel, AttendanceModel, CommentModel):
            self.db.query(model).filter(model.student_id == student_id).delete(synchronize_session=False)
        self.db.delete(student)
        self.db.commit()
        logger.info("Deleted student %s with scores, attendance and comments", student_id)

    def delete_teacher(self, teacher_id: int) -> None:
        teacher = self.get(TeacherModel, teacher_id)
        # classes keep existing without a class teacher
        self.db.query(ClassModel).filter(ClassModel.class_teacher_id == teacher_id).update(
            {ClassModel.class_teacher_id: None}, synchronize_session=False
        )
        self.db.delete(teacher)
        self.db.commit()
        logger.info("Deleted teacher %s", teacher_id)
