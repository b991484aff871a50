from sqlalchemy import Column, Integer, Float, String, ForeignKey, UniqueConstraint
from database.db import Base

class Score(Base):
    __tablename__ = "scores"  # one row per student/subject/term/year
    __table_args__ = (
        UniqueConstraint("student_id", "subject_id", "term", "academic_year", name="uq_score_entry"),
    )

    id = Column(Integer, primary_key=True, index=True)                      # score ID (Primary Key)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False)
    term = Column(String(20), nullable=False)                              # First/Second/Third Term
    academic_year = Column(String(9), nullable=False)                      # e.g. 2024/2025
    class_score = Column(Float, nullable=False)                            # raw class score (0-100)
    exam_score = Column(Float, nullable=False)                             # raw exam score (0-100)

    # derived, recomputed whenever a raw score changes
    converted_class_score = Column(Integer, nullable=False)                # out of 40
    converted_exam_score = Column(Integer, nullable=False)                 # out of 60
    total = Column(Integer, nullable=False)                                # out of 100
    grade = Column(String(2), nullable=False)                              # A1 ... F9
