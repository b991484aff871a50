from sqlalchemy import Column, Integer, String, Text, ForeignKey, UniqueConstraint
from database.db import Base

class Comment(Base):
    __tablename__ = "comments"  # report card remarks, one per student/term/year
    __table_args__ = (
        UniqueConstraint("student_id", "term", "academic_year", name="uq_comment_term"),
    )

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    term = Column(String(20), nullable=False)
    academic_year = Column(String(9), nullable=False)
    interest = Column(String(100), default="")                  # e.g. Football, Reading
    class_teacher_comment = Column(Text, default="")
    headmaster_comment = Column(Text, default="")
