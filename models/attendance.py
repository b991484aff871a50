from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from database.db import Base

class Attendance(Base):
    __tablename__ = "attendance"  # one tally per student/term/year
    __table_args__ = (
        UniqueConstraint("student_id", "term", "academic_year", name="uq_attendance_term"),
    )

    id = Column(Integer, primary_key=True, index=True)                      # attendance ID (Primary Key)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    term = Column(String(20), nullable=False)
    academic_year = Column(String(9), nullable=False)
    total_days_present = Column(Integer, nullable=False)                   # days present
    total_days_in_term = Column(Integer, nullable=False)                   # school days in the term
    percentage = Column(Integer, nullable=False)                           # derived, 0-100
