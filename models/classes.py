from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from database.db import Base

class Class(Base):
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)      # class ID (PK)
    name = Column(String(50), unique=True, nullable=False)  # e.g. "JHS 2A"
    level = Column(String(50), nullable=False)              # e.g. "JHS 2"

    # ==========================================================
    # [Relationships]
    # ==========================================================

    # ✅ class teacher (FK -> teachers.id)
    class_teacher_id = Column(Integer, ForeignKey("teachers.id"))

    # ✅ class teacher (N:1)
    class_teacher = relationship("Teacher", foreign_keys=[class_teacher_id])
