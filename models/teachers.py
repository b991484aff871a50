from sqlalchemy import Column, Integer, String
from database.db import Base

class Teacher(Base):
    __tablename__ = "teachers"

    id = Column(Integer, primary_key=True, index=True)      # teacher ID (PK)
    full_name = Column(String(100), nullable=False)         # full name
    username = Column(String(50), unique=True, nullable=False)  # login name
    email = Column(String(100), unique=True)                # email
    phone = Column(String(20))                              # phone
    assigned_class_ids = Column(String(200), default="")    # comma separated classes.id
    assigned_subject_ids = Column(String(200), default="")  # comma separated subjects.id
