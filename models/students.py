from sqlalchemy import Column, Integer, String, Date, ForeignKey
from database.db import Base

class Student(Base):
    __tablename__ = "students"  # student register

    id = Column(Integer, primary_key=True, index=True)                      # student ID (Primary Key)
    full_name = Column(String(100), nullable=False)                        # full name
    class_id = Column(Integer, ForeignKey("classes.id"), index=True)       # current class (classes.id)
    gender = Column(String(10))                                            # e.g. Male, Female
    date_of_birth = Column(Date)                                           # date of birth
    guardian_name = Column(String(100))                                    # parent / guardian
    guardian_phone = Column(String(20))                                    # guardian contact
