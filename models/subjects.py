from sqlalchemy import Column, Integer, String
from database.db import Base

class Subject(Base):
    __tablename__ = "subjects"  # subjects offered

    id = Column(Integer, primary_key=True, index=True)         # subject ID (Primary Key)
    name = Column(String(100), unique=True, nullable=False)   # e.g. Mathematics
    code = Column(String(20))                                 # e.g. MATH
