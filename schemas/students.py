from datetime import date
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

# ✅ input (POST/PUT)
class StudentCreate(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=100)    # full name
    class_id: int                                                # current class
    gender: Optional[str] = None                                 # gender
    date_of_birth: Optional[date] = None                         # date of birth
    guardian_name: Optional[str] = None                          # parent / guardian
    guardian_phone: Optional[str] = None                         # guardian contact

# ✅ output (GET)
class Student(StudentCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)
