from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

# ✅ input (POST/PUT)
class ClassCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)      # e.g. JHS 2A
    level: str = Field(..., min_length=1, max_length=50)     # e.g. JHS 2
    class_teacher_id: Optional[int] = None                   # class teacher (teachers.id)

# ✅ output (GET)
class Class(ClassCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)
