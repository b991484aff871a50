from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

# ✅ input (POST/PUT)
class TeacherCreate(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=100)
    username: str = Field(..., min_length=1, max_length=50)
    email: Optional[str] = None
    phone: Optional[str] = None
    assigned_class_ids: List[int] = []      # classes this teacher records scores for
    assigned_subject_ids: List[int] = []    # subjects this teacher teaches

    @field_validator("assigned_class_ids", "assigned_subject_ids", mode="before")
    @classmethod
    def _split_ids(cls, v):
        # stored as "1,2,3" in the teachers table
        if isinstance(v, str):
            return [int(s) for s in v.split(",") if s.strip()]
        return v if v is not None else []

    def to_columns(self) -> dict:
        data = self.model_dump()
        data["assigned_class_ids"] = ",".join(str(i) for i in self.assigned_class_ids)
        data["assigned_subject_ids"] = ",".join(str(i) for i in self.assigned_subject_ids)
        return data

# ✅ output (GET)
class Teacher(TeacherCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)
