from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class SubjectCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)     # subject name
    code: Optional[str] = None                               # short code

class Subject(SubjectCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)
