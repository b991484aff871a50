from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from schemas.common import TermScope

# ✅ input (POST) - upserted by student/term/year
class CommentCreate(TermScope):
    student_id: int
    interest: str = Field("", max_length=100)            # e.g. Football, Reading
    class_teacher_comment: str = ""
    headmaster_comment: str = ""

class CommentUpdate(BaseModel):
    interest: Optional[str] = Field(default=None, max_length=100)
    class_teacher_comment: Optional[str] = None
    headmaster_comment: Optional[str] = None

class Comment(CommentCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)
