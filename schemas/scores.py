from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from schemas.common import TermScope
from services.grading.types import GradeTier

# ✅ input (POST) - one subject score, upserted by student/subject/term/year
class ScoreCreate(TermScope):
    student_id: int
    subject_id: int
    class_score: float = Field(..., ge=0, le=100, description="Raw class score 0-100")
    exam_score: float = Field(..., ge=0, le=100, description="Raw exam score 0-100")

# ✅ input (PUT) - only raw scores can change; derived fields are recomputed
class ScoreUpdate(BaseModel):
    class_score: Optional[float] = Field(default=None, ge=0, le=100)
    exam_score: Optional[float] = Field(default=None, ge=0, le=100)

# ✅ bulk input - one class sheet for one subject
class ScoreSheetRow(BaseModel):
    student_id: int
    class_score: float = Field(..., ge=0, le=100)
    exam_score: float = Field(..., ge=0, le=100)

class ScoreSheet(TermScope):
    subject_id: int
    entries: List[ScoreSheetRow]

# ✅ output (GET)
class Score(BaseModel):
    id: int
    student_id: int
    subject_id: int
    term: str
    academic_year: str
    class_score: float
    exam_score: float
    converted_class_score: int              # out of 40
    converted_exam_score: int               # out of 60
    total: int                              # out of 100
    grade: GradeTier

    model_config = ConfigDict(from_attributes=True)
