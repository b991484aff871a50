from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional

from schemas.common import TermScope

# ✅ input (POST) - one tally per student/term/year
class AttendanceCreate(TermScope):
    student_id: int
    total_days_present: int = Field(..., ge=0)           # days present
    total_days_in_term: int = Field(..., gt=0)           # school days in the term

    @model_validator(mode="after")
    def _present_within_term(self):
        if self.total_days_present > self.total_days_in_term:
            raise ValueError("total_days_present cannot exceed total_days_in_term")
        return self

# ✅ input (PUT) - partial; the merged record is re-checked by the service
class AttendanceUpdate(BaseModel):
    total_days_present: Optional[int] = Field(default=None, ge=0)
    total_days_in_term: Optional[int] = Field(default=None, gt=0)

# ✅ output (GET)
class Attendance(BaseModel):
    id: int
    student_id: int
    term: str
    academic_year: str
    total_days_present: int
    total_days_in_term: int
    percentage: int                          # derived, 0-100

    model_config = ConfigDict(from_attributes=True)
