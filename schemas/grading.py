"""
schemas/grading.py

- Request/response bodies of the stateless grading endpoints (routers/grading.py)
"""

from pydantic import BaseModel, Field
from typing import List

from services.grading.types import GradeTier, StudentTotal


class NormalizeRequest(BaseModel):
    class_score: float = Field(..., ge=0, le=100, allow_inf_nan=False, description="Raw class score 0-100")
    exam_score: float = Field(..., ge=0, le=100, allow_inf_nan=False, description="Raw exam score 0-100")


class GradeInfo(BaseModel):
    total: float
    grade: GradeTier
    interpretation: str
    is_pass: bool


class RankRequest(BaseModel):
    students: List[StudentTotal] = Field(default_factory=list, description="Roster in enumeration order")
