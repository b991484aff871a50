"""
routers/grading.py

- Stateless grading endpoints: the pure core over HTTP, no storage involved.
- Score entry screens call these while a teacher types, before anything is saved.
"""

from fastapi import APIRouter, Query

from config.settings import settings
from schemas.grading import GradeInfo, NormalizeRequest, RankRequest
from services.grading.attendance import percentage_of
from services.grading.bands import band_of
from services.grading.normalizer import normalize
from services.grading.ranker import rank

router = APIRouter(prefix="/grading", tags=["grading"])


# ✅ [GRADE] grade tier of a total
@router.get("/grade")
def get_grade(total: float = Query(..., allow_inf_nan=False, description="Total score (any finite number)")):
    band = band_of(total)
    info = GradeInfo(total=total, grade=band.grade, interpretation=band.interpretation, is_pass=band.is_pass)
    return {"success": True, "data": info, "message": f"{total} -> {band.grade}"}


# ✅ [NORMALIZE] raw class/exam scores -> converted scores, total, grade
@router.post("/normalize")
def normalize_scores(payload: NormalizeRequest):
    breakdown = normalize(
        payload.class_score,
        payload.exam_score,
        settings.CLASS_SCORE_WEIGHT,
        settings.EXAM_SCORE_WEIGHT,
    )
    return {"success": True, "data": breakdown, "message": "Scores converted"}


# ✅ [ATTENDANCE] present / total days -> percentage (400 when total_days is 0)
@router.get("/attendance-percentage")
def get_attendance_percentage(
    present: int = Query(..., ge=0),
    total_days: int = Query(..., description="School days in the term; must be greater than 0"),
):
    percentage = percentage_of(present, total_days)
    return {"success": True, "data": {"present": present, "total_days": total_days, "percentage": percentage}, "message": f"{percentage}%"}


# ✅ [RANK] positions for an ad-hoc roster of totals
@router.post("/rank")
def rank_students(payload: RankRequest):
    ranking = rank(payload.students)
    return {"success": True, "data": ranking, "message": f"{len(ranking)} students ranked"}
