from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.services import get_records_service, get_repo
from models.scores import Score as ScoreModel
from models.students import Student as StudentModel
from schemas.scores import Score, ScoreCreate, ScoreSheet, ScoreUpdate
from services.records_service import RecordsService
from services.repository import SqlRecordsRepository

router = APIRouter(prefix="/scores", tags=["scores"])


# ==========================================================
# [1] writes - derived fields always come from the grading core
# ==========================================================

# ✅ [UPSERT] save one subject score (one row per student/subject/term/year)
@router.post("/")
def save_score(payload: ScoreCreate, service: RecordsService = Depends(get_records_service)):
    score = service.record_score(payload)
    return {"success": True, "data": Score.model_validate(score), "message": "Score saved successfully"}


# ✅ [BULK] save a class sheet for one subject
@router.post("/bulk")
def save_score_sheet(sheet: ScoreSheet, service: RecordsService = Depends(get_records_service)):
    saved = service.save_score_sheet(sheet)
    return {
        "success": True,
        "data": [Score.model_validate(s) for s in saved],
        "message": f"{len(saved)} scores saved"
    }


# ==========================================================
# [2] reads
# ==========================================================

# ✅ [READ] scores, filtered by student / subject / class / term / year
@router.get("/")
def read_scores(
    student_id: Optional[int] = None,
    subject_id: Optional[int] = None,
    class_id: Optional[int] = None,
    term: Optional[str] = None,
    academic_year: Optional[str] = None,
    db: Session = Depends(get_db),
):
    query = db.query(ScoreModel)
    if class_id is not None:
        query = query.join(StudentModel, StudentModel.id == ScoreModel.student_id).filter(StudentModel.class_id == class_id)
    if student_id is not None:
        query = query.filter(ScoreModel.student_id == student_id)
    if subject_id is not None:
        query = query.filter(ScoreModel.subject_id == subject_id)
    if term:
        query = query.filter(ScoreModel.term == term)
    if academic_year:
        query = query.filter(ScoreModel.academic_year == academic_year)
    records = query.order_by(ScoreModel.id).all()
    return {"success": True, "data": [Score.model_validate(r) for r in records], "message": "Scores retrieved"}


# ✅ [READ] one score
@router.get("/{score_id}")
def read_score(score_id: int, repo: SqlRecordsRepository = Depends(get_repo)):
    return {"success": True, "data": Score.model_validate(repo.get(ScoreModel, score_id)), "message": "Score retrieved"}


# ==========================================================
# [3] dynamic writes
# ==========================================================

# ✅ [UPDATE] change raw scores; converted scores, total and grade are recomputed
@router.put("/{score_id}")
def update_score(score_id: int, changes: ScoreUpdate, service: RecordsService = Depends(get_records_service)):
    score = service.update_score(score_id, changes)
    return {"success": True, "data": Score.model_validate(score), "message": "Score updated successfully"}


# ✅ [DELETE] remove a score
@router.delete("/{score_id}")
def delete_score(score_id: int, repo: SqlRecordsRepository = Depends(get_repo)):
    repo.delete(repo.get(ScoreModel, score_id))
    return {"success": True, "data": {"score_id": score_id}, "message": "Score deleted successfully"}
