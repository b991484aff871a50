from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.services import get_records_service, get_repo
from models.comments import Comment as CommentModel
from schemas.comments import Comment, CommentCreate, CommentUpdate
from services.records_service import RecordsService
from services.repository import SqlRecordsRepository

router = APIRouter(prefix="/comments", tags=["comments"])


# ✅ [UPSERT] interest + class teacher / headmaster remarks for one term
@router.post("/")
def save_comment(payload: CommentCreate, service: RecordsService = Depends(get_records_service)):
    comment = service.record_comment(payload)
    return {"success": True, "data": Comment.model_validate(comment), "message": "Comment saved successfully"}


# ✅ [READ] remarks, filtered by student / term / year
@router.get("/")
def read_comments(
    student_id: Optional[int] = None,
    term: Optional[str] = None,
    academic_year: Optional[str] = None,
    db: Session = Depends(get_db),
):
    query = db.query(CommentModel)
    if student_id is not None:
        query = query.filter(CommentModel.student_id == student_id)
    if term:
        query = query.filter(CommentModel.term == term)
    if academic_year:
        query = query.filter(CommentModel.academic_year == academic_year)
    records = query.order_by(CommentModel.id).all()
    return {"success": True, "data": [Comment.model_validate(r) for r in records], "message": "Comments retrieved"}


# ✅ [UPDATE] edit remarks
@router.put("/{comment_id}")
def update_comment(comment_id: int, changes: CommentUpdate, service: RecordsService = Depends(get_records_service)):
    comment = service.update_comment(comment_id, changes)
    return {"success": True, "data": Comment.model_validate(comment), "message": "Comment updated successfully"}


# ✅ [DELETE] remove remarks
@router.delete("/{comment_id}")
def delete_comment(comment_id: int, repo: SqlRecordsRepository = Depends(get_repo)):
    repo.delete(repo.get(CommentModel, comment_id))
    return {"success": True, "data": {"comment_id": comment_id}, "message": "Comment deleted successfully"}
