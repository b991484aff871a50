from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.services import get_repo
from models.subjects import Subject as SubjectModel
from schemas.subjects import Subject, SubjectCreate
from services.repository import SqlRecordsRepository

router = APIRouter(prefix="/subjects", tags=["subjects"])


# ✅ [CREATE] add a subject
@router.post("/")
def create_subject(subject: SubjectCreate, db: Session = Depends(get_db)):
    db_subject = SubjectModel(**subject.model_dump())
    db.add(db_subject)
    db.commit()
    db.refresh(db_subject)
    return {"success": True, "data": Subject.model_validate(db_subject), "message": "Subject created successfully"}


# ✅ [READ] all subjects
@router.get("/")
def read_subjects(db: Session = Depends(get_db)):
    records = db.query(SubjectModel).order_by(SubjectModel.name).all()
    return {"success": True, "data": [Subject.model_validate(r) for r in records], "message": "Subjects retrieved"}


# ✅ [READ] one subject
@router.get("/{subject_id}")
def read_subject(subject_id: int, repo: SqlRecordsRepository = Depends(get_repo)):
    return {"success": True, "data": Subject.model_validate(repo.get(SubjectModel, subject_id)), "message": "Subject retrieved"}


# ✅ [UPDATE] edit a subject
@router.put("/{subject_id}")
def update_subject(subject_id: int, updated: SubjectCreate, repo: SqlRecordsRepository = Depends(get_repo)):
    subject = repo.get(SubjectModel, subject_id)
    for key, value in updated.model_dump().items():
        setattr(subject, key, value)
    subject = repo.save(subject)
    return {"success": True, "data": Subject.model_validate(subject), "message": "Subject updated successfully"}


# ✅ [DELETE] remove a subject
@router.delete("/{subject_id}")
def delete_subject(subject_id: int, repo: SqlRecordsRepository = Depends(get_repo)):
    repo.delete(repo.get(SubjectModel, subject_id))
    return {"success": True, "data": {"subject_id": subject_id}, "message": "Subject deleted successfully"}
