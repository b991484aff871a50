from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.services import get_repo
from models.classes import Class as ClassModel
from schemas.classes import Class, ClassCreate
from services.repository import SqlRecordsRepository

router = APIRouter(prefix="/classes", tags=["classes"])

# ==========================================================
# [1] CRUD
# ==========================================================

# ✅ [CREATE] add a class
# - e.g. register "JHS 2A" at level "JHS 2"
@router.post("/")
def create_class(new_class: ClassCreate, db: Session = Depends(get_db)):
    db_class = ClassModel(**new_class.model_dump())
    db.add(db_class)
    db.commit()
    db.refresh(db_class)
    return {"success": True, "data": Class.model_validate(db_class), "message": "Class created successfully"}

# ✅ [READ] all classes
@router.get("/")
def read_classes(db: Session = Depends(get_db)):
    records = db.query(ClassModel).order_by(ClassModel.name).all()
    return {"success": True, "data": [Class.model_validate(r) for r in records], "message": "Classes retrieved"}

# ✅ [READ] one class
@router.get("/{class_id}")
def read_class(class_id: int, repo: SqlRecordsRepository = Depends(get_repo)):
    cls = repo.get(ClassModel, class_id)
    return {
        "success": True,
        "data": {**Class.model_validate(cls).model_dump(), "student_count": len(repo.students_in_class(class_id))},
        "message": "Class retrieved"
    }

# ✅ [UPDATE] edit a class
@router.put("/{class_id}")
def update_class(class_id: int, updated: ClassCreate, repo: SqlRecordsRepository = Depends(get_repo)):
    cls = repo.get(ClassModel, class_id)
    for key, value in updated.model_dump().items():
        setattr(cls, key, value)
    cls = repo.save(cls)
    return {"success": True, "data": Class.model_validate(cls), "message": "Class updated successfully"}

# ✅ [DELETE] remove an empty class
# - students must be moved or removed first (409 otherwise)
@router.delete("/{class_id}")
def delete_class(class_id: int, repo: SqlRecordsRepository = Depends(get_repo)):
    cls = repo.get(ClassModel, class_id)
    enrolled = len(repo.students_in_class(class_id))
    if enrolled:
        raise HTTPException(status_code=409, detail=f"Class {class_id} still has {enrolled} students")
    repo.delete(cls)
    return {"success": True, "data": {"class_id": class_id}, "message": "Class deleted successfully"}
