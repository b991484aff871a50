import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.services import get_repo
from models.classes import Class as ClassModel
from models.students import Student as StudentModel
from schemas.common import Pagination, make_meta
from schemas.students import Student, StudentCreate
from services.repository import SqlRecordsRepository

router = APIRouter(prefix="/students", tags=["students"])
logger = logging.getLogger(__name__)


# ==========================================================
# [1] CRUD
# ==========================================================

# ✅ [CREATE] add a student
@router.post("/")
def create_student(student: StudentCreate, repo: SqlRecordsRepository = Depends(get_repo)):
    repo.get(ClassModel, student.class_id)
    db_student = repo.save(StudentModel(**student.model_dump()))
    logger.info("Student %s added to class %s", db_student.id, db_student.class_id)
    return {
        "success": True,
        "data": Student.model_validate(db_student),
        "message": "Student created successfully"
    }


# ✅ [READ] list students (paged, optional name search)
@router.get("/")
def read_students(name: str = None, p: Pagination = Depends(), db: Session = Depends(get_db)):
    query = db.query(StudentModel)
    if name:
        query = query.filter(StudentModel.full_name.contains(name))
    total = query.count()
    records = query.order_by(StudentModel.id).offset((p.page - 1) * p.size).limit(p.size).all()
    return {
        "success": True,
        "data": [Student.model_validate(r) for r in records],
        "meta": make_meta(total, p.page, p.size),
        "message": "Students retrieved"
    }


# ==========================================================
# [2] static routes (must precede /{student_id})
# ==========================================================

# ✅ [READ] students of one class
@router.get("/class/{class_id}")
def get_students_by_class(class_id: int, repo: SqlRecordsRepository = Depends(get_repo)):
    students = repo.students_in_class(class_id)
    return {
        "success": True,
        "data": [Student.model_validate(s) for s in students],
        "message": f"{len(students)} students in class {class_id}"
    }


# ==========================================================
# [3] dynamic routes
# ==========================================================

# ✅ [READ] one student
@router.get("/{student_id}")
def read_student(student_id: int, repo: SqlRecordsRepository = Depends(get_repo)):
    student = repo.get(StudentModel, student_id)
    return {"success": True, "data": Student.model_validate(student), "message": "Student retrieved"}


# ✅ [UPDATE] edit a student
@router.put("/{student_id}")
def update_student(student_id: int, updated: StudentCreate, repo: SqlRecordsRepository = Depends(get_repo)):
    student = repo.get(StudentModel, student_id)
    repo.get(ClassModel, updated.class_id)
    for key, value in updated.model_dump().items():
        setattr(student, key, value)
    student = repo.save(student)
    return {"success": True, "data": Student.model_validate(student), "message": "Student updated successfully"}


# ✅ [DELETE] remove a student with their scores, attendance and comments
@router.delete("/{student_id}")
def delete_student(student_id: int, repo: SqlRecordsRepository = Depends(get_repo)):
    repo.delete_student(student_id)
    return {"success": True, "data": {"student_id": student_id}, "message": "Student deleted successfully"}
