import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import get_db
from dependencies.services import get_report_service, get_repo
from models.teachers import Teacher as TeacherModel
from schemas.common import ACADEMIC_YEAR_PATTERN
from schemas.teachers import Teacher, TeacherCreate
from services.grading.types import Term
from services.report_service import ReportService
from services.repository import SqlRecordsRepository

router = APIRouter(prefix="/teachers", tags=["teachers"])
logger = logging.getLogger(__name__)


# ✅ [CREATE] add a teacher
@router.post("/")
def create_teacher(teacher: TeacherCreate, db: Session = Depends(get_db)):
    db_teacher = TeacherModel(**teacher.to_columns())
    db.add(db_teacher)
    db.commit()
    db.refresh(db_teacher)
    logger.info("Teacher %s (%s) added", db_teacher.id, db_teacher.username)
    return {"success": True, "data": Teacher.model_validate(db_teacher), "message": "Teacher created successfully"}


# ✅ [READ] all teachers
@router.get("/")
def read_teachers(db: Session = Depends(get_db)):
    records = db.query(TeacherModel).order_by(TeacherModel.id).all()
    return {"success": True, "data": [Teacher.model_validate(r) for r in records], "message": "Teachers retrieved"}


# ✅ [READ] one teacher
@router.get("/{teacher_id}")
def read_teacher(teacher_id: int, repo: SqlRecordsRepository = Depends(get_repo)):
    teacher = repo.get(TeacherModel, teacher_id)
    return {"success": True, "data": Teacher.model_validate(teacher), "message": "Teacher retrieved"}


# ✅ [READ] assigned classes with students and their term performance
@router.get("/{teacher_id}/classes")
def get_teacher_classes(
    teacher_id: int,
    term: Term = Query(settings.DEFAULT_TERM),
    academic_year: str = Query(settings.DEFAULT_ACADEMIC_YEAR, pattern=ACADEMIC_YEAR_PATTERN),
    service: ReportService = Depends(get_report_service),
):
    data = service.teacher_classes(teacher_id, term, academic_year)
    return {
        "success": True,
        "data": data,
        "message": f"{len(data.classes)} classes, {data.total_students} students"
    }


# ✅ [UPDATE] edit a teacher
@router.put("/{teacher_id}")
def update_teacher(teacher_id: int, updated: TeacherCreate, repo: SqlRecordsRepository = Depends(get_repo)):
    teacher = repo.get(TeacherModel, teacher_id)
    for key, value in updated.to_columns().items():
        setattr(teacher, key, value)
    teacher = repo.save(teacher)
    return {"success": True, "data": Teacher.model_validate(teacher), "message": "Teacher updated successfully"}


# ✅ [DELETE] remove a teacher (their classes lose the class teacher link)
@router.delete("/{teacher_id}")
def delete_teacher(teacher_id: int, repo: SqlRecordsRepository = Depends(get_repo)):
    repo.delete_teacher(teacher_id)
    return {"success": True, "data": {"teacher_id": teacher_id}, "message": "Teacher deleted successfully"}
