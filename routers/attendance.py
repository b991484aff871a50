from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.services import get_records_service, get_repo
from models.attendance import Attendance as AttendanceModel
from models.students import Student as StudentModel
from schemas.attendance import Attendance, AttendanceCreate, AttendanceUpdate
from services.records_service import RecordsService
from services.repository import SqlRecordsRepository

router = APIRouter(prefix="/attendance", tags=["attendance"])


# ✅ [UPSERT] save a term tally (one row per student/term/year)
@router.post("/")
def save_attendance(payload: AttendanceCreate, service: RecordsService = Depends(get_records_service)):
    record = service.record_attendance(payload)
    return {"success": True, "data": Attendance.model_validate(record), "message": "Attendance saved successfully"}


# ✅ [READ] tallies, filtered by student / class / term / year
@router.get("/")
def read_attendance(
    student_id: Optional[int] = None,
    class_id: Optional[int] = None,
    term: Optional[str] = None,
    academic_year: Optional[str] = None,
    db: Session = Depends(get_db),
):
    query = db.query(AttendanceModel)
    if class_id is not None:
        query = query.join(StudentModel, StudentModel.id == AttendanceModel.student_id).filter(StudentModel.class_id == class_id)
    if student_id is not None:
        query = query.filter(AttendanceModel.student_id == student_id)
    if term:
        query = query.filter(AttendanceModel.term == term)
    if academic_year:
        query = query.filter(AttendanceModel.academic_year == academic_year)
    records = query.order_by(AttendanceModel.id).all()
    return {"success": True, "data": [Attendance.model_validate(r) for r in records], "message": "Attendance retrieved"}


# ✅ [READ] one tally
@router.get("/{attendance_id}")
def read_attendance_record(attendance_id: int, repo: SqlRecordsRepository = Depends(get_repo)):
    record = repo.get(AttendanceModel, attendance_id)
    return {"success": True, "data": Attendance.model_validate(record), "message": "Attendance retrieved"}


# ✅ [UPDATE] change day counts; percentage is recomputed
@router.put("/{attendance_id}")
def update_attendance(attendance_id: int, changes: AttendanceUpdate, service: RecordsService = Depends(get_records_service)):
    record = service.update_attendance(attendance_id, changes)
    return {"success": True, "data": Attendance.model_validate(record), "message": "Attendance updated successfully"}


# ✅ [DELETE] remove a tally
@router.delete("/{attendance_id}")
def delete_attendance(attendance_id: int, repo: SqlRecordsRepository = Depends(get_repo)):
    repo.delete(repo.get(AttendanceModel, attendance_id))
    return {"success": True, "data": {"attendance_id": attendance_id}, "message": "Attendance deleted successfully"}
