from fastapi import APIRouter, Depends, Query

from config.settings import settings
from dependencies.services import get_report_service
from schemas.common import ACADEMIC_YEAR_PATTERN
from services.grading.types import Term
from services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["reports"])


# ==========================================================
# [CLASS REPORT] every student of a class with total, average, grade and position
# ==========================================================
@router.get("/class/{class_id}")
def get_class_report(
    class_id: int,
    term: Term = Query(settings.DEFAULT_TERM),
    academic_year: str = Query(settings.DEFAULT_ACADEMIC_YEAR, pattern=ACADEMIC_YEAR_PATTERN),
    service: ReportService = Depends(get_report_service),
):
    report = service.class_report(class_id, term, academic_year)
    return {
        "success": True,
        "data": report,
        "message": f"Class report for {report.class_name} ({term} {academic_year})"
    }


# ==========================================================
# [REPORT CARD] one student: subject lines, position N of M, attendance, remarks
# ==========================================================
@router.get("/student/{student_id}")
def get_report_card(
    student_id: int,
    term: Term = Query(settings.DEFAULT_TERM),
    academic_year: str = Query(settings.DEFAULT_ACADEMIC_YEAR, pattern=ACADEMIC_YEAR_PATTERN),
    service: ReportService = Depends(get_report_service),
):
    card = service.report_card(student_id, term, academic_year)
    return {"success": True, "data": card, "message": f"Report card for {card.full_name}"}


# ==========================================================
# [DASHBOARD] school wide counts and averages
# ==========================================================
@router.get("/dashboard")
def get_dashboard(service: ReportService = Depends(get_report_service)):
    return {"success": True, "data": service.dashboard(), "message": "Dashboard summary"}
