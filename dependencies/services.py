from fastapi import Depends
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import get_db
from services.records_service import RecordsService
from services.report_service import ReportService
from services.repository import SqlRecordsRepository


def get_repo(db: Session = Depends(get_db)) -> SqlRecordsRepository:
    return SqlRecordsRepository(db)


def get_records_service(repo: SqlRecordsRepository = Depends(get_repo)) -> RecordsService:
    return RecordsService(repo, settings.CLASS_SCORE_WEIGHT, settings.EXAM_SCORE_WEIGHT)


def get_report_service(repo: SqlRecordsRepository = Depends(get_repo)) -> ReportService:
    return ReportService(repo)
