"""
Usage: python -m scripts.import_scores [data/scores.csv]

CSV columns: student_id, subject_id, term, academic_year, class_score, exam_score
Rows go through RecordsService, so derived columns are computed and an
existing student/subject/term/year row is updated instead of duplicated.
"""
import csv
import logging
import sys

from pydantic import ValidationError
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import SessionLocal, init_db
from schemas.scores import ScoreCreate
from services.grading.errors import GradingError
from services.records_service import RecordsService
from services.repository import RecordNotFound, SqlRecordsRepository

logger = logging.getLogger(__name__)

CSV_PATH = "data/scores.csv"  # ✅ default file path


def migrate_scores(db: Session, csv_path: str = CSV_PATH) -> dict:
    service = RecordsService(SqlRecordsRepository(db), settings.CLASS_SCORE_WEIGHT, settings.EXAM_SCORE_WEIGHT)
    imported, rejected = 0, []

    with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        # line 1 is the header
        for line_no, row in enumerate(reader, start=2):
            try:
                service.record_score(ScoreCreate(**row))
            except ValidationError as e:
                logger.warning("Line %d rejected: %s", line_no, e.errors()[0]["msg"])
                rejected.append(line_no)
                continue
            except (RecordNotFound, GradingError) as e:
                logger.warning("Line %d rejected: %s", line_no, e)
                rejected.append(line_no)
                continue
            imported += 1

    logger.info("Imported %d scores from %s (%d rejected)", imported, csv_path, len(rejected))
    return {"imported": imported, "rejected": rejected}


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
    session = SessionLocal()
    try:
        result = migrate_scores(session, sys.argv[1] if len(sys.argv) > 1 else CSV_PATH)
    finally:
        session.close()
    print(f"✅ scores CSV -> DB import complete ({result['imported']} imported, {len(result['rejected'])} rejected)")
