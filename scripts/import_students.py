"""
Usage: python -m scripts.import_students [data/students.csv]

CSV columns: full_name, class_id, gender, date_of_birth, guardian_name, guardian_phone
Invalid rows (bad values, unknown class) are skipped and reported by line number.
"""
import csv
import logging
import sys

from pydantic import ValidationError
from sqlalchemy.orm import Session

from database.db import SessionLocal, init_db
from models.classes import Class as ClassModel
from models.students import Student as StudentModel  # ✅ model
from schemas.students import StudentCreate
from services.repository import RecordNotFound, SqlRecordsRepository

logger = logging.getLogger(__name__)

CSV_PATH = "data/students.csv"  # ✅ default file path


def migrate_students(db: Session, csv_path: str = CSV_PATH) -> dict:
    repo = SqlRecordsRepository(db)
    imported, rejected = 0, []

    with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        # line 1 is the header
        for line_no, row in enumerate(reader, start=2):
            try:
                # empty cells -> None so optional fields validate
                data = StudentCreate(**{k: (v or None) for k, v in row.items()})
                repo.get(ClassModel, data.class_id)
            except ValidationError as e:
                logger.warning("Line %d rejected: %s", line_no, e.errors()[0]["msg"])
                rejected.append(line_no)
                continue
            except RecordNotFound as e:
                logger.warning("Line %d rejected: %s", line_no, e)
                rejected.append(line_no)
                continue
            db.add(StudentModel(**data.model_dump()))
            imported += 1

    db.commit()
    logger.info("Imported %d students from %s (%d rejected)", imported, csv_path, len(rejected))
    return {"imported": imported, "rejected": rejected}


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
    session = SessionLocal()
    try:
        result = migrate_students(session, sys.argv[1] if len(sys.argv) > 1 else CSV_PATH)
    finally:
        session.close()
    print(f"✅ students CSV -> DB import complete ({result['imported']} imported, {len(result['rejected'])} rejected)")
