import csv
import logging
from sqlalchemy.orm import Session
from database.db import SessionLocal
from models.exam_results import ExamResult as ExamResultModel  # ✅ model
import models.courses, models.exams  # noqa: F401  (mapper relationships)

logger = logging.getLogger(__name__)

CSV_PATH = "data/exam_results.csv"  # ✅ file path


def _grade(value):
    value = (value or "").strip()
    return float(value) if value else None  # empty cell = not graded yet


def import_exam_results(db: Session, csv_path: str = CSV_PATH) -> int:
    count = 0
    with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        for row in reader:
            result = ExamResultModel(
                exam_id=int(row["exam_id"]),            # exam ID
                student_id=int(row["student_id"]),      # student ID
                grade=_grade(row.get("grade")),         # points or NULL
            )
            db.add(result)
            count += 1

    db.commit()
    logger.info("Imported %d exam results from %s", count, csv_path)
    return count


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    db = SessionLocal()
    try:
        import_exam_results(db)
    finally:
        db.close()
    print("✅ exam results CSV -> DB import done")
