import csv
import logging
from sqlalchemy.orm import Session
from database.db import SessionLocal
from models.courses import Course as CourseModel  # ✅ model
import models.exams, models.exam_results  # noqa: F401  (mapper relationships)

logger = logging.getLogger(__name__)

CSV_PATH = "data/courses.csv"  # ✅ file path


def import_courses(db: Session, csv_path: str = CSV_PATH) -> int:
    count = 0
    with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        for row in reader:
            course = CourseModel(
                id=int(row["id"]),                                      # course ID
                name=row["name"].strip(),                               # course name
                code=row["code"].strip(),                               # course code
                semester=int(row.get("semester") or 1),                 # semester 1 / 2
                credits=int(row["credits"]) if row.get("credits") else None,  # credits
            )
            db.add(course)
            count += 1

    db.commit()
    logger.info("Imported %d courses from %s", count, csv_path)
    return count


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    db = SessionLocal()
    try:
        import_courses(db)
    finally:
        db.close()
    print("✅ courses CSV -> DB import done")
