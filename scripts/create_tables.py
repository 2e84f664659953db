import logging
from database.db import Base, engine
# every model must be imported before create_all
import models.profiles, models.courses, models.exams, models.exam_results, models.notifications  # noqa: F401

logger = logging.getLogger(__name__)


def create_tables(bind=engine):
    Base.metadata.create_all(bind=bind)
    logger.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables)))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_tables()
    print("✅ tables created")
