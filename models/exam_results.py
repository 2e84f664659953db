from datetime import datetime, timezone

from sqlalchemy import Column, Integer, Float, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from database.db import Base


def _utcnow():
    return datetime.now(timezone.utc)


class ExamResult(Base):
    __tablename__ = "exam_results"  # one row per (exam, student)
    __table_args__ = (UniqueConstraint("exam_id", "student_id", name="uq_exam_results_exam_student"),)

    id = Column(Integer, primary_key=True, index=True)                         # result ID (PK)
    exam_id = Column(Integer, ForeignKey("exams.id"), nullable=False)          # exam (FK)
    student_id = Column(Integer, ForeignKey("profiles.id"), nullable=False)    # student (FK)
    grade = Column(Float, nullable=True)                                       # points obtained, NULL = not graded yet
    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    exam = relationship("Exam", back_populates="results")
