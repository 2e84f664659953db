from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from database.db import Base

class Course(Base):
    __tablename__ = "courses"  # course catalog

    id = Column(Integer, primary_key=True, index=True)                   # course ID (PK)
    name = Column(String(100), nullable=False)                           # course name (e.g. Algorithms)
    code = Column(String(20), nullable=False, unique=True)               # course code (e.g. INF101)
    semester = Column(Integer, nullable=False, default=1)                # semester 1 or 2
    credits = Column(Integer, nullable=True)                             # ECTS credits, NULL counts as 0

    # ==========================================================
    # [relations]
    # ==========================================================

    # ✅ teaching professor (FK, optional)
    professor_id = Column(Integer, ForeignKey("profiles.id"), nullable=True)

    # ✅ exams of this course (1:N)
    exams = relationship(
        "Exam",
        back_populates="course",
        cascade="all, delete-orphan"
    )
