from sqlalchemy import Column, Integer, Float, String, Date, ForeignKey
from sqlalchemy.orm import relationship
from database.db import Base

class Exam(Base):
    __tablename__ = "exams"  # exams of a course

    id = Column(Integer, primary_key=True, index=True)                       # exam ID (PK)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False)    # course (FK)
    title = Column(String(150), nullable=False)                              # exam title
    type = Column(String(20), nullable=False, default="midterm")             # midterm, final, quiz
    date = Column(Date, nullable=False)                                      # exam date
    weight = Column(Float, nullable=True)                                    # coefficient inside the course (0-100)
    total_points = Column(Float, nullable=True)                              # points the grade is recorded on (NULL = 20)
    academic_year = Column(String(9), nullable=False)                        # e.g. 2024-2025

    # ==========================================================
    # [relations]
    # ==========================================================
    course = relationship("Course", back_populates="exams")
    results = relationship(
        "ExamResult",
        back_populates="exam",
        cascade="all, delete-orphan"
    )
