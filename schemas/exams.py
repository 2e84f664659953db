from pydantic import BaseModel, Field
from typing import Literal, Optional
from datetime import date


# ==========================================================
# [input schemas]
# ==========================================================
class ExamCreate(BaseModel):
    course_id: int                                             # course
    title: str                                                 # exam title
    type: Literal["midterm", "final", "quiz"] = "midterm"      # exam type
    date: date                                                 # exam date
    weight: Optional[float] = Field(1, ge=0, le=100)           # coefficient inside the course
    total_points: Optional[float] = Field(20, gt=0)            # points the grade is recorded on
    academic_year: str = Field(..., pattern=r"^\d{4}-\d{4}$")  # e.g. 2024-2025


class ExamResultCreate(BaseModel):
    student_id: int                                            # enrolled student
    grade: Optional[float] = Field(None, ge=0)                 # points, None = not graded yet


class ExamResultGrade(BaseModel):
    grade: Optional[float] = Field(..., ge=0)                  # points, None clears the grade


# ==========================================================
# [output schema]
# ==========================================================
class Exam(ExamCreate):
    id: int

    class Config:
        from_attributes = True
