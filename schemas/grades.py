"""
schemas/grades.py

Types consumed and produced by the grade aggregator.
- ExamResult: one exam result joined with its exam and course (frozen, never mutated)
- CourseAverage / SemesterAverage: derived on every aggregation pass, never persisted
- GradeStats / GradeReport: what the grades pages display
"""

from __future__ import annotations

from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, computed_field

MAX_GRADE = 20.0
PASSING_GRADE = 10.0  # half of MAX_GRADE, not configurable

ExamType = Literal["midterm", "final", "quiz"]
ResultStatus = Literal["graded", "pending"]
CourseStatus = Literal["passed", "failed", "pending"]


# ==========================================================
# [input] exam results
# ==========================================================
class ExamResult(BaseModel):
    id: Optional[int] = None                 # exam_results row ID
    student_id: Optional[int] = None         # student
    exam_id: int                             # exam ID
    exam_title: str                          # exam title
    exam_type: ExamType = "quiz"             # midterm, final, quiz
    exam_date: Optional[date] = None         # exam date
    exam_weight: Optional[float] = None      # coefficient inside the course (0-100)
    course_id: Optional[int] = None          # course ID
    course_name: str = ""                    # course name
    course_code: str = ""                    # course code
    semester: int = 1                        # 1 or 2
    credits: Optional[int] = None            # course credits
    grade: Optional[float] = None            # on the 0-20 scale, None = not graded
    max_grade: float = MAX_GRADE             # always 20
    academic_year: Optional[str] = None      # e.g. 2024-2025

    model_config = ConfigDict(frozen=True, from_attributes=True)

    @computed_field  # type: ignore[misc]
    @property
    def status(self) -> ResultStatus:
        return "graded" if self.grade is not None else "pending"


# ==========================================================
# [output] averages
# ==========================================================
class CourseAverage(BaseModel):
    course_id: Optional[int] = None
    course_name: str = ""
    course_code: str = ""
    semester: int = 1
    credits: Optional[int] = None
    average: Optional[float] = None
    status: CourseStatus = "pending"


class SemesterAverage(BaseModel):
    academic_year: Optional[str] = None
    semester: int
    average: Optional[float] = None
    credits: int = 0                         # credits of courses with at least one graded exam
    validated_credits: int = 0               # credits of passed courses
    status: CourseStatus = "pending"


class GradeStats(BaseModel):
    average: Optional[float] = None
    highest: Optional[float] = None
    lowest: Optional[float] = None
    count: int = 0


class GradeReport(BaseModel):
    student_id: int
    academic_year: Optional[str] = None
    semester: Optional[int] = None           # None = all semesters
    results: List[ExamResult] = []
    course_averages: List[CourseAverage] = []
    semester_averages: List[SemesterAverage] = []
    stats: GradeStats = GradeStats()
