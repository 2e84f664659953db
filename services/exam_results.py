"""
services/exam_results.py

Query layer between the tables and the grade aggregator.
- fetch_exam_results(): exam_results JOIN exams JOIN courses for one student
- adapt_exam_result(): joined rows -> ExamResult (grade rescaled to /20)
- filter_exam_results() / sort_by_date_desc(): what the grades page applies before display
- filter_exams_by_timing(): upcoming / past exams
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, List, Optional, Union

from sqlalchemy.orm import Session

from config.settings import settings
from models.courses import Course as CourseModel
from models.exam_results import ExamResult as ExamResultModel
from models.exams import Exam as ExamModel
from schemas.grades import MAX_GRADE, ExamResult

logger = logging.getLogger(__name__)

ALL = "all"
EXAM_TYPES = ("midterm", "final", "quiz")


def _is_all(value) -> bool:
    return value is None or (isinstance(value, str) and value.lower() == ALL)


def to_twenty_scale(grade: Optional[float], total_points: Optional[float]) -> Optional[float]:
    """Grade recorded on ``total_points`` -> grade on 20."""
    if grade is None:
        return None
    if not total_points or total_points <= 0 or total_points == MAX_GRADE:
        return float(grade)
    return grade / total_points * MAX_GRADE


# ==========================================================
# [adapter] joined rows -> ExamResult
# ==========================================================
def adapt_exam_result(result_row, exam_row=None, course_row=None) -> ExamResult:
    exam_type = getattr(exam_row, "type", None)
    total_points = getattr(exam_row, "total_points", None)
    return ExamResult(
        id=result_row.id,
        student_id=result_row.student_id,
        exam_id=result_row.exam_id,
        exam_title=getattr(exam_row, "title", None) or "Unknown exam",
        exam_type=exam_type if exam_type in EXAM_TYPES else "quiz",
        exam_date=getattr(exam_row, "date", None),
        exam_weight=getattr(exam_row, "weight", None),
        course_id=getattr(course_row, "id", None),
        course_name=getattr(course_row, "name", None) or "Unknown course",
        course_code=getattr(course_row, "code", None) or "CODE",
        semester=getattr(course_row, "semester", None) or 1,
        credits=getattr(course_row, "credits", None),
        grade=to_twenty_scale(result_row.grade, total_points),
        academic_year=getattr(exam_row, "academic_year", None) or settings.DEFAULT_ACADEMIC_YEAR,
    )


# ==========================================================
# [query] one student's results
# ==========================================================
def fetch_exam_results(
    db: Session,
    student_id: int,
    semester: Union[int, str, None] = None,
    academic_year: Optional[str] = None,
) -> List[ExamResult]:
    query = (
        db.query(ExamResultModel, ExamModel, CourseModel)
        .join(ExamModel, ExamModel.id == ExamResultModel.exam_id)
        .join(CourseModel, CourseModel.id == ExamModel.course_id)
        .filter(ExamResultModel.student_id == student_id)
    )
    if not _is_all(semester):
        query = query.filter(CourseModel.semester == int(semester))
    if not _is_all(academic_year):
        query = query.filter(ExamModel.academic_year == academic_year)

    rows = query.order_by(ExamResultModel.id).all()
    logger.debug("fetched %d exam results for student %s", len(rows), student_id)
    return [adapt_exam_result(result, exam, course) for result, exam, course in rows]


# ==========================================================
# [filter] display-side predicates
# ==========================================================
def filter_exam_results(
    results: Iterable[ExamResult],
    semester: Union[int, str, None] = None,
    academic_year: Optional[str] = None,
    status: Optional[str] = None,
    query: Optional[str] = None,
) -> List[ExamResult]:
    search = query.strip().lower() if query else ""
    filtered = []
    for r in results:
        if not _is_all(academic_year) and r.academic_year != academic_year:
            continue
        if not _is_all(semester) and str(r.semester) != str(semester):
            continue
        if not _is_all(status) and r.status != status:
            continue
        if search and not (
            search in r.exam_title.lower()
            or search in r.course_code.lower()
            or search in r.course_name.lower()
        ):
            continue
        filtered.append(r)
    return filtered


def sort_by_date_desc(results: Iterable[ExamResult]) -> List[ExamResult]:
    # undated results go last
    return sorted(results, key=lambda r: r.exam_date or date.min, reverse=True)


def filter_exams_by_timing(exams: Iterable, timing: str = ALL, now: Optional[datetime] = None) -> list:
    """Keep ``upcoming`` or ``past`` exams (anything with a ``date`` attribute)."""
    exams = list(exams)
    if timing not in ("upcoming", "past"):
        return exams
    today = (now or datetime.now()).date()
    # an exam on the current day is already past
    if timing == "upcoming":
        return [e for e in exams if e.date is not None and e.date > today]
    return [e for e in exams if e.date is not None and e.date <= today]
