import logging
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import get_db
from models.profiles import Profile as ProfileModel
from schemas.grades import GradeReport
from services.exam_results import fetch_exam_results, filter_exam_results, sort_by_date_desc
from services.grade_aggregator import aggregate, compute_course_averages, compute_grade_stats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/grades", tags=["grades"])

SemesterFilter = Optional[Literal["1", "2", "all"]]


def _student_not_found():
    return {"success": False, "error": {"code": 404, "message": "Student not found"}}


def _semester(value: SemesterFilter) -> Optional[int]:
    return int(value) if value and value != "all" else None


def _load_results(db: Session, student_id: int, semester: SemesterFilter, academic_year: str):
    return fetch_exam_results(db, student_id, semester=_semester(semester), academic_year=academic_year)


# ==========================================================
# [1] exam results of one student
# ==========================================================

# ✅ [READ] results, most recent exam first
@router.get("/student/{student_id}/results")
def read_student_results(
    student_id: int,
    semester: SemesterFilter = None,
    academic_year: str = settings.DEFAULT_ACADEMIC_YEAR,
    status: Optional[Literal["graded", "pending"]] = None,
    q: Optional[str] = Query(None, description="search in exam title, course code and course name"),
    db: Session = Depends(get_db),
):
    if db.get(ProfileModel, student_id) is None:
        return _student_not_found()

    results = _load_results(db, student_id, semester, academic_year)
    results = sort_by_date_desc(filter_exam_results(results, status=status, query=q))
    return {
        "success": True,
        "data": [r.model_dump() for r in results],
        "message": f"{len(results)} exam results"
    }


# ==========================================================
# [2] averages
# ==========================================================

# ✅ [COURSES] weighted average per course
@router.get("/student/{student_id}/courses")
def read_course_averages(
    student_id: int,
    semester: SemesterFilter = None,
    academic_year: str = settings.DEFAULT_ACADEMIC_YEAR,
    db: Session = Depends(get_db),
):
    if db.get(ProfileModel, student_id) is None:
        return _student_not_found()

    course_averages = compute_course_averages(_load_results(db, student_id, semester, academic_year))
    return {"success": True, "data": [c.model_dump() for c in course_averages]}


# ✅ [SEMESTERS] credit-weighted average per semester
@router.get("/student/{student_id}/semesters")
def read_semester_averages(
    student_id: int,
    semester: SemesterFilter = None,
    academic_year: str = settings.DEFAULT_ACADEMIC_YEAR,
    db: Session = Depends(get_db),
):
    if db.get(ProfileModel, student_id) is None:
        return _student_not_found()

    _, semester_averages = aggregate(_load_results(db, student_id, semester, academic_year), academic_year)
    return {"success": True, "data": [s.model_dump() for s in semester_averages]}


# ✅ [STATS] overall average / best / worst grade
@router.get("/student/{student_id}/stats")
def read_grade_stats(
    student_id: int,
    semester: SemesterFilter = None,
    academic_year: str = settings.DEFAULT_ACADEMIC_YEAR,
    db: Session = Depends(get_db),
):
    if db.get(ProfileModel, student_id) is None:
        return _student_not_found()

    stats = compute_grade_stats(_load_results(db, student_id, semester, academic_year))
    return {"success": True, "data": stats.model_dump()}


# ==========================================================
# [3] full report (results + courses + semesters + stats)
# ==========================================================
def build_grade_report(db: Session, student_id: int, semester: Optional[int], academic_year: str) -> GradeReport:
    results = fetch_exam_results(db, student_id, semester=semester, academic_year=academic_year)
    course_averages, semester_averages = aggregate(results, academic_year)
    return GradeReport(
        student_id=student_id,
        academic_year=academic_year,
        semester=semester,
        results=sort_by_date_desc(results),
        course_averages=course_averages,
        semester_averages=semester_averages,
        stats=compute_grade_stats(results),
    )


@router.get("/student/{student_id}/report")
def read_grade_report(
    student_id: int,
    semester: SemesterFilter = None,
    academic_year: str = settings.DEFAULT_ACADEMIC_YEAR,
    db: Session = Depends(get_db),
):
    if db.get(ProfileModel, student_id) is None:
        return _student_not_found()

    report = build_grade_report(db, student_id, _semester(semester), academic_year)
    logger.debug(
        "grade report student=%s year=%s courses=%d semesters=%d",
        student_id, academic_year, len(report.course_averages), len(report.semester_averages),
    )
    return {"success": True, "data": report.model_dump()}
