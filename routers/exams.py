import logging
from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import require_api_token
from models.courses import Course as CourseModel
from models.exam_results import ExamResult as ExamResultModel
from models.exams import Exam as ExamModel
from models.notifications import Notification as NotificationModel
from models.profiles import Profile as ProfileModel
from schemas.exams import Exam as ExamSchema, ExamCreate, ExamResultCreate, ExamResultGrade
from services.exam_results import adapt_exam_result, filter_exams_by_timing
from utils.grade_format import format_grade

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/exams", tags=["exams"])


def _exam_not_found():
    return {"success": False, "error": {"code": 404, "message": "Exam not found"}}


def _check_grade(grade: Optional[float], exam: ExamModel):
    # grades are validated here, the aggregator trusts its input
    if grade is None:
        return
    max_points = exam.total_points or 20
    if grade < 0 or grade > max_points:
        raise HTTPException(status_code=400, detail=f"Grade must be between 0 and {max_points:g}")


def _result_data(result: ExamResultModel):
    exam = result.exam
    return adapt_exam_result(result, exam, exam.course if exam else None).model_dump()


# ==========================================================
# [1] exams CRUD
# ==========================================================

# ✅ [CREATE] schedule an exam
@router.post("/", dependencies=[Depends(require_api_token)])
def create_exam(exam: ExamCreate, db: Session = Depends(get_db)):
    if db.get(CourseModel, exam.course_id) is None:
        return {"success": False, "error": {"code": 404, "message": "Course not found"}}

    db_exam = ExamModel(**exam.model_dump())
    db.add(db_exam)
    db.commit()
    db.refresh(db_exam)
    logger.info("Exam created: %s (course %s)", db_exam.id, db_exam.course_id)
    return {
        "success": True,
        "data": ExamSchema.model_validate(db_exam).model_dump(),
        "message": "Exam created successfully"
    }


# ✅ [READ] exams, by course / academic year / timing
@router.get("/")
def read_exams(
    course_id: Optional[int] = None,
    academic_year: Optional[str] = None,
    timing: Literal["upcoming", "past", "all"] = "all",
    db: Session = Depends(get_db),
):
    query = db.query(ExamModel)
    if course_id is not None:
        query = query.filter(ExamModel.course_id == course_id)
    if academic_year:
        query = query.filter(ExamModel.academic_year == academic_year)
    records = filter_exams_by_timing(query.order_by(ExamModel.date).all(), timing)
    return {
        "success": True,
        "data": [ExamSchema.model_validate(r).model_dump() for r in records]
    }


# ✅ [READ] one exam
@router.get("/{exam_id}")
def read_exam(exam_id: int, db: Session = Depends(get_db)):
    exam = db.get(ExamModel, exam_id)
    if exam is None:
        return _exam_not_found()
    return {"success": True, "data": ExamSchema.model_validate(exam).model_dump()}


# ✅ [DELETE] remove an exam and its results
@router.delete("/{exam_id}", dependencies=[Depends(require_api_token)])
def delete_exam(exam_id: int, db: Session = Depends(get_db)):
    exam = db.get(ExamModel, exam_id)
    if exam is None:
        return _exam_not_found()
    db.delete(exam)
    db.commit()
    logger.info("Exam deleted: %s", exam_id)
    return {"success": True, "data": {"exam_id": exam_id, "message": "Exam deleted successfully"}}


# ==========================================================
# [2] exam results (grading)
# ==========================================================

# ✅ [READ] results of one exam
@router.get("/{exam_id}/results")
def read_exam_results(exam_id: int, db: Session = Depends(get_db)):
    exam = db.get(ExamModel, exam_id)
    if exam is None:
        return _exam_not_found()
    records = (
        db.query(ExamResultModel)
        .filter(ExamResultModel.exam_id == exam_id)
        .order_by(ExamResultModel.student_id)
        .all()
    )
    return {"success": True, "data": [_result_data(r) for r in records]}


# ✅ [CREATE] register a student for an exam (pending until graded)
@router.post("/{exam_id}/results", dependencies=[Depends(require_api_token)])
def create_exam_result(exam_id: int, payload: ExamResultCreate, db: Session = Depends(get_db)):
    exam = db.get(ExamModel, exam_id)
    if exam is None:
        return _exam_not_found()
    student = db.get(ProfileModel, payload.student_id)
    if student is None or student.role != "student":
        return {"success": False, "error": {"code": 404, "message": "Student not found"}}

    existing = (
        db.query(ExamResultModel)
        .filter(ExamResultModel.exam_id == exam_id, ExamResultModel.student_id == payload.student_id)
        .first()
    )
    if existing:
        return {"success": False, "error": {"code": 409, "message": "Student already registered for this exam"}}

    _check_grade(payload.grade, exam)
    result = ExamResultModel(exam_id=exam_id, student_id=payload.student_id, grade=payload.grade)
    db.add(result)
    db.commit()
    db.refresh(result)
    return {"success": True, "data": _result_data(result), "message": "Exam result created"}


# ✅ [UPDATE] grade a result and notify the student
@router.put("/results/{result_id}", dependencies=[Depends(require_api_token)])
def grade_exam_result(result_id: int, payload: ExamResultGrade, db: Session = Depends(get_db)):
    result = db.get(ExamResultModel, result_id)
    if result is None:
        return {"success": False, "error": {"code": 404, "message": "Exam result not found"}}

    _check_grade(payload.grade, result.exam)
    result.grade = payload.grade

    if payload.grade is not None:
        data = adapt_exam_result(result, result.exam, result.exam.course)
        db.add(NotificationModel(
            user_id=result.student_id,
            title="New grade",
            message=f"{data.course_code} - {data.exam_title}: {format_grade(data.grade)}",
            type="grade",
        ))

    db.commit()
    db.refresh(result)
    logger.info("Exam result %s graded: %s", result_id, payload.grade)
    return {"success": True, "data": _result_data(result), "message": "Grade saved"}
