import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import require_api_token
from models.courses import Course as CourseModel
from schemas.courses import Course as CourseSchema, CourseCreate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["courses"])


def _course_not_found():
    return {"success": False, "error": {"code": 404, "message": "Course not found"}}


# ==========================================================
# [1] CRUD
# ==========================================================

# ✅ [CREATE] add a course
@router.post("/", dependencies=[Depends(require_api_token)])
def create_course(course: CourseCreate, db: Session = Depends(get_db)):
    if db.query(CourseModel).filter(CourseModel.code == course.code).first():
        return {"success": False, "error": {"code": 409, "message": f"Course code {course.code} already exists"}}

    db_course = CourseModel(**course.model_dump())
    db.add(db_course)
    db.commit()
    db.refresh(db_course)
    logger.info("Course created: %s (%s)", db_course.code, db_course.id)
    return {
        "success": True,
        "data": CourseSchema.model_validate(db_course).model_dump(),
        "message": "Course created successfully"
    }


# ✅ [READ] all courses, optionally for one semester
@router.get("/")
def read_courses(semester: Optional[int] = None, db: Session = Depends(get_db)):
    query = db.query(CourseModel)
    if semester is not None:
        query = query.filter(CourseModel.semester == semester)
    records = query.order_by(CourseModel.semester, CourseModel.code).all()
    return {
        "success": True,
        "data": [CourseSchema.model_validate(r).model_dump() for r in records]
    }


# ✅ [READ] one course
@router.get("/{course_id}")
def read_course(course_id: int, db: Session = Depends(get_db)):
    course = db.get(CourseModel, course_id)
    if course is None:
        return _course_not_found()
    return {"success": True, "data": CourseSchema.model_validate(course).model_dump()}


# ✅ [UPDATE] edit a course
@router.put("/{course_id}", dependencies=[Depends(require_api_token)])
def update_course(course_id: int, updated: CourseCreate, db: Session = Depends(get_db)):
    course = db.get(CourseModel, course_id)
    if course is None:
        return _course_not_found()

    for key, value in updated.model_dump().items():
        setattr(course, key, value)

    db.commit()
    db.refresh(course)
    return {
        "success": True,
        "data": CourseSchema.model_validate(course).model_dump(),
        "message": "Course updated successfully"
    }


# ✅ [DELETE] remove a course (its exams and results go with it)
@router.delete("/{course_id}", dependencies=[Depends(require_api_token)])
def delete_course(course_id: int, db: Session = Depends(get_db)):
    course = db.get(CourseModel, course_id)
    if course is None:
        return _course_not_found()

    db.delete(course)
    db.commit()
    logger.info("Course deleted: %s", course_id)
    return {
        "success": True,
        "data": {"course_id": course_id, "message": "Course deleted successfully"}
    }
