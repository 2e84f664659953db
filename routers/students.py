from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import get_db
from models.notifications import Notification as NotificationModel
from models.profiles import Profile as ProfileModel
from schemas.profiles import Profile as ProfileSchema, ProfileCreate, Role
from services.exam_results import fetch_exam_results, sort_by_date_desc
from services.grade_aggregator import aggregate, compute_grade_stats

router = APIRouter(prefix="/students", tags=["students"])

RECENT_RESULTS = 5


# ==========================================================
# [1] CRUD
# ==========================================================

# ✅ [CREATE] add a user profile
@router.post("/")
def create_profile(profile: ProfileCreate, db: Session = Depends(get_db)):
    if db.query(ProfileModel).filter(ProfileModel.email == profile.email).first():
        return {"success": False, "error": {"code": 409, "message": "E-mail already registered"}}

    db_profile = ProfileModel(**profile.model_dump())
    db.add(db_profile)
    db.commit()
    db.refresh(db_profile)
    return {
        "success": True,
        "data": ProfileSchema.model_validate(db_profile).model_dump(),
        "message": "Profile created successfully"
    }


# ✅ [READ] all profiles, optionally by role
@router.get("/")
def read_profiles(role: Optional[Role] = None, db: Session = Depends(get_db)):
    query = db.query(ProfileModel)
    if role:
        query = query.filter(ProfileModel.role == role)
    records = query.order_by(ProfileModel.full_name).all()
    return {
        "success": True,
        "data": [ProfileSchema.model_validate(r).model_dump() for r in records],
        "message": f"{len(records)} profiles"
    }


# ✅ [READ] one profile
@router.get("/{student_id}")
def read_profile(student_id: int, db: Session = Depends(get_db)):
    profile = db.get(ProfileModel, student_id)
    if profile is None:
        return {"success": False, "error": {"code": 404, "message": "Student not found"}}
    return {"success": True, "data": ProfileSchema.model_validate(profile).model_dump()}


# ==========================================================
# [2] student dashboard
# ==========================================================
@router.get("/{student_id}/dashboard")
def read_student_dashboard(
    student_id: int,
    academic_year: str = settings.DEFAULT_ACADEMIC_YEAR,
    db: Session = Depends(get_db),
):
    profile = db.get(ProfileModel, student_id)
    if profile is None or profile.role != "student":
        return {"success": False, "error": {"code": 404, "message": "Student not found"}}

    results = fetch_exam_results(db, student_id, academic_year=academic_year)
    _, semester_averages = aggregate(results, academic_year)
    unread = (
        db.query(NotificationModel)
        .filter(NotificationModel.user_id == student_id, NotificationModel.read == False)  # noqa: E712
        .count()
    )

    return {
        "success": True,
        "data": {
            "profile": ProfileSchema.model_validate(profile).model_dump(),
            "academic_year": academic_year,
            "recent_results": [r.model_dump() for r in sort_by_date_desc(results)[:RECENT_RESULTS]],
            "unread_notifications": unread,
            "stats": compute_grade_stats(results).model_dump(),
            "semester_averages": [s.model_dump() for s in semester_averages],
        }
    }
