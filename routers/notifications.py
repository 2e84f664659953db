import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.db import get_db
from models.notifications import Notification as NotificationModel
from schemas.common import make_meta
from schemas.notifications import Notification as NotificationSchema, NotificationCreate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_not_found():
    return {"success": False, "error": {"code": 404, "message": "Notification not found"}}


# ==========================================================
# [1] create / list
# ==========================================================

# ✅ [CREATE] send a notification
@router.post("/")
def create_notification(notification: NotificationCreate, db: Session = Depends(get_db)):
    db_notification = NotificationModel(**notification.model_dump())
    db.add(db_notification)
    db.commit()
    db.refresh(db_notification)
    return {
        "success": True,
        "data": NotificationSchema.model_validate(db_notification).model_dump(),
        "message": "Notification sent"
    }


# ✅ [READ] notifications of a user, newest first
@router.get("/user/{user_id}")
def read_user_notifications(
    user_id: int,
    unread_only: bool = False,
    page: int = Query(1, ge=1),
    size: int = Query(20, ge=1, le=200),
    db: Session = Depends(get_db),
):
    query = db.query(NotificationModel).filter(NotificationModel.user_id == user_id)
    if unread_only:
        query = query.filter(NotificationModel.read == False)  # noqa: E712
    total = query.count()
    records = (
        query.order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        .offset((page - 1) * size)
        .limit(size)
        .all()
    )
    return {
        "success": True,
        "data": [NotificationSchema.model_validate(r).model_dump() for r in records],
        "meta": make_meta(total, page, size).model_dump(),
    }


# ✅ [COUNT] unread badge
@router.get("/user/{user_id}/unread-count")
def count_unread_notifications(user_id: int, db: Session = Depends(get_db)):
    count = (
        db.query(NotificationModel)
        .filter(NotificationModel.user_id == user_id, NotificationModel.read == False)  # noqa: E712
        .count()
    )
    return {"success": True, "data": {"user_id": user_id, "unread": count}}


# ==========================================================
# [2] read flags
# ==========================================================

# ✅ [UPDATE] mark one as read
@router.put("/{notification_id}/read")
def mark_notification_read(notification_id: int, db: Session = Depends(get_db)):
    notification = db.get(NotificationModel, notification_id)
    if notification is None:
        return _notification_not_found()
    notification.read = True
    db.commit()
    db.refresh(notification)
    return {"success": True, "data": NotificationSchema.model_validate(notification).model_dump()}


# ✅ [UPDATE] mark all of a user's notifications as read
@router.put("/user/{user_id}/read-all")
def mark_all_notifications_read(user_id: int, db: Session = Depends(get_db)):
    updated = (
        db.query(NotificationModel)
        .filter(NotificationModel.user_id == user_id, NotificationModel.read == False)  # noqa: E712
        .update({NotificationModel.read: True}, synchronize_session=False)
    )
    db.commit()
    return {"success": True, "data": {"user_id": user_id, "updated": updated}}


# ==========================================================
# [3] delete
# ==========================================================

# ✅ [DELETE] one notification
@router.delete("/{notification_id}")
def delete_notification(notification_id: int, db: Session = Depends(get_db)):
    notification = db.get(NotificationModel, notification_id)
    if notification is None:
        return _notification_not_found()
    db.delete(notification)
    db.commit()
    return {"success": True, "data": {"notification_id": notification_id, "message": "Notification deleted"}}


# ✅ [DELETE] every read notification of a user
@router.delete("/user/{user_id}/read")
def delete_read_notifications(user_id: int, db: Session = Depends(get_db)):
    deleted = (
        db.query(NotificationModel)
        .filter(NotificationModel.user_id == user_id, NotificationModel.read == True)  # noqa: E712
        .delete(synchronize_session=False)
    )
    db.commit()
    logger.info("Deleted %d read notifications of user %s", deleted, user_id)
    return {"success": True, "data": {"user_id": user_id, "deleted": deleted}}
