from pydantic import BaseModel
from typing import Literal, Optional
from datetime import datetime

NotificationType = Literal["info", "grade", "exam", "document"]


# ==========================================================
# [input schema]
# ==========================================================
class NotificationCreate(BaseModel):
    user_id: int                             # recipient
    title: str                               # title
    message: str                             # body
    type: NotificationType = "info"          # info, grade, exam, document


# ==========================================================
# [output schema]
# ==========================================================
class Notification(NotificationCreate):
    id: int
    read: bool = False
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
