from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey
from database.db import Base

class Notification(Base):
    __tablename__ = "notifications"  # per-user notifications

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)      # notification ID
    user_id = Column(Integer, ForeignKey("profiles.id"), nullable=False)        # recipient
    title = Column(String(100), nullable=False)                                 # short title
    message = Column(String(500), nullable=False)                               # body
    type = Column(String(20), nullable=False, default="info")                   # info, grade, exam, document
    read = Column(Boolean, default=False, nullable=False)                       # read flag
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
