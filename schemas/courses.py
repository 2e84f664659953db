from pydantic import BaseModel, Field
from typing import Optional


# ==========================================================
# [input schema]
# ==========================================================
class CourseCreate(BaseModel):
    name: str                                          # course name
    code: str                                          # course code (unique)
    semester: int = Field(1, ge=1, le=2)               # semester 1 or 2
    credits: Optional[int] = Field(3, gt=0)            # ECTS credits
    professor_id: Optional[int] = None                 # teaching professor


# ==========================================================
# [output schema]
# ==========================================================
class Course(CourseCreate):
    id: int                                            # course ID

    class Config:
        from_attributes = True
