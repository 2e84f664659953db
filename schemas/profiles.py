from pydantic import BaseModel
from typing import Literal, Optional

Role = Literal["admin", "professor", "student"]


# ✅ input (POST)
class ProfileCreate(BaseModel):
    full_name: str                           # display name
    email: str                               # login e-mail
    role: Role = "student"                   # admin, professor, student
    student_number: Optional[str] = None     # registration number
    program: Optional[str] = None            # study program
    level: Optional[str] = None              # study level


# ✅ output (GET)
class Profile(ProfileCreate):
    id: int

    class Config:
        from_attributes = True
