from sqlalchemy import Column, Integer, String
from database.db import Base

class Profile(Base):
    __tablename__ = "profiles"  # intranet users (admin / professor / student)

    id = Column(Integer, primary_key=True, index=True)               # user ID (Primary Key)
    full_name = Column(String(100), nullable=False)                  # display name
    email = Column(String(120), nullable=False, unique=True)         # login e-mail
    role = Column(String(20), nullable=False, default="student")     # admin, professor, student
    student_number = Column(String(20))                              # registration number (students only)
    program = Column(String(100))                                    # study program (e.g. Computer Science)
    level = Column(String(50))                                       # study level (e.g. Bachelor 2)
