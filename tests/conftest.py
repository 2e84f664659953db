import os

# settings are read at import time
os.environ["SQLALCHEMY_DATABASE_URL"] = "sqlite://"
os.environ["API_INTERNAL_TOKEN"] = "test-token"
os.environ["DEFAULT_ACADEMIC_YEAR"] = "2024-2025"

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.db import Base, get_db
from main import app
from models.courses import Course as CourseModel
from models.exam_results import ExamResult as ExamResultModel
from models.exams import Exam as ExamModel
from models.profiles import Profile as ProfileModel


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def seeded(db):
    """One student, two semester-1 courses, one semester-2 course."""
    student = ProfileModel(id=1, full_name="Awa Koffi", email="awa@school.test", role="student",
                           student_number="ES2024001", program="Computer Science", level="Bachelor 2")
    professor = ProfileModel(id=2, full_name="Jean Mensah", email="jean@school.test", role="professor")
    algo = CourseModel(id=1, name="Algorithms", code="INF101", semester=1, credits=3)
    net = CourseModel(id=2, name="Networks", code="NET102", semester=1, credits=4)
    db_course = CourseModel(id=3, name="Databases", code="DB201", semester=2, credits=5)
    db.add_all([student, professor, algo, net, db_course])

    exams = [
        ExamModel(id=1, course_id=1, title="Algo midterm", type="midterm", date=date(2024, 11, 5),
                  weight=40, total_points=20, academic_year="2024-2025"),
        ExamModel(id=2, course_id=1, title="Algo final", type="final", date=date(2025, 1, 20),
                  weight=60, total_points=20, academic_year="2024-2025"),
        ExamModel(id=3, course_id=2, title="Networks final", type="final", date=date(2025, 1, 22),
                  weight=100, total_points=40, academic_year="2024-2025"),
        ExamModel(id=4, course_id=3, title="DB quiz", type="quiz", date=date(2025, 4, 2),
                  weight=50, total_points=20, academic_year="2024-2025"),
        ExamModel(id=5, course_id=1, title="Algo midterm", type="midterm", date=date(2023, 11, 5),
                  weight=40, total_points=20, academic_year="2023-2024"),
    ]
    db.add_all(exams)
    db.add_all([
        ExamResultModel(id=1, exam_id=1, student_id=1, grade=12),
        ExamResultModel(id=2, exam_id=2, student_id=1, grade=16),
        ExamResultModel(id=3, exam_id=3, student_id=1, grade=16),    # 16/40 -> 8/20
        ExamResultModel(id=4, exam_id=4, student_id=1, grade=None),
        ExamResultModel(id=5, exam_id=5, student_id=1, grade=9),
    ])
    db.commit()
    return student
