import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response, JSONResponse
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import get_db
from models.profiles import Profile as ProfileModel
from routers.grades import build_grade_report
from services.pdf_service import PDFService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pdf", tags=["PDF documents"])

pdf_service = PDFService()


def _student_or_404(db: Session, student_id: int):
    student = db.get(ProfileModel, student_id)
    if student is None or student.role != "student":
        return None, JSONResponse(
            status_code=404,
            content={"success": False, "error": {"code": 404, "message": "Student not found"}}
        )
    return student, None


def _pdf_failed(e: Exception):
    logger.exception("PDF generation failed")
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": {"code": 500, "message": f"PDF generation failed: {e}"}}
    )


# ✅ [PDF] grade transcript
@router.get("/transcript/{student_id}")
def generate_transcript_pdf(
    student_id: int,
    academic_year: str = settings.DEFAULT_ACADEMIC_YEAR,
    db: Session = Depends(get_db),
):
    student, error = _student_or_404(db, student_id)
    if error:
        return error

    report = build_grade_report(db, student_id, None, academic_year)
    try:
        pdf_content = pdf_service.generate_transcript_pdf({
            "student": student,
            "academic_year": academic_year,
            "semester": None,
            "course_averages": report.course_averages,
            "semester_averages": report.semester_averages,
            "stats": report.stats,
        })
    except Exception as e:
        return _pdf_failed(e)

    return Response(
        content=pdf_content,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=transcript_{student_id}_{academic_year}.pdf"}
    )


# ✅ [PDF] enrollment certificate
@router.get("/certificate/{student_id}")
def generate_certificate_pdf(student_id: int, db: Session = Depends(get_db)):
    student, error = _student_or_404(db, student_id)
    if error:
        return error

    try:
        pdf_content = pdf_service.generate_certificate_pdf({"student": student})
    except Exception as e:
        return _pdf_failed(e)

    return Response(
        content=pdf_content,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=certificate_{student_id}.pdf"}
    )
