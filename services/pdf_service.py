import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from config.settings import settings
from utils.grade_format import format_grade, grade_level, grade_percent

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


class PDFService:
    def __init__(self, template_dir: Optional[str] = None):
        # template environment
        template_dir = template_dir or settings.TEMPLATE_DIR or DEFAULT_TEMPLATE_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html"]),
        )
        self.env.filters["grade"] = format_grade
        self.env.filters["grade_level"] = grade_level
        self.env.filters["grade_percent"] = grade_percent

    def _render_template(self, template_name: str, data: Dict[str, Any]) -> str:
        """Render a template to HTML"""
        template = self.env.get_template(template_name)
        return template.render(school_name=settings.SCHOOL_NAME, **data)

    def _html_to_pdf(self, html_content: str) -> bytes:
        """HTML -> PDF"""
        # WeasyPrint pulls in pango/cairo at import time, load it only when a PDF is produced
        import weasyprint

        return weasyprint.HTML(string=html_content).write_pdf()

    # ==========================================================
    # [transcript] grade transcript
    # ==========================================================
    def render_transcript(self, data: Dict[str, Any]) -> str:
        data = {"generated_date": date.today().isoformat(), **data}
        return self._render_template("transcript.html", data)

    def generate_transcript_pdf(self, data: Dict[str, Any]) -> bytes:
        html = self.render_transcript(data)
        logger.info("Rendering transcript PDF (%d chars of HTML)", len(html))
        return self._html_to_pdf(html)

    # ==========================================================
    # [certificate] enrollment certificate
    # ==========================================================
    def render_certificate(self, data: Dict[str, Any]) -> str:
        student = data["student"]
        context = {
            "issue_date": date.today().strftime("%d/%m/%Y"),
            "academic_year": settings.DEFAULT_ACADEMIC_YEAR,
            "program": getattr(student, "program", None) or "Computer Science",
            "level": getattr(student, "level", None) or "Bachelor",
            "student_number": getattr(student, "student_number", None) or f"STU{student.id:06d}",
            **data,
        }
        return self._render_template("certificate.html", context)

    def generate_certificate_pdf(self, data: Dict[str, Any]) -> bytes:
        html = self.render_certificate(data)
        logger.info("Rendering certificate PDF for student %s", data["student"].id)
        return self._html_to_pdf(html)
