from typing import Optional

from schemas.grades import MAX_GRADE


# ✅ "14.40/20" or "N/A"
def format_grade(grade: Optional[float]) -> str:
    return f"{grade:.2f}/{MAX_GRADE:.0f}" if grade is not None else "N/A"


# ✅ colour level used by the progress bars
def grade_level(average: Optional[float]) -> Optional[str]:
    if average is None:
        return None
    if average >= 16:
        return "success"
    if average >= 14:
        return "info"
    if average >= 10:
        return "warning"
    return "error"


# ✅ grade on 20 -> percentage, capped at 100
def grade_percent(average: Optional[float]) -> float:
    if average is None:
        return 0.0
    return min(average * 100 / MAX_GRADE, 100.0)
