"""
services/grade_aggregator.py

Per-course and per-semester averages for one student.

- Course average: exam grades weighted by exam weight. Only results with a grade
  (and a weight) take part, ungraded exams are left out of both sums.
- Semester average: course averages weighted by course credits. Only courses that
  already have an average take part.
- Semester status: any failed course fails the semester, otherwise one passed
  course passes it, otherwise it stays pending. The numeric semester average
  never decides the status.

Everything here is pure: no I/O, inputs are not mutated, output order is the
order in which each course / semester first appears.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from schemas.grades import (
    PASSING_GRADE,
    CourseAverage,
    CourseStatus,
    ExamResult,
    GradeStats,
    SemesterAverage,
)


def course_status(average: Optional[float]) -> CourseStatus:
    if average is None:
        return "pending"
    return "passed" if average >= PASSING_GRADE else "failed"


def semester_status(courses: Iterable[CourseAverage]) -> CourseStatus:
    statuses = {c.status for c in courses}
    # priority order: failed > passed > pending
    if "failed" in statuses:
        return "failed"
    if "passed" in statuses:
        return "passed"
    return "pending"


def compute_course_averages(results: Sequence[ExamResult]) -> List[CourseAverage]:
    """Weighted average of every course appearing in ``results``."""
    groups: Dict[Optional[int], List[ExamResult]] = {}
    for result in results:
        groups.setdefault(result.course_id, []).append(result)

    averages: List[CourseAverage] = []
    for course_id, course_results in groups.items():
        total_weighted_grade = 0.0
        total_weight = 0.0
        for r in course_results:
            if r.grade is None or r.exam_weight is None:
                continue
            total_weighted_grade += r.grade * r.exam_weight
            total_weight += r.exam_weight

        average = total_weighted_grade / total_weight if total_weight > 0 else None

        first = course_results[0]  # course fields are the same for every exam of a course
        averages.append(
            CourseAverage(
                course_id=course_id,
                course_name=first.course_name,
                course_code=first.course_code,
                semester=first.semester,
                credits=first.credits,
                average=average,
                status=course_status(average),
            )
        )
    return averages


def compute_semester_averages(
    course_averages: Sequence[CourseAverage],
    academic_year: Optional[str] = None,
) -> List[SemesterAverage]:
    """Credit-weighted average per (academic_year, semester).

    ``academic_year`` is the year currently selected by the caller, it is not
    read from the courses.
    """
    groups: Dict[Tuple[Optional[str], int], List[CourseAverage]] = {}
    for course in course_averages:
        groups.setdefault((academic_year, course.semester), []).append(course)

    averages: List[SemesterAverage] = []
    for (year, semester), courses in groups.items():
        total_weighted_grade = 0.0
        total_credits = 0
        validated_credits = 0
        for course in courses:
            credits = course.credits or 0
            if course.status == "passed":
                validated_credits += credits
            if course.average is None:
                continue
            total_weighted_grade += course.average * credits
            total_credits += credits

        average = total_weighted_grade / total_credits if total_credits > 0 else None

        averages.append(
            SemesterAverage(
                academic_year=year,
                semester=semester,
                average=average,
                credits=total_credits,
                validated_credits=validated_credits,
                status=semester_status(courses),
            )
        )
    return averages


def aggregate(
    results: Sequence[ExamResult],
    academic_year: Optional[str] = None,
) -> Tuple[List[CourseAverage], List[SemesterAverage]]:
    course_averages = compute_course_averages(results)
    return course_averages, compute_semester_averages(course_averages, academic_year)


def compute_grade_stats(results: Iterable[ExamResult]) -> GradeStats:
    """Average, best and worst grade over the graded results."""
    grades = [r.grade for r in results if r.grade is not None]
    if not grades:
        return GradeStats()
    return GradeStats(
        average=sum(grades) / len(grades),
        highest=max(grades),
        lowest=min(grades),
        count=len(grades),
    )
