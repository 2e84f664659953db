from datetime import date

import pytest

from schemas.grades import CourseAverage, ExamResult
from services.grade_aggregator import (
    aggregate,
    compute_course_averages,
    compute_grade_stats,
    compute_semester_averages,
    course_status,
    semester_status,
)


def make_result(course_id=1, grade=None, weight=50, semester=1, credits=3, exam_id=1, **extra):
    fields = dict(
        exam_id=exam_id,
        exam_title=f"Exam {exam_id}",
        exam_type="midterm",
        exam_date=date(2025, 1, exam_id % 28 + 1),
        exam_weight=weight,
        course_id=course_id,
        course_name=f"Course {course_id}",
        course_code=f"C{course_id}",
        semester=semester,
        credits=credits,
        grade=grade,
        academic_year="2024-2025",
    )
    fields.update(extra)
    return ExamResult(**fields)


def make_course(course_id, average, credits, semester=1):
    return CourseAverage(
        course_id=course_id,
        course_name=f"Course {course_id}",
        course_code=f"C{course_id}",
        semester=semester,
        credits=credits,
        average=average,
        status=course_status(average),
    )


# ==========================================================
# course averages
# ==========================================================

def test_ungraded_results_leave_every_course_pending():
    results = [
        make_result(course_id=1, exam_id=1),
        make_result(course_id=1, exam_id=2),
        make_result(course_id=2, exam_id=3),
    ]
    courses = compute_course_averages(results)
    assert [c.course_id for c in courses] == [1, 2]
    assert all(c.average is None for c in courses)
    assert all(c.status == "pending" for c in courses)


def test_weighted_course_average():
    results = [
        make_result(grade=12, weight=40, exam_id=1),
        make_result(grade=16, weight=60, exam_id=2),
    ]
    [course] = compute_course_averages(results)
    assert course.average == pytest.approx(14.4)
    assert course.status == "passed"


def test_average_of_exactly_ten_passes():
    [course] = compute_course_averages([make_result(grade=10, weight=100)])
    assert course.average == 10.0
    assert course.status == "passed"


def test_average_below_ten_fails():
    [course] = compute_course_averages([make_result(grade=9.99, weight=100)])
    assert course.status == "failed"


def test_ungraded_exam_is_excluded_from_both_sums():
    results = [
        make_result(course_id=1, grade=None, weight=50, exam_id=1, course_name="Algo"),
        make_result(course_id=1, grade=18, weight=50, exam_id=2, course_name="Algo"),
    ]
    [course] = compute_course_averages(results)
    assert course.average == pytest.approx(18.0)
    assert course.status == "passed"
    assert course.course_name == "Algo"


def test_missing_weight_is_excluded():
    results = [
        make_result(grade=4, weight=None, exam_id=1),
        make_result(grade=14, weight=30, exam_id=2),
    ]
    [course] = compute_course_averages(results)
    assert course.average == pytest.approx(14.0)


def test_zero_total_weight_gives_no_average():
    [course] = compute_course_averages([make_result(grade=15, weight=0)])
    assert course.average is None
    assert course.status == "pending"


def test_weights_need_not_sum_to_hundred():
    results = [make_result(grade=10, weight=1, exam_id=1), make_result(grade=16, weight=2, exam_id=2)]
    [course] = compute_course_averages(results)
    assert course.average == pytest.approx(14.0)


def test_courses_keep_first_appearance_order():
    results = [
        make_result(course_id=7, grade=5, exam_id=1),
        make_result(course_id=3, grade=15, exam_id=2),
        make_result(course_id=7, grade=9, exam_id=3),
    ]
    assert [c.course_id for c in compute_course_averages(results)] == [7, 3]


def test_course_fields_are_carried_through():
    [course] = compute_course_averages([make_result(course_id=4, semester=2, credits=6, grade=11)])
    assert (course.course_code, course.semester, course.credits) == ("C4", 2, 6)


# ==========================================================
# semester averages
# ==========================================================

def test_one_failed_course_fails_the_semester():
    courses = [make_course(1, 14.0, 3), make_course(2, 8.0, 4)]
    [sem] = compute_semester_averages(courses, "2024-2025")
    assert sem.average == pytest.approx((14 * 3 + 8 * 4) / 7)
    assert sem.average > 10
    assert sem.status == "failed"
    assert sem.credits == 7
    assert sem.validated_credits == 3


def test_semester_passes_with_a_pending_course():
    courses = [make_course(1, 12.0, 3), make_course(2, None, 4)]
    [sem] = compute_semester_averages(courses, "2024-2025")
    assert sem.status == "passed"
    assert sem.average == pytest.approx(12.0)
    assert sem.credits == 3


def test_all_pending_semester():
    [sem] = compute_semester_averages([make_course(1, None, 3)], "2024-2025")
    assert sem.average is None
    assert sem.credits == 0
    assert sem.status == "pending"


def test_missing_credits_count_as_zero():
    [sem] = compute_semester_averages([make_course(1, 15.0, None)], "2024-2025")
    assert sem.credits == 0
    assert sem.average is None
    assert sem.status == "passed"


def test_semesters_grouped_in_first_appearance_order():
    courses = [
        make_course(1, 12.0, 3, semester=2),
        make_course(2, 11.0, 3, semester=1),
        make_course(3, 13.0, 3, semester=2),
    ]
    semesters = compute_semester_averages(courses, "2023-2024")
    assert [s.semester for s in semesters] == [2, 1]
    assert all(s.academic_year == "2023-2024" for s in semesters)
    assert semesters[0].average == pytest.approx(12.5)


def test_semester_status_priority():
    assert semester_status([make_course(1, None, 3), make_course(2, 9.0, 3), make_course(3, 19.0, 3)]) == "failed"
    assert semester_status([make_course(1, None, 3), make_course(2, 10.0, 3)]) == "passed"
    assert semester_status([]) == "pending"


# ==========================================================
# aggregate / stats
# ==========================================================

def test_empty_input():
    courses, semesters = aggregate([], "2024-2025")
    assert courses == []
    assert semesters == []


def test_aggregate_is_idempotent_and_does_not_touch_input():
    results = [
        make_result(course_id=1, grade=12, weight=40, exam_id=1),
        make_result(course_id=1, grade=16, weight=60, exam_id=2),
        make_result(course_id=2, grade=7, weight=100, exam_id=3, credits=4),
        make_result(course_id=3, grade=None, exam_id=4, semester=2),
    ]
    snapshot = [r.model_dump() for r in results]

    first = aggregate(results, "2024-2025")
    second = aggregate(results, "2024-2025")

    assert [c.model_dump() for c in first[0]] == [c.model_dump() for c in second[0]]
    assert [s.model_dump() for s in first[1]] == [s.model_dump() for s in second[1]]
    assert [r.model_dump() for r in results] == snapshot


def test_ungraded_course_adds_nothing_to_its_semester():
    results = [
        make_result(course_id=1, grade=12, weight=40, exam_id=1, credits=3),
        make_result(course_id=1, grade=16, weight=60, exam_id=2, credits=3),
        make_result(course_id=2, grade=None, weight=100, exam_id=3, credits=4),
    ]
    courses, [sem] = aggregate(results, "2024-2025")

    assert [c.status for c in courses] == ["passed", "pending"]
    assert courses[1].average is None
    assert sem.average == pytest.approx(14.4)
    assert sem.credits == 3
    assert sem.validated_credits == 3
    assert sem.status == "passed"


def test_exam_result_status_follows_grade():
    assert make_result(grade=None).status == "pending"
    assert make_result(grade=0).status == "graded"


def test_grade_stats():
    results = [make_result(grade=12, exam_id=1), make_result(grade=None, exam_id=2), make_result(grade=6, exam_id=3)]
    stats = compute_grade_stats(results)
    assert stats.count == 2
    assert stats.average == pytest.approx(9.0)
    assert (stats.highest, stats.lowest) == (12, 6)


def test_grade_stats_without_grades():
    stats = compute_grade_stats([make_result(grade=None)])
    assert stats.count == 0
    assert stats.average is None and stats.highest is None and stats.lowest is None
