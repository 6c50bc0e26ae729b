"""Tests for the grade target solver.

This module covers result classification, the final-exam shortcut and the
desired/passing target pair.
"""
import pytest

from coursework.models import Course, GradeCategory
from grade_planner.models import (
    AllCompleted,
    AlreadyAchieved,
    Infeasible,
    MultipleRemaining,
    SingleRemaining,
    TargetKind,
)
from grade_planner.solver import (
    final_exam_categories,
    grade_letter,
    grade_summary,
    plan_grade_targets,
    solve_final_exam_target,
    solve_grade_target,
)


def done(name: str, weight: float, score: float) -> GradeCategory:
    """Completed category."""
    return GradeCategory(id=name.lower(), name=name, weight=weight, current_score=score, is_completed=True)


def pending(name: str, weight: float) -> GradeCategory:
    """Pending category."""
    return GradeCategory(id=name.lower(), name=name, weight=weight)


def test_exact_feasible_target_single_remaining() -> None:
    """60% done at 85, 40% left, target 90 needs 97.5 on the last category."""
    result = solve_grade_target([done("Homework", 60, 85), pending("Final", 40)], 90)

    assert isinstance(result, SingleRemaining)
    assert result.kind == "single_remaining"
    assert result.needed_average == pytest.approx(97.5)
    assert result.category_name == "Final"


def test_already_achieved_reports_current_grade_and_raw_average() -> None:
    """A negative needed average is classified, not clamped."""
    result = solve_grade_target([done("Homework", 60, 85), pending("Final", 40)], 50)

    assert isinstance(result, AlreadyAchieved)
    assert result.current_grade == pytest.approx(51)
    assert result.needed_average == pytest.approx(-2.5)


def test_infeasible_reports_value_over_100() -> None:
    """Needing more than 100% is infeasible and the raw value comes back."""
    result = solve_grade_target([done("Coursework", 80, 50), pending("Final", 20)], 95)

    assert isinstance(result, Infeasible)
    assert result.needed_average == pytest.approx(275)


def test_multiple_remaining_is_one_flat_average() -> None:
    """Several pending categories share a single blended target."""
    categories = [
        done("Homework", 30, 90),
        done("Midterm", 30, 80),
        pending("Project", 20),
        pending("Final", 20),
    ]
    result = solve_grade_target(categories, 85)

    assert isinstance(result, MultipleRemaining)
    assert result.needed_average == pytest.approx(85)


@pytest.mark.parametrize("target", [0, 50, 90, 100, 250])
def test_all_completed_ignores_target(target: float) -> None:
    """With no pending weight the grade is fixed whatever the target."""
    categories = [done("Homework", 40, 90), done("Exams", 60, 70)]

    result = solve_grade_target(categories, target)

    assert isinstance(result, AllCompleted)
    assert result.current_grade == pytest.approx(78)


def test_zero_weight_pending_categories_count_as_completed() -> None:
    """Pending categories worth nothing must not cause a division by zero."""
    categories = [done("Homework", 100, 88), pending("Bonus", 0)]

    result = solve_grade_target(categories, 95)

    assert isinstance(result, AllCompleted)
    assert result.current_grade == pytest.approx(88)


def test_empty_category_list_is_all_completed_at_zero() -> None:
    """No categories at all is the degenerate all-completed case."""
    assert solve_grade_target([], 90) == AllCompleted(current_grade=0)


def test_target_met_exactly_is_already_achieved() -> None:
    """Earned points equal to the target need nothing more."""
    result = solve_grade_target([done("Homework", 50, 100), pending("Final", 50)], 50)

    assert isinstance(result, AlreadyAchieved)
    assert result.needed_average == 0


@pytest.mark.parametrize("target", [40, 60, 75.5, 90])
def test_earned_at_or_above_target_is_always_already_achieved(target: float) -> None:
    """Earned points at or above the target never ask for more work."""
    categories = [done("Homework", 50, 100), done("Quizzes", 40, 100), pending("Final", 10)]

    result = solve_grade_target(categories, target)

    assert isinstance(result, AlreadyAchieved)


def test_needed_average_never_decreases_as_target_rises() -> None:
    """Raising the target never lowers the needed average."""
    categories = [done("Homework", 45, 72), pending("Project", 25), pending("Final", 30)]
    previous = None
    for target in range(0, 101, 5):
        result = solve_grade_target(categories, target)
        assert not isinstance(result, AllCompleted)
        if previous is not None:
            assert result.needed_average >= previous
        previous = result.needed_average


def test_weights_need_not_sum_to_100() -> None:
    """The solver works proportionally on any weight distribution."""
    result = solve_grade_target([done("Homework", 0, 100), pending("Final", 50)], 40)

    assert isinstance(result, SingleRemaining)
    assert result.needed_average == pytest.approx(80)


@pytest.mark.parametrize(
    "current,final_weight,target",
    [(85, 40, 90), (72.5, 25, 80), (50, 20, 95), (99, 10, 60), (60, 100, 70)],
)
def test_final_exam_shortcut_matches_general_solver(current: float, final_weight: float, target: float) -> None:
    """The shortcut is the two-category case of the general solver."""
    general = solve_grade_target(
        [done("Coursework", 100 - final_weight, current), pending("Final Exam", final_weight)],
        target,
    )
    shortcut = solve_final_exam_target(current, final_weight, target)

    assert type(shortcut) is type(general)
    assert shortcut.needed_average == pytest.approx(general.needed_average)


def test_final_exam_categories_shape() -> None:
    """Work so far is one completed category worth the rest of the grade."""
    coursework, final = final_exam_categories(85, 40)

    assert coursework.is_completed and coursework.weight == 60 and coursework.current_score == 85
    assert not final.is_completed and final.weight == 40 and final.name == "Final Exam"


def test_plan_grade_targets_runs_solver_for_both_targets() -> None:
    """Desired and passing targets go through the same solver."""
    categories = [done("Homework", 60, 85), pending("Final", 40)]

    plan = plan_grade_targets(categories, 90, 50)

    assert plan.desired == solve_grade_target(categories, 90)
    assert plan.passing == solve_grade_target(categories, 50)
    assert set(plan.results()) == {TargetKind.DESIRED, TargetKind.PASSING}


def test_plan_without_passing_target() -> None:
    """The passing result is absent when no passing grade is given."""
    plan = plan_grade_targets([done("Homework", 60, 85), pending("Final", 40)], 90)

    assert plan.passing is None
    assert list(plan.results()) == [TargetKind.DESIRED]


def test_plan_accepts_a_generator() -> None:
    """Categories are materialised once so both solves see them."""
    categories = [done("Homework", 60, 85), pending("Final", 40)]

    plan = plan_grade_targets((c for c in categories), 90, 50)

    assert isinstance(plan.desired, SingleRemaining)
    assert isinstance(plan.passing, AlreadyAchieved)


def test_solver_is_idempotent() -> None:
    """Identical input gives identical output."""
    categories = [done("Homework", 45, 72), pending("Project", 25), pending("Final", 30)]

    assert solve_grade_target(categories, 88) == solve_grade_target(categories, 88)


def test_grade_summary() -> None:
    """Summary reports earned points, weights and the completed average."""
    summary = grade_summary([done("Homework", 60, 85), pending("Final", 40)])

    assert summary.earned_points == pytest.approx(51)
    assert summary.completed_weight == 60
    assert summary.remaining_weight == 40
    assert summary.total_weight == 100
    assert summary.completed_average == pytest.approx(85)


def test_grade_summary_without_completed_work() -> None:
    """No completed weight means no completed average."""
    summary = grade_summary([pending("Final", 40), pending("Project", 50)])

    assert summary.completed_average is None
    assert summary.total_weight == 90


@pytest.mark.parametrize(
    "percent,letter",
    [(100, "A+"), (97, "A+"), (96.9, "A"), (90, "A-"), (85, "B"), (80, "B-"),
     (77, "C+"), (70, "C-"), (67, "D+"), (65, "D"), (64.99, "F"), (-2.5, "F")],
)
def test_grade_letter(percent: float, letter: str) -> None:
    """Letter scale cutoffs."""
    assert grade_letter(percent) == letter


def test_replace_grade_categories_is_wholesale() -> None:
    """Replacing categories drops the old set entirely and leaves the source course untouched."""
    course = Course(id="c1", name="Calculus", grade_categories=[pending("Homework", 50), pending("Final", 50)])

    updated = course.replace_grade_categories([pending("Exams", 100)])

    assert [c.name for c in updated.grade_categories] == ["Exams"]
    assert [c.name for c in course.grade_categories] == ["Homework", "Final"]
