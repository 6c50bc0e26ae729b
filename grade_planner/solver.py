"""Grade target solver.

Answers "what do I need on the rest of the course to finish with X%?" for a
course split into weighted grade categories. Percentages stay on the 0-100
scale and nothing is rounded here; presentation is left to the caller.
"""
from __future__ import annotations

import logging
import typing as t

from coursework.models import GradeCategory
from grade_planner.models import (
    AllCompleted,
    AlreadyAchieved,
    GradePlan,
    GradeSummary,
    GradeTargetResult,
    Infeasible,
    MultipleRemaining,
    SingleRemaining,
)

logger = logging.getLogger(__name__)

LETTER_SCALE: list[tuple[float, str]] = [
    (97, "A+"),
    (93, "A"),
    (90, "A-"),
    (87, "B+"),
    (83, "B"),
    (80, "B-"),
    (77, "C+"),
    (73, "C"),
    (70, "C-"),
    (67, "D+"),
    (65, "D"),
]


def _partition(categories: t.Iterable[GradeCategory]) -> tuple[list[GradeCategory], list[GradeCategory]]:
    completed: list[GradeCategory] = []
    remaining: list[GradeCategory] = []
    for category in categories:
        (completed if category.is_completed else remaining).append(category)
    return completed, remaining


def _earned_points(completed: t.Iterable[GradeCategory]) -> float:
    return sum(c.current_score * c.weight / 100 for c in completed)


def solve_grade_target(categories: t.Iterable[GradeCategory], target_overall_percent: float) -> GradeTargetResult:
    """Solve for the average needed on pending categories to reach a target.

    :param categories: The course's grade categories, completed and pending.
    :param target_overall_percent: Desired overall grade on the 0-100 scale.
    :return: One of AllCompleted, AlreadyAchieved, Infeasible,
        SingleRemaining or MultipleRemaining.
    """
    completed, remaining = _partition(categories)
    earned_points = _earned_points(completed)
    remaining_weight = sum(c.weight for c in remaining)

    if remaining_weight == 0:
        return AllCompleted(current_grade=earned_points)

    needed_average = (target_overall_percent - earned_points) / (remaining_weight / 100)
    logger.debug(
        "target=%s earned=%s remaining_weight=%s needed=%s",
        target_overall_percent, earned_points, remaining_weight, needed_average,
    )

    if needed_average <= 0:
        return AlreadyAchieved(current_grade=earned_points, needed_average=needed_average)
    if needed_average > 100:
        return Infeasible(needed_average=needed_average)
    if len(remaining) == 1:
        return SingleRemaining(needed_average=needed_average, category_name=remaining[0].name)
    return MultipleRemaining(needed_average=needed_average)


def final_exam_categories(
        current_grade: float,
        final_weight: float,
        final_name: str = "Final Exam",
) -> list[GradeCategory]:
    """Two categories equivalent to "current grade so far, final still to come"."""
    return [
        GradeCategory(
            id="coursework",
            name="Coursework",
            weight=100 - final_weight,
            current_score=current_grade,
            is_completed=True,
        ),
        GradeCategory(id="final", name=final_name, weight=final_weight),
    ]


def solve_final_exam_target(
        current_grade: float,
        final_weight: float,
        target_overall_percent: float,
        final_name: str = "Final Exam",
) -> GradeTargetResult:
    """Score needed on a final exam, given the grade on everything before it.

    This is the two-category case of :func:`solve_grade_target`: the work so
    far is one completed category worth ``100 - final_weight``.
    """
    categories = final_exam_categories(current_grade, final_weight, final_name)
    return solve_grade_target(categories, target_overall_percent)


def plan_grade_targets(
        categories: t.Iterable[GradeCategory],
        desired_percent: float,
        passing_percent: t.Optional[float] = None,
) -> GradePlan:
    """Run the solver for the desired grade and, if given, the passing grade."""
    categories = list(categories)
    return GradePlan(
        desired_percent=desired_percent,
        desired=solve_grade_target(categories, desired_percent),
        passing_percent=passing_percent,
        passing=None if passing_percent is None else solve_grade_target(categories, passing_percent),
    )


def grade_summary(categories: t.Iterable[GradeCategory]) -> GradeSummary:
    """Summarise earned points and weights for a set of categories."""
    completed, remaining = _partition(categories)
    completed_weight = sum(c.weight for c in completed)
    remaining_weight = sum(c.weight for c in remaining)
    earned_points = _earned_points(completed)
    return GradeSummary(
        earned_points=earned_points,
        completed_weight=completed_weight,
        remaining_weight=remaining_weight,
        total_weight=completed_weight + remaining_weight,
        completed_average=(earned_points / completed_weight * 100) if completed_weight else None,
    )


def grade_letter(percent: float) -> str:
    """Letter grade for a percentage."""
    for cutoff, letter in LETTER_SCALE:
        if percent >= cutoff:
            return letter
    return "F"
