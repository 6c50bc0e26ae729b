# -*- coding: utf-8 -*-
import typing as t

from fastmcp import FastMCP

from coursework.models import GradeCategory
from grade_planner import solver
from grade_planner.models import GradeTargetResult
from grade_planner.report import format_grade_plan

mcp = FastMCP("GradePlanner")


@mcp.tool()
def solve_grade_target(
        categories: list[GradeCategory],
        target_percent: float,
) -> GradeTargetResult:
    """Solves for the average needed on pending grade categories to reach a target.

    :param categories: The course's grade categories, completed and pending.
    :param target_percent: Desired overall grade (0-100).
    :return: A result tagged all_completed, already_achieved, infeasible,
        single_remaining or multiple_remaining.
    """
    return solver.solve_grade_target(categories, target_percent)


@mcp.tool()
def solve_final_exam_target(
        current_grade: float,
        final_weight: float,
        target_percent: float,
) -> GradeTargetResult:
    """Solves for the score needed on a final exam.

    :param current_grade: Grade on everything before the final (0-100).
    :param final_weight: Percent of the course grade the final is worth.
    :param target_percent: Desired overall grade (0-100).
    :return: A tagged grade target result.
    """
    return solver.solve_final_exam_target(current_grade, final_weight, target_percent)


@mcp.tool()
def show_grade_plan(
        categories: list[GradeCategory],
        desired_percent: float,
        passing_percent: t.Optional[float] = None,
) -> str:
    """Displays what is needed to reach the desired and passing grades.

    :param categories: The course's grade categories.
    :param desired_percent: Desired overall grade (0-100).
    :param passing_percent: Passing grade (0-100), optional.
    :return: Formatted grade plan.
    """
    plan = solver.plan_grade_targets(categories, desired_percent, passing_percent)
    return format_grade_plan(plan, solver.grade_summary(categories))


if __name__ == "__main__":
    mcp.run()
