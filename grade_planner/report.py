"""Plain-text rendering of grade plans."""
from __future__ import annotations

from grade_planner.models import GradePlan, GradeSummary, GradeTargetResult, TargetKind
from grade_planner.solver import grade_letter


def describe_result(result: GradeTargetResult, target_percent: float, kind: TargetKind = TargetKind.DESIRED) -> str:
    """One-line explanation of a solver result."""
    goal = "pass with" if kind == TargetKind.PASSING else "finish with"
    if result.kind == "all_completed":
        return f"All work is graded. Final grade: {result.current_grade:.2f}% ({grade_letter(result.current_grade)})."
    if result.kind == "already_achieved":
        return (f"✅ Already there: {result.current_grade:.2f}% earned is enough to "
                f"{goal} {target_percent:g}% whatever happens next.")
    if result.kind == "infeasible":
        return (f"⚠️ Not realistically achievable: you would need {result.needed_average:.2f}% "
                f"on the remaining work to {goal} {target_percent:g}%.")
    needed = f"{result.needed_average:.2f}% ({grade_letter(result.needed_average)})"
    if result.kind == "single_remaining":
        return f"You need {needed} on {result.category_name} to {goal} {target_percent:g}%."
    return f"You need an average of {needed} across the remaining categories to {goal} {target_percent:g}%."


def format_grade_plan(plan: GradePlan, summary: GradeSummary) -> str:
    """Formats a grade plan and the current standing as plain text.

    :param plan: Results for the desired and optional passing targets.
    :param summary: Earned points and weights for the same categories.
    :return: Multi-line summary.
    """
    lines = []
    lines.append("🎯 GRADE PLAN")
    lines.append("=" * 80)
    lines.append(f"Earned so far:     {summary.earned_points:.2f} points")
    if summary.completed_average is not None:
        lines.append(
            f"Completed average: {summary.completed_average:.2f}% "
            f"({grade_letter(summary.completed_average)}) over {summary.completed_weight:g}% of the grade"
        )
    lines.append(f"Still pending:     {summary.remaining_weight:g}% of the grade")
    if summary.total_weight != 100:
        lines.append(f"Note: category weights add up to {summary.total_weight:g}%, not 100%.")
    lines.append("-" * 80)

    targets = {TargetKind.DESIRED: plan.desired_percent, TargetKind.PASSING: plan.passing_percent}
    for kind, result in plan.results().items():
        lines.append(f"[{kind.value}] {describe_result(result, targets[kind], kind)}")

    lines.append("=" * 80)
    return "\n".join(lines)
