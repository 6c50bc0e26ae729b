"""Plain-text rendering of study recommendations and to-do lists."""
from __future__ import annotations

import typing as t

from study_planner.models import RecommendationList, TodoItem
from study_planner.weekly import todo_label


def format_recommendations(result: RecommendationList, limit: t.Optional[int] = None) -> str:
    """Formats study recommendations as a clean table.

    :param result: Output of the study ranker.
    :param limit: Show at most this many rows (totals still cover everything).
    :return: Formatted table string.
    """
    if result.is_empty:
        if result.horizon_start and result.horizon_end:
            days = (result.horizon_end - result.horizon_start).days
            return f"📚 Nothing due in the next {days} days. Good time to review and catch up."
        return "📚 Nothing due soon. Good time to review and catch up."

    lines = []
    lines.append("📚 STUDY RECOMMENDATIONS")
    lines.append("=" * 110)
    lines.append(f"{'#':<4} {'Course':<16} {'Topic':<32} {'Due':<12} {'Tier':<10} {'Hours':<7} {'Reason':<25}")
    lines.append("-" * 110)

    rows = result.recommendations[:limit] if limit else result.recommendations
    for idx, rec in enumerate(rows, 1):
        course = rec.course_name[:15]
        topic = rec.topic[:31]
        hours = f"{rec.recommended_hours:g}h" + ("*" if rec.is_custom else "")
        lines.append(
            f"{idx:<4} {course:<16} {topic:<32} {rec.event_date.strftime('%a %-m/%-d'):<12} "
            f"{rec.tier:<10} {hours:<7} {rec.reason:<25}"
        )

    lines.append("=" * 110)
    lines.append(f"Total: {result.total_hours:g}h across {len(result.recommendations)} item(s), "
                 f"{result.urgent_count} urgent")
    lines.append("")
    lines.append("By Course:")
    for summary in result.course_summaries:
        urgent = f", {summary.urgent_count} urgent" if summary.urgent_count else ""
        lines.append(f"  {summary.course_name}: {summary.hours:g}h{urgent}")
    return "\n".join(lines)


def format_weekly_todo(items: list[TodoItem]) -> str:
    """Formats the weekly to-do list as a clean table."""
    if not items:
        return "✅ Nothing on the list this week."

    lines = []
    lines.append("✅ THIS WEEK")
    lines.append("=" * 90)
    lines.append(f"{'#':<4} {'Title':<40} {'Date':<12} {'Course':<16} {'Priority':<12}")
    lines.append("-" * 90)
    for idx, item in enumerate(items, 1):
        lines.append(
            f"{idx:<4} {item.title[:39]:<40} {item.date.strftime('%a %-m/%-d'):<12} "
            f"{(item.course_name or '—')[:15]:<16} {todo_label(item.priority):<12}"
        )
    lines.append("=" * 90)
    lines.append(f"Total: {len(items)} item(s)")
    return "\n".join(lines)
