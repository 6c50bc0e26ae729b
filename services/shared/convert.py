"""
Conversion between the Pydantic wire models and the engine dataclasses.

Both the REST service and the CLI read Pydantic payloads and hand dataclass
snapshots to the planning engines; results travel back the same way.
"""
from __future__ import annotations

import datetime as dt
import typing as t
from dataclasses import asdict

from coursework import models
from coursework.dates import parse_event_date
from grade_planner.models import GradeSummary, GradeTargetResult, TargetKind
from grade_planner.report import describe_result
from grade_planner.solver import grade_letter
from services.shared import models as wire
from study_planner.models import RecommendationList, TodoItem
from study_planner.weekly import todo_label


def to_category(category: wire.GradeCategory) -> models.GradeCategory:
    return models.GradeCategory(**category.model_dump())


def to_course(course: wire.Course) -> models.Course:
    return models.Course(
        id=course.id,
        name=course.name,
        code=course.code,
        color=course.color,
        syllabus_text=course.syllabus_text,
        grade_categories=[to_category(c) for c in course.grade_categories],
    )


def to_event(event: wire.CalendarEvent) -> models.CalendarEvent:
    data = event.model_dump()
    data["date"] = parse_event_date(event.date)
    data["type"] = event.type or "other"
    return models.CalendarEvent(**data)


def from_event(event: models.CalendarEvent) -> wire.CalendarEvent:
    data = asdict(event)
    data["date"] = event.date.isoformat()
    return wire.CalendarEvent(**data)


def from_grade_result(
        result: GradeTargetResult,
        target_percent: float,
        kind: TargetKind = TargetKind.DESIRED,
) -> wire.GradeTargetResult:
    data = asdict(result)
    needed = data.get("needed_average")
    return wire.GradeTargetResult(
        target_percent=target_percent,
        needed_letter=grade_letter(needed) if needed is not None and 0 <= needed <= 100 else None,
        message=describe_result(result, target_percent, kind),
        **data,
    )


def from_grade_summary(summary: GradeSummary) -> wire.GradeSummary:
    return wire.GradeSummary(**asdict(summary))


def from_recommendation_list(result: RecommendationList) -> wire.RecommendationListResponse:
    return wire.RecommendationListResponse(
        recommendations=[
            wire.StudyRecommendation(tier=rec.tier, **asdict(rec))
            for rec in result.recommendations
        ],
        total_hours=result.total_hours,
        urgent_count=result.urgent_count,
        course_summaries=[wire.CourseStudySummary(**asdict(s)) for s in result.course_summaries],
        horizon_start=result.horizon_start,
        horizon_end=result.horizon_end,
    )


def from_todo_items(items: t.Iterable[TodoItem], week: tuple[dt.date, dt.date]) -> wire.WeeklyTodoResponse:
    return wire.WeeklyTodoResponse(
        week_start=week[0],
        week_end=week[1],
        items=[wire.TodoItem(label=todo_label(item.priority), **asdict(item)) for item in items],
    )


def load_snapshot(payload: wire.SnapshotPayload) -> tuple[list[models.Course], list[models.CalendarEvent]]:
    """Convert a snapshot payload into engine dataclasses."""
    return [to_course(c) for c in payload.courses], [to_event(e) for e in payload.events]
