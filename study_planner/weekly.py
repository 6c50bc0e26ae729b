"""Weekly to-do prioritizer.

A flat to-do list for the current Sunday-Saturday week. Priorities use a
small integer scale where 1 is the most important. Exams also get a derived
"Study for ..." task two days ahead.
"""
from __future__ import annotations

import datetime as dt
import typing as t

from coursework.dates import DateLike, as_date, week_bounds
from coursework.models import CalendarEvent, Course
from study_planner.classifier import (
    STUDY_TRIGGER_CLASSIFIER,
    WEEKLY_CLASSIFIER,
    EventCategory,
    EventClassifier,
)
from study_planner.models import TodoItem

TODO_PRIORITIES: dict[EventCategory, int] = {
    EventCategory.EXAM: 1,
    EventCategory.QUIZ: 2,
    EventCategory.PROJECT: 3,
    EventCategory.ASSIGNMENT: 3,
    EventCategory.HOMEWORK: 4,
    EventCategory.OTHER: 5,
    EventCategory.READING: 6,
}
UNTYPED_PRIORITY = 5
STUDY_TASK_PRIORITY = 1
STUDY_LEAD_DAYS = 2


def todo_priority(event_type: t.Optional[str], classifier: EventClassifier = WEEKLY_CLASSIFIER) -> int:
    """Priority for an event type; 1 is the highest."""
    if not event_type:
        return UNTYPED_PRIORITY
    return TODO_PRIORITIES.get(classifier.classify(event_type), UNTYPED_PRIORITY)


def todo_label(priority: int) -> str:
    if priority == 1:
        return "High"
    if priority <= 2:
        return "Medium-High"
    if priority <= 3:
        return "Medium"
    return "Low"


def build_weekly_todo(
        events: t.Iterable[CalendarEvent],
        courses: t.Iterable[Course],
        today: DateLike,
        classifier: EventClassifier = WEEKLY_CLASSIFIER,
        study_trigger: EventClassifier = STUDY_TRIGGER_CLASSIFIER,
) -> list[TodoItem]:
    """Build this week's to-do list.

    :param events: Calendar events from any course.
    :param courses: Courses used to resolve names and colors.
    :param today: Reference date; selects the Sunday-Saturday week.
    :param classifier: Maps an event type to a category for prioritising.
    :param study_trigger: Decides which event types get a study task.
    :return: Items sorted by priority (1 first) then date.
    """
    day = as_date(today)
    week_start, week_end = week_bounds(day)
    courses_by_id = {course.id: course for course in courses}

    items: list[TodoItem] = []
    for event in events:
        event_date = as_date(event.date)
        if not week_start <= event_date <= week_end:
            continue

        course = courses_by_id.get(event.course_id) if event.course_id else None
        course_name = course.name if course else None
        color = course.color if course else None

        items.append(TodoItem(
            id=event.id,
            title=event.title,
            date=event_date,
            type=event.type or "other",
            priority=todo_priority(event.type, classifier),
            course_name=course_name,
            color=color,
        ))

        if event.type and study_trigger.classify(event.type) != EventCategory.OTHER:
            study_date = event_date - dt.timedelta(days=STUDY_LEAD_DAYS)
            if day < study_date or week_start <= study_date <= week_end:
                items.append(TodoItem(
                    id=f"{event.id}-study",
                    title=f"Study for {event.title}",
                    date=study_date,
                    type="study",
                    priority=STUDY_TASK_PRIORITY,
                    course_name=course_name,
                    color=color,
                    is_study_task=True,
                ))

    items.sort(key=lambda item: (item.priority, item.date))
    return items
