# -*- coding: utf-8 -*-
import datetime as dt
import typing as t

from fastmcp import FastMCP

from coursework.config import DEFAULT_HORIZON_DAYS
from coursework.dates import as_date
from coursework.models import CalendarEvent, Course
from study_planner import lectures, ranker, weekly
from study_planner.models import RecommendationList, TodoItem
from study_planner.report import format_recommendations, format_weekly_todo

mcp = FastMCP("StudyPlanner")


def _today(today: t.Optional[str]) -> dt.date:
    return as_date(today) if today else dt.date.today()


@mcp.tool()
def rank_study_priorities(
        events: list[CalendarEvent],
        courses: list[Course],
        today: t.Optional[str] = None,
        horizon_days: int = DEFAULT_HORIZON_DAYS,
        custom_hours: t.Optional[dict[str, float]] = None,
) -> RecommendationList:
    """Ranks upcoming events and recommends study hours.

    :param events: Calendar events.
    :param courses: Courses used to resolve course names.
    :param today: Reference date in ISO format (default: today).
    :param horizon_days: How many days ahead to look.
    :param custom_hours: Overrides keyed by "<event id>-<event date>".
    :return: Ranked recommendations with totals and per-course summaries.
    """
    return ranker.rank_study_priorities(events, courses, _today(today), horizon_days, custom_hours)


@mcp.tool()
def build_weekly_todo(
        events: list[CalendarEvent],
        courses: list[Course],
        today: t.Optional[str] = None,
) -> list[TodoItem]:
    """Builds this week's prioritized to-do list.

    :param events: Calendar events.
    :param courses: Courses used to resolve names and colors.
    :param today: Reference date in ISO format (default: today).
    :return: To-do items, highest priority first.
    """
    return weekly.build_weekly_todo(events, courses, _today(today))


@mcp.tool()
def generate_lecture_events(
        course_id: str,
        course_name: str,
        lecture_times: str,
        semester_start: t.Optional[str] = None,
        semester_end: t.Optional[str] = None,
) -> list[CalendarEvent]:
    """Creates one calendar event per lecture from a schedule like "Mon Wed Fri 9:00 - 9:50 AM".

    :param course_id: Course the lectures belong to.
    :param course_name: Course name used in event titles.
    :param lecture_times: Lecture schedule string.
    :param semester_start: First day in ISO format (default: today).
    :param semester_end: Last day in ISO format (default: 120 days after start).
    :return: Lecture events; empty when the schedule cannot be parsed.
    """
    return lectures.generate_lecture_events(course_id, course_name, lecture_times, semester_start, semester_end)


@mcp.tool()
def show_study_plan(
        events: list[CalendarEvent],
        courses: list[Course],
        today: t.Optional[str] = None,
        horizon_days: int = DEFAULT_HORIZON_DAYS,
        custom_hours: t.Optional[dict[str, float]] = None,
) -> str:
    """Displays ranked study recommendations as a table.

    :return: Formatted recommendations, or a message if nothing is due.
    """
    result = ranker.rank_study_priorities(events, courses, _today(today), horizon_days, custom_hours)
    return format_recommendations(result)


@mcp.tool()
def show_weekly_todo(
        events: list[CalendarEvent],
        courses: list[Course],
        today: t.Optional[str] = None,
) -> str:
    """Displays this week's to-do list as a table."""
    return format_weekly_todo(weekly.build_weekly_todo(events, courses, _today(today)))


if __name__ == "__main__":
    mcp.run()
