"""Lecture schedule parsing and recurring lecture events.

Parses strings such as ``"Monday Wednesday Friday, 9:00 AM - 10:30 AM"`` or
``"Tue/Thu 2:00-3:15 PM"`` and expands them into one calendar event per
lecture across a semester.
"""
from __future__ import annotations

import datetime as dt
import logging
import re
import typing as t
from dataclasses import dataclass

from coursework.dates import DateLike, as_date
from coursework.models import CalendarEvent

logger = logging.getLogger(__name__)

# Python weekday numbers: Monday == 0 ... Sunday == 6
DAY_NAMES: dict[str, int] = {
    "monday": 0, "mon": 0,
    "tuesday": 1, "tue": 1, "tues": 1,
    "wednesday": 2, "wed": 2,
    "thursday": 3, "thu": 3, "thur": 3, "thurs": 3,
    "friday": 4, "fri": 4,
    "saturday": 5, "sat": 5,
    "sunday": 6, "sun": 6,
}

TIME_RANGE = re.compile(
    r"(\d{1,2}):(\d{2})\s*([ap]\.?m\.?)?\s*[-–—]\s*(\d{1,2}):(\d{2})\s*([ap]\.?m\.?)?",
    re.IGNORECASE,
)

DEFAULT_SEMESTER_DAYS = 120


@dataclass(frozen=True)
class LectureTime:
    """Weekly lecture slot."""
    days: tuple[int, ...]   # Python weekday numbers, sorted
    start: dt.time
    end: dt.time


def _period(raw: t.Optional[str]) -> t.Optional[str]:
    return raw.lower().replace(".", "") if raw else None


def _other(period: str) -> str:
    return "pm" if period == "am" else "am"


def _to_24h(hour: int, period: t.Optional[str]) -> int:
    if period == "pm" and hour != 12:
        return hour + 12
    if period == "am" and hour == 12:
        return 0
    return hour


def parse_lecture_times(lecture_times: str) -> t.Optional[LectureTime]:
    """Parse a lecture schedule string.

    A start time without AM/PM takes the end time's period unless that would
    put it after the end ("11:00 - 12:15 PM" is 11 AM). An end time without
    AM/PM likewise takes the start's period unless that would put it before
    the start ("11:00 AM - 12:15" ends at 12:15 PM). With no period at all,
    hours 1 through 7 are read as afternoon.

    :param lecture_times: Free-text schedule, days first then a time range.
    :return: The parsed slot, or None when no time range or no day is found,
        or when the lecture would end before it starts.
    """
    if not lecture_times or not lecture_times.strip():
        return None

    match = TIME_RANGE.search(lecture_times)
    if not match:
        logger.debug("No time range in lecture string %r", lecture_times)
        return None

    start_hour, start_min = int(match.group(1)), int(match.group(2))
    end_hour, end_min = int(match.group(4)), int(match.group(5))
    start_period, end_period = _period(match.group(3)), _period(match.group(6))

    if start_period is None and end_period is None:
        start_h = start_hour + 12 if 1 <= start_hour <= 7 else start_hour
        end_h = end_hour + 12 if 1 <= end_hour <= 7 else end_hour
    elif start_period is None:
        end_h = _to_24h(end_hour, end_period)
        start_h = _to_24h(start_hour, end_period)
        if (start_h, start_min) > (end_h, end_min):
            start_h = _to_24h(start_hour, _other(end_period))
    elif end_period is None:
        start_h = _to_24h(start_hour, start_period)
        end_h = _to_24h(end_hour, start_period)
        if (end_h, end_min) <= (start_h, start_min):
            end_h = _to_24h(end_hour, _other(start_period))
    else:
        start_h = _to_24h(start_hour, start_period)
        end_h = _to_24h(end_hour, end_period)

    if start_h > 23 or end_h > 23 or start_min > 59 or end_min > 59:
        return None
    if (end_h, end_min) <= (start_h, start_min):
        logger.debug("Lecture ends before it starts in %r", lecture_times)
        return None

    days: set[int] = set()
    for word in re.split(r"[,/&\s]+", lecture_times[:match.start()].lower()):
        word = word.strip(".")
        if word not in DAY_NAMES and word.endswith("s"):
            word = word[:-1]
        if word in DAY_NAMES:
            days.add(DAY_NAMES[word])

    if not days:
        logger.debug("No weekday in lecture string %r", lecture_times)
        return None

    return LectureTime(
        days=tuple(sorted(days)),
        start=dt.time(start_h, start_min),
        end=dt.time(end_h, end_min),
    )


def _clock(value: dt.time) -> str:
    hour = value.hour % 12 or 12
    return f"{hour}:{value.minute:02d} {'AM' if value.hour < 12 else 'PM'}"


def generate_lecture_events(
        course_id: str,
        course_name: str,
        lecture_times: str,
        semester_start: t.Optional[DateLike] = None,
        semester_end: t.Optional[DateLike] = None,
) -> list[CalendarEvent]:
    """Expand a lecture schedule into one event per lecture.

    :param course_id: Course the lectures belong to.
    :param course_name: Used in the event title.
    :param lecture_times: Schedule string, see :func:`parse_lecture_times`.
    :param semester_start: First day to consider (default: today).
    :param semester_end: Last day to consider, inclusive (default: 120 days on).
    :return: Lecture events in date order; empty when the schedule can't be parsed.
    """
    slot = parse_lecture_times(lecture_times)
    if slot is None:
        return []

    start = as_date(semester_start) if semester_start is not None else dt.date.today()
    end = as_date(semester_end) if semester_end is not None else start + dt.timedelta(days=DEFAULT_SEMESTER_DAYS)
    description = f"{_clock(slot.start)} - {_clock(slot.end)}"

    events: list[CalendarEvent] = []
    day = start
    while day <= end:
        if day.weekday() in slot.days:
            events.append(CalendarEvent(
                id=f"{course_id}-lecture-{day.isoformat()}",
                title=f"Lecture - {course_name}",
                date=dt.datetime.combine(day, slot.start),
                type="lecture",
                course_id=course_id,
                description=description,
            ))
        day += dt.timedelta(days=1)

    logger.debug("Generated %d lecture(s) for %s", len(events), course_id)
    return events
