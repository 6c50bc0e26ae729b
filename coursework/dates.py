"""Date helpers shared by the study planners."""
from __future__ import annotations

import datetime as dt
import typing as t

DateLike = t.Union[dt.date, dt.datetime, str]


def as_date(value: DateLike) -> dt.date:
    """Normalise a date, datetime or ISO string to a calendar date.

    :param value: A ``date``, ``datetime`` or ISO 8601 string
        (``YYYY-MM-DD`` or ``YYYY-MM-DDTHH:MM[:SS]``, optional trailing ``Z``).
    :return: The calendar date, time-of-day discarded.
    :raises ValueError: If a string cannot be parsed.
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return dt.datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            raise ValueError(f"Unrecognised date: {value!r}") from None
    raise TypeError(f"Expected a date, datetime or ISO string, got {type(value).__name__}")


def parse_event_date(value: str) -> t.Union[dt.date, dt.datetime]:
    """Parse an event date string, keeping the time of day when one is given.

    ``"2026-10-20"`` gives a ``date``; ``"2026-10-20T09:00:00"`` a naive
    ``datetime`` (any UTC offset is dropped, wall-clock time is kept).

    :raises ValueError: If the string is not ISO 8601.
    """
    text = value.strip()
    try:
        if "T" in text or " " in text:
            return dt.datetime.fromisoformat(text.replace("Z", "+00:00")).replace(tzinfo=None)
        return dt.date.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Unrecognised date: {value!r}") from None


def days_until(target: DateLike, today: DateLike) -> int:
    """Whole calendar days from ``today`` to ``target`` (negative when past)."""
    return (as_date(target) - as_date(today)).days


def week_bounds(today: DateLike) -> tuple[dt.date, dt.date]:
    """Return the Sunday and Saturday of the week containing ``today``."""
    day = as_date(today)
    # weekday(): Monday == 0 ... Sunday == 6
    start = day - dt.timedelta(days=(day.weekday() + 1) % 7)
    return start, start + dt.timedelta(days=6)


def within(value: DateLike, start: DateLike, end: DateLike) -> bool:
    """Inclusive date-range test."""
    return as_date(start) <= as_date(value) <= as_date(end)
