"""
Data models for courses, grade categories and calendar events.

These are the plain snapshots handed to the planning engines. They are
assembled by the persistence layer or the syllabus parser and are never
mutated by the grade solver or the study ranker.
"""
from __future__ import annotations

import datetime as dt
import typing as t
from dataclasses import dataclass, field, replace


@dataclass
class GradeCategory:
    """A weighted slice of a course grade, e.g. "Homework, 20%"."""
    id: str
    name: str
    weight: float                   # percent of the overall course grade
    current_score: float = 0.0      # percent earned; meaningful only once completed
    is_completed: bool = False


@dataclass
class CalendarEvent:
    """A dated deadline, exam or lecture."""
    id: str
    title: str
    date: t.Union[dt.date, dt.datetime]
    type: str = "other"             # free-text tag: "exam", "quiz", "homework", ...
    weight_percent: t.Optional[float] = None
    course_id: t.Optional[str] = None
    description: str = ""


@dataclass
class Course:
    """A course and the grade categories it owns."""
    id: str
    name: str
    code: str = ""
    color: str = ""
    syllabus_text: t.Optional[str] = None
    grade_categories: list[GradeCategory] = field(default_factory=list)

    def replace_grade_categories(self, categories: t.Iterable[GradeCategory]) -> "Course":
        """Return a copy of this course with its category set replaced wholesale."""
        return replace(self, grade_categories=list(categories))
