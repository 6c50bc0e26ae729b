"""
Shared Pydantic models for REST API serialization.

This module contains Pydantic equivalents of the dataclass models used by the
planning engines, plus the request/response bodies of the co-pilot service.
Input validation happens here, at the boundary; the engines themselves assume
well-formed data.
"""
from __future__ import annotations

import datetime as dt
import typing as t

from pydantic import BaseModel, Field, field_validator

from coursework.config import DEFAULT_HORIZON_DAYS, MAX_CUSTOM_HOURS
from coursework.dates import parse_event_date

Percent = t.Annotated[float, Field(ge=0, le=100)]


def _coerce_id(value: t.Any) -> t.Any:
    # Event ids come back from the database as integers
    return str(value) if isinstance(value, int) else value


# Entity Models
class GradeCategory(BaseModel):
    """A weighted grade category."""
    id: str
    name: str
    weight: Percent
    current_score: Percent = 0.0
    is_completed: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_ids(cls, value: t.Any) -> t.Any:
        return _coerce_id(value)


class CalendarEvent(BaseModel):
    """A dated deadline, exam or lecture."""
    id: str
    title: str
    date: str                               # "YYYY-MM-DD" or ISO datetime
    type: t.Optional[str] = "other"
    weight_percent: t.Optional[Percent] = None
    course_id: t.Optional[str] = None
    description: str = ""

    @field_validator("id", "course_id", mode="before")
    @classmethod
    def _coerce_ids(cls, value: t.Any) -> t.Any:
        return _coerce_id(value)

    @field_validator("date")
    @classmethod
    def _check_date(cls, value: str) -> str:
        parse_event_date(value)
        return value


class Course(BaseModel):
    """A course and its grade categories."""
    id: str
    name: str
    code: str = ""
    color: str = ""
    syllabus_text: t.Optional[str] = None
    grade_categories: list[GradeCategory] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_ids(cls, value: t.Any) -> t.Any:
        return _coerce_id(value)


class SnapshotPayload(BaseModel):
    """Courses and events exported from the app, as read by the CLI."""
    courses: list[Course] = Field(default_factory=list)
    events: list[CalendarEvent] = Field(default_factory=list)


# Grade Planner Models
class GradeTargetResult(BaseModel):
    """Flattened solver result; ``kind`` says which fields are set."""
    kind: t.Literal["all_completed", "already_achieved", "infeasible", "single_remaining", "multiple_remaining"]
    target_percent: float
    needed_average: t.Optional[float] = None
    current_grade: t.Optional[float] = None
    category_name: t.Optional[str] = None
    needed_letter: t.Optional[str] = None
    message: str = ""


class GradeSummary(BaseModel):
    """Earned points and weights for a set of categories."""
    earned_points: float
    completed_weight: float
    remaining_weight: float
    total_weight: float
    completed_average: t.Optional[float] = None


class GradeTargetRequest(BaseModel):
    """Request model for solving grade targets over categories."""
    categories: list[GradeCategory]
    target_percent: Percent
    passing_percent: t.Optional[Percent] = None


class FinalExamRequest(BaseModel):
    """Request model for the single final-exam shortcut."""
    current_grade: Percent
    final_weight: float = Field(gt=0, le=100)
    target_percent: Percent
    passing_percent: t.Optional[Percent] = None


class GradePlanResponse(BaseModel):
    """Response model for grade target solves."""
    desired: GradeTargetResult
    passing: t.Optional[GradeTargetResult] = None
    summary: t.Optional[GradeSummary] = None


# Study Planner Models
class StudyRecommendation(BaseModel):
    """A ranked study recommendation."""
    id: str
    course_name: str
    topic: str
    priority: int
    tier: str
    recommended_hours: float
    reason: str
    event_date: dt.date
    event_type: str
    event_id: str
    weight_percent: t.Optional[float] = None
    is_custom: bool = False


class CourseStudySummary(BaseModel):
    """Study hours and urgent items for one course."""
    course_name: str
    hours: float
    urgent_count: int


class StudyRecommendationsRequest(BaseModel):
    """Request model for ranking study priorities."""
    events: list[CalendarEvent]
    courses: list[Course] = Field(default_factory=list)
    today: t.Optional[dt.date] = None
    horizon_days: int = Field(default=DEFAULT_HORIZON_DAYS, ge=0)
    custom_hours: dict[str, t.Annotated[float, Field(ge=0, le=MAX_CUSTOM_HOURS)]] = Field(default_factory=dict)


class RecommendationListResponse(BaseModel):
    """Response model for ranked study recommendations."""
    recommendations: list[StudyRecommendation] = Field(default_factory=list)
    total_hours: float = 0.0
    urgent_count: int = 0
    course_summaries: list[CourseStudySummary] = Field(default_factory=list)
    horizon_start: t.Optional[dt.date] = None
    horizon_end: t.Optional[dt.date] = None


class TodoItem(BaseModel):
    """An entry in the weekly to-do list."""
    id: str
    title: str
    date: dt.date
    type: str
    priority: int
    label: str
    course_name: t.Optional[str] = None
    color: t.Optional[str] = None
    is_study_task: bool = False


class WeeklyTodoRequest(BaseModel):
    """Request model for the weekly to-do list."""
    events: list[CalendarEvent]
    courses: list[Course] = Field(default_factory=list)
    today: t.Optional[dt.date] = None


class WeeklyTodoResponse(BaseModel):
    """Response model for the weekly to-do list."""
    week_start: dt.date
    week_end: dt.date
    items: list[TodoItem] = Field(default_factory=list)


class GenerateLecturesRequest(BaseModel):
    """Request model for expanding a lecture schedule into events."""
    course_id: str
    course_name: str
    lecture_times: str
    semester_start: t.Optional[dt.date] = None
    semester_end: t.Optional[dt.date] = None


class GenerateLecturesResponse(BaseModel):
    """Response model for generated lecture events."""
    events: list[CalendarEvent] = Field(default_factory=list)
