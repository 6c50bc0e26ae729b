"""
Data models for study recommendations and weekly to-do items.

This module contains the dataclasses produced by the study ranker and the
weekly to-do prioritizer.
"""
from __future__ import annotations

import datetime as dt
import typing as t
from dataclasses import dataclass, field

from study_planner.policy import priority_tier


@dataclass
class StudyRecommendation:
    """One upcoming deadline with its priority and suggested study time."""
    id: str                         # "<event id>-<event date>", stable across runs
    course_name: str
    topic: str
    priority: int
    recommended_hours: float
    reason: str
    event_date: dt.date
    event_type: str
    event_id: str
    weight_percent: t.Optional[float] = None
    is_custom: bool = False         # hours came from a caller override

    @property
    def tier(self) -> str:
        return priority_tier(self.priority)


@dataclass
class CourseStudySummary:
    """Study hours and urgent items for one course."""
    course_name: str
    hours: float = 0.0
    urgent_count: int = 0


@dataclass
class RecommendationList:
    """Ranked recommendations plus their aggregates."""
    recommendations: list[StudyRecommendation] = field(default_factory=list)
    total_hours: float = 0.0
    urgent_count: int = 0
    course_summaries: list[CourseStudySummary] = field(default_factory=list)
    horizon_start: t.Optional[dt.date] = None
    horizon_end: t.Optional[dt.date] = None

    @property
    def is_empty(self) -> bool:
        return not self.recommendations


@dataclass
class TodoItem:
    """An entry in the weekly to-do list. Priority 1 is the highest."""
    id: str
    title: str
    date: dt.date
    type: str
    priority: int
    course_name: t.Optional[str] = None
    color: t.Optional[str] = None
    is_study_task: bool = False
