"""Priority and study-hours policy for the study ranker.

Thresholds and hours formulas are plain data: build another
``PriorityPolicy`` to change them.
"""
from __future__ import annotations

import math
import typing as t
from dataclasses import dataclass

from study_planner.classifier import EventCategory

# Recommendations at or above this priority count as urgent
URGENT_PRIORITY = 7


@dataclass(frozen=True)
class PriorityBucket:
    """Priority and hours for deadlines at most ``max_days`` away.

    ``max_days=None`` is the catch-all bucket. Hours are
    ``max(min_hours, weight / weight_divisor)`` when a divisor is set,
    otherwise just ``min_hours``.
    """
    max_days: t.Optional[int]
    priority: int
    min_hours: float
    weight_divisor: t.Optional[float] = None
    suffix: str = ""

    def covers(self, days_until: int) -> bool:
        return self.max_days is None or days_until <= self.max_days

    def hours(self, weight: float) -> float:
        if self.weight_divisor is None:
            return self.min_hours
        return max(self.min_hours, weight / self.weight_divisor)


@dataclass(frozen=True)
class CategoryPolicy:
    """Buckets for one event category, closest deadline first."""
    noun_phrase: str                # "Exam in", "Project due in", ...
    buckets: tuple[PriorityBucket, ...]
    default_weight: float = 0.0     # used when an event carries no weight

    def bucket_for(self, days_until: int) -> PriorityBucket:
        for bucket in self.buckets:
            if bucket.covers(days_until):
                return bucket
        return self.buckets[-1]

    def reason(self, bucket: PriorityBucket, days_until: int) -> str:
        unit = "day" if days_until == 1 else "days"
        text = f"{self.noun_phrase} {days_until} {unit}"
        return f"{text} - {bucket.suffix}" if bucket.suffix else text


@dataclass(frozen=True)
class PriorityPolicy:
    """Category policies plus the boost applied to heavily weighted events."""
    categories: dict[EventCategory, CategoryPolicy]
    fallback: EventCategory = EventCategory.OTHER
    weight_boost_threshold: float = 25.0
    weight_boost_priority: int = 1
    weight_boost_hours: float = 0.5

    def for_category(self, category: EventCategory) -> CategoryPolicy:
        return self.categories.get(category) or self.categories[self.fallback]


DEFAULT_POLICY = PriorityPolicy(categories={
    EventCategory.EXAM: CategoryPolicy(
        noun_phrase="Exam in",
        default_weight=20,
        buckets=(
            PriorityBucket(3, 10, 3, 10, "Critical priority"),
            PriorityBucket(7, 8, 2, 15, "High priority"),
            PriorityBucket(None, 6, 1.5, 20, "Plan ahead"),
        ),
    ),
    EventCategory.QUIZ: CategoryPolicy(
        noun_phrase="Quiz in",
        default_weight=15,
        buckets=(
            PriorityBucket(2, 8, 2, 12, "High priority"),
            PriorityBucket(5, 6, 1.5, 18, "Medium-high priority"),
            PriorityBucket(None, 4, 1, 25, "Medium priority"),
        ),
    ),
    EventCategory.PROJECT: CategoryPolicy(
        noun_phrase="Project due in",
        default_weight=15,
        buckets=(
            PriorityBucket(3, 5, 2, 15),
            PriorityBucket(7, 3, 1.5, 20),
            PriorityBucket(None, 2, 1, suffix="Start planning"),
        ),
    ),
    EventCategory.ASSIGNMENT: CategoryPolicy(
        noun_phrase="Assignment due in",
        buckets=(
            PriorityBucket(2, 4, 1.5),
            PriorityBucket(5, 2, 1),
            PriorityBucket(None, 1, 0.5),
        ),
    ),
    EventCategory.OTHER: CategoryPolicy(
        noun_phrase="Due in",
        buckets=(
            PriorityBucket(2, 3, 1),
            PriorityBucket(None, 1, 0.5),
        ),
    ),
})


def priority_tier(priority: int) -> str:
    """Display tier for a numeric priority."""
    if priority >= 8:
        return "Critical"
    if priority >= 6:
        return "High"
    if priority >= 4:
        return "Medium"
    return "Low"


def round_to_half(hours: float) -> float:
    """Round to the nearest 0.5 hour, halves rounding up."""
    return math.floor(hours * 2 + 0.5) / 2
