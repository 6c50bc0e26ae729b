"""Keyword classification of calendar events.

Event types and titles are free text, so classification is a substring
heuristic. Rule sets are data; swap them or pass another ``EventClassifier``
to the planners to change matching without touching the ranking logic.
"""
from __future__ import annotations

import typing as t
from enum import Enum


class EventCategory(str, Enum):
    """Coarse kind of deliverable an event represents."""
    EXAM = "exam"
    QUIZ = "quiz"
    PROJECT = "project"
    ASSIGNMENT = "assignment"
    HOMEWORK = "homework"
    READING = "reading"
    OTHER = "other"


class EventClassifier(t.Protocol):
    """Protocol for event classifiers."""

    def classify(self, text: str) -> EventCategory:
        """Map free text to a category."""
        ...


class KeywordClassifier:
    """First-match keyword classifier.

    Rules are checked in order; the first category with any keyword found in
    the lowercased text wins. Text matching no rule gets ``default``.
    """

    def __init__(
            self,
            rules: t.Sequence[tuple[EventCategory, t.Sequence[str]]],
            default: EventCategory = EventCategory.OTHER,
    ) -> None:
        self.rules = [(category, tuple(k.lower() for k in keywords)) for category, keywords in rules]
        self.default = default

    def classify(self, text: str) -> EventCategory:
        lowered = (text or "").lower()
        for category, keywords in self.rules:
            if any(keyword in lowered for keyword in keywords):
                return category
        return self.default

    def matches(self, text: str) -> bool:
        """True when some rule matches ``text``."""
        return self.classify(text) != self.default


# Used by the study ranker over "<type> <title>"
RANKER_CLASSIFIER = KeywordClassifier([
    (EventCategory.EXAM, ("exam", "test", "final")),
    (EventCategory.QUIZ, ("quiz", "midterm")),
    (EventCategory.PROJECT, ("project",)),
    (EventCategory.ASSIGNMENT, ("assignment", "homework", "hw")),
])

# Used by the weekly to-do list over the event type alone
WEEKLY_CLASSIFIER = KeywordClassifier([
    (EventCategory.EXAM, ("exam", "test", "final")),
    (EventCategory.QUIZ, ("quiz", "midterm")),
    (EventCategory.PROJECT, ("project",)),
    (EventCategory.ASSIGNMENT, ("assignment",)),
    (EventCategory.HOMEWORK, ("homework", "hw")),
    (EventCategory.READING, ("reading",)),
])

# Events that get a derived "Study for ..." task
STUDY_TRIGGER_CLASSIFIER = KeywordClassifier([
    (EventCategory.EXAM, ("exam", "test", "final", "midterm")),
])
