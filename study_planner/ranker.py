"""Study priority ranker.

Turns the deadlines inside a forward-looking horizon into ranked study
recommendations, then aggregates hours per course. Pure: the only caller
state it reads is the optional ``custom_hours`` override map.
"""
from __future__ import annotations

import datetime as dt
import logging
import typing as t

from coursework.config import DEFAULT_HORIZON_DAYS
from coursework.dates import DateLike, as_date, days_until
from coursework.models import CalendarEvent, Course
from study_planner.classifier import RANKER_CLASSIFIER, EventClassifier
from study_planner.models import CourseStudySummary, RecommendationList, StudyRecommendation
from study_planner.policy import DEFAULT_POLICY, URGENT_PRIORITY, PriorityPolicy, round_to_half

logger = logging.getLogger(__name__)

OTHER_COURSE_NAME = "Other"


def recommendation_key(event: CalendarEvent) -> str:
    """Stable key for an event's recommendation, used for custom-hour overrides."""
    return f"{event.id}-{event.date.isoformat()}"


def _course_name(event: CalendarEvent, courses_by_id: dict[str, Course]) -> str:
    course = courses_by_id.get(event.course_id) if event.course_id else None
    return course.name if course else OTHER_COURSE_NAME


def _recommend(
        event: CalendarEvent,
        today: dt.date,
        course_name: str,
        classifier: EventClassifier,
        policy: PriorityPolicy,
) -> StudyRecommendation:
    days = days_until(event.date, today)
    category = classifier.classify(f"{event.type or ''} {event.title or ''}")
    category_policy = policy.for_category(category)
    bucket = category_policy.bucket_for(days)

    # A zero weight means "unknown", same as a missing one
    weight = event.weight_percent or category_policy.default_weight
    priority = bucket.priority
    hours = bucket.hours(weight)

    if event.weight_percent and event.weight_percent > policy.weight_boost_threshold:
        priority += policy.weight_boost_priority
        hours += policy.weight_boost_hours

    return StudyRecommendation(
        id=recommendation_key(event),
        course_name=course_name,
        topic=event.title,
        priority=priority,
        recommended_hours=round_to_half(hours),
        reason=category_policy.reason(bucket, days),
        event_date=as_date(event.date),
        event_type=event.type or "other",
        event_id=event.id,
        weight_percent=event.weight_percent,
    )


def summarize_by_course(recommendations: t.Iterable[StudyRecommendation]) -> list[CourseStudySummary]:
    """Per-course hours and urgent counts, most hours first."""
    summaries: dict[str, CourseStudySummary] = {}
    for rec in recommendations:
        summary = summaries.setdefault(rec.course_name, CourseStudySummary(course_name=rec.course_name))
        summary.hours += rec.recommended_hours
        if rec.priority >= URGENT_PRIORITY:
            summary.urgent_count += 1
    return sorted(summaries.values(), key=lambda s: s.hours, reverse=True)


def rank_study_priorities(
        events: t.Iterable[CalendarEvent],
        courses: t.Iterable[Course],
        today: DateLike,
        horizon_days: int = DEFAULT_HORIZON_DAYS,
        custom_hours: t.Optional[t.Mapping[str, float]] = None,
        classifier: EventClassifier = RANKER_CLASSIFIER,
        policy: PriorityPolicy = DEFAULT_POLICY,
) -> RecommendationList:
    """Rank upcoming events by urgency and weight and suggest study hours.

    :param events: Calendar events from any course.
    :param courses: Courses used to resolve ``event.course_id`` to a name.
    :param today: Reference date; the horizon is ``[today, today + horizon_days]``.
    :param horizon_days: Length of the forward-looking window, inclusive.
    :param custom_hours: Caller-owned overrides keyed by :func:`recommendation_key`.
        An override replaces the computed hours but not priority or reason.
    :param classifier: Maps "<type> <title>" to an event category.
    :param policy: Bucket thresholds and hours formulas.
    :return: Recommendations sorted by priority (high first) then date
        (soonest first), with totals and per-course summaries. Empty when
        nothing falls inside the horizon.
    """
    start = as_date(today)
    end = start + dt.timedelta(days=horizon_days)
    courses_by_id = {course.id: course for course in courses}
    custom_hours = custom_hours or {}

    recommendations: list[StudyRecommendation] = []
    for event in events:
        if not start <= as_date(event.date) <= end:
            continue
        rec = _recommend(event, start, _course_name(event, courses_by_id), classifier, policy)
        if rec.id in custom_hours:
            rec.recommended_hours = custom_hours[rec.id]
            rec.is_custom = True
        recommendations.append(rec)

    recommendations.sort(key=lambda r: (-r.priority, r.event_date))
    logger.debug("Ranked %d event(s) between %s and %s", len(recommendations), start, end)

    return RecommendationList(
        recommendations=recommendations,
        total_hours=sum(r.recommended_hours for r in recommendations),
        urgent_count=sum(1 for r in recommendations if r.priority >= URGENT_PRIORITY),
        course_summaries=summarize_by_course(recommendations),
        horizon_start=start,
        horizon_end=end,
    )
