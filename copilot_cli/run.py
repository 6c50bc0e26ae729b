# -*- coding: utf-8 -*-
import datetime as dt
import json
import logging
import typing as t
from dataclasses import asdict

import click
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from copilot_cli.utils import console, fail, find_course, read_snapshot
from coursework.config import DEFAULT_HORIZON_DAYS, MAX_CUSTOM_HOURS, STUDY_HOURS_PATH
from coursework.logging_setup import configure_logging
from grade_planner.report import format_grade_plan
from grade_planner.models import GradePlan
from grade_planner.solver import final_exam_categories, grade_summary, plan_grade_targets
from study_planner.lectures import generate_lecture_events, parse_lecture_times
from study_planner.models import RecommendationList, TodoItem
from study_planner.overrides import clear_custom_hours, load_custom_hours, save_custom_hours
from study_planner.ranker import rank_study_priorities
from study_planner.report import format_recommendations
from study_planner.weekly import build_weekly_todo, todo_label

logger = logging.getLogger(__name__)

TIER_STYLES = {
    "Critical": "bold red",
    "High": "dark_orange",
    "Medium": "yellow",
    "Low": "blue",
}

percent = click.FloatRange(0, 100)
date_type = click.DateTime(formats=["%Y-%m-%d"])


def _as_day(value: t.Optional[dt.datetime]) -> dt.date:
    return value.date() if value else dt.date.today()


def create_recommendation_table(result: RecommendationList, limit: t.Optional[int]) -> Table:
    """Create a table of ranked study recommendations."""
    table = Table(title="📚 Study Recommendations", show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=3)
    table.add_column("Course", style="cyan")
    table.add_column("Topic", style="white")
    table.add_column("Due", style="yellow")
    table.add_column("Priority")
    table.add_column("Hours", justify="right")
    table.add_column("Reason", style="dim")
    table.add_column("Key", style="dim")

    rows = result.recommendations[:limit] if limit else result.recommendations
    for idx, rec in enumerate(rows, 1):
        hours = f"{rec.recommended_hours:g}h" + (" ✎" if rec.is_custom else "")
        weight = f" ({rec.weight_percent:g}%)" if rec.weight_percent else ""
        table.add_row(
            "⭐" if idx == 1 else str(idx),
            rec.course_name,
            rec.topic + weight,
            rec.event_date.strftime("%a %m/%d"),
            f"[{TIER_STYLES[rec.tier]}]{rec.tier}[/]",
            hours,
            rec.reason,
            rec.id,
        )
    return table


def create_course_table(result: RecommendationList) -> Table:
    """Create a per-course hours summary table."""
    table = Table(title="By Course", show_header=True, header_style="bold magenta")
    table.add_column("Course", style="cyan")
    table.add_column("Hours", justify="right")
    table.add_column("Urgent", justify="right", style="red")
    for summary in result.course_summaries:
        table.add_row(summary.course_name, f"{summary.hours:g}h", str(summary.urgent_count or ""))
    return table


def create_todo_table(items: list[TodoItem]) -> Table:
    """Create a table for the weekly to-do list."""
    table = Table(title="✅ This Week", show_header=True, header_style="bold magenta")
    table.add_column("", width=3)
    table.add_column("Title", style="white")
    table.add_column("Date", style="yellow")
    table.add_column("Course", style="cyan")
    table.add_column("Priority")
    for item in items:
        table.add_row(
            "📖" if item.is_study_task else "📌",
            item.title,
            item.date.strftime("%a %m/%d"),
            item.course_name or "—",
            todo_label(item.priority),
        )
    return table


def _print_grade_plan(plan: GradePlan, categories: list) -> None:
    console.print(Panel(Text(format_grade_plan(plan, grade_summary(categories))), expand=False))


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Grade targets and study planning for your courses."""
    configure_logging(verbose=verbose)


@cli.command("grade-target")
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.option("--course", "-c", "course_key", required=True, help="Course id or code.")
@click.option("--target", "-t", type=percent, required=True, help="Desired overall grade (%).")
@click.option("--passing", "-p", type=percent, default=None, help="Passing grade (%).")
def grade_target(snapshot: str, course_key: str, target: float, passing: t.Optional[float]) -> None:
    """Score needed on the remaining grade categories of a course.

    SNAPSHOT: JSON file with "courses" and "events".

    Examples:
        copilot grade-target data.json --course CS101 --target 90 --passing 60
    """
    courses, _ = read_snapshot(snapshot)
    course = find_course(courses, course_key)
    if not course.grade_categories:
        fail(f"Course '{course.name}' has no grade categories.")
    console.print(f"[bold]{course.name}[/bold] [dim]{course.code}[/dim]")
    _print_grade_plan(plan_grade_targets(course.grade_categories, target, passing), course.grade_categories)


@cli.command("final-exam")
@click.option("--current", type=percent, required=True, help="Grade before the final (%).")
@click.option("--final-weight", type=click.FloatRange(0, 100, min_open=True), required=True,
              help="Share of the course grade the final is worth (%).")
@click.option("--target", "-t", type=percent, required=True, help="Desired overall grade (%).")
@click.option("--passing", "-p", type=percent, default=None, help="Passing grade (%).")
def final_exam(current: float, final_weight: float, target: float, passing: t.Optional[float]) -> None:
    """Score needed on the final exam.

    Examples:
        copilot final-exam --current 85 --final-weight 40 --target 90
    """
    categories = final_exam_categories(current, final_weight)
    _print_grade_plan(plan_grade_targets(categories, target, passing), categories)


@cli.command("study-plan")
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.option("--today", type=date_type, default=None, help="Reference date (YYYY-MM-DD).")
@click.option("--horizon", type=click.IntRange(min=0), default=DEFAULT_HORIZON_DAYS, show_default=True,
              help="Days ahead to consider.")
@click.option("--limit", type=click.IntRange(min=1), default=8, show_default=True, help="Rows to show.")
@click.option("--hours-file", type=click.Path(dir_okay=False), default=str(STUDY_HOURS_PATH),
              show_default=True, help="Custom study-hours overrides.")
@click.option("--plain", is_flag=True, help="Print a plain-text table instead of rich output.")
def study_plan(
        snapshot: str,
        today: t.Optional[dt.datetime],
        horizon: int,
        limit: int,
        hours_file: str,
        plain: bool,
) -> None:
    """Ranked study recommendations for upcoming deadlines.

    SNAPSHOT: JSON file with "courses" and "events".

    Examples:
        copilot study-plan data.json
        copilot study-plan data.json --today 2026-10-19 --horizon 7
    """
    courses, events = read_snapshot(snapshot)
    try:
        custom_hours = load_custom_hours(hours_file)
    except ValueError as e:
        fail(str(e))

    result = rank_study_priorities(events, courses, _as_day(today), horizon, custom_hours)

    if plain or result.is_empty:
        click.echo(format_recommendations(result, limit))
        return

    console.print(create_recommendation_table(result, limit))
    console.print(
        f"[bold]{result.total_hours:g}h[/bold] recommended across "
        f"{len(result.recommendations)} item(s), [red]{result.urgent_count} urgent[/red]"
    )
    console.print(create_course_table(result))


@cli.command("weekly-todo")
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.option("--today", type=date_type, default=None, help="Reference date (YYYY-MM-DD).")
def weekly_todo(snapshot: str, today: t.Optional[dt.datetime]) -> None:
    """This week's prioritized to-do list.

    SNAPSHOT: JSON file with "courses" and "events".
    """
    courses, events = read_snapshot(snapshot)
    items = build_weekly_todo(events, courses, _as_day(today))
    if not items:
        console.print("[green]✅ Nothing on the list this week.[/green]")
        return
    console.print(create_todo_table(items))


@cli.command("lectures")
@click.argument("course_id")
@click.argument("course_name")
@click.argument("lecture_times")
@click.option("--start", type=date_type, default=None, help="Semester start (YYYY-MM-DD).")
@click.option("--end", type=date_type, default=None, help="Semester end (YYYY-MM-DD).")
def lectures(
        course_id: str,
        course_name: str,
        lecture_times: str,
        start: t.Optional[dt.datetime],
        end: t.Optional[dt.datetime],
) -> None:
    """Print recurring lecture events as JSON.

    Examples:
        copilot lectures cs101 "Intro to CS" "Monday Wednesday, 9:00 AM - 10:15 AM" --start 2026-09-01
    """
    if parse_lecture_times(lecture_times) is None:
        fail(f"Could not parse lecture times: {lecture_times!r}")
    events = generate_lecture_events(
        course_id,
        course_name,
        lecture_times,
        start.date() if start else None,
        end.date() if end else None,
    )
    data = [{**asdict(e), "date": e.date.isoformat()} for e in events]
    console.print(JSON(json.dumps(data, indent=2)))


@cli.command("set-hours")
@click.argument("key")
@click.argument("hours", type=float)
@click.option("--hours-file", type=click.Path(dir_okay=False), default=str(STUDY_HOURS_PATH),
              show_default=True, help="Custom study-hours overrides.")
def set_hours(key: str, hours: float, hours_file: str) -> None:
    """Override the recommended study hours for one recommendation.

    KEY: Recommendation key as shown by study-plan ("<event id>-<date>").
    """
    try:
        save_custom_hours(hours_file, key, hours)
    except ValueError as e:
        fail(str(e))
    console.print(f"[green]✓[/green] {key}: {hours:g}h (max {MAX_CUSTOM_HOURS:g}h)")


@cli.command("clear-hours")
@click.argument("key")
@click.option("--hours-file", type=click.Path(dir_okay=False), default=str(STUDY_HOURS_PATH),
              show_default=True, help="Custom study-hours overrides.")
def clear_hours(key: str, hours_file: str) -> None:
    """Remove a study-hours override."""
    try:
        removed = clear_custom_hours(hours_file, key)
    except ValueError as e:
        fail(str(e))
    if removed:
        console.print(f"[green]✓[/green] Cleared {key}")
    else:
        console.print(f"[yellow]No override for {key}[/yellow]")


if __name__ == "__main__":
    cli()
