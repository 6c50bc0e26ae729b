"""Utility functions for the co-pilot CLI."""
import json
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from coursework.models import CalendarEvent, Course
from services.shared.convert import load_snapshot
from services.shared.models import SnapshotPayload

console = Console()
err_console = Console(stderr=True)


def fail(message: str) -> None:
    """Print an error and exit with status 1."""
    err_console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
    raise SystemExit(1)


def read_snapshot(path_str: str) -> tuple[list[Course], list[CalendarEvent]]:
    """Read a JSON snapshot of courses and events.

    Args:
        path_str: Path to a JSON file with "courses" and "events" arrays

    Returns:
        Courses and events as engine dataclasses

    Raises:
        SystemExit: If the file is missing, not JSON, or fails validation
    """
    path = Path(path_str)
    if not path.is_file():
        fail(f"Snapshot '{path_str}' does not exist.")

    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = SnapshotPayload.model_validate(json.load(f))
    except json.JSONDecodeError as e:
        fail(f"Snapshot '{path_str}' is not valid JSON: {e}")
    except ValidationError as e:
        fail(f"Snapshot '{path_str}' is malformed:\n{e}")

    return load_snapshot(payload)


def find_course(courses: list[Course], key: str) -> Course:
    """Find a course by id or code (case-insensitive)."""
    for course in courses:
        if course.id == key or course.code.lower() == key.lower():
            return course
    fail(f"No course with id or code '{key}'.")
