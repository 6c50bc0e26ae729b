# -*- coding: utf-8 -*-
"""JSON-file storage for custom study-hour overrides.

The ranker only reads an override map; this module is the caller-side state
the CLI keeps between runs. Writes are last-write-wins per key.
"""
from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path

from coursework.config import MAX_CUSTOM_HOURS

logger = logging.getLogger(__name__)


def load_custom_hours(path: Path) -> dict[str, float]:
    """Load overrides from ``path``; a missing file means no overrides.

    :raises ValueError: If the file is not a JSON object of numbers.
    """
    path = Path(path)
    if not path.is_file():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Custom hours file {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Custom hours file {path} must contain a JSON object")
    try:
        return {str(key): float(value) for key, value in data.items()}
    except (TypeError, ValueError) as e:
        raise ValueError(f"Custom hours file {path} has a non-numeric value: {e}") from e


def _write(path: Path, overrides: dict[str, float]) -> None:
    # Write beside the target and swap it in, so a failed write keeps the old file
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False,
    )
    tmp_path = Path(tmp.name)
    try:
        with tmp:
            json.dump(overrides, tmp, indent=2, sort_keys=True)
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def save_custom_hours(path: Path, key: str, hours: float) -> dict[str, float]:
    """Set the override for ``key`` and return the full map.

    :raises ValueError: If ``hours`` is outside ``[0, MAX_CUSTOM_HOURS]``.
    """
    if not 0 <= hours <= MAX_CUSTOM_HOURS:
        raise ValueError(f"Study hours must be between 0 and {MAX_CUSTOM_HOURS:g}, got {hours:g}")
    path = Path(path)
    overrides = load_custom_hours(path)
    overrides[key] = float(hours)
    _write(path, overrides)
    logger.info("Saved %sh for %s", hours, key)
    return overrides


def clear_custom_hours(path: Path, key: str) -> bool:
    """Remove the override for ``key``. Returns False when there was none."""
    path = Path(path)
    overrides = load_custom_hours(path)
    if key not in overrides:
        return False
    del overrides[key]
    _write(path, overrides)
    logger.info("Cleared custom hours for %s", key)
    return True
