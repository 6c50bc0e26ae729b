"""Logging configuration for the CLI and the REST service."""
from __future__ import annotations

import logging
import typing as t

from rich.console import Console
from rich.logging import RichHandler

from coursework.config import LOG_LEVEL


def configure_logging(
        level: t.Optional[str] = None,
        verbose: bool = False,
        console: t.Optional[Console] = None,
) -> None:
    """Route log records through rich so they match the console output.

    :param level: Log level name. Defaults to ``COPILOT_LOG_LEVEL``.
    :param verbose: Force DEBUG regardless of ``level``.
    :param console: Console to write to (stderr by default).
    """
    resolved = "DEBUG" if verbose else (level or LOG_LEVEL)
    logging.basicConfig(
        level=resolved,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )
