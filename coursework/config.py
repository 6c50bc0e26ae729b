"""Environment-driven settings shared by the service, MCP servers and CLI."""
from __future__ import annotations

import os
from pathlib import Path

# Forward-looking window used by the study ranker when the caller gives none
DEFAULT_HORIZON_DAYS = int(os.getenv("COPILOT_HORIZON_DAYS", "14"))

# Where the CLI keeps per-recommendation study-hour overrides
STUDY_HOURS_PATH = Path(
    os.getenv("COPILOT_STUDY_HOURS_PATH", str(Path.home() / ".copilot" / "study-hours.json"))
).expanduser()

MAX_CUSTOM_HOURS = float(os.getenv("COPILOT_MAX_CUSTOM_HOURS", "20"))

SERVICE_HOST = os.getenv("COPILOT_SERVICE_HOST", "0.0.0.0")
SERVICE_PORT = int(os.getenv("COPILOT_SERVICE_PORT", "8003"))

LOG_LEVEL = os.getenv("COPILOT_LOG_LEVEL", "INFO").upper()
