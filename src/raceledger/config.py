"""Runtime defaults for raceledger, overridable through the environment."""

from __future__ import annotations

import os

DEFAULT_BASE_URL = os.environ.get("RACELEDGER_API_URL", "http://localhost:8080/api/v1")
DEFAULT_TIMEOUT = float(os.environ.get("RACELEDGER_TIMEOUT", "30.0"))

LOG_DIR = os.environ.get("RACELEDGER_LOG_DIR", os.path.join(os.getcwd(), "logs"))

# Position selectors offer 1..20; anything past the points tables scores zero
MAX_GRID_POSITION = 20

DEFAULT_TOP_DRIVERS = 10

DRIVER_ROLES = frozenset({"player", "reserve"})

COMPLETED_STATUS = "completed"
