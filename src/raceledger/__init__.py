"""raceledger — race results ledger and cumulative season standings."""

from raceledger.aggregation import (
    EntitySeries,
    EventResults,
    SeriesPoint,
    chart_rows,
    completed_events,
    cumulative_driver_series,
    cumulative_team_series,
)
from raceledger.client import AsyncLeagueClient, LeagueClient
from raceledger.editor import ResultRow, ResultsEditor, apply_edit
from raceledger.exceptions import (
    InvalidEditError,
    OperationFailedError,
    RaceLedgerAPIError,
    RaceLedgerConnectionError,
    RaceLedgerError,
    RaceLedgerTimeoutError,
    RaceLedgerValidationError,
    ResultsValidationError,
)
from raceledger.points import RACE_POINTS, SPRINT_POINTS, race_points, sprint_points
from raceledger.validation import ValidationFailure

__all__ = [
    "RACE_POINTS",
    "SPRINT_POINTS",
    "AsyncLeagueClient",
    "EntitySeries",
    "EventResults",
    "InvalidEditError",
    "LeagueClient",
    "OperationFailedError",
    "RaceLedgerAPIError",
    "RaceLedgerConnectionError",
    "RaceLedgerError",
    "RaceLedgerTimeoutError",
    "RaceLedgerValidationError",
    "ResultRow",
    "ResultsEditor",
    "ResultsValidationError",
    "SeriesPoint",
    "ValidationFailure",
    "apply_edit",
    "chart_rows",
    "completed_events",
    "cumulative_driver_series",
    "cumulative_team_series",
    "race_points",
    "sprint_points",
]

__version__ = "0.1.0"
