"""Editable result rows for a single event.

Each edit goes through :func:`apply_edit`, a pure reducer that stores the new
value and re-derives the dependent fields (display names, race points, sprint
points, the DNF overrides). :class:`ResultsEditor` owns the row collection
for one editing session and adds the cross-row rules: one row per
participant, finalize-time validation and the persist payload.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict

from raceledger.config import MAX_GRID_POSITION
from raceledger.exceptions import InvalidEditError, ResultsValidationError
from raceledger.models.match import Match
from raceledger.models.match_result import MatchResult, ResultRecord
from raceledger.models.participant import Participant
from raceledger.models.team import Team
from raceledger.points import race_points, sprint_points
from raceledger.validation import ValidationFailure, validate_rows

EDITABLE_FIELDS = frozenset({
    "participant_id",
    "team_name",
    "position",
    "fastest_lap",
    "dnf",
    "dnf_reason",
    "sprint_position",
})

# Controls that are locked while a row is flagged DNF
_DNF_LOCKED_FIELDS = frozenset({"position", "fastest_lap"})


class ResultRow(BaseModel):
    """One participant's result as it is being edited."""

    model_config = ConfigDict(frozen=True)

    row_id: str
    participant_id: str = ""
    participant_name: str = ""
    team_name: str = ""
    position: int | None = None
    points: int = 0
    fastest_lap: bool = False
    dnf: bool = False
    dnf_reason: str = ""
    sprint_position: int | None = None
    sprint_points: int = 0

    @property
    def is_complete(self) -> bool:
        return bool(self.participant_id)


def _check_position(field: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidEditError(f"{field} must be an integer or None, got {value!r}")
    if not 1 <= value <= MAX_GRID_POSITION:
        raise InvalidEditError(
            f"{field} must be between 1 and {MAX_GRID_POSITION}, got {value}"
        )


def apply_edit(
    row: ResultRow,
    field: str,
    value: Any,
    participants: Sequence[Participant] = (),
) -> ResultRow:
    """Return a copy of *row* with *field* set to *value* and derived fields refreshed.

    Args:
        row: The row being edited.
        field: One of ``EDITABLE_FIELDS``.
        value: New value for the field.
        participants: Reference set used to resolve participant display names.

    Raises:
        InvalidEditError: If the field is unknown or derived, or a position is
            out of range.
    """
    if field not in EDITABLE_FIELDS:
        raise InvalidEditError(f"Field {field!r} is not editable")
    if field in ("position", "sprint_position"):
        _check_position(field, value)

    if row.dnf and field in _DNF_LOCKED_FIELDS:
        return row

    update: dict[str, Any] = {field: value}

    if field == "participant_id":
        update[field] = value or ""
        participant = next((p for p in participants if p.id == value), None)
        if participant is not None:
            update["participant_name"] = participant.user_nickname or ""
            update["team_name"] = participant.team_name or ""
        else:
            update["participant_name"] = ""
            update["team_name"] = ""
    elif field in ("team_name", "dnf_reason"):
        update[field] = value or ""
    elif field in ("fastest_lap", "dnf"):
        update[field] = bool(value)

    if field in ("position", "dnf"):
        position = update.get("position", row.position)
        dnf = update.get("dnf", row.dnf)
        update["points"] = race_points(position, dnf)

    if field == "dnf" and update["dnf"]:
        update["position"] = None
        update["points"] = 0
        update["fastest_lap"] = False

    if field == "sprint_position":
        update["sprint_points"] = sprint_points(value)

    return row.model_copy(update=update)


def row_from_result(row_id: str, result: MatchResult) -> ResultRow:
    """Seed an editable row from a stored result without validating it."""
    return ResultRow(
        row_id=row_id,
        participant_id=result.participant_id,
        participant_name=result.participant_name or "",
        team_name=result.effective_team_name or "",
        position=result.position,
        points=int(result.points),
        fastest_lap=result.fastest_lap,
        dnf=result.dnf,
        dnf_reason=result.dnf_reason or "",
        sprint_position=result.sprint_position,
        sprint_points=int(result.sprint_points),
    )


def row_to_record(row: ResultRow) -> ResultRecord:
    """Translate a finalized row into its persistence record."""
    return ResultRecord(
        participant_id=row.participant_id,
        team_name=row.team_name or None,
        position=row.position,
        points=row.points,
        fastest_lap=row.fastest_lap,
        dnf=row.dnf,
        dnf_reason=(row.dnf_reason or None) if row.dnf else None,
        sprint_position=row.sprint_position,
        sprint_points=row.sprint_points,
    )


class ResultsEditor:
    """Result rows for one match, edited one field at a time.

    Usage:
        editor = ResultsEditor(match, drivers, teams)
        editor.initialize(stored_results)
        row = editor.add_row()
        editor.set_field(row.row_id, "participant_id", drivers[0].id)
        editor.set_field(row.row_id, "position", 1)
        if editor.validate() is None:
            records = editor.to_persist_request()

    *participants* is the eligible (driver-class) set; filtering by role is
    the caller's job.
    """

    def __init__(
        self,
        match: Match,
        participants: Iterable[Participant],
        teams: Iterable[Team] = (),
    ) -> None:
        self.match = match
        self._participants = list(participants)
        self._team_names = [t.name for t in teams]
        self._rows: list[ResultRow] = []
        self._row_ids = itertools.count(1)

    @property
    def rows(self) -> tuple[ResultRow, ...]:
        return tuple(self._rows)

    @property
    def participants(self) -> tuple[Participant, ...]:
        return tuple(self._participants)

    @property
    def has_sprint(self) -> bool:
        return self.match.has_sprint

    def _next_row_id(self) -> str:
        return f"row-{next(self._row_ids)}"

    def _index(self, row_id: str) -> int:
        for idx, row in enumerate(self._rows):
            if row.row_id == row_id:
                return idx
        raise InvalidEditError(f"Unknown row {row_id!r}")

    def get_row(self, row_id: str) -> ResultRow:
        return self._rows[self._index(row_id)]

    def initialize(self, existing: Iterable[MatchResult] = ()) -> None:
        """Replace the rows with previously stored results (or start empty)."""
        self._rows = [row_from_result(self._next_row_id(), r) for r in existing]

    @property
    def can_add_row(self) -> bool:
        return len(self._rows) < len(self._participants)

    def add_row(self) -> ResultRow | None:
        """Append an empty row. Returns None when every participant already has a row."""
        if not self.can_add_row:
            return None
        row = ResultRow(row_id=self._next_row_id())
        self._rows.append(row)
        return row

    def remove_row(self, row_id: str) -> None:
        del self._rows[self._index(row_id)]

    def set_field(self, row_id: str, field: str, value: Any) -> ResultRow:
        """Set one field on a row and return the updated row."""
        idx = self._index(row_id)
        if field == "participant_id" and value:
            taken = {r.participant_id for r in self._rows if r.row_id != row_id}
            if value in taken:
                raise InvalidEditError(f"Participant {value!r} already has a result row")
        updated = apply_edit(self._rows[idx], field, value, self._participants)
        self._rows[idx] = updated
        return updated

    def available_participants(self, excluding_row_id: str | None = None) -> list[Participant]:
        """Participants not yet assigned to a row other than *excluding_row_id*."""
        taken = {
            r.participant_id
            for r in self._rows
            if r.row_id != excluding_row_id and r.participant_id
        }
        return [p for p in self._participants if p.id not in taken]

    def team_options(self, row_id: str) -> list[str]:
        """League team names, plus the row's current team if it is not one of them."""
        current = self.get_row(row_id).team_name
        options = list(self._team_names)
        if current and current not in options:
            options.append(current)
        return options

    def validate(self) -> ValidationFailure | None:
        return validate_rows(self._rows, self.has_sprint)

    def to_persist_request(self) -> list[ResultRecord]:
        """Build the records to persist.

        Raises:
            ResultsValidationError: If :meth:`validate` reports a failure.
        """
        failure = self.validate()
        if failure is not None:
            raise ResultsValidationError(failure)
        return [row_to_record(row) for row in self._rows]

    def discard(self) -> None:
        """Drop all rows once they have been handed off for persistence."""
        self._rows = []
