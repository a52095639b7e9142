"""Finalize-time checks for an event's result rows.

Checks run in a fixed order and evaluation stops at the first failure, so a
caller only ever sees one reason per attempt.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from raceledger.editor import ResultRow


class ValidationFailure(str, Enum):
    """Reasons a result set cannot be finalized."""

    EMPTY_RESULT_SET = "empty_result_set"
    MISSING_PARTICIPANT = "missing_participant"
    DUPLICATE_POSITION = "duplicate_position"
    DUPLICATE_SPRINT_POSITION = "duplicate_sprint_position"
    TOO_MANY_FASTEST_LAPS = "too_many_fastest_laps"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES: dict[ValidationFailure, str] = {
    ValidationFailure.EMPTY_RESULT_SET: "Enter at least one result.",
    ValidationFailure.MISSING_PARTICIPANT: "Select a participant for every row.",
    ValidationFailure.DUPLICATE_POSITION: "Race positions must be unique.",
    ValidationFailure.DUPLICATE_SPRINT_POSITION: "Sprint positions must be unique.",
    ValidationFailure.TOO_MANY_FASTEST_LAPS: "Only one driver can set the fastest lap.",
}


def _has_duplicates(values: list[int]) -> bool:
    return len(values) != len(set(values))


def _empty(rows: Sequence[ResultRow], has_sprint: bool) -> bool:
    return not rows


def _missing_participant(rows: Sequence[ResultRow], has_sprint: bool) -> bool:
    return any(not row.participant_id for row in rows)


def _duplicate_position(rows: Sequence[ResultRow], has_sprint: bool) -> bool:
    return _has_duplicates([r.position for r in rows if r.position is not None])


def _duplicate_sprint_position(rows: Sequence[ResultRow], has_sprint: bool) -> bool:
    # Sprint positions may be entered on any event but are only checked for sprint events
    if not has_sprint:
        return False
    return _has_duplicates(
        [r.sprint_position for r in rows if r.sprint_position is not None]
    )


def _too_many_fastest_laps(rows: Sequence[ResultRow], has_sprint: bool) -> bool:
    return sum(1 for r in rows if r.fastest_lap) > 1


_CHECKS: tuple[tuple[ValidationFailure, Callable[[Sequence[ResultRow], bool], bool]], ...] = (
    (ValidationFailure.EMPTY_RESULT_SET, _empty),
    (ValidationFailure.MISSING_PARTICIPANT, _missing_participant),
    (ValidationFailure.DUPLICATE_POSITION, _duplicate_position),
    (ValidationFailure.DUPLICATE_SPRINT_POSITION, _duplicate_sprint_position),
    (ValidationFailure.TOO_MANY_FASTEST_LAPS, _too_many_fastest_laps),
)


def validate_rows(rows: Sequence[ResultRow], has_sprint: bool) -> ValidationFailure | None:
    """Return the first violated check for *rows*, or None if they can be saved."""
    for failure, violated in _CHECKS:
        if violated(rows, has_sprint):
            return failure
    return None
