"""Stored match results and the records sent to persist them."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MatchResult(BaseModel):
    """A participant's stored result for one match."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    match_id: str | None = None
    participant_id: str
    position: int | None = None
    points: float = 0
    fastest_lap: bool = False
    dnf: bool = False
    dnf_reason: str | None = None
    sprint_position: int | None = None
    sprint_points: float = 0
    participant_name: str | None = None
    team_name: str | None = None
    stored_team_name: str | None = None

    @property
    def effective_team_name(self) -> str | None:
        """Team at the time of the race, falling back to the current team."""
        return self.stored_team_name or self.team_name

    @property
    def total_points(self) -> float:
        return self.points + self.sprint_points


class ResultRecord(BaseModel):
    """Persistence-ready result for one participant.

    Serialise with ``model_dump(exclude_none=True)`` so optional fields are
    omitted rather than sent as nulls.
    """

    model_config = ConfigDict(frozen=True)

    participant_id: str
    team_name: str | None = None
    position: int | None = None
    points: int = 0
    fastest_lap: bool = False
    dnf: bool = False
    dnf_reason: str | None = None
    sprint_position: int | None = None
    sprint_points: int = 0
