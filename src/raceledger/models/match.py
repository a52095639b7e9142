"""Match (race event) model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Match(BaseModel):
    """One round of a league season."""

    model_config = ConfigDict(frozen=True)

    id: str
    league_id: str
    round: int
    track: str | None = None
    match_date: str | None = None
    match_time: str | None = None
    has_sprint: bool = False
    sprint_date: str | None = None
    sprint_time: str | None = None
    sprint_status: str | None = None
    status: str | None = None
    description: str | None = None
