"""Pre-ranked league standings snapshot (drivers and teams)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StandingsEntry(BaseModel):
    """Driver standings entry."""

    model_config = ConfigDict(frozen=True)

    rank: int
    participant_id: str | None = None
    user_id: str | None = None
    driver_name: str
    team_name: str | None = None
    total_points: float = 0
    race_points: float = 0
    sprint_points: float = 0
    wins: int = 0
    podiums: int = 0
    fastest_laps: int = 0
    dnfs: int = 0
    races_completed: int = 0


class TeamStandingsEntry(BaseModel):
    """Team standings entry."""

    model_config = ConfigDict(frozen=True)

    rank: int
    team_name: str
    total_points: float = 0
    race_points: float = 0
    sprint_points: float = 0
    wins: int = 0
    podiums: int = 0
    fastest_laps: int = 0
    dnfs: int = 0
    driver_count: int = 0


class LeagueStandings(BaseModel):
    """Standings snapshot for a league season."""

    model_config = ConfigDict(frozen=True)

    league_id: str | None = None
    league_name: str | None = None
    season: int | None = None
    total_races: int = 0
    standings: list[StandingsEntry] = []
    team_standings: list[TeamStandingsEntry] = []
