"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import logging

import pytest

import raceledger._logging as log_mod
from raceledger.models.match import Match
from raceledger.models.match_result import MatchResult
from raceledger.models.participant import Participant
from raceledger.models.team import Team

BASE_URL = "http://localhost:8080/api/v1"
LEAGUE_ID = "league-1"


SAMPLE_PARTICIPANTS = [
    {
        "id": "p-ver",
        "league_id": LEAGUE_ID,
        "user_id": "u-1",
        "status": "approved",
        "roles": ["player"],
        "team_name": "Red Bull Racing",
        "user_nickname": "Verstappen",
    },
    {
        "id": "p-per",
        "league_id": LEAGUE_ID,
        "user_id": "u-2",
        "status": "approved",
        "roles": ["reserve"],
        "team_name": "Red Bull Racing",
        "user_nickname": "Perez",
    },
    {
        "id": "p-ham",
        "league_id": LEAGUE_ID,
        "user_id": "u-3",
        "status": "approved",
        "roles": ["player", "director"],
        "team_name": "Ferrari",
        "user_nickname": "Hamilton",
    },
    {
        "id": "p-eng",
        "league_id": LEAGUE_ID,
        "user_id": "u-4",
        "status": "approved",
        "roles": ["engineer"],
        "team_name": "Ferrari",
        "user_nickname": "Bono",
    },
]

SAMPLE_TEAMS = [
    {"id": "t-1", "league_id": LEAGUE_ID, "name": "Red Bull Racing", "color": "#3671C6", "is_official": True},
    {"id": "t-2", "league_id": LEAGUE_ID, "name": "Ferrari", "color": "#E8002D", "is_official": True},
]

SAMPLE_MATCH = {
    "id": "m-1",
    "league_id": LEAGUE_ID,
    "round": 1,
    "track": "Bahrain",
    "match_date": "2024-03-02",
    "has_sprint": False,
    "sprint_status": "upcoming",
    "status": "completed",
}

SAMPLE_RESULT = {
    "id": "r-1",
    "match_id": "m-1",
    "participant_id": "p-ver",
    "position": 1,
    "points": 25,
    "fastest_lap": True,
    "dnf": False,
    "sprint_points": 0,
    "participant_name": "Verstappen",
    "team_name": "Red Bull Racing",
}

SAMPLE_STANDINGS = {
    "league_id": LEAGUE_ID,
    "league_name": "Sunday League",
    "season": 2024,
    "total_races": 2,
    "standings": [
        {
            "rank": 1,
            "participant_id": "p-ver",
            "user_id": "u-1",
            "driver_name": "Verstappen",
            "team_name": "Red Bull Racing",
            "total_points": 43,
            "race_points": 43,
            "sprint_points": 0,
            "wins": 1,
            "podiums": 2,
            "fastest_laps": 1,
            "dnfs": 0,
            "races_completed": 2,
        },
        {
            "rank": 2,
            "participant_id": "p-ham",
            "user_id": "u-3",
            "driver_name": "Hamilton",
            "team_name": "Ferrari",
            "total_points": 25,
            "race_points": 25,
            "sprint_points": 0,
            "wins": 1,
            "podiums": 1,
            "fastest_laps": 0,
            "dnfs": 1,
            "races_completed": 1,
        },
    ],
    "team_standings": [
        {"rank": 1, "team_name": "Red Bull Racing", "total_points": 43, "driver_count": 2},
        {"rank": 2, "team_name": "Ferrari", "total_points": 25, "driver_count": 1},
    ],
}


@pytest.fixture(autouse=True)
def _isolated_log(tmp_path):
    """Redirect the API log file to tmp_path and reset the cached logger."""
    named_logger = logging.getLogger(log_mod.LOGGER_NAME)
    named_logger.handlers.clear()

    old_logger, old_dir, old_file = log_mod._logger, log_mod._LOG_DIR, log_mod._LOG_FILE
    log_mod._logger = None
    log_mod._LOG_DIR = str(tmp_path)
    log_mod._LOG_FILE = str(tmp_path / "api_calls.log")

    yield tmp_path

    if log_mod._logger is not None:
        for h in log_mod._logger.handlers[:]:
            h.close()
            log_mod._logger.removeHandler(h)
    log_mod._logger, log_mod._LOG_DIR, log_mod._LOG_FILE = old_logger, old_dir, old_file


def _make_match(
    match_id: str = "m-1",
    round: int = 1,
    match_date: str = "2024-03-02",
    status: str = "completed",
    has_sprint: bool = False,
) -> Match:
    return Match(
        id=match_id,
        league_id=LEAGUE_ID,
        round=round,
        track=f"Track {round}",
        match_date=match_date,
        status=status,
        has_sprint=has_sprint,
    )


def _make_result(
    name: str,
    points: float = 0,
    sprint_points: float = 0,
    team: str | None = None,
    position: int | None = None,
    dnf: bool = False,
    stored_team: str | None = None,
) -> MatchResult:
    return MatchResult(
        participant_id=f"p-{name.lower()}",
        participant_name=name,
        team_name=team,
        stored_team_name=stored_team,
        position=position,
        points=points,
        sprint_points=sprint_points,
        dnf=dnf,
    )


@pytest.fixture
def participants() -> list[Participant]:
    return [Participant.model_validate(p) for p in SAMPLE_PARTICIPANTS]


@pytest.fixture
def drivers(participants: list[Participant]) -> list[Participant]:
    return [p for p in participants if p.is_driver]


@pytest.fixture
def teams() -> list[Team]:
    return [Team.model_validate(t) for t in SAMPLE_TEAMS]


@pytest.fixture
def make_match():
    """Factory fixture for creating Match models."""
    return _make_match


@pytest.fixture
def make_result():
    """Factory fixture for creating MatchResult models."""
    return _make_result
