"""raceledger data models."""

from raceledger.models.match import Match
from raceledger.models.match_result import MatchResult, ResultRecord
from raceledger.models.participant import Participant
from raceledger.models.standings import LeagueStandings, StandingsEntry, TeamStandingsEntry
from raceledger.models.team import Team

__all__ = [
    "LeagueStandings",
    "Match",
    "MatchResult",
    "Participant",
    "ResultRecord",
    "StandingsEntry",
    "Team",
    "TeamStandingsEntry",
]
