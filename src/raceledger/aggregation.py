"""Cumulative season points per driver or team, one sample per completed event.

Entities are matched to result rows by display name (driver name or team
name), not by id. Two entities sharing a name will both pick up the same
rows.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from raceledger.config import COMPLETED_STATUS, DEFAULT_TOP_DRIVERS
from raceledger.models.match import Match
from raceledger.models.match_result import MatchResult
from raceledger.models.standings import StandingsEntry, TeamStandingsEntry


@dataclass(frozen=True)
class EventResults:
    match: Match
    results: list[MatchResult]


@dataclass(frozen=True)
class SeriesPoint:
    label: str
    cumulative: float


@dataclass(frozen=True)
class EntitySeries:
    name: str
    points: list[SeriesPoint]

    @property
    def totals(self) -> list[float]:
        return [p.cumulative for p in self.points]


def event_label(match: Match) -> str:
    """Chart label for an event, e.g. ``R3``."""
    return f"R{match.round}"


def completed_events(matches: Sequence[Match]) -> list[Match]:
    """Completed matches ordered by date, then round."""
    done = [m for m in matches if m.status == COMPLETED_STATUS]
    return sorted(done, key=lambda m: (m.match_date or "", m.round))


def team_event_totals(results: Sequence[MatchResult]) -> dict[str, float]:
    """Race plus sprint points per team for one event's results."""
    totals: dict[str, float] = defaultdict(float)
    for result in results:
        team = result.effective_team_name
        if team:
            totals[team] += result.total_points
    return dict(totals)


def _accumulate(
    names: list[str],
    events: Sequence[EventResults],
    event_points: Callable[[list[MatchResult]], Callable[[str], float]],
) -> list[EntitySeries]:
    running = [0.0] * len(names)
    samples: list[list[SeriesPoint]] = [[] for _ in names]
    for event in events:
        label = event_label(event.match)
        gained = event_points(event.results)
        for idx, name in enumerate(names):
            running[idx] += gained(name)
            samples[idx].append(SeriesPoint(label=label, cumulative=running[idx]))
    return [EntitySeries(name=name, points=pts) for name, pts in zip(names, samples)]


def cumulative_driver_series(
    drivers: Sequence[StandingsEntry],
    events: Sequence[EventResults],
    top_n: int | None = DEFAULT_TOP_DRIVERS,
) -> list[EntitySeries]:
    """Running points for the top *top_n* ranked drivers across *events*.

    *drivers* must already be in rank order; pass ``top_n=None`` to track all
    of them. Drivers missing from an event carry their total forward.
    """
    tracked = list(drivers if top_n is None else drivers[:top_n])
    names = [d.driver_name for d in tracked]

    def event_points(results: list[MatchResult]) -> Callable[[str], float]:
        def gained(name: str) -> float:
            row = next((r for r in results if r.participant_name == name), None)
            return row.total_points if row is not None else 0.0
        return gained

    return _accumulate(names, events, event_points)


def cumulative_team_series(
    teams: Sequence[TeamStandingsEntry],
    events: Sequence[EventResults],
) -> list[EntitySeries]:
    """Running points for every team in the standings snapshot across *events*."""
    names = [t.team_name for t in teams]

    def event_points(results: list[MatchResult]) -> Callable[[str], float]:
        totals = team_event_totals(results)
        return lambda name: totals.get(name, 0.0)

    return _accumulate(names, events, event_points)


def chart_rows(series: Sequence[EntitySeries]) -> list[dict[str, Any]]:
    """Pivot series into one row per event: ``{"round": "R1", "<name>": total, ...}``."""
    if not series:
        return []
    rows: list[dict[str, Any]] = [{"round": p.label} for p in series[0].points]
    for entity in series:
        for row, point in zip(rows, entity.points):
            row[entity.name] = point.cumulative
    return rows


def team_race_history(events: Sequence[EventResults], team_name: str) -> list[EventResults]:
    """Per event, the rows a team scored with; events without the team are left out."""
    history: list[EventResults] = []
    for event in events:
        rows = [r for r in event.results if r.effective_team_name == team_name]
        if rows:
            history.append(EventResults(match=event.match, results=rows))
    return history
