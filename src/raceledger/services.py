"""Orchestration between the league API and the editor/aggregator.

Collaborator failures surface as a single :class:`OperationFailedError`
with the cause chained and logged. The editor is never modified by a failed
save, so the caller can retry with the same rows.
"""

from __future__ import annotations

import asyncio
from enum import Enum

from raceledger._logging import get_logger, log_service_call
from raceledger.aggregation import (
    EntitySeries,
    EventResults,
    completed_events,
    cumulative_driver_series,
    cumulative_team_series,
)
from raceledger.client import AsyncLeagueClient, LeagueClient
from raceledger.config import DEFAULT_TOP_DRIVERS
from raceledger.editor import ResultsEditor
from raceledger.exceptions import OperationFailedError, RaceLedgerError, ResultsValidationError
from raceledger.models.match import Match
from raceledger.models.match_result import MatchResult
from raceledger.models.standings import LeagueStandings


class SeriesMode(str, Enum):
    """Which entity set a season series is built for."""

    DRIVERS = "drivers"
    TEAMS = "teams"


# ── Results editor ───────────────────────────────────────────────────────────


@log_service_call
def open_results_editor(client: LeagueClient, match: Match) -> ResultsEditor:
    """Load participants, teams and stored results into a fresh editor."""
    try:
        participants = client.participants(match.league_id, status="approved")
        teams = client.teams(match.league_id)
        stored = client.match_results(match.id)
    except RaceLedgerError as exc:
        get_logger().error("Failed to load results editor for match %s: %s", match.id, exc)
        raise OperationFailedError(f"Failed to load data for match {match.id}") from exc

    drivers = [p for p in participants if p.is_driver]
    editor = ResultsEditor(match, drivers, teams)
    editor.initialize(stored)
    return editor


@log_service_call
def save_results(client: LeagueClient, editor: ResultsEditor) -> list[MatchResult]:
    """Validate and persist the editor's rows, then discard them.

    Raises:
        ResultsValidationError: The rows fail a finalize check.
        OperationFailedError: The result store rejected or never received the rows.
    """
    logger = get_logger()
    failure = editor.validate()
    if failure is not None:
        logger.warning("Rejected results for match %s: %s", editor.match.id, failure.value)
        raise ResultsValidationError(failure)

    records = editor.to_persist_request()
    try:
        stored = client.update_match_results(editor.match.id, records)
    except RaceLedgerError as exc:
        logger.error("Failed to save results for match %s: %s", editor.match.id, exc)
        raise OperationFailedError(f"Failed to save results for match {editor.match.id}") from exc

    editor.discard()
    return stored


# ── Season series ────────────────────────────────────────────────────────────


def _aggregate(
    standings: LeagueStandings,
    events: list[EventResults],
    mode: SeriesMode,
    top_n: int | None,
) -> list[EntitySeries]:
    if mode is SeriesMode.TEAMS:
        return cumulative_team_series(standings.team_standings, events)
    return cumulative_driver_series(standings.standings, events, top_n=top_n)


def _results_or_empty(client: LeagueClient, match: Match) -> list[MatchResult]:
    try:
        return client.match_results(match.id)
    except RaceLedgerError as exc:
        get_logger().error("Skipping results for match %s: %s", match.id, exc)
        return []


@log_service_call
def load_completed_events(client: LeagueClient, league_id: str) -> list[EventResults]:
    """Completed matches in date order, each with its results.

    A match whose results cannot be fetched is kept with no results.
    """
    try:
        matches = client.matches(league_id)
    except RaceLedgerError as exc:
        get_logger().error("Failed to load matches for league %s: %s", league_id, exc)
        raise OperationFailedError(f"Failed to load matches for league {league_id}") from exc
    return [
        EventResults(match=m, results=_results_or_empty(client, m))
        for m in completed_events(matches)
    ]


@log_service_call
def load_season_series(
    client: LeagueClient,
    league_id: str,
    mode: SeriesMode | str = SeriesMode.DRIVERS,
    top_n: int | None = DEFAULT_TOP_DRIVERS,
) -> list[EntitySeries]:
    """Cumulative points per round for the league's ranked drivers or teams."""
    mode = SeriesMode(mode)
    try:
        standings = client.standings(league_id)
    except RaceLedgerError as exc:
        get_logger().error("Failed to load standings for league %s: %s", league_id, exc)
        raise OperationFailedError(f"Failed to load standings for league {league_id}") from exc
    events = load_completed_events(client, league_id)
    return _aggregate(standings, events, mode, top_n)


async def _results_or_empty_async(client: AsyncLeagueClient, match: Match) -> list[MatchResult]:
    try:
        return await client.match_results(match.id)
    except RaceLedgerError as exc:
        get_logger().error("Skipping results for match %s: %s", match.id, exc)
        return []


@log_service_call
async def load_season_series_async(
    client: AsyncLeagueClient,
    league_id: str,
    mode: SeriesMode | str = SeriesMode.DRIVERS,
    top_n: int | None = DEFAULT_TOP_DRIVERS,
) -> list[EntitySeries]:
    """Async :func:`load_season_series`; per-match results are fetched concurrently."""
    mode = SeriesMode(mode)
    try:
        standings, matches = await asyncio.gather(
            client.standings(league_id),
            client.matches(league_id),
        )
    except RaceLedgerError as exc:
        get_logger().error("Failed to load season for league %s: %s", league_id, exc)
        raise OperationFailedError(f"Failed to load season for league {league_id}") from exc

    completed = completed_events(matches)
    results = await asyncio.gather(*(_results_or_empty_async(client, m) for m in completed))
    events = [EventResults(match=m, results=r) for m, r in zip(completed, results)]
    return _aggregate(standings, events, mode, top_n)
