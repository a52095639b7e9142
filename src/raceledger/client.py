"""Public client classes for the league REST API."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from pydantic import TypeAdapter

from raceledger._http import AsyncTransport, SyncTransport
from raceledger._logging import log_api_call
from raceledger.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from raceledger.exceptions import RaceLedgerValidationError
from raceledger.models.match import Match
from raceledger.models.match_result import MatchResult, ResultRecord
from raceledger.models.participant import Participant
from raceledger.models.standings import LeagueStandings
from raceledger.models.team import Team

T = TypeVar("T")


def _unwrap(data: Any, key: str) -> list[dict[str, Any]]:
    """Pull the item list out of a ``{"<key>": [...], "total": n}`` envelope."""
    if not isinstance(data, dict):
        raise RaceLedgerValidationError(
            f"Expected an object with {key!r}, got {type(data).__name__}"
        )
    return data.get(key) or []


def _validate_list(model_type: type[T], data: list[dict[str, Any]]) -> list[T]:
    """Validate a list of dicts against a Pydantic model."""
    try:
        adapter = TypeAdapter(list[model_type])
        return adapter.validate_python(data)
    except Exception as exc:
        raise RaceLedgerValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


def _validate_standings(data: Any) -> LeagueStandings:
    try:
        return LeagueStandings.model_validate(data)
    except Exception as exc:
        raise RaceLedgerValidationError(
            f"Failed to validate LeagueStandings response: {exc}"
        ) from exc


def _status_params(status: str | None) -> list[tuple[str, str]]:
    return [("status", status)] if status else []


def _results_body(records: Sequence[ResultRecord]) -> dict[str, Any]:
    return {"results": [r.model_dump(exclude_none=True) for r in records]}


class LeagueClient:
    """Synchronous client for the league API.

    Usage:
        with LeagueClient() as api:
            matches = api.matches(league_id)
            results = api.match_results(matches[0].id)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout, headers=headers)

    def __enter__(self) -> LeagueClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    @log_api_call
    def participants(self, league_id: str, status: str | None = "approved") -> list[Participant]:
        """Get league participants, optionally filtered by approval status."""
        data = self._transport.get(
            f"/admin/leagues/{league_id}/participants", _status_params(status)
        )
        return _validate_list(Participant, _unwrap(data, "participants"))

    @log_api_call
    def teams(self, league_id: str) -> list[Team]:
        """Get the teams registered in a league."""
        data = self._transport.get(f"/leagues/{league_id}/teams")
        return _validate_list(Team, _unwrap(data, "teams"))

    @log_api_call
    def matches(self, league_id: str) -> list[Match]:
        """Get a league's match schedule."""
        data = self._transport.get(f"/leagues/{league_id}/matches")
        return _validate_list(Match, _unwrap(data, "matches"))

    @log_api_call
    def match_results(self, match_id: str) -> list[MatchResult]:
        """Get the stored results for a match."""
        data = self._transport.get(f"/matches/{match_id}/results")
        return _validate_list(MatchResult, _unwrap(data, "results"))

    @log_api_call
    def update_match_results(
        self, match_id: str, records: Sequence[ResultRecord]
    ) -> list[MatchResult]:
        """Replace a match's results and return what was stored."""
        data = self._transport.put(f"/admin/matches/{match_id}/results", _results_body(records))
        return _validate_list(MatchResult, _unwrap(data, "results"))

    @log_api_call
    def standings(self, league_id: str) -> LeagueStandings:
        """Get the ranked driver and team standings for a league."""
        data = self._transport.get(f"/leagues/{league_id}/standings")
        return _validate_standings(data)


class AsyncLeagueClient:
    """Asynchronous client for the league API.

    Usage:
        async with AsyncLeagueClient() as api:
            standings = await api.standings(league_id)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout, headers=headers)

    async def __aenter__(self) -> AsyncLeagueClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    @log_api_call
    async def participants(
        self, league_id: str, status: str | None = "approved"
    ) -> list[Participant]:
        """Get league participants, optionally filtered by approval status."""
        data = await self._transport.get(
            f"/admin/leagues/{league_id}/participants", _status_params(status)
        )
        return _validate_list(Participant, _unwrap(data, "participants"))

    @log_api_call
    async def teams(self, league_id: str) -> list[Team]:
        """Get the teams registered in a league."""
        data = await self._transport.get(f"/leagues/{league_id}/teams")
        return _validate_list(Team, _unwrap(data, "teams"))

    @log_api_call
    async def matches(self, league_id: str) -> list[Match]:
        """Get a league's match schedule."""
        data = await self._transport.get(f"/leagues/{league_id}/matches")
        return _validate_list(Match, _unwrap(data, "matches"))

    @log_api_call
    async def match_results(self, match_id: str) -> list[MatchResult]:
        """Get the stored results for a match."""
        data = await self._transport.get(f"/matches/{match_id}/results")
        return _validate_list(MatchResult, _unwrap(data, "results"))

    @log_api_call
    async def update_match_results(
        self, match_id: str, records: Sequence[ResultRecord]
    ) -> list[MatchResult]:
        """Replace a match's results and return what was stored."""
        data = await self._transport.put(
            f"/admin/matches/{match_id}/results", _results_body(records)
        )
        return _validate_list(MatchResult, _unwrap(data, "results"))

    @log_api_call
    async def standings(self, league_id: str) -> LeagueStandings:
        """Get the ranked driver and team standings for a league."""
        data = await self._transport.get(f"/leagues/{league_id}/standings")
        return _validate_standings(data)
