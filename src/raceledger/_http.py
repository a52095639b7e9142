"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from raceledger.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from raceledger.exceptions import (
    RaceLedgerAPIError,
    RaceLedgerConnectionError,
    RaceLedgerTimeoutError,
)


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return parsed JSON."""
    if response.status_code >= 400:
        raise RaceLedgerAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    return response.json()


def _headers(extra: Mapping[str, str] | None) -> dict[str, str]:
    headers = {"Accept": "application/json"}
    if extra:
        headers.update(extra)
    return headers


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers=_headers(headers),
        )

    def request(
        self,
        method: str,
        endpoint: str,
        params: list[tuple[str, str]] | None = None,
        json: Any = None,
    ) -> Any:
        """Send a request and return parsed JSON."""
        try:
            response = self._client.request(method, endpoint, params=params, json=json)
        except httpx.ConnectError as exc:
            raise RaceLedgerConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise RaceLedgerTimeoutError(str(exc)) from exc
        return _handle_response(response)

    def get(self, endpoint: str, params: list[tuple[str, str]] | None = None) -> Any:
        return self.request("GET", endpoint, params=params)

    def put(self, endpoint: str, json: Any) -> Any:
        return self.request("PUT", endpoint, json=json)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers=_headers(headers),
        )

    async def request(
        self,
        method: str,
        endpoint: str,
        params: list[tuple[str, str]] | None = None,
        json: Any = None,
    ) -> Any:
        """Send an async request and return parsed JSON."""
        try:
            response = await self._client.request(method, endpoint, params=params, json=json)
        except httpx.ConnectError as exc:
            raise RaceLedgerConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise RaceLedgerTimeoutError(str(exc)) from exc
        return _handle_response(response)

    async def get(self, endpoint: str, params: list[tuple[str, str]] | None = None) -> Any:
        return await self.request("GET", endpoint, params=params)

    async def put(self, endpoint: str, json: Any) -> Any:
        return await self.request("PUT", endpoint, json=json)

    async def close(self) -> None:
        await self._client.aclose()
