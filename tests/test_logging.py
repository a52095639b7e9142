"""Tests for raceledger._logging — decorators and file logging."""

from __future__ import annotations

import logging

import pytest

import raceledger._logging as mod
from raceledger._logging import log_api_call, log_service_call


class _FakeClient:
    """Minimal class to test logging decorators."""

    @log_api_call
    def matches(self, league_id: str) -> list[dict]:
        return [{"id": "m-1"}, {"id": "m-2"}]

    @log_api_call
    def failing(self, match_id: str) -> list[dict]:
        raise ValueError("test error")

    @log_api_call
    async def async_matches(self, league_id: str) -> list[dict]:
        return [{"id": "m-1"}]

    @log_service_call
    def aggregate(self, data: list) -> dict:
        return {"result": len(data)}

    @log_service_call
    def aggregate_failing(self) -> None:
        raise RuntimeError("service error")


@pytest.fixture
def fake_client():
    return _FakeClient()


class TestLogApiCall:
    def test_returns_result(self, fake_client):
        assert fake_client.matches("l-1") == [{"id": "m-1"}, {"id": "m-2"}]

    def test_logs_call_and_ok(self, fake_client, _isolated_log):
        fake_client.matches("l-1")
        content = (_isolated_log / "api_calls.log").read_text()
        assert "CALL: _FakeClient.matches('l-1')" in content
        assert "OK: _FakeClient.matches('l-1') -> 2 items" in content

    def test_logs_failure(self, fake_client, _isolated_log):
        with pytest.raises(ValueError, match="test error"):
            fake_client.failing("m-9")
        content = (_isolated_log / "api_calls.log").read_text()
        assert "FAIL: _FakeClient.failing('m-9')" in content
        assert "ValueError" in content

    @pytest.mark.asyncio
    async def test_async_method(self, fake_client, _isolated_log):
        assert await fake_client.async_matches("l-1") == [{"id": "m-1"}]
        content = (_isolated_log / "api_calls.log").read_text()
        assert "OK: _FakeClient.async_matches('l-1') -> 1 items" in content

    def test_preserves_function_name(self, fake_client):
        assert fake_client.matches.__name__ == "matches"


class TestLogServiceCall:
    def test_logs_service_call(self, fake_client, _isolated_log):
        assert fake_client.aggregate([1, 2]) == {"result": 2}
        content = (_isolated_log / "api_calls.log").read_text()
        assert "SERVICE CALL: _FakeClient.aggregate" in content
        assert "SERVICE OK: _FakeClient.aggregate" in content

    def test_logs_service_failure(self, fake_client, _isolated_log):
        with pytest.raises(RuntimeError, match="service error"):
            fake_client.aggregate_failing()
        content = (_isolated_log / "api_calls.log").read_text()
        assert "SERVICE FAIL: _FakeClient.aggregate_failing" in content
        assert "RuntimeError" in content

    def test_creates_log_directory(self, tmp_path):
        """Log directory is created on first use."""
        new_dir = tmp_path / "nested" / "logs"
        mod._LOG_DIR = str(new_dir)
        mod._LOG_FILE = str(new_dir / "api_calls.log")
        mod._logger = None
        logging.getLogger(mod.LOGGER_NAME).handlers.clear()

        _FakeClient().aggregate([])

        assert (new_dir / "api_calls.log").exists()

    def test_logger_does_not_propagate(self):
        assert mod.get_logger().propagate is False
