"""Unit tests for the Logfire monitoring helpers."""

from unittest.mock import MagicMock, patch

import pytest

import mindpulse.core.monitoring as monitoring
from mindpulse.server.core.config import Settings


@pytest.fixture(autouse=True)
def _reset_logfire_state(monkeypatch):
    monkeypatch.setattr(monitoring, "_logfire_configured", False)


def _settings(**env) -> Settings:
    return Settings(**env)


class TestInitializeLogfire:
    @patch("mindpulse.core.monitoring.logfire")
    def test_disabled_by_default(self, mock_logfire, monkeypatch):
        monkeypatch.setattr(monitoring, "settings", _settings(LOGFIRE_ENABLED=False))

        monitoring.initialize_logfire()

        mock_logfire.configure.assert_not_called()
        assert monitoring.is_logfire_enabled() is False

    @patch("mindpulse.core.monitoring.logfire")
    def test_enabled_without_token(self, mock_logfire, monkeypatch):
        monkeypatch.setattr(monitoring, "settings", _settings(LOGFIRE_ENABLED=True, LOGFIRE_TOKEN=None))

        with patch("mindpulse.core.monitoring.logger") as mock_logger:
            monitoring.initialize_logfire()

        mock_logfire.configure.assert_not_called()
        assert "LOGFIRE_TOKEN is not set" in mock_logger.warning.call_args[0][0]

    @patch("mindpulse.core.monitoring.logfire")
    def test_configures_and_instruments(self, mock_logfire, monkeypatch):
        monkeypatch.setattr(
            monitoring,
            "settings",
            _settings(LOGFIRE_ENABLED=True, LOGFIRE_TOKEN="tok", LOGFIRE_ENVIRONMENT="test"),
        )
        app = MagicMock()

        monitoring.initialize_logfire(app)

        mock_logfire.configure.assert_called_once()
        assert mock_logfire.configure.call_args.kwargs["environment"] == "test"
        mock_logfire.instrument_pydantic_ai.assert_called_once()
        mock_logfire.instrument_sqlalchemy.assert_called_once()
        mock_logfire.instrument_httpx.assert_called_once()
        mock_logfire.instrument_fastapi.assert_called_once_with(app)
        assert monitoring.is_logfire_enabled() is True

    @patch("mindpulse.core.monitoring.logfire")
    def test_instrumentation_failure_is_tolerated(self, mock_logfire, monkeypatch):
        monkeypatch.setattr(monitoring, "settings", _settings(LOGFIRE_ENABLED=True, LOGFIRE_TOKEN="tok"))
        mock_logfire.instrument_sqlalchemy.side_effect = RuntimeError("missing extra")

        monitoring.initialize_logfire()

        mock_logfire.instrument_httpx.assert_called_once()


class TestEventHelpers:
    @patch("mindpulse.core.monitoring.logfire")
    def test_noop_when_not_configured(self, mock_logfire):
        monitoring.log_api_request("GET", "/health", 200, 1.0)
        monitoring.log_llm_call("cbt_prompt", "gemini", True, 12.0)
        monitoring.log_recommendations_generated(1, 0, 12)
        monitoring.log_error("ValueError", "bad")

        mock_logfire.info.assert_not_called()
        mock_logfire.error.assert_not_called()

    @patch("mindpulse.core.monitoring.logfire")
    def test_events_when_configured(self, mock_logfire, monkeypatch):
        monkeypatch.setattr(monitoring, "_logfire_configured", True)

        monitoring.log_llm_call("moderation", "gemini", False, 30.0)
        monitoring.log_error("RecommendationGenerationError", "db down", {"user_id": 3})

        assert mock_logfire.info.call_args.kwargs == {
            "operation": "moderation",
            "model": "gemini",
            "success": False,
            "duration_ms": 30.0,
        }
        mock_logfire.error.assert_called_once_with("RecommendationGenerationError: db down", user_id=3)
