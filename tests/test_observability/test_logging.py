"""Tests for structured logging setup and context binding."""

import json
import logging

import pytest
import structlog

from article_scorer.config.settings import get_settings
from article_scorer.observability.logging import (
    HANDLER_NAME,
    bind_context,
    clear_context,
    get_logger,
    setup_logging,
)


def _installed_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]


@pytest.fixture(autouse=True)
def _clear_bound_context():
    """Drop context bound by a test so it does not leak into the next one."""
    yield
    clear_context()


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_development_uses_console_renderer(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "development")
        get_settings.cache_clear()

        setup_logging()

        (handler,) = _installed_handlers()
        assert isinstance(handler.formatter.processors[-1], structlog.dev.ConsoleRenderer)

    def test_production_uses_json_renderer(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        get_settings.cache_clear()

        setup_logging()

        (handler,) = _installed_handlers()
        assert isinstance(handler.formatter.processors[-1], structlog.processors.JSONRenderer)

    def test_repeated_setup_keeps_one_handler(self):
        setup_logging()
        setup_logging()

        assert len(_installed_handlers()) == 1

    def test_get_logger_returns_bound_logger(self):
        setup_logging()

        logger = get_logger("article_scorer.test")

        assert hasattr(logger, "info")

    def test_stdlib_records_carry_bound_context(self, monkeypatch, capsys):
        """Module loggers should render with the provider bound by the CLI."""
        monkeypatch.setenv("ENVIRONMENT", "production")
        get_settings.cache_clear()
        setup_logging()

        bind_context(provider="gemini")
        logging.getLogger("article_scorer.scoring.providers.gemini").warning(
            "Gemini: empty model list, using static list"
        )

        lines = [line for line in capsys.readouterr().err.splitlines() if line.startswith("{")]
        record = json.loads(lines[-1])
        assert record["event"] == "Gemini: empty model list, using static list"
        assert record["provider"] == "gemini"
        assert record["level"] == "warning"


class TestContextBinding:
    """Tests for bind_context()/clear_context()."""

    def test_bind_and_clear(self):
        clear_context()
        bind_context(provider="cerebras", model="llama-3.3-70b")

        assert structlog.contextvars.get_contextvars() == {
            "provider": "cerebras",
            "model": "llama-3.3-70b",
        }

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}
