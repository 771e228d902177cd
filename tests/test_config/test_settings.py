"""Tests for environment-driven configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from article_scorer.config.settings import Settings, get_settings
from article_scorer.scoring.config import ScoringConfig
from article_scorer.wikipedia.config import WikipediaConfig


class TestSettings:
    """Tests for application Settings."""

    def test_store_path_from_env(self, isolated_settings):
        assert get_settings().settings_store_path == isolated_settings

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_is_production(self, tmp_path):
        settings = Settings(environment="production", settings_store_path=tmp_path / "s.json")
        assert settings.is_production

    def test_default_store_path_under_home(self, monkeypatch):
        monkeypatch.delenv("SETTINGS_STORE_PATH")
        settings = Settings()
        assert settings.settings_store_path == (
            Path.home() / ".config" / "article-scorer" / "settings.json"
        )


class TestScoringConfig:
    """Tests for ScoringConfig defaults and overrides."""

    def test_defaults(self, monkeypatch):
        for var in ("SCORING_TEMPERATURE", "SCORING_REQUEST_TIMEOUT"):
            monkeypatch.delenv(var, raising=False)

        config = ScoringConfig()

        assert config.temperature == 0.3
        assert config.request_timeout is None
        assert config.openrouter_api_base == "https://openrouter.ai/api/v1"
        assert config.cerebras_api_base == "https://api.cerebras.ai/v1"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SCORING_CEREBRAS_API_BASE", "http://localhost:8080/v1")
        monkeypatch.setenv("SCORING_REQUEST_TIMEOUT", "30")

        config = ScoringConfig()

        assert config.cerebras_api_base == "http://localhost:8080/v1"
        assert config.request_timeout == 30.0

    def test_temperature_bounds(self):
        with pytest.raises(ValidationError):
            ScoringConfig(temperature=3.0)


class TestWikipediaConfig:
    """Tests for WikipediaConfig."""

    def test_api_url_per_edition(self):
        config = WikipediaConfig()

        assert config.api_url("ja") == "https://ja.wikipedia.org/w/api.php"
        assert config.api_url("en") == "https://en.wikipedia.org/w/api.php"
