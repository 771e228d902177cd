"""Pytest fixtures for article-scorer tests."""

import json
import logging
from pathlib import Path
from typing import Any, Generator

import pytest

from article_scorer.config.settings import Settings, get_settings
from article_scorer.observability.logging import HANDLER_NAME
from article_scorer.store.settings_store import SettingsStore, reset_store


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Point the settings store at a temp file and drop cached handles."""
    store_path = tmp_path / "settings.json"
    monkeypatch.setenv("SETTINGS_STORE_PATH", str(store_path))
    get_settings.cache_clear()
    reset_store()
    yield store_path
    reset_store()
    get_settings.cache_clear()

    # CLI invocations install a stderr handler bound to the runner's stream
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)


@pytest.fixture
def test_settings(isolated_settings: Path) -> Settings:
    """Settings configured for testing."""
    return Settings(
        environment="development",
        log_level="DEBUG",
        settings_store_path=isolated_settings,
    )


@pytest.fixture
def settings_store(isolated_settings: Path) -> SettingsStore:
    """An empty store backed by the temp settings file."""
    return SettingsStore(isolated_settings)


@pytest.fixture
def valid_result_payload() -> dict[str, Any]:
    """A well-formed scoring result as a model would return it."""
    return {
        "category": "おバカ系,脱力系",
        "total": 42,
        "details": {
            "humor": 20,
            "structure": 8,
            "format": 5,
            "language": 6,
            "completeness": 3,
        },
        "reasons": {
            "humor": "オチが弱い",
            "structure": "着眼点がぶれている",
            "format": "節構成は標準的",
            "language": "読みやすい",
            "completeness": "加筆の余地が大きい",
        },
        "advice": "冒頭で設定を提示し、オチまで一貫させること。",
    }


@pytest.fixture
def valid_result_json(valid_result_payload: dict[str, Any]) -> str:
    """The valid payload serialized as bare JSON."""
    return json.dumps(valid_result_payload, ensure_ascii=False)
