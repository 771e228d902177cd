"""Local persistence of provider, API keys and selected model."""

from article_scorer.store.settings_store import (
    SettingsStore,
    SettingsStoreError,
    get_store,
    reset_store,
)
from article_scorer.store.user_settings import (
    UserSettings,
    get_current_api_key,
    has_api_key,
    load_settings,
    save_settings,
)

__all__ = [
    "SettingsStore",
    "SettingsStoreError",
    "UserSettings",
    "get_current_api_key",
    "get_store",
    "has_api_key",
    "load_settings",
    "reset_store",
    "save_settings",
]
