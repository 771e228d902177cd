"""Typed user settings on top of the key-value store.

Holds the active provider, one API key per provider, and the selected
model. Exactly one key is current at a time, chosen by ``provider``.
"""

import logging

from pydantic import BaseModel, ValidationError

from article_scorer.scoring.result import Err, Ok, Result
from article_scorer.scoring.schemas import ProviderType
from article_scorer.store.settings_store import SettingsStore, SettingsStoreError

logger = logging.getLogger(__name__)

# Single-provider releases stored the OpenRouter key under this name
LEGACY_API_KEY = "api_key"

SETTING_KEYS = (
    "provider",
    "openrouter_api_key",
    "gemini_api_key",
    "cerebras_api_key",
    "selected_model",
)

API_KEY_FIELDS: dict[ProviderType, str] = {
    ProviderType.OPENROUTER: "openrouter_api_key",
    ProviderType.GEMINI: "gemini_api_key",
    ProviderType.CEREBRAS: "cerebras_api_key",
}


class UserSettings(BaseModel):
    """Snapshot of the user's provider configuration."""

    provider: ProviderType = ProviderType.OPENROUTER
    openrouter_api_key: str | None = None
    gemini_api_key: str | None = None
    cerebras_api_key: str | None = None
    selected_model: str | None = None


async def load_settings(store: SettingsStore) -> UserSettings:
    """Read a settings snapshot, migrating the legacy key.

    Invalid stored values yield the default settings rather than an error.
    """
    data = {key: await store.get(key) for key in SETTING_KEYS}
    if not data["openrouter_api_key"]:
        data["openrouter_api_key"] = await store.get(LEGACY_API_KEY)

    # Unset keys fall through to model defaults
    data = {key: value for key, value in data.items() if value is not None}
    try:
        return UserSettings.model_validate(data)
    except ValidationError as e:
        logger.warning("Stored settings invalid, using defaults: %s", e)
        return UserSettings()


async def save_settings(
    store: SettingsStore,
    *,
    provider: ProviderType | None = None,
    openrouter_api_key: str | None = None,
    gemini_api_key: str | None = None,
    cerebras_api_key: str | None = None,
    selected_model: str | None = None,
) -> Result[None, SettingsStoreError]:
    """Write only the provided fields, then persist the store."""
    changes = {
        "provider": provider.value if provider is not None else None,
        "openrouter_api_key": openrouter_api_key,
        "gemini_api_key": gemini_api_key,
        "cerebras_api_key": cerebras_api_key,
        "selected_model": selected_model,
    }
    for key, value in changes.items():
        if value is not None:
            await store.set(key, value)

    try:
        await store.save()
    except SettingsStoreError as e:
        logger.error("Failed to save settings: %s", e)
        return Err(e)
    return Ok(None)


def get_current_api_key(settings: UserSettings) -> str | None:
    """Return the API key of the active provider."""
    return getattr(settings, API_KEY_FIELDS[settings.provider])


def has_api_key(settings: UserSettings) -> bool:
    """Check whether the active provider has a non-empty key."""
    return bool(get_current_api_key(settings))
