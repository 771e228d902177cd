"""Local key-value settings store backed by a JSON file.

A flat string-keyed map with last-write-wins semantics. Reads and writes
go to an in-memory copy; ``save()`` persists the whole map. The process
shares one store handle, created lazily on first ``get_store()`` under an
asyncio lock so concurrent first callers get the same instance.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from article_scorer.config.settings import get_settings

logger = logging.getLogger(__name__)


class SettingsStoreError(Exception):
    """Raised when the settings file cannot be written."""


class SettingsStore:
    """JSON-file key-value store.

    Args:
        path: Location of the settings file. Created on first save.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._data: dict[str, Any] = {}
        self._loaded = False

    async def load(self) -> None:
        """Read the file into memory. Missing or corrupt files load as empty."""
        self._data = await asyncio.to_thread(self._read)
        self._loaded = True

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Settings file %s unreadable, starting empty: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Settings file %s is not a JSON object, starting empty", self.path)
            return {}
        return data

    async def get(self, key: str) -> Any | None:
        """Return the stored value for key, or None if absent."""
        if not self._loaded:
            await self.load()
        return self._data.get(key)

    async def set(self, key: str, value: Any) -> None:
        """Set a value in memory. Call save() to persist."""
        if not self._loaded:
            await self.load()
        self._data[key] = value

    async def save(self) -> None:
        """Write the whole map to disk.

        Raises:
            SettingsStoreError: If the file cannot be written.
        """
        snapshot = dict(self._data)
        try:
            await asyncio.to_thread(self._write, snapshot)
        except OSError as e:
            raise SettingsStoreError(f"Failed to save settings to {self.path}: {e}") from e

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)


_store: SettingsStore | None = None
_store_lock = asyncio.Lock()


async def get_store(path: Path | None = None) -> SettingsStore:
    """Get the process-wide settings store, loading it on first use.

    Args:
        path: Settings file location for the first acquisition. Defaults to
            ``Settings.settings_store_path``. Ignored once the store exists.
    """
    global _store
    if _store is not None:
        return _store

    async with _store_lock:
        if _store is None:
            store = SettingsStore(path or get_settings().settings_store_path)
            await store.load()
            _store = store
    return _store


def reset_store() -> None:
    """Drop the cached store handle so the next get_store() re-acquires it."""
    global _store, _store_lock
    _store = None
    _store_lock = asyncio.Lock()
