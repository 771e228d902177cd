"""Tests for the JSON-file settings store."""

import asyncio
import json

import pytest

from article_scorer.store.settings_store import (
    SettingsStore,
    SettingsStoreError,
    get_store,
    reset_store,
)


class TestSettingsStore:
    """Tests for SettingsStore."""

    @pytest.mark.asyncio
    async def test_missing_file_loads_empty(self, tmp_path):
        store = SettingsStore(tmp_path / "absent.json")

        assert await store.get("provider") is None

    @pytest.mark.asyncio
    async def test_set_then_save_persists(self, tmp_path):
        path = tmp_path / "nested" / "settings.json"
        store = SettingsStore(path)

        await store.set("provider", "gemini")
        await store.set("selected_model", "models/gemini-2.5-flash")
        await store.save()

        assert json.loads(path.read_text(encoding="utf-8")) == {
            "provider": "gemini",
            "selected_model": "models/gemini-2.5-flash",
        }

    @pytest.mark.asyncio
    async def test_unsaved_values_not_on_disk(self, tmp_path):
        path = tmp_path / "settings.json"
        store = SettingsStore(path)

        await store.set("provider", "cerebras")

        assert not path.exists()
        assert await store.get("provider") == "cerebras"

    @pytest.mark.asyncio
    async def test_last_write_wins(self, tmp_path):
        path = tmp_path / "settings.json"
        store = SettingsStore(path)
        await store.set("selected_model", "a")
        await store.set("selected_model", "b")
        await store.save()

        reloaded = SettingsStore(path)
        assert await reloaded.get("selected_model") == "b"

    @pytest.mark.asyncio
    async def test_non_ascii_written_verbatim(self, tmp_path):
        path = tmp_path / "settings.json"
        store = SettingsStore(path)
        await store.set("note", "記事")
        await store.save()

        assert "記事" in path.read_text(encoding="utf-8")

    @pytest.mark.asyncio
    async def test_corrupt_file_loads_empty(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")

        store = SettingsStore(path)

        assert await store.get("provider") is None

    @pytest.mark.asyncio
    async def test_non_object_file_loads_empty(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text('["provider"]', encoding="utf-8")

        store = SettingsStore(path)

        assert await store.get("provider") is None

    @pytest.mark.asyncio
    async def test_unwritable_path_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = SettingsStore(blocker / "settings.json")
        await store.set("provider", "gemini")

        with pytest.raises(SettingsStoreError):
            await store.save()


class TestGetStore:
    """Tests for the process-wide store handle."""

    @pytest.mark.asyncio
    async def test_uses_configured_path(self, isolated_settings):
        store = await get_store()

        assert store.path == isolated_settings

    @pytest.mark.asyncio
    async def test_same_instance_across_calls(self):
        assert await get_store() is await get_store()

    @pytest.mark.asyncio
    async def test_concurrent_first_acquisition(self):
        """Concurrent first callers should share one store."""
        stores = await asyncio.gather(*(get_store() for _ in range(10)))

        assert all(store is stores[0] for store in stores)

    @pytest.mark.asyncio
    async def test_explicit_path_on_first_use(self, tmp_path):
        path = tmp_path / "other.json"

        store = await get_store(path)

        assert store.path == path

    @pytest.mark.asyncio
    async def test_reset_reacquires(self):
        first = await get_store()
        reset_store()

        assert await get_store() is not first

    @pytest.mark.asyncio
    async def test_existing_file_loaded(self, isolated_settings):
        isolated_settings.write_text(json.dumps({"provider": "cerebras"}), encoding="utf-8")

        store = await get_store()

        assert await store.get("provider") == "cerebras"
