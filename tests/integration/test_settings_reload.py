"""Integration tests for debounced settings reload."""

import asyncio

import pytest
from watchdog.events import DirModifiedEvent, FileModifiedEvent, FileMovedEvent

from overview_navigator.config import DebouncedReloadHandler, SettingsStore, SettingsWatcher


@pytest.fixture
def calls():
    return []


@pytest.fixture
def handler(calls):
    return DebouncedReloadHandler(lambda: calls.append(1), debounce_ms=50, target_filename="settings.json")


class TestDebouncedReloadHandler:
    """Test event filtering and debouncing."""

    @pytest.mark.asyncio
    async def test_burst_triggers_once(self, handler, calls, tmp_path):
        handler.set_event_loop(asyncio.get_running_loop())
        path = str(tmp_path / "settings.json")

        for _ in range(3):
            handler.on_modified(FileModifiedEvent(path))
        await asyncio.sleep(0.2)

        assert calls == [1]

    @pytest.mark.asyncio
    async def test_other_files_ignored(self, handler, calls, tmp_path):
        handler.set_event_loop(asyncio.get_running_loop())

        handler.on_modified(FileModifiedEvent(str(tmp_path / "other.json")))
        handler.on_modified(DirModifiedEvent(str(tmp_path)))
        await asyncio.sleep(0.2)

        assert calls == []

    @pytest.mark.asyncio
    async def test_atomic_rename_triggers(self, handler, calls, tmp_path):
        handler.set_event_loop(asyncio.get_running_loop())

        handler.on_moved(FileMovedEvent(str(tmp_path / ".settings-x.json"), str(tmp_path / "settings.json")))
        await asyncio.sleep(0.2)

        assert calls == [1]

    def test_without_loop_calls_immediately(self, handler, calls, tmp_path):
        handler.on_created(FileModifiedEvent(str(tmp_path / "settings.json")))
        assert calls == [1]


class TestSettingsWatcher:
    """Test reloading the store when the file changes on disk."""

    @pytest.mark.asyncio
    async def test_reloads_after_external_save(self, settings_file):
        store = SettingsStore(settings_file)
        watcher = SettingsWatcher(store, debounce_ms=50)
        watcher.set_event_loop(asyncio.get_running_loop())
        watcher.start()

        try:
            writer = SettingsStore(settings_file)
            writer.set("space_activates_dash", True)
            writer.save()

            for _ in range(60):
                await asyncio.sleep(0.05)
                if store.get("space_activates_dash"):
                    break
        finally:
            watcher.stop()

        assert store.get("space_activates_dash") is True
        assert watcher.is_running() is False

    def test_start_twice_warns(self, settings_file, caplog):
        watcher = SettingsWatcher(SettingsStore(settings_file))
        watcher.start()
        try:
            watcher.start()
        finally:
            watcher.stop()

        assert "already started" in caplog.text
