"""Settings store for the overview navigator.

Loads policy flags from a JSON file, validates them with pydantic, notifies
subscribers about changed keys, and watches the file for edits made while
the shell is running.
"""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple

from pydantic import ValidationError
from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from .constants import ConfigPaths, SETTINGS_RELOAD_DEBOUNCE_MS
from .errors import ErrorCode, SettingsError
from .models.settings import NavigatorSettings

logger = logging.getLogger(__name__)

SettingsCallback = Callable[[str, Any], None]


class SettingsStore:
    """Key/value access to NavigatorSettings with change notification."""

    def __init__(
        self,
        settings_file: Path = ConfigPaths.SETTINGS_FILE,
        settings: Optional[NavigatorSettings] = None,
    ):
        """Initialize settings store.

        Args:
            settings_file: JSON file backing the store
            settings: Initial settings (defaults if None)
        """
        self.settings_file = settings_file
        self._settings = settings or NavigatorSettings()
        self._handlers: Dict[int, Tuple[str, SettingsCallback]] = {}
        self.load_error: Optional[SettingsError] = None
        self._next_handler_id = 1

        self._aliases = {
            info.alias: name
            for name, info in NavigatorSettings.model_fields.items()
            if info.alias
        }

    @property
    def settings(self) -> NavigatorSettings:
        return self._settings

    def _resolve(self, key: str) -> str:
        name = self._aliases.get(key, key)
        if name not in NavigatorSettings.model_fields:
            raise SettingsError(
                ErrorCode.UNKNOWN_SETTING,
                f"Unknown setting: {key}",
                suggestion=f"Valid settings: {', '.join(sorted(NavigatorSettings.model_fields))}",
            )
        return name

    def get(self, key: str) -> Any:
        """Get current value of a setting.

        Args:
            key: Field name or its camelCase alias

        Raises:
            SettingsError: If the key is unknown
        """
        return getattr(self._settings, self._resolve(key))

    def set(self, key: str, value: Any) -> None:
        """Set a setting and notify subscribers if the value changed.

        Raises:
            SettingsError: If the key is unknown or the value is invalid
        """
        name = self._resolve(key)
        old = getattr(self._settings, name)
        try:
            setattr(self._settings, name, value)
        except ValidationError as e:
            raise SettingsError(
                ErrorCode.INVALID_SETTING_VALUE,
                f"Invalid value for {name}: {value!r}",
                context={"errors": e.errors()},
            ) from e

        new = getattr(self._settings, name)
        if new != old:
            logger.debug(f"Setting changed: {name}={new!r}")
            self._notify(name, new)

    def connect(self, key: str, callback: SettingsCallback) -> int:
        """Subscribe to changes of one setting.

        Args:
            key: Field name or alias
            callback: Called with (field_name, new_value)

        Returns:
            Handler ID for disconnect()
        """
        name = self._resolve(key)
        handler_id = self._next_handler_id
        self._next_handler_id += 1
        self._handlers[handler_id] = (name, callback)
        return handler_id

    def disconnect(self, handler_id: int) -> None:
        self._handlers.pop(handler_id, None)

    def _notify(self, name: str, value: Any) -> None:
        for handler_name, callback in list(self._handlers.values()):
            if handler_name == name:
                callback(name, value)

    def _apply(self, new_settings: NavigatorSettings) -> None:
        """Replace settings and notify every changed key."""
        old_settings = self._settings
        self._settings = new_settings
        for name in NavigatorSettings.model_fields:
            new_value = getattr(new_settings, name)
            if getattr(old_settings, name) != new_value:
                logger.debug(f"Setting changed on reload: {name}={new_value!r}")
                self._notify(name, new_value)

    def load(self) -> NavigatorSettings:
        """Load settings from the JSON file.

        Missing file keeps defaults. A corrupt or invalid file is logged,
        recorded in ``load_error``, and the current settings stay in effect.

        Returns:
            Settings in effect after loading
        """
        self.load_error = None
        if not self.settings_file.exists():
            logger.info(f"Settings file does not exist: {self.settings_file}, using defaults")
            return self._settings

        try:
            with open(self.settings_file) as f:
                data = json.load(f)
            new_settings = NavigatorSettings.model_validate(data)
        except (json.JSONDecodeError, OSError) as e:
            self.load_error = self._load_failed(f"Failed to read settings from {self.settings_file}: {e}")
            return self._settings
        except ValidationError as e:
            self.load_error = self._load_failed(
                f"Invalid settings in {self.settings_file}: {e}", {"errors": e.errors()}
            )
            return self._settings

        self._apply(new_settings)
        logger.info(f"Loaded settings from {self.settings_file}")
        return self._settings

    def _load_failed(self, message: str, context: Optional[Dict[str, Any]] = None) -> SettingsError:
        error = SettingsError(
            ErrorCode.SETTINGS_LOAD_FAILED,
            message,
            suggestion="Fix or remove the settings file; previous settings stay in effect",
            context={"path": str(self.settings_file), **(context or {})},
        )
        logger.error(message)
        logger.warning("Keeping previous settings")
        return error

    def save(self) -> None:
        """Write settings atomically (temp file + rename).

        Raises:
            SettingsError: If the file cannot be written
        """
        data = self._settings.model_dump(mode="json")
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.settings_file.parent, prefix=".settings-", suffix=".json"
            )
            with os.fdopen(fd, "w") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.settings_file)
        except OSError as e:
            raise SettingsError(
                ErrorCode.SETTINGS_SAVE_FAILED,
                f"Failed to write settings: {e}",
                context={"path": str(self.settings_file)},
            ) from e
        logger.debug(f"Saved settings to {self.settings_file}")


class DebouncedReloadHandler(FileSystemEventHandler):
    """File system event handler with debounced reload callback.

    Watchdog delivers events on its observer thread; the callback is
    scheduled onto the asyncio loop so it runs on the event-loop thread.
    """

    def __init__(self, callback: Callable[[], Any], debounce_ms: int = 100, target_filename: Optional[str] = None):
        """Initialize debounced reload handler.

        Args:
            callback: Function to call after debounce period
            debounce_ms: Debounce timeout in milliseconds (default: 100ms)
            target_filename: If set, only trigger on events for this filename
        """
        super().__init__()
        self.callback = callback
        self.debounce_seconds = debounce_ms / 1000
        self.target_filename = target_filename
        self._timer: Optional[asyncio.TimerHandle] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    def set_event_loop(self, loop: asyncio.AbstractEventLoop) -> None:
        """Set the asyncio event loop for scheduling callbacks.

        Args:
            loop: Asyncio event loop
        """
        self._loop = loop

    def _schedule_callback(self) -> None:
        """Schedule a debounced callback."""
        if self._loop:
            self._loop.call_soon_threadsafe(self._restart_timer)
        else:
            logger.warning("No event loop set for debounced handler, calling immediately")
            self.callback()

    def _restart_timer(self) -> None:
        if self._timer:
            self._timer.cancel()
        self._timer = self._loop.call_later(self.debounce_seconds, self._fire)

    def _fire(self) -> None:
        self._timer = None
        self.callback()

    def _should_trigger(self, event) -> bool:
        """Check if event should trigger callback based on target filename filter."""
        if event.is_directory:
            return False
        if self.target_filename:
            event_path = getattr(event, 'dest_path', None) or event.src_path
            return Path(event_path).name == self.target_filename
        return True

    def on_modified(self, event) -> None:
        if self._should_trigger(event):
            self._schedule_callback()

    def on_moved(self, event) -> None:
        """Atomic saves arrive as temp file + rename."""
        if self._should_trigger(event):
            self._schedule_callback()

    def on_created(self, event) -> None:
        if self._should_trigger(event):
            self._schedule_callback()


class SettingsWatcher:
    """File system watcher for the settings file with auto-reload."""

    def __init__(self, store: SettingsStore, debounce_ms: int = SETTINGS_RELOAD_DEBOUNCE_MS):
        """Initialize settings file watcher.

        Args:
            store: SettingsStore to reload on modification
            debounce_ms: Debounce timeout in milliseconds
        """
        self.store = store
        self.observer = Observer()
        self.handler = DebouncedReloadHandler(
            store.load, debounce_ms, target_filename=store.settings_file.name
        )
        self._started = False

    def set_event_loop(self, loop: asyncio.AbstractEventLoop) -> None:
        self.handler.set_event_loop(loop)

    def start(self) -> None:
        """Start watching the settings file.

        Watches the parent directory since some editors use atomic save
        (create temp file + rename) which doesn't trigger inotify on the file itself.
        """
        if self._started:
            logger.warning("Settings watcher already started")
            return

        watch_dir = self.store.settings_file.parent
        watch_dir.mkdir(parents=True, exist_ok=True)

        self.observer.schedule(self.handler, str(watch_dir), recursive=False)
        self.observer.start()
        self._started = True

        logger.info(f"Started watching {self.store.settings_file} for modifications")

    def stop(self) -> None:
        """Stop watching for file modifications."""
        if not self._started:
            return

        self.observer.stop()
        self.observer.join(timeout=5.0)
        self._started = False
        logger.info("Stopped settings watcher")

    def is_running(self) -> bool:
        return self._started
