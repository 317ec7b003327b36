"""Centralized paths and constants for the overview navigator.

Single source of truth for file paths, timing and opacity values used
across the services.
"""

from pathlib import Path
from typing import Final


class ConfigPaths:
    """Centralized configuration paths.

    All paths are computed once at import time based on user's home directory.

    Example:
        from .constants import ConfigPaths

        settings = json.loads(ConfigPaths.SETTINGS_FILE.read_text())
    """

    HOME: Final[Path] = Path.home()
    CONFIG_DIR: Final[Path] = HOME / ".config" / "overview-navigator"
    SETTINGS_FILE: Final[Path] = CONFIG_DIR / "settings.json"

    @classmethod
    def ensure_dirs(cls) -> None:
        """Create the configuration directory if it doesn't exist."""
        cls.CONFIG_DIR.mkdir(parents=True, exist_ok=True)


# Scroll debounce: events on the same dock icon closer than this are dropped
SCROLL_GUARD_MS: Final[int] = 200

# Window overlay fade duration used by the host's window previews
WINDOW_OVERLAY_FADE_TIME: Final[int] = 200

# Size of the app icon drawn under each window preview
PREVIEW_ICON_SIZE: Final[int] = 64

# Title offset applied when titles are moved up into the previews
TITLE_INTO_WINDOW_FACTOR: Final[float] = -1.3

# Opacity values (0-255)
OPACITY_FULL: Final[int] = 255
OPACITY_DIM: Final[int] = 50
OPACITY_HIDDEN: Final[int] = 0

# Settings file reload debounce
SETTINGS_RELOAD_DEBOUNCE_MS: Final[int] = 200
