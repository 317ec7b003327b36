"""Transient per-dock-icon interaction state."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class DockIconState:
    """Flags shared by the decision engine and the highlight animator.

    Lives exactly as long as the icon is attached; nothing here is persisted.
    """
    scroll_guard_timestamp: Optional[float] = None  # clock seconds of last scroll navigation
    scroll_highlight_active: bool = False  # highlight pass driven by scroll, not hover
    awaiting_window_pick: bool = False  # RevealWorkspace moved the overview, next click picks

    def stamp_scroll(self, now: float) -> None:
        """Open the scroll debounce window at ``now``."""
        self.scroll_guard_timestamp = now

    def guard_open(self, now: float, guard_ms: int) -> bool:
        """True while the last scroll navigation is younger than ``guard_ms``."""
        if self.scroll_guard_timestamp is None:
            return False
        return (now - self.scroll_guard_timestamp) * 1000 < guard_ms
