"""Per-overview lifecycle context.

A session starts when the overview is shown and ends when it hides. It
carries the window that should be activated on hide, recorded by hovering
a window preview when "hover selects window for activation" is enabled.
"""

import logging
from typing import Optional

from .models.host import Window, WindowPreview

logger = logging.getLogger(__name__)


class OverviewSession:
    """State that only exists while the overview is shown."""

    def __init__(self) -> None:
        self.active = False
        self.window_to_activate: Optional[Window] = None
        self._selecting_preview: Optional[WindowPreview] = None

    def begin(self) -> None:
        """Called when the overview starts showing."""
        self.active = True
        self.window_to_activate = None
        self._selecting_preview = None
        logger.debug("Overview session started")

    def select(self, preview: WindowPreview) -> None:
        """Record ``preview``'s window for activation on hide."""
        if not self.active:
            return
        self._selecting_preview = preview
        self.window_to_activate = preview.meta_window

    def release(self, preview: WindowPreview) -> None:
        """Forget the selection if ``preview`` made it."""
        if self._selecting_preview is preview:
            self._selecting_preview = None
            self.window_to_activate = None

    def end(self, timestamp: int = 0) -> Optional[Window]:
        """Called when the overview starts hiding.

        Activates the recorded window, if any, and clears the session.

        Returns:
            The window that was activated, or None
        """
        window = self.window_to_activate
        if window is not None:
            logger.debug("Activating hovered window on overview hide")
            window.activate(timestamp)

        self.active = False
        self.window_to_activate = None
        self._selecting_preview = None
        return window
