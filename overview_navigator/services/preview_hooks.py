"""Hooks run on the host's window preview lifecycle."""

import logging

from ..config import SettingsStore
from ..constants import PREVIEW_ICON_SIZE, TITLE_INTO_WINDOW_FACTOR
from ..models.host import Overview, WindowPreview
from ..overview_session import OverviewSession

logger = logging.getLogger(__name__)


class PreviewHooks:
    """Applies caption placement and hover selection to window previews."""

    def __init__(self, overview: Overview, session: OverviewSession, settings: SettingsStore):
        self.overview = overview
        self.session = session
        self.settings = settings

    def on_preview_created(self, preview: WindowPreview) -> None:
        if self.settings.get("move_titles_into_windows"):
            preview.set_title_offset(TITLE_INTO_WINDOW_FACTOR * PREVIEW_ICON_SIZE)

    def on_overlay_shown(self, preview: WindowPreview) -> None:
        """Pointer entered a preview: select its window for activation."""
        if self.settings.get("hover_activates_window_on_leave") and self.overview.shown:
            self.session.select(preview)

    def on_overlay_hidden(self, preview: WindowPreview) -> None:
        if self.settings.get("hover_activates_window_on_leave"):
            self.session.release(preview)
