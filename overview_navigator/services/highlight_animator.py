"""Highlight an application's window previews in the overview.

Hovering a dock icon shows the titles of the app's window previews;
scrolling it (or a reveal click) additionally dims every other preview.
Leaving the icon restores everything. The most recently used window of the
app is marked by showing its close button in the affordance color.
"""

import logging
from typing import Iterator, Optional, Sequence

from ..clock import Clock
from ..config import SettingsStore
from ..constants import (
    OPACITY_DIM,
    OPACITY_FULL,
    OPACITY_HIDDEN,
    SCROLL_GUARD_MS,
    WINDOW_OVERLAY_FADE_TIME,
)
from ..models.events import AnimationMode
from ..models.host import Application, Overview, Window, WindowPreview, WorkspaceView
from ..models.icon_state import DockIconState
from ..models.settings import HighlightMode
from .recency_resolver import RecencyResolver

logger = logging.getLogger(__name__)


def iter_workspace_views(views: Sequence[WorkspaceView]) -> Iterator[WorkspaceView]:
    """Yield every view that carries window previews.

    Monitor views may wrap their workspaces in a nested view (secondary
    monitors do); both levels are visited and views without preview state
    are skipped.
    """
    for view in views:
        while view is not None:
            if getattr(view, "workspaces", None) is not None:
                yield view
            view = getattr(view, "nested_view", None)


def iter_window_previews(views: Sequence[WorkspaceView]) -> Iterator[WindowPreview]:
    for view in iter_workspace_views(views):
        for workspace in view.workspaces:
            yield from workspace.windows


def _title_ready(preview: WindowPreview) -> bool:
    """False while the host is still constructing the preview's caption."""
    try:
        preview.title.opacity
    except (AttributeError, RuntimeError) as e:
        logger.debug(f"Skipping preview with unready title: {e}")
        return False
    return True


class HighlightAnimator:
    """Drives preview opacity for a dock icon's application."""

    def __init__(
        self,
        overview: Overview,
        resolver: RecencyResolver,
        settings: SettingsStore,
        clock: Clock,
    ):
        self.overview = overview
        self.resolver = resolver
        self.settings = settings
        self.clock = clock

    def highlight(
        self,
        icon_state: DockIconState,
        app: Application,
        others_opacity: int = OPACITY_DIM,
    ) -> None:
        """Run one highlight pass over all rendered previews.

        Args:
            icon_state: Transient state of the dock icon driving the pass
            app: Application whose windows are highlighted
            others_opacity: Body opacity for other apps' previews;
                OPACITY_FULL restores the overview
        """
        mode = self.settings.get("highlight_mode")
        if mode == HighlightMode.DISABLED:
            return

        restoring = others_opacity == OPACITY_FULL
        titles_only = False
        if restoring:
            # Switching workspace emits leave events while the pointer is
            # still over the icon
            if icon_state.guard_open(self.clock.now(), SCROLL_GUARD_MS):
                logger.debug("Restore suppressed inside scroll guard")
                return
            icon_state.scroll_highlight_active = False
        elif not icon_state.scroll_highlight_active or mode == HighlightMode.TITLES:
            titles_only = True

        recent_window = self.resolver.most_recent_window(app)
        app_windows = app.get_windows()
        color = self.settings.get("recent_window_color")

        count = 0
        for preview in iter_window_previews(self.overview.get_workspace_views()):
            if not _title_ready(preview):
                continue
            self._update_preview(
                preview, app_windows, recent_window, others_opacity,
                restoring, titles_only, color,
            )
            count += 1

        logger.debug(
            f"Highlight pass: previews={count} others_opacity={others_opacity} titles_only={titles_only}"
        )

    def _update_preview(
        self,
        preview: WindowPreview,
        app_windows: Sequence[Window],
        recent_window: Optional[Window],
        others_opacity: int,
        restoring: bool,
        titles_only: bool,
        color: str,
    ) -> None:
        if preview.meta_window in app_windows:
            opacity = OPACITY_FULL
            title_opacity = OPACITY_HIDDEN if restoring else OPACITY_FULL
            if recent_window is not None and preview.meta_window == recent_window:
                preview.close_button.show()
                preview.close_button.opacity = OPACITY_FULL
                preview.close_button.set_style(f"background-color: {color}")
        else:
            opacity = others_opacity
            title_opacity = OPACITY_HIDDEN

        # Let an animation already heading to the same value continue
        if preview.title.get_transition_target("opacity") != title_opacity:
            preview.title.ease(
                opacity=title_opacity,
                duration=WINDOW_OVERLAY_FADE_TIME,
                on_complete=lambda: self._on_title_faded(preview, title_opacity),
            )

        if titles_only:
            return

        preview.ease(
            opacity=opacity,
            duration=WINDOW_OVERLAY_FADE_TIME,
            mode=AnimationMode.EASE_OUT_QUAD,
        )

    @staticmethod
    def _on_title_faded(preview: WindowPreview, title_opacity: int) -> None:
        if title_opacity == OPACITY_HIDDEN:
            preview.title.hide()
            preview.close_button.opacity = OPACITY_HIDDEN
        else:
            preview.title.show()
