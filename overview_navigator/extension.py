"""Composition root for the overview navigator.

Wires the services together against the host interfaces and owns the
enable/disable lifecycle: loading settings, watching the settings file,
selecting the navigation handler, and attaching dock icons.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .clock import Clock, MonotonicClock
from .config import SettingsStore, SettingsWatcher
from .constants import OPACITY_FULL
from .models.events import EventResult, IconAction, MenuItem, ModifierType, ScrollEvent
from .models.host import ActivationHistory, AppTracker, DockIcon, Overview, Window, WorkspaceManager
from .models.icon_state import DockIconState
from .overview_session import OverviewSession
from .services.app_menu import build_app_menu_items
from .services.highlight_animator import HighlightAnimator
from .services.interaction_engine import InteractionEngine
from .services.navigation_handler import (
    DefaultNavigationHandler,
    NavigationHandler,
    ReorderNavigationHandler,
)
from .services.preview_hooks import PreviewHooks
from .services.recency_resolver import RecencyResolver

logger = logging.getLogger(__name__)


@dataclass
class _AttachedIcon:
    icon: DockIcon
    state: DockIconState = field(default_factory=DockIconState)
    handler_ids: List[int] = field(default_factory=list)


class OverviewNavigator:
    """Entry point the host shell talks to."""

    def __init__(
        self,
        workspace_manager: WorkspaceManager,
        overview: Overview,
        history: ActivationHistory,
        app_tracker: AppTracker,
        settings: Optional[SettingsStore] = None,
        clock: Optional[Clock] = None,
    ):
        """Initialize navigator.

        Args:
            workspace_manager: Host workspace manager
            overview: Host overview
            history: Window activation history (most recent first)
            app_tracker: Window to application mapping
            settings: Settings store (file-backed defaults if None)
            clock: Time source (monotonic clock if None)
        """
        self.workspace_manager = workspace_manager
        self.overview = overview
        self.settings = settings or SettingsStore()
        self.clock = clock or MonotonicClock()

        self.resolver = RecencyResolver(history, app_tracker)
        self.animator = HighlightAnimator(overview, self.resolver, self.settings, self.clock)
        self.engine = InteractionEngine(
            workspace_manager, overview, self.resolver, self.animator, self.settings, self.clock
        )
        self.session = OverviewSession()
        self.preview_hooks = PreviewHooks(overview, self.session, self.settings)
        self.navigation: NavigationHandler = DefaultNavigationHandler(workspace_manager, overview, self.settings)

        self._icons: Dict[int, _AttachedIcon] = {}
        self._watcher: Optional[SettingsWatcher] = None
        self.enabled = False

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    def enable(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        """Load settings and switch the host over to the navigator's handlers.

        Args:
            loop: Event loop for settings file reloads; no watcher without it
        """
        if self.enabled:
            self.disable()

        self.settings.load()
        self.navigation = ReorderNavigationHandler(
            self.workspace_manager, self.overview, self.settings
        )

        if loop is not None:
            self._watcher = SettingsWatcher(self.settings)
            self._watcher.set_event_loop(loop)
            self._watcher.start()

        self.enabled = True
        logger.info("Overview navigator enabled")

    def disable(self) -> None:
        """Detach every icon and restore the host's default navigation."""
        if not self.enabled:
            return

        for attached in list(self._icons.values()):
            self.detach_icon(attached.icon)

        self.navigation = DefaultNavigationHandler(self.workspace_manager, self.overview, self.settings)

        if self._watcher is not None:
            self._watcher.stop()
            self._watcher = None

        self.enabled = False
        logger.info("Overview navigator disabled")

    # ------------------------------------------------------------------ #
    # Dock icons
    # ------------------------------------------------------------------ #

    def attach_icon(self, icon: DockIcon) -> Optional[DockIconState]:
        """Connect enter/leave/scroll handlers to a dock icon.

        Returns:
            The icon's transient state (existing one if already attached),
            None while the navigator is disabled
        """
        if not self.enabled:
            logger.debug("Navigator disabled, not attaching dock icon")
            return None

        key = id(icon)
        if key in self._icons:
            return self._icons[key].state

        attached = _AttachedIcon(icon)
        attached.handler_ids = [
            icon.connect("enter-event", lambda *args: self.on_icon_enter(icon)),
            icon.connect("leave-event", lambda *args: self.on_icon_leave(icon)),
            icon.connect("scroll-event", lambda actor, event: self.on_icon_scroll(icon, event)),
            icon.connect("destroy", lambda *args: self.detach_icon(icon)),
        ]
        self._icons[key] = attached
        return attached.state

    def detach_icon(self, icon: DockIcon) -> None:
        """Disconnect handlers and drop the icon's transient state."""
        attached = self._icons.pop(id(icon), None)
        if attached is None:
            return
        for handler_id in attached.handler_ids:
            icon.disconnect(handler_id)

    def icon_state(self, icon: DockIcon) -> Optional[DockIconState]:
        attached = self._icons.get(id(icon))
        return attached.state if attached else None

    def _state_for(self, icon: DockIcon) -> Optional[DockIconState]:
        state = self.icon_state(icon)
        if state is None:
            state = self.attach_icon(icon)
        return state

    def on_icon_enter(self, icon: DockIcon) -> None:
        state = self._state_for(icon)
        if state is not None:
            self.animator.highlight(state, icon.app)

    def on_icon_leave(self, icon: DockIcon) -> None:
        state = self._state_for(icon)
        if state is not None:
            self.animator.highlight(state, icon.app, OPACITY_FULL)

    def on_icon_scroll(self, icon: DockIcon, event: ScrollEvent) -> EventResult:
        state = self._state_for(icon)
        if state is None:
            return EventResult.PROPAGATE
        return self.engine.on_icon_scroll(icon, state, event.direction)

    def on_icon_activate(
        self,
        icon: DockIcon,
        button: Optional[int] = None,
        modifiers: ModifierType = ModifierType.NONE,
    ) -> Optional[IconAction]:
        """Handle a dock icon click.

        Returns:
            The action taken, or None while disabled (host default applies)
        """
        state = self._state_for(icon)
        if state is None:
            return None
        return self.engine.on_icon_activate(icon, state, button, modifiers)

    def app_menu_items(self, icon: DockIcon) -> List[MenuItem]:
        return build_app_menu_items(icon.app, self.settings, self.workspace_manager, self.engine)

    # ------------------------------------------------------------------ #
    # Overview lifecycle
    # ------------------------------------------------------------------ #

    def on_overview_showing(self) -> None:
        self.session.begin()

    def on_overview_hiding(self, timestamp: int = 0) -> Optional[Window]:
        return self.session.end(timestamp)
