"""Decision engine for dock icon clicks and scrolls in the overview.

Click precedence (first match wins):

1. Stopped app, or Ctrl/middle click on a running app that can open
   windows: launch a new window.
2. "Show windows before activation": app has several windows and none
   (or, preferring the recent window, not its most recent one) is on the
   current workspace: move the overview to the app's recent workspace.
3. Shift click with "shift-click moves app": pull all app windows here.
4. Any other Shift click is swallowed.
5. Default activation, then hide the overview.

Scrolling an icon cycles the overview through the workspaces holding the
app's windows, with a 200ms guard against duplicate scroll ticks.
"""

import logging
from typing import List, Optional

from ..clock import Clock
from ..config import SettingsStore
from ..constants import SCROLL_GUARD_MS
from ..models.events import (
    AppState,
    Button,
    EventResult,
    IconAction,
    ModifierType,
    ScrollDirection,
)
from ..models.host import Application, DockIcon, Overview, Workspace, WorkspaceManager
from ..models.icon_state import DockIconState
from .highlight_animator import HighlightAnimator
from .recency_resolver import RecencyResolver

logger = logging.getLogger(__name__)


class InteractionEngine:
    """Turns dock icon input into workspace navigation."""

    def __init__(
        self,
        workspace_manager: WorkspaceManager,
        overview: Overview,
        resolver: RecencyResolver,
        animator: HighlightAnimator,
        settings: SettingsStore,
        clock: Clock,
    ):
        """Initialize interaction engine.

        Args:
            workspace_manager: Host workspace manager
            overview: Host overview
            resolver: Recency resolver for target windows/workspaces
            animator: Highlight animator for visual feedback
            settings: Policy flags
            clock: Time source for the scroll guard
        """
        self.workspace_manager = workspace_manager
        self.overview = overview
        self.resolver = resolver
        self.animator = animator
        self.settings = settings
        self.clock = clock

    def _target_on_workspace(self, app: Application, workspace: Workspace) -> bool:
        if self.settings.get("prefer_recent_window"):
            return self.resolver.recent_workspace(app) == workspace
        return any(w.get_workspace() == workspace for w in app.get_windows())

    def decide_activation(
        self,
        app: Application,
        button: Optional[int],
        modifiers: ModifierType,
        current_workspace: Workspace,
    ) -> IconAction:
        """Choose the action for a dock icon activation.

        Args:
            app: Application behind the icon
            button: Pointer button, None for keyboard activation
            modifiers: Modifier mask held during the activation
            current_workspace: Active workspace

        Returns:
            Exactly one IconAction
        """
        shift = bool(modifiers & ModifierType.SHIFT)
        ctrl = bool(modifiers & ModifierType.CONTROL)
        middle = button == Button.MIDDLE

        open_new_window = (
            app.can_open_new_window()
            and app.state == AppState.RUNNING
            and (ctrl or middle)
        )
        if app.state == AppState.STOPPED or open_new_window:
            return IconAction.LAUNCH_NEW_WINDOW

        if (
            self.settings.get("show_windows_before_activation")
            and not shift
            and app.get_n_windows() > 1
            and not self._target_on_workspace(app, current_workspace)
        ):
            return IconAction.REVEAL_WORKSPACE

        if self.settings.get("shift_click_moves_app") and shift and app.get_windows():
            return IconAction.MOVE_ALL_WINDOWS_HERE

        if shift:
            return IconAction.NOOP

        return IconAction.ACTIVATE_APP

    def on_icon_activate(
        self,
        icon: DockIcon,
        icon_state: DockIconState,
        button: Optional[int],
        modifiers: ModifierType,
    ) -> IconAction:
        """Decide and execute the action for a dock icon click.

        Returns:
            The action that was taken
        """
        app = icon.app
        current = self.workspace_manager.get_active_workspace()
        action = self.decide_activation(app, button, modifiers, current)
        icon_state.awaiting_window_pick = False
        logger.debug(f"Icon activation: button={button} modifiers={modifiers!r} -> {action.value}")

        if action == IconAction.LAUNCH_NEW_WINDOW:
            if not modifiers & ModifierType.SHIFT:
                icon.animate_launch()
            if app.state == AppState.STOPPED:
                app.activate()
            else:
                app.open_new_window(-1)
            self.overview.hide()

        elif action == IconAction.REVEAL_WORKSPACE:
            target = self.resolver.recent_workspace(app)
            if target is not None:
                self.overview.move_to_workspace(target)
            self.overview.leave_app_grid()
            icon_state.scroll_highlight_active = True
            icon_state.stamp_scroll(self.clock.now())
            icon_state.awaiting_window_pick = True

        elif action == IconAction.MOVE_ALL_WINDOWS_HERE:
            self.move_app_to_current_workspace(app)

        elif action == IconAction.ACTIVATE_APP:
            app.activate()
            self.overview.hide()

        return action

    def move_app_to_current_workspace(self, app: Application) -> int:
        """Move every window of ``app`` to the active workspace.

        Returns:
            Number of windows moved
        """
        current = self.workspace_manager.get_active_workspace()
        windows = app.get_windows()
        for window in windows:
            window.change_workspace(current)
        logger.info(f"Moved {len(windows)} window(s) to workspace {current.index()}")
        return len(windows)

    @staticmethod
    def app_workspaces(app: Application) -> List[Workspace]:
        """Distinct workspaces holding ``app``'s windows, sorted by index."""
        workspaces: List[Workspace] = []
        for window in app.get_windows():
            workspace = window.get_workspace()
            if workspace is not None and workspace not in workspaces:
                workspaces.append(workspace)
        workspaces.sort(key=lambda ws: ws.index())
        return workspaces

    def on_icon_scroll(
        self,
        icon: DockIcon,
        icon_state: DockIconState,
        direction: ScrollDirection,
    ) -> EventResult:
        """Cycle the overview through the app's workspaces.

        Returns:
            STOP when the scroll was handled or suppressed, PROPAGATE when it
            belongs to the default handler
        """
        if not self.settings.get("scroll_switches_app_workspaces"):
            return EventResult.PROPAGATE

        now = self.clock.now()
        if icon_state.guard_open(now, SCROLL_GUARD_MS):
            logger.debug("Scroll suppressed inside guard interval")
            return EventResult.STOP

        if direction not in (ScrollDirection.UP, ScrollDirection.DOWN):
            return EventResult.PROPAGATE

        app = icon.app
        workspaces = self.app_workspaces(app)
        if not workspaces:
            return EventResult.STOP

        current = self.workspace_manager.get_active_workspace()
        position = workspaces.index(current) if current in workspaces else -1
        step = -1 if direction == ScrollDirection.UP else 1
        target = workspaces[(position + step) % len(workspaces)]

        self.overview.move_to_workspace(target)
        self.overview.leave_app_grid()
        icon_state.scroll_highlight_active = True
        icon_state.stamp_scroll(now)
        logger.debug(f"Scroll {direction.value}: workspace {current.index()} -> {target.index()}")

        self.animator.highlight(icon_state, app)
        return EventResult.STOP
