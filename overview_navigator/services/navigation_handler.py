"""Scroll and key handling for the workspace switcher.

The host's workspace display dispatches scroll and key events to a
NavigationHandler chosen when the navigator is composed. The default
handler keeps the host behaviour; the reorder handler lets Shift + scroll
or Shift + Page_Up/Page_Down move the active workspace within the
sequence.
"""

import logging
from typing import Optional, Protocol

from ..config import SettingsStore
from ..models.events import (
    EventResult,
    KeyEvent,
    KeySymbol,
    KeyTarget,
    MotionDirection,
    ScrollDirection,
    ScrollEvent,
)
from ..models.host import Overview, SwitcherContext, WorkspaceManager
from .workspace_reorder import reorder_workspace

logger = logging.getLogger(__name__)


class NavigationHandler(Protocol):
    """Capability interface the host's event dispatch calls into."""

    def handle_scroll(self, context: SwitcherContext, event: ScrollEvent) -> EventResult: ...

    def handle_key_press(self, context: SwitcherContext, event: KeyEvent) -> EventResult: ...


def resolve_key_target(key: str, vertical: bool, rtl: bool, n_workspaces: int) -> Optional[KeyTarget]:
    """Map a navigation key to a workspace target.

    Args:
        key: Key symbol name
        vertical: Workspaces laid out vertically
        rtl: Right-to-left text direction
        n_workspaces: Number of workspaces

    Returns:
        KeyTarget, or None for keys that are not workspace navigation
    """
    if key == KeySymbol.PAGE_UP:
        if vertical:
            return KeyTarget(direction=MotionDirection.UP)
        return KeyTarget(direction=MotionDirection.RIGHT if rtl else MotionDirection.LEFT)
    if key == KeySymbol.PAGE_DOWN:
        if vertical:
            return KeyTarget(direction=MotionDirection.DOWN)
        return KeyTarget(direction=MotionDirection.LEFT if rtl else MotionDirection.RIGHT)
    if key == KeySymbol.HOME:
        return KeyTarget(index=0)
    if key == KeySymbol.END:
        return KeyTarget(index=n_workspaces - 1)
    return None


class DefaultNavigationHandler:
    """Host behaviour: scroll switches to the adjacent workspace, keys navigate."""

    def __init__(
        self,
        workspace_manager: WorkspaceManager,
        overview: Overview,
        settings: Optional[SettingsStore] = None,
    ):
        self.workspace_manager = workspace_manager
        self.overview = overview
        self.settings = settings

    def _off_primary(self, context: SwitcherContext, event: ScrollEvent) -> bool:
        """True for events on a secondary monitor while switching is primary-only."""
        primary_only = context.workspaces_only_on_primary or (
            self.settings is not None and self.settings.get("workspaces_only_on_primary")
        )
        return primary_only and event.monitor_index != context.primary_monitor_index

    def handle_scroll(self, context: SwitcherContext, event: ScrollEvent) -> EventResult:
        if context.gesture_claims(event) or not context.mapped:
            return EventResult.PROPAGATE
        if self._off_primary(context, event):
            return EventResult.PROPAGATE
        return context.default_scroll(event)

    def handle_key_press(self, context: SwitcherContext, event: KeyEvent) -> EventResult:
        if not context.picker_active or not context.reactive:
            return EventResult.PROPAGATE
        target = resolve_key_target(
            event.key,
            vertical=self.workspace_manager.layout_rows == -1,
            rtl=context.rtl,
            n_workspaces=self.workspace_manager.n_workspaces,
        )
        if target is None:
            return EventResult.PROPAGATE
        self._move_overview(target)
        return EventResult.STOP

    def _move_overview(self, target: KeyTarget) -> None:
        if target.direction is not None:
            workspace = self.workspace_manager.get_active_workspace().get_neighbor(target.direction)
        else:
            workspace = self.workspace_manager.get_workspace_by_index(target.index)
        if workspace is not None:
            self.overview.move_to_workspace(workspace)


class ReorderNavigationHandler(DefaultNavigationHandler):
    """Adds workspace reordering and dash focus to the default navigation."""

    def __init__(self, workspace_manager: WorkspaceManager, overview: Overview, settings: SettingsStore):
        super().__init__(workspace_manager, overview, settings)

    def handle_scroll(self, context: SwitcherContext, event: ScrollEvent) -> EventResult:
        if context.gesture_claims(event) or not context.mapped:
            return EventResult.PROPAGATE

        if self._off_primary(context, event):
            return EventResult.PROPAGATE

        if self.settings.get("reorder_workspaces") and event.shift_held:
            direction = {ScrollDirection.UP: -1, ScrollDirection.DOWN: 1}.get(event.direction, 0)
            if direction:
                reorder_workspace(self.workspace_manager, direction)
                return EventResult.STOP

        return context.default_scroll(event)

    def handle_key_press(self, context: SwitcherContext, event: KeyEvent) -> EventResult:
        if not context.picker_active or not context.reactive:
            return EventResult.PROPAGATE

        if event.key in (KeySymbol.TAB, KeySymbol.SPACE):
            if self.settings.get("space_activates_dash"):
                self.overview.focus_dash()
            return EventResult.STOP

        target = resolve_key_target(
            event.key,
            vertical=self.workspace_manager.layout_rows == -1,
            rtl=context.rtl,
            n_workspaces=self.workspace_manager.n_workspaces,
        )
        if target is None:
            return EventResult.PROPAGATE

        if self.settings.get("reorder_workspaces") and event.shift_held:
            # Shift + Home/End has no reorder meaning and is swallowed
            if target.reorder_direction:
                reorder_workspace(self.workspace_manager, target.reorder_direction)
            return EventResult.STOP

        self._move_overview(target)
        return EventResult.STOP
