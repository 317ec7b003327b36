"""Interfaces consumed from the host shell.

The navigator never creates or destroys any of these objects; it only
queries them and issues commands. Adapters (see ``overview_navigator.host``)
and test doubles implement these protocols structurally.
"""

from typing import Any, Callable, List, Optional, Protocol, Sequence

from .events import AnimationMode, AppState, EventResult, ScrollEvent


class Workspace(Protocol):
    """One virtual desktop in the global ordered sequence."""

    def index(self) -> int: ...

    def get_neighbor(self, direction: int) -> Optional["Workspace"]: ...


class Window(Protocol):
    """Window-manager window handle."""

    def get_workspace(self) -> Optional[Workspace]: ...

    def activate(self, timestamp: int = 0) -> None: ...

    def change_workspace(self, workspace: Workspace) -> None: ...

    def delete(self, timestamp: int = 0) -> None: ...

    def kill(self) -> None: ...


class Application(Protocol):
    """Running or launchable program."""

    state: AppState

    def get_windows(self) -> List[Window]: ...

    def get_n_windows(self) -> int: ...

    def can_open_new_window(self) -> bool: ...

    def open_new_window(self, workspace: int = -1) -> None: ...

    def activate(self) -> None: ...


class ActivationHistory(Protocol):
    """Window-activation order, most recently activated first."""

    def get_tab_list(self) -> List[Window]: ...


class AppTracker(Protocol):
    """Maps a window to its owning application."""

    def get_window_app(self, window: Window) -> Optional[Application]: ...


class WorkspaceManager(Protocol):
    """Global workspace sequence."""

    n_workspaces: int
    layout_rows: int

    def get_active_workspace(self) -> Workspace: ...

    def get_workspace_by_index(self, index: int) -> Optional[Workspace]: ...

    def reorder_workspace(self, workspace: Workspace, new_index: int) -> None: ...


class PreviewActor(Protocol):
    """Animatable actor (window preview body or its title caption)."""

    opacity: int

    def show(self) -> None: ...

    def hide(self) -> None: ...

    def ease(
        self,
        *,
        opacity: int,
        duration: int,
        mode: AnimationMode = AnimationMode.EASE_OUT_QUAD,
        on_complete: Optional[Callable[[], None]] = None,
    ) -> None: ...

    def get_transition_target(self, prop: str) -> Optional[Any]:
        """Final value of the running transition on ``prop``, if any."""
        ...


class CloseButton(Protocol):
    opacity: int

    def show(self) -> None: ...

    def set_style(self, style: str) -> None: ...


class WindowPreview(PreviewActor, Protocol):
    """Thumbnail of one window inside a workspace view."""

    meta_window: Window
    title: PreviewActor
    close_button: CloseButton

    def set_title_offset(self, offset: float) -> None: ...


class WorkspaceGroup(Protocol):
    """One workspace's previews inside a monitor view."""

    windows: Sequence[WindowPreview]


class WorkspaceView(Protocol):
    """Per-monitor view of the workspaces.

    ``workspaces`` is None when the view carries no window previews (for
    example a secondary monitor wrapper); ``nested_view`` holds the view it
    wraps, if any.
    """

    workspaces: Optional[Sequence[WorkspaceGroup]]
    nested_view: Optional["WorkspaceView"]


class Overview(Protocol):
    """The shell's workspace/app picker."""

    shown: bool

    def hide(self) -> None: ...

    def move_to_workspace(self, workspace: Workspace) -> None: ...

    def leave_app_grid(self) -> None: ...

    def focus_dash(self) -> None: ...

    def get_workspace_views(self) -> Sequence[WorkspaceView]: ...


class DockIcon(Protocol):
    """Dock entry for one application."""

    app: Application

    def animate_launch(self) -> None: ...

    def connect(self, signal: str, handler: Callable[..., Any]) -> int: ...

    def disconnect(self, handler_id: int) -> None: ...


class SwitcherContext(Protocol):
    """State of the workspace-switcher strip the overrides run against."""

    mapped: bool
    reactive: bool
    picker_active: bool
    workspaces_only_on_primary: bool
    primary_monitor_index: int
    rtl: bool

    def gesture_claims(self, event: ScrollEvent) -> bool: ...

    def default_scroll(self, event: ScrollEvent) -> EventResult: ...
