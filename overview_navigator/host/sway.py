"""Sway/i3 host adapter.

Implements the activation history, app tracking and workspace manager
interfaces on top of the i3 IPC protocol. Sway keeps no global
most-recently-used window list, so SwayActivationHistory builds one from
``window::focus`` events.

Workspace reordering is done by renumbering: every workspace keeps its
label, and its number is rewritten to its new position.
"""

import logging
import re
from typing import Dict, List, Optional

import i3ipc
import psutil

from ..errors import ErrorCode, HostCommandError
from ..models.events import AppState, MotionDirection

logger = logging.getLogger(__name__)


def get_window_class(container) -> str:
    """Get window class in a Sway/i3-compatible way.

    Sway native Wayland windows carry ``app_id``; XWayland and i3 windows
    carry ``window_class``.

    Returns:
        Window class string or "unknown" if not available
    """
    if getattr(container, 'app_id', None):
        return container.app_id
    if getattr(container, 'window_class', None):
        return container.window_class
    return "unknown"


def _quote(name: str) -> str:
    """Double-quote a workspace name for an IPC command."""
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def renumbered_name(name: str, number: int) -> str:
    """Workspace name with its numeric prefix replaced.

    Sway takes the leading digit run as the workspace number, whatever
    follows it. "3:web" -> "1:web", "3" -> "1", "2 web" -> "1 web",
    "web" -> "1:web"
    """
    match = re.match(r"^(\d+)(.*)$", name, re.DOTALL)
    if match:
        return f"{number}{match.group(2)}"
    return f"{number}:{name}"


class SwayConnection:
    """Thin wrapper around a synchronous i3ipc connection."""

    def __init__(self, conn: Optional[i3ipc.Connection] = None):
        """Initialize connection.

        Args:
            conn: Existing connection (a new one to the running compositor if None)

        Raises:
            HostCommandError: If no compositor IPC socket can be reached
        """
        if conn is None:
            try:
                conn = i3ipc.Connection(auto_reconnect=True)
            except Exception as e:
                raise HostCommandError(
                    ErrorCode.HOST_NOT_RUNNING,
                    f"Cannot connect to sway IPC: {e}",
                    suggestion="Check that sway is running and SWAYSOCK is set",
                ) from e
        self.conn = conn

    def command(self, cmd: str) -> None:
        """Run an IPC command.

        Raises:
            HostCommandError: If any reply reports failure
        """
        replies = self.conn.command(cmd)
        for reply in replies:
            if not reply.success:
                raise HostCommandError(
                    ErrorCode.HOST_COMMAND_FAILED,
                    f"Command failed: {cmd}",
                    context={"error": getattr(reply, "error", None)},
                )


class SwayWorkspace:
    """Workspace handle; position is its rank by number."""

    def __init__(self, manager: "SwayWorkspaceManager", name: str):
        self.manager = manager
        self.name = name

    def index(self) -> int:
        return self.manager.index_of(self.name)

    def get_neighbor(self, direction: int) -> Optional["SwayWorkspace"]:
        step = -1 if direction in (MotionDirection.UP, MotionDirection.LEFT) else 1
        return self.manager.get_workspace_by_index(self.index() + step)

    def __eq__(self, other) -> bool:
        return isinstance(other, SwayWorkspace) and other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"SwayWorkspace({self.name!r})"


class SwayWorkspaceManager:
    """Workspace sequence backed by GET_WORKSPACES."""

    layout_rows = 1

    def __init__(self, sway: SwayConnection):
        self.sway = sway

    def _names(self) -> List[str]:
        workspaces = sorted(self.sway.conn.get_workspaces(), key=lambda ws: (ws.num, ws.name))
        return [ws.name for ws in workspaces]

    @property
    def n_workspaces(self) -> int:
        return len(self._names())

    def index_of(self, name: str) -> int:
        names = self._names()
        return names.index(name) if name in names else -1

    def get_active_workspace(self) -> SwayWorkspace:
        for ws in self.sway.conn.get_workspaces():
            if ws.focused:
                return SwayWorkspace(self, ws.name)
        raise HostCommandError(ErrorCode.WORKSPACE_NOT_FOUND, "No focused workspace")

    def get_workspace_by_index(self, index: int) -> Optional[SwayWorkspace]:
        names = self._names()
        if 0 <= index < len(names):
            return SwayWorkspace(self, names[index])
        return None

    def switch_to(self, workspace: SwayWorkspace) -> bool:
        try:
            self.sway.command(f"workspace {_quote(workspace.name)}")
        except HostCommandError as e:
            logger.error(f"Failed to switch to workspace {workspace.name}: {e}")
            return False
        return True

    def _rename(self, old: str, new: str) -> None:
        self.sway.command(f"rename workspace {_quote(old)} to {_quote(new)}")

    def reorder_workspace(self, workspace: SwayWorkspace, new_index: int) -> None:
        """Move ``workspace`` to ``new_index`` by renumbering all workspaces.

        Renames go through temporary names so intermediate numbers never
        collide with existing workspaces. If a rename fails, workspaces
        already renamed are given back their original names.
        """
        names = self._names()
        if workspace.name not in names:
            logger.warning(f"Cannot reorder unknown workspace {workspace.name}")
            return

        names.remove(workspace.name)
        names.insert(new_index, workspace.name)
        final = {name: renumbered_name(name, pos + 1) for pos, name in enumerate(names)}
        changed = [name for name in names if final[name] != name]
        temp = {name: f"__reorder_{pos}" for pos, name in enumerate(changed)}
        current: Dict[str, str] = {}  # original name -> name it has now

        try:
            for name in changed:
                self._rename(name, temp[name])
                current[name] = temp[name]
            for name in changed:
                self._rename(temp[name], final[name])
                current[name] = final[name]
        except HostCommandError as e:
            logger.error(f"Workspace reorder failed: {e}")
            self._roll_back(current, temp)
            return

        workspace.name = final[workspace.name]
        logger.info(f"Reordered workspace to position {new_index}")

    def _roll_back(self, current: Dict[str, str], temp: Dict[str, str]) -> None:
        """Restore original names, moving renamed workspaces back through temp names."""
        try:
            for name, now in current.items():
                if now != temp[name]:
                    self._rename(now, temp[name])
            for name in current:
                self._rename(temp[name], name)
        except HostCommandError as e:
            logger.error(f"Workspace reorder rollback failed: {e}")
            return
        logger.info(f"Rolled back {len(current)} workspace rename(s)")


class SwayWindow:
    """Window handle wrapping an i3ipc container."""

    def __init__(self, sway: SwayConnection, workspaces: SwayWorkspaceManager, con):
        self.sway = sway
        self.workspaces = workspaces
        self.con = con
        self.id = con.id
        self.window_class = get_window_class(con)
        self.pid = getattr(con, "pid", None)

    def get_workspace(self) -> Optional[SwayWorkspace]:
        ws = self.con.workspace()
        if ws is None or ws.name == "__i3_scratch":
            return None
        return SwayWorkspace(self.workspaces, ws.name)

    def _window_command(self, action: str) -> bool:
        try:
            self.sway.command(f"[con_id={self.id}] {action}")
        except HostCommandError as e:
            logger.error(f"Window {self.id} '{action}' failed: {e}")
            return False
        return True

    def activate(self, timestamp: int = 0) -> None:
        self._window_command("focus")

    def change_workspace(self, workspace: SwayWorkspace) -> None:
        self._window_command(f"move container to workspace {_quote(workspace.name)}")

    def delete(self, timestamp: int = 0) -> None:
        """Ask the window to close."""
        self._window_command("kill")

    def kill(self) -> None:
        """Force quit the owning process (SIGKILL)."""
        if not self.pid:
            logger.warning(f"Window {self.id} has no pid, cannot force quit")
            return
        try:
            psutil.Process(self.pid).kill()
            logger.info(f"Killed process {self.pid} of window {self.id}")
        except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
            logger.error(f"Failed to kill process {self.pid}: {e}")

    def __eq__(self, other) -> bool:
        return isinstance(other, SwayWindow) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)


class SwayActivationHistory:
    """Most-recently-focused-first window list built from focus events."""

    def __init__(self, sway: SwayConnection, workspaces: SwayWorkspaceManager):
        self.sway = sway
        self.workspaces = workspaces
        self._order: List[int] = []

    def seed(self) -> None:
        """Initialize order from the tree: focused window first, then tree order."""
        tree = self.sway.conn.get_tree()
        leaves = tree.leaves()
        focused = tree.find_focused()
        self._order = [con.id for con in leaves]
        if focused is not None and focused.id in self._order:
            self._order.remove(focused.id)
            self._order.insert(0, focused.id)
        logger.debug(f"Seeded activation history with {len(self._order)} window(s)")

    def subscribe(self) -> None:
        self.sway.conn.on(i3ipc.Event.WINDOW_FOCUS, self.on_window_focus)
        self.sway.conn.on(i3ipc.Event.WINDOW_CLOSE, self.on_window_close)

    def on_window_focus(self, conn, event) -> None:
        window_id = event.container.id
        if window_id in self._order:
            self._order.remove(window_id)
        self._order.insert(0, window_id)

    def on_window_close(self, conn, event) -> None:
        window_id = event.container.id
        if window_id in self._order:
            self._order.remove(window_id)

    def get_tab_list(self) -> List[SwayWindow]:
        """Windows ordered by activation, newest first.

        Windows never seen in a focus event follow in tree order.
        """
        leaves = {con.id: con for con in self.sway.conn.get_tree().leaves()}
        ordered = [leaves[wid] for wid in self._order if wid in leaves]
        seen = set(self._order)
        ordered.extend(con for wid, con in leaves.items() if wid not in seen)
        return [SwayWindow(self.sway, self.workspaces, con) for con in ordered]


class SwayApp:
    """Application identified by window class."""

    def __init__(self, tracker: "SwayAppTracker", window_class: str, command: Optional[str] = None):
        self.tracker = tracker
        self.window_class = window_class
        self.command = command

    @property
    def state(self) -> AppState:
        return AppState.RUNNING if self.get_windows() else AppState.STOPPED

    def get_windows(self) -> List[SwayWindow]:
        """App windows in activation order."""
        return [
            w for w in self.tracker.history.get_tab_list()
            if w.window_class == self.window_class
        ]

    def get_n_windows(self) -> int:
        return len(self.get_windows())

    def can_open_new_window(self) -> bool:
        return self.command is not None

    def open_new_window(self, workspace: int = -1) -> None:
        if self.command is None:
            logger.warning(f"No launch command for {self.window_class}")
            return
        try:
            self.tracker.sway.command(f"exec {self.command}")
        except HostCommandError as e:
            logger.error(f"Failed to launch {self.window_class}: {e}")

    def activate(self) -> None:
        """Focus the most recent window, launching the app if it has none."""
        windows = self.get_windows()
        if windows:
            windows[0].activate()
        else:
            self.open_new_window()

    def __eq__(self, other) -> bool:
        return isinstance(other, SwayApp) and other.window_class == self.window_class

    def __hash__(self) -> int:
        return hash(self.window_class)


class SwayAppTracker:
    """Maps windows to SwayApp by window class."""

    def __init__(self, sway: SwayConnection, history: SwayActivationHistory,
                 launch_commands: Optional[Dict[str, str]] = None):
        self.sway = sway
        self.history = history
        self.launch_commands = launch_commands or {}
        self._apps: Dict[str, SwayApp] = {}

    def get_app(self, window_class: str) -> SwayApp:
        app = self._apps.get(window_class)
        if app is None:
            app = SwayApp(self, window_class, self.launch_commands.get(window_class))
            self._apps[window_class] = app
        return app

    def get_window_app(self, window: SwayWindow) -> Optional[SwayApp]:
        if window.window_class == "unknown":
            return None
        return self.get_app(window.window_class)
