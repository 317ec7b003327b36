"""Input event and action value types.

Small enums and dataclasses shared between the decision engine, the
highlight animator and the navigation handlers. Numeric values mirror the
host toolkit's constants so adapters can pass them through unchanged.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag
from typing import Callable, Optional


class Button(IntEnum):
    """Pointer buttons."""
    PRIMARY = 1
    MIDDLE = 2
    SECONDARY = 3


class ModifierType(IntFlag):
    """Keyboard modifier mask held during an event."""
    NONE = 0
    SHIFT = 1 << 0
    LOCK = 1 << 1
    CONTROL = 1 << 2
    MOD1 = 1 << 3
    SUPER = 1 << 26


class ScrollDirection(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SMOOTH = "smooth"


class MotionDirection(IntEnum):
    """Direction relative to the active workspace.

    Values are negative so they never collide with workspace indices.
    """
    UP = -1
    DOWN = -2
    LEFT = -3
    RIGHT = -4


class KeySymbol(str, Enum):
    """Keys the workspace switcher reacts to."""
    PAGE_UP = "Page_Up"
    PAGE_DOWN = "Page_Down"
    HOME = "Home"
    END = "End"
    TAB = "Tab"
    SPACE = "space"


class EventResult(Enum):
    """Whether an event handler consumed the event."""
    PROPAGATE = False
    STOP = True


class AppState(Enum):
    STOPPED = "stopped"
    STARTING = "starting"
    RUNNING = "running"


class AnimationMode(Enum):
    LINEAR = "linear"
    EASE_OUT_QUAD = "ease-out-quad"


class IconAction(Enum):
    """Outcome of a dock icon activation."""
    LAUNCH_NEW_WINDOW = "launch_new_window"
    REVEAL_WORKSPACE = "reveal_workspace"
    MOVE_ALL_WINDOWS_HERE = "move_all_windows_here"
    NOOP = "noop"
    ACTIVATE_APP = "activate_app"


@dataclass(frozen=True)
class ScrollEvent:
    """Scroll on the workspace switcher or a dock icon."""
    direction: ScrollDirection
    modifiers: ModifierType = ModifierType.NONE
    monitor_index: int = 0

    @property
    def shift_held(self) -> bool:
        return bool(self.modifiers & ModifierType.SHIFT)


@dataclass(frozen=True)
class KeyEvent:
    """Key press delivered to the workspace switcher."""
    key: str
    modifiers: ModifierType = ModifierType.NONE

    @property
    def shift_held(self) -> bool:
        return bool(self.modifiers & ModifierType.SHIFT)


@dataclass(frozen=True)
class KeyTarget:
    """Workspace a navigation key points at.

    Exactly one of ``direction`` (relative move) or ``index`` (absolute
    workspace index) is set.
    """
    direction: Optional[MotionDirection] = None
    index: Optional[int] = None

    @property
    def reorder_direction(self) -> int:
        """Reorder step for this target: -1, +1, or 0 when not directional."""
        if self.direction in (MotionDirection.UP, MotionDirection.LEFT):
            return -1
        if self.direction in (MotionDirection.DOWN, MotionDirection.RIGHT):
            return 1
        return 0


@dataclass
class MenuItem:
    """Entry appended to a dock icon's popup menu."""
    label: str
    callback: Callable[[], None] = field(repr=False)

    def activate(self) -> None:
        self.callback()
