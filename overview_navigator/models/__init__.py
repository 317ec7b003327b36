"""Data models for the overview navigator."""

from .events import (
    AnimationMode,
    AppState,
    Button,
    EventResult,
    IconAction,
    KeyEvent,
    KeySymbol,
    KeyTarget,
    MenuItem,
    ModifierType,
    MotionDirection,
    ScrollDirection,
    ScrollEvent,
)
from .icon_state import DockIconState
from .settings import HighlightMode, NavigatorSettings

__all__ = [
    "AnimationMode",
    "AppState",
    "Button",
    "DockIconState",
    "EventResult",
    "HighlightMode",
    "IconAction",
    "KeyEvent",
    "KeySymbol",
    "KeyTarget",
    "MenuItem",
    "ModifierType",
    "MotionDirection",
    "NavigatorSettings",
    "ScrollDirection",
    "ScrollEvent",
]
