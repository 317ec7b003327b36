"""Pydantic model for the navigator's policy flags.

Every behaviour of the engine is gated by one of these fields. The JSON
settings file may use either the snake_case field names or the camelCase
keys used by the shell extension schema.
"""

import re
from enum import IntEnum

from pydantic import BaseModel, Field, field_validator


class HighlightMode(IntEnum):
    """What hovering/scrolling a dock icon does to window previews."""
    DISABLED = 0
    TITLES = 1  # show titles of the app's windows only
    TITLES_AND_OPACITY = 2  # titles, plus dim other windows on scroll


class NavigatorSettings(BaseModel):
    """Root settings model."""

    reorder_workspaces: bool = Field(
        default=True,
        alias="addReorderWs",
        description="Shift + scroll / Page keys reorder the active workspace",
    )
    space_activates_dash: bool = Field(
        default=False,
        alias="spaceActivatesDash",
        description="Tab/Space in the window picker moves focus to the dash",
    )
    move_titles_into_windows: bool = Field(
        default=False,
        alias="moveTitlesIntoWindows",
        description="Move window preview captions up into the preview",
    )
    hover_activates_window_on_leave: bool = Field(
        default=False,
        alias="hoverActivatesWindowOnLeave",
        description="Window under the pointer is activated when the overview hides",
    )
    shift_click_moves_app: bool = Field(
        default=True,
        alias="dashShiftClickMovesAppToCurrentWs",
        description="Shift + click on a dock icon moves the app's windows here",
    )
    highlight_mode: HighlightMode = Field(
        default=HighlightMode.TITLES_AND_OPACITY,
        alias="dashHoverIconHighlitsWindows",
        description="Window highlighting on dock icon hover/scroll",
    )
    scroll_switches_app_workspaces: bool = Field(
        default=True,
        alias="dashScrollSwitchesAppWindowsWs",
        description="Scrolling a dock icon cycles workspaces holding the app's windows",
    )
    show_windows_before_activation: bool = Field(
        default=True,
        alias="dashShowWindowsBeforeActivation",
        description="First click reveals the app's workspace instead of activating",
    )
    prefer_recent_window: bool = Field(
        default=False,
        alias="dashClickFollowsRecentWindow",
        description="Reveal decision follows the globally most recently used window",
    )
    menu_force_quit: bool = Field(
        default=True,
        alias="appMenuForceQuit",
        description="Add 'Force Quit' to the dock icon menu",
    )
    menu_move_app_to_workspace: bool = Field(
        default=True,
        alias="appMenuMoveAppToWs",
        description="Add 'Move App to Current Workspace' to the dock icon menu",
    )
    menu_close_windows_on_workspace: bool = Field(
        default=True,
        alias="appMenuCloseWindowsOnCurrentWs",
        description="Add 'Close Windows on Current Workspace' to the dock icon menu",
    )
    recent_window_color: str = Field(
        default="green",
        alias="recentWindowColor",
        description="Background color of the most recently used window's close button",
    )
    workspaces_only_on_primary: bool = Field(
        default=False,
        alias="workspacesOnlyOnPrimary",
        description="Workspace switching restricted to the primary monitor",
    )

    @field_validator("recent_window_color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Accept CSS color names and #rgb/#rrggbb(aa) values."""
        v = v.strip()
        if not re.match(r"^(#[0-9a-fA-F]{3,8}|[a-zA-Z]+|rgba?\([0-9., ]+\))$", v):
            raise ValueError(f"Invalid color: {v}")
        return v

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "extra": "ignore",
    }
