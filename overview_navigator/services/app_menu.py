"""Extra entries for a dock icon's popup menu."""

import logging
from typing import List

from ..config import SettingsStore
from ..models.events import MenuItem
from ..models.host import Application, WorkspaceManager
from .interaction_engine import InteractionEngine

logger = logging.getLogger(__name__)


def build_app_menu_items(
    app: Application,
    settings: SettingsStore,
    workspace_manager: WorkspaceManager,
    engine: InteractionEngine,
) -> List[MenuItem]:
    """Build the menu items enabled for ``app``.

    Items are only offered for apps that have windows. "Close Windows on
    Current Workspace" additionally needs a window on the active workspace.

    Args:
        app: Application behind the icon
        settings: Policy flags
        workspace_manager: Host workspace manager
        engine: Interaction engine (shared move-to-workspace action)

    Returns:
        Menu items in display order
    """
    windows = app.get_windows()
    if not windows:
        return []

    items: List[MenuItem] = []

    if settings.get("menu_force_quit"):
        def force_quit() -> None:
            logger.info("Force quitting application")
            app.get_windows()[0].kill()
        items.append(MenuItem("Force Quit", force_quit))

    if settings.get("menu_move_app_to_workspace"):
        items.append(MenuItem(
            "Move App to Current Workspace",
            lambda: engine.move_app_to_current_workspace(app),
        ))

    if settings.get("menu_close_windows_on_workspace"):
        current = workspace_manager.get_active_workspace()
        if any(w.get_workspace() == current for w in windows):
            def close_here() -> None:
                here = workspace_manager.get_active_workspace()
                for window in app.get_windows():
                    if window.get_workspace() == here:
                        window.delete()
            items.append(MenuItem("Close Windows on Current Workspace", close_here))

    return items
