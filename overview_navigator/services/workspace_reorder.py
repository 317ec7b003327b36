"""Move the active workspace one step within the workspace sequence."""

import logging

from ..models.host import WorkspaceManager

logger = logging.getLogger(__name__)


def reorder_workspace(workspace_manager: WorkspaceManager, direction: int) -> bool:
    """Swap the active workspace with its neighbour.

    Workspaces between the old and new position shift by one. Targets
    outside the sequence are ignored; there is no wrap-around.

    Args:
        workspace_manager: Host workspace manager
        direction: -1 (towards the start) or +1 (towards the end)

    Returns:
        True if the workspace was moved, False for a no-op
    """
    active = workspace_manager.get_active_workspace()
    active_index = active.index()
    target_index = active_index + direction

    if not 0 <= target_index < workspace_manager.n_workspaces:
        logger.debug(
            f"Reorder ignored: target {target_index} outside 0..{workspace_manager.n_workspaces - 1}"
        )
        return False

    workspace_manager.reorder_workspace(active, target_index)
    logger.debug(f"Moved workspace {active_index} -> {target_index}")
    return True
