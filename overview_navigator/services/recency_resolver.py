"""Resolve an application's most recently used window and workspace."""

import logging
from typing import Optional

from ..models.host import ActivationHistory, Application, AppTracker, Window, Workspace

logger = logging.getLogger(__name__)


class RecencyResolver:
    """Stateless queries over the window-activation history."""

    def __init__(self, history: ActivationHistory, app_tracker: AppTracker):
        """Initialize recency resolver.

        Args:
            history: Activation order, most recently activated window first
            app_tracker: Maps windows to their owning applications
        """
        self.history = history
        self.app_tracker = app_tracker

    def most_recent_window(self, app: Application) -> Optional[Window]:
        """First window of ``app`` in activation order.

        Args:
            app: Application to resolve

        Returns:
            The app's most recently activated window, or None if it has none
        """
        for window in self.history.get_tab_list():
            if self.app_tracker.get_window_app(window) == app:
                return window
        return None

    def recent_workspace(self, app: Application) -> Optional[Workspace]:
        """Workspace holding ``app``'s most recently used window, or None."""
        window = self.most_recent_window(app)
        if window is None:
            logger.debug("No recent window for app, no recent workspace")
            return None
        return window.get_workspace()
