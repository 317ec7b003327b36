"""Services for the overview navigator."""

from .app_menu import build_app_menu_items
from .highlight_animator import HighlightAnimator, iter_workspace_views
from .interaction_engine import InteractionEngine
from .navigation_handler import (
    DefaultNavigationHandler,
    NavigationHandler,
    ReorderNavigationHandler,
    resolve_key_target,
)
from .preview_hooks import PreviewHooks
from .recency_resolver import RecencyResolver
from .workspace_reorder import reorder_workspace

__all__ = [
    "DefaultNavigationHandler",
    "HighlightAnimator",
    "InteractionEngine",
    "NavigationHandler",
    "PreviewHooks",
    "RecencyResolver",
    "ReorderNavigationHandler",
    "build_app_menu_items",
    "iter_workspace_views",
    "reorder_workspace",
    "resolve_key_target",
]
