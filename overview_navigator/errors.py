"""
Error types for the overview navigator.

The interaction core never raises to the host; these errors belong to the
settings layer and the host adapters, where callers catch and log them.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """
    Error codes for the overview navigator.

    Custom codes:
    - 1000-1099: Settings errors
    - 1400-1499: Host/window manager errors
    """

    # Settings errors (1000-1099)
    SETTINGS_LOAD_FAILED = 1000
    SETTINGS_SAVE_FAILED = 1001
    UNKNOWN_SETTING = 1002
    INVALID_SETTING_VALUE = 1003

    # Host errors (1400-1499)
    HOST_NOT_RUNNING = 1400
    HOST_COMMAND_FAILED = 1401
    WORKSPACE_NOT_FOUND = 1402


class NavigatorError(Exception):
    """Base exception for overview navigator errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize navigator error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            suggestion: Suggested recovery action
            context: Additional context for debugging
        """
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary for logging or diagnostics.

        Returns:
            Error dictionary with code, message, suggestion, and context
        """
        result = {
            "code": self.code.value,
            "message": self.message
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.context:
            result["context"] = self.context
        return result


class SettingsError(NavigatorError):
    """Settings could not be read, written or validated."""


class HostCommandError(NavigatorError):
    """A window manager command was rejected."""
