"""
Error types for i3-x3.

Resolver misses are recoverable and handled inside every operation.
Transport and configuration errors surface to the CLI.
"""

from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(Enum):
    """
    Error codes for i3-x3.

    - 1000-1099: Lookup errors
    - 1400-1499: i3/sway IPC errors
    - 1500-1599: Configuration errors
    """

    # Lookup errors (1000-1099)
    WORKSPACE_NOT_FOUND = 1000
    OUTPUT_NOT_FOUND = 1001

    # i3/sway IPC errors (1400-1499)
    I3_NOT_RUNNING = 1400
    I3_IPC_FAILED = 1401

    # Configuration errors (1500-1599)
    CONFIG_INVALID = 1500


class X3Error(Exception):
    """Base exception for i3-x3 errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize error.

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
        Convert error to dictionary for JSON output.

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


class WorkspaceNotFound(X3Error):
    """Raised when a resolver lookup has no match in the snapshot."""

    def __init__(self, token: str, message: Optional[str] = None):
        self.token = token
        super().__init__(
            ErrorCode.WORKSPACE_NOT_FOUND,
            message or f"No workspace found: {token!r}",
            context={"token": token},
        )


class I3Error(X3Error):
    """Raised for i3/sway IPC transport errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.I3_IPC_FAILED,
        suggestion: Optional[str] = None,
    ):
        super().__init__(code, message, suggestion=suggestion)


class ConfigLoadError(X3Error):
    """Configuration loading error."""

    def __init__(self, file_path: str, reason: str):
        """
        Initialize configuration load error.

        Args:
            file_path: Path to configuration file
            reason: Reason for load failure
        """
        super().__init__(
            code=ErrorCode.CONFIG_INVALID,
            message=f"Failed to load configuration from {file_path}: {reason}",
            suggestion="Check file syntax and allowed values",
            context={"file_path": file_path, "reason": reason}
        )
