"""
Error types for the i3 workspace delegate.

Every failure the delegate reports is a DelegateError carrying a structured
code, so consumers (panels, launchers, the CLI) can tell a missing window
manager apart from a broken session.
"""

from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(Enum):
    """
    Error codes for the workspace delegate.

    - 1400-1499: i3 IPC errors
    - 1500-1599: Workspace state errors
    """

    # i3 IPC errors (1400-1499)
    I3_NOT_RUNNING = 1400
    I3_IPC_FAILED = 1401
    SUBSCRIBE_FAILED = 1402
    COMMAND_FAILED = 1403

    # Workspace state errors (1500-1599)
    WORKSPACE_NOT_FOUND = 1500
    DUPLICATE_WORKSPACE = 1501
    DELEGATE_CLOSED = 1502


class DelegateError(Exception):
    """Base exception for workspace delegate errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize delegate error.

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
        Convert error to dictionary for machine-readable output.

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


class I3ConnectionError(DelegateError):
    """Opening the i3 connection or subscribing to its events failed."""

    def __init__(self, operation: str, reason: str, code: ErrorCode = ErrorCode.I3_NOT_RUNNING):
        """
        Initialize connection error.

        Args:
            operation: IPC operation that failed (e.g., "connect", "subscribe")
            reason: Reason for failure
            code: Error code, I3_NOT_RUNNING unless the subscription failed
        """
        super().__init__(
            code=code,
            message=f"i3 IPC {operation} failed: {reason}",
            suggestion="Ensure i3 is running and I3SOCK points at its IPC socket",
            context={"operation": operation, "reason": reason}
        )


class TransportError(DelegateError):
    """A request on an established connection failed."""

    def __init__(self, operation: str, reason: str, code: ErrorCode = ErrorCode.I3_IPC_FAILED):
        super().__init__(
            code=code,
            message=f"i3 IPC {operation} failed: {reason}",
            suggestion="The window manager may have restarted; reconnect the delegate",
            context={"operation": operation, "reason": reason}
        )


class WorkspaceNotFoundError(DelegateError):
    """A workspace named by the window manager is missing from the local list."""

    def __init__(self, name: str):
        super().__init__(
            code=ErrorCode.WORKSPACE_NOT_FOUND,
            message=f"Workspace not found: {name!r}",
            suggestion="The local workspace list is out of sync; reconnect the delegate",
            context={"name": name}
        )


class DuplicateWorkspaceError(DelegateError):
    """A workspace with the same name is already stored."""

    def __init__(self, name: str):
        super().__init__(
            code=ErrorCode.DUPLICATE_WORKSPACE,
            message=f"Workspace already exists: {name!r}",
            context={"name": name}
        )
