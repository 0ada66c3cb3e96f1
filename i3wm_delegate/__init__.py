"""Ordered, event-driven view of i3's workspaces for panels and launchers."""

from .callbacks import CallbackRegistry
from .config import DelegateConfig
from .delegate import WorkspaceDelegate
from .errors import (
    DelegateError,
    DuplicateWorkspaceError,
    ErrorCode,
    I3ConnectionError,
    TransportError,
    WorkspaceNotFoundError,
)
from .models import LifecycleEvent, Workspace, WorkspaceChange
from .ordering import compare_names, workspace_cmp, ws_name_to_number
from .store import WorkspaceStore

__version__ = "1.0.0"

__all__ = [
    "CallbackRegistry",
    "DelegateConfig",
    "DelegateError",
    "DuplicateWorkspaceError",
    "ErrorCode",
    "I3ConnectionError",
    "LifecycleEvent",
    "TransportError",
    "Workspace",
    "WorkspaceChange",
    "WorkspaceDelegate",
    "WorkspaceNotFoundError",
    "WorkspaceStore",
    "compare_names",
    "workspace_cmp",
    "ws_name_to_number",
]
