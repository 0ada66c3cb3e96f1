"""Data models for the i3 workspace delegate.

This module defines the locally cached workspace entity and the enums used
for event classification and callback registration.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict


class WorkspaceChange(Enum):
    """Change kinds carried by i3 workspace events that the delegate handles."""

    FOCUS = "focus"
    INIT = "init"
    EMPTY = "empty"
    URGENT = "urgent"
    RENAME = "rename"
    MOVE = "move"


class LifecycleEvent(Enum):
    """Workspace lifecycle notifications a consumer can register for."""

    CREATED = "created"
    DESTROYED = "destroyed"
    BLURRED = "blurred"
    FOCUSED = "focused"
    URGENT = "urgent"
    RENAMED = "renamed"


@dataclass
class Workspace:
    """A workspace as tracked by the delegate."""

    name: str  # Unique key (e.g., "1", "web")
    num: int = -1  # Workspace number, -1 for named workspaces
    focused: bool = False
    urgent: bool = False
    output: str = ""  # Output the workspace is shown on (e.g., "DP-1")

    def __post_init__(self) -> None:
        """Validate workspace information."""
        if not self.name:
            raise ValueError("Workspace name cannot be empty")

    @classmethod
    def from_reply(cls, reply: Any) -> "Workspace":
        """Create a workspace from an i3ipc WorkspaceReply.

        Args:
            reply: i3ipc WorkspaceReply (or any object with the same attributes)

        Returns:
            A new Workspace owned by the caller
        """
        num = reply.num if reply.num is not None else -1
        return cls(
            name=reply.name,
            num=num,
            focused=bool(reply.focused),
            urgent=bool(reply.urgent),
            output=reply.output or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
