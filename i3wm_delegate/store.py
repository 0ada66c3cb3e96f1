"""Ordered workspace storage.

WorkspaceStore owns every Workspace the delegate knows about and keeps them
sorted by workspace_cmp after each mutation. Workspace counts are in the tens,
so linear scans are fine.
"""

import bisect
import logging
from typing import Iterable, Iterator, List, Optional

from .errors import DuplicateWorkspaceError
from .models import Workspace
from .ordering import workspace_sort_key

logger = logging.getLogger(__name__)


class WorkspaceStore:
    """Workspaces sorted by workspace order, keyed by unique name."""

    def __init__(self) -> None:
        self._workspaces: List[Workspace] = []

    def __len__(self) -> int:
        return len(self._workspaces)

    def __iter__(self) -> Iterator[Workspace]:
        return iter(list(self._workspaces))

    def __contains__(self, name: object) -> bool:
        return self.find_by_name(name) is not None

    def insert_sorted(self, workspace: Workspace) -> None:
        """Insert a workspace at its ordered position.

        Raises:
            DuplicateWorkspaceError: If a workspace with the same name is stored
        """
        if self.find_by_name(workspace.name) is not None:
            raise DuplicateWorkspaceError(workspace.name)

        bisect.insort(self._workspaces, workspace, key=workspace_sort_key)
        logger.debug(f"Stored workspace {workspace.name} ({len(self._workspaces)} total)")

    def remove_by_name(self, name: str) -> Optional[Workspace]:
        """Remove a workspace and hand it back to the caller.

        Returns:
            The removed workspace, or None if no workspace has that name
        """
        for index, workspace in enumerate(self._workspaces):
            if workspace.name == name:
                del self._workspaces[index]
                logger.debug(f"Removed workspace {name} ({len(self._workspaces)} total)")
                return workspace
        return None

    def find_by_name(self, name: object) -> Optional[Workspace]:
        for workspace in self._workspaces:
            if workspace.name == name:
                return workspace
        return None

    def to_ordered_list(self) -> List[Workspace]:
        """Return the stored workspaces in workspace order."""
        return list(self._workspaces)

    def names(self) -> List[str]:
        return [workspace.name for workspace in self._workspaces]

    def replace_all(self, workspaces: Iterable[Workspace]) -> None:
        """Replace the whole contents, e.g. with the initial snapshot.

        Raises:
            DuplicateWorkspaceError: If the new contents repeat a name
        """
        incoming = list(workspaces)
        seen = set()
        for workspace in incoming:
            if workspace.name in seen:
                raise DuplicateWorkspaceError(workspace.name)
            seen.add(workspace.name)

        self._workspaces = sorted(incoming, key=workspace_sort_key)

    def clear(self) -> List[Workspace]:
        """Drop every workspace.

        Returns:
            The released workspaces, in workspace order
        """
        released, self._workspaces = self._workspaces, []
        return released
