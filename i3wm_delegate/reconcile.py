"""Workspace reconciliation.

i3 workspace events say *that* something changed, not always *what* changed.
Each routine here fetches a fresh workspace list, diffs it against the
WorkspaceStore, applies the change and notifies the consumer.

All routines stop at the first difference they find: i3 sends one event per
atomic change, so one event never carries more than one delta. A routine
also stops as soon as a callback closes the engine.
"""

import logging
from typing import Any, List, Optional

from .callbacks import CallbackRegistry
from .errors import WorkspaceNotFoundError
from .ipc import I3IpcClient
from .models import LifecycleEvent, Workspace
from .store import WorkspaceStore

logger = logging.getLogger(__name__)


class ReconciliationEngine:
    """Applies i3 workspace changes to a WorkspaceStore."""

    def __init__(self, client: I3IpcClient, store: WorkspaceStore, callbacks: CallbackRegistry) -> None:
        self.client = client
        self.store = store
        self.callbacks = callbacks
        self.closed = False

    def close(self) -> None:
        self.closed = True

    def _fetch(self) -> List[Any]:
        # TransportError propagates to whoever is processing the event
        return self.client.get_workspaces()

    def on_created(self) -> Optional[Workspace]:
        """Handle workspace::init - store the first workspace i3 has and we don't."""
        remote = self._fetch()

        for reply in remote:
            if reply.name not in self.store:
                break
        else:
            logger.debug("workspace::init: no new workspace in snapshot")
            return None

        workspace = Workspace.from_reply(reply)
        self.store.insert_sorted(workspace)
        logger.info(f"Workspace created: {workspace.name} on {workspace.output}")

        self.callbacks.invoke(LifecycleEvent.CREATED, workspace)
        return workspace

    def on_destroyed(self) -> Optional[Workspace]:
        """Handle workspace::empty - drop the first stored workspace i3 no longer has."""
        remote = self._fetch()
        remote_names = {reply.name for reply in remote}

        for workspace in self.store:
            if workspace.name not in remote_names:
                break
        else:
            logger.debug("workspace::empty: no removed workspace in snapshot")
            return None

        self.store.remove_by_name(workspace.name)
        logger.info(f"Workspace destroyed: {workspace.name}")

        self.callbacks.invoke(LifecycleEvent.DESTROYED, workspace)
        return workspace

    def on_urgent(self) -> Optional[Workspace]:
        """Handle workspace::urgent - the urgent flag was set or cleared on one workspace."""
        remote = self._fetch()

        for reply in remote:
            workspace = self.store.find_by_name(reply.name)
            if workspace is None:
                logger.debug(f"workspace::urgent: skipping untracked workspace {reply.name}")
                continue
            if bool(reply.urgent) != workspace.urgent:
                break
        else:
            logger.debug("workspace::urgent: no urgency change in snapshot")
            return None

        workspace.urgent = bool(reply.urgent)
        logger.info(f"Workspace {workspace.name} urgent={workspace.urgent}")

        self.callbacks.invoke(LifecycleEvent.URGENT, workspace)
        return workspace

    def on_renamed(self) -> None:
        """Handle workspace::rename.

        A rename is treated as creating the new name and then destroying the
        old one, so consumers see created followed by destroyed.
        """
        self.on_created()
        if self.closed:
            return
        self.on_destroyed()

    def on_moved(self) -> Optional[Workspace]:
        """Handle workspace::move - a workspace changed outputs.

        The stored entity is replaced: destroyed fires with the old one,
        created with the new one.
        """
        remote = self._fetch()

        for reply in remote:
            old = self.store.find_by_name(reply.name)
            if old is None:
                logger.debug(f"workspace::move: skipping untracked workspace {reply.name}")
                continue
            if (reply.output or "") != old.output:
                break
        else:
            logger.debug("workspace::move: no output change in snapshot")
            return None

        self.store.remove_by_name(old.name)
        self.callbacks.invoke(LifecycleEvent.DESTROYED, old)
        if self.closed:
            # the destroyed callback closed the delegate
            return None

        workspace = Workspace.from_reply(reply)
        self.store.insert_sorted(workspace)
        logger.info(f"Workspace moved: {workspace.name} {old.output} -> {workspace.output}")

        self.callbacks.invoke(LifecycleEvent.CREATED, workspace)
        return workspace

    def on_focused(self, current_name: str, old_name: Optional[str]) -> Optional[Workspace]:
        """Handle workspace::focus using the names carried by the event.

        The previously focused container is not always a tracked workspace
        (e.g. the scratchpad), in which case nothing is blurred.

        Raises:
            WorkspaceNotFoundError: If the newly focused workspace is not stored

        Returns None when the blurred callback closes the delegate.
        """
        blurred = self.store.find_by_name(old_name) if old_name is not None else None
        if blurred is not None:
            blurred.focused = False
            self.callbacks.invoke(LifecycleEvent.BLURRED, blurred)
            if self.closed:
                return None

        focused = self.store.find_by_name(current_name)
        if focused is None:
            raise WorkspaceNotFoundError(current_name)

        focused.focused = True
        logger.debug(f"Workspace focus: {old_name} -> {current_name}")

        self.callbacks.invoke(LifecycleEvent.FOCUSED, focused)
        return focused
