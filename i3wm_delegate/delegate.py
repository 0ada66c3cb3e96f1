"""The i3 workspace delegate.

WorkspaceDelegate keeps an ordered copy of i3's workspace list up to date and
tells its consumer (typically a panel) when workspaces are created,
destroyed, focused, blurred or marked urgent.

Usage:
    with WorkspaceDelegate() as i3wm:
        i3wm.set_on_workspace_focused(lambda ws, data: print(ws.name))
        i3wm.run()
"""

import logging
from typing import Any, List, Optional, Union

from .callbacks import CallbackRegistry, ShutdownCallback, WorkspaceCallback
from .config import DelegateConfig
from .dispatcher import EventDispatcher
from .errors import DelegateError, ErrorCode, TransportError
from .ipc import I3IpcClient
from .models import LifecycleEvent, Workspace
from .reconcile import ReconciliationEngine
from .store import WorkspaceStore

logger = logging.getLogger(__name__)


def quote_workspace_name(name: str) -> str:
    """Quote a workspace name for use in an i3 command."""
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class WorkspaceDelegate:
    """Owns one i3 connection, the workspace list and the consumer callbacks."""

    def __init__(self, config: Optional[DelegateConfig] = None, client: Optional[I3IpcClient] = None) -> None:
        """Connect to i3, load the workspace list and subscribe to workspace events.

        Args:
            config: Connection settings (defaults to DelegateConfig.from_env())
            client: Pre-built IPC client, mainly for tests

        Raises:
            I3ConnectionError: If connecting or subscribing fails
            TransportError: If the initial workspace fetch fails
        """
        self.config = config or DelegateConfig.from_env()
        self.client = client or I3IpcClient(socket_path=self.config.socket_path)
        self.store = WorkspaceStore()
        self.callbacks = CallbackRegistry()
        self.engine = ReconciliationEngine(self.client, self.store, self.callbacks)
        self.dispatcher = EventDispatcher(self.engine)
        self.closed = False

        try:
            self.client.connect()
            self.client.on_shutdown(self._on_ipc_shutdown)
            self._init_workspaces()
            self.client.subscribe(self.dispatcher)
        except DelegateError as e:
            logger.error(f"Failed to initialize workspace delegate: {e}")
            self.close()
            raise

        logger.info(f"Workspace delegate ready with {len(self.store)} workspaces")

    def _init_workspaces(self) -> None:
        replies = self.client.get_workspaces()
        self.store.replace_all(Workspace.from_reply(reply) for reply in replies)

    def _on_ipc_shutdown(self, conn: Any, event: Any = None) -> None:
        logger.info("i3 IPC connection shut down")
        if not self.closed:
            self.callbacks.invoke_shutdown()

    def __enter__(self) -> "WorkspaceDelegate":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the connection and every stored workspace. Safe to call twice."""
        if self.closed:
            return

        self.closed = True
        self.engine.close()
        self.dispatcher.close()
        self.callbacks.clear()
        self.client.close()
        released = self.store.clear()
        logger.debug(f"Released {len(released)} workspaces")

    def get_workspaces(self) -> List[Workspace]:
        """Return the workspaces in workspace order."""
        return self.store.to_ordered_list()

    def find_workspace(self, name: str) -> Optional[Workspace]:
        return self.store.find_by_name(name)

    def set_on_workspace_created(self, callback: Optional[WorkspaceCallback], data: Any = None) -> None:
        self.callbacks.set(LifecycleEvent.CREATED, callback, data)

    def set_on_workspace_destroyed(self, callback: Optional[WorkspaceCallback], data: Any = None) -> None:
        """Set the destroyed callback.

        The workspace passed to it has already been removed from the list.
        """
        self.callbacks.set(LifecycleEvent.DESTROYED, callback, data)

    def set_on_workspace_blurred(self, callback: Optional[WorkspaceCallback], data: Any = None) -> None:
        self.callbacks.set(LifecycleEvent.BLURRED, callback, data)

    def set_on_workspace_focused(self, callback: Optional[WorkspaceCallback], data: Any = None) -> None:
        self.callbacks.set(LifecycleEvent.FOCUSED, callback, data)

    def set_on_workspace_urgent(self, callback: Optional[WorkspaceCallback], data: Any = None) -> None:
        self.callbacks.set(LifecycleEvent.URGENT, callback, data)

    def set_on_workspace_renamed(self, callback: Optional[WorkspaceCallback], data: Any = None) -> None:
        """Set the renamed callback.

        Renames are reported as created + destroyed, so this slot is kept for
        API compatibility and is not called by the delegate.
        """
        self.callbacks.set(LifecycleEvent.RENAMED, callback, data)

    def set_on_ipc_shutdown(self, callback: Optional[ShutdownCallback], data: Any = None) -> None:
        self.callbacks.set_shutdown(callback, data)

    def goto_workspace(self, workspace: Union[Workspace, str]) -> None:
        """Ask i3 to switch to a workspace.

        Raises:
            TransportError: If the command cannot be delivered
        """
        if self.closed:
            raise TransportError("command", "delegate is closed", code=ErrorCode.DELEGATE_CLOSED)

        name = workspace.name if isinstance(workspace, Workspace) else workspace
        replies = self.client.send_command(f"workspace {quote_workspace_name(name)}")

        for reply in replies:
            if not reply.success:
                logger.warning(f"i3 rejected switch to workspace {name}: {reply.error}")

    def run(self, timeout: float = 0.0) -> None:
        """Process i3 events until stop() is called or i3 goes away.

        Errors raised while handling an event (e.g. TransportError from a
        refetch) propagate out of this call.
        """
        if self.closed:
            raise TransportError("main", "delegate is closed", code=ErrorCode.DELEGATE_CLOSED)
        self.client.main(timeout=timeout)

    def stop(self) -> None:
        self.client.main_quit()
