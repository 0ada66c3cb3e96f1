"""
i3 IPC client wrapper around the synchronous i3ipc.Connection.

Maps i3ipc's exceptions onto I3ConnectionError (opening the session,
subscribing) and TransportError (requests on an open session).
"""

import logging
from typing import Any, Callable, List, Optional

import i3ipc
from i3ipc import CommandReply, Event, WorkspaceReply

from .errors import ErrorCode, I3ConnectionError, TransportError

logger = logging.getLogger(__name__)

# i3ipc emits this pseudo event when the event socket reaches EOF
IPC_SHUTDOWN = "ipc_shutdown"

EventHandler = Callable[..., None]


class I3IpcClient:
    """Single i3 IPC session used by one WorkspaceDelegate.

    The connection never reconnects: after i3 restarts the workspace list
    must be rebuilt, so callers construct a new delegate instead.
    """

    def __init__(self, socket_path: Optional[str] = None):
        self.socket_path = socket_path
        self.conn: Optional[i3ipc.Connection] = None
        self._handlers: List[EventHandler] = []
        self._loop_error: Optional[Exception] = None

    @property
    def is_connected(self) -> bool:
        return self.conn is not None

    def connect(self) -> i3ipc.Connection:
        """Open the connection to i3.

        Raises:
            I3ConnectionError: If the socket cannot be found or opened
        """
        if self.is_connected:
            return self.conn

        try:
            self.conn = i3ipc.Connection(socket_path=self.socket_path)
        except Exception as e:
            raise I3ConnectionError("connect", str(e)) from e

        logger.info(f"Connected to i3 IPC socket {self.conn.socket_path}")
        return self.conn

    def _require_connection(self, operation: str) -> i3ipc.Connection:
        if not self.is_connected:
            raise TransportError(operation, "not connected")
        return self.conn

    def get_workspaces(self) -> List[WorkspaceReply]:
        """Fetch the current workspace list from i3.

        Raises:
            TransportError: If the request fails
        """
        conn = self._require_connection("get_workspaces")
        try:
            return conn.get_workspaces()
        except Exception as e:
            raise TransportError("get_workspaces", str(e)) from e

    def subscribe(self, handler: EventHandler) -> None:
        """Route i3 workspace events to handler(conn, event).

        i3ipc sends the SUBSCRIBE message itself when the main loop starts.
        If handler raises, the loop stops and main() re-raises the error.

        Raises:
            I3ConnectionError: If the subscription is rejected
        """
        conn = self._require_connection("subscribe")

        def guarded(event_conn: Any, event: Any) -> None:
            if self._loop_error is not None:
                return
            try:
                handler(event_conn, event)
            except Exception as e:
                logger.error(f"Workspace event handler failed, leaving event loop: {e}")
                self._loop_error = e
                self.main_quit()

        try:
            conn.on(Event.WORKSPACE, guarded)
        except Exception as e:
            raise I3ConnectionError("subscribe", str(e), code=ErrorCode.SUBSCRIBE_FAILED) from e

        self._handlers.append(guarded)
        logger.debug("Subscribed to i3 workspace events")

    def on_shutdown(self, handler: EventHandler) -> None:
        """Call handler(conn) when the IPC connection shuts down."""
        conn = self._require_connection("on_shutdown")
        conn.on(IPC_SHUTDOWN, handler)
        self._handlers.append(handler)

    def send_command(self, command: str) -> List[CommandReply]:
        """Run an i3 command.

        Raises:
            TransportError: If the request fails
        """
        conn = self._require_connection("command")
        logger.debug(f"Sending i3 command: {command}")
        try:
            return conn.command(command)
        except Exception as e:
            raise TransportError("command", str(e), code=ErrorCode.COMMAND_FAILED) from e

    def main(self, timeout: float = 0.0) -> None:
        """Run the i3ipc event loop until main_quit(), the socket closes or a handler fails.

        Raises:
            I3ConnectionError: If the event socket cannot be set up
            Exception: Whatever a workspace event handler raised
        """
        conn = self._require_connection("main")
        self._loop_error = None
        try:
            conn.main(timeout=timeout)
        except (ConnectionError, FileNotFoundError) as e:
            raise I3ConnectionError("event loop", str(e)) from e

        error, self._loop_error = self._loop_error, None
        if error is not None:
            raise error

    def main_quit(self) -> None:
        if self.is_connected:
            self.conn.main_quit()

    def close(self) -> None:
        """Detach handlers and stop the event loop. Safe to call twice."""
        if not self.is_connected:
            return

        for handler in self._handlers:
            self.conn.off(handler)
        self._handlers.clear()

        self.conn.main_quit()
        self.conn = None
        logger.info("Closed i3 IPC connection")
