"""Routes i3 workspace events to the matching reconciliation routine."""

import logging
from typing import Any, Callable, Dict, Optional

from .models import WorkspaceChange
from .reconcile import ReconciliationEngine

logger = logging.getLogger(__name__)


def _con_name(con: Any) -> Optional[str]:
    if con is None:
        return None
    return con.name


class EventDispatcher:
    """Classifies workspace events by their change kind.

    Instances are i3ipc event handlers: conn.on(Event.WORKSPACE, dispatcher).
    """

    def __init__(self, engine: ReconciliationEngine) -> None:
        self.engine = engine
        self.closed = False
        self._routes: Dict[str, Callable[[], Any]] = {
            WorkspaceChange.INIT.value: engine.on_created,
            WorkspaceChange.EMPTY.value: engine.on_destroyed,
            WorkspaceChange.URGENT.value: engine.on_urgent,
            WorkspaceChange.RENAME.value: engine.on_renamed,
            WorkspaceChange.MOVE.value: engine.on_moved,
        }

    def __call__(self, conn: Any, event: Any) -> None:
        self.dispatch(event.change, current=event.current, old=event.old)

    def dispatch(self, change: str, current: Any = None, old: Any = None) -> bool:
        """Process one workspace event.

        Args:
            change: The event's change kind (e.g., "focus", "init")
            current: Container the event is about
            old: Previously focused container (focus events only)

        Returns:
            True if the change kind was recognised and handled

        Raises:
            TransportError: If refreshing the workspace list fails
            WorkspaceNotFoundError: If a focus event names an unknown workspace
        """
        if self.closed:
            logger.debug(f"Ignoring workspace::{change} after close")
            return False

        if change == WorkspaceChange.FOCUS.value:
            current_name = _con_name(current)
            if current_name is None:
                logger.warning("workspace::focus event without a current workspace")
                return False
            self.engine.on_focused(current_name, _con_name(old))
            return True

        route = self._routes.get(change)
        if route is None:
            logger.debug(f"Ignoring workspace::{change} event")
            return False

        logger.debug(f"Handling workspace::{change}")
        route()
        return True

    def close(self) -> None:
        self.closed = True
