"""Consumer callback registration.

Each lifecycle event has one slot holding a handler and an opaque context
object passed back on every call. Unset slots are skipped silently.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .models import LifecycleEvent, Workspace

logger = logging.getLogger(__name__)

WorkspaceCallback = Callable[[Workspace, Any], None]
ShutdownCallback = Callable[[Any], None]


@dataclass
class CallbackSlot:
    """A registered handler and the context it is called with."""

    function: Optional[Callable[..., None]] = None
    data: Any = None


class CallbackRegistry:
    """Handlers for the six workspace lifecycle events plus ipc shutdown."""

    def __init__(self) -> None:
        self._slots: Dict[LifecycleEvent, CallbackSlot] = {
            event: CallbackSlot() for event in LifecycleEvent
        }
        self._shutdown = CallbackSlot()

    def set(self, event: LifecycleEvent, handler: Optional[WorkspaceCallback], context: Any = None) -> None:
        """Register a handler, replacing any previous one.

        Args:
            event: Lifecycle event to handle
            handler: Called as handler(workspace, context); None clears the slot
            context: Opaque object passed back to the handler
        """
        self._slots[event] = CallbackSlot(handler, context if handler is not None else None)

    def is_set(self, event: LifecycleEvent) -> bool:
        return self._slots[event].function is not None

    def invoke(self, event: LifecycleEvent, workspace: Workspace) -> bool:
        """Call the handler registered for an event, if any.

        Returns:
            True if a handler was called
        """
        slot = self._slots[event]
        if slot.function is None:
            return False

        logger.debug(f"Invoking {event.value} callback for workspace {workspace.name}")
        slot.function(workspace, slot.data)
        return True

    def set_shutdown(self, handler: Optional[ShutdownCallback], context: Any = None) -> None:
        self._shutdown = CallbackSlot(handler, context if handler is not None else None)

    def invoke_shutdown(self) -> bool:
        if self._shutdown.function is None:
            return False

        logger.debug("Invoking ipc shutdown callback")
        self._shutdown.function(self._shutdown.data)
        return True

    def clear(self) -> None:
        """Unset every slot."""
        for event in LifecycleEvent:
            self._slots[event] = CallbackSlot()
        self._shutdown = CallbackSlot()
