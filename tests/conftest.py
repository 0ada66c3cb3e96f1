"""Pytest configuration and fixtures for i3wm-delegate tests."""

import logging
from types import SimpleNamespace
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import pytest

from i3wm_delegate.callbacks import CallbackRegistry
from i3wm_delegate.ipc import I3IpcClient
from i3wm_delegate.models import LifecycleEvent, Workspace
from i3wm_delegate.ordering import ws_name_to_number
from i3wm_delegate.reconcile import ReconciliationEngine
from i3wm_delegate.store import WorkspaceStore


def make_reply(
    name: str,
    output: str = "DP-1",
    focused: bool = False,
    urgent: bool = False,
    num: Optional[int] = None,
) -> SimpleNamespace:
    """Stand-in for i3ipc.WorkspaceReply.

    SimpleNamespace rather than Mock: Mock(name=...) names the mock instead of
    setting a .name attribute.
    """
    return SimpleNamespace(
        name=name,
        num=ws_name_to_number(name) if num is None else num,
        focused=focused,
        urgent=urgent,
        output=output,
        visible=focused,
    )


def make_event(change: str, current: Optional[str] = None, old: Optional[str] = None) -> SimpleNamespace:
    """Stand-in for i3ipc.WorkspaceEvent."""
    return SimpleNamespace(
        change=change,
        current=SimpleNamespace(name=current) if current is not None else None,
        old=SimpleNamespace(name=old) if old is not None else None,
    )


class CallbackRecorder:
    """Registers a handler for every lifecycle event and records the calls."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def handler(self, event: LifecycleEvent):
        def record(workspace: Workspace, data: Any) -> None:
            # Copy the fields: the workspace may be mutated after the call
            self.calls.append((event, workspace.name, dict(workspace.to_dict()), data))
        return record

    def register(self, callbacks: CallbackRegistry, context: Any = None) -> None:
        for event in LifecycleEvent:
            callbacks.set(event, self.handler(event), context)

    def events(self) -> List[tuple]:
        return [(event, name) for event, name, _, _ in self.calls]

    def workspaces(self, event: LifecycleEvent) -> List[Dict[str, Any]]:
        return [fields for recorded, _, fields, _ in self.calls if recorded is event]


@pytest.fixture
def mock_client():
    """I3IpcClient double whose snapshot is set per test via get_workspaces.return_value."""
    client = Mock(spec=I3IpcClient)
    client.get_workspaces.return_value = [
        make_reply("web", output="DP-1", focused=True),
        make_reply("chat", output="DP-1"),
        make_reply("1", output="DP-1"),
        make_reply("3", output="HDMI-A-1"),
    ]
    client.send_command.return_value = [SimpleNamespace(success=True, error=None)]
    return client


@pytest.fixture
def store():
    return WorkspaceStore()


@pytest.fixture
def callbacks():
    return CallbackRegistry()


@pytest.fixture
def recorder(callbacks):
    recorder = CallbackRecorder()
    recorder.register(callbacks)
    return recorder


@pytest.fixture
def engine(mock_client, store, callbacks):
    return ReconciliationEngine(mock_client, store, callbacks)


def fill_store(store: WorkspaceStore, *workspaces: Workspace) -> None:
    for workspace in workspaces:
        store.insert_sorted(workspace)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo setup_logging() calls made by CLI and logging tests."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers = handlers
    root_logger.setLevel(level)
