"""Tests for WorkspaceStore."""

import pytest

from i3wm_delegate.errors import DuplicateWorkspaceError
from i3wm_delegate.models import Workspace
from i3wm_delegate.store import WorkspaceStore


def test_insert_keeps_workspace_order(store):
    for name in ["1", "chat", "3", "web"]:
        store.insert_sorted(Workspace(name=name))

    assert store.names() == ["web", "chat", "3", "1"]
    assert len(store) == 4


def test_insert_duplicate_name_rejected(store):
    store.insert_sorted(Workspace(name="web"))

    with pytest.raises(DuplicateWorkspaceError) as exc_info:
        store.insert_sorted(Workspace(name="web", output="HDMI-A-1"))

    assert exc_info.value.context == {"name": "web"}
    assert len(store) == 1


def test_find_and_contains(store):
    web = Workspace(name="web")
    store.insert_sorted(web)

    assert store.find_by_name("web") is web
    assert store.find_by_name("mail") is None
    assert "web" in store
    assert "mail" not in store


def test_remove_by_name_returns_entity(store):
    web = Workspace(name="web")
    store.insert_sorted(web)
    store.insert_sorted(Workspace(name="1"))

    assert store.remove_by_name("web") is web
    assert store.names() == ["1"]
    assert store.remove_by_name("web") is None


def test_ordered_list_is_a_copy(store):
    store.insert_sorted(Workspace(name="1"))
    snapshot = store.to_ordered_list()
    snapshot.clear()

    assert store.names() == ["1"]


def test_iteration_survives_removal(store):
    for name in ["1", "2", "3"]:
        store.insert_sorted(Workspace(name=name))

    for workspace in store:
        store.remove_by_name(workspace.name)

    assert len(store) == 0


def test_replace_all_sorts(store):
    store.insert_sorted(Workspace(name="old"))
    store.replace_all([Workspace(name="1"), Workspace(name="chat"), Workspace(name="3"), Workspace(name="web")])

    assert store.names() == ["web", "chat", "3", "1"]


def test_replace_all_rejects_duplicates(store):
    store.insert_sorted(Workspace(name="old"))

    with pytest.raises(DuplicateWorkspaceError):
        store.replace_all([Workspace(name="1"), Workspace(name="1")])

    assert store.names() == ["old"]


def test_clear_releases_everything():
    store = WorkspaceStore()
    store.insert_sorted(Workspace(name="1"))
    store.insert_sorted(Workspace(name="web"))

    released = store.clear()

    assert [workspace.name for workspace in released] == ["web", "1"]
    assert len(store) == 0
    assert store.clear() == []
