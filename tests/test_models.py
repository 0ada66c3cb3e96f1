"""Tests for Workspace, configuration and error models."""

import pytest
from pydantic import ValidationError

from conftest import make_reply
from i3wm_delegate.config import DelegateConfig
from i3wm_delegate.errors import ErrorCode, I3ConnectionError, TransportError, WorkspaceNotFoundError
from i3wm_delegate.models import Workspace


class TestWorkspace:
    def test_from_reply_copies_fields(self):
        reply = make_reply("3", output="HDMI-A-1", focused=True, urgent=True)

        workspace = Workspace.from_reply(reply)

        assert workspace == Workspace(name="3", num=3, focused=True, urgent=True, output="HDMI-A-1")

    def test_from_reply_named_workspace(self):
        workspace = Workspace.from_reply(make_reply("web", num=-1))
        assert workspace.num == -1

    def test_from_reply_missing_output(self):
        reply = make_reply("web", output=None)
        assert Workspace.from_reply(reply).output == ""

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            Workspace(name="")

    def test_to_dict(self):
        workspace = Workspace(name="web", output="DP-1", focused=True)
        assert workspace.to_dict() == {
            "name": "web",
            "num": -1,
            "focused": True,
            "urgent": False,
            "output": "DP-1",
        }


class TestDelegateConfig:
    def test_defaults(self):
        config = DelegateConfig()
        assert config.socket_path is None
        assert config.log_level == "INFO"

    def test_from_env(self):
        config = DelegateConfig.from_env({
            "I3WM_DELEGATE_SOCKET": "/run/user/1000/i3/ipc-socket.123",
            "LOG_LEVEL": "debug",
        })

        assert config.socket_path == "/run/user/1000/i3/ipc-socket.123"
        assert config.log_level == "DEBUG"

    def test_from_empty_env(self):
        config = DelegateConfig.from_env({})
        assert config == DelegateConfig()

    def test_blank_socket_is_unset(self):
        assert DelegateConfig(socket_path="  ").socket_path is None

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            DelegateConfig(log_level="LOUD")


class TestErrors:
    def test_connection_error_to_dict(self):
        error = I3ConnectionError("connect", "No such file or directory")

        result = error.to_dict()

        assert result["code"] == ErrorCode.I3_NOT_RUNNING.value
        assert result["message"] == "i3 IPC connect failed: No such file or directory"
        assert "suggestion" in result
        assert result["context"] == {"operation": "connect", "reason": "No such file or directory"}

    def test_transport_error_code(self):
        error = TransportError("command", "broken pipe", code=ErrorCode.COMMAND_FAILED)
        assert error.code is ErrorCode.COMMAND_FAILED
        assert str(error) == "i3 IPC command failed: broken pipe"

    def test_workspace_not_found(self):
        error = WorkspaceNotFoundError("web")
        assert error.code is ErrorCode.WORKSPACE_NOT_FOUND
        assert error.context == {"name": "web"}
