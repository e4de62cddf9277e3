"""Unit tests for the blocking i3 IPC client wrapper."""

import logging

import i3ipc
import pytest

from i3x3.errors import ErrorCode, I3Error
from i3x3.i3_client import I3Client
from i3x3.models import Output, Workspace
from tests.fixtures.mock_i3_ipc import MockI3Connection


class TestQueries:

    def test_get_workspaces_returns_models(self, client):
        workspaces = client.get_workspaces()
        assert all(isinstance(ws, Workspace) for ws in workspaces)
        assert workspaces[0] == Workspace(name="1:mail", num=1, output="DP-1", visible=True, focused=True)

    def test_get_outputs_includes_inactive(self, client):
        outputs = client.get_outputs()
        assert all(isinstance(out, Output) for out in outputs)
        assert [out.active for out in outputs] == [True, True, False]

    def test_query_failure_is_wrapped(self):
        client = I3Client(connection=MockI3Connection(fail_queries=True))
        with pytest.raises(I3Error) as exc_info:
            client.get_workspaces()
        assert exc_info.value.code is ErrorCode.I3_IPC_FAILED
        with pytest.raises(I3Error):
            client.get_outputs()


class TestCommand:

    def test_command_sends_batch(self, client, mock_connection):
        client.command("workspace 1;focus output DP-1")
        assert mock_connection.commands == ["workspace 1;focus output DP-1"]
        assert mock_connection.sent == ["workspace 1", "focus output DP-1"]

    def test_rejected_command_is_logged_not_raised(self, caplog):
        client = I3Client(connection=MockI3Connection(reject_commands=True))
        with caplog.at_level(logging.WARNING, logger="x3.i3_client"):
            client.command("bogus")
        assert "Unknown command" in caplog.text

    def test_transport_failure_is_wrapped(self):
        client = I3Client(connection=MockI3Connection(fail_commands=True))
        with pytest.raises(I3Error):
            client.command("workspace 1")


class TestConnect:

    def test_existing_connection_is_reused(self, mock_connection):
        client = I3Client(connection=mock_connection)
        assert client.connect() is client
        assert client.connection is mock_connection

    def test_connect_failure(self, monkeypatch):
        def refuse(*args, **kwargs):
            raise FileNotFoundError("no such socket")

        monkeypatch.setattr(i3ipc, "Connection", refuse)
        with pytest.raises(I3Error) as exc_info:
            I3Client(socket_path="/nonexistent/ipc.sock").connect()
        assert exc_info.value.code is ErrorCode.I3_NOT_RUNNING
        assert exc_info.value.suggestion

    def test_socket_path_is_passed(self, monkeypatch):
        seen = {}

        def fake_connection(socket_path=None, **kwargs):
            seen["socket_path"] = socket_path
            return MockI3Connection()

        monkeypatch.setattr(i3ipc, "Connection", fake_connection)
        client = I3Client(socket_path="/run/user/1000/sway-ipc.sock").connect()
        assert seen["socket_path"] == "/run/user/1000/sway-ipc.sock"
        assert client.get_workspaces() == []
