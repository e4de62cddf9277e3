"""Pytest configuration and shared fixtures for i3-x3 tests."""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to Python path BEFORE test collection
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from i3x3.i3_client import I3Client
from i3x3.models import Output, Workspace
from i3x3.resolver import WorkspaceResolver
from i3x3.snapshot import WorkspaceSnapshot
from tests.fixtures.mock_i3_ipc import (
    MockI3Connection,
    MockOutputReply,
    MockWorkspaceReply,
)


@pytest.fixture(autouse=True)
def reset_x3_logging():
    """Drop handlers the CLI installs so they do not outlive the captured streams."""
    yield
    logger = logging.getLogger("x3")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def two_output_workspaces():
    """Two outputs: DP-1 focused showing 1:mail, HDMI-A-1 showing 2:web."""
    return [
        Workspace(name="1:mail", num=1, output="DP-1", visible=True, focused=True),
        Workspace(name="2:web", num=2, output="HDMI-A-1", visible=True, focused=False),
        Workspace(name="3:term", num=3, output="DP-1", visible=False, focused=False),
        Workspace(name="notes", num=-1, output="HDMI-A-1", visible=False, focused=False),
    ]


@pytest.fixture
def two_outputs():
    return [
        Output(name="DP-1", active=True, current_workspace="1:mail"),
        Output(name="HDMI-A-1", active=True, current_workspace="2:web"),
        Output(name="eDP-1", active=False, current_workspace=None),
    ]


@pytest.fixture
def snapshot(two_output_workspaces, two_outputs) -> WorkspaceSnapshot:
    return WorkspaceSnapshot.of(two_output_workspaces, two_outputs)


@pytest.fixture
def resolver(snapshot) -> WorkspaceResolver:
    return WorkspaceResolver(snapshot)


@pytest.fixture
def mock_connection(two_output_workspaces, two_outputs) -> MockI3Connection:
    """Mock i3 connection mirroring the two-output snapshot."""
    return MockI3Connection(
        workspaces=[MockWorkspaceReply(**ws.model_dump()) for ws in two_output_workspaces],
        outputs=[
            MockOutputReply(name=out.name, active=out.active, current_workspace=out.current_workspace)
            for out in two_outputs
        ],
    )


@pytest.fixture
def client(mock_connection) -> I3Client:
    return I3Client(connection=mock_connection)
