"""Unit tests for CommandChain emitters and flushing."""

import pytest

from i3x3.chain import CommandChain
from i3x3.models import Direction, Layout, Orientation, Workspace
from tests.fixtures.mock_i3_ipc import RecordingSender


@pytest.fixture
def chain():
    return CommandChain()


class TestPrimitives:
    """Each primitive appends exactly one command in i3 syntax."""

    def test_show_workspace(self, chain):
        chain.show_workspace(Workspace(name="1:mail", num=1))
        chain.show_workspace("new")
        assert chain.commands == ("workspace 1:mail", "workspace new")

    def test_workspace_and_output_commands(self, chain):
        chain.rename_workspace("2:web")
        chain.move_workspace_to_output("HDMI-A-1")
        chain.focus_output("DP-1")
        chain.move_container_to_workspace("3:term")
        assert chain.commands == (
            "rename workspace to 2:web",
            "move workspace to output HDMI-A-1",
            "focus output DP-1",
            "move container to workspace 3:term",
        )

    def test_container_commands(self, chain):
        chain.focus_direction(Direction.UP)
        chain.split(Orientation.HORIZONTAL)
        chain.move_container(Direction.DOWN)
        chain.change_layout(Layout.STACKING)
        assert chain.commands == ("focus up", "split horizontal", "move down", "layout stacking")

    def test_unknown_tokens_are_verbatim(self, chain):
        chain.focus_direction("parent")
        chain.change_layout("splitv")
        assert chain.commands == ("focus parent", "layout splitv")


class TestComposites:

    def test_swap_workspaces(self, chain):
        mail = Workspace(name="1:mail", num=1, output="DP-1", visible=True, focused=True)
        web = Workspace(name="2:web", num=2, output="HDMI-A-1", visible=True)
        chain.swap_workspaces(mail, web)
        assert chain.commands == (
            "move workspace to output HDMI-A-1",
            "workspace 2:web",
            "move workspace to output DP-1",
            "focus output DP-1",
        )

    def test_show_on_same_output_does_not_move(self, chain):
        chain.show_workspace_on_output(Workspace(name="3", num=3, output="DP-1"), "DP-1")
        assert chain.commands == ("workspace 3",)

    def test_show_on_other_output_moves(self, chain):
        chain.show_workspace_on_output(Workspace(name="3", num=3, output="HDMI-A-1"), "DP-1")
        assert chain.commands == ("workspace 3", "move workspace to output DP-1")

    def test_restore_history_order(self, chain):
        chain.restore_history(Workspace(name="1"), Workspace(name="2"))
        assert chain.commands == ("workspace 1", "workspace 2")


class TestFlush:

    def test_flush_joins_with_semicolons(self, chain):
        sender = RecordingSender()
        chain.show_workspace("1")
        chain.focus_output("DP-1")
        assert chain.flush(sender) == "workspace 1;focus output DP-1"
        assert sender.batches == ["workspace 1;focus output DP-1"]
        assert len(chain) == 0

    def test_empty_chain_sends_nothing(self, chain):
        sender = RecordingSender()
        assert chain.flush(sender) == ""
        assert sender.batches == []

    def test_flush_only_once(self, chain):
        sender = RecordingSender()
        chain.show_workspace("1")
        chain.flush(sender)
        with pytest.raises(RuntimeError):
            chain.flush(sender)
        with pytest.raises(RuntimeError):
            chain.show_workspace("2")
        assert sender.batches == ["workspace 1"]
