"""Unit tests for WorkspaceResolver lookups and matching policies."""

import pytest

from i3x3.errors import ErrorCode, WorkspaceNotFound
from i3x3.models import Output, Workspace
from i3x3.resolver import (
    WorkspaceResolver,
    exact_then_substring_match,
    get_matcher,
    parse_num,
    substring_match,
)
from i3x3.snapshot import WorkspaceSnapshot


class TestResolve:
    """Test resolve() by number and by name."""

    def test_integer_token_matches_num(self, resolver):
        assert resolver.resolve("2").name == "2:web"

    def test_integer_token_does_not_fall_back_to_name(self):
        snapshot = WorkspaceSnapshot.of([Workspace(name="room 42", num=-1)])
        with pytest.raises(WorkspaceNotFound):
            WorkspaceResolver(snapshot).resolve("42")

    def test_substring_match(self, resolver):
        assert resolver.resolve("ter").name == "3:term"

    def test_first_match_wins_in_snapshot_order(self):
        snapshot = WorkspaceSnapshot.of([
            Workspace(name="5:webdev", num=5),
            Workspace(name="2:web", num=2),
        ])
        assert WorkspaceResolver(snapshot).resolve("web").name == "5:webdev"

    def test_miss_raises(self, resolver):
        with pytest.raises(WorkspaceNotFound) as exc_info:
            resolver.resolve("chat")
        assert exc_info.value.token == "chat"
        assert exc_info.value.code is ErrorCode.WORKSPACE_NOT_FOUND

    def test_unknown_number_raises(self, resolver):
        with pytest.raises(WorkspaceNotFound):
            resolver.resolve("9")

    def test_find_returns_none(self, resolver):
        assert resolver.find("chat") is None
        assert resolver.find("1").name == "1:mail"


class TestMatchPolicies:
    """Test the pluggable name-matching policies."""

    @pytest.fixture
    def workspaces(self):
        return [
            Workspace(name="5:webdev", num=5),
            Workspace(name="2:web", num=2),
            Workspace(name="web", num=-1),
        ]

    def test_substring_policy(self, workspaces):
        assert substring_match(workspaces, "web").name == "5:webdev"

    def test_exact_first_prefers_exact_name(self, workspaces):
        assert exact_then_substring_match(workspaces, "web").name == "web"

    def test_exact_first_prefers_exact_label(self, workspaces):
        assert exact_then_substring_match(workspaces[:2], "web").name == "2:web"

    def test_exact_first_falls_back_to_substring(self, workspaces):
        assert exact_then_substring_match(workspaces, "dev").name == "5:webdev"

    def test_get_matcher(self):
        assert get_matcher("substring") is substring_match
        assert get_matcher("exact-first") is exact_then_substring_match

    def test_resolver_uses_matcher(self, workspaces):
        resolver = WorkspaceResolver(WorkspaceSnapshot.of(workspaces), exact_then_substring_match)
        assert resolver.resolve("web").name == "web"


class TestParseNum:

    @pytest.mark.parametrize("value,expected", [
        ("3", 3),
        ("-1", -1),
        ("10", 10),
        ("3:web", None),
        ("web", None),
        ("1_0", None),
        ("", None),
    ])
    def test_parse_num(self, value, expected):
        assert parse_num(value) == expected


class TestFocusAndOutputs:
    """Test current(), on_output(), shown_on() and active_outputs()."""

    def test_current(self, resolver):
        assert resolver.current().name == "1:mail"

    def test_current_missing(self):
        with pytest.raises(WorkspaceNotFound):
            WorkspaceResolver(WorkspaceSnapshot.empty()).current()

    def test_on_output(self, resolver):
        assert resolver.on_output("HDMI-A-1").name == "2:web"

    def test_on_output_without_visible_workspace(self, resolver):
        with pytest.raises(WorkspaceNotFound):
            resolver.on_output("eDP-1")

    def test_shown_on_uses_reported_name(self, resolver):
        output = Output(name="HDMI-A-1", active=True, current_workspace="2:web")
        assert resolver.shown_on(output).name == "2:web"

    def test_shown_on_falls_back_to_visible(self, resolver):
        output = Output(name="HDMI-A-1", active=True, current_workspace="gone")
        assert resolver.shown_on(output).name == "2:web"

    def test_active_outputs_preserve_order(self, resolver):
        assert [out.name for out in resolver.active_outputs()] == ["DP-1", "HDMI-A-1"]

    def test_display_name(self, resolver):
        assert resolver.display_name(resolver.current()) == "mail"
