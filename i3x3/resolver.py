"""Workspace lookups over a snapshot.

All lookups are pure reads. A miss raises ``WorkspaceNotFound``; callers
decide how to recover.

Name matching is a pluggable policy. The default is the historical
"first workspace whose name contains the token" rule, which depends on the
order i3 reports workspaces in. ``exact_then_substring_match`` prefers exact
hits and can be selected through configuration.
"""

import logging
import re
from typing import Callable, Dict, List, Optional, Sequence

from .errors import WorkspaceNotFound
from .models import Output, Workspace
from .snapshot import WorkspaceSnapshot

logger = logging.getLogger("x3.resolver")

NameMatcher = Callable[[Sequence[Workspace], str], Optional[Workspace]]

_NUM_RE = re.compile(r"[+-]?[0-9]+")


def substring_match(workspaces: Sequence[Workspace], name: str) -> Optional[Workspace]:
    """First workspace whose name contains ``name``, in snapshot order."""
    for ws in workspaces:
        if name in ws.name:
            return ws
    return None


def exact_then_substring_match(workspaces: Sequence[Workspace], name: str) -> Optional[Workspace]:
    """Exact name, then exact label (after ``N:``), then substring."""
    for ws in workspaces:
        if ws.name == name:
            return ws
    for ws in workspaces:
        if ws.display_name == name:
            return ws
    return substring_match(workspaces, name)


MATCH_POLICIES: Dict[str, NameMatcher] = {
    "substring": substring_match,
    "exact-first": exact_then_substring_match,
}


def get_matcher(policy: str) -> NameMatcher:
    """Look up a name-matching policy by its configuration name.

    Raises:
        KeyError: If the policy is unknown
    """
    return MATCH_POLICIES[policy]


def parse_num(value: str) -> Optional[int]:
    """Parse a workspace number token, ``None`` if it is not an integer."""
    if isinstance(value, str) and _NUM_RE.fullmatch(value):
        return int(value)
    return None


class WorkspaceResolver:
    """Lookups by number, name, focus and output.

    Examples:
        >>> resolver = WorkspaceResolver(snapshot)
        >>> resolver.resolve("3").name
        '3:web'
        >>> resolver.resolve("mail").name
        '1:mail'
    """

    def __init__(self, snapshot: WorkspaceSnapshot, matcher: NameMatcher = substring_match):
        self.snapshot = snapshot
        self.matcher = matcher

    @property
    def workspaces(self) -> Sequence[Workspace]:
        return self.snapshot.workspaces

    def by_num(self, num: int) -> Workspace:
        for ws in self.workspaces:
            if ws.num == num:
                return ws
        raise WorkspaceNotFound(str(num))

    def by_name(self, name: str) -> Workspace:
        ws = self.matcher(self.workspaces, name)
        if ws is None:
            raise WorkspaceNotFound(name)
        return ws

    def resolve(self, name_or_num: str) -> Workspace:
        """Resolve a user token: integers match ``num``, anything else goes by name.

        Raises:
            WorkspaceNotFound: If nothing matches
        """
        num = parse_num(name_or_num)
        if num is not None:
            return self.by_num(num)
        return self.by_name(name_or_num)

    def find(self, name_or_num: str) -> Optional[Workspace]:
        """Like ``resolve`` but returns None on a miss."""
        try:
            return self.resolve(name_or_num)
        except WorkspaceNotFound:
            return None

    def current(self) -> Workspace:
        """The focused workspace.

        Raises:
            WorkspaceNotFound: If no workspace is focused
        """
        for ws in self.workspaces:
            if ws.focused:
                return ws
        raise WorkspaceNotFound("<focused>", "No focused workspace")

    def on_output(self, output: str) -> Workspace:
        """The visible workspace on ``output``.

        Raises:
            WorkspaceNotFound: If the output shows nothing
        """
        for ws in self.workspaces:
            if ws.visible and ws.output == output:
                return ws
        raise WorkspaceNotFound(output, f"No visible workspace on output {output!r}")

    def shown_on(self, output: Output) -> Workspace:
        """The workspace ``output`` reports as current, by exact name.

        Falls back to the visible workspace on that output.
        """
        if output.current_workspace is not None:
            for ws in self.workspaces:
                if ws.name == output.current_workspace:
                    return ws
            logger.debug(
                f"Output {output.name} reports unknown workspace {output.current_workspace!r}"
            )
        return self.on_output(output.name)

    def active_outputs(self) -> List[Output]:
        return [out for out in self.snapshot.outputs if out.active]

    @staticmethod
    def display_name(ws: Workspace) -> str:
        return ws.display_name
