"""Workspace operations: show, swap, bind, rename, move, merge, list, current.

Each ``plan_*`` function is a pure decision procedure: it reads a resolver
and appends commands to a chain. ``WorkspaceOperations`` wires them to a live
connection: capture a snapshot, plan, flush once.

Resolver misses never escape. They either fall back to treating the token
as a new workspace name or turn the operation into a no-op.
"""

import logging
from typing import List, Optional, Union

from .chain import CommandChain
from .errors import WorkspaceNotFound
from .models import (
    Direction,
    Layout,
    Orientation,
    Workspace,
    inverse_direction,
    parse_direction,
    parse_layout,
    parse_orientation,
)
from .resolver import NameMatcher, WorkspaceResolver, substring_match
from .snapshot import WorkspaceSnapshot

logger = logging.getLogger("x3.operations")


def plan_show(resolver: WorkspaceResolver, name_or_num: str, chain: CommandChain) -> CommandChain:
    """Show a workspace on the focused output, creating it if needed."""
    try:
        target = resolver.resolve(name_or_num)
    except WorkspaceNotFound:
        logger.info(f"Workspace {name_or_num!r} not found, creating it")
        chain.show_workspace(name_or_num)
        return chain

    try:
        current = resolver.current()
    except WorkspaceNotFound:
        logger.warning("No focused workspace, showing target without output handling")
        chain.show_workspace(target)
        return chain

    if current == target:
        logger.debug(f"Workspace {target.name!r} already focused")
        return chain

    if current.visible and target.visible:
        chain.swap_workspaces(current, target)
    else:
        chain.show_workspace_on_output(target, current.output)
        chain.restore_history(current, target)
    chain.focus_output(current.output)
    return chain


def plan_swap(resolver: WorkspaceResolver, chain: CommandChain) -> CommandChain:
    """Swap the visible workspaces of exactly two active outputs."""
    outputs = resolver.active_outputs()
    if len(outputs) != 2:
        logger.info(f"Swap needs exactly 2 active outputs, found {len(outputs)}")
        return chain

    try:
        ws1 = resolver.shown_on(outputs[0])
        ws2 = resolver.shown_on(outputs[1])
    except WorkspaceNotFound as e:
        logger.warning(f"Cannot swap: {e}")
        return chain

    if ws1.focused:
        chain.swap_workspaces(ws1, ws2)
    else:
        chain.swap_workspaces(ws2, ws1)
    return chain


def plan_bind(resolver: WorkspaceResolver, num: int, chain: CommandChain) -> CommandChain:
    """Give the focused workspace number ``num``, handing its old number to the displaced one."""
    try:
        current = resolver.current()
    except WorkspaceNotFound:
        logger.warning("No focused workspace, nothing to bind")
        return chain

    current_label = current.display_name
    if current.num == num:
        logger.debug(f"Workspace {current.name!r} already bound to {num}")
        return chain

    try:
        other = resolver.by_num(num)
    except WorkspaceNotFound:
        logger.info(f"No workspace holds number {num}")
        other = None

    if other is not None:
        other_label = other.display_name
        # rename only applies to the shown workspace
        chain.show_workspace(other)
        if current.is_numbered:
            chain.rename_workspace(f"{current.num}:{other_label}")
        else:
            chain.rename_workspace(other_label)

        if other.output != current.output:
            try:
                restore = resolver.on_output(other.output)
            except WorkspaceNotFound:
                logger.debug(f"Nothing to restore on output {other.output!r}")
                restore = None
            if restore is not None and restore != other:
                chain.show_workspace(restore)

        chain.show_workspace(current)

    chain.rename_workspace(f"{num}:{current_label}")
    chain.focus_output(current.output)
    return chain


def plan_rename(resolver: WorkspaceResolver, new_name: str, chain: CommandChain) -> CommandChain:
    """Rename the focused workspace, keeping its number."""
    try:
        current = resolver.current()
    except WorkspaceNotFound:
        logger.warning("No focused workspace, renaming without number prefix")
        current = None

    if current is not None and current.is_numbered:
        new_name = f"{current.num}:{new_name}"

    chain.rename_workspace(new_name)
    return chain


def plan_move(resolver: WorkspaceResolver, name_or_num: str, chain: CommandChain) -> CommandChain:
    """Move the focused container to a workspace, creating it if needed."""
    try:
        target = resolver.resolve(name_or_num)
        destination = target.name
    except WorkspaceNotFound:
        logger.info(f"Workspace {name_or_num!r} not found, moving container to new workspace")
        destination = name_or_num

    chain.move_container_to_workspace(destination)
    return chain


def plan_merge(
    direction: Union[Direction, str],
    orientation: Union[Orientation, str],
    layout: Union[Layout, str],
    chain: CommandChain,
) -> CommandChain:
    """Pull the neighbour in ``direction`` into a new split with the focused container.

    The five steps always run; i3 ignores them when there is no neighbour.
    """
    direction = parse_direction(direction)
    chain.focus_direction(direction)
    chain.split(parse_orientation(orientation))
    chain.focus_direction(inverse_direction(direction))
    chain.move_container(direction)
    chain.change_layout(parse_layout(layout))
    return chain


def list_workspaces(snapshot: WorkspaceSnapshot) -> List[Workspace]:
    return snapshot.sorted_workspaces()


def render_list(snapshot: WorkspaceSnapshot) -> str:
    return "\n".join(ws.name for ws in list_workspaces(snapshot))


def current_name(resolver: WorkspaceResolver) -> Optional[str]:
    """Label of the focused workspace, None if nothing is focused."""
    try:
        return resolver.current().display_name
    except WorkspaceNotFound:
        logger.warning("No focused workspace")
        return None


class WorkspaceOperations:
    """Run one operation against a live window manager.

    Every call captures a fresh snapshot, plans into a new chain and flushes
    it through ``sender`` (the client itself unless a dry-run sender is
    given). Concurrent invocations are not coordinated and may race against
    i3's own state.

    Example:
        >>> ops = WorkspaceOperations(I3Client().connect())
        >>> ops.show("mail")
        'workspace 1:mail;...'
    """

    def __init__(self, client, sender=None, matcher: NameMatcher = substring_match):
        """
        Args:
            client: Snapshot source with ``get_workspaces()``/``get_outputs()``
            sender: Object with ``command(str)``; defaults to ``client``
            matcher: Name-matching policy for the resolver
        """
        self.client = client
        self.sender = sender if sender is not None else client
        self.matcher = matcher

    def _resolver(self) -> WorkspaceResolver:
        return WorkspaceResolver(WorkspaceSnapshot.capture(self.client), self.matcher)

    def _run(self, chain: CommandChain) -> str:
        return chain.flush(self.sender)

    def show(self, name_or_num: str) -> str:
        return self._run(plan_show(self._resolver(), name_or_num, CommandChain()))

    def swap(self) -> str:
        return self._run(plan_swap(self._resolver(), CommandChain()))

    def bind(self, num: int) -> str:
        return self._run(plan_bind(self._resolver(), num, CommandChain()))

    def rename(self, new_name: str) -> str:
        return self._run(plan_rename(self._resolver(), new_name, CommandChain()))

    def move(self, name_or_num: str) -> str:
        return self._run(plan_move(self._resolver(), name_or_num, CommandChain()))

    def merge(self, direction, orientation, layout) -> str:
        # no snapshot needed
        return self._run(plan_merge(direction, orientation, layout, CommandChain()))

    def list(self) -> List[Workspace]:
        return list_workspaces(WorkspaceSnapshot.capture(self.client))

    def current(self) -> Optional[str]:
        return current_name(self._resolver())
