"""Ordered command chain sent to i3/sway as one batch.

i3 keeps per-output workspace history (for ``workspace back_and_forth``) and
decides which output keeps focus based on the order commands are applied.
Neither can be queried, so the order commands are emitted in is the whole
contract here. The composite emitters below name the sequences that keep
history and focus correct; operations use them rather than re-deriving the
order inline.
"""

import logging
from typing import Iterator, List, Tuple, Union

from .models import Direction, Layout, Orientation, Workspace, token

logger = logging.getLogger("x3.chain")


class CommandChain:
    """Append-only list of i3 commands, flushed once as a ``;``-joined batch.

    Example:
        >>> chain = CommandChain()
        >>> chain.show_workspace(ws)
        >>> chain.focus_output("DP-1")
        >>> chain.to_batch()
        'workspace 1:mail;focus output DP-1'
    """

    SEPARATOR = ";"

    def __init__(self) -> None:
        self._commands: List[str] = []
        self._flushed = False

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __bool__(self) -> bool:
        return bool(self._commands)

    def __repr__(self) -> str:
        return f"CommandChain({self._commands!r})"

    @property
    def commands(self) -> Tuple[str, ...]:
        return tuple(self._commands)

    def add(self, command: str) -> None:
        if self._flushed:
            raise RuntimeError("Command chain already flushed")
        self._commands.append(command)

    def to_batch(self) -> str:
        return self.SEPARATOR.join(self._commands)

    # Primitive emitters

    def show_workspace(self, ws: Union[Workspace, str]) -> None:
        name = ws.name if isinstance(ws, Workspace) else ws
        self.add(f"workspace {name}")

    def rename_workspace(self, new_name: str) -> None:
        self.add(f"rename workspace to {new_name}")

    def move_workspace_to_output(self, output: str) -> None:
        self.add(f"move workspace to output {output}")

    def focus_output(self, output: str) -> None:
        self.add(f"focus output {output}")

    def move_container_to_workspace(self, ws_name: str) -> None:
        self.add(f"move container to workspace {ws_name}")

    def focus_direction(self, direction: Union[Direction, str]) -> None:
        self.add(f"focus {token(direction)}")

    def split(self, orientation: Union[Orientation, str]) -> None:
        self.add(f"split {token(orientation)}")

    def move_container(self, direction: Union[Direction, str]) -> None:
        self.add(f"move {token(direction)}")

    def change_layout(self, layout: Union[Layout, str]) -> None:
        self.add(f"layout {token(layout)}")

    # Composite emitters

    def swap_workspaces(self, ws1: Workspace, ws2: Workspace) -> None:
        """Exchange two visible workspaces across their outputs.

        ``ws1`` must be focused. It is moved to ``ws2``'s output, ``ws2`` is
        shown there and moved back to ``ws1``'s original output, and focus
        returns to that output. No output is left without a visible
        workspace between steps.
        """
        self.move_workspace_to_output(ws2.output)
        self.show_workspace(ws2)
        self.move_workspace_to_output(ws1.output)
        self.focus_output(ws1.output)

    def show_workspace_on_output(self, ws: Workspace, output: str) -> None:
        """Show ``ws`` and pull it onto ``output`` if it lives elsewhere."""
        self.show_workspace(ws)
        if ws.output != output:
            self.move_workspace_to_output(output)

    def restore_history(self, previous: Workspace, target: Workspace) -> None:
        """Re-show ``previous`` then ``target`` so back_and_forth points at ``previous``."""
        self.show_workspace(previous)
        self.show_workspace(target)

    # Flush

    def flush(self, sender) -> str:
        """Send the chain as one batch and clear it.

        Args:
            sender: Object with a ``command(str)`` method (I3Client, DryRunSender)

        Returns:
            The batch string that was sent, "" if the chain was empty

        Raises:
            RuntimeError: If the chain was already flushed
        """
        if self._flushed:
            raise RuntimeError("Command chain already flushed")
        self._flushed = True

        if not self._commands:
            logger.debug("Empty command chain, nothing to send")
            return ""

        batch = self.to_batch()
        logger.debug(f"Flushing {len(self._commands)} command(s): {batch}")
        self._commands.clear()
        sender.command(batch)
        return batch
