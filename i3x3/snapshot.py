"""Immutable snapshot of i3/sway workspaces and outputs.

A snapshot is captured once per invocation and passed explicitly into every
operation. Nothing is carried over between invocations.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from .errors import I3Error
from .models import Output, Workspace

logger = logging.getLogger("x3.snapshot")


@dataclass(frozen=True)
class WorkspaceSnapshot:
    """Workspaces and outputs in the order the window manager reported them.

    Attributes:
        workspaces: All workspaces (GET_WORKSPACES)
        outputs: All outputs, active or not (GET_OUTPUTS)
    """

    workspaces: Tuple[Workspace, ...] = field(default_factory=tuple)
    outputs: Tuple[Output, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, workspaces: Iterable[Workspace], outputs: Iterable[Output] = ()) -> "WorkspaceSnapshot":
        return cls(workspaces=tuple(workspaces), outputs=tuple(outputs))

    @classmethod
    def empty(cls) -> "WorkspaceSnapshot":
        return cls()

    @classmethod
    def capture(cls, client) -> "WorkspaceSnapshot":
        """Read workspaces and outputs from the window manager.

        A failed read degrades to an empty list, so every later lookup misses
        and the operation becomes a no-op instead of crashing.

        Args:
            client: Object with ``get_workspaces()`` and ``get_outputs()``
                returning model instances (see ``I3Client``)

        Returns:
            WorkspaceSnapshot instance
        """
        try:
            workspaces = client.get_workspaces()
        except I3Error as e:
            logger.error(f"Workspace snapshot unavailable: {e}")
            workspaces = []

        try:
            outputs = client.get_outputs()
        except I3Error as e:
            logger.error(f"Output snapshot unavailable: {e}")
            outputs = []

        snapshot = cls.of(workspaces, outputs)
        logger.debug(
            f"Captured snapshot: {len(snapshot.workspaces)} workspace(s), "
            f"{len(snapshot.outputs)} output(s)"
        )
        return snapshot

    def sorted_workspaces(self) -> List[Workspace]:
        """Numbered workspaces ascending by number, then unnumbered ones by name."""
        return sorted(
            self.workspaces,
            key=lambda ws: (not ws.is_numbered, ws.num if ws.is_numbered else 0, ws.name),
        )

    def names(self) -> List[str]:
        return [ws.name for ws in self.workspaces]
