"""Dry-run support for mutating commands.

Shows the batch that would be sent to i3 without sending it.
"""

import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, TextIO


@dataclass
class DryRunResult:
    """Batches captured instead of being sent.

    Attributes:
        batches: Every batch passed to ``command()``, in order
    """

    batches: List[str] = field(default_factory=list)

    @property
    def commands(self) -> List[str]:
        return [cmd for batch in self.batches for cmd in batch.split(";")]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {"dry_run": True, "commands": self.commands}


class DryRunSender:
    """Stand-in for ``I3Client.command`` that prints instead of sending.

    Usage:
        >>> ops = WorkspaceOperations(client, sender=DryRunSender())
        >>> ops.show("mail")
        workspace 1:mail
        focus output DP-1
    """

    def __init__(self, stream: TextIO = None):
        self.stream = stream
        self.result = DryRunResult()

    def command(self, batch: str) -> list:
        self.result.batches.append(batch)
        stream = self.stream or sys.stdout
        for cmd in batch.split(";"):
            print(cmd, file=stream)
        return []
