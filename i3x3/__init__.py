"""
i3-x3

XMonad-style workspace handling for i3 and sway: show any workspace on the
focused output, swap the two visible workspaces, bind workspace numbers,
move and merge containers.
"""

__version__ = "0.2.0"

from .chain import CommandChain
from .errors import ErrorCode, I3Error, WorkspaceNotFound, X3Error
from .models import Direction, Layout, Orientation, Output, Workspace
from .operations import WorkspaceOperations
from .resolver import WorkspaceResolver
from .snapshot import WorkspaceSnapshot

__all__ = [
    "CommandChain",
    "Direction",
    "ErrorCode",
    "I3Error",
    "Layout",
    "Orientation",
    "Output",
    "Workspace",
    "WorkspaceNotFound",
    "WorkspaceOperations",
    "WorkspaceResolver",
    "WorkspaceSnapshot",
    "X3Error",
]
