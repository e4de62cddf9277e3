"""CLI command handlers for x3.

Implements the x3 commands on top of ``WorkspaceOperations``.
"""

import argparse
import io
import json
import os
import stat
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .. import __version__
from ..config import X3Config, load_config
from ..errors import ConfigLoadError, I3Error, X3Error
from ..i3_client import I3Client
from ..operations import WorkspaceOperations
from ..resolver import get_matcher
from .dryrun import DryRunSender
from .logging_config import get_global_logger, init_logging, log_timing


# ANSI color codes for output
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    BLUE = "\033[34m"


def print_error(message: str) -> None:
    """Print error message in red."""
    print(f"{Colors.RED}✗{Colors.RESET} {message}", file=sys.stderr)


def print_error_with_remediation(error: str, remediation: str) -> None:
    """Print error with remediation steps.

    Format: "Error: <issue>. Remediation: <steps>"
    """
    print(f"{Colors.RED}✗ Error:{Colors.RESET} {error}", file=sys.stderr)
    print(f"{Colors.BLUE}  Remediation:{Colors.RESET} {remediation}", file=sys.stderr)


def report_error(error: X3Error) -> None:
    if error.suggestion:
        print_error_with_remediation(error.message, error.suggestion)
    else:
        print_error(error.message)


# ============================================================================
# Argument sourcing
# ============================================================================


def stdin_is_pipe(stream: TextIO) -> bool:
    """True if ``stream`` is a FIFO (``echo 3 | x3 show``), not a terminal or file."""
    try:
        return stat.S_ISFIFO(os.fstat(stream.fileno()).st_mode)
    except (OSError, ValueError, io.UnsupportedOperation):
        return False


def read_piped_args(argv: List[str], stream: Optional[TextIO] = None, piped: Optional[bool] = None) -> List[str]:
    """Append the tokens of one piped stdin line to ``argv``.

    Args:
        argv: Arguments without the program name
        stream: Input stream (default: sys.stdin)
        piped: Override pipe detection (tests)

    Returns:
        New argument list; ``argv`` unchanged when nothing is piped
    """
    stream = stream if stream is not None else sys.stdin
    if piped is None:
        piped = stdin_is_pipe(stream)
    if not piped:
        return list(argv)

    line = stream.readline()
    if not line:
        return list(argv)
    return list(argv) + line.strip().split()


# ============================================================================
# Commands
# ============================================================================


def cmd_show(args: argparse.Namespace, ops: WorkspaceOperations) -> int:
    """Show or create workspace on focused output."""
    ops.show(args.wsname)
    return 0


def cmd_rename(args: argparse.Namespace, ops: WorkspaceOperations) -> int:
    """Rename current workspace, keeping its number."""
    ops.rename(args.wsname)
    return 0


def cmd_bind(args: argparse.Namespace, ops: WorkspaceOperations) -> int:
    """Bind current workspace to a number."""
    ops.bind(args.num)
    return 0


def cmd_swap(args: argparse.Namespace, ops: WorkspaceOperations) -> int:
    """Swap visible workspaces of two outputs."""
    ops.swap()
    return 0


def cmd_list(args: argparse.Namespace, ops: WorkspaceOperations) -> int:
    """List all workspace names, numbered first."""
    workspaces = ops.list()
    if getattr(args, "json", False):
        print(json.dumps([ws.model_dump() for ws in workspaces], indent=2))
    elif workspaces:
        print("\n".join(ws.name for ws in workspaces))
    return 0


def cmd_current(args: argparse.Namespace, ops: WorkspaceOperations) -> int:
    """Print the label of the focused workspace."""
    name = ops.current()
    if name is None:
        return 1
    print(name)
    return 0


def cmd_move(args: argparse.Namespace, ops: WorkspaceOperations) -> int:
    """Move focused container to workspace."""
    ops.move(args.target)
    return 0


def cmd_merge(args: argparse.Namespace, ops: WorkspaceOperations) -> int:
    """Merge focused container with its neighbour."""
    ops.merge(args.direction, args.orientation, args.layout)
    return 0


COMMAND_HANDLERS = {
    "show": cmd_show,
    "rename": cmd_rename,
    "bind": cmd_bind,
    "swap": cmd_swap,
    "list": cmd_list,
    "current": cmd_current,
    "move": cmd_move,
    "merge": cmd_merge,
}


# ============================================================================
# Parser and entry point
# ============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="x3",
        description="XMonad-style workspace handling and more for i3/sway",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"x3 {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging (INFO level)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level, includes verbose)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file (default: ~/.config/i3/x3.json)"
    )
    parser.add_argument(
        "--socket",
        default=None,
        help="i3/sway IPC socket path"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=None,
        help="Print commands instead of sending them"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # x3 show <wsname>
    parser_show = subparsers.add_parser(
        "show",
        help="Show or create workspace on focused screen",
    )
    parser_show.add_argument("wsname", metavar="WSNAME", help="Workspace name or number")

    # x3 rename <wsname>
    parser_rename = subparsers.add_parser(
        "rename",
        help="Rename current workspace",
    )
    parser_rename.add_argument("wsname", metavar="WSNAME", help="New workspace name")

    # x3 bind <num>
    parser_bind = subparsers.add_parser(
        "bind",
        help="Bind current workspace to num",
    )
    parser_bind.add_argument("num", metavar="NUM", type=int, help="Workspace number")

    # x3 swap
    subparsers.add_parser(
        "swap",
        help="Swap visible workspaces when there are 2 screens",
    )

    # x3 list
    parser_list = subparsers.add_parser(
        "list",
        help="List all workspace names",
    )
    parser_list.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format"
    )

    # x3 current
    subparsers.add_parser(
        "current",
        help="Current workspace name",
    )

    # x3 move <num_or_name>
    parser_move = subparsers.add_parser(
        "move",
        help="Move current container to workspace",
    )
    parser_move.add_argument("target", metavar="NUM_OR_NAME", help="Workspace name or number")

    # x3 merge <direction> <orientation> <layout>
    parser_merge = subparsers.add_parser(
        "merge",
        help="Merge current container into other container",
    )
    parser_merge.add_argument(
        "direction",
        metavar="DIRECTION",
        help="The direction where to merge (left/right/up/down)"
    )
    parser_merge.add_argument(
        "orientation",
        metavar="ORIENTATION",
        help="Split mode (horizontal/vertical)"
    )
    parser_merge.add_argument(
        "layout",
        metavar="LAYOUT",
        help="Layout type to use (default/tabbed/stacking)"
    )

    return parser


def resolve_settings(args: argparse.Namespace) -> X3Config:
    """Load file configuration and apply CLI overrides."""
    config = load_config(args.config)
    updates = {}
    if args.socket:
        updates["socket_path"] = args.socket
    if args.dry_run is not None:
        updates["dry_run"] = args.dry_run
    return config.model_copy(update=updates) if updates else config


def cli_main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None, client: Optional[I3Client] = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Arguments without program name (default: sys.argv[1:])
        stdin: Stream to read piped arguments from (default: sys.stdin)
        client: Pre-built client (tests); connects to i3 when omitted

    Returns:
        Process exit code
    """
    if argv is None:
        argv = sys.argv[1:]
    argv = read_piped_args(argv, stdin)

    parser = build_parser()
    args = parser.parse_args(argv)

    init_logging(verbose=args.verbose, debug=args.debug)
    logger = get_global_logger()

    if not args.command:
        parser.print_help()
        return 0

    try:
        config = resolve_settings(args)
    except ConfigLoadError as e:
        report_error(e)
        return 1

    try:
        if client is None:
            client = I3Client(socket_path=config.socket_path).connect()
        sender = DryRunSender() if config.dry_run else client
        ops = WorkspaceOperations(client, sender=sender, matcher=get_matcher(config.match_policy))

        handler = COMMAND_HANDLERS[args.command]
        with log_timing(f"x3 {args.command}", logger):
            return handler(args, ops)
    except I3Error as e:
        report_error(e)
        return 1
