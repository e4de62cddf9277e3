"""i3/sway IPC client.

Blocking wrapper around ``i3ipc.Connection`` for the three calls x3 needs:
- Workspaces (GET_WORKSPACES)
- Outputs (GET_OUTPUTS)
- Sending a command batch (RUN_COMMAND)

Replies are converted to ``Workspace``/``Output`` models so the rest of the
package never touches i3ipc objects.
"""

import logging
from typing import List, Optional

import i3ipc

from .errors import ErrorCode, I3Error
from .models import Output, Workspace

logger = logging.getLogger("x3.i3_client")


class I3Client:
    """Synchronous i3ipc wrapper.

    Example:
        >>> client = I3Client().connect()
        >>> [ws.name for ws in client.get_workspaces()]
        ['1:mail', '2:web']
    """

    def __init__(self, socket_path: Optional[str] = None, connection: Optional[i3ipc.Connection] = None):
        """Initialize i3 client.

        Args:
            socket_path: IPC socket override (default: i3ipc discovery via I3SOCK/SWAYSOCK)
            connection: Existing connection to reuse (tests)
        """
        self.socket_path = socket_path
        self._connection = connection

    def connect(self) -> "I3Client":
        """Connect to the i3/sway IPC socket.

        Raises:
            I3Error: If connection fails
        """
        if self._connection is not None:
            return self

        try:
            logger.debug(f"Connecting to i3 IPC socket ({self.socket_path or 'auto'})")
            self._connection = i3ipc.Connection(socket_path=self.socket_path)
            logger.info("Connected to i3 IPC")
        except Exception as e:
            logger.error(f"Failed to connect to i3 IPC: {e}")
            raise I3Error(
                f"Failed to connect to i3: {e}",
                code=ErrorCode.I3_NOT_RUNNING,
                suggestion="Is i3 or sway running? Check I3SOCK/SWAYSOCK or pass --socket",
            )
        return self

    @property
    def connection(self) -> i3ipc.Connection:
        if self._connection is None:
            self.connect()
        return self._connection

    def get_workspaces(self) -> List[Workspace]:
        """Get all workspaces (GET_WORKSPACES).

        Raises:
            I3Error: If query fails
        """
        try:
            logger.debug("IPC query: GET_WORKSPACES")
            replies = self.connection.get_workspaces()
        except I3Error:
            raise
        except Exception as e:
            logger.error(f"GET_WORKSPACES failed: {e}")
            raise I3Error(f"Failed to get workspaces: {e}")

        workspaces = [Workspace.from_reply(reply) for reply in replies]
        logger.debug(f"GET_WORKSPACES returned {len(workspaces)} workspace(s)")
        return workspaces

    def get_outputs(self) -> List[Output]:
        """Get all outputs (GET_OUTPUTS), active or not.

        Raises:
            I3Error: If query fails
        """
        try:
            logger.debug("IPC query: GET_OUTPUTS")
            replies = self.connection.get_outputs()
        except I3Error:
            raise
        except Exception as e:
            logger.error(f"GET_OUTPUTS failed: {e}")
            raise I3Error(f"Failed to get outputs: {e}")

        outputs = [Output.from_reply(reply) for reply in replies]
        logger.debug(
            f"GET_OUTPUTS returned {len(outputs)} output(s), "
            f"{sum(1 for out in outputs if out.active)} active"
        )
        return outputs

    def command(self, batch: str) -> list:
        """Send a command batch (RUN_COMMAND).

        Reply contents are logged, not acted upon.

        Raises:
            I3Error: If the command could not be sent
        """
        try:
            logger.debug(f"IPC command: {batch}")
            replies = self.connection.command(batch)
        except I3Error:
            raise
        except Exception as e:
            logger.error(f"RUN_COMMAND failed: {e}")
            raise I3Error(f"Failed to send command: {e}")

        for reply in replies or []:
            if not getattr(reply, "success", True):
                logger.warning(f"i3 rejected command: {getattr(reply, 'error', 'unknown error')}")
        return replies
