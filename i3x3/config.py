"""Configuration for i3-x3.

Settings are read from ``~/.config/i3/x3.json``. A missing file means
defaults; CLI flags override file values.

Example x3.json:
    {
        "match_policy": "exact-first",
        "socket_path": "/run/user/1000/sway-ipc.sock",
        "dry_run": false
    }
"""

import json
import logging
import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigLoadError

logger = logging.getLogger("x3.config")

DEFAULT_CONFIG_FILE = Path.home() / ".config/i3/x3.json"
SOCKET_ENV_VAR = "X3_SOCKET"


class X3Config(BaseModel):
    """User settings."""

    match_policy: Literal["substring", "exact-first"] = Field(
        "substring", description="Workspace name matching policy"
    )
    socket_path: Optional[str] = Field(None, description="i3/sway IPC socket override")
    dry_run: bool = Field(False, description="Print commands instead of sending them")


def load_config(config_file: Optional[Path] = None) -> X3Config:
    """Load configuration from disk and environment.

    Args:
        config_file: Path to x3.json (default: ~/.config/i3/x3.json)

    Returns:
        X3Config instance

    Raises:
        ConfigLoadError: If the file is not valid JSON or has invalid values
    """
    path = Path(config_file).expanduser() if config_file else DEFAULT_CONFIG_FILE

    data = {}
    if path.exists():
        try:
            with path.open("r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigLoadError(str(path), f"invalid JSON: {e}")
        except OSError as e:
            raise ConfigLoadError(str(path), str(e))

        if not isinstance(data, dict):
            raise ConfigLoadError(str(path), "top-level value must be a JSON object")
        logger.debug(f"Loaded configuration from {path}")
    else:
        logger.debug(f"No configuration file at {path}, using defaults")

    env_socket = os.environ.get(SOCKET_ENV_VAR)
    if env_socket:
        data["socket_path"] = env_socket

    try:
        return X3Config(**data)
    except ValidationError as e:
        raise ConfigLoadError(str(path), str(e))
