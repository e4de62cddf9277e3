"""
Pydantic data models for i3-x3.

Workspaces and outputs are read-only views of what i3/sway reported at
invocation time. Operations never write back into them; the desired future
state is expressed as commands instead.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


UNNUMBERED = -1


# Enumerations

class Direction(str, Enum):
    """Container focus/move direction."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def inverse(self) -> "Direction":
        return _INVERSE_DIRECTIONS[self]


_INVERSE_DIRECTIONS = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


class Orientation(str, Enum):
    """Split orientation."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Layout(str, Enum):
    """Container layout."""
    DEFAULT = "default"
    TABBED = "tabbed"
    STACKING = "stacking"


def _parse(enum_cls, value: Union[Enum, str]) -> Union[Enum, str]:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        # i3 validates the token, not us
        return value


def parse_direction(value: Union[Direction, str]) -> Union[Direction, str]:
    """Return the Direction member for ``value``, or ``value`` unchanged if unknown."""
    return _parse(Direction, value)


def parse_orientation(value: Union[Orientation, str]) -> Union[Orientation, str]:
    """Return the Orientation member for ``value``, or ``value`` unchanged if unknown."""
    return _parse(Orientation, value)


def parse_layout(value: Union[Layout, str]) -> Union[Layout, str]:
    """Return the Layout member for ``value``, or ``value`` unchanged if unknown."""
    return _parse(Layout, value)


def inverse_direction(value: Union[Direction, str]) -> Union[Direction, str]:
    """Inverse of a direction; unknown tokens are returned verbatim."""
    direction = parse_direction(value)
    if isinstance(direction, Direction):
        return direction.inverse
    return direction


def token(value: Union[Enum, str]) -> str:
    """Command-string token for an enum member or raw string."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def display_name(name: str) -> str:
    """Strip an optional ``N:`` prefix from a workspace name.

    Only the first ``:`` separates the prefix, so ``"1:a:b"`` yields ``"a:b"``.

    Examples:
        >>> display_name("3:mail")
        'mail'
        >>> display_name("scratch")
        'scratch'
    """
    if ":" in name:
        return name.split(":", 1)[1]
    return name


# Core Entities

class Workspace(BaseModel):
    """One workspace as reported by GET_WORKSPACES."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Workspace name, may embed a numeric prefix as 'N:label'")
    num: int = Field(UNNUMBERED, description="Workspace number (-1 when unnumbered)")
    output: str = Field("", description="Output currently hosting the workspace")
    visible: bool = Field(False, description="Displayed on its output")
    focused: bool = Field(False, description="Holds input focus")

    @property
    def is_numbered(self) -> bool:
        return self.num != UNNUMBERED

    @property
    def display_name(self) -> str:
        return display_name(self.name)

    @classmethod
    def from_reply(cls, reply: Any) -> "Workspace":
        """Build from an i3ipc WorkspaceReply (or any object with the same attributes)."""
        num = getattr(reply, "num", UNNUMBERED)
        return cls(
            name=reply.name,
            num=UNNUMBERED if num is None else num,
            output=getattr(reply, "output", "") or "",
            visible=bool(getattr(reply, "visible", False)),
            focused=bool(getattr(reply, "focused", False)),
        )


class Output(BaseModel):
    """One physical output as reported by GET_OUTPUTS."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Output name (e.g., DP-1)")
    active: bool = Field(False, description="Output is enabled")
    current_workspace: Optional[str] = Field(None, description="Name of the workspace shown on the output")

    @classmethod
    def from_reply(cls, reply: Any) -> "Output":
        """Build from an i3ipc OutputReply (or any object with the same attributes)."""
        return cls(
            name=reply.name,
            active=bool(getattr(reply, "active", False)),
            current_workspace=getattr(reply, "current_workspace", None),
        )
