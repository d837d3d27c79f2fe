"""Value types for the editor: cursor position, terminal size and movement."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import NamedTuple


class Size(NamedTuple):
    """Terminal dimensions in columns and rows."""
    width: int
    height: int


class Direction(Enum):
    """Cursor movement direction, valued by its (dx, dy) delta."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value


class ControlFlow(Enum):
    """Whether the editor loop keeps going."""
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class Position:
    """Zero-based cursor column (x) and row (y) on the visible grid."""
    x: int = 0
    y: int = 0

    def moved(self, direction: Direction, size: Size) -> Position:
        """Return the position one cell away in ``direction``.

        The result is clamped to ``[0, size.width]`` horizontally and
        ``[0, size.height]`` vertically. The upper bound is inclusive, so
        the cursor may sit one cell past the last column or row.
        """
        dx, dy = direction.delta
        x = min(max(self.x + dx, 0), max(size.width, 0))
        y = min(max(self.y + dy, 0), max(size.height, 0))
        return replace(self, x=x, y=y)


@dataclass
class EditorState:
    """Mutable state owned by the editor loop."""
    control_flow: ControlFlow = ControlFlow.RUNNING
    cursor_position: Position = Position()

    @property
    def should_quit(self) -> bool:
        return self.control_flow is ControlFlow.TERMINATED
