"""Screen rendering: placeholder rows with a centered welcome banner."""

from __future__ import annotations

from .constants import EditorConstants
from .model import EditorState, Position, Size


def welcome_message(width: int, name: str, version: str) -> str:
    """Build the welcome line for a terminal ``width`` columns wide.

    The message is centered approximately, with a leading placeholder
    marker, and truncated so it never exceeds ``width``.
    """
    message = EditorConstants.WELCOME_TEMPLATE.format(name=name, version=version)
    padding = max(width - len(message), 0) // 2
    spaces = " " * max(padding - 1, 0)
    line = f"{EditorConstants.PLACEHOLDER}{spaces}{message}"
    return line[:max(width, 0)]


def row_content(row: int, size: Size, name: str, version: str) -> str:
    """Text for screen row ``row``: the banner a third of the way down, else ``~``."""
    if row == size.height // 3:
        return welcome_message(size.width, name, version)
    return EditorConstants.PLACEHOLDER


class ScreenRenderer:
    """Draws one full frame per call using the terminal's primitives."""

    def __init__(self, terminal, name: str, version: str):
        self.terminal = terminal
        self.name = name
        self.version = version

    def render(self, state: EditorState) -> None:
        """Draw the frame for ``state`` and flush it.

        The cursor is hidden while drawing so partial frames don't flicker.
        """
        self.terminal.hide_cursor()
        if state.should_quit:
            self.terminal.clear_screen()
            self.terminal.print(EditorConstants.GOODBYE_MESSAGE)
        else:
            self._draw_rows()
            self.terminal.move_cursor_to(state.cursor_position)
        self.terminal.show_cursor()
        self.terminal.execute()

    def _draw_rows(self) -> None:
        size = self.terminal.size()
        self.terminal.move_cursor_to(Position(0, 0))
        for row in range(size.height):
            self.terminal.clear_line()
            self.terminal.print(row_content(row, size, self.name, self.version))
            # No separator after the last row, or the screen scrolls
            if row + 1 < size.height:
                self.terminal.print(EditorConstants.ROW_SEPARATOR)
