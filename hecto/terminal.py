"""Terminal interface using Blessed for display and Curtsies for input."""

from __future__ import annotations

import logging
import termios
from typing import Callable, Optional

import blessed

from .model import Position, Size

logger = logging.getLogger(__name__)

_TERMINAL_ERRORS = (OSError, termios.error)


class TerminalError(Exception):
    """An I/O failure while driving the terminal or reading input."""


def _default_input_factory():
    from curtsies import Input  # type: ignore
    # Ctrl-Q and Ctrl-S must reach us as keys, and Ctrl-C as an event
    return Input(keynames='curtsies', sigint_event=True,
                 disable_terminal_start_stop=True)


class TerminalInterface:
    """Handles terminal I/O using Blessed.

    Output is buffered by the drawing primitives and only written to the
    terminal by :meth:`execute`.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None,
                 input_factory: Optional[Callable[[], object]] = None,
                 alternate_screen: bool = False):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.alternate_screen = alternate_screen
        self._input_factory = input_factory or _default_input_factory
        self._curtsies_input: Optional[object] = None
        self._buffer: list[str] = []
        self._in_fullscreen = False

    @property
    def is_active(self) -> bool:
        """True while raw-mode input is held."""
        return self._curtsies_input is not None

    def initialize(self) -> None:
        """Enter raw mode and start from a cleared screen."""
        if self.is_active:
            return
        try:
            curtsies_input = self._input_factory()
            curtsies_input.__enter__()  # type: ignore[attr-defined]
        except _TERMINAL_ERRORS as e:
            raise TerminalError(f"Could not enter raw mode: {e}") from e
        self._curtsies_input = curtsies_input
        logger.debug("Entered raw mode")
        if self.alternate_screen:
            self.print(self.term.enter_fullscreen)
            self._in_fullscreen = True
        self.clear_screen()
        self.move_cursor_to(Position(0, 0))
        self.execute()

    def terminate(self) -> None:
        """Flush pending output and leave raw mode."""
        if not self.is_active:
            return
        try:
            if self._in_fullscreen:
                self.print(self.term.exit_fullscreen)
                self._in_fullscreen = False
            self.show_cursor()
            self.execute()
        finally:
            curtsies_input, self._curtsies_input = self._curtsies_input, None
            try:
                curtsies_input.__exit__(None, None, None)  # type: ignore[attr-defined]
            except _TERMINAL_ERRORS as e:
                raise TerminalError(f"Could not leave raw mode: {e}") from e
            logger.debug("Left raw mode")

    def size(self) -> Size:
        """Current terminal dimensions."""
        try:
            return Size(width=self.term.width, height=self.term.height)
        except _TERMINAL_ERRORS as e:
            raise TerminalError(f"Could not query terminal size: {e}") from e

    def hide_cursor(self) -> None:
        self.print(self.term.hide_cursor)

    def show_cursor(self) -> None:
        self.print(self.term.normal_cursor)

    def move_cursor_to(self, position: Position) -> None:
        self.print(self.term.move_xy(position.x, position.y))

    def clear_screen(self) -> None:
        """Clear the entire screen."""
        self.print(self.term.clear)

    def clear_line(self) -> None:
        """Clear the current line; rows are always drawn from column 0."""
        self.print(self.term.clear_eol)

    def print(self, text: str) -> None:
        """Queue text for output without flushing."""
        self._buffer.append(text)

    def execute(self) -> None:
        """Write all queued output to the terminal and flush it."""
        data, self._buffer = ''.join(self._buffer), []
        try:
            self.term.stream.write(data)
            self.term.stream.flush()
        except _TERMINAL_ERRORS as e:
            raise TerminalError(f"Could not write to terminal: {e}") from e

    def read_input(self):
        """Block until curtsies reports the next key token or event."""
        if self._curtsies_input is None:
            raise TerminalError("Terminal is not initialized")
        try:
            return next(self._curtsies_input)  # type: ignore[call-overload]
        except _TERMINAL_ERRORS as e:
            raise TerminalError(f"Could not read input: {e}") from e
