"""Main editor controller: the render/read/evaluate loop."""

import logging
from typing import Optional

from .constants import EditorConstants
from .keyboard import KeyboardHandler, KeyEvent, KeyType
from .model import ControlFlow, Direction, EditorState
from .terminal import TerminalError, TerminalInterface
from .version import NAME, get_version
from .view import ScreenRenderer

logger = logging.getLogger(__name__)


class Editor:
    """Main editor application controller."""

    def __init__(self, terminal: Optional[TerminalInterface] = None,
                 keyboard: Optional[KeyboardHandler] = None,
                 name: str = NAME, version: Optional[str] = None):
        """Initialize the editor components.

        Args:
            terminal: Terminal to draw on; a real one is created if omitted
            keyboard: Source of input events; reads from ``terminal`` if omitted
            name: Program name shown in the welcome banner
            version: Version shown in the welcome banner
        """
        self.terminal = terminal or TerminalInterface()
        self.keyboard = keyboard or KeyboardHandler(self.terminal)
        self.renderer = ScreenRenderer(self.terminal, name, version or get_version())
        self.state = EditorState()

    @property
    def should_quit(self) -> bool:
        return self.state.should_quit

    @property
    def cursor_position(self):
        return self.state.cursor_position

    def run(self):
        """Run the editor until the user quits.

        The terminal is always released, even when the loop fails; the
        failure is then re-raised for the caller to report.
        """
        try:
            self.terminal.initialize()
            logger.info("Editor started")
            self.repl()
        except BaseException:
            try:
                self.terminal.terminate()
            except TerminalError:
                logger.exception("Could not restore terminal")
            raise
        self.terminal.terminate()
        logger.info("Editor stopped")

    def repl(self):
        """Render, then block for and evaluate one event, until quitting."""
        while True:
            self.renderer.render(self.state)
            if self.state.should_quit:
                break
            event = self.keyboard.read_event()
            self.state.control_flow = self.evaluate_event(event)

    def evaluate_event(self, event) -> ControlFlow:
        """Apply one input event and report whether to keep running.

        Only key presses are looked at; everything else is ignored.
        """
        if self.state.should_quit:
            return ControlFlow.TERMINATED
        if not isinstance(event, KeyEvent):
            logger.debug("Ignoring non-key event %r", event)
            return ControlFlow.RUNNING

        if self._is_quit(event):
            logger.info("Quit requested")
            return ControlFlow.TERMINATED

        direction = None
        if event.is_character:
            direction = EditorConstants.MOVEMENT_KEYS.get(event.value)
        if direction is not None:
            self.move_cursor(direction)
        else:
            logger.debug("Ignoring key %r", event.raw)
        return ControlFlow.RUNNING

    @staticmethod
    def _is_quit(event: KeyEvent) -> bool:
        return (event.key_type == KeyType.CTRL
                and event.value == EditorConstants.QUIT_KEY
                and not (event.is_alt or event.is_shift))

    def move_cursor(self, direction: Direction) -> None:
        """Move the cursor one cell, bounded by the current terminal size.

        A failed size query leaves the cursor where it is.
        """
        try:
            size = self.terminal.size()
        except TerminalError as e:
            logger.warning("Cursor not moved %s: %s", direction.name.lower(), e)
            return
        self.state.cursor_position = self.state.cursor_position.moved(direction, size)
