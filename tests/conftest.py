"""Shared test doubles for the terminal and keyboard."""

import pytest

from hecto.editor import Editor
from hecto.keyboard import KeyEvent, KeyType
from hecto.model import Size
from hecto.terminal import TerminalError


class FakeTerminal:
    """In-memory terminal recording every primitive call."""

    def __init__(self, width=80, height=24):
        self.width = width
        self.height = height
        self.calls = []
        self.is_active = False
        self.init_count = 0
        self.term_count = 0
        self.fail_size = False
        self.output = []  # Flushed text, one entry per execute()
        self._pending = []

    def initialize(self):
        self.calls.append(('initialize',))
        self.init_count += 1
        self.is_active = True

    def terminate(self):
        self.calls.append(('terminate',))
        self.term_count += 1
        self.is_active = False

    def size(self):
        if self.fail_size:
            raise TerminalError("size query failed")
        return Size(self.width, self.height)

    def hide_cursor(self):
        self.calls.append(('hide_cursor',))

    def show_cursor(self):
        self.calls.append(('show_cursor',))

    def move_cursor_to(self, position):
        self.calls.append(('move_cursor_to', position))

    def clear_screen(self):
        self.calls.append(('clear_screen',))

    def clear_line(self):
        self.calls.append(('clear_line',))

    def print(self, text):
        self.calls.append(('print', text))
        self._pending.append(text)

    def execute(self):
        self.calls.append(('execute',))
        self.output.append(''.join(self._pending))
        self._pending = []

    def frames(self):
        """Split recorded calls into frames, one per execute()."""
        frames, current = [], []
        for call in self.calls:
            if call[0] in ('initialize', 'terminate'):
                continue
            current.append(call)
            if call[0] == 'execute':
                frames.append(current)
                current = []
        return frames


class FakeKeyboard:
    """Hands out scripted events; runs out with an error."""

    def __init__(self, events=()):
        self.events = list(events)
        self.reads = 0

    def read_event(self):
        self.reads += 1
        if not self.events:
            raise TerminalError("no more input")
        event = self.events.pop(0)
        if isinstance(event, BaseException):
            raise event
        return event


def key(ch):
    """A plain character key press."""
    return KeyEvent(key_type=KeyType.REGULAR, value=ch, raw=ch)


def ctrl(ch):
    """A Ctrl-<letter> key press."""
    return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=f'<Ctrl-{ch}>', is_ctrl=True)


@pytest.fixture
def terminal():
    return FakeTerminal(width=80, height=24)


@pytest.fixture
def make_editor(terminal):
    def _make(events=(), version="0.1"):
        return Editor(terminal=terminal, keyboard=FakeKeyboard(events),
                      name="demo", version=version)
    return _make
