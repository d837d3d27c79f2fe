"""Keyboard input handling using curtsies-style tokens."""

from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"
    SHIFT_SPECIAL = "shift_special"  # Shift + arrow keys, etc.


@dataclass
class KeyEvent:
    """A key press: the base key plus the modifiers held with it."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str  # The token reported by curtsies
    is_alt: bool = False
    is_ctrl: bool = False
    is_shift: bool = False
    is_sequence: bool = False

    @property
    def is_character(self) -> bool:
        """True for single-character keys, whatever the modifiers."""
        return len(self.value) == 1 and self.key_type in (
            KeyType.REGULAR, KeyType.CTRL, KeyType.ALT)


_SPECIALS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'page_up', 'page_down', 'insert',
}


class KeyboardHandler:
    """Turns the terminal's curtsies input into editor events."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def read_event(self):
        """Block for the next input event.

        Key tokens are parsed into :class:`KeyEvent`. Other curtsies events
        (paste, SIGINT, window change) are returned as they are.
        """
        token = self.terminal.read_input()
        if isinstance(token, str):
            return self.parse_key(token)
        return token

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key token into a KeyEvent."""
        key_str = str(key)

        # Curtsies key names like '<LEFT>', '<Ctrl-q>', '<Esc+u>'
        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            return self._parse_named(key_str)

        # Single-byte ASCII control chars (Ctrl-<letter>)
        if len(key_str) == 1:
            o = ord(key_str)
            if o in (10, 13):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            if 1 <= o <= 26:
                ch = chr(ord('a') + o - 1)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)
            if o == 27:
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)
            if o == 127:
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)

    def _parse_named(self, key_str: str) -> KeyEvent:
        name = key_str[1:-1]
        # Modifiers are lower-cased, the base key keeps its case
        parts = name.replace('+', '-').split('-')
        if len(parts) > 1 and parts[-1] == '':
            # '<Ctrl-->' style: the key itself is '-'
            parts = parts[:-2] + ['-']
        mods = {p.lower() for p in parts[:-1]}
        base = parts[-1]
        if len(base) > 1:
            base = base.lower()
        if mods & {'meta', 'esc'}:
            mods.add('alt')
        if base in ('pageup', 'page_up'):
            base = 'page_up'
        elif base in ('pagedown', 'page_down'):
            base = 'page_down'

        is_ctrl = 'ctrl' in mods
        is_alt = 'alt' in mods
        is_shift = 'shift' in mods

        if not mods:
            if base in ('space', 'spacebar', 'spc'):
                return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=key_str)
            if base == 'tab':
                return KeyEvent(key_type=KeyType.REGULAR, value='\t', raw=key_str)
            if base in ('esc', 'escape'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)
        if is_ctrl and len(base) == 1:
            # The Enter key arrives as Ctrl-J or Ctrl-M
            if base.lower() in ('j', 'm') and not (is_alt or is_shift):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str,
                                is_sequence=True)
            return KeyEvent(key_type=KeyType.CTRL, value=base.lower(), raw=key_str,
                            is_ctrl=True, is_alt=is_alt, is_shift=is_shift)
        if is_alt and (base in _SPECIALS or len(base) == 1):
            return KeyEvent(key_type=KeyType.ALT, value=base, raw=key_str,
                            is_alt=True, is_shift=is_shift)
        if is_shift and base in _SPECIALS:
            return KeyEvent(key_type=KeyType.SHIFT_SPECIAL, value=base, raw=key_str,
                            is_shift=True, is_sequence=True)
        return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str,
                        is_ctrl=is_ctrl, is_alt=is_alt, is_shift=is_shift,
                        is_sequence=True)
