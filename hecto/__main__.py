"""Hecto CLI entry point.

Allows running via `python -m hecto` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .constants import EditorConstants
from .settings import Settings, load_settings
from .version import get_version_string

logger = logging.getLogger("hecto")

USAGE = "usage: hecto [--version | --keytest]"


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def configure_logging(settings: Settings) -> None:
    """Send log records to the log file; stderr belongs to the screen."""
    try:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(settings.log_file, encoding='utf-8')
    except OSError as e:
        print(f"hecto: logging disabled, cannot open {settings.log_file}: {e}", file=sys.stderr)
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(settings.log_level)


def run_keyboard_test(settings: Settings) -> None:
    """Print parsed key events until ESC, using the editor's input stack."""
    from .keyboard import KeyboardHandler, KeyEvent, KeyType
    from .terminal import TerminalInterface

    term = TerminalInterface(alternate_screen=settings.alternate_screen)
    kb = KeyboardHandler(term)
    term.initialize()
    try:
        term.print("Keyboard test mode: press keys to see parsed events.\r\n")
        term.print("Quit with ESC.\r\n")
        term.execute()
        while True:
            ev = kb.read_event()
            if not isinstance(ev, KeyEvent):
                term.print(f"event={ev!r}\r\n")
                term.execute()
                continue
            if ev.key_type == KeyType.SPECIAL and ev.value == 'escape':
                break
            parts = [f"type={ev.key_type.value}", f"value={ev.value}",
                     f"raw='{_escape_bytes(ev.raw)}'"]
            flags = [name for name, on in (('alt', ev.is_alt), ('ctrl', ev.is_ctrl),
                                           ('shift', ev.is_shift), ('seq', ev.is_sequence)) if on]
            if flags:
                parts.append(f"flags={'+'.join(flags)}")
            term.print(' '.join(parts) + "\r\n")
            term.execute()
    finally:
        term.terminate()


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return EditorConstants.EXIT_OK
    if args and args[0] not in ('--keytest', '--keyboard-test'):
        print(USAGE, file=sys.stderr)
        return EditorConstants.EXIT_USAGE

    settings = load_settings()
    configure_logging(settings)

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    from .terminal import TerminalError, TerminalInterface

    try:
        if args:
            run_keyboard_test(settings)
        else:
            Editor(TerminalInterface(alternate_screen=settings.alternate_screen)).run()
    except TerminalError as e:
        logger.exception("Fatal terminal error")
        print(f"hecto: {e}", file=sys.stderr)
        return EditorConstants.EXIT_FAILURE
    return EditorConstants.EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
