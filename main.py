#!/usr/bin/env python3
"""Hecto - a minimal terminal editor.

Usage:
    python main.py [--version | --keytest]

Controls:
    h/j/k/l: Move cursor left/down/up/right
    Ctrl-Q: Quit
"""

import sys

from hecto.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
