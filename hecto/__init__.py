"""Hecto - a minimal terminal editor core."""

from .model import ControlFlow, Direction, EditorState, Position, Size
from .view import ScreenRenderer, welcome_message

__all__ = [
    'ControlFlow',
    'Direction',
    'EditorState',
    'Position',
    'Size',
    'ScreenRenderer',
    'welcome_message',
]
