"""Constants and configuration for the hecto editor."""

from .model import Direction


class EditorConstants:
    """Central configuration constants for the editor."""

    # Screen layout
    PLACEHOLDER = "~"  # Marker for rows with no content
    ROW_SEPARATOR = "\r\n"  # Raw mode does not translate \n
    WELCOME_TEMPLATE = "{name} editor -- version {version}"
    GOODBYE_MESSAGE = "Goodbye.\r\n"

    # Key bindings
    QUIT_KEY = "q"  # Pressed together with Ctrl
    MOVEMENT_KEYS = {
        "h": Direction.LEFT,
        "j": Direction.DOWN,
        "k": Direction.UP,
        "l": Direction.RIGHT,
    }

    # Exit statuses
    EXIT_OK = 0
    EXIT_FAILURE = 1
    EXIT_USAGE = 2
