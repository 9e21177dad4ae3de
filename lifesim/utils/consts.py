"""Text alphabet and display constants for lifesim."""

ALIVE = "X"
"""Marker for a live cell in the textual representation."""

DEAD = "."
"""Marker written for dead cells when rendering."""

ROW_SEPARATOR = "\n"

EMPTY_FIELD = "empty"
"""Rendering of a field with no live cells (no bounding box exists)."""

DEFAULT_DISPLAY_PADDING = 2
"""Margin kept around the live region so moving patterns stay visible."""

# ANSI: erase display, cursor home
CLEAR_SCREEN = "\x1b[2J\x1b[H"
