"""Text buffer, cursor, selection, viewport and undo primitives."""

from .document import PLAIN_TEXT, TextBuffer, split_lines
from .selection import SelectionRange
from .state import Cursor
from .undo import Snapshot, UndoHistory
from .validation import clamp_cursor, ensure_cursor
from .viewport import Viewport, minimap_rows

__all__ = [
    "TextBuffer",
    "PLAIN_TEXT",
    "Cursor",
    "SelectionRange",
    "Snapshot",
    "UndoHistory",
    "Viewport",
    "clamp_cursor",
    "ensure_cursor",
    "split_lines",
    "minimap_rows",
]
