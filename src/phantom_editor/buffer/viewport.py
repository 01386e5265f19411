"""Scroll offsets kept in step with the cursor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .document import TextBuffer
from .state import Cursor

DEFAULT_VISIBLE_HEIGHT = 24
DEFAULT_VISIBLE_WIDTH = 80


@dataclass(slots=True)
class Viewport:
    """Visible window of ``height`` lines by ``width`` columns."""

    height: int = DEFAULT_VISIBLE_HEIGHT
    width: int = DEFAULT_VISIBLE_WIDTH
    vertical_offset: int = 0
    horizontal_offset: int = 0

    def __post_init__(self) -> None:
        if self.height <= 0 or self.width <= 0:
            raise ValueError("viewport dimensions must be positive")

    def scroll_to(self, cursor: Cursor) -> None:
        """Move the offsets just enough for ``cursor`` to be visible."""

        self.vertical_offset = _follow(cursor.line, self.vertical_offset, self.height)
        self.horizontal_offset = _follow(
            cursor.column, self.horizontal_offset, self.width
        )

    def visible_lines(self, buffer: TextBuffer) -> list[str]:
        return buffer.lines[self.vertical_offset : self.vertical_offset + self.height]

    def max_vertical_offset(self, total_lines: int) -> int:
        return max(0, total_lines - self.height)

    def page_up(self, buffer: TextBuffer) -> None:
        self.vertical_offset = max(0, self.vertical_offset - self.height)
        buffer.set_cursor(buffer.cursor.column, self.vertical_offset)

    def page_down(self, buffer: TextBuffer) -> None:
        limit = self.max_vertical_offset(buffer.line_count)
        self.vertical_offset = min(self.vertical_offset + self.height, limit)
        bottom = min(self.vertical_offset + self.height - 1, buffer.line_count - 1)
        buffer.set_cursor(buffer.cursor.column, bottom)

    def center_on(self, line: int) -> None:
        self.vertical_offset = max(0, line - self.height // 2)

    def to_content(self, column: int, row: int) -> Cursor:
        """Map a cell inside the text area to a buffer position."""

        return Cursor(
            max(0, column) + self.horizontal_offset,
            max(0, row) + self.vertical_offset,
        )


def minimap_rows(total_lines: int, height: int) -> List[Tuple[int, int]]:
    """Line range ``(first, last)`` summarised by each minimap row.

    Short buffers get one row per line; longer ones are scaled so the whole
    buffer fits in ``height`` rows.
    """

    scale = max(total_lines / max(height, 1), 1.0)
    rows: List[Tuple[int, int]] = []
    for row in range(height):
        first = int(row * scale)
        if first >= total_lines:
            break
        last = int(min((row + 1) * scale, total_lines)) - 1
        rows.append((first, max(first, last)))
    return rows


def _follow(position: int, offset: int, extent: int) -> int:
    if position < offset:
        return position
    if position >= offset + extent:
        return position - extent + 1
    return offset


__all__ = [
    "Viewport",
    "minimap_rows",
    "DEFAULT_VISIBLE_HEIGHT",
    "DEFAULT_VISIBLE_WIDTH",
]
