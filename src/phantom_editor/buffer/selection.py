"""Ordered selection ranges and the text they cover.

Keyboard (visual mode) selections include the character under the end
position; mouse-drag selections stop just before it. The two gestures grew
separately and keep their own rule, selected with ``inclusive``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .state import Cursor


@dataclass(frozen=True, slots=True)
class SelectionRange:
    start: Cursor
    end: Cursor
    inclusive: bool = True

    @classmethod
    def between(cls, a: Cursor, b: Cursor, *, inclusive: bool = True) -> "SelectionRange":
        """Order two raw positions by ``(line, column)``."""

        if b.order_key < a.order_key:
            a, b = b, a
        return cls(start=Cursor(*a), end=Cursor(*b), inclusive=inclusive)

    @classmethod
    def visual(cls, anchor: Cursor, cursor: Cursor) -> "SelectionRange":
        return cls.between(anchor, cursor, inclusive=True)

    @classmethod
    def mouse(cls, start: Cursor, end: Cursor) -> "SelectionRange":
        return cls.between(start, end, inclusive=False)

    @property
    def is_single_line(self) -> bool:
        return self.start.line == self.end.line

    def _end_cut(self, line: str, column: int) -> int:
        cut = column + 1 if self.inclusive else column
        return min(cut, len(line))

    def _clamped_end(self, lines: Sequence[str]) -> Cursor:
        if self.end.line < len(lines):
            return self.end
        last = len(lines) - 1
        return Cursor(len(lines[last]), last)

    def extract(self, lines: Sequence[str]) -> str:
        if self.start.line >= len(lines):
            return ""
        end = self._clamped_end(lines)
        first_line = lines[self.start.line]
        if self.start.line == end.line:
            return first_line[self.start.column : self._end_cut(first_line, end.column)]

        end_line = lines[end.line]
        parts = [first_line[self.start.column :]]
        parts.extend(lines[self.start.line + 1 : end.line])
        parts.append(end_line[: self._end_cut(end_line, end.column)])
        return "\n".join(parts)

    def delete(self, lines: Sequence[str]) -> Tuple[List[str], Cursor]:
        """Return the lines with the range spliced out and the new cursor."""

        result = list(lines)
        if self.start.line >= len(result):
            return result, self.start
        end = self._clamped_end(result)
        head = result[self.start.line][: self.start.column]
        end_line = result[end.line]
        tail = end_line[self._end_cut(end_line, end.column) :]
        result[self.start.line : end.line + 1] = [head + tail]
        return result, self.start


__all__ = ["SelectionRange"]
