"""Line-oriented text storage with the structural edit primitives."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .state import Cursor
from .validation import clamp_cursor

PLAIN_TEXT = "Plain Text"


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` and ``\\r\\n`` only; a final newline adds no empty line."""

    *terminated, tail = text.split("\n")
    lines = [line[:-1] if line.endswith("\r") else line for line in terminated]
    if tail:
        lines.append(tail)
    return lines or [""]


@dataclass(slots=True)
class TextBuffer:
    """Ordered lines plus a cursor.

    ``lines`` never becomes empty and every primitive leaves the cursor
    inside the content. Primitives do not record history; callers wrap them
    in a tab transaction for that.
    """

    lines: List[str] = field(default_factory=lambda: [""])
    cursor: Cursor = Cursor(0, 0)
    path: Optional[str] = None
    syntax: str = PLAIN_TEXT

    @classmethod
    def from_text(
        cls, text: str, *, path: Optional[str] = None, syntax: str = PLAIN_TEXT
    ) -> "TextBuffer":
        lines = split_lines(text)
        return cls(lines=lines, path=path, syntax=syntax)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def current_line(self) -> str:
        return self.lines[self.cursor.line]

    def is_pristine(self) -> bool:
        """True for an untouched, never-named scratch buffer."""

        return self.path is None and self.lines == [""]

    def set_cursor(self, column: int, line: int) -> None:
        self.cursor = clamp_cursor(self.lines, Cursor(column, line))

    def replace(self, lines: Sequence[str], cursor: Cursor) -> None:
        self.lines = list(lines) or [""]
        self.cursor = cursor
        self.ensure_cursor_in_bounds()

    def ensure_cursor_in_bounds(self) -> None:
        if not self.lines:
            self.lines.append("")
        self.cursor = clamp_cursor(self.lines, self.cursor)

    # -- edits -------------------------------------------------------------

    def insert_char(self, char: str) -> None:
        column, line = self.cursor
        if not 0 <= line < len(self.lines):
            return
        text = self.lines[line]
        column = min(column, len(text))
        self.lines[line] = text[:column] + char + text[column:]
        self.cursor = Cursor(column + len(char), line)

    def insert_text(self, text: str) -> None:
        """Insert possibly multi-line ``text``; the cursor lands after it."""

        column, line = self.cursor
        current = self.lines[line]
        left, right = current[:column], current[column:]
        pieces = text.split("\n")
        if len(pieces) == 1:
            self.lines[line] = left + text + right
            self.cursor = Cursor(column + len(text), line)
            return
        new_lines = [left + pieces[0], *pieces[1:-1], pieces[-1] + right]
        self.lines[line : line + 1] = new_lines
        self.cursor = Cursor(len(pieces[-1]), line + len(new_lines) - 1)

    def paste_lines(self, text: str) -> None:
        """Insert ``text`` at the cursor, moving the rest of the line below it.

        The cursor lands at the start of that moved remainder, so pasting a
        yanked line at column 0 puts it back as a line of its own.
        """

        column, line = self.cursor
        current = self.lines[line]
        left, right = current[:column], current[column:]
        pieces = text.split("\n")
        new_lines = [left + pieces[0], *pieces[1:], right]
        self.lines[line : line + 1] = new_lines
        self.cursor = Cursor(0, line + len(new_lines) - 1)

    def insert_newline(self) -> None:
        column, line = self.cursor
        current = self.lines[line]
        self.lines[line] = current[:column]
        self.lines.insert(line + 1, current[column:])
        self.cursor = Cursor(0, line + 1)

    def backspace(self) -> None:
        column, line = self.cursor
        if column > 0:
            text = self.lines[line]
            self.lines[line] = text[: column - 1] + text[column:]
            self.cursor = Cursor(column - 1, line)
        elif line > 0:
            removed = self.lines.pop(line)
            join_at = len(self.lines[line - 1])
            self.lines[line - 1] += removed
            self.cursor = Cursor(join_at, line - 1)

    def delete_char(self) -> None:
        column, line = self.cursor
        text = self.lines[line]
        if column < len(text):
            self.lines[line] = text[:column] + text[column + 1 :]
        elif line < len(self.lines) - 1:
            self.lines[line] = text + self.lines.pop(line + 1)

    def delete_line(self) -> str:
        """Remove the cursor line and return it."""

        line = self.cursor.line
        removed = self.lines.pop(line)
        if not self.lines:
            self.lines.append("")
        if line >= len(self.lines) and line > 0:
            line -= 1
        self.cursor = Cursor(0, line)
        return removed

    def insert_line_below(self) -> None:
        line = self.cursor.line + 1
        self.lines.insert(line, "")
        self.cursor = Cursor(0, line)

    def insert_line_above(self) -> None:
        line = self.cursor.line
        self.lines.insert(line, "")
        self.cursor = Cursor(0, line)

    # -- motion ------------------------------------------------------------

    def move_left(self) -> None:
        column, line = self.cursor
        if column > 0:
            self.cursor = Cursor(column - 1, line)
        elif line > 0:
            self.cursor = Cursor(len(self.lines[line - 1]), line - 1)

    def move_right(self) -> None:
        column, line = self.cursor
        if column < len(self.lines[line]):
            self.cursor = Cursor(column + 1, line)
        elif line < len(self.lines) - 1:
            self.cursor = Cursor(0, line + 1)

    def move_up(self) -> None:
        column, line = self.cursor
        if line > 0:
            self.cursor = Cursor(min(column, len(self.lines[line - 1])), line - 1)

    def move_down(self) -> None:
        column, line = self.cursor
        if line < len(self.lines) - 1:
            self.cursor = Cursor(min(column, len(self.lines[line + 1])), line + 1)

    def move_home(self) -> None:
        self.cursor = Cursor(0, self.cursor.line)

    def move_end(self) -> None:
        self.cursor = Cursor(len(self.current_line), self.cursor.line)


__all__ = ["TextBuffer", "PLAIN_TEXT", "split_lines"]
