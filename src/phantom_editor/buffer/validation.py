"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import Sequence

from phantom_editor.errors import BufferValidationError

from .state import Cursor


def clamp_cursor(lines: Sequence[str], cursor: Cursor) -> Cursor:
    """Pull ``cursor`` back inside ``lines``; ``lines`` must not be empty."""

    line = max(0, min(cursor.line, len(lines) - 1))
    column = max(0, min(cursor.column, len(lines[line])))
    return Cursor(column, line)


def ensure_cursor(lines: Sequence[str], cursor: Cursor) -> Cursor:
    """Strict variant of ``clamp_cursor`` that refuses out-of-range input."""

    if cursor.line < 0 or cursor.line >= len(lines):
        raise BufferValidationError("Line out of range", cursor=tuple(cursor))
    if cursor.column < 0 or cursor.column > len(lines[cursor.line]):
        raise BufferValidationError("Column out of range", cursor=tuple(cursor))
    return cursor
