"""Cursor coordinates shared by the buffer, selection and viewport layers."""

from __future__ import annotations

from typing import NamedTuple, Tuple


class Cursor(NamedTuple):
    """Zero-based ``(column, line)`` position inside a buffer."""

    column: int
    line: int

    @property
    def order_key(self) -> Tuple[int, int]:
        """Lexicographic ``(line, column)`` key used to order positions."""

        return (self.line, self.column)


ORIGIN = Cursor(0, 0)

__all__ = ["Cursor", "ORIGIN"]
