"""Exception hierarchy shared by every editor layer.

None of these terminate the editor: actions convert them into status
messages at the action boundary.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple


class EditorError(RuntimeError):
    """Base class for recoverable editor failures."""


class BufferValidationError(EditorError):
    """Raised when a cursor falls outside the buffer."""

    def __init__(
        self, message: str, *, cursor: Optional[Tuple[int, int]] = None
    ) -> None:
        super().__init__(message)
        self.cursor = cursor


class NoFilenameError(EditorError):
    """Save requested for a tab that has no associated path."""

    def __init__(self) -> None:
        super().__init__("No filename specified. Use :w <filename> to save.")


class FileIOError(EditorError):
    """Reading, writing or listing a path failed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ClipboardError(EditorError):
    """The clipboard provider could not be read or written."""


class UnknownCommandError(EditorError):
    def __init__(self, command: str) -> None:
        super().__init__(f"Unknown command: {command}")
        self.command = command


class KeymapConfigError(EditorError):
    """A keymap file could not be parsed or names unknown actions."""


class KeymapConflictError(EditorError):
    """Raised when a new binding collides with an existing chord."""

    def __init__(self, binding: object, conflicts: Iterable[object]) -> None:
        conflicts_tuple = tuple(conflicts)
        ids = [getattr(conflict, "id", repr(conflict)) for conflict in conflicts_tuple]
        super().__init__(
            f"Binding '{getattr(binding, 'id', binding)}' conflicts with {ids}"
        )
        self.binding = binding
        self.conflicts = conflicts_tuple


__all__ = [
    "EditorError",
    "BufferValidationError",
    "NoFilenameError",
    "FileIOError",
    "ClipboardError",
    "UnknownCommandError",
    "KeymapConfigError",
    "KeymapConflictError",
]
