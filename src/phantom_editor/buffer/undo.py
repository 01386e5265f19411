"""Snapshot-based undo/redo history."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional, Tuple

from .state import Cursor

DEFAULT_UNDO_LIMIT = 100

# Edits that may share one snapshot when coalescing is on.
COALESCIBLE = frozenset({"insert_char", "backspace", "delete_char"})


@dataclass(frozen=True, slots=True)
class Snapshot:
    lines: Tuple[str, ...]
    cursor: Cursor
    vertical_offset: int = 0
    horizontal_offset: int = 0


class UndoHistory:
    """Most-recent-first undo and redo stacks.

    The undo stack holds at most ``limit`` snapshots, evicting the oldest.
    Recording a new edit empties the redo stack, so history never branches.

    With ``coalesce`` enabled, a run of the same ``COALESCIBLE`` edit kind
    whose every step starts where the previous one ended keeps only the
    snapshot taken before the run. Any other edit, an undo or a redo ends
    the run.
    """

    def __init__(self, *, limit: int = DEFAULT_UNDO_LIMIT, coalesce: bool = False) -> None:
        if limit <= 0:
            raise ValueError("limit must be positive")
        self.limit = limit
        self.coalesce = coalesce
        self._undo: Deque[Snapshot] = deque(maxlen=limit)
        self._redo: Deque[Snapshot] = deque(maxlen=limit)
        self._run_kind: Optional[str] = None
        self._run_cursor: Optional[Cursor] = None

    def record(
        self,
        before: Snapshot,
        *,
        kind: Optional[str] = None,
        cursor_after: Optional[Cursor] = None,
    ) -> None:
        self._redo.clear()
        if self._continues_run(before, kind):
            self._run_cursor = cursor_after
            return
        self._undo.appendleft(before)
        if self.coalesce and kind in COALESCIBLE:
            self._run_kind = kind
            self._run_cursor = cursor_after
        else:
            self._break_run()

    def undo(self, current: Snapshot) -> Optional[Snapshot]:
        """Pop the latest snapshot, parking ``current`` on the redo stack."""

        self._break_run()
        if not self._undo:
            return None
        previous = self._undo.popleft()
        self._redo.appendleft(current)
        return previous

    def redo(self, current: Snapshot) -> Optional[Snapshot]:
        self._break_run()
        if not self._redo:
            return None
        following = self._redo.popleft()
        self._undo.appendleft(current)
        return following

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def _continues_run(self, before: Snapshot, kind: Optional[str]) -> bool:
        return (
            self.coalesce
            and kind is not None
            and kind == self._run_kind
            and before.cursor == self._run_cursor
            and bool(self._undo)
        )

    def _break_run(self) -> None:
        self._run_kind = None
        self._run_cursor = None


__all__ = ["Snapshot", "UndoHistory", "DEFAULT_UNDO_LIMIT", "COALESCIBLE"]
