"""A tab: one buffer with its own viewport and undo history."""

from __future__ import annotations

import os
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from typing import ContextManager, Optional

from phantom_editor.buffer import Snapshot, TextBuffer, UndoHistory, Viewport
from phantom_editor.runtime import telemetry

UNTITLED = "[No Name]"


@dataclass
class Tab:
    buffer: TextBuffer = field(default_factory=TextBuffer)
    viewport: Viewport = field(default_factory=Viewport)
    history: UndoHistory = field(default_factory=UndoHistory)

    @property
    def title(self) -> str:
        if self.buffer.path is None:
            return UNTITLED
        return os.path.basename(self.buffer.path) or self.buffer.path

    def snapshot(self) -> Snapshot:
        return Snapshot(
            lines=tuple(self.buffer.lines),
            cursor=self.buffer.cursor,
            vertical_offset=self.viewport.vertical_offset,
            horizontal_offset=self.viewport.horizontal_offset,
        )

    def restore(self, snapshot: Snapshot) -> None:
        self.buffer.replace(snapshot.lines, snapshot.cursor)
        self.viewport.vertical_offset = snapshot.vertical_offset
        self.viewport.horizontal_offset = snapshot.horizontal_offset

    def save_state(self) -> None:
        """Push the current state onto the undo stack and clear redo."""

        self.history.record(self.snapshot())

    def undo(self) -> bool:
        previous = self.history.undo(self.snapshot())
        if previous is None:
            return False
        self.restore(previous)
        return True

    def redo(self) -> bool:
        following = self.history.redo(self.snapshot())
        if following is None:
            return False
        self.restore(following)
        return True

    def sync_viewport(self) -> None:
        self.buffer.ensure_cursor_in_bounds()
        self.viewport.scroll_to(self.buffer.cursor)

    def transaction(self, label: str) -> "Transaction":
        return Transaction(self, label)


class Transaction(AbstractContextManager["Transaction"]):
    """Records one undo step around a block of buffer edits.

    The pre-edit snapshot is taken on entry and pushed on a clean exit, but
    only when the block actually changed the lines.
    """

    def __init__(self, tab: Tab, label: str) -> None:
        self.tab = tab
        self.label = label
        self.changed = False
        self._span_cm: Optional[ContextManager[object]] = None
        self._before: Optional[Snapshot] = None

    def __enter__(self) -> "Transaction":
        self._before = self.tab.snapshot()
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.tab.title},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            if exc_type is None and self._before is not None:
                self.tab.sync_viewport()
                self.changed = tuple(self.tab.buffer.lines) != self._before.lines
                if self.changed:
                    self.tab.history.record(
                        self._before,
                        kind=self.label,
                        cursor_after=self.tab.buffer.cursor,
                    )
        finally:
            if self._span_cm is not None:
                self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Tab", "Transaction", "UNTITLED"]
