"""Ordered tab collection with an active index."""

from __future__ import annotations

from typing import Iterator, List, Optional

from phantom_editor.buffer import TextBuffer, UndoHistory, Viewport
from phantom_editor.buffer.undo import DEFAULT_UNDO_LIMIT
from phantom_editor.buffer.viewport import DEFAULT_VISIBLE_HEIGHT, DEFAULT_VISIBLE_WIDTH
from phantom_editor.runtime import telemetry

from .tab import Tab


class TabManager:
    """Owns every open tab; there is always at least one."""

    def __init__(
        self,
        *,
        visible_height: int = DEFAULT_VISIBLE_HEIGHT,
        visible_width: int = DEFAULT_VISIBLE_WIDTH,
        undo_limit: int = DEFAULT_UNDO_LIMIT,
        coalesce_undo: bool = False,
    ) -> None:
        self.visible_height = visible_height
        self.visible_width = visible_width
        self.undo_limit = undo_limit
        self.coalesce_undo = coalesce_undo
        self._tabs: List[Tab] = [self.make_tab()]
        self._active = 0

    def make_tab(self, buffer: Optional[TextBuffer] = None) -> Tab:
        return Tab(
            buffer=buffer or TextBuffer(),
            viewport=Viewport(height=self.visible_height, width=self.visible_width),
            history=UndoHistory(limit=self.undo_limit, coalesce=self.coalesce_undo),
        )

    @property
    def active_index(self) -> int:
        return self._active

    @property
    def active(self) -> Tab:
        return self._tabs[self._active]

    def __len__(self) -> int:
        return len(self._tabs)

    def __iter__(self) -> Iterator[Tab]:
        return iter(tuple(self._tabs))

    def __getitem__(self, index: int) -> Tab:
        return self._tabs[index]

    def _reusable_scratch(self) -> bool:
        return len(self._tabs) == 1 and self._tabs[0].buffer.is_pristine()

    def new_tab(self) -> Tab:
        if self._reusable_scratch():
            self._active = 0
        else:
            self._tabs.append(self.make_tab())
            self._active = len(self._tabs) - 1
        telemetry.record_event("tabs.new", data={"count": len(self._tabs)})
        return self.active

    def open_buffer(self, buffer: TextBuffer) -> Tab:
        """Show ``buffer`` in the pristine scratch tab or in a new tab."""

        tab = self.make_tab(buffer)
        if self._reusable_scratch():
            self._tabs[0] = tab
            self._active = 0
        else:
            self._tabs.append(tab)
            self._active = len(self._tabs) - 1
        return tab

    def close_tab(self) -> bool:
        if len(self._tabs) <= 1:
            return False
        del self._tabs[self._active]
        self._active = min(self._active, len(self._tabs) - 1)
        telemetry.record_event("tabs.close", data={"count": len(self._tabs)})
        return True

    def switch_to_tab(self, index: int) -> bool:
        if not 0 <= index < len(self._tabs):
            return False
        self._active = index
        return True

    def next_tab(self) -> None:
        self._active = (self._active + 1) % len(self._tabs)

    def previous_tab(self) -> None:
        self._active = (self._active - 1) % len(self._tabs)


__all__ = ["TabManager"]
