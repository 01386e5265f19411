"""Search prompt mode."""

from __future__ import annotations

from phantom_editor.runtime import telemetry

from .base_mode import SEARCH, ModeContext
from .command_mode import PromptMode


class SearchMode(PromptMode):
    """Builds a search query; entering the mode forgets earlier results."""

    name = SEARCH
    label = "SEARCH"
    state_key = "search_state"
    prefix = "/"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("phantom_editor.modes.search")

    def on_enter(self, previous: str | None) -> None:
        state = self._state()
        state["results"] = []
        state["index"] = 0
        super().on_enter(previous)


__all__ = ["SearchMode"]
