"""Visual mode: the selection runs from the anchor to the cursor."""

from __future__ import annotations

from typing import MutableMapping, cast

from phantom_editor.runtime import telemetry

from .base_mode import VISUAL, KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, key_to_token, lookup, run_action

MOTION_KEYS = {
    "Left": "move_left",
    "Right": "move_right",
    "Up": "move_up",
    "Down": "move_down",
    "Home": "move_home",
    "End": "move_end",
}


class VisualMode(Mode):
    name = VISUAL
    label = "VISUAL"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("phantom_editor.modes.visual")

    def on_enter(self, previous: str | None) -> None:
        del previous
        state = self._visual_state()
        state["anchor"] = self.context.buffer.cursor
        state["active"] = True
        self.context.bus.emit("visual.start", state["anchor"])

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        # The anchor outlives the mode so Normal-mode copy_selection can use it.
        self._visual_state()["active"] = False
        self.context.bus.emit("visual.end", None)

    def handle_key(self, key: KeyInput) -> ModeResult:
        match = lookup(self.context, self.name, (key_to_token(key),))
        if match is not None:
            return execute_match(self.context, match)

        action_id = MOTION_KEYS.get(key.key)
        if action_id is not None:
            return run_action(self.context, action_id)
        return ModeResult(consumed=False, status="miss")

    def _visual_state(self) -> MutableMapping[str, object]:
        return cast(
            MutableMapping[str, object],
            self.context.extras.setdefault("visual_state", {}),
        )


__all__ = ["VisualMode"]
