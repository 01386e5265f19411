"""Insert mode: bound keys first, then text entry."""

from __future__ import annotations

from phantom_editor.runtime import telemetry

from .base_mode import INSERT, KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, key_to_token, lookup, run_action

EDIT_KEYS = {
    "Enter": "insert_newline",
    "Backspace": "backspace",
    "Delete": "delete_char",
    "Left": "move_left",
    "Right": "move_right",
    "Up": "move_up",
    "Down": "move_down",
    "Home": "move_home",
    "End": "move_end",
}


class InsertMode(Mode):
    name = INSERT
    label = "INSERT"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("phantom_editor.modes.insert")

    def handle_key(self, key: KeyInput) -> ModeResult:
        match = lookup(self.context, self.name, (key_to_token(key),))
        if match is not None:
            return execute_match(self.context, match)

        action_id = EDIT_KEYS.get(key.key)
        if action_id is not None:
            return run_action(self.context, action_id)

        char = key.printable
        if char is None:
            return ModeResult(consumed=False, status="miss")
        with self.context.tab.transaction("insert_char"):
            self.context.buffer.insert_char(char)
        return ModeResult(consumed=True, status="insert")


__all__ = ["InsertMode"]
