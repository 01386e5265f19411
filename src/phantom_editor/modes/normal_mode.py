"""Normal mode: chord buffering over the keymap trie."""

from __future__ import annotations

from typing import Tuple

from phantom_editor.runtime import telemetry

from .base_mode import NORMAL, KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, key_to_token, require_keymap_resolver, run_action

# Keys with a meaning even when no binding claims them.
BUILTIN_KEYS = {
    "Left": "move_left",
    "Right": "move_right",
    "Up": "move_up",
    "Down": "move_down",
    "Home": "move_home",
    "End": "move_end",
    "PageUp": "page_up",
    "PageDown": "page_down",
    "Tab": "next_tab",
    "BackTab": "previous_tab",
}


class NormalMode(Mode):
    """Resolves chords such as ``dd``.

    A key that only starts a longer binding is held in ``pending``. The next
    key is tried together with it first; whatever happens, the pending keys
    are dropped before the new key is looked up on its own.
    """

    name = NORMAL
    label = "NORMAL"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("phantom_editor.modes.normal")
        self._resolver = require_keymap_resolver(context)
        self.pending: Tuple[str, ...] = ()

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self.pending = ()

    def handle_key(self, key: KeyInput) -> ModeResult:
        token = key_to_token(key)

        if self.pending:
            combined = (*self.pending, token)
            self.pending = ()
            result = self._resolver.resolve(self.name, combined)
            if result.status == "match" and result.match:
                return execute_match(self.context, result.match)
            if result.status == "pending":
                self.pending = combined
                return ModeResult(
                    consumed=True, status="pending", message=" ".join(combined)
                )

        result = self._resolver.resolve(self.name, (token,))
        if result.status == "match" and result.match:
            return execute_match(self.context, result.match)
        if result.status == "pending":
            self.pending = (token,)
            return ModeResult(consumed=True, status="pending", message=token)

        builtin = BUILTIN_KEYS.get(key.key)
        if builtin is not None:
            return run_action(self.context, builtin)
        return ModeResult(consumed=False, status="miss")


__all__ = ["NormalMode", "BUILTIN_KEYS"]
