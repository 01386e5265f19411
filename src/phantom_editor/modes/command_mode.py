"""Command-line mode with inline editing and keymap integration."""

from __future__ import annotations

from typing import List, MutableMapping, cast

from phantom_editor.runtime import telemetry

from .base_mode import COMMAND, KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, key_to_token, lookup


class PromptMode(Mode):
    """A mode that edits a one-line prompt until a binding submits it.

    Bound keys (``Enter`` and ``Esc`` by default) run their actions; the
    prompt text is mirrored into ``context.extras[state_key]["text"]``.
    """

    state_key = "prompt_state"
    prefix = ""

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._typed: List[str] = []

    def on_enter(self, previous: str | None) -> None:
        del previous
        self._typed.clear()
        self.context.bus.emit(f"{self.name}.start", None)
        self._sync_state()

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self.context.bus.emit(f"{self.name}.end", self.current_text)
        self._typed.clear()
        self._sync_state()

    @property
    def current_text(self) -> str:
        return "".join(self._typed)

    def handle_key(self, key: KeyInput) -> ModeResult:
        match = lookup(self.context, self.name, (key_to_token(key),))
        if match is not None:
            return execute_match(self.context, match)
        return self._handle_text_input(key)

    def _handle_text_input(self, key: KeyInput) -> ModeResult:
        if key.key == "Backspace":
            if self._typed:
                self._typed.pop()
                self._sync_state()
            return ModeResult(consumed=True, status="editing")

        char = key.printable
        if char is not None:
            self._typed.append(char)
            self._sync_state()
            return ModeResult(consumed=True, status="editing")

        return ModeResult(consumed=False, status="miss", message="unhandled")

    def _state(self) -> MutableMapping[str, object]:
        return cast(
            MutableMapping[str, object],
            self.context.extras.setdefault(self.state_key, {}),
        )

    def _sync_state(self) -> None:
        self._state()["text"] = self.current_text


class CommandMode(PromptMode):
    name = COMMAND
    label = "COMMAND"
    state_key = "command_state"
    prefix = ":"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("phantom_editor.modes.command")


__all__ = ["PromptMode", "CommandMode"]
