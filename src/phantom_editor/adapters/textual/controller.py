"""Adapter that wires an Editor and its bus events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from phantom_editor.editor import Editor, FrameView, MouseInput
from phantom_editor.keymaps.normalizer import canonical_key_name
from phantom_editor.modes import KeyInput, ModeResult

# Textual names that differ from the editor's canonical key names.
_TEXTUAL_KEYS = {
    "shift+tab": ("BackTab", ()),
    "back_tab": ("BackTab", ()),
}

_MODIFIERS = ("ctrl", "alt", "meta", "shift")

_FORWARDED_EVENTS = (
    "status",
    "mode.switch",
    "quit",
    "visual.start",
    "visual.end",
    "visual.selection",
    "command.start",
    "command.end",
    "command.submit",
    "search.start",
    "search.end",
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    render: Callable[[FrameView], None]
    update_status: Callable[[str], None] = _noop
    show_prompt: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


def translate_key(
    key: str, *, text: Optional[str] = None, modifiers: Iterable[str] = ()
) -> KeyInput:
    """Turn a Textual key name such as ``"ctrl+b"`` into a ``KeyInput``."""

    if key in _TEXTUAL_KEYS:
        name, fixed = _TEXTUAL_KEYS[key]
        return KeyInput(key=name, modifiers=fixed)

    parts = key.split("+") if len(key) > 1 else [key]
    mods = list(modifiers)
    while len(parts) > 1 and parts[0].lower() in _MODIFIERS:
        mods.append(parts.pop(0))
    base = "+".join(parts)
    normalized = tuple(dict.fromkeys(mod.capitalize() for mod in mods))

    printable = text if text and len(text) == 1 and text.isprintable() else None
    if printable and not {"Ctrl", "Alt", "Meta"} & set(normalized):
        return KeyInput(key=printable, modifiers=normalized, text=printable)
    if base == "space":
        base = " "
    return KeyInput(key=canonical_key_name(base), modifiers=normalized)


class TextualEditorAdapter:
    """Bridges Editor input handling and bus events to a Textual surface."""

    def __init__(self, editor: Editor, hooks: TextualUIHooks) -> None:
        self.editor = editor
        self.hooks = hooks
        self._subscribe_events()
        self.refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        key_input = translate_key(key, text=text, modifiers=modifiers)
        self._log_state("key ->", key=key_input.chord, text=text)
        result = self.editor.handle_key(key_input)
        self.refresh()
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def handle_textual_mouse(
        self, kind: str, column: int, row: int, *, button: str = "left"
    ) -> bool:
        handled = self.editor.handle_mouse(
            MouseInput(kind=kind, column=column, row=row, button=button)
        )
        if handled:
            self.refresh()
        return handled

    def open_path(self, path: str) -> None:
        self.editor.open_path(path)
        self.refresh()

    @property
    def quit_requested(self) -> bool:
        return self.editor.quit_requested

    def refresh(self) -> None:
        frame = self.editor.frame()
        self.hooks.render(frame)
        self.hooks.show_prompt(frame.prompt or "")
        latest = self.editor.status.latest
        if latest:
            self.hooks.update_status(latest)

    def _subscribe_events(self) -> None:
        bus = self.editor.context.bus
        for event in _FORWARDED_EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name == "status" and isinstance(payload, str):
            self.hooks.update_status(payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        editor = self.editor
        return {
            "mode": editor.mode,
            "cursor": tuple(editor.buffer.cursor),
            "tab": editor.tabs.active_index,
            "lines": editor.buffer.line_count,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "translate_key"]
