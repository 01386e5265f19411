"""Canonical chord strings for raw key events and keymap files."""

from __future__ import annotations

from typing import Iterable, Tuple

MODIFIER_ORDER: Tuple[str, ...] = ("Ctrl", "Alt", "Shift")

_MODIFIER_ALIASES = {
    "ctrl": "Ctrl",
    "control": "Ctrl",
    "alt": "Alt",
    "meta": "Alt",
    "option": "Alt",
    "shift": "Shift",
}

NAMED_KEYS: Tuple[str, ...] = (
    "Enter",
    "Esc",
    "Backspace",
    "Delete",
    "Insert",
    "Left",
    "Right",
    "Up",
    "Down",
    "Home",
    "End",
    "PageUp",
    "PageDown",
    "Tab",
    "BackTab",
    "Space",
    *(f"F{n}" for n in range(1, 13)),
)

_KEY_ALIASES = {name.lower(): name for name in NAMED_KEYS}
_KEY_ALIASES.update(
    {
        "escape": "Esc",
        "<esc>": "Esc",
        "return": "Enter",
        "<cr>": "Enter",
        "bs": "Backspace",
        "del": "Delete",
        "ins": "Insert",
        "page_up": "PageUp",
        "pgup": "PageUp",
        "page_down": "PageDown",
        "pgdn": "PageDown",
        "back_tab": "BackTab",
    }
)


def canonical_key_name(key: str) -> str:
    """Map key-name aliases onto ``NAMED_KEYS``; other keys pass through."""

    if len(key) == 1:
        return key
    return _KEY_ALIASES.get(key.lower(), key)


def canonical_modifiers(modifiers: Iterable[str]) -> Tuple[str, ...]:
    found = set()
    for modifier in modifiers:
        cleaned = modifier.strip().lower()
        if not cleaned:
            continue
        try:
            found.add(_MODIFIER_ALIASES[cleaned])
        except KeyError as exc:
            raise ValueError(f"Unknown modifier '{modifier}'") from exc
    return tuple(name for name in MODIFIER_ORDER if name in found)


def chord_for(key: str, modifiers: Iterable[str] = ()) -> str:
    """Render one key press as ``Ctrl+Alt+Shift+<key>``.

    Shift is folded away for printable characters, which already carry it
    (``O`` rather than ``Shift+o``), and for ``BackTab``.
    """

    if not key:
        raise ValueError("key cannot be empty")
    name = canonical_key_name(key)
    mods = canonical_modifiers(modifiers)
    if (len(name) == 1 and name.isprintable()) or name == "BackTab":
        mods = tuple(mod for mod in mods if mod != "Shift")
    return "+".join((*mods, name))


def parse_chord(text: str) -> Tuple[str, ...]:
    """Split a keymap-file chord into canonical strokes.

    ``"Ctrl+b"`` and ``"F1"`` are single strokes; ``"dd"`` is two.
    """

    if not text:
        raise ValueError("chord cannot be empty")
    if len(text) == 1:
        return (text,)
    if "+" in text[:-1]:
        head, _, key = text.rpartition("+")
        if not key:
            head, key = head[:-1], "+"
        return (chord_for(key, head.split("+")),)
    name = canonical_key_name(text)
    if name in NAMED_KEYS:
        return (name,)
    return tuple(text)


__all__ = [
    "NAMED_KEYS",
    "MODIFIER_ORDER",
    "canonical_key_name",
    "canonical_modifiers",
    "chord_for",
    "parse_chord",
]
