"""Clipboard providers.

The editor talks to a ``ClipboardProvider``; the system clipboard goes
through pyperclip, and the in-memory and null providers stand in when no
system clipboard is reachable.
"""

from __future__ import annotations

from typing import Protocol

import pyperclip

from phantom_editor.errors import ClipboardError
from phantom_editor.runtime import telemetry


class ClipboardProvider(Protocol):
    def get_contents(self) -> str:
        ...

    def set_contents(self, text: str) -> None:
        ...


class SystemClipboard:
    """System clipboard via pyperclip."""

    def get_contents(self) -> str:
        try:
            return pyperclip.paste() or ""
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(str(exc)) from exc

    def set_contents(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(str(exc)) from exc


class MemoryClipboard:
    """Process-local clipboard."""

    def __init__(self, initial: str = "") -> None:
        self.contents = initial

    def get_contents(self) -> str:
        return self.contents

    def set_contents(self, text: str) -> None:
        self.contents = text


class NullClipboard:
    """Accepts writes and always reads back empty."""

    def get_contents(self) -> str:
        return ""

    def set_contents(self, text: str) -> None:
        del text


def default_clipboard() -> ClipboardProvider:
    """Prefer the system clipboard, falling back to an in-memory one."""

    system = SystemClipboard()
    try:
        system.get_contents()
    except ClipboardError as exc:
        telemetry.record_event(
            "clipboard.unavailable", level="warning", data={"reason": str(exc)}
        )
        return MemoryClipboard()
    return system


__all__ = [
    "ClipboardProvider",
    "SystemClipboard",
    "MemoryClipboard",
    "NullClipboard",
    "default_clipboard",
]
