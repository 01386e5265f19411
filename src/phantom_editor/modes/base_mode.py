"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from phantom_editor.buffer import TextBuffer
from phantom_editor.keymaps.normalizer import chord_for
from phantom_editor.runtime.status import StatusLog
from phantom_editor.services import (
    ClipboardProvider,
    DirectoryBrowser,
    FileSystem,
    MemoryClipboard,
)
from phantom_editor.tabs import Tab, TabManager

NORMAL = "normal"
INSERT = "insert"
VISUAL = "visual"
COMMAND = "command"
SEARCH = "search"
FILE_SELECT = "file_select"
DIRECTORY_NAV = "directory_nav"
SIDEBAR = "sidebar"


@dataclass(slots=True)
class KeyInput:
    """Raw key event passed to modes.

    ``text`` carries the character a printable key produces; it is ``None``
    for named keys such as ``Enter`` or ``F1``.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @property
    def chord(self) -> str:
        return chord_for(self.key, self.modifiers)

    @property
    def printable(self) -> Optional[str]:
        if self.text is None or len(self.text) != 1 or not self.text.isprintable():
            return None
        if {"Ctrl", "Alt"} & {mod.capitalize() for mod in self.modifiers}:
            return None
        return self.text


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``."""

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


@dataclass(slots=True)
class ViewFlags:
    show_debug: bool = False
    show_sidebar: bool = False
    show_minimap: bool = False


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode and action can access."""

    tabs: TabManager
    bus: "ModeBus"
    clipboard: ClipboardProvider = field(default_factory=MemoryClipboard)
    files: FileSystem = field(default_factory=FileSystem)
    status: StatusLog = field(default_factory=StatusLog)
    view: ViewFlags = field(default_factory=ViewFlags)
    browser: Optional[DirectoryBrowser] = None
    quit_requested: bool = False
    extras: Dict[str, object] = field(default_factory=dict)

    @property
    def tab(self) -> Tab:
        return self.tabs.active

    @property
    def buffer(self) -> TextBuffer:
        return self.tabs.active.buffer

    def report(self, message: str) -> None:
        """Append a user-facing status message."""

        self.status.push(message)
        self.bus.emit("status", message)


class ModeBus:
    """Minimal event bus letting modes exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"
    label: str = "MODE"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(
        self, previous: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del previous

    def on_exit(
        self, next_mode: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del next_mode

    def handle_key(
        self, key: KeyInput
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError


__all__ = [
    "KeyInput",
    "ModeResult",
    "ModeContext",
    "ModeBus",
    "Mode",
    "ViewFlags",
    "NORMAL",
    "INSERT",
    "VISUAL",
    "COMMAND",
    "SEARCH",
    "FILE_SELECT",
    "DIRECTORY_NAV",
    "SIDEBAR",
]
