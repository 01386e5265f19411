"""Modes that hand arrow, Enter and Esc keys to the directory browser."""

from __future__ import annotations

from phantom_editor.runtime import telemetry

from .base_mode import (
    DIRECTORY_NAV,
    FILE_SELECT,
    NORMAL,
    SIDEBAR,
    KeyInput,
    Mode,
    ModeContext,
    ModeResult,
)
from .keymap_helpers import execute_match, key_to_token, lookup

# All browser modes read the ``file_select_mode`` table.
BROWSER_TABLE = FILE_SELECT
BROWSER_MODES = frozenset({FILE_SELECT, DIRECTORY_NAV, SIDEBAR})


class BrowserMode(Mode):
    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger(f"phantom_editor.modes.{self.name}")

    def on_exit(self, next_mode: str | None) -> None:
        if next_mode != SIDEBAR:
            self.context.view.show_sidebar = False
        if next_mode not in BROWSER_MODES:
            self.context.browser = None

    def handle_key(self, key: KeyInput) -> ModeResult:
        if self.context.browser is None:
            return ModeResult(consumed=True, switch_to=NORMAL, status="no_browser")
        match = lookup(self.context, BROWSER_TABLE, (key_to_token(key),))
        if match is not None:
            return execute_match(self.context, match)
        return ModeResult(consumed=False, status="miss")


class FileSelectMode(BrowserMode):
    name = FILE_SELECT
    label = "FILE SELECT"


class DirectoryNavMode(BrowserMode):
    name = DIRECTORY_NAV
    label = "DIRECTORY NAV"


class SidebarMode(BrowserMode):
    """Browser shown in the sidebar; the sidebar toggle chord also closes it."""

    name = SIDEBAR
    label = "SIDEBAR"

    def handle_key(self, key: KeyInput) -> ModeResult:
        match = lookup(self.context, NORMAL, (key_to_token(key),))
        if match is not None and match.action.id == "toggle_sidebar":
            return execute_match(self.context, match)
        return super().handle_key(key)


__all__ = [
    "BrowserMode",
    "FileSelectMode",
    "DirectoryNavMode",
    "SidebarMode",
]
