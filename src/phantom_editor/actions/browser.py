"""Actions behind the sidebar, directory navigation and file selection."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from phantom_editor.errors import EditorError
from phantom_editor.modes.base_mode import (
    DIRECTORY_NAV,
    FILE_SELECT,
    NORMAL,
    SIDEBAR,
    ModeContext,
    ModeResult,
)
from phantom_editor.services import DirectoryBrowser

from .core import report_error
from .files import open_file


def browse_directory(context: ModeContext, directory: str | Path, mode: str) -> ModeResult:
    """Point a fresh browser at ``directory`` and switch to ``mode``."""

    try:
        context.browser = DirectoryBrowser(directory, files=context.files)
    except EditorError as exc:
        return report_error(context, exc)
    if mode == SIDEBAR:
        context.view.show_sidebar = True
    return ModeResult(consumed=True, switch_to=mode, status="browse")


def _start_directory(context: ModeContext) -> Path:
    path: Optional[str] = context.buffer.path
    if path:
        return Path(path).parent
    return Path(os.getcwd())


def toggle_sidebar(context: ModeContext, match) -> ModeResult:
    del match
    if context.view.show_sidebar:
        context.view.show_sidebar = False
        return ModeResult(consumed=True, switch_to=NORMAL, status="browse")
    return browse_directory(context, _start_directory(context), SIDEBAR)


def enter_directory_nav_mode(context: ModeContext, match) -> ModeResult:
    del match
    return browse_directory(context, _start_directory(context), DIRECTORY_NAV)


def enter_file_select_mode(context: ModeContext, directory: str | Path) -> ModeResult:
    return browse_directory(context, directory, FILE_SELECT)


def select_file(context: ModeContext, match) -> ModeResult:
    del match
    browser = context.browser
    if browser is None:
        return ModeResult(consumed=True, switch_to=NORMAL, status="no_browser")
    try:
        chosen = browser.enter()
        if chosen is None:
            return ModeResult(consumed=True, status="browse")
        open_file(context, chosen)
    except EditorError as exc:
        return report_error(context, exc)
    return ModeResult(consumed=True, switch_to=NORMAL, status="open")


def exit_file_select_mode(context: ModeContext, match) -> ModeResult:
    del match
    return ModeResult(consumed=True, switch_to=NORMAL, status="browse")


def browser_up(context: ModeContext, match) -> ModeResult:
    del match
    if context.browser is not None:
        context.browser.up()
    return ModeResult(consumed=True, status="browse")


def browser_down(context: ModeContext, match) -> ModeResult:
    del match
    if context.browser is not None:
        context.browser.down()
    return ModeResult(consumed=True, status="browse")


__all__ = [
    "browse_directory",
    "toggle_sidebar",
    "enter_directory_nav_mode",
    "enter_file_select_mode",
    "select_file",
    "exit_file_select_mode",
    "browser_up",
    "browser_down",
]
