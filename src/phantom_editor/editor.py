"""Top-level editor controller tying tabs, modes and collaborators together."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Tuple

from phantom_editor.actions.core import copy_to_clipboard
from phantom_editor.actions.browser import enter_file_select_mode
from phantom_editor.actions.files import open_file
from phantom_editor.actions.visual import visual_selection
from phantom_editor.buffer import Cursor, SelectionRange, TextBuffer, minimap_rows
from phantom_editor.config import (
    ColorConfig,
    EditorSettings,
    load_colors,
    load_keymap,
    load_settings,
)
from phantom_editor.errors import EditorError
from phantom_editor.keymaps import KeymapRegistry
from phantom_editor.keymaps.defaults import load_default_keymaps
from phantom_editor.modes import (
    ALL_MODES,
    NORMAL,
    VISUAL,
    KeyInput,
    ModeBus,
    ModeContext,
    ModeManager,
    ModeResult,
    NormalMode,
    PromptMode,
    ViewFlags,
)
from phantom_editor.modes.keymap_helpers import run_action
from phantom_editor.runtime import StatusLog, telemetry
from phantom_editor.services import (
    ClipboardProvider,
    FileSystem,
    MemoryClipboard,
    default_clipboard,
)
from phantom_editor.tabs import Tab, TabManager

# Screen cell of the first text character: one border column, and the tab
# bar, title and border rows above the text.
TEXT_ORIGIN: Tuple[int, int] = (1, 4)

# Panel widths in cells, borders included for the sidebar. The minimap box
# adds a border column on each side, and its first row sits below the tab
# bar, the info line and its own top border.
SIDEBAR_WIDTH = 30
MINIMAP_WIDTH = 30
MINIMAP_TOP = 3

GLOBAL_TAB_KEYS = {f"F{number}": number for number in range(1, 10)}


@dataclass(frozen=True, slots=True)
class MouseInput:
    """Pointer event in screen cells; ``kind`` is ``down``, ``drag`` or ``up``."""

    kind: str
    column: int
    row: int
    button: str = "left"


@dataclass(frozen=True, slots=True)
class FrameView:
    """Everything a renderer needs for one frame."""

    lines: Tuple[str, ...]
    vertical_offset: int
    horizontal_offset: int
    cursor: Cursor
    selection: Optional[SelectionRange]
    mode: str
    mode_label: str
    tabs: Tuple[str, ...]
    active_index: int
    status: Tuple[str, ...]
    prompt: Optional[str]
    flags: ViewFlags
    syntax_label: str
    path: Optional[str]
    pending: str = ""
    browser_entries: Tuple[str, ...] = ()
    browser_index: int = 0
    browser_dir: Optional[str] = None


class Editor:
    """Owns the mode machine and the tab collection.

    Each ``handle_key`` call runs to completion: global keys first
    (``Ctrl+q`` and ``F1``..``F9``), then the active mode, then the active
    tab's viewport is brought back around the cursor.
    """

    def __init__(
        self,
        *,
        settings: Optional[EditorSettings] = None,
        clipboard: Optional[ClipboardProvider] = None,
        files: Optional[FileSystem] = None,
        registry: Optional[KeymapRegistry] = None,
        colors: Optional[ColorConfig] = None,
    ) -> None:
        self.settings = settings or EditorSettings()
        self.colors = colors or ColorConfig()
        tabs = TabManager(
            visible_height=self.settings.visible_height,
            visible_width=self.settings.visible_width,
            undo_limit=self.settings.undo_limit,
            coalesce_undo=self.settings.coalesce_undo,
        )
        self.context = ModeContext(
            tabs=tabs,
            bus=ModeBus(),
            clipboard=clipboard if clipboard is not None else MemoryClipboard(),
            files=files or FileSystem(),
            status=StatusLog(self.settings.status_history),
        )
        if registry is None:
            registry = KeymapRegistry(logger_name="phantom_editor.keymaps")
            load_default_keymaps(registry)
        self.manager = ModeManager(self.context, keymap_registry=registry)
        self.manager.register_modes(ALL_MODES)
        self._mouse_start: Optional[Cursor] = None
        self._mouse_end: Optional[Cursor] = None

    @classmethod
    def from_settings(
        cls,
        settings: Optional[EditorSettings] = None,
        *,
        clipboard: Optional[ClipboardProvider] = None,
    ) -> "Editor":
        """Build an editor with the user's keymap and colours applied."""

        settings = settings or load_settings()
        registry = KeymapRegistry(logger_name="phantom_editor.keymaps")
        report = load_keymap(registry, settings.config_dir)
        editor = cls(
            settings=settings,
            clipboard=clipboard if clipboard is not None else default_clipboard(),
            registry=registry,
            colors=load_colors(settings.config_dir),
        )
        if report.error:
            editor.context.report(report.error)
        return editor

    # -- state -------------------------------------------------------------

    @property
    def mode(self) -> str:
        return self.manager.active_name or NORMAL

    @property
    def tabs(self) -> TabManager:
        return self.context.tabs

    @property
    def tab(self) -> Tab:
        return self.context.tab

    @property
    def buffer(self) -> TextBuffer:
        return self.context.buffer

    @property
    def status(self) -> StatusLog:
        return self.context.status

    @property
    def quit_requested(self) -> bool:
        return self.context.quit_requested

    @property
    def mouse_selection(self) -> Optional[SelectionRange]:
        if self._mouse_start is None or self._mouse_end is None:
            return None
        return SelectionRange.mouse(self._mouse_start, self._mouse_end)

    # -- input -------------------------------------------------------------

    def handle_key(self, key: KeyInput) -> ModeResult:
        chord = key.chord
        if self.context.view.show_debug:
            self.context.report(f"Key pressed: {chord}")

        if chord == "Ctrl+q":
            return run_action(self.context, "quit")

        number = GLOBAL_TAB_KEYS.get(key.key)
        if number is not None and number <= len(self.tabs):
            result = run_action(self.context, f"switch_to_tab_{number}")
        else:
            result = self.manager.handle_key(key)
        self.tab.sync_viewport()
        return result

    def handle_mouse(self, event: MouseInput) -> bool:
        """Left press/drag marks a range; right release copies it.

        A left press on the minimap jumps to the line it stands for instead.
        """

        if event.button == "left" and event.kind == "down":
            line = self.minimap_line_at(event.column, event.row)
            if line is not None:
                self.jump_to_line(line)
                return True
        position = self.screen_to_content(event.column, event.row)
        if event.button == "left" and event.kind == "down":
            self._mouse_start = self._mouse_end = position
            return True
        if event.button == "left" and event.kind == "drag":
            if self._mouse_start is None:
                self._mouse_start = position
            self._mouse_end = position
            return True
        if event.button == "right" and event.kind == "up":
            selection = self.mouse_selection
            if selection is not None:
                text = selection.extract(self.buffer.lines)
                if copy_to_clipboard(self.context, text):
                    self.context.report("Text copied to clipboard")
            self._mouse_start = self._mouse_end = None
            return True
        return False

    def screen_to_content(self, column: int, row: int) -> Cursor:
        origin_x, origin_y = TEXT_ORIGIN
        left = origin_x + self._text_left()
        return self.tab.viewport.to_content(column - left, row - origin_y)

    def _text_left(self) -> int:
        return SIDEBAR_WIDTH if self.context.browser is not None else 0

    def minimap_line_at(self, column: int, row: int) -> Optional[int]:
        """Buffer line behind a minimap cell, or ``None`` outside the minimap."""

        if not self.context.view.show_minimap:
            return None
        left = self._text_left() + self.settings.visible_width + 2
        if not left <= column < left + MINIMAP_WIDTH + 2:
            return None
        rows = minimap_rows(self.buffer.line_count, self.settings.visible_height)
        index = row - MINIMAP_TOP
        if not 0 <= index < len(rows):
            return None
        first, last = rows[index]
        return min((first + last) // 2, self.buffer.line_count - 1)

    def jump_to_line(self, line: int) -> None:
        """Move the cursor to ``line`` and scroll so it sits mid-screen."""

        self.buffer.set_cursor(self.buffer.cursor.column, line)
        self.tab.viewport.center_on(self.buffer.cursor.line)
        self.tab.sync_viewport()
        telemetry.record_event("minimap.jump", data={"line": self.buffer.cursor.line})

    def open_path(self, path: str | Path) -> None:
        """Open a file, or browse a directory in file-select mode."""

        try:
            if self.context.files.is_dir(path):
                self._apply(enter_file_select_mode(self.context, path))
            else:
                open_file(self.context, path)
        except EditorError as exc:
            self.context.report(str(exc))
        self.tab.sync_viewport()

    def _apply(self, result: ModeResult) -> None:
        if result.switch_to:
            self.manager.switch_mode(result.switch_to)

    # -- rendering ---------------------------------------------------------

    def frame(self) -> FrameView:
        tab = self.tab
        buffer = tab.buffer
        mode = self.manager.get_mode(self.mode)
        browser = self.context.browser

        selection: Optional[SelectionRange] = None
        if self.mode == VISUAL:
            selection = visual_selection(self.context)
        elif self.mouse_selection is not None:
            selection = self.mouse_selection

        prompt: Optional[str] = None
        if isinstance(mode, PromptMode):
            prompt = f"{mode.prefix}{mode.current_text}"

        pending = ""
        if isinstance(mode, NormalMode):
            pending = "".join(mode.pending)

        return FrameView(
            lines=tuple(tab.viewport.visible_lines(buffer)),
            vertical_offset=tab.viewport.vertical_offset,
            horizontal_offset=tab.viewport.horizontal_offset,
            cursor=buffer.cursor,
            selection=selection,
            mode=self.mode,
            mode_label=mode.label,
            tabs=tuple(item.title for item in self.tabs),
            active_index=self.tabs.active_index,
            status=tuple(self.status),
            prompt=prompt,
            flags=replace(self.context.view),
            syntax_label=buffer.syntax,
            path=buffer.path,
            pending=pending,
            browser_entries=tuple(browser.labels()) if browser else (),
            browser_index=browser.selected_index if browser else 0,
            browser_dir=str(browser.current_dir) if browser else None,
        )


__all__ = [
    "Editor",
    "FrameView",
    "MouseInput",
    "MINIMAP_TOP",
    "MINIMAP_WIDTH",
    "SIDEBAR_WIDTH",
    "TEXT_ORIGIN",
]
