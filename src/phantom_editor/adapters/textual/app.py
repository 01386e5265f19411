"""Textual application that hosts the editor."""

from __future__ import annotations

from typing import List, Optional

from rich.style import Style
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static

from phantom_editor.buffer import SelectionRange, minimap_rows
from phantom_editor.config import ColorConfig
from phantom_editor.editor import MINIMAP_WIDTH, SIDEBAR_WIDTH, Editor, FrameView
from phantom_editor.runtime import telemetry
from phantom_editor.services import highlight_line

from .controller import TextualEditorAdapter, TextualUIHooks

_SPAN_COLORS = {
    "comment": "comment",
    "keyword": "keyword",
    "string": "string",
    "function": "function",
    "number": "number",
}


def _style(colors: ColorConfig, name: str, **extra: object) -> Style:
    return Style(color=getattr(colors, name), **extra)


def _selected_columns(
    selection: SelectionRange, number: int, line: str
) -> Optional[tuple[int, int]]:
    start, end = selection.start, selection.end
    if not start.line <= number <= end.line:
        return None
    first = start.column if number == start.line else 0
    if number == end.line:
        last = end.column + 1 if selection.inclusive else end.column
    else:
        last = len(line) + 1
    return first, max(first, last)


def render_line(
    line: str,
    number: int,
    frame: FrameView,
    colors: ColorConfig,
    width: int,
) -> Text:
    """Highlighted, selection-marked slice of one buffer line."""

    text = Text(no_wrap=True)
    for kind, chunk in highlight_line(line, frame.syntax_label):
        color = _SPAN_COLORS.get(kind, "foreground")
        text.append(chunk, style=_style(colors, color))
    text.append(" ")

    if frame.selection is not None:
        columns = _selected_columns(frame.selection, number, line)
        if columns is not None:
            text.stylize(Style(bgcolor=colors.selection), *columns)
    if number == frame.cursor.line:
        column = frame.cursor.column
        text.stylize(Style(reverse=True, color=colors.cursor), column, column + 1)

    start = frame.horizontal_offset
    return text[start : start + width]


def render_body(frame: FrameView, colors: ColorConfig, width: int) -> Text:
    rendered = [
        render_line(line, frame.vertical_offset + index, frame, colors, width)
        for index, line in enumerate(frame.lines)
    ]
    return Text("\n").join(rendered)


def render_tabs(frame: FrameView, colors: ColorConfig) -> Text:
    bar = Text(style=Style(bgcolor=colors.tab_background))
    for index, title in enumerate(frame.tabs):
        name = "tab_active" if index == frame.active_index else "tab_inactive"
        bar.append(f" {index + 1}:{title} ", style=_style(colors, name))
    return bar


def render_browser(frame: FrameView, colors: ColorConfig) -> Text:
    listing = Text(no_wrap=True)
    if frame.browser_dir:
        listing.append(f"{frame.browser_dir}\n", style=Style(bold=True))
    for index, label in enumerate(frame.browser_entries):
        style = Style(color=colors.file_selector_foreground)
        if index == frame.browser_index:
            style = Style(
                color=colors.file_selector_foreground,
                bgcolor=colors.file_selector_highlight,
            )
        listing.append(f"{label}\n", style=style)
    return listing


def render_minimap(
    lines: List[str], frame: FrameView, colors: ColorConfig, height: int
) -> Text:
    """One row per ``minimap_rows`` range, showing its first line."""

    shown = max(1, len(frame.lines))
    top, bottom = frame.vertical_offset, frame.vertical_offset + shown - 1
    minimap = Text(no_wrap=True)
    for first, last in minimap_rows(len(lines), height):
        style = Style(color=colors.minimap_content)
        if first <= bottom and last >= top:
            style = Style(color=colors.foreground, bgcolor=colors.minimap_highlight)
        minimap.append(f"{lines[first][:MINIMAP_WIDTH]}\n", style=style)
    return minimap


class PhantomApp(App[None]):
    """Full-screen editor: tab bar, info line, text area and panels."""

    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        layout: vertical;
    }

    #tab-bar, #info-line, #status-line, #prompt-line {
        height: 1;
    }

    #main {
        height: 1fr;
    }

    #sidebar {
        display: none;
        border: round $accent;
    }

    #body {
        border: round $accent;
        padding: 1 0 0 0;
    }

    #minimap {
        display: none;
        border: round $accent;
    }

    #debug-panel {
        height: 7;
        display: none;
        border: round $warning;
    }
    """

    def __init__(self, editor: Editor, *, path: Optional[str] = None) -> None:
        super().__init__()
        self.editor = editor
        self._initial_path = path
        self.adapter: TextualEditorAdapter | None = None
        self._logger = telemetry.get_logger("phantom_editor.adapters.textual")
        self._dragging = False

    def compose(self) -> ComposeResult:
        yield Static("", id="tab-bar")
        yield Static("", id="info-line")
        with Horizontal(id="main"):
            yield Static("", id="sidebar")
            yield Static("", id="body")
            yield Static("", id="minimap")
        yield Static("", id="debug-panel")
        yield Static("", id="status-line")
        yield Static("", id="prompt-line")

    def on_mount(self) -> None:
        # Widths match the geometry Editor uses to map mouse cells.
        self.query_one("#sidebar", Static).styles.width = SIDEBAR_WIDTH
        self.query_one("#body", Static).styles.width = (
            self.editor.settings.visible_width + 2
        )
        self.query_one("#minimap", Static).styles.width = MINIMAP_WIDTH + 2
        hooks = TextualUIHooks(
            render=self._render_frame,
            update_status=self._update_status,
            show_prompt=self._show_prompt,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.editor, hooks)
        if self._initial_path:
            self.adapter.open_path(self._initial_path)

    def on_key(self, event: events.Key) -> None:
        if self.adapter is None:
            return
        event.stop()
        event.prevent_default()
        self.adapter.handle_textual_key(event.key, text=event.character)
        if self.adapter.quit_requested:
            self.exit()

    def on_mouse_down(self, event: events.MouseDown) -> None:
        if self.adapter is None:
            return
        if event.button == 1:
            self._dragging = True
            self.adapter.handle_textual_mouse("down", event.screen_x, event.screen_y)

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self.adapter is not None and self._dragging:
            self.adapter.handle_textual_mouse("drag", event.screen_x, event.screen_y)

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if self.adapter is None:
            return
        if event.button == 1:
            self._dragging = False
        elif event.button == 3:
            self.adapter.handle_textual_mouse(
                "up", event.screen_x, event.screen_y, button="right"
            )

    def _render_frame(self, frame: FrameView) -> None:
        colors = self.editor.colors
        width = self.editor.settings.visible_width
        self.query_one("#tab-bar", Static).update(render_tabs(frame, colors))

        info = f" {frame.mode_label} | {frame.path or '[No Name]'} | {frame.syntax_label}"
        info += f" | Ln {frame.cursor.line + 1}, Col {frame.cursor.column + 1}"
        if frame.pending:
            info += f" | {frame.pending}"
        self.query_one("#info-line", Static).update(info)
        self.query_one("#body", Static).update(render_body(frame, colors, width))

        sidebar = self.query_one("#sidebar", Static)
        sidebar.display = bool(frame.browser_entries)
        if frame.browser_entries:
            sidebar.update(render_browser(frame, colors))

        minimap = self.query_one("#minimap", Static)
        minimap.display = frame.flags.show_minimap
        if frame.flags.show_minimap:
            height = self.editor.settings.visible_height
            minimap.update(
                render_minimap(self.editor.buffer.lines, frame, colors, height)
            )

        debug = self.query_one("#debug-panel", Static)
        debug.display = frame.flags.show_debug
        if frame.flags.show_debug:
            debug.update("\n".join(frame.status))

    def _update_status(self, status: str) -> None:
        self.query_one("#status-line", Static).update(status)

    def _show_prompt(self, prompt: str) -> None:
        self.query_one("#prompt-line", Static).update(prompt)

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)


__all__ = ["PhantomApp", "render_body", "render_line"]
