"""Buffer-mutating actions; each one is a single undo step."""

from __future__ import annotations

from phantom_editor.buffer import SelectionRange, clamp_cursor
from phantom_editor.buffer.state import ORIGIN
from phantom_editor.modes.base_mode import INSERT, ModeContext, ModeResult

from .core import copy_to_clipboard, read_clipboard


def _edit(context: ModeContext, label: str, method: str) -> ModeResult:
    with context.tab.transaction(label) as txn:
        getattr(context.buffer, method)()
    return ModeResult(consumed=True, status="edit" if txn.changed else "noop")


def insert_newline(context: ModeContext, match) -> ModeResult:
    del match
    return _edit(context, "insert_newline", "insert_newline")


def backspace(context: ModeContext, match) -> ModeResult:
    del match
    return _edit(context, "backspace", "backspace")


def delete_char(context: ModeContext, match) -> ModeResult:
    del match
    return _edit(context, "delete_char", "delete_char")


def delete_line(context: ModeContext, match) -> ModeResult:
    """Remove the cursor line; the removed text goes to the clipboard."""

    del match
    with context.tab.transaction("delete_line"):
        removed = context.buffer.delete_line()
    copy_to_clipboard(context, removed)
    return ModeResult(consumed=True, status="edit")


def yank_line(context: ModeContext, match) -> ModeResult:
    del match
    copied = copy_to_clipboard(context, context.buffer.current_line)
    return ModeResult(consumed=True, status="yank" if copied else "error")


def _paste(context: ModeContext, label: str, method: str) -> ModeResult:
    text = read_clipboard(context)
    if text is None:
        return ModeResult(consumed=True, status="error")
    with context.tab.transaction(label):
        getattr(context.buffer, method)(text)
    return ModeResult(consumed=True, status="edit")


def paste_after(context: ModeContext, match) -> ModeResult:
    """Paste at the cursor; the rest of the line moves to its own line."""

    del match
    return _paste(context, "paste_after", "paste_lines")


def paste_clipboard(context: ModeContext, match) -> ModeResult:
    del match
    return _paste(context, "paste_clipboard", "insert_text")


def copy_selection(context: ModeContext, match) -> ModeResult:
    """Copy from the last visual anchor to the cursor."""

    del match
    buffer = context.buffer
    state = context.extras.get("visual_state")
    anchor = state.get("anchor", ORIGIN) if isinstance(state, dict) else ORIGIN
    anchor = clamp_cursor(buffer.lines, anchor)
    text = SelectionRange.visual(anchor, buffer.cursor).extract(buffer.lines)
    if not copy_to_clipboard(context, text):
        return ModeResult(consumed=True, status="error")
    context.report("Text copied to clipboard")
    return ModeResult(consumed=True, status="yank")


def open_line_below(context: ModeContext, match) -> ModeResult:
    del match
    with context.tab.transaction("open_line_below"):
        context.buffer.insert_line_below()
    return ModeResult(consumed=True, switch_to=INSERT, status="edit")


def open_line_above(context: ModeContext, match) -> ModeResult:
    del match
    with context.tab.transaction("open_line_above"):
        context.buffer.insert_line_above()
    return ModeResult(consumed=True, switch_to=INSERT, status="edit")


def undo(context: ModeContext, match) -> ModeResult:
    del match
    return ModeResult(consumed=True, status="undo" if context.tab.undo() else "noop")


def redo(context: ModeContext, match) -> ModeResult:
    del match
    return ModeResult(consumed=True, status="redo" if context.tab.redo() else "noop")


__all__ = [
    "insert_newline",
    "backspace",
    "delete_char",
    "delete_line",
    "yank_line",
    "paste_after",
    "paste_clipboard",
    "copy_selection",
    "open_line_below",
    "open_line_above",
    "undo",
    "redo",
]
