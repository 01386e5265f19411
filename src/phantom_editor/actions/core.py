"""Core action implementations shared across modes."""

from __future__ import annotations

from typing import Optional

from phantom_editor.errors import ClipboardError, EditorError
from phantom_editor.modes.base_mode import (
    COMMAND,
    INSERT,
    NORMAL,
    SEARCH,
    VISUAL,
    ModeContext,
    ModeResult,
)
from phantom_editor.runtime import telemetry


def report_error(
    context: ModeContext, error: EditorError, *, switch_to: Optional[str] = None
) -> ModeResult:
    """Turn a recoverable editor error into a status message."""

    context.report(str(error))
    telemetry.record_event(
        "action.error",
        level="warning",
        data={"error": type(error).__name__, "message": str(error)},
    )
    return ModeResult(
        consumed=True, switch_to=switch_to, status="error", message=str(error)
    )


def copy_to_clipboard(context: ModeContext, text: str) -> bool:
    try:
        context.clipboard.set_contents(text)
    except ClipboardError as exc:
        context.report(f"Failed to copy to clipboard: {exc}")
        telemetry.record_event("clipboard.copy_failed", level="warning")
        return False
    return True


def read_clipboard(context: ModeContext) -> Optional[str]:
    try:
        return context.clipboard.get_contents()
    except ClipboardError as exc:
        context.report(f"Failed to paste from clipboard: {exc}")
        telemetry.record_event("clipboard.paste_failed", level="warning")
        return None


def enter_insert_mode(context: ModeContext, match) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to=INSERT, message="enter_insert")


def append(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_right()
    return ModeResult(consumed=True, switch_to=INSERT, message="append")


def return_to_normal(context: ModeContext, match) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to=NORMAL, message="exit_to_normal")


def enter_visual_mode(context: ModeContext, match) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to=VISUAL, message="enter_visual")


def enter_command_mode(context: ModeContext, match) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to=COMMAND, message="enter_command")


def enter_search_mode(context: ModeContext, match) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to=SEARCH, message="enter_search")


def toggle_debug_menu(context: ModeContext, match) -> ModeResult:
    del match
    view = context.view
    view.show_debug = not view.show_debug
    context.report("Debug menu shown" if view.show_debug else "Debug menu hidden")
    return ModeResult(consumed=True, status="view")


def toggle_minimap(context: ModeContext, match) -> ModeResult:
    del match
    view = context.view
    if view.show_minimap:
        view.show_minimap = False
        context.report("Minimap hidden")
    elif any(context.buffer.lines):
        view.show_minimap = True
        context.report("Minimap shown")
    else:
        context.report("Cannot show minimap: No content")
        return ModeResult(consumed=True, status="refused")
    return ModeResult(consumed=True, status="view")


def quit_editor(context: ModeContext, match) -> ModeResult:
    del match
    context.quit_requested = True
    context.bus.emit("quit", None)
    return ModeResult(consumed=True, status="quit")


__all__ = [
    "report_error",
    "copy_to_clipboard",
    "read_clipboard",
    "enter_insert_mode",
    "append",
    "return_to_normal",
    "enter_visual_mode",
    "enter_command_mode",
    "enter_search_mode",
    "toggle_debug_menu",
    "toggle_minimap",
    "quit_editor",
]
