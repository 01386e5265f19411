"""Actions dedicated to Visual mode selection management."""

from __future__ import annotations

from typing import MutableMapping, cast

from phantom_editor.buffer import Cursor, SelectionRange, clamp_cursor
from phantom_editor.modes.base_mode import NORMAL, ModeContext, ModeResult

from .core import copy_to_clipboard


def _visual_state(context: ModeContext) -> MutableMapping[str, object]:
    state = cast(
        MutableMapping[str, object], context.extras.setdefault("visual_state", {})
    )
    if "anchor" not in state:
        state["anchor"] = context.buffer.cursor
    return state


def visual_anchor(context: ModeContext) -> Cursor:
    anchor = cast(Cursor, _visual_state(context)["anchor"])
    return clamp_cursor(context.buffer.lines, anchor)


def visual_selection(context: ModeContext) -> SelectionRange:
    """Anchor-to-cursor range, including the character under the end."""

    return SelectionRange.visual(visual_anchor(context), context.buffer.cursor)


def yank_selection(context: ModeContext, match) -> ModeResult:
    del match
    text = visual_selection(context).extract(context.buffer.lines)
    if copy_to_clipboard(context, text):
        context.report("Text copied to clipboard")
    return ModeResult(consumed=True, switch_to=NORMAL, status="yank")


def delete_selection(context: ModeContext, match) -> ModeResult:
    del match
    selection = visual_selection(context)
    buffer = context.buffer
    with context.tab.transaction("delete_selection"):
        lines, cursor = selection.delete(buffer.lines)
        buffer.replace(lines, cursor)
    return ModeResult(consumed=True, switch_to=NORMAL, status="edit")


def swap_anchor(context: ModeContext, match) -> ModeResult:
    del match
    anchor = visual_anchor(context)
    _visual_state(context)["anchor"] = context.buffer.cursor
    context.buffer.set_cursor(*anchor)
    context.bus.emit(
        "visual.selection", {"anchor": context.buffer.cursor, "cursor": anchor}
    )
    return ModeResult(consumed=True, status="visual_select")


__all__ = [
    "visual_anchor",
    "visual_selection",
    "yank_selection",
    "delete_selection",
    "swap_anchor",
]
