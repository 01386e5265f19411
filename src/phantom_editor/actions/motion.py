"""Cursor motion actions. Motions never touch the undo history."""

from __future__ import annotations

from phantom_editor.modes.base_mode import ModeContext, ModeResult


def _move(context: ModeContext, method: str) -> ModeResult:
    getattr(context.buffer, method)()
    return ModeResult(consumed=True, status="motion")


def move_left(context: ModeContext, match) -> ModeResult:
    del match
    return _move(context, "move_left")


def move_right(context: ModeContext, match) -> ModeResult:
    del match
    return _move(context, "move_right")


def move_up(context: ModeContext, match) -> ModeResult:
    del match
    return _move(context, "move_up")


def move_down(context: ModeContext, match) -> ModeResult:
    del match
    return _move(context, "move_down")


def move_home(context: ModeContext, match) -> ModeResult:
    del match
    return _move(context, "move_home")


def move_end(context: ModeContext, match) -> ModeResult:
    del match
    return _move(context, "move_end")


def page_up(context: ModeContext, match) -> ModeResult:
    del match
    tab = context.tab
    tab.viewport.page_up(tab.buffer)
    return ModeResult(consumed=True, status="motion")


def page_down(context: ModeContext, match) -> ModeResult:
    del match
    tab = context.tab
    tab.viewport.page_down(tab.buffer)
    return ModeResult(consumed=True, status="motion")


__all__ = [
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "move_home",
    "move_end",
    "page_up",
    "page_down",
]
