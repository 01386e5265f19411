"""Tab lifecycle actions."""

from __future__ import annotations

from phantom_editor.modes.base_mode import ModeContext, ModeResult


def next_tab(context: ModeContext, match) -> ModeResult:
    del match
    context.tabs.next_tab()
    return ModeResult(consumed=True, status="tab")


def previous_tab(context: ModeContext, match) -> ModeResult:
    del match
    context.tabs.previous_tab()
    return ModeResult(consumed=True, status="tab")


def new_tab(context: ModeContext, match) -> ModeResult:
    del match
    context.tabs.new_tab()
    return ModeResult(consumed=True, status="tab")


def close_tab(context: ModeContext, match) -> ModeResult:
    del match
    closed = context.tabs.close_tab()
    return ModeResult(consumed=True, status="tab" if closed else "refused")


def switch_to_tab(context: ModeContext, match, *, index: int) -> ModeResult:
    del match
    if context.tabs.switch_to_tab(index):
        context.report(f"Switched to tab {index + 1}")
        return ModeResult(consumed=True, status="tab")
    context.report(f"Tab {index + 1} does not exist")
    return ModeResult(consumed=True, status="refused")


__all__ = [
    "next_tab",
    "previous_tab",
    "new_tab",
    "close_tab",
    "switch_to_tab",
]
