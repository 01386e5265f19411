"""Actions that evaluate ``:`` command lines."""

from __future__ import annotations

from functools import partial
from typing import Callable, Dict, List, MutableMapping, cast

from phantom_editor.errors import EditorError, UnknownCommandError
from phantom_editor.modes.base_mode import NORMAL, ModeContext, ModeResult

from .core import quit_editor, report_error
from .files import open_file, save_file

CommandHandler = Callable[[ModeContext, List[str]], ModeResult]


def _command_state(context: ModeContext) -> MutableMapping[str, object]:
    state = cast(
        MutableMapping[str, object], context.extras.setdefault("command_state", {})
    )
    state.setdefault("text", "")
    return state


def execute_command(context: ModeContext, match) -> ModeResult:
    del match
    state = _command_state(context)
    text = str(state.get("text", "")).strip()
    context.bus.emit("command.submit", text)
    state["text"] = ""
    if not text:
        return ModeResult(consumed=True, switch_to=NORMAL, status="command_empty")

    command, *args = text.split()
    handler = _COMMAND_HANDLERS.get(command)
    try:
        if handler is None:
            raise UnknownCommandError(text)
        return handler(context, args)
    except EditorError as exc:
        return report_error(context, exc, switch_to=NORMAL)


def _close_or_quit(context: ModeContext) -> ModeResult:
    if len(context.tabs) > 1:
        context.tabs.close_tab()
        return ModeResult(consumed=True, switch_to=NORMAL, status="command_close")
    quit_editor(context, None)
    return ModeResult(consumed=True, switch_to=NORMAL, status="command_quit")


def _handle_quit(
    context: ModeContext, args: List[str], *, force: bool = False
) -> ModeResult:
    del args
    if force:
        quit_editor(context, None)
        return ModeResult(consumed=True, switch_to=NORMAL, status="command_quit")
    return _close_or_quit(context)


def _handle_write(context: ModeContext, args: List[str]) -> ModeResult:
    target = save_file(context, args[0] if args else None)
    return ModeResult(
        consumed=True, switch_to=NORMAL, status="command_write", message=target
    )


def _handle_wq(context: ModeContext, args: List[str]) -> ModeResult:
    save_file(context, args[0] if args else None)
    return _close_or_quit(context)


def _handle_edit(context: ModeContext, args: List[str], *, command: str) -> ModeResult:
    if not args:
        raise UnknownCommandError(command)
    tab = open_file(context, args[0])
    return ModeResult(
        consumed=True, switch_to=NORMAL, status="command_edit", message=tab.title
    )


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "q": _handle_quit,
    "quit": _handle_quit,
    "q!": partial(_handle_quit, force=True),
    "quit!": partial(_handle_quit, force=True),
    "w": _handle_write,
    "write": _handle_write,
    "wq": _handle_wq,
    "x": _handle_wq,
    "e": partial(_handle_edit, command="e"),
    "edit": partial(_handle_edit, command="edit"),
}


__all__ = ["execute_command"]
