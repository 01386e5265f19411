"""Opening files into tabs and writing buffers back to disk."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from phantom_editor.buffer import PLAIN_TEXT, TextBuffer
from phantom_editor.errors import FileIOError, NoFilenameError
from phantom_editor.modes.base_mode import ModeContext
from phantom_editor.runtime import telemetry
from phantom_editor.services import detect_syntax
from phantom_editor.tabs import Tab


def open_file(context: ModeContext, path: str | Path) -> Tab:
    """Load ``path`` into a tab.

    A path that does not exist yet opens an empty buffer bound to it. The
    pristine scratch tab is replaced rather than kept alongside.
    """

    files = context.files
    name = str(path)
    with telemetry.span("files::open", component="files", metadata={"path": name}):
        if files.is_dir(path):
            raise FileIOError(name, "is a directory")
        exists = files.exists(path)
        lines = files.read_file(path) if exists else [""]
        buffer = TextBuffer(lines=lines, path=name, syntax=detect_syntax(name))
        tab = context.tabs.open_buffer(buffer)

    if exists:
        context.report(f"File opened: {name}")
    else:
        context.report(f"New file: {name} (not yet saved)")
    return tab


def save_file(context: ModeContext, path: Optional[str | Path] = None) -> str:
    """Write the active buffer, binding it to ``path`` when one is given."""

    buffer = context.buffer
    target = str(path) if path is not None else buffer.path
    if not target:
        raise NoFilenameError()
    with telemetry.span("files::save", component="files", metadata={"path": target}):
        context.files.write_file(target, buffer.lines)
    buffer.path = target
    if buffer.syntax == PLAIN_TEXT:
        buffer.syntax = detect_syntax(target)
    context.report(f"File saved: {target}")
    return target


__all__ = ["open_file", "save_file"]
