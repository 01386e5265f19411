"""External collaborators: clipboard, filesystem, directory browser, syntax."""

from .browser import DirectoryBrowser
from .clipboard import (
    ClipboardProvider,
    MemoryClipboard,
    NullClipboard,
    SystemClipboard,
    default_clipboard,
)
from .filesystem import FileSystem
from .syntax import detect_syntax, highlight_line

__all__ = [
    "ClipboardProvider",
    "SystemClipboard",
    "MemoryClipboard",
    "NullClipboard",
    "default_clipboard",
    "FileSystem",
    "DirectoryBrowser",
    "detect_syntax",
    "highlight_line",
]
