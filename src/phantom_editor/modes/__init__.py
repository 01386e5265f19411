"""Mode manager and the per-mode key dispatch."""

from .base_mode import (
    COMMAND,
    DIRECTORY_NAV,
    FILE_SELECT,
    INSERT,
    NORMAL,
    SEARCH,
    SIDEBAR,
    VISUAL,
    KeyInput,
    Mode,
    ModeBus,
    ModeContext,
    ModeResult,
    ViewFlags,
)
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .visual_mode import VisualMode
from .command_mode import CommandMode, PromptMode
from .search_mode import SearchMode
from .browser_mode import BrowserMode, DirectoryNavMode, FileSelectMode, SidebarMode
from .mode_manager import ModeManager

ALL_MODES = (
    NormalMode,
    InsertMode,
    VisualMode,
    CommandMode,
    SearchMode,
    FileSelectMode,
    DirectoryNavMode,
    SidebarMode,
)

__all__ = [
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "ModeManager",
    "ViewFlags",
    "NormalMode",
    "InsertMode",
    "VisualMode",
    "PromptMode",
    "CommandMode",
    "SearchMode",
    "BrowserMode",
    "FileSelectMode",
    "DirectoryNavMode",
    "SidebarMode",
    "ALL_MODES",
    "NORMAL",
    "INSERT",
    "VISUAL",
    "COMMAND",
    "SEARCH",
    "FILE_SELECT",
    "DIRECTORY_NAV",
    "SIDEBAR",
]
