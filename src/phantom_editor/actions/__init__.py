"""Named editor actions invoked through keymap bindings."""

from .core import (
    append,
    enter_command_mode,
    enter_insert_mode,
    enter_search_mode,
    enter_visual_mode,
    quit_editor,
    report_error,
    return_to_normal,
    toggle_debug_menu,
    toggle_minimap,
)
from .editing import (
    backspace,
    copy_selection,
    delete_char,
    delete_line,
    insert_newline,
    open_line_above,
    open_line_below,
    paste_after,
    paste_clipboard,
    redo,
    undo,
    yank_line,
)
from .files import open_file, save_file
from .visual import delete_selection, swap_anchor, visual_selection, yank_selection
from .command import execute_command
from .search import execute_search, find_matches, next_search_result, previous_search_result
from .tabs import close_tab, new_tab, next_tab, previous_tab, switch_to_tab
from .browser import (
    browse_directory,
    browser_down,
    browser_up,
    enter_directory_nav_mode,
    enter_file_select_mode,
    exit_file_select_mode,
    select_file,
    toggle_sidebar,
)

__all__ = [
    "append",
    "enter_command_mode",
    "enter_insert_mode",
    "enter_search_mode",
    "enter_visual_mode",
    "quit_editor",
    "report_error",
    "return_to_normal",
    "toggle_debug_menu",
    "toggle_minimap",
    "backspace",
    "copy_selection",
    "delete_char",
    "delete_line",
    "insert_newline",
    "open_line_above",
    "open_line_below",
    "paste_after",
    "paste_clipboard",
    "redo",
    "undo",
    "yank_line",
    "open_file",
    "save_file",
    "delete_selection",
    "swap_anchor",
    "visual_selection",
    "yank_selection",
    "execute_command",
    "execute_search",
    "find_matches",
    "next_search_result",
    "previous_search_result",
    "close_tab",
    "new_tab",
    "next_tab",
    "previous_tab",
    "switch_to_tab",
    "browse_directory",
    "browser_down",
    "browser_up",
    "enter_directory_nav_mode",
    "enter_file_select_mode",
    "exit_file_select_mode",
    "select_file",
    "toggle_sidebar",
]
