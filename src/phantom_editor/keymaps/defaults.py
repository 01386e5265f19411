"""Built-in action catalogue and the default keybinding table."""

from __future__ import annotations

from functools import partial
from typing import Dict, Iterable, Mapping

from phantom_editor.actions import browser as browser_actions
from phantom_editor.actions import command as command_actions
from phantom_editor.actions import core as core_actions
from phantom_editor.actions import editing as editing_actions
from phantom_editor.actions import motion as motion_actions
from phantom_editor.actions import search as search_actions
from phantom_editor.actions import tabs as tab_actions
from phantom_editor.actions import visual as visual_actions

from .models import ActionRef, Binding
from .registry import KeymapRegistry

# Keymap file tables and the mode each one feeds. ``tab_mode`` has no mode
# of its own; its chords are Normal-mode chords.
MODE_FOR_TABLE: Dict[str, str] = {
    "normal_mode": "normal",
    "insert_mode": "insert",
    "visual_mode": "visual",
    "command_mode": "command",
    "file_select_mode": "file_select",
    "search_mode": "search",
    "tab_mode": "normal",
}


def _action(action_id: str, handler, description: str) -> ActionRef:
    return ActionRef(id=action_id, handler=handler, description=description)


DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    _action("enter_insert_mode", core_actions.enter_insert_mode, "Enter insert mode"),
    _action("exit_insert_mode", core_actions.return_to_normal, "Leave insert mode"),
    _action("append", core_actions.append, "Insert after the cursor"),
    _action("enter_visual_mode", core_actions.enter_visual_mode, "Enter visual mode"),
    _action("exit_visual_mode", core_actions.return_to_normal, "Leave visual mode"),
    _action("enter_command_mode", core_actions.enter_command_mode, "Open the command line"),
    _action("exit_command_mode", core_actions.return_to_normal, "Cancel the command line"),
    _action("enter_search_mode", core_actions.enter_search_mode, "Start a search"),
    _action("exit_search_mode", core_actions.return_to_normal, "Cancel the search"),
    _action("toggle_debug_menu", core_actions.toggle_debug_menu, "Show or hide the debug panel"),
    _action("toggle_minimap", core_actions.toggle_minimap, "Show or hide the minimap"),
    _action("quit", core_actions.quit_editor, "Quit the editor"),
    _action("delete_line", editing_actions.delete_line, "Delete the current line"),
    _action("yank_line", editing_actions.yank_line, "Copy the current line"),
    _action("paste_after", editing_actions.paste_after, "Paste at the cursor"),
    _action("paste_clipboard", editing_actions.paste_clipboard, "Paste the clipboard"),
    _action("copy_selection", editing_actions.copy_selection, "Copy the last selection"),
    _action("open_line_below", editing_actions.open_line_below, "Open a line below"),
    _action("open_line_above", editing_actions.open_line_above, "Open a line above"),
    _action("insert_newline", editing_actions.insert_newline, "Split the line"),
    _action("backspace", editing_actions.backspace, "Delete left of the cursor"),
    _action("delete_char", editing_actions.delete_char, "Delete under the cursor"),
    _action("undo", editing_actions.undo, "Undo the last change"),
    _action("redo", editing_actions.redo, "Redo the last undone change"),
    _action("move_left", motion_actions.move_left, "Cursor left"),
    _action("move_right", motion_actions.move_right, "Cursor right"),
    _action("move_up", motion_actions.move_up, "Cursor up"),
    _action("move_down", motion_actions.move_down, "Cursor down"),
    _action("move_home", motion_actions.move_home, "Start of line"),
    _action("move_end", motion_actions.move_end, "End of line"),
    _action("page_up", motion_actions.page_up, "Scroll one page up"),
    _action("page_down", motion_actions.page_down, "Scroll one page down"),
    _action("yank_selection", visual_actions.yank_selection, "Copy the selection"),
    _action("delete_selection", visual_actions.delete_selection, "Delete the selection"),
    _action("swap_anchor", visual_actions.swap_anchor, "Swap selection ends"),
    _action("execute_command", command_actions.execute_command, "Run the command line"),
    _action("execute_search", search_actions.execute_search, "Run the search"),
    _action("next_search_result", search_actions.next_search_result, "Next match"),
    _action(
        "previous_search_result",
        search_actions.previous_search_result,
        "Previous match",
    ),
    _action("next_tab", tab_actions.next_tab, "Next tab"),
    _action("previous_tab", tab_actions.previous_tab, "Previous tab"),
    _action("new_tab", tab_actions.new_tab, "Open an empty tab"),
    _action("close_tab", tab_actions.close_tab, "Close the active tab"),
    *(
        _action(
            f"switch_to_tab_{number}",
            partial(tab_actions.switch_to_tab, index=number - 1),
            f"Switch to tab {number}",
        )
        for number in range(1, 10)
    ),
    _action("toggle_sidebar", browser_actions.toggle_sidebar, "Show or hide the sidebar"),
    _action(
        "enter_directory_nav_mode",
        browser_actions.enter_directory_nav_mode,
        "Browse the current directory",
    ),
    _action("select_file", browser_actions.select_file, "Open the highlighted entry"),
    _action(
        "exit_file_select_mode",
        browser_actions.exit_file_select_mode,
        "Close the file browser",
    ),
    _action("browser_up", browser_actions.browser_up, "Highlight the previous entry"),
    _action("browser_down", browser_actions.browser_down, "Highlight the next entry"),
)

DEFAULT_KEYMAP: Dict[str, Dict[str, str]] = {
    "normal_mode": {
        "dd": "delete_line",
        "i": "enter_insert_mode",
        "Insert": "enter_insert_mode",
        "a": "append",
        "o": "open_line_below",
        "O": "open_line_above",
        "yy": "yank_line",
        "p": "paste_after",
        "v": "enter_visual_mode",
        ":": "enter_command_mode",
        "/": "enter_search_mode",
        "n": "next_search_result",
        "N": "previous_search_result",
        "Ctrl+b": "toggle_debug_menu",
        "Ctrl+e": "toggle_sidebar",
        "Ctrl+o": "enter_directory_nav_mode",
        "Ctrl+y": "copy_selection",
        "Ctrl+p": "paste_clipboard",
        "Ctrl+u": "undo",
        "Ctrl+r": "redo",
        "Ctrl+m": "toggle_minimap",
        "Tab": "next_tab",
        "Ctrl+Shift+Tab": "previous_tab",
        "Ctrl+t": "new_tab",
        "Ctrl+w": "close_tab",
        **{f"F{number}": f"switch_to_tab_{number}" for number in range(1, 10)},
    },
    "insert_mode": {
        "Esc": "exit_insert_mode",
    },
    "visual_mode": {
        "Esc": "exit_visual_mode",
        "y": "yank_selection",
        "d": "delete_selection",
        "o": "swap_anchor",
        "h": "move_left",
        "j": "move_down",
        "k": "move_up",
        "l": "move_right",
    },
    "command_mode": {
        "Enter": "execute_command",
        "Esc": "exit_command_mode",
    },
    "file_select_mode": {
        "Enter": "select_file",
        "Esc": "exit_file_select_mode",
        "Up": "browser_up",
        "Down": "browser_down",
    },
    "search_mode": {
        "Enter": "execute_search",
        "Esc": "exit_search_mode",
    },
    "tab_mode": {},
}


def register_default_actions(
    registry: KeymapRegistry, actions: Iterable[ActionRef] = DEFAULT_ACTIONS
) -> None:
    for action in actions:
        registry.register_action(action, replace=True)


def apply_keymap(
    registry: KeymapRegistry,
    tables: Mapping[str, Mapping[str, str]],
    *,
    source: str | None = None,
) -> list[Binding]:
    """Bind every ``chord -> action`` entry of each known table."""

    bound: list[Binding] = []
    for table, entries in tables.items():
        mode = MODE_FOR_TABLE.get(table)
        if mode is None:
            raise KeyError(f"Unknown keymap table '{table}'")
        for chord, action_id in entries.items():
            bound.append(registry.bind(mode, chord, action_id, source=source))
    return bound


def load_default_keymaps(registry: KeymapRegistry) -> KeymapRegistry:
    register_default_actions(registry)
    apply_keymap(registry, DEFAULT_KEYMAP, source="default")
    return registry


__all__ = [
    "DEFAULT_ACTIONS",
    "DEFAULT_KEYMAP",
    "MODE_FOR_TABLE",
    "apply_keymap",
    "register_default_actions",
    "load_default_keymaps",
]
