from __future__ import annotations

from pathlib import Path
from typing import Optional

import pytest

from phantom_editor.buffer import Cursor, TextBuffer
from phantom_editor.config import EditorSettings
from phantom_editor.editor import MINIMAP_TOP, Editor, MouseInput
from phantom_editor.errors import ClipboardError
from phantom_editor.modes import KeyInput


class FailingClipboard:
    def get_contents(self) -> str:
        raise ClipboardError("unavailable")

    def set_contents(self, text: str) -> None:
        raise ClipboardError("unavailable")


def make_editor(text: Optional[str] = None, **kwargs) -> Editor:
    editor = Editor(**kwargs)
    if text is not None:
        editor.tabs.open_buffer(TextBuffer.from_text(text))
    return editor


def press(editor: Editor, *keys: str) -> None:
    for key in keys:
        if len(key) == 1:
            editor.handle_key(KeyInput(key=key, text=key))
        else:
            editor.handle_key(KeyInput(key=key))


def ctrl(editor: Editor, key: str) -> None:
    editor.handle_key(KeyInput(key=key, modifiers=("Ctrl",)))


def type_text(editor: Editor, text: str) -> None:
    press(editor, *text)


def run_command(editor: Editor, command: str) -> None:
    press(editor, ":")
    type_text(editor, command)
    press(editor, "Enter")


def assert_invariant(editor: Editor) -> None:
    lines = editor.buffer.lines
    cursor = editor.buffer.cursor
    assert len(lines) >= 1
    assert 0 <= cursor.line < len(lines)
    assert 0 <= cursor.column <= len(lines[cursor.line])


def test_typing_enter_and_backspace_scenario() -> None:
    editor = make_editor()
    press(editor, "i")

    type_text(editor, "hello")
    assert editor.buffer.lines == ["hello"]
    assert editor.buffer.cursor == Cursor(5, 0)

    press(editor, "Enter")
    assert editor.buffer.lines == ["hello", ""]
    assert editor.buffer.cursor == Cursor(0, 1)

    press(editor, "Backspace")
    assert editor.buffer.lines == ["hello"]
    assert editor.buffer.cursor == Cursor(5, 0)


def test_dd_deletes_current_line_into_clipboard() -> None:
    editor = make_editor("first\nsecond\nthird")
    press(editor, "Down")

    press(editor, "d", "d")

    assert editor.buffer.lines == ["first", "third"]
    assert editor.context.clipboard.get_contents() == "second"
    assert_invariant(editor)


def test_d_then_x_deletes_nothing() -> None:
    editor = make_editor("first\nsecond")

    press(editor, "d", "x")

    assert editor.buffer.lines == ["first", "second"]
    assert editor.frame().pending == ""


def test_pending_chord_shows_in_frame() -> None:
    editor = make_editor("first")

    press(editor, "d")

    assert editor.frame().pending == "d"


def test_undo_redo_round_trip() -> None:
    editor = make_editor("abc")
    press(editor, "i")
    type_text(editor, "xy")
    press(editor, "Esc", "o")
    type_text(editor, "z")
    press(editor, "Esc")
    state = (list(editor.buffer.lines), editor.buffer.cursor)

    ctrl(editor, "u")
    assert editor.buffer.lines != state[0]
    ctrl(editor, "r")

    assert (editor.buffer.lines, editor.buffer.cursor) == state


def test_undo_walks_back_to_original_text() -> None:
    editor = make_editor("abc")
    press(editor, "i")
    type_text(editor, "xy")
    press(editor, "Esc")

    ctrl(editor, "u")
    ctrl(editor, "u")
    ctrl(editor, "u")

    assert editor.buffer.lines == ["abc"]


def test_coalesced_typing_undoes_in_one_step() -> None:
    editor = make_editor("", settings=EditorSettings(coalesce_undo=True))
    press(editor, "i")
    type_text(editor, "word")
    press(editor, "Esc")

    ctrl(editor, "u")

    assert editor.buffer.lines == [""]


def test_yank_and_paste_duplicates_line() -> None:
    editor = make_editor("abc\n")

    press(editor, "y", "y", "p")

    assert editor.buffer.lines == ["abc", "abc"]
    assert editor.buffer.cursor == Cursor(0, 1)


def test_delete_then_paste_restores_line() -> None:
    editor = make_editor("hello\nworld")

    press(editor, "d", "d", "p")

    assert editor.buffer.lines == ["hello", "world"]
    assert editor.buffer.cursor == Cursor(0, 1)


def test_ctrl_p_pastes_inline() -> None:
    editor = make_editor("abc")
    editor.context.clipboard.set_contents("xy")

    ctrl(editor, "p")

    assert editor.buffer.lines == ["xyabc"]
    assert editor.buffer.cursor == Cursor(2, 0)


def test_open_line_above_enters_insert() -> None:
    editor = make_editor("abc")

    press(editor, "O")
    type_text(editor, "top")

    assert editor.mode == "insert"
    assert editor.buffer.lines == ["top", "abc"]


def test_append_moves_past_cursor() -> None:
    editor = make_editor("ac")

    press(editor, "a")
    type_text(editor, "b")

    assert editor.buffer.lines == ["abc"]


def test_close_tab_lifecycle() -> None:
    editor = make_editor()

    ctrl(editor, "w")
    assert len(editor.tabs) == 1

    editor.buffer.insert_char("x")
    ctrl(editor, "t")
    assert len(editor.tabs) == 2

    ctrl(editor, "w")
    assert len(editor.tabs) == 1
    assert editor.tabs.active_index == 0


def test_function_keys_switch_tabs() -> None:
    editor = make_editor("one")
    editor.tabs.open_buffer(TextBuffer.from_text("two"))

    press(editor, "F1")
    assert editor.tabs.active_index == 0
    assert editor.status.latest == "Switched to tab 1"

    press(editor, "F2")
    assert editor.buffer.lines == ["two"]


def test_function_key_for_missing_tab_reports_error() -> None:
    editor = make_editor()

    press(editor, "F3")

    assert editor.status.latest == "Tab 3 does not exist"
    assert editor.tabs.active_index == 0


def test_ctrl_q_quits_from_any_mode() -> None:
    editor = make_editor()
    press(editor, "i")

    ctrl(editor, "q")

    assert editor.quit_requested is True


def test_debug_panel_logs_key_presses() -> None:
    editor = make_editor()

    ctrl(editor, "b")
    press(editor, "j")

    assert editor.context.view.show_debug is True
    assert "Key pressed: j" in list(editor.status)


def test_status_history_is_bounded() -> None:
    editor = make_editor(settings=EditorSettings(status_history=2))

    for number in range(1, 5):
        press(editor, f"F{number}")

    assert list(editor.status) == ["Tab 3 does not exist", "Tab 4 does not exist"]


def test_minimap_refuses_empty_buffer() -> None:
    editor = make_editor()

    ctrl(editor, "m")
    assert editor.context.view.show_minimap is False
    assert editor.status.latest == "Cannot show minimap: No content"

    editor.buffer.insert_char("x")
    ctrl(editor, "m")
    assert editor.context.view.show_minimap is True


def test_paste_failure_leaves_buffer_untouched() -> None:
    editor = make_editor("abc", clipboard=FailingClipboard())

    press(editor, "p")

    assert editor.buffer.lines == ["abc"]
    assert editor.status.latest == "Failed to paste from clipboard: unavailable"


def test_copy_failure_is_reported() -> None:
    editor = make_editor("abc", clipboard=FailingClipboard())

    press(editor, "y", "y")

    assert editor.status.latest == "Failed to copy to clipboard: unavailable"


def test_save_without_filename_is_reported() -> None:
    editor = make_editor("abc")

    run_command(editor, "w")

    assert editor.status.latest == "No filename specified. Use :w <filename> to save."
    assert editor.mode == "normal"


def test_write_edit_and_quit_commands(tmp_path: Path) -> None:
    target = tmp_path / "out.py"
    editor = make_editor("print(1)")

    run_command(editor, f"w {target}")

    assert target.read_text(encoding="utf-8") == "print(1)\n"
    assert editor.buffer.path == str(target)
    assert editor.buffer.syntax == "Python"
    assert editor.status.latest == f"File saved: {target}"

    other = tmp_path / "new.txt"
    run_command(editor, f"e {other}")
    assert len(editor.tabs) == 2
    assert editor.status.latest == f"New file: {other} (not yet saved)"

    run_command(editor, "q")
    assert len(editor.tabs) == 1
    assert editor.quit_requested is False

    run_command(editor, "q")
    assert editor.quit_requested is True


def test_open_path_reads_file(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("alpha\nbeta\n", encoding="utf-8")
    editor = make_editor()

    editor.open_path(target)

    assert len(editor.tabs) == 1
    assert editor.buffer.lines == ["alpha", "beta"]
    assert editor.tab.title == "notes.txt"
    assert editor.status.latest == f"File opened: {target}"


def test_open_directory_selects_file(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("from a\n", encoding="utf-8")
    (tmp_path / "b.txt").write_text("from b\n", encoding="utf-8")
    editor = make_editor()

    editor.open_path(tmp_path)
    assert editor.mode == "file_select"
    assert editor.frame().browser_entries == ("..", "a.txt", "b.txt")

    press(editor, "Down", "Down", "Enter")

    assert editor.mode == "normal"
    assert editor.buffer.lines == ["from b"]
    assert editor.context.browser is None


def test_sidebar_toggle_opens_and_closes(tmp_path: Path) -> None:
    target = tmp_path / "main.txt"
    target.write_text("x\n", encoding="utf-8")
    editor = make_editor()
    editor.open_path(target)

    ctrl(editor, "e")
    assert editor.mode == "sidebar"
    assert editor.context.view.show_sidebar is True
    assert editor.frame().browser_dir == str(tmp_path)

    ctrl(editor, "e")
    assert editor.mode == "normal"
    assert editor.context.view.show_sidebar is False


def test_directory_nav_escape_returns_to_normal(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    editor = make_editor()

    ctrl(editor, "o")
    assert editor.mode == "directory_nav"

    press(editor, "Esc")
    assert editor.mode == "normal"


def test_mouse_selection_copy() -> None:
    editor = make_editor("hello world")

    editor.handle_mouse(MouseInput("down", 7, 4))
    editor.handle_mouse(MouseInput("drag", 12, 4))
    editor.handle_mouse(MouseInput("up", 12, 4, button="right"))

    assert editor.context.clipboard.get_contents() == "world"
    assert editor.mouse_selection is None


def test_minimap_click_jumps_to_mapped_line() -> None:
    text = "\n".join(f"line {number}" for number in range(100))
    editor = make_editor(text, settings=EditorSettings(visible_height=10))
    ctrl(editor, "m")
    minimap_column = editor.settings.visible_width + 2 + 5

    editor.handle_mouse(MouseInput("down", minimap_column, MINIMAP_TOP + 5))

    assert editor.buffer.cursor.line == 54
    assert editor.tab.viewport.vertical_offset == 49
    assert editor.mouse_selection is None


def test_minimap_area_selects_text_when_hidden() -> None:
    text = "\n".join(f"line {number}" for number in range(100))
    editor = make_editor(text, settings=EditorSettings(visible_height=10))
    minimap_column = editor.settings.visible_width + 2 + 5

    editor.handle_mouse(MouseInput("down", minimap_column, MINIMAP_TOP + 5))

    assert editor.buffer.cursor.line == 0
    assert editor.mouse_selection is not None


def test_visual_selection_in_frame() -> None:
    editor = make_editor("abc\nde\nfghi")
    press(editor, "v", "Down", "Down", "End")

    frame = editor.frame()

    assert frame.mode == "visual"
    assert frame.selection is not None
    assert frame.selection.extract(editor.buffer.lines) == "abc\nde\nfghi"


def test_viewport_follows_cursor_after_keys() -> None:
    text = "\n".join(str(number) for number in range(50))
    editor = make_editor(text, settings=EditorSettings(visible_height=10))

    press(editor, "PageDown")
    for _ in range(5):
        press(editor, "Down")

    assert editor.tab.viewport.vertical_offset == editor.buffer.cursor.line - 9
    assert editor.frame().lines[-1] == editor.buffer.current_line


def test_invariant_survives_key_storm() -> None:
    editor = make_editor("ab\ncd\nef")
    keys = ["d", "d", "x", "End", "i", "Backspace", "Backspace", "Backspace",
            "Backspace", "Enter", "Delete", "Esc", "v", "Down", "d", "p", "Up",
            "d", "d", "d", "d", "PageDown", "o", "q", "Esc", "u"]

    for key in keys:
        press(editor, key)
        assert_invariant(editor)
