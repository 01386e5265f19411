from __future__ import annotations

import pytest

from phantom_editor.buffer import (
    Cursor,
    TextBuffer,
    clamp_cursor,
    ensure_cursor,
    split_lines,
)
from phantom_editor.errors import BufferValidationError


def make_buffer(text: str, cursor: Cursor = Cursor(0, 0)) -> TextBuffer:
    buffer = TextBuffer.from_text(text)
    buffer.set_cursor(*cursor)
    return buffer


def assert_cursor_valid(buffer: TextBuffer) -> None:
    assert buffer.lines
    assert 0 <= buffer.cursor.line < len(buffer.lines)
    assert 0 <= buffer.cursor.column <= len(buffer.lines[buffer.cursor.line])


def test_from_text_never_empty() -> None:
    assert TextBuffer.from_text("").lines == [""]
    assert TextBuffer.from_text("a\nb\n").lines == ["a", "b"]


def test_insert_then_backspace_restores_state() -> None:
    buffer = make_buffer("abc", Cursor(1, 0))

    buffer.insert_char("x")
    assert buffer.lines == ["axbc"]
    buffer.backspace()

    assert buffer.lines == ["abc"]
    assert buffer.cursor == Cursor(1, 0)


def test_backspace_at_line_start_joins_lines() -> None:
    buffer = make_buffer("ab\ncd", Cursor(0, 1))

    buffer.backspace()

    assert buffer.lines == ["abcd"]
    assert buffer.cursor == Cursor(2, 0)


def test_backspace_at_origin_is_noop() -> None:
    buffer = make_buffer("ab")

    buffer.backspace()

    assert buffer.lines == ["ab"]
    assert buffer.cursor == Cursor(0, 0)


def test_delete_char_joins_next_line_at_end() -> None:
    buffer = make_buffer("ab\ncd", Cursor(2, 0))

    buffer.delete_char()

    assert buffer.lines == ["abcd"]
    assert buffer.cursor == Cursor(2, 0)


def test_delete_char_at_end_of_buffer_is_noop() -> None:
    buffer = make_buffer("ab", Cursor(2, 0))

    buffer.delete_char()

    assert buffer.lines == ["ab"]


def test_insert_newline_splits_line() -> None:
    buffer = make_buffer("hello", Cursor(2, 0))

    buffer.insert_newline()

    assert buffer.lines == ["he", "llo"]
    assert buffer.cursor == Cursor(0, 1)


def test_delete_line_returns_text_and_clamps_cursor() -> None:
    buffer = make_buffer("one\ntwo", Cursor(2, 1))

    removed = buffer.delete_line()

    assert removed == "two"
    assert buffer.lines == ["one"]
    assert buffer.cursor == Cursor(0, 0)


def test_delete_only_line_leaves_empty_buffer() -> None:
    buffer = make_buffer("solo")

    buffer.delete_line()

    assert buffer.lines == [""]
    assert_cursor_valid(buffer)


def test_insert_text_multiline() -> None:
    buffer = make_buffer("[]", Cursor(1, 0))

    buffer.insert_text("a\nb\nc")

    assert buffer.lines == ["[a", "b", "c]"]
    assert buffer.cursor == Cursor(1, 2)


def test_paste_lines_keeps_remainder_on_its_own_line() -> None:
    buffer = make_buffer("abcd", Cursor(2, 0))

    buffer.paste_lines("X\nY")

    assert buffer.lines == ["abX", "Y", "cd"]
    assert buffer.cursor == Cursor(0, 2)


def test_paste_lines_at_line_start_adds_a_line() -> None:
    buffer = make_buffer("world")

    buffer.paste_lines("hello")

    assert buffer.lines == ["hello", "world"]
    assert buffer.cursor == Cursor(0, 1)


def test_split_lines_only_breaks_on_newlines() -> None:
    assert split_lines("a\x0cb\nc\u2028d\n") == ["a\x0cb", "c\u2028d"]
    assert split_lines("one\r\ntwo\r\n") == ["one", "two"]
    assert split_lines("x\n\n") == ["x", ""]
    assert split_lines("lone\r") == ["lone\r"]
    assert split_lines("") == [""]
    assert split_lines("\n") == [""]


def test_open_lines_above_and_below() -> None:
    buffer = make_buffer("mid", Cursor(2, 0))

    buffer.insert_line_below()
    assert buffer.lines == ["mid", ""]
    assert buffer.cursor == Cursor(0, 1)

    buffer.set_cursor(0, 0)
    buffer.insert_line_above()
    assert buffer.lines == ["", "mid", ""]
    assert buffer.cursor == Cursor(0, 0)


def test_horizontal_motion_wraps_across_lines() -> None:
    buffer = make_buffer("ab\ncd", Cursor(2, 0))

    buffer.move_right()
    assert buffer.cursor == Cursor(0, 1)

    buffer.move_left()
    assert buffer.cursor == Cursor(2, 0)


def test_vertical_motion_clamps_column() -> None:
    buffer = make_buffer("long line\nab", Cursor(8, 0))

    buffer.move_down()
    assert buffer.cursor == Cursor(2, 1)

    buffer.move_down()
    assert buffer.cursor == Cursor(2, 1)

    buffer.move_up()
    assert buffer.cursor == Cursor(2, 0)


def test_home_and_end() -> None:
    buffer = make_buffer("abc", Cursor(1, 0))

    buffer.move_end()
    assert buffer.cursor == Cursor(3, 0)
    buffer.move_home()
    assert buffer.cursor == Cursor(0, 0)


def test_replace_clamps_out_of_range_cursor() -> None:
    buffer = make_buffer("abc")

    buffer.replace([], Cursor(9, 9))

    assert buffer.lines == [""]
    assert buffer.cursor == Cursor(0, 0)


def test_is_pristine_only_for_unnamed_empty_buffer() -> None:
    assert TextBuffer().is_pristine() is True
    assert TextBuffer(path="notes.txt").is_pristine() is False
    assert TextBuffer.from_text("x").is_pristine() is False


def test_clamp_and_ensure_cursor() -> None:
    lines = ["abc", "d"]

    assert clamp_cursor(lines, Cursor(7, 5)) == Cursor(1, 1)
    assert clamp_cursor(lines, Cursor(-1, -1)) == Cursor(0, 0)
    assert ensure_cursor(lines, Cursor(3, 0)) == Cursor(3, 0)
    with pytest.raises(BufferValidationError):
        ensure_cursor(lines, Cursor(2, 1))


def test_invariant_holds_through_mixed_edits() -> None:
    buffer = make_buffer("ab\ncd\nef", Cursor(1, 1))
    steps = [
        buffer.delete_line,
        buffer.backspace,
        buffer.move_down,
        buffer.delete_line,
        buffer.delete_line,
        buffer.delete_char,
        buffer.move_end,
        buffer.insert_newline,
        buffer.backspace,
        buffer.move_up,
    ]

    for step in steps:
        step()
        assert_cursor_valid(buffer)
