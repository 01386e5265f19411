from __future__ import annotations

import pytest

from phantom_editor.buffer import Cursor, TextBuffer, Viewport, minimap_rows


def make_buffer(line_count: int) -> TextBuffer:
    return TextBuffer(lines=[f"line {number}" for number in range(line_count)])


def test_scroll_follows_cursor_down_and_up() -> None:
    viewport = Viewport(height=5, width=10)

    viewport.scroll_to(Cursor(0, 7))
    assert viewport.vertical_offset == 3

    viewport.scroll_to(Cursor(0, 4))
    assert viewport.vertical_offset == 3

    viewport.scroll_to(Cursor(0, 1))
    assert viewport.vertical_offset == 1


def test_scroll_follows_cursor_horizontally() -> None:
    viewport = Viewport(height=5, width=10)

    viewport.scroll_to(Cursor(15, 0))
    assert viewport.horizontal_offset == 6

    viewport.scroll_to(Cursor(2, 0))
    assert viewport.horizontal_offset == 2


def test_visible_lines_window() -> None:
    viewport = Viewport(height=3, width=10, vertical_offset=2)

    assert viewport.visible_lines(make_buffer(10)) == ["line 2", "line 3", "line 4"]


def test_page_down_and_up_move_cursor_with_offset() -> None:
    buffer = make_buffer(12)
    viewport = Viewport(height=5, width=20)

    viewport.page_down(buffer)
    assert viewport.vertical_offset == 5
    assert buffer.cursor.line == 9

    viewport.page_down(buffer)
    assert viewport.vertical_offset == 7
    assert buffer.cursor.line == 11

    viewport.page_up(buffer)
    assert viewport.vertical_offset == 2
    assert buffer.cursor.line == 2


def test_page_down_on_short_buffer_stays_at_top() -> None:
    buffer = make_buffer(3)
    viewport = Viewport(height=5, width=20)

    viewport.page_down(buffer)

    assert viewport.vertical_offset == 0
    assert buffer.cursor.line == 2


def test_to_content_adds_offsets_and_clamps_negative_cells() -> None:
    viewport = Viewport(height=5, width=10, vertical_offset=4, horizontal_offset=2)

    assert viewport.to_content(3, 1) == Cursor(5, 5)
    assert viewport.to_content(-2, -1) == Cursor(2, 4)


def test_dimensions_must_be_positive() -> None:
    with pytest.raises(ValueError):
        Viewport(height=0)


def test_center_on_puts_line_mid_screen() -> None:
    viewport = Viewport(height=10, width=10)

    viewport.center_on(54)
    assert viewport.vertical_offset == 49

    viewport.center_on(2)
    assert viewport.vertical_offset == 0


def test_minimap_rows_one_per_line_for_short_buffers() -> None:
    assert minimap_rows(3, 10) == [(0, 0), (1, 1), (2, 2)]


def test_minimap_rows_scale_long_buffers() -> None:
    rows = minimap_rows(100, 10)

    assert len(rows) == 10
    assert rows[0] == (0, 9)
    assert rows[5] == (50, 59)
    assert rows[-1] == (90, 99)
