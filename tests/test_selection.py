from __future__ import annotations

from phantom_editor.buffer import Cursor, SelectionRange

LINES = ["abc", "de", "fghi"]


def test_whole_buffer_selection_extracts_all_text() -> None:
    selection = SelectionRange.visual(Cursor(0, 0), Cursor(4, 2))

    assert selection.extract(LINES) == "abc\nde\nfghi"


def test_between_orders_reversed_positions() -> None:
    selection = SelectionRange.between(Cursor(1, 2), Cursor(2, 0))

    assert selection.start == Cursor(2, 0)
    assert selection.end == Cursor(1, 2)


def test_visual_selection_includes_end_character() -> None:
    selection = SelectionRange.visual(Cursor(2, 0), Cursor(0, 0))

    assert selection.extract(LINES) == "abc"


def test_mouse_selection_excludes_end_character() -> None:
    selection = SelectionRange.mouse(Cursor(0, 0), Cursor(2, 0))

    assert selection.extract(LINES) == "ab"


def test_multiline_extract_uses_partial_end_line() -> None:
    selection = SelectionRange.visual(Cursor(1, 0), Cursor(1, 2))

    assert selection.extract(LINES) == "bc\nde\nfg"


def test_extract_past_last_line_is_clamped() -> None:
    selection = SelectionRange.visual(Cursor(0, 1), Cursor(0, 9))

    assert selection.extract(LINES) == "de\nfghi"


def test_delete_splices_lines_and_returns_start() -> None:
    selection = SelectionRange.visual(Cursor(1, 0), Cursor(0, 2))

    lines, cursor = selection.delete(LINES)

    assert lines == ["aghi"]
    assert cursor == Cursor(1, 0)
    assert LINES == ["abc", "de", "fghi"]


def test_delete_single_line_span() -> None:
    lines, cursor = SelectionRange.mouse(Cursor(1, 2), Cursor(3, 2)).delete(LINES)

    assert lines == ["abc", "de", "fi"]
    assert cursor == Cursor(1, 2)


def test_is_single_line() -> None:
    assert SelectionRange.visual(Cursor(0, 1), Cursor(2, 1)).is_single_line
    assert not SelectionRange.visual(Cursor(0, 0), Cursor(0, 1)).is_single_line
