from __future__ import annotations

from pathlib import Path

import pyperclip
import pytest

from phantom_editor.buffer import PLAIN_TEXT
from phantom_editor.errors import ClipboardError, FileIOError
from phantom_editor.services import (
    DirectoryBrowser,
    FileSystem,
    MemoryClipboard,
    NullClipboard,
    SystemClipboard,
    default_clipboard,
    detect_syntax,
    highlight_line,
)


def make_tree(root: Path) -> Path:
    (root / "pkg").mkdir()
    (root / "pkg" / "mod.py").write_text("x = 1\n", encoding="utf-8")
    (root / "b.txt").write_text("bee\n", encoding="utf-8")
    (root / "a.txt").write_text("ay\n", encoding="utf-8")
    return root


def test_read_file_splits_lines(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("one\ntwo\n", encoding="utf-8")

    assert FileSystem().read_file(target) == ["one", "two"]


def test_read_empty_file_gives_single_line(tmp_path: Path) -> None:
    target = tmp_path / "empty.txt"
    target.write_text("", encoding="utf-8")

    assert FileSystem().read_file(target) == [""]


def test_write_file_joins_with_newlines(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "out.txt"

    FileSystem().write_file(target, ["a", "b"])

    assert target.read_text(encoding="utf-8") == "a\nb\n"


def test_round_trip_keeps_form_feeds_and_unicode_separators(tmp_path: Path) -> None:
    target = tmp_path / "page.txt"
    target.write_bytes("a\x0cb\nc\u2028d\n".encode("utf-8"))
    files = FileSystem()

    lines = files.read_file(target)
    files.write_file(target, lines)

    assert lines == ["a\x0cb", "c\u2028d"]
    assert target.read_bytes().decode("utf-8") == "a\x0cb\nc\u2028d\n"


def test_read_file_drops_carriage_returns_before_newlines(tmp_path: Path) -> None:
    target = tmp_path / "dos.txt"
    target.write_bytes(b"one\r\ntwo\r\n")

    assert FileSystem().read_file(target) == ["one", "two"]


def test_read_missing_file_raises_file_io_error(tmp_path: Path) -> None:
    with pytest.raises(FileIOError) as excinfo:
        FileSystem().read_file(tmp_path / "missing.txt")

    assert excinfo.value.path.endswith("missing.txt")


def test_list_directory_sorted_by_name(tmp_path: Path) -> None:
    make_tree(tmp_path)

    names = [entry.name for entry in FileSystem().list_directory(tmp_path)]

    assert names == ["a.txt", "b.txt", "pkg"]


def test_browser_starts_with_parent_entry(tmp_path: Path) -> None:
    browser = DirectoryBrowser(make_tree(tmp_path))

    assert browser.labels() == ["..", "a.txt", "b.txt", "pkg/"]
    assert browser.selected_index == 0


def test_browser_selection_is_bounded(tmp_path: Path) -> None:
    browser = DirectoryBrowser(make_tree(tmp_path))

    browser.up()
    assert browser.selected_index == 0
    for _ in range(10):
        browser.down()
    assert browser.selected_index == 3


def test_browser_enter_descends_into_directory(tmp_path: Path) -> None:
    browser = DirectoryBrowser(make_tree(tmp_path))
    for _ in range(3):
        browser.down()

    assert browser.enter() is None

    assert browser.current_dir == tmp_path / "pkg"
    assert browser.labels() == ["..", "mod.py"]
    assert browser.selected_index == 0


def test_browser_enter_returns_file(tmp_path: Path) -> None:
    browser = DirectoryBrowser(make_tree(tmp_path))
    browser.down()

    assert browser.enter() == tmp_path / "a.txt"


def test_browser_parent_entry_climbs_up(tmp_path: Path) -> None:
    make_tree(tmp_path)
    browser = DirectoryBrowser(tmp_path / "pkg")

    browser.enter()

    assert "pkg/" in browser.labels()


def test_browser_on_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FileIOError):
        DirectoryBrowser(tmp_path / "nowhere")


def test_memory_and_null_clipboards() -> None:
    memory = MemoryClipboard()
    memory.set_contents("text")
    null = NullClipboard()
    null.set_contents("text")

    assert memory.get_contents() == "text"
    assert null.get_contents() == ""


def test_system_clipboard_wraps_pyperclip_errors(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def broken(*_args: object) -> str:
        raise pyperclip.PyperclipException("no clipboard mechanism")

    monkeypatch.setattr(pyperclip, "paste", broken)
    monkeypatch.setattr(pyperclip, "copy", broken)

    with pytest.raises(ClipboardError):
        SystemClipboard().get_contents()
    with pytest.raises(ClipboardError):
        SystemClipboard().set_contents("x")
    assert isinstance(default_clipboard(), MemoryClipboard)


def test_default_clipboard_prefers_system(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(pyperclip, "paste", lambda: "from system")

    clipboard = default_clipboard()

    assert isinstance(clipboard, SystemClipboard)
    assert clipboard.get_contents() == "from system"


def test_detect_syntax_by_extension() -> None:
    assert detect_syntax("main.py") == "Python"
    assert detect_syntax("notes.unknownext") == PLAIN_TEXT


def test_highlight_line_tags_keywords_and_keeps_text() -> None:
    line = "def run():  # go"

    spans = highlight_line(line, "Python")

    assert "".join(text for _, text in spans) == line
    assert ("keyword", "def") in spans
    assert any(kind == "comment" for kind, _ in spans)


def test_highlight_plain_text_is_single_span() -> None:
    assert highlight_line("def x", PLAIN_TEXT) == [("text", "def x")]
    assert highlight_line("", "Python") == [("text", "")]
