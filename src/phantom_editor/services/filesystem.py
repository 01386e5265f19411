"""Plain-text file access for tabs and the directory browser."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from phantom_editor.buffer.document import split_lines
from phantom_editor.errors import FileIOError
from phantom_editor.runtime import telemetry


class FileSystem:
    """Reads and writes newline-delimited text files.

    Every ``OSError`` comes back as ``FileIOError`` so callers only have to
    handle the editor's own error types.
    """

    encoding = "utf-8"

    def exists(self, path: str | Path) -> bool:
        return Path(path).exists()

    def is_dir(self, path: str | Path) -> bool:
        return Path(path).is_dir()

    def read_file(self, path: str | Path) -> List[str]:
        target = Path(path)
        try:
            with target.open(encoding=self.encoding, newline="") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise FileIOError(str(target), _reason(exc)) from exc
        telemetry.record_event("file.read", data={"path": str(target)})
        return split_lines(content)

    def write_file(self, path: str | Path, lines: Iterable[str]) -> None:
        target = Path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("w", encoding=self.encoding, newline="") as handle:
                for line in lines:
                    handle.write(f"{line}\n")
        except OSError as exc:
            raise FileIOError(str(target), _reason(exc)) from exc
        telemetry.record_event("file.write", data={"path": str(target)})

    def list_directory(self, path: str | Path) -> List[Path]:
        target = Path(path)
        try:
            return sorted(target.iterdir(), key=lambda entry: entry.name)
        except OSError as exc:
            raise FileIOError(str(target), _reason(exc)) from exc


def _reason(exc: BaseException) -> str:
    return getattr(exc, "strerror", None) or str(exc)


__all__ = ["FileSystem"]
