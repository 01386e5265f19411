"""Directory listing with a movable selection, used by the sidebar."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .filesystem import FileSystem

PARENT_ENTRY = ".."


class DirectoryBrowser:
    """The first entry is always ``<dir>/..``; the listing follows it."""

    def __init__(self, directory: str | Path, files: Optional[FileSystem] = None) -> None:
        self.files = files or FileSystem()
        self.current_dir = Path(directory)
        self.entries: List[Path] = []
        self.selected_index = 0
        self._load(self.current_dir)

    def _load(self, directory: Path) -> None:
        listing = self.files.list_directory(directory)
        self.current_dir = directory
        self.entries = [directory / PARENT_ENTRY, *listing]
        self.selected_index = 0

    @property
    def selected(self) -> Path:
        return self.entries[self.selected_index]

    def up(self) -> None:
        if self.selected_index > 0:
            self.selected_index -= 1

    def down(self) -> None:
        if self.selected_index < len(self.entries) - 1:
            self.selected_index += 1

    def enter(self) -> Optional[Path]:
        """Descend into a directory, or return the chosen file."""

        selected = self.selected
        if selected.is_dir():
            self._load(selected)
            return None
        return selected

    def labels(self) -> List[str]:
        labels = []
        for entry in self.entries:
            if entry.name == PARENT_ENTRY:
                labels.append(PARENT_ENTRY)
            elif entry.is_dir():
                labels.append(f"{entry.name}/")
            else:
                labels.append(entry.name)
        return labels


__all__ = ["DirectoryBrowser", "PARENT_ENTRY"]
