"""Colour palette loaded from ``colors.json``."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Mapping, Optional, Tuple

from phantom_editor.runtime import telemetry

COLORS_FILENAME = "colors.json"

RGB = Tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class ColorConfig:
    background: str = "#1E1E1E"
    foreground: str = "#CCCCCC"
    cursor: str = "#FFFFFF"
    selection: str = "#264F78"
    comment: str = "#7F848E"
    keyword: str = "#61AFEF"
    string: str = "#C678DD"
    function: str = "#E5C07B"
    number: str = "#D19A66"
    minimap_highlight: str = "#264F78"
    minimap_background: str = "#1E1E1E"
    minimap_content: str = "#404040"
    minimap_border: str = "#404040"
    tab_active: str = "#61AFEF"
    tab_inactive: str = "#7F848E"
    tab_background: str = "#252526"
    file_selector_background: str = "#2C2C2C"
    file_selector_foreground: str = "#CCCCCC"
    file_selector_highlight: str = "#3A3D41"
    file_selector_border: str = "#4A4A4A"

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "ColorConfig":
        """Known keys holding ``#RRGGBB`` strings override defaults."""

        known = {item.name for item in fields(cls)}
        values = {
            key: value
            for key, value in data.items()
            if key in known and isinstance(value, str) and parse_color(value)
        }
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def parse_color(text: str) -> Optional[RGB]:
    """``"#RRGGBB"`` to an ``(r, g, b)`` triple; ``None`` when malformed."""

    if len(text) != 7 or not text.startswith("#"):
        return None
    try:
        value = int(text[1:], 16)
    except ValueError:
        return None
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def write_default_colors(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(ColorConfig().to_dict(), indent=2), encoding="utf-8")


def load_colors(config_dir: Path) -> ColorConfig:
    path = Path(config_dir) / COLORS_FILENAME
    try:
        if not path.exists():
            write_default_colors(path)
            return ColorConfig()
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        telemetry.record_event(
            "config.colors_invalid",
            level="warning",
            data={"path": str(path), "error": str(exc)},
        )
        return ColorConfig()
    if not isinstance(data, dict):
        return ColorConfig()
    return ColorConfig.from_mapping(data)


__all__ = [
    "COLORS_FILENAME",
    "ColorConfig",
    "parse_color",
    "load_colors",
    "write_default_colors",
]
