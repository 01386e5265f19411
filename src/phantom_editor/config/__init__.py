"""Settings, keymap file and colour palette loading."""

from .settings import DEFAULT_CONFIG_DIR, EditorSettings, load_settings
from .colors import COLORS_FILENAME, ColorConfig, load_colors, parse_color
from .keymap_file import (
    KEYMAP_FILENAME,
    KeymapLoadReport,
    apply_user_keymap,
    load_keymap,
    read_keymap_file,
    write_default_keymap,
)

__all__ = [
    "DEFAULT_CONFIG_DIR",
    "EditorSettings",
    "load_settings",
    "COLORS_FILENAME",
    "ColorConfig",
    "load_colors",
    "parse_color",
    "KEYMAP_FILENAME",
    "KeymapLoadReport",
    "apply_user_keymap",
    "load_keymap",
    "read_keymap_file",
    "write_default_keymap",
]
