"""Loading user keybindings from ``config.toml``.

The file holds one table per mode (``normal_mode``, ``insert_mode``, ...)
mapping chord strings to action names::

    [normal_mode]
    dd = "delete_line"
    "Ctrl+b" = "toggle_debug_menu"

Entries override the built-in binding for the same chord. A missing file
is written out from the defaults; a broken one leaves the defaults alone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

import toml

from phantom_editor.errors import KeymapConfigError
from phantom_editor.keymaps import Binding, KeymapRegistry
from phantom_editor.keymaps.defaults import (
    DEFAULT_KEYMAP,
    MODE_FOR_TABLE,
    load_default_keymaps,
)
from phantom_editor.runtime import telemetry

KEYMAP_FILENAME = "config.toml"

KeymapTables = Dict[str, Dict[str, str]]


@dataclass(slots=True)
class KeymapLoadReport:
    path: Path
    created: bool = False
    applied: List[Binding] = field(default_factory=list)
    error: Optional[str] = None


def write_default_keymap(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        toml.dump(DEFAULT_KEYMAP, fh)


def read_keymap_file(path: Path) -> KeymapTables:
    """Parse and shape-check the file; raises ``KeymapConfigError``."""

    try:
        with path.open("r", encoding="utf-8") as fh:
            data = toml.load(fh)
    except toml.TomlDecodeError as exc:
        raise KeymapConfigError(f"{path}: {exc}") from exc
    except OSError as exc:
        raise KeymapConfigError(f"{path}: {exc.strerror or exc}") from exc

    tables: KeymapTables = {}
    for table, entries in data.items():
        if table not in MODE_FOR_TABLE:
            raise KeymapConfigError(f"{path}: unknown table [{table}]")
        if not isinstance(entries, dict):
            raise KeymapConfigError(f"{path}: [{table}] must be a table")
        for chord, action_id in entries.items():
            if not isinstance(action_id, str):
                raise KeymapConfigError(
                    f"{path}: [{table}] {chord!r} must name an action"
                )
        tables[table] = dict(entries)
    return tables


def _prepare(
    registry: KeymapRegistry, tables: Mapping[str, Mapping[str, str]], source: str
) -> List[Tuple[str, str, str]]:
    prepared = []
    for table, entries in tables.items():
        mode = MODE_FOR_TABLE[table]
        for chord, action_id in entries.items():
            if not registry.has_action(action_id):
                raise KeymapConfigError(
                    f"{source}: [{table}] {chord!r} names unknown action '{action_id}'"
                )
            try:
                Binding.for_chord(mode, chord, action_id)
            except ValueError as exc:
                raise KeymapConfigError(
                    f"{source}: [{table}] bad chord {chord!r}: {exc}"
                ) from exc
            prepared.append((mode, chord, action_id))
    return prepared


def apply_user_keymap(
    registry: KeymapRegistry,
    tables: Mapping[str, Mapping[str, str]],
    *,
    source: str = KEYMAP_FILENAME,
) -> List[Binding]:
    """Validate every entry, then bind them; nothing is bound on error."""

    prepared = _prepare(registry, tables, source)
    return [
        registry.bind(mode, chord, action_id, source=source)
        for mode, chord, action_id in prepared
    ]


def load_keymap(registry: KeymapRegistry, config_dir: Path) -> KeymapLoadReport:
    """Seed ``registry`` with the defaults and layer the user file on top."""

    load_default_keymaps(registry)
    path = Path(config_dir) / KEYMAP_FILENAME
    report = KeymapLoadReport(path=path)

    with telemetry.span(
        "config::keymap", component="config", metadata={"path": str(path)}
    ) as handle:
        handle.add_metadata("default_bindings", registry.stats().binding_count)
        if not path.exists():
            try:
                write_default_keymap(path)
                report.created = True
            except OSError as exc:
                handle.add_metadata("write_error", exc)
            return report

        try:
            tables = read_keymap_file(path)
            report.applied = apply_user_keymap(registry, tables, source=str(path))
        except KeymapConfigError as exc:
            report.error = f"Keymap config ignored: {exc}"
            telemetry.record_event(
                "config.keymap_invalid", level="warning", data={"error": str(exc)}
            )
        handle.add_metadata("applied", len(report.applied))
    return report


__all__ = [
    "KEYMAP_FILENAME",
    "KeymapLoadReport",
    "write_default_keymap",
    "read_keymap_file",
    "apply_user_keymap",
    "load_keymap",
]
