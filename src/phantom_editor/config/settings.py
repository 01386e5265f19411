"""Editor settings read from ``PHANTOM_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from phantom_editor.buffer.undo import DEFAULT_UNDO_LIMIT
from phantom_editor.buffer.viewport import DEFAULT_VISIBLE_HEIGHT, DEFAULT_VISIBLE_WIDTH
from phantom_editor.runtime.status import DEFAULT_STATUS_HISTORY
from phantom_editor.runtime.telemetry import ENV_PREFIX, record_event

DEFAULT_CONFIG_DIR = Path("~/.config/phantom")


@dataclass(frozen=True, slots=True)
class EditorSettings:
    config_dir: Path = DEFAULT_CONFIG_DIR
    visible_height: int = DEFAULT_VISIBLE_HEIGHT
    visible_width: int = DEFAULT_VISIBLE_WIDTH
    undo_limit: int = DEFAULT_UNDO_LIMIT
    coalesce_undo: bool = False
    status_history: int = DEFAULT_STATUS_HISTORY


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(f"{ENV_PREFIX}{name}")
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        record_event(
            "settings.invalid",
            level="warning",
            data={"name": name, "value": raw, "default": default},
        )
        return default
    return value


def _flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(f"{ENV_PREFIX}{name}")
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def load_settings(environ: Optional[Mapping[str, str]] = None) -> EditorSettings:
    """Build settings from ``environ`` (``os.environ`` when omitted)."""

    env = os.environ if environ is None else environ
    config_dir = env.get(f"{ENV_PREFIX}CONFIG_DIR")
    return EditorSettings(
        config_dir=Path(config_dir or DEFAULT_CONFIG_DIR).expanduser(),
        visible_height=_positive_int(env, "VISIBLE_HEIGHT", DEFAULT_VISIBLE_HEIGHT),
        visible_width=_positive_int(env, "VISIBLE_WIDTH", DEFAULT_VISIBLE_WIDTH),
        undo_limit=_positive_int(env, "UNDO_LIMIT", DEFAULT_UNDO_LIMIT),
        coalesce_undo=_flag(env, "COALESCE_UNDO", False),
        status_history=_positive_int(env, "STATUS_HISTORY", DEFAULT_STATUS_HISTORY),
    )


__all__ = ["EditorSettings", "DEFAULT_CONFIG_DIR", "load_settings"]
