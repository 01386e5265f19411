"""Telemetry services built directly on telelog.

The rest of the editor only touches this narrow surface:

``configure(...)`` -- swap in a ``telelog.Config`` or one of the presets
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit ``event::<name>`` records at a chosen level
``span(name, ...)`` -- profile a block, optionally as a tracked component

The editor owns the terminal, so console output is off unless
``PHANTOM_LOG_CONSOLE`` is set. ``PHANTOM_LOG_FILE`` sends records to a file
and ``PHANTOM_LOG_PRESET`` picks a preset at import time.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, NamedTuple, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "PHANTOM_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "phantom_editor")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


class _Preset(NamedTuple):
    level: str
    log_file: str
    buffered: bool = False
    json: bool = False


PRESETS: Dict[str, _Preset] = {
    "development": _Preset("DEBUG", "phantom-debug.log"),
    "production": _Preset("INFO", "phantom.log", buffered=True),
    "performance": _Preset(
        "DEBUG", "phantom-performance.log", buffered=True, json=True
    ),
}


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str, default: bool = False) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _preset_config(preset: str) -> Any:
    try:
        chosen = PRESETS[preset.lower()]
    except KeyError as exc:
        raise ValueError(f"Unknown preset '{preset}'.") from exc

    config = tl.Config()
    config.with_min_level(chosen.level)
    config.with_console_output(False)
    config.with_file_output(_env("LOG_FILE") or chosen.log_file)
    if chosen.buffered:
        config.with_buffering(True)
    if chosen.json:
        config.with_json_format(True)
    config.with_profiling(True)
    return config


def _env_config() -> Any:
    preset = _env("LOG_PRESET")
    if preset:
        return _preset_config(preset)

    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())
    console = _env_flag("LOG_CONSOLE") and not _env_flag("DISABLE_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR"))
    if _env_flag("LOG_JSON"):
        config.with_json_format(True)
    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    if _env_flag("LOG_BUFFERED"):
        config.with_buffering(True)
        config.with_buffer_size(int(_env("LOG_BUFFER_SIZE") or "2048"))
    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    ``config`` is an explicit ``telelog.Config``; ``preset`` names one of
    ``PRESETS``. The two are mutually exclusive. Without either, the
    configuration is rebuilt from the environment. Cached loggers are
    dropped so the next ``get_logger`` call picks up the change.
    """

    global _ACTIVE_CONFIG
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _preset_config(preset)
    elif config is None:
        config = _env_config()

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for ``name``."""

    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = _env_config()
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(
            logger_name, _ACTIVE_CONFIG
        )
    return _LOGGER_CACHE[logger_name]


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    """Log ``payload`` as structured pairs when telelog offers ``<level>_with``."""

    name = str(level).lower()
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(k), _stringify(v)) for k, v in payload.items()])
        return
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _emit(
        get_logger(logger_name),
        level,
        f"event::{name}",
        {"event": name, **(data or {})},
    )


@dataclass
class SpanHandle:
    """Handle yielded by ``span`` for metadata updates inside the block."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _payload(self, **extra: Any) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload.update({key: value for key, value in extra.items() if value})
        return payload

    def fail(self, reason: str) -> None:
        _emit(self.logger, "error", "span::fail", self._payload(reason=reason))


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block and optionally track it as a component.

    ``component=True`` reuses ``name`` as the component id; a string names
    the component explicitly. ``metadata`` is attached as logger context
    for the duration of the block and reported again if the block fails.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: _stringify(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=component_name,
        metadata=dict(context),
    )

    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


configure()
logger = get_logger()

__all__ = [
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
    "logger",
]
