"""Bounded log of user-facing status and debug messages."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, Optional

from . import telemetry

DEFAULT_STATUS_HISTORY = 5


class StatusLog:
    """Keeps the most recent messages for the status line and debug panel.

    Messages are also mirrored to telemetry at debug level so a log file
    holds the full history the panel has already dropped.
    """

    def __init__(self, limit: int = DEFAULT_STATUS_HISTORY) -> None:
        if limit <= 0:
            raise ValueError("limit must be positive")
        self._messages: Deque[str] = deque(maxlen=limit)

    def push(self, message: str) -> None:
        self._messages.append(message)
        telemetry.record_event("status", level="debug", data={"message": message})

    @property
    def latest(self) -> Optional[str]:
        return self._messages[-1] if self._messages else None

    def clear(self) -> None:
        self._messages.clear()

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._messages))

    def __len__(self) -> int:
        return len(self._messages)


__all__ = ["StatusLog", "DEFAULT_STATUS_HISTORY"]
