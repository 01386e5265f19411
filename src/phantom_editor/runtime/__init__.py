"""Runtime services: telemetry and the user-facing status log."""

from . import telemetry
from .status import StatusLog

__all__ = ["telemetry", "StatusLog"]
