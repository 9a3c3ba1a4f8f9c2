"""Structured logging for annealing runs.

Every record is a single JSON line so run traces can be grepped or loaded
with any JSON reader.
"""

from __future__ import annotations

import json
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, TextIO

LEVELS = {"DEBUG": 0, "INFO": 1, "WARN": 2, "ERROR": 3}


@dataclass
class LogRecord:
    """Structured log record."""

    level: str
    message: str
    timestamp: float = field(default_factory=time.time)
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "message": self.message,
            "timestamp": self.timestamp,
            **self.data,
        }

    def to_json(self) -> str:
        # default=float handles numpy scalars coming out of user fitness code
        return json.dumps(self.to_dict(), default=float)


class StructuredLogger:
    """Leveled logger writing JSON lines.

    Args:
        name: Logger name (typically the module ``__name__``).
        output: Stream to write to. Defaults to ``sys.stderr`` at write time,
            so stdout stays free for command output.
        min_level: Lowest level that is emitted.
    """

    def __init__(
        self,
        name: str,
        output: TextIO | None = None,
        min_level: str = "INFO",
    ) -> None:
        self.name = name
        self.output = output
        self._min_level = LEVELS.get(min_level.upper(), 1)

    @property
    def min_level(self) -> str:
        for name, value in LEVELS.items():
            if value == self._min_level:
                return name
        return "INFO"

    def set_level(self, level: str) -> None:
        self._min_level = LEVELS.get(level.upper(), 1)

    def is_enabled(self, level: str) -> bool:
        """Return True if records at ``level`` would be written."""
        return LEVELS.get(level, 0) >= self._min_level

    def _log(self, level: str, message: str, **data: Any) -> None:
        if not self.is_enabled(level):
            return

        record = LogRecord(level=level, message=message, data={"logger": self.name, **data})
        print(record.to_json(), file=self.output or sys.stderr)

    def debug(self, message: str, **data: Any) -> None:
        self._log("DEBUG", message, **data)

    def info(self, message: str, **data: Any) -> None:
        self._log("INFO", message, **data)

    def warn(self, message: str, **data: Any) -> None:
        self._log("WARN", message, **data)

    def error(self, message: str, **data: Any) -> None:
        self._log("ERROR", message, **data)

    @contextmanager
    def timer(self, operation: str):
        """Context manager timing a block and logging it at DEBUG.

        Usage:
            with logger.timer("anneal"):
                result = anneal(...)
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self.debug(f"{operation} completed", elapsed_ms=elapsed * 1000)


_loggers: dict[str, StructuredLogger] = {}
_default_level = "INFO"


def get_logger(name: str) -> StructuredLogger:
    """Get or create a structured logger.

    Args:
        name: Logger name (typically __name__).

    Returns:
        StructuredLogger instance shared by every caller using ``name``.
    """
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name, min_level=_default_level)
    return _loggers[name]


def set_log_level(level: str) -> None:
    """Set minimum log level for existing and future loggers.

    Args:
        level: One of DEBUG, INFO, WARN, ERROR.
    """
    global _default_level
    if level.upper() not in LEVELS:
        raise ValueError(f"Unknown log level {level!r}, expected one of {sorted(LEVELS)}")
    _default_level = level.upper()
    for logger in _loggers.values():
        logger.set_level(_default_level)
