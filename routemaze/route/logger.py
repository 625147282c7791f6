"""Coloured console logging mirrored to an append-only log file."""

from __future__ import annotations

import os
import sys
import threading
import time
from enum import IntEnum


class LogLevel(IntEnum):
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    NONE = 4


_COLOURS = {
    LogLevel.DEBUG: "36",
    LogLevel.INFO: "32",
    LogLevel.WARNING: "33",
    LogLevel.ERROR: "31",
}


class Logger:
    """Writes messages at or above a level to the console and to a log file."""

    def __init__(
        self,
        log_file: str | os.PathLike[str] | None = "transport.log",
        level: LogLevel = LogLevel.INFO,
    ) -> None:
        self.log_file = log_file
        self.level = LogLevel(level)
        self._lock = threading.Lock()

    def set_level(self, level: LogLevel) -> None:
        self.level = LogLevel(level)

    def debug(self, message: str) -> None:
        self._log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        self._log(LogLevel.INFO, message)

    def warning(self, message: str) -> None:
        self._log(LogLevel.WARNING, message)

    def error(self, message: str) -> None:
        self._log(LogLevel.ERROR, message)

    def _log(self, level: LogLevel, message: str) -> None:
        if self.level > level:
            return
        tagged = f"[{level.name}] {message}"
        stream = sys.stderr if level is LogLevel.ERROR else sys.stdout
        stream.write(f"\033[{_COLOURS[level]}m{tagged}\033[0m\n")
        self._to_file(tagged)

    def _to_file(self, message: str) -> None:
        if self.log_file is None:
            return
        with self._lock:
            timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
            try:
                with open(self.log_file, "a", encoding="utf-8") as handle:
                    handle.write(f"[{timestamp}] {message}\n")
            except OSError:
                pass