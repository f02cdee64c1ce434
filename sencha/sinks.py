"""Log levels and the sinks that write formatted log records."""

from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from types import TracebackType
from typing import TextIO, Union

PathLike = Union[str, "os.PathLike[str]"]

MAX_OLD_LOGS = 3


class LogLevel(IntEnum):
    """Severity of a log message, from least to most severe."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4

    @property
    def label(self) -> str:
        """Short upper-case name used in formatted records."""
        return _LABELS[self]


_LABELS = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRIT",
}


def timestamp() -> str:
    """Return the current local time as ``YYYY-MM-DD HH:MM:SS.mmm``."""
    now = datetime.now()
    return f"{now:%Y-%m-%d %H:%M:%S}.{now.microsecond // 1000:03d}"


def format_record(level: int, category: str, message: str) -> str:
    """Format one record as ``[timestamp] [LEVEL] category: message``."""
    try:
        label = LogLevel(level).label
    except ValueError:
        label = "???"
    return f"[{timestamp()}] [{label}] {category}: {message}"


class LogSink(ABC):
    """Destination for log records, filtering by a minimum level."""

    min_level: LogLevel = LogLevel.DEBUG

    @abstractmethod
    def write(self, level: LogLevel, category: str, message: str) -> None:
        """Emit one record if its level passes the sink's filter."""


class ConsoleLogSink(LogSink):
    """Writes Debug to Warning records to stdout, Error and above to stderr."""

    def write(self, level: LogLevel, category: str, message: str) -> None:
        if level < self.min_level:
            return
        stream = sys.stderr if level >= LogLevel.ERROR else sys.stdout
        print(format_record(level, category, message), file=stream)


def rotate_logs(base_path: PathLike, max_old_logs: int = MAX_OLD_LOGS) -> None:
    """Shift ``name.ext`` to ``name-1.ext`` and so on, dropping the oldest.

    At most ``max_old_logs`` numbered files are kept.
    """
    base = Path(base_path)

    def numbered(n: int) -> Path:
        return base.with_name(f"{base.stem}-{n}{base.suffix}")

    oldest = numbered(max_old_logs)
    if oldest.exists():
        oldest.unlink()

    for i in range(max_old_logs - 1, 0, -1):
        src = numbered(i)
        if src.exists():
            os.replace(src, numbered(i + 1))

    if base.exists():
        os.replace(base, numbered(1))


class FileLogSink(LogSink):
    """Writes records to a file, rotating older files away on creation."""

    max_old_logs = MAX_OLD_LOGS

    def __init__(self, filename: PathLike) -> None:
        self.path = Path(filename)
        rotate_logs(self.path, self.max_old_logs)
        self._stream: TextIO | None = self.path.open("w", encoding="utf-8")

    def write(self, level: LogLevel, category: str, message: str) -> None:
        if level < self.min_level or self._stream is None:
            return
        self._stream.write(format_record(level, category, message) + "\n")
        self._stream.flush()

    def close(self) -> None:
        """Close the file; later writes are ignored."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def __enter__(self) -> FileLogSink:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()