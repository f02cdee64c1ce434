"""Named loggers and the provider that creates and caches them."""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from sencha.sinks import LogLevel, LogSink

SinkT = TypeVar("SinkT", bound=LogSink)


class Logger:
    """Forwards messages under one category to a fixed set of sinks.

    Messages given extra arguments are formatted with ``str.format``.
    """

    def __init__(self, category: str, sinks: Iterable[LogSink]) -> None:
        self._category = category
        self._sinks = tuple(sinks)

    @property
    def category(self) -> str:
        return self._category

    def log(self, level: LogLevel, message: str, *args: Any, **kwargs: Any) -> None:
        text = message.format(*args, **kwargs) if args or kwargs else message
        for sink in self._sinks:
            sink.write(level, self._category, text)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.log(LogLevel.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.log(LogLevel.INFO, message, *args, **kwargs)

    def warn(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.log(LogLevel.WARNING, message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.log(LogLevel.ERROR, message, *args, **kwargs)

    def critical(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.log(LogLevel.CRITICAL, message, *args, **kwargs)


def _owner_key(owner: object) -> object:
    if isinstance(owner, (str, type)):
        return owner
    return type(owner)


def _category_name(key: object) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, type):
        return key.__name__
    return type(key).__name__


class LoggingProvider:
    """Owns the sinks and hands out one cached logger per owner type."""

    def __init__(self) -> None:
        self._sinks: list[LogSink] = []
        self._loggers: dict[object, Logger] = {}

    def add_sink(self, sink_type: Callable[..., SinkT], *args: Any, **kwargs: Any) -> SinkT:
        """Create a sink from ``sink_type`` and the given arguments, and keep it."""
        sink = sink_type(*args, **kwargs)
        self._sinks.append(sink)
        return sink

    def set_min_level(self, level: LogLevel) -> None:
        """Set the minimum level on every sink added so far."""
        level = LogLevel(level)
        for sink in self._sinks:
            sink.min_level = level

    def get_logger(self, owner: object) -> Logger:
        """Return the logger for ``owner`` (a class, an instance or a name).

        A logger sees the sinks that existed when it was first requested.
        """
        key = _owner_key(owner)
        logger = self._loggers.get(key)
        if logger is None:
            logger = Logger(_category_name(key), self._sinks)
            self._loggers[key] = logger
        return logger