from dataclasses import dataclass

import pytest

from sencha.logger import Logger, LoggingProvider
from sencha.sinks import LogLevel, LogSink


@dataclass
class Entry:
    level: LogLevel
    category: str
    message: str


class CaptureSink(LogSink):
    def __init__(self):
        self.entries = []

    def write(self, level, category, message):
        if level < self.min_level:
            return
        self.entries.append(Entry(level, category, message))


class AlphaSystem:
    pass


class BetaSystem:
    pass


@pytest.fixture
def provider():
    return LoggingProvider()


def test_get_logger_returns_same_instance_for_same_type(provider):
    sink = provider.add_sink(CaptureSink)
    first = provider.get_logger(AlphaSystem)
    second = provider.get_logger(AlphaSystem)
    assert first is second
    assert second.category == "AlphaSystem"
    first.info("one")
    second.info("two")
    assert [e.message for e in sink.entries] == ["one", "two"]


def test_get_logger_returns_different_instances_for_different_types(provider):
    provider.add_sink(CaptureSink)
    logger_a = provider.get_logger(AlphaSystem)
    logger_b = provider.get_logger(BetaSystem)
    assert logger_a is not logger_b
    assert logger_a.category == "AlphaSystem"
    assert logger_b.category == "BetaSystem"


def test_logger_category_contains_type_name(provider):
    provider.add_sink(CaptureSink)
    assert "AlphaSystem" in provider.get_logger(AlphaSystem).category


def test_logger_writes_to_sink(provider):
    sink = provider.add_sink(CaptureSink)
    provider.get_logger(AlphaSystem).info("hello")
    assert len(sink.entries) == 1
    assert sink.entries[0].level == LogLevel.INFO
    assert sink.entries[0].message == "hello"
    assert sink.entries[0].category == "AlphaSystem"


def test_logger_writes_to_multiple_sinks(provider):
    sink_a = provider.add_sink(CaptureSink)
    sink_b = provider.add_sink(CaptureSink)
    provider.get_logger(AlphaSystem).error("oops")
    assert len(sink_a.entries) == 1
    assert len(sink_b.entries) == 1


def test_set_min_level_filters_messages(provider):
    sink = provider.add_sink(CaptureSink)
    provider.set_min_level(LogLevel.WARNING)
    logger = provider.get_logger(AlphaSystem)
    logger.debug("skip me")
    logger.info("skip me too")
    logger.warn("keep me")
    logger.error("keep me too")
    assert [e.level for e in sink.entries] == [LogLevel.WARNING, LogLevel.ERROR]


def test_set_min_level_applies_to_every_sink(provider):
    sinks = [provider.add_sink(CaptureSink) for _ in range(3)]
    provider.set_min_level(LogLevel.ERROR)
    assert all(sink.min_level == LogLevel.ERROR for sink in sinks)


def test_format_string_support(provider):
    sink = provider.add_sink(CaptureSink)
    provider.get_logger(AlphaSystem).info("loaded {} textures in {:.1f}ms", 42, 3.14)
    assert len(sink.entries) == 1
    assert sink.entries[0].message == "loaded 42 textures in 3.1ms"


def test_keyword_formatting(provider):
    sink = provider.add_sink(CaptureSink)
    provider.get_logger(AlphaSystem).warn("context {id} lost", id=7)
    assert sink.entries[0].message == "context 7 lost"


def test_plain_message_is_not_formatted(provider):
    sink = provider.add_sink(CaptureSink)
    provider.get_logger(AlphaSystem).info("{braces stay}")
    assert sink.entries[0].message == "{braces stay}"


def test_all_log_levels_work(provider):
    sink = provider.add_sink(CaptureSink)
    logger = provider.get_logger(AlphaSystem)
    logger.debug("d")
    logger.info("i")
    logger.warn("w")
    logger.error("e")
    logger.critical("c")
    assert [e.level for e in sink.entries] == [
        LogLevel.DEBUG,
        LogLevel.INFO,
        LogLevel.WARNING,
        LogLevel.ERROR,
        LogLevel.CRITICAL,
    ]
    assert [e.message for e in sink.entries] == ["d", "i", "w", "e", "c"]


def test_get_logger_by_instance_shares_type_logger(provider):
    provider.add_sink(CaptureSink)
    assert provider.get_logger(AlphaSystem()) is provider.get_logger(AlphaSystem)


def test_get_logger_by_name(provider):
    sink = provider.add_sink(CaptureSink)
    provider.get_logger("Game").info("started")
    assert sink.entries[0].category == "Game"


def test_add_sink_passes_arguments(provider):
    class NamedSink(CaptureSink):
        def __init__(self, name, *, level):
            super().__init__()
            self.name = name
            self.min_level = level

    sink = provider.add_sink(NamedSink, "main", level=LogLevel.INFO)
    assert sink.name == "main"
    assert sink.min_level == LogLevel.INFO


def test_logger_direct_construction():
    sink = CaptureSink()
    logger = Logger("Direct", [sink])
    logger.log(LogLevel.CRITICAL, "{}-{}", 1, 2)
    assert sink.entries == [Entry(LogLevel.CRITICAL, "Direct", "1-2")]