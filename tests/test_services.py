from abc import ABC, abstractmethod

import pytest

from sencha.services import (
    Service,
    ServiceHost,
    ServiceNotRegisteredError,
    ServiceProvider,
)
from sencha.sinks import LogLevel, LogSink


class Valued(Service, ABC):
    @abstractmethod
    def value(self):
        ...


class ServiceA(Valued):
    def value(self):
        return 42


class ServiceB(Valued):
    def value(self):
        return 99


class StandaloneService(Service):
    pass


class ConfiguredService(Service):
    def __init__(self, name, *, size):
        self.name = name
        self.size = size


class CaptureSink(LogSink):
    def __init__(self):
        self.entries = []

    def write(self, level, category, message):
        if level < self.min_level:
            return
        self.entries.append((level, category, message))


class AlphaSystem:
    pass


class BetaSystem:
    pass


@pytest.fixture
def host():
    return ServiceHost()


def test_add_and_get_by_concrete_type(host):
    service = host.add_service(StandaloneService)
    assert host.get(StandaloneService) is service


def test_add_with_interface_registers_under_both_types(host):
    service = host.add_service(ServiceA, interface=Valued)
    assert host.get(ServiceA) is service
    assert host.get(Valued) is service


def test_add_service_passes_arguments(host):
    service = host.add_service(ConfiguredService, "grid", size=8)
    assert (service.name, service.size) == ("grid", 8)


def test_try_get_returns_none_when_missing(host):
    assert host.try_get(StandaloneService) is None


def test_try_get_returns_service_when_present(host):
    service = host.add_service(StandaloneService)
    assert host.try_get(StandaloneService) is service


def test_has_returns_false_when_missing(host):
    assert host.has(StandaloneService) is False


def test_has_returns_true_when_present(host):
    host.add_service(StandaloneService)
    assert host.has(StandaloneService) is True


def test_get_raises_when_missing(host):
    with pytest.raises(ServiceNotRegisteredError, match="StandaloneService"):
        host.get(StandaloneService)


def test_get_all_returns_empty(host):
    assert host.get_all(Valued) == []


def test_get_all_returns_multiple_services(host):
    a = host.add_service(ServiceA, interface=Valued)
    b = host.add_service(ServiceB, interface=Valued)
    services = host.get_all(Valued)
    assert len(services) == 2
    assert services[0] is a
    assert services[1] is b


def test_get_all_by_interface_preserves_concrete_identity(host):
    host.add_service(ServiceA, interface=Valued)
    host.add_service(ServiceB, interface=Valued)
    assert [s.value() for s in host.get_all(Valued)] == [42, 99]


def test_remove_service_removes_from_all_registrations(host):
    service = host.add_service(ServiceA, interface=Valued)
    host.remove_service(service)
    assert host.has(ServiceA) is False
    assert host.has(Valued) is False


def test_remove_service_keeps_others(host):
    a = host.add_service(ServiceA, interface=Valued)
    b = host.add_service(ServiceB, interface=Valued)
    host.remove_service(a)
    assert host.get_all(Valued) == [b]
    assert host.get(ServiceB) is b


def test_remove_all_removes_all_of_type(host):
    host.add_service(ServiceA, interface=Valued)
    host.add_service(ServiceB, interface=Valued)
    host.remove_all(Valued)
    assert host.get_all(Valued) == []
    assert host.has(ServiceA) is False
    assert host.has(ServiceB) is False


def test_remove_all_of_missing_type_leaves_others(host):
    service = host.add_service(StandaloneService)
    host.remove_all(Valued)
    assert host.get(StandaloneService) is service


def test_multiple_independent_services(host):
    a = host.add_service(ServiceA)
    standalone = host.add_service(StandaloneService)
    assert host.get(ServiceA) is a
    assert host.get(StandaloneService) is standalone


def test_add_service_rejects_non_service(host):
    with pytest.raises(TypeError):
        host.add_service(dict)


def test_add_service_rejects_unrelated_interface(host):
    with pytest.raises(TypeError):
        host.add_service(StandaloneService, interface=Valued)


def test_lookup_rejects_non_service_type(host):
    with pytest.raises(TypeError):
        host.has(int)


def test_logging_provider_accessible_via_host(host):
    sink = host.logging_provider.add_sink(CaptureSink)
    host.logging_provider.get_logger(BetaSystem).info("from host")
    assert len(sink.entries) == 1
    assert sink.entries[0][2] == "from host"


def test_get_logger_via_service_provider(host):
    sink = host.logging_provider.add_sink(CaptureSink)
    provider = ServiceProvider(host)
    provider.get_logger(BetaSystem).warn("from provider")
    assert len(sink.entries) == 1
    level, category, message = sink.entries[0]
    assert level == LogLevel.WARNING
    assert message == "from provider"
    assert "BetaSystem" in category


def test_service_provider_and_host_return_same_logger(host):
    host.logging_provider.add_sink(CaptureSink)
    provider = ServiceProvider(host)
    assert host.logging_provider.get_logger(AlphaSystem) is provider.get_logger(AlphaSystem)


def test_service_provider_resolves_services(host):
    a = host.add_service(ServiceA, interface=Valued)
    provider = ServiceProvider(host)
    assert provider.get(Valued) is a
    assert provider.try_get(StandaloneService) is None
    assert provider.get_all(Valued) == [a]


def test_service_provider_get_raises_when_missing(host):
    provider = ServiceProvider(host)
    with pytest.raises(ServiceNotRegisteredError):
        provider.get(StandaloneService)


def test_invalidated_provider_refuses_lookups(host):
    host.add_service(StandaloneService)
    provider = ServiceProvider(host)
    provider.invalidate()
    with pytest.raises(RuntimeError):
        provider.get(StandaloneService)
    with pytest.raises(RuntimeError):
        provider.get_logger(AlphaSystem)