"""Service registry and the scoped read-only view handed to systems."""

from __future__ import annotations

from typing import Any, TypeVar

from sencha.logger import Logger, LoggingProvider

T = TypeVar("T", bound="Service")


class Service:
    """Base class for everything a ServiceHost can own."""


class ServiceNotRegisteredError(LookupError):
    """Raised when a required service has not been registered."""


def _require_service_type(service_type: object) -> None:
    if not (isinstance(service_type, type) and issubclass(service_type, Service)):
        raise TypeError(f"{service_type!r} must be a subclass of Service")


class ServiceHost:
    """Owns services and looks them up by concrete or interface type."""

    def __init__(self) -> None:
        self._services: list[Service] = []
        self._registry: dict[type, list[Service]] = {}
        self._logging = LoggingProvider()

    @property
    def logging_provider(self) -> LoggingProvider:
        return self._logging

    def add_service(
        self, service_type: type[T], *args: Any, interface: type | None = None, **kwargs: Any
    ) -> T:
        """Create and own a service, registered under its type and ``interface``."""
        _require_service_type(service_type)
        if interface is not None:
            _require_service_type(interface)
            if not issubclass(service_type, interface):
                raise TypeError(
                    f"{service_type.__name__} must derive from {interface.__name__}"
                )

        service = service_type(*args, **kwargs)
        self._services.append(service)
        self._registry.setdefault(service_type, []).append(service)
        if interface is not None and interface is not service_type:
            self._registry.setdefault(interface, []).append(service)
        return service

    def get(self, service_type: type[T]) -> T:
        """Return the first service registered under ``service_type``."""
        service = self.try_get(service_type)
        if service is None:
            raise ServiceNotRegisteredError(
                f"Service not registered: {service_type.__name__}"
            )
        return service

    def try_get(self, service_type: type[T]) -> T | None:
        _require_service_type(service_type)
        registered = self._registry.get(service_type)
        return registered[0] if registered else None  # type: ignore[return-value]

    def has(self, service_type: type) -> bool:
        _require_service_type(service_type)
        return bool(self._registry.get(service_type))

    def get_all(self, service_type: type[T]) -> list[T]:
        """Return every service registered under ``service_type``, in order added."""
        _require_service_type(service_type)
        return list(self._registry.get(service_type, ()))  # type: ignore[arg-type]

    def remove_service(self, service: Service) -> None:
        """Drop ``service`` from every registration and from ownership."""
        if not isinstance(service, Service):
            raise TypeError(f"{service!r} is not a Service")
        self._unregister({id(service)})

    def remove_all(self, service_type: type) -> None:
        """Drop every service registered under ``service_type``."""
        _require_service_type(service_type)
        removed = self._registry.pop(service_type, None)
        if not removed:
            return
        self._unregister({id(s) for s in removed})

    def _unregister(self, ids: set[int]) -> None:
        for key in list(self._registry):
            remaining = [s for s in self._registry[key] if id(s) not in ids]
            if remaining:
                self._registry[key] = remaining
            else:
                del self._registry[key]
        self._services = [s for s in self._services if id(s) not in ids]


class ServiceProvider:
    """Short-lived read-only view of a ServiceHost for resolving dependencies."""

    def __init__(self, host: ServiceHost) -> None:
        self._host: ServiceHost | None = host

    def _live_host(self) -> ServiceHost:
        if self._host is None:
            raise RuntimeError("ServiceProvider used after construction phase")
        return self._host

    def get(self, service_type: type[T]) -> T:
        return self._live_host().get(service_type)

    def try_get(self, service_type: type[T]) -> T | None:
        return self._live_host().try_get(service_type)

    def get_all(self, service_type: type[T]) -> list[T]:
        return self._live_host().get_all(service_type)

    def get_logger(self, owner: object) -> Logger:
        return self._live_host().logging_provider.get_logger(owner)

    def invalidate(self) -> None:
        """Detach from the host; any later lookup raises RuntimeError."""
        self._host = None