"""Systems and the host that runs them in order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

S = TypeVar("S", bound="System")


class System:
    """Base class for systems.

    The default hooks only record the system's lifecycle state; subclasses
    override whichever hooks they need.
    """

    active: bool = False
    frames_updated: int = 0

    def init(self) -> None:
        """Called once when the host starts, or on adding to a started host."""
        self.active = True
        self.frames_updated = 0

    def update(self) -> None:
        """Called once per host update."""
        self.frames_updated += 1

    def shutdown(self) -> None:
        """Called when the host shuts down."""
        self.active = False


@dataclass
class _Entry:
    order: int
    system: System


class SystemHost:
    """Owns systems and runs them by ascending order value."""

    def __init__(self) -> None:
        self._entries: list[_Entry] = []
        self._registry: dict[type, System] = {}
        self._initialized = False

    def add_system(self, system_type: type[S], order: int, *args: Any, **kwargs: Any) -> S:
        """Create a system of ``system_type`` and own it.

        If the host has already been initialised the new system is
        initialised immediately. Each type may be added only once.
        """
        if not (isinstance(system_type, type) and issubclass(system_type, System)):
            raise TypeError(f"{system_type!r} must be a subclass of System")
        if system_type in self._registry:
            raise ValueError(f"system already added: {system_type.__name__}")

        system = system_type(*args, **kwargs)
        self._registry[system_type] = system
        self._entries.append(_Entry(order, system))

        if self._initialized:
            self._sort()
            system.init()
        return system

    def get(self, system_type: type[S]) -> S | None:
        """Return the system of ``system_type``, or None."""
        return self._registry.get(system_type)  # type: ignore[return-value]

    def has(self, system_type: type) -> bool:
        return system_type in self._registry

    def init(self) -> None:
        """Initialise every system in order."""
        self._sort()
        for entry in self._entries:
            entry.system.init()
        self._initialized = True

    def update(self) -> None:
        """Update every system in order."""
        for entry in list(self._entries):
            entry.system.update()

    def shutdown(self) -> None:
        """Shut systems down in reverse order and forget them all."""
        for entry in reversed(self._entries):
            entry.system.shutdown()
        self._entries.clear()
        self._registry.clear()
        self._initialized = False

    def _sort(self) -> None:
        self._entries.sort(key=lambda entry: entry.order)