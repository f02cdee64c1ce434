"""Render targets, renderables and the system that draws them each frame."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from sencha.batch import RefBatch
from sencha.logger import LoggingProvider
from sencha.services import Service, ServiceProvider
from sencha.systems import System


class GraphicsAPI(ABC):
    """Backend-neutral graphics operations for one render target.

    A frame runs ``is_valid``, ``begin_frame``, ``clear``, the draw calls,
    ``end_frame`` and ``present``, in that order.
    """

    @abstractmethod
    def is_valid(self) -> bool:
        """Whether the target can still be drawn to."""

    @abstractmethod
    def begin_frame(self) -> None:
        """Start a frame."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the target."""

    @abstractmethod
    def end_frame(self) -> None:
        """Finish the frame's drawing."""

    @abstractmethod
    def present(self) -> None:
        """Show the finished frame."""


class Renderable(ABC):
    """Anything that can draw itself through a GraphicsAPI."""

    @abstractmethod
    def render(self, graphics_api: GraphicsAPI) -> None:
        """Draw this object."""

    def render_order(self) -> int:
        """Draw order; lower values are drawn first."""
        return 0

    def is_visible(self) -> bool:
        """Invisible renderables stay registered but are not drawn."""
        return True


@dataclass
class RenderContext:
    """One render target, such as a window, and the API that draws into it."""

    id: int
    graphics_api: GraphicsAPI | None = None
    is_active: bool = True


class RenderContextService(Service):
    """Keeps the render contexts, one per render target."""

    def __init__(self, logging_provider: LoggingProvider) -> None:
        self._contexts: list[RenderContext] = []
        self._next_id = 0
        self._log = logging_provider.get_logger(RenderContextService)

    def add_context(self, graphics_api: GraphicsAPI | None) -> int:
        """Add an active context for ``graphics_api`` and return its id."""
        context = RenderContext(self._next_id, graphics_api, True)
        self._next_id += 1
        self._contexts.append(context)
        self._log.info("Added RenderContext with ID {}", context.id)
        return context.id

    def remove_context(self, context_id: int) -> None:
        """Remove the context with ``context_id``; logs if there is none."""
        remaining = [c for c in self._contexts if c.id != context_id]
        if len(remaining) != len(self._contexts):
            self._contexts = remaining
            self._log.info("Removed RenderContext with ID {}", context_id)
        else:
            self._log.info("RenderContext with ID {} not found", context_id)

    def get_context(self, context_id: int) -> RenderContext | None:
        """Return the context with ``context_id``, or None."""
        return next((c for c in self._contexts if c.id == context_id), None)

    def contexts(self) -> tuple[RenderContext, ...]:
        """Return the contexts in the order they were added."""
        return tuple(self._contexts)

    def __len__(self) -> int:
        return len(self._contexts)

    def is_empty(self) -> bool:
        return not self._contexts


class RenderSystem(System):
    """Draws every registered renderable into every active, valid context."""

    def __init__(self, provider: ServiceProvider) -> None:
        self._context_service = provider.get(RenderContextService)
        self._renderables: RefBatch[Renderable] = provider.get(RefBatch)
        self._log = provider.get_logger(RenderSystem)

    def update(self) -> None:
        self._renderables.sort_if_dirty(key=lambda r: r.render_order())

        for context in self._context_service.contexts():
            api = context.graphics_api
            if not context.is_active or api is None:
                continue
            if not api.is_valid():
                continue

            api.begin_frame()
            api.clear()
            for renderable in self._renderables:
                if renderable.is_visible():
                    renderable.render(api)
            api.end_frame()
            api.present()