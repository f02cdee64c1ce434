"""Demo: renders fake windows and runs a small particle batch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from sencha.batch import DataBatch, RefBatch
from sencha.render import GraphicsAPI, Renderable, RenderContextService, RenderSystem
from sencha.services import ServiceHost, ServiceProvider
from sencha.sinks import ConsoleLogSink, FileLogSink, LogLevel
from sencha.systems import SystemHost


class ConsoleGraphicsAPI(GraphicsAPI):
    """Fake backend that prints each frame step to stdout."""

    def __init__(self, name: str) -> None:
        self.name = name

    def _say(self, step: str) -> None:
        print(f"  [{self.name}] {step}")

    def is_valid(self) -> bool:
        return True

    def begin_frame(self) -> None:
        self._say("BeginFrame")

    def clear(self) -> None:
        self._say("Clear")

    def end_frame(self) -> None:
        self._say("EndFrame")

    def present(self) -> None:
        self._say("Present")


class TriangleRenderable(Renderable):
    """Fake triangle drawn after quads."""

    def render(self, graphics_api: GraphicsAPI) -> None:
        print("    -> Draw Triangle")

    def render_order(self) -> int:
        return 10


class QuadRenderable(Renderable):
    """Fake quad whose visibility is fixed at creation."""

    def __init__(self, visible: bool) -> None:
        self.visible = visible

    def render(self, graphics_api: GraphicsAPI) -> None:
        print("    -> Draw Quad")

    def render_order(self) -> int:
        return 5

    def is_visible(self) -> bool:
        return self.visible


@dataclass
class Particle:
    x: float = 0.0
    y: float = 0.0
    life: float = 1.0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo, logging to the console and to ``game.log``."""
    services = ServiceHost()
    logging_provider = services.logging_provider

    logging_provider.set_min_level(LogLevel.DEBUG)
    logging_provider.add_sink(ConsoleLogSink)
    file_sink = logging_provider.add_sink(FileLogSink, "game.log")

    with file_sink:
        logger = logging_provider.get_logger("Game")
        logger.info("Starting RenderSystem demo...")

        services.add_service(RenderContextService, logging_provider)
        services.add_service(RefBatch)

        provider = ServiceProvider(services)

        contexts = services.get(RenderContextService)
        renderables: RefBatch[Renderable] = services.get(RefBatch)

        window_a = ConsoleGraphicsAPI("Window-A")
        window_b = ConsoleGraphicsAPI("Window-B")
        contexts.add_context(window_a)
        id_b = contexts.add_context(window_b)

        quad = QuadRenderable(True)
        triangle = TriangleRenderable()
        hidden_quad = QuadRenderable(False)
        for renderable in (quad, triangle, hidden_quad):
            renderables.add(renderable)

        systems = SystemHost()
        systems.add_system(RenderSystem, 0, provider)
        logger.info("RenderSystem added to SystemHost.")

        systems.init()

        print("=== Frame 1: two windows, three renderables (one hidden) ===")
        systems.update()

        print("\n=== Frame 2: deactivate Window-B ===")
        contexts.get_context(id_b).is_active = False
        systems.update()

        print("\n=== Frame 3: remove triangle, reactivate Window-B ===")
        renderables.remove(triangle)
        contexts.get_context(id_b).is_active = True
        systems.update()

        logger.info("RenderSystem demo complete.")

        print("\n=== DataBatch<Particle> — Cache-friendly DOD demo ===")
        particles: DataBatch[Particle] = DataBatch(Particle)

        p1 = particles.emplace(0.0, 0.0, 1.0)
        p2 = particles.emplace(5.0, 3.0, 0.8)
        particles.emplace(2.0, 7.0, 0.5)

        logger.info("Emplaced 3 particles into DataBatch.")

        for particle in particles:
            particle.life -= 0.1

        first = particles.try_get(p1)
        if first is not None:
            print(f"  Particle 1 life after tick: {first.life:g}")

        particles.remove(p2)
        print(f"  After removing particle 2: {len(particles)} particles remain.")

        logger.info("DataBatch demo complete.")

        systems.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())