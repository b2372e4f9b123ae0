from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pygame

from ..sim.core.config import UPDATE_ORDERS, SimulationConfig
from ..sim.core.flock import Flock
from .rendering import draw_flock

logger = logging.getLogger(__name__)


class Viewer:
    """Window shell around a :class:`Flock`: polls events, ticks on frame time and draws."""

    def __init__(self, config: SimulationConfig):
        self.config = config
        self.flock = Flock(config)
        self.show_radii = config.viewer.show_radii
        self.running = False
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_r:
                self.flock.reset()
            elif event.key == pygame.K_d:
                self.show_radii = not self.show_radii

    def resize(self, width: int, height: int) -> None:
        self.flock.resize((width, height))
        logger.info("World resized to %dx%d", width, height)

    def step(self, dt: float) -> None:
        self.flock.tick(dt)

    def render(self, surface: pygame.Surface) -> None:
        surface.fill(self.config.viewer.background)
        draw_flock(surface, self.flock.agents, self.show_radii)

    def run(self) -> None:
        pygame.init()
        width, height = self.flock.bounds
        self._screen = pygame.display.set_mode((int(width), int(height)), pygame.RESIZABLE)
        pygame.display.set_caption(self.config.viewer.title)
        self._clock = pygame.time.Clock()
        self.running = True
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break
                dt = self._clock.tick(self.config.viewer.fps_cap) / 1000.0
                self.step(dt)
                self.render(self._screen)
                pygame.display.flip()
        finally:
            pygame.quit()


def main() -> None:
    parser = argparse.ArgumentParser(description="Interactive boids viewer")
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--population", type=int, default=None)
    parser.add_argument("--order", choices=list(UPDATE_ORDERS), default=None, help="Tick update order")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    config = SimulationConfig.from_yaml(args.config) if args.config else SimulationConfig()
    if args.seed is not None:
        config.seed = args.seed
    if args.population is not None:
        config.population = args.population
    if args.order is not None:
        config.update_order = args.order
    Viewer(config).run()


if __name__ == "__main__":
    main()
