from __future__ import annotations

import logging
from time import perf_counter
from typing import Dict, Iterable, List, Optional

from .agent import Boid
from .config import UPDATE_ORDERS, SimulationConfig
from .rng import DeterministicRng
from ..systems import metrics as metrics_system
from ..systems.movement import advance
from ..systems.population import generate_population
from ..systems.steering import SteeringDecision, decide_heading, steer
from ..types.metrics import TickMetrics
from ..types.snapshot import Snapshot, SnapshotMetadata, SnapshotWorld

logger = logging.getLogger(__name__)


def _checked_bounds(bounds: tuple[float, float]) -> tuple[float, float]:
    width, height = bounds
    if width < 0 or height < 0:
        raise ValueError(f"World bounds must be non-negative, got {bounds!r}")
    return (width, height)


class Flock:
    """
    Fixed population of boids advanced one tick at a time.

    With ``update_order="sequential"`` boids are moved and steered in index
    order against the live list, so a boid already handled this tick is seen
    by later boids with its new position and heading. ``"buffered"`` moves
    every boid first, then steers all of them against a frozen copy of the
    moved population, which makes the result independent of list order.
    """

    def __init__(self, config: SimulationConfig, boids: Optional[Iterable[Boid]] = None):
        if config.update_order not in UPDATE_ORDERS:
            raise ValueError(f"Unknown update order: {config.update_order}")
        self._config = config
        self._rng = DeterministicRng(config.seed)
        self._bounds = _checked_bounds(config.world_bounds)
        self._boids: List[Boid] = list(boids) if boids is not None else self._spawn()
        self._decisions: Dict[SteeringDecision, int] = {}
        self._metrics: TickMetrics | None = None
        self._tick = 0
        logger.debug("Flock of %d boids using %s update order", len(self._boids), config.update_order)

    @property
    def agents(self) -> List[Boid]:
        return self._boids

    @property
    def bounds(self) -> tuple[float, float]:
        return self._bounds

    @property
    def metrics(self) -> TickMetrics | None:
        return self._metrics

    @property
    def tick_count(self) -> int:
        return self._tick

    def resize(self, bounds: tuple[float, float]) -> None:
        self._bounds = _checked_bounds(bounds)

    def reset(self, boids: Optional[Iterable[Boid]] = None) -> None:
        """Replace the whole population; a fresh random one is drawn when ``boids`` is None."""
        self._boids = list(boids) if boids is not None else self._spawn()
        self._metrics = None
        logger.info("Flock reset with %d boids", len(self._boids))

    def tick(self, dt: float, bounds: Optional[tuple[float, float]] = None) -> TickMetrics:
        if dt < 0:
            raise ValueError(f"Time step must be non-negative, got {dt}")
        if bounds is not None:
            self.resize(bounds)
        start = perf_counter()
        decisions = self._decisions
        decisions.clear()
        if self._config.update_order == "buffered":
            neighbor_checks = self._tick_buffered(dt)
        else:
            neighbor_checks = self._tick_sequential(dt)
        duration_ms = (perf_counter() - start) * 1000.0
        self._metrics = metrics_system.create_metrics(
            self._tick, self._boids, decisions, neighbor_checks, duration_ms
        )
        self._tick += 1
        return self._metrics

    def _tick_sequential(self, dt: float) -> int:
        boids = self._boids
        bounds = self._bounds
        decisions = self._decisions
        neighbor_checks = 0
        for boid in boids:
            advance(boid, dt, bounds)
            decision, checks = steer(boid, boids)
            decisions[decision] = decisions.get(decision, 0) + 1
            neighbor_checks += checks
        return neighbor_checks

    def _tick_buffered(self, dt: float) -> int:
        boids = self._boids
        bounds = self._bounds
        decisions = self._decisions
        for boid in boids:
            advance(boid, dt, bounds)
        frozen = [boid.copy() for boid in boids]
        headings: List[float] = []
        neighbor_checks = 0
        for boid in frozen:
            heading, decision, checks = decide_heading(boid, frozen)
            headings.append(heading)
            decisions[decision] = decisions.get(decision, 0) + 1
            neighbor_checks += checks
        for boid, heading in zip(boids, headings):
            boid.heading = heading
        return neighbor_checks

    def snapshot(self, tick: Optional[int] = None) -> Snapshot:
        """Read-only view of the population; ``tick`` defaults to the last completed tick."""
        metrics = self._metrics
        if tick is None:
            tick = metrics.tick if metrics is not None else self._tick
        if metrics is None:
            metrics = metrics_system.create_metrics(tick, self._boids, {}, 0, 0.0)
        width, height = self._bounds
        metadata = SnapshotMetadata(
            time_step=self._config.time_step,
            seed=self._config.seed,
            update_order=self._config.update_order,
            config_version=self._config.config_version,
        )
        return Snapshot(
            tick=tick,
            metrics=metrics,
            agents=[self._agent_snapshot(index, boid) for index, boid in enumerate(self._boids)],
            world=SnapshotWorld(width=width, height=height),
            metadata=metadata,
        )

    @staticmethod
    def _agent_snapshot(index: int, boid: Boid) -> Dict[str, object]:
        return {
            "index": index,
            "x": boid.position.x,
            "y": boid.position.y,
            "heading": boid.heading,
            "size": boid.size,
            "color": list(boid.color),
            "cohesion_radius": boid.cohesion_radius,
            "alignment_radius": boid.alignment_radius,
            "separation_radius": boid.separation_radius,
        }

    def _spawn(self) -> List[Boid]:
        return generate_population(
            self._rng,
            self._config.population,
            self._bounds,
            self._config.boid,
            self._config.spawn,
        )
