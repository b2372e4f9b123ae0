from __future__ import annotations

import argparse
import csv
import json
import logging
import math
from pathlib import Path
from typing import Optional

from ..sim.core.config import UPDATE_ORDERS, SimulationConfig
from ..sim.core.flock import Flock
from ..sim.types.metrics import TickMetrics

logger = logging.getLogger(__name__)

_HEADER = [
    "tick",
    "population",
    "separating",
    "aligning",
    "cohering",
    "isolated",
    "neighbor_checks",
    "mean_heading",
    "tick_ms",
]


def _format_row(metrics: TickMetrics, tick_ms: float) -> list[object]:
    return [
        metrics.tick,
        metrics.population,
        metrics.separating,
        metrics.aligning,
        metrics.cohering,
        metrics.isolated,
        metrics.neighbor_checks,
        f"{metrics.mean_heading:.4f}",
        f"{tick_ms:.3f}",
    ]


def _percentile(sorted_values: list[float], percentile: float) -> float:
    if not sorted_values:
        return 0.0
    if len(sorted_values) == 1:
        return float(sorted_values[0])
    pos = (len(sorted_values) - 1) * percentile
    low = int(math.floor(pos))
    high = int(math.ceil(pos))
    if low == high:
        return float(sorted_values[low])
    weight = pos - low
    return float(sorted_values[low] + (sorted_values[high] - sorted_values[low]) * weight)


def _summary_stats(values: list[float]) -> dict[str, float]:
    if not values:
        return {"min": 0.0, "max": 0.0, "avg": 0.0, "p50": 0.0, "p90": 0.0, "p95": 0.0, "p99": 0.0}
    sorted_values = sorted(values)
    return {
        "min": float(sorted_values[0]),
        "max": float(sorted_values[-1]),
        "avg": float(sum(values) / len(values)),
        "p50": _percentile(sorted_values, 0.50),
        "p90": _percentile(sorted_values, 0.90),
        "p95": _percentile(sorted_values, 0.95),
        "p99": _percentile(sorted_values, 0.99),
    }


def run_headless(
    steps: int,
    seed: Optional[int],
    log_path: Optional[Path],
    deterministic_log: bool = False,
    summary_path: Optional[Path] = None,
    config_path: Optional[Path] = None,
    dt: Optional[float] = None,
    update_order: Optional[str] = None,
) -> Flock:
    if steps < 0:
        raise ValueError(f"Step count must be non-negative, got {steps}")
    config = SimulationConfig.from_yaml(config_path) if config_path else SimulationConfig()
    if seed is not None:
        config.seed = seed
    if dt is not None:
        config.time_step = dt
    if update_order is not None:
        config.update_order = update_order
    flock = Flock(config)
    logger.info(
        "Running %d steps with %d boids (seed=%s, order=%s)",
        steps,
        len(flock.agents),
        config.seed,
        config.update_order,
    )

    tick_ms_series: list[float] = []
    neighbor_checks_series: list[float] = []
    totals = {"separating": 0, "aligning": 0, "cohering": 0, "isolated": 0}

    writer = None
    csv_file = None
    if log_path:
        csv_file = Path(log_path).open("w", newline="")
        writer = csv.writer(csv_file)
        writer.writerow(_HEADER)

    try:
        for _ in range(steps):
            metrics = flock.tick(config.time_step)
            tick_ms = 0.0 if deterministic_log else metrics.tick_duration_ms
            tick_ms_series.append(tick_ms)
            neighbor_checks_series.append(float(metrics.neighbor_checks))
            totals["separating"] += metrics.separating
            totals["aligning"] += metrics.aligning
            totals["cohering"] += metrics.cohering
            totals["isolated"] += metrics.isolated
            if writer:
                writer.writerow(_format_row(metrics, tick_ms))
    finally:
        if csv_file:
            csv_file.close()

    if summary_path:
        summary = {
            "steps": steps,
            "seed": config.seed,
            "update_order": config.update_order,
            "deterministic_log": deterministic_log,
            "tick_ms": _summary_stats(tick_ms_series),
            "neighbor_checks": _summary_stats(neighbor_checks_series),
            "decisions": totals,
        }
        Path(summary_path).write_text(json.dumps(summary, indent=2))
    logger.info("Finished %d steps", steps)
    return flock


def main() -> None:
    parser = argparse.ArgumentParser(description="Headless boids simulation")
    parser.add_argument("--steps", type=int, default=3000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument("--dt", type=float, default=None, help="Fixed time step in seconds")
    parser.add_argument("--order", choices=list(UPDATE_ORDERS), default=None, help="Tick update order")
    parser.add_argument("--log", type=Path, default=None, help="CSV file to write metrics")
    parser.add_argument(
        "--summary",
        type=Path,
        default=None,
        help="Optional JSON file to write summary stats for the run.",
    )
    parser.add_argument(
        "--deterministic-log",
        action="store_true",
        help="Write deterministic CSV (tick_ms is forced to 0.000 so identical seeds match).",
    )
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    run_headless(
        args.steps,
        args.seed,
        args.log,
        deterministic_log=args.deterministic_log,
        summary_path=args.summary,
        config_path=args.config,
        dt=args.dt,
        update_order=args.order,
    )


if __name__ == "__main__":
    main()
