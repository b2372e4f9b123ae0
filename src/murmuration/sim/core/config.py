from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

UPDATE_ORDERS = ("sequential", "buffered")


@dataclass
class BoidConfig:
    size: int = 10
    speed: float = 200.0
    cohesion_factor: int = 14
    alignment_factor: int = 9
    separation_factor: int = 3


@dataclass
class SpawnConfig:
    heading_range: tuple[int, int] = (-180, 179)
    color_channel_range: tuple[int, int] = (50, 255)


@dataclass
class ViewerConfig:
    title: str = "Boids"
    # 0 leaves the frame rate uncapped.
    fps_cap: int = 0
    show_radii: bool = True
    background: tuple[int, int, int] = (0, 0, 0)


@dataclass
class SimulationConfig:
    world_width: float = 800.0
    world_height: float = 600.0
    population: int = 40
    time_step: float = 1.0 / 60.0
    seed: Optional[int] = None
    update_order: str = "sequential"
    config_version: str = "v1"
    boid: BoidConfig = field(default_factory=BoidConfig)
    spawn: SpawnConfig = field(default_factory=SpawnConfig)
    viewer: ViewerConfig = field(default_factory=ViewerConfig)

    @property
    def world_bounds(self) -> tuple[float, float]:
        return (self.world_width, self.world_height)

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data)


def load_config(raw: dict) -> SimulationConfig:
    default_spawn = SpawnConfig()
    default_viewer = ViewerConfig()

    def _pair(value: tuple[int, int] | list[int] | None, default: tuple[int, int]) -> tuple[int, int]:
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return (int(value[0]), int(value[1]))
        return default

    boid = BoidConfig(**raw.get("boid", {}))
    spawn_raw = raw.get("spawn", {})
    spawn = SpawnConfig(
        heading_range=_pair(spawn_raw.get("heading_range"), default_spawn.heading_range),
        color_channel_range=_pair(spawn_raw.get("color_channel_range"), default_spawn.color_channel_range),
    )
    viewer_raw = dict(raw.get("viewer", {}))
    background = viewer_raw.pop("background", None)
    if isinstance(background, (tuple, list)) and len(background) == 3:
        viewer_raw["background"] = tuple(int(channel) for channel in background)
    else:
        viewer_raw["background"] = default_viewer.background
    viewer = ViewerConfig(**viewer_raw)
    sim_values = {k: v for k, v in raw.items() if k not in {"boid", "spawn", "viewer"}}
    return SimulationConfig(boid=boid, spawn=spawn, viewer=viewer, **sim_values)
