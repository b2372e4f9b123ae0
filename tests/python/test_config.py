from __future__ import annotations

from pathlib import Path

import pytest

from murmuration.sim.core.config import BoidConfig, SimulationConfig, SpawnConfig, load_config

ROOT = Path(__file__).resolve().parents[2]


def test_defaults_match_reference_instance():
    config = SimulationConfig()

    assert config.world_bounds == (800.0, 600.0)
    assert config.population == 40
    assert config.update_order == "sequential"
    assert config.boid == BoidConfig(size=10, speed=200.0, cohesion_factor=14, alignment_factor=9, separation_factor=3)
    assert config.spawn == SpawnConfig(heading_range=(-180, 179), color_channel_range=(50, 255))


def test_load_config_reads_nested_sections():
    config = load_config(
        {
            "population": 12,
            "seed": 9,
            "update_order": "buffered",
            "boid": {"size": 4, "speed": 50.0},
            "spawn": {"heading_range": [0, 90]},
            "viewer": {"show_radii": False, "background": [10, 20, 30]},
        }
    )

    assert config.population == 12
    assert config.seed == 9
    assert config.update_order == "buffered"
    assert config.boid.size == 4
    assert config.boid.speed == 50.0
    assert config.boid.cohesion_factor == 14
    assert config.spawn.heading_range == (0, 90)
    assert config.spawn.color_channel_range == (50, 255)
    assert config.viewer.show_radii is False
    assert config.viewer.background == (10, 20, 30)


def test_load_config_rejects_unknown_keys():
    with pytest.raises(TypeError):
        load_config({"boid": {"wingspan": 3}})


def test_from_yaml_reads_file(tmp_path):
    path = tmp_path / "flock.yaml"
    path.write_text("world_width: 320\nworld_height: 200\nboid:\n  size: 6\n")

    config = SimulationConfig.from_yaml(path)

    assert config.world_bounds == (320, 200)
    assert config.boid.size == 6


def test_from_yaml_accepts_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert SimulationConfig.from_yaml(path) == SimulationConfig()


@pytest.mark.config_change
def test_shipped_config_matches_defaults():
    config = SimulationConfig.from_yaml(ROOT / "config" / "simulation.yaml")

    assert config == SimulationConfig()
