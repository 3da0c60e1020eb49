"""Configuration layer: constants and typed config dataclasses."""

from epidemic_network.config.constants import (
    AGENT_KINDS,
    ARENA_HEIGHT,
    ARENA_WIDTH,
    EDGES_PER_NEW_NODE,
    ENERGY_MAX,
    ENERGY_MIN,
    SEED_SIZE,
    SMALL_WORLD_NEIGHBORS,
    SMALL_WORLD_REWIRING_PROBABILITY,
)
from epidemic_network.config.types import (
    ArenaConfig,
    GrowthConfig,
    ModelConfig,
    NetworkModel,
    PopulationCounts,
)

__all__ = [
    "AGENT_KINDS",
    "ARENA_HEIGHT",
    "ARENA_WIDTH",
    "ArenaConfig",
    "EDGES_PER_NEW_NODE",
    "ENERGY_MAX",
    "ENERGY_MIN",
    "GrowthConfig",
    "ModelConfig",
    "NetworkModel",
    "PopulationCounts",
    "SEED_SIZE",
    "SMALL_WORLD_NEIGHBORS",
    "SMALL_WORLD_REWIRING_PROBABILITY",
]
