"""Configuration dataclasses for model initialization.

All frozen dataclasses that parameterise population, arena, and network
construction live here. Each one validates itself in ``__post_init__`` so an
invalid configuration is rejected before any agent or edge is created.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from epidemic_network.config.constants import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    EDGES_PER_NEW_NODE,
    SEED_SIZE,
    SMALL_WORLD_NEIGHBORS,
    SMALL_WORLD_REWIRING_PROBABILITY,
)
from epidemic_network.domain.errors import InvalidConfigurationError

__all__ = [
    "ArenaConfig",
    "GrowthConfig",
    "ModelConfig",
    "NetworkModel",
    "PopulationCounts",
]

REQUIRED_PARAMETERS: tuple[str, ...] = (
    "beta",
    "gamma",
    "infected_count",
    "susceptible_count",
    "recovered_count",
)
"""Run parameters that must be supplied by the host runtime."""


# ---------------------------------------------------------------------------
# Parameter coercion
# ---------------------------------------------------------------------------


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise InvalidConfigurationError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise InvalidConfigurationError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw)
        except ValueError as exc:
            raise InvalidConfigurationError(f"{key} must be an integer value") from exc
    raise InvalidConfigurationError(f"{key} must be an integer value")


def _coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise InvalidConfigurationError(f"{key} must be a float value")
    if isinstance(raw, (int, float)):
        return float(raw)
    if isinstance(raw, str):
        try:
            return float(raw)
        except ValueError as exc:
            raise InvalidConfigurationError(f"{key} must be a float value") from exc
    raise InvalidConfigurationError(f"{key} must be a float value")


def _coerce_optional_int(raw: object, key: str) -> int | None:
    if raw is None:
        return None
    return _coerce_int(raw, key)


def _parse_network_model(raw: object) -> NetworkModel:
    """Parse network model name from a parameter mapping."""
    if isinstance(raw, NetworkModel):
        return raw
    try:
        return NetworkModel(str(raw))
    except ValueError as exc:
        valid = ", ".join(model.value for model in NetworkModel)
        raise InvalidConfigurationError(f"network_model must be one of {valid}") from exc


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


class NetworkModel(Enum):
    """Interaction-network topology built during initialization."""

    PREFERENTIAL_ATTACHMENT = "preferential_attachment"
    SMALL_WORLD = "small_world"


@dataclass(frozen=True)
class PopulationCounts:
    """Number of agents of each kind, in partition order."""

    infected: int
    susceptible: int
    recovered: int

    def __post_init__(self) -> None:
        for name in ("infected", "susceptible", "recovered"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfigurationError(f"{name} count must be an integer")
            if value < 0:
                raise InvalidConfigurationError(f"{name} count must be >= 0")

    @property
    def total(self) -> int:
        return self.infected + self.susceptible + self.recovered


@dataclass(frozen=True)
class ArenaConfig:
    """Dimensions shared by the continuous space and the grid."""

    width: int = ARENA_WIDTH
    height: int = ARENA_HEIGHT

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise InvalidConfigurationError("arena dimensions must be >= 1")


@dataclass(frozen=True)
class GrowthConfig:
    """Network construction parameters."""

    model: NetworkModel = NetworkModel.PREFERENTIAL_ATTACHMENT
    seed_size: int = SEED_SIZE
    """Size of the fully connected seed clique (m0)."""
    edges_per_new_node: int = EDGES_PER_NEW_NODE
    """Edges attached from each grown agent (m)."""
    neighbors_k: int = SMALL_WORLD_NEIGHBORS
    """Ring-lattice degree; small-world model only."""
    rewiring_probability: float = SMALL_WORLD_REWIRING_PROBABILITY
    """Per-edge rewiring probability; small-world model only."""

    def __post_init__(self) -> None:
        if self.seed_size < 0:
            raise InvalidConfigurationError("seed_size must be >= 0")
        if self.edges_per_new_node < 0:
            raise InvalidConfigurationError("edges_per_new_node must be >= 0")
        if self.neighbors_k < 0 or self.neighbors_k % 2 != 0:
            raise InvalidConfigurationError("neighbors_k must be a non-negative even integer")
        if not 0.0 <= self.rewiring_probability <= 1.0:
            raise InvalidConfigurationError("rewiring_probability must be in [0.0, 1.0]")


@dataclass(frozen=True)
class ModelConfig:
    """Everything needed to initialize one model instance."""

    counts: PopulationCounts
    beta: float
    gamma: float
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    growth: GrowthConfig = field(default_factory=GrowthConfig)
    seed: int | None = None
    """Seed for the shared random stream; ``None`` leaves seeding to the caller."""

    @classmethod
    def from_parameters(cls, parameters: Mapping[str, object]) -> ModelConfig:
        """Build a config from a flat run-parameter mapping.

        Required keys are ``beta``, ``gamma``, ``infected_count``,
        ``susceptible_count`` and ``recovered_count``. Arena, growth and seed
        keys are optional and fall back to the module defaults.
        """
        missing = [key for key in REQUIRED_PARAMETERS if parameters.get(key) is None]
        if missing:
            raise InvalidConfigurationError(f"missing parameters: {', '.join(missing)}")

        defaults = GrowthConfig()
        growth = GrowthConfig(
            model=_parse_network_model(parameters.get("network_model", defaults.model)),
            seed_size=_coerce_int(parameters.get("seed_size", defaults.seed_size), "seed_size"),
            edges_per_new_node=_coerce_int(
                parameters.get("edges_per_new_node", defaults.edges_per_new_node),
                "edges_per_new_node",
            ),
            neighbors_k=_coerce_int(
                parameters.get("neighbors_k", defaults.neighbors_k), "neighbors_k"
            ),
            rewiring_probability=_coerce_float(
                parameters.get("rewiring_probability", defaults.rewiring_probability),
                "rewiring_probability",
            ),
        )
        arena = ArenaConfig(
            width=_coerce_int(parameters.get("arena_width", ARENA_WIDTH), "arena_width"),
            height=_coerce_int(parameters.get("arena_height", ARENA_HEIGHT), "arena_height"),
        )
        return cls(
            counts=PopulationCounts(
                infected=_coerce_int(parameters["infected_count"], "infected_count"),
                susceptible=_coerce_int(parameters["susceptible_count"], "susceptible_count"),
                recovered=_coerce_int(parameters["recovered_count"], "recovered_count"),
            ),
            beta=_coerce_float(parameters["beta"], "beta"),
            gamma=_coerce_float(parameters["gamma"], "gamma"),
            arena=arena,
            growth=growth,
            seed=_coerce_optional_int(parameters.get("seed"), "seed"),
        )

    def to_parameters(self) -> dict[str, object]:
        """Flatten back into the run-parameter mapping accepted by ``from_parameters``."""
        return {
            "beta": self.beta,
            "gamma": self.gamma,
            "infected_count": self.counts.infected,
            "susceptible_count": self.counts.susceptible,
            "recovered_count": self.counts.recovered,
            "arena_width": self.arena.width,
            "arena_height": self.arena.height,
            "network_model": self.growth.model.value,
            "seed_size": self.growth.seed_size,
            "edges_per_new_node": self.growth.edges_per_new_node,
            "neighbors_k": self.growth.neighbors_k,
            "rewiring_probability": self.growth.rewiring_probability,
            "seed": self.seed,
        }
