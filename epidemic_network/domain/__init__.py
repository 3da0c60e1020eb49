"""Domain layer: agents, spatial stores, network builders, and errors."""

from epidemic_network.domain.agents import (
    Agent,
    AgentKind,
    AgentParams,
    InfectedParams,
    Population,
    RecoveredParams,
    SusceptibleParams,
    build_population,
    kind_at,
    kind_counts,
)
from epidemic_network.domain.errors import DegenerateGrowthStateError, InvalidConfigurationError
from epidemic_network.domain.network import (
    attach_preferentially,
    build_network,
    build_small_world_network,
    grow_network,
)
from epidemic_network.domain.space import (
    ContinuousSpace,
    GridSpace,
    ToroidalGrid,
    ToroidalSpace,
    place,
    sync_grid,
)

__all__ = [
    "Agent",
    "AgentKind",
    "AgentParams",
    "ContinuousSpace",
    "DegenerateGrowthStateError",
    "GridSpace",
    "InfectedParams",
    "InvalidConfigurationError",
    "Population",
    "RecoveredParams",
    "SusceptibleParams",
    "ToroidalGrid",
    "ToroidalSpace",
    "attach_preferentially",
    "build_network",
    "build_population",
    "build_small_world_network",
    "grow_network",
    "kind_at",
    "kind_counts",
    "place",
    "sync_grid",
]
