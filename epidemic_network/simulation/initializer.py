"""Model initialization: population, placement, network, grid synchronization.

The passes run strictly in sequence over the same population and consume the
shared random stream in a fixed order:

1. energy draws while building the population,
2. coordinate draws while placing every agent in continuous space,
3. attachment draws while building the network,
4. grid synchronization (no draws), in agent order, after every agent
   has a continuous position.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from random import Random

import networkx as nx

from epidemic_network.config.types import ModelConfig
from epidemic_network.domain.agents import Population, build_population, kind_counts
from epidemic_network.domain.network import build_network
from epidemic_network.domain.space import (
    Cell,
    ContinuousSpace,
    GridSpace,
    Point,
    ToroidalGrid,
    ToroidalSpace,
    place,
    sync_grid,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InitializedModel:
    """Everything produced by one initialization."""

    population: Population
    graph: nx.Graph
    space: ContinuousSpace
    grid: GridSpace
    positions: dict[int, Point]
    grid_cells: dict[int, Cell]

    def summary(self) -> dict[str, object]:
        """JSON-ready overview of the initialized model."""
        counts = kind_counts(self.population)
        return {
            "agents": len(self.population),
            "kinds": {kind.value: count for kind, count in counts.items()},
            "edges": self.graph.number_of_edges(),
            "network_model": self.graph.graph.get("model"),
            "exhausted_agents": len(self.graph.graph.get("exhausted", [])),
        }


def initialize_model(
    config: ModelConfig,
    rng: Random | None = None,
    space: ContinuousSpace | None = None,
    grid: GridSpace | None = None,
) -> InitializedModel:
    """Initialize a model from ``config``.

    ``rng`` defaults to ``Random(config.seed)``. ``space`` and ``grid`` default
    to toroidal stores sized by ``config.arena``. Any error propagates and no
    partially built model is returned.
    """
    rng = rng if rng is not None else Random(config.seed)
    space = space if space is not None else ToroidalSpace(config.arena.width, config.arena.height)
    grid = grid if grid is not None else ToroidalGrid(config.arena.width, config.arena.height)

    population = build_population(config.counts, config.beta, config.gamma, rng)
    logger.info("built population of %d agents", len(population))

    positions: dict[int, Point] = {}
    for agent in population:
        positions[agent.agent_id] = place(agent.agent_id, space, rng)

    graph = build_network(population, config.growth, rng)

    grid_cells: dict[int, Cell] = {}
    for agent in population:
        cell = sync_grid(space.get_position(agent.agent_id))
        grid.move_to(agent.agent_id, cell[0], cell[1])
        grid_cells[agent.agent_id] = cell
    logger.debug("synchronized %d grid cells", len(grid_cells))

    return InitializedModel(
        population=population,
        graph=graph,
        space=space,
        grid=grid,
        positions=positions,
        grid_cells=grid_cells,
    )
