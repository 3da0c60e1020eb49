"""Interaction-network construction over an ordered population.

Preferential attachment (default): a fully connected seed clique over the
first ``seed_size`` agents, then every later agent, in population order,
links to ``edges_per_new_node`` distinct earlier agents chosen with
probability proportional to their current degree.

Small world: ring lattice over the population with per-edge random rewiring.

Both builders return a simple undirected ``networkx.Graph`` whose nodes are
agent ids with a ``kind`` attribute.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from random import Random
from typing import TYPE_CHECKING

import networkx as nx

from epidemic_network.domain.agents import Agent
from epidemic_network.domain.errors import DegenerateGrowthStateError, InvalidConfigurationError

if TYPE_CHECKING:
    from epidemic_network.config.types import GrowthConfig

logger = logging.getLogger(__name__)


def _empty_graph(population: Sequence[Agent], model: str) -> nx.Graph:
    graph = nx.Graph(model=model)
    for agent in population:
        graph.add_node(agent.agent_id, kind=agent.kind.value)
    return graph


def add_seed_clique(graph: nx.Graph, seed_ids: Sequence[int]) -> None:
    """Connect every pair of ``seed_ids``."""
    for i, u in enumerate(seed_ids):
        for v in seed_ids[i + 1 :]:
            graph.add_edge(u, v)


def _select_by_degree(
    existing: Sequence[int],
    degrees: Sequence[int],
    linked: set[int],
    r: float,
) -> int:
    """Walk ``existing`` in order and return the first agent whose cumulative degree exceeds r.

    Agents already in ``linked`` are skipped, so ``r`` must be drawn against
    the degree total of the unlinked agents only.
    """
    cumulative = 0
    last_eligible = -1
    for agent_id, degree in zip(existing, degrees, strict=True):
        if agent_id in linked or degree == 0:
            continue
        cumulative += degree
        last_eligible = agent_id
        if r < cumulative:
            return agent_id
    # r rounded up to the total; the last eligible agent owns that end of the range
    return last_eligible


def attach_preferentially(
    graph: nx.Graph,
    new_id: int,
    existing: Sequence[int],
    edges_per_new_node: int,
    rng: Random,
) -> int:
    """Link ``new_id`` to up to ``edges_per_new_node`` distinct agents of ``existing``.

    Degrees are read once, before any of the new agent's edges are added.
    Redrawing after hitting an already linked target is the same as drawing
    from the unlinked targets with their degree weights, so each draw here
    adds exactly one edge and the loop runs at most ``len(existing)`` times.

    Returns the number of edges attached.
    """
    if edges_per_new_node == 0 or not existing:
        return 0

    degrees = [graph.degree(agent_id) for agent_id in existing]
    total_degree = sum(degrees)
    if total_degree == 0:
        raise DegenerateGrowthStateError(agent_id=new_id, existing=len(existing))

    degree_of = dict(zip(existing, degrees, strict=True))
    available = sum(1 for degree in degrees if degree > 0)
    target = min(edges_per_new_node, available)
    linked: set[int] = set()
    remaining = total_degree
    while len(linked) < target:
        r = rng.random() * remaining
        chosen = _select_by_degree(existing, degrees, linked, r)
        graph.add_edge(new_id, chosen)
        linked.add(chosen)
        remaining -= degree_of[chosen]
    return len(linked)


def grow_network(
    population: Sequence[Agent],
    seed_size: int,
    edges_per_new_node: int,
    rng: Random,
) -> nx.Graph:
    """Build a preferential-attachment network over ``population``.

    Agents that end up with fewer than ``edges_per_new_node`` growth edges
    (too few distinct earlier agents) are listed in ``graph.graph["exhausted"]``.
    """
    if seed_size < 0:
        raise InvalidConfigurationError("seed_size must be >= 0")
    if edges_per_new_node < 0:
        raise InvalidConfigurationError("edges_per_new_node must be >= 0")

    graph = _empty_graph(population, model="preferential_attachment")
    agent_ids = [agent.agent_id for agent in population]
    n_seed = min(seed_size, len(agent_ids))
    add_seed_clique(graph, agent_ids[:n_seed])
    logger.debug("seed clique over %d agents, %d edges", n_seed, graph.number_of_edges())

    exhausted: list[int] = []
    for i in range(n_seed, len(agent_ids)):
        new_id = agent_ids[i]
        attached = attach_preferentially(
            graph, new_id, agent_ids[:i], edges_per_new_node, rng
        )
        if attached < edges_per_new_node:
            exhausted.append(new_id)
            logger.debug(
                "agent %d attached %d of %d edges", new_id, attached, edges_per_new_node
            )
    graph.graph["exhausted"] = exhausted

    if exhausted:
        logger.info(
            "%d agents received fewer than %d growth edges", len(exhausted), edges_per_new_node
        )
    logger.info(
        "grew network: %d agents, %d edges", graph.number_of_nodes(), graph.number_of_edges()
    )
    return graph


def build_small_world_network(
    population: Sequence[Agent],
    neighbors_k: int,
    rewiring_probability: float,
    rng: Random,
) -> nx.Graph:
    """Ring lattice of degree ``neighbors_k`` with random rewiring.

    Each lattice edge ``(u, v)`` is considered once, in lattice order, and with
    probability ``rewiring_probability`` replaced by ``(u, w)`` where ``w`` is
    drawn uniformly from agents other than ``u`` not already adjacent to it.
    An edge with no such ``w`` is left in place.
    """
    if neighbors_k < 0 or neighbors_k % 2 != 0:
        raise InvalidConfigurationError("neighbors_k must be a non-negative even integer")
    if not 0.0 <= rewiring_probability <= 1.0:
        raise InvalidConfigurationError("rewiring_probability must be in [0.0, 1.0]")

    graph = _empty_graph(population, model="small_world")
    agent_ids = [agent.agent_id for agent in population]
    n = len(agent_ids)
    lattice: list[tuple[int, int]] = []
    for i, u in enumerate(agent_ids):
        for j in range(1, neighbors_k // 2 + 1):
            v = agent_ids[(i + j) % n]
            if v != u and not graph.has_edge(u, v):
                graph.add_edge(u, v)
                lattice.append((u, v))

    rewired = 0
    for u, v in lattice:
        if rng.random() >= rewiring_probability:
            continue
        candidates = [w for w in agent_ids if w != u and not graph.has_edge(u, w)]
        if not candidates:
            continue
        graph.remove_edge(u, v)
        graph.add_edge(u, rng.choice(candidates))
        rewired += 1

    logger.info(
        "built small-world network: %d agents, %d edges, %d rewired",
        graph.number_of_nodes(),
        graph.number_of_edges(),
        rewired,
    )
    return graph


def build_network(population: Sequence[Agent], growth: GrowthConfig, rng: Random) -> nx.Graph:
    """Dispatch to the builder selected by ``growth.model``."""
    from epidemic_network.config.types import NetworkModel

    if growth.model == NetworkModel.SMALL_WORLD:
        return build_small_world_network(
            population, growth.neighbors_k, growth.rewiring_probability, rng
        )
    return grow_network(population, growth.seed_size, growth.edges_per_new_node, rng)
