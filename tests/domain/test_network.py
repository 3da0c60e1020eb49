"""Tests for epidemic_network.domain.network module."""

from __future__ import annotations

import logging
from itertools import combinations
from random import Random

import networkx as nx
import pytest

from epidemic_network.config.types import GrowthConfig, NetworkModel, PopulationCounts
from epidemic_network.domain.agents import Population, build_population
from epidemic_network.domain.errors import DegenerateGrowthStateError, InvalidConfigurationError
from epidemic_network.domain.network import (
    _select_by_degree,
    add_seed_clique,
    attach_preferentially,
    build_network,
    build_small_world_network,
    grow_network,
)


def _population(n: int) -> Population:
    counts = PopulationCounts(infected=0, susceptible=0, recovered=n)
    return build_population(counts, beta=0.0, gamma=0.0, rng=Random(0))


def _growth_edges(graph: nx.Graph, agent_id: int) -> int:
    """Edges from ``agent_id`` to lower-indexed agents, i.e. its own growth edges."""
    return sum(1 for neighbor in graph.neighbors(agent_id) if neighbor < agent_id)


class TestSeedClique:
    def test_complete_subgraph(self) -> None:
        graph = grow_network(_population(10), seed_size=4, edges_per_new_node=2, rng=Random(0))
        for u, v in combinations(range(4), 2):
            assert graph.has_edge(u, v)

    def test_population_smaller_than_seed(self) -> None:
        graph = grow_network(_population(2), seed_size=3, edges_per_new_node=2, rng=Random(0))
        assert sorted(graph.edges()) == [(0, 1)]
        assert graph.graph["exhausted"] == []

    def test_add_seed_clique_edge_count(self) -> None:
        graph = nx.Graph()
        add_seed_clique(graph, [0, 1, 2, 3, 4])
        assert graph.number_of_edges() == 10


class TestScenarios:
    def test_triangle_without_growth(self) -> None:
        counts = PopulationCounts(infected=1, susceptible=2, recovered=0)
        population = build_population(counts, beta=0.3, gamma=0.1, rng=Random(0))
        graph = grow_network(population, seed_size=3, edges_per_new_node=2, rng=Random(0))
        assert sorted(graph.edges()) == [(0, 1), (0, 2), (1, 2)]

    @pytest.mark.parametrize("seed", range(20))
    def test_two_grown_agents_attach_twice(self, seed: int) -> None:
        graph = grow_network(_population(5), seed_size=3, edges_per_new_node=2, rng=Random(seed))
        assert _growth_edges(graph, 3) == 2
        assert _growth_edges(graph, 4) == 2
        assert set(graph.neighbors(3)) - {4} <= {0, 1, 2}
        assert graph.number_of_edges() == 7

    def test_zero_edges_per_new_node_leaves_grown_isolated(self) -> None:
        graph = grow_network(_population(8), seed_size=3, edges_per_new_node=0, rng=Random(0))
        for agent_id in range(3, 8):
            assert graph.degree(agent_id) == 0
        for agent_id in range(3):
            assert graph.degree(agent_id) == 2
        assert graph.graph["exhausted"] == []


class TestGrowthInvariants:
    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_simple_graph(self, seed: int) -> None:
        graph = grow_network(_population(200), seed_size=3, edges_per_new_node=2, rng=Random(seed))
        assert nx.number_of_selfloops(graph) == 0
        assert not graph.is_multigraph()

    def test_growth_edges_bounded(self) -> None:
        m = 3
        graph = grow_network(_population(100), seed_size=3, edges_per_new_node=m, rng=Random(4))
        for agent_id in range(3, 100):
            assert _growth_edges(graph, agent_id) <= min(m, agent_id)

    def test_default_growth_attaches_exactly_m(self) -> None:
        graph = grow_network(_population(100), seed_size=3, edges_per_new_node=2, rng=Random(4))
        for agent_id in range(3, 100):
            assert _growth_edges(graph, agent_id) == 2
        assert graph.number_of_edges() == 3 + 2 * 97

    def test_connected(self) -> None:
        graph = grow_network(_population(150), seed_size=3, edges_per_new_node=1, rng=Random(9))
        assert nx.is_connected(graph)

    def test_all_agents_are_nodes_with_kind(self) -> None:
        counts = PopulationCounts(infected=1, susceptible=1, recovered=3)
        population = build_population(counts, beta=0.3, gamma=0.1, rng=Random(0))
        graph = grow_network(population, seed_size=3, edges_per_new_node=2, rng=Random(0))
        assert sorted(graph.nodes()) == [0, 1, 2, 3, 4]
        assert graph.nodes[0]["kind"] == "infected"
        assert graph.nodes[1]["kind"] == "susceptible"
        assert graph.nodes[4]["kind"] == "recovered"

    def test_deterministic_for_seed(self) -> None:
        first = grow_network(_population(80), seed_size=3, edges_per_new_node=2, rng=Random(13))
        second = grow_network(_population(80), seed_size=3, edges_per_new_node=2, rng=Random(13))
        assert sorted(first.edges()) == sorted(second.edges())

    def test_hubs_emerge(self) -> None:
        graph = grow_network(_population(500), seed_size=3, edges_per_new_node=2, rng=Random(1))
        degrees = [d for _, d in graph.degree()]
        assert max(degrees) >= 3 * (sum(degrees) / len(degrees))


class TestExhaustion:
    def test_more_edges_than_targets(self) -> None:
        graph = grow_network(_population(4), seed_size=2, edges_per_new_node=5, rng=Random(0))
        assert set(graph.neighbors(2)) >= {0, 1}
        assert _growth_edges(graph, 2) == 2
        assert _growth_edges(graph, 3) == 3
        assert graph.graph["exhausted"] == [2, 3]

    def test_exhaustion_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="epidemic_network.domain.network")
        grow_network(_population(4), seed_size=2, edges_per_new_node=5, rng=Random(0))
        assert any("fewer than 5" in record.getMessage() for record in caplog.records)


class TestErrors:
    def test_zero_degree_with_pending_edges(self) -> None:
        with pytest.raises(DegenerateGrowthStateError) as excinfo:
            grow_network(_population(3), seed_size=1, edges_per_new_node=1, rng=Random(0))
        assert excinfo.value.agent_id == 1

    def test_single_seed_without_attachment_is_fine(self) -> None:
        graph = grow_network(_population(3), seed_size=1, edges_per_new_node=0, rng=Random(0))
        assert graph.number_of_edges() == 0

    def test_negative_edges_per_new_node(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            grow_network(_population(3), seed_size=3, edges_per_new_node=-1, rng=Random(0))

    def test_negative_seed_size(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            grow_network(_population(3), seed_size=-1, edges_per_new_node=1, rng=Random(0))


class TestSelectByDegree:
    def test_cumulative_walk(self) -> None:
        existing, degrees = [0, 1, 2], [1, 2, 3]
        assert _select_by_degree(existing, degrees, set(), 0.5) == 0
        assert _select_by_degree(existing, degrees, set(), 1.0) == 1
        assert _select_by_degree(existing, degrees, set(), 2.99) == 1
        assert _select_by_degree(existing, degrees, set(), 3.0) == 2
        assert _select_by_degree(existing, degrees, set(), 5.99) == 2

    def test_linked_agents_skipped(self) -> None:
        assert _select_by_degree([0, 1, 2], [1, 2, 3], {1}, 1.5) == 2

    def test_zero_degree_never_selected(self) -> None:
        assert _select_by_degree([0, 1], [0, 2], set(), 0.0) == 1


class TestAttachPreferentially:
    def test_selection_proportional_to_degree(self) -> None:
        # star: agent 0 holds half of the total degree
        base = nx.star_graph(3)
        rng = Random(21)
        trials = 2000
        hub_hits = 0
        for _ in range(trials):
            graph = base.copy()
            attach_preferentially(graph, 4, [0, 1, 2, 3], 1, rng)
            hub_hits += graph.has_edge(4, 0)
        assert 0.45 < hub_hits / trials < 0.55

    def test_one_draw_per_edge(self) -> None:
        graph = nx.complete_graph(4)
        rng = Random(3)
        attached = attach_preferentially(graph, 4, [0, 1, 2, 3], 2, rng)
        replay = Random(3)
        replay.random()
        replay.random()
        assert attached == 2
        assert rng.getstate() == replay.getstate()

    def test_no_existing_agents(self) -> None:
        graph = nx.Graph()
        graph.add_node(0)
        assert attach_preferentially(graph, 0, [], 2, Random(0)) == 0


class TestSmallWorld:
    def test_ring_lattice_without_rewiring(self) -> None:
        graph = build_small_world_network(
            _population(10), neighbors_k=4, rewiring_probability=0.0, rng=Random(0)
        )
        assert graph.number_of_edges() == 20
        assert all(d == 4 for _, d in graph.degree())
        assert graph.has_edge(0, 9) and graph.has_edge(0, 8)

    def test_rewiring_preserves_edge_count(self) -> None:
        graph = build_small_world_network(
            _population(30), neighbors_k=4, rewiring_probability=1.0, rng=Random(5)
        )
        assert graph.number_of_edges() == 60
        assert nx.number_of_selfloops(graph) == 0

    def test_saturated_ring_keeps_edges(self) -> None:
        graph = build_small_world_network(
            _population(3), neighbors_k=4, rewiring_probability=1.0, rng=Random(0)
        )
        assert sorted(graph.edges()) == [(0, 1), (0, 2), (1, 2)]

    def test_zero_neighbors(self) -> None:
        graph = build_small_world_network(
            _population(5), neighbors_k=0, rewiring_probability=0.5, rng=Random(0)
        )
        assert graph.number_of_edges() == 0

    def test_odd_neighbors_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            build_small_world_network(
                _population(5), neighbors_k=3, rewiring_probability=0.5, rng=Random(0)
            )


class TestBuildNetwork:
    def test_dispatch_preferential(self) -> None:
        graph = build_network(_population(6), GrowthConfig(), Random(0))
        assert graph.graph["model"] == "preferential_attachment"

    def test_dispatch_small_world(self) -> None:
        growth = GrowthConfig(model=NetworkModel.SMALL_WORLD, rewiring_probability=0.0)
        graph = build_network(_population(6), growth, Random(0))
        assert graph.graph["model"] == "small_world"
        assert graph.number_of_edges() == 12
