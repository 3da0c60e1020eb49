"""Degree and connectivity metrics for the interaction network."""

from __future__ import annotations

from dataclasses import asdict, dataclass

import networkx as nx
import numpy as np


@dataclass(frozen=True)
class NetworkSummary:
    """Structural overview of one interaction network."""

    node_count: int
    edge_count: int
    mean_degree: float
    max_degree: int
    component_count: int
    largest_component_ratio: float
    has_self_loops: bool

    def to_dict(self) -> dict[str, int | float | bool]:
        return asdict(self)


def degree_sequence(graph: nx.Graph) -> np.ndarray:
    """Degrees in ascending node order."""
    nodes = sorted(graph.nodes())
    return np.array([graph.degree(n) for n in nodes], dtype=np.int64)


def degree_histogram(graph: nx.Graph) -> np.ndarray:
    """``hist[d]`` is the number of nodes with degree ``d``."""
    degrees = degree_sequence(graph)
    if degrees.size == 0:
        return np.zeros(0, dtype=np.int64)
    return np.bincount(degrees)


def summarize_network(graph: nx.Graph) -> NetworkSummary:
    """Compute a ``NetworkSummary``.

    For an empty graph every ratio and mean is reported as 0.0.
    """
    n = graph.number_of_nodes()
    degrees = degree_sequence(graph)
    if n == 0:
        return NetworkSummary(
            node_count=0,
            edge_count=0,
            mean_degree=0.0,
            max_degree=0,
            component_count=0,
            largest_component_ratio=0.0,
            has_self_loops=False,
        )
    components = list(nx.connected_components(graph))
    largest = max(len(c) for c in components)
    return NetworkSummary(
        node_count=n,
        edge_count=graph.number_of_edges(),
        mean_degree=float(degrees.mean()),
        max_degree=int(degrees.max()),
        component_count=len(components),
        largest_component_ratio=largest / n,
        has_self_loops=nx.number_of_selfloops(graph) > 0,
    )
