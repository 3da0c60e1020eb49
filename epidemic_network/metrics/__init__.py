"""Network metrics."""

from epidemic_network.metrics.network import (
    NetworkSummary,
    degree_histogram,
    degree_sequence,
    summarize_network,
)

__all__ = [
    "NetworkSummary",
    "degree_histogram",
    "degree_sequence",
    "summarize_network",
]
