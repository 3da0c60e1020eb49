"""Centralized domain constants for model initialization.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

ARENA_WIDTH = 30
"""Default arena width (continuous units and grid cells)."""

ARENA_HEIGHT = 30
"""Default arena height (continuous units and grid cells)."""

SEED_SIZE = 3
"""Number of agents in the fully connected seed clique."""

EDGES_PER_NEW_NODE = 2
"""Edges attached from each grown agent to earlier agents."""

ENERGY_MIN = 4
"""Inclusive lower bound of a susceptible agent's initial energy."""

ENERGY_MAX = 10
"""Inclusive upper bound of a susceptible agent's initial energy."""

SMALL_WORLD_NEIGHBORS = 4
"""Ring-lattice degree for the small-world topology (must be even)."""

SMALL_WORLD_REWIRING_PROBABILITY = 0.1
"""Per-edge rewiring probability for the small-world topology."""

AGENT_KINDS: tuple[str, ...] = ("infected", "susceptible", "recovered")
"""Agent kind vocabulary, in population partition order."""
