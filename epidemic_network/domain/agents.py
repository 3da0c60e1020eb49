"""Agent identities and the contiguous population partition.

An agent is an index into the population tagged with kind-specific
parameters. Kinds are a closed set of frozen parameter records rather than
a class hierarchy; graph growth and placement only ever look at ``agent_id``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import TYPE_CHECKING, TypeAlias

from epidemic_network.config.constants import ENERGY_MAX, ENERGY_MIN

if TYPE_CHECKING:
    from epidemic_network.config.types import PopulationCounts


class AgentKind(Enum):
    """Epidemiological role of an agent."""

    INFECTED = "infected"
    SUSCEPTIBLE = "susceptible"
    RECOVERED = "recovered"


@dataclass(frozen=True)
class InfectedParams:
    beta: float
    gamma: float


@dataclass(frozen=True)
class SusceptibleParams:
    energy: int


@dataclass(frozen=True)
class RecoveredParams:
    pass


AgentParams: TypeAlias = InfectedParams | SusceptibleParams | RecoveredParams

_KIND_BY_PARAMS: dict[type, AgentKind] = {
    InfectedParams: AgentKind.INFECTED,
    SusceptibleParams: AgentKind.SUSCEPTIBLE,
    RecoveredParams: AgentKind.RECOVERED,
}


@dataclass(frozen=True)
class Agent:
    """One member of the population."""

    agent_id: int
    params: AgentParams

    @property
    def kind(self) -> AgentKind:
        return _KIND_BY_PARAMS[type(self.params)]


Population = tuple[Agent, ...]
"""Ordered agents; ``population[i].agent_id == i``."""


def kind_at(index: int, counts: PopulationCounts) -> AgentKind:
    """Return the kind assigned to ``index`` by the contiguous partition rule."""
    if index < 0 or index >= counts.total:
        raise IndexError(f"agent index {index} outside population of {counts.total}")
    if index < counts.infected:
        return AgentKind.INFECTED
    if index < counts.infected + counts.susceptible:
        return AgentKind.SUSCEPTIBLE
    return AgentKind.RECOVERED


def build_population(
    counts: PopulationCounts, beta: float, gamma: float, rng: Random
) -> Population:
    """Create the population in partition order.

    Infected agents come first, then susceptible, then recovered. Each
    susceptible agent consumes exactly one draw from ``rng`` for its energy;
    no other draws are made.
    """
    agents: list[Agent] = []
    for agent_id in range(counts.total):
        kind = kind_at(agent_id, counts)
        params: AgentParams
        if kind is AgentKind.INFECTED:
            params = InfectedParams(beta=beta, gamma=gamma)
        elif kind is AgentKind.SUSCEPTIBLE:
            params = SusceptibleParams(energy=rng.randint(ENERGY_MIN, ENERGY_MAX))
        else:
            params = RecoveredParams()
        agents.append(Agent(agent_id=agent_id, params=params))
    return tuple(agents)


def kind_counts(population: Sequence[Agent]) -> dict[AgentKind, int]:
    """Count agents per kind, including kinds with no members."""
    counts = {kind: 0 for kind in AgentKind}
    for agent in population:
        counts[agent.kind] += 1
    return counts
