"""Error taxonomy for model initialization."""

from __future__ import annotations


class InvalidConfigurationError(ValueError):
    """Population or growth parameters rejected before any construction."""


class DegenerateGrowthStateError(RuntimeError):
    """Preferential attachment found no degree to weight on.

    Raised when every earlier agent has degree zero while a new agent still
    needs edges. Cannot happen once a seed clique of two or more agents exists.
    """

    def __init__(self, agent_id: int, existing: int) -> None:
        super().__init__(
            f"agent {agent_id}: total degree of {existing} earlier agents is zero"
        )
        self.agent_id = agent_id
        self.existing = existing
