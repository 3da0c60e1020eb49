"""Agent population, spatial placement and interaction-network initialization for SIR models."""

from epidemic_network.config.types import ModelConfig, PopulationCounts
from epidemic_network.simulation.initializer import InitializedModel, initialize_model

__all__ = [
    "InitializedModel",
    "ModelConfig",
    "PopulationCounts",
    "initialize_model",
]
