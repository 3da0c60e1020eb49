"""Simulation setup: one-shot model initialization."""

from epidemic_network.simulation.initializer import InitializedModel, initialize_model

__all__ = [
    "InitializedModel",
    "initialize_model",
]
