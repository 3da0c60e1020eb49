"""Parquet/JSON persistence for initialized models."""

from __future__ import annotations

import json
from pathlib import Path

import networkx as nx
import pyarrow as pa
import pyarrow.parquet as pq

from epidemic_network.config.types import ModelConfig
from epidemic_network.domain.agents import InfectedParams, SusceptibleParams
from epidemic_network.io.paths import agents_path, config_path, edges_path, logs_dir
from epidemic_network.io.schemas import AGENT_SCHEMA, EDGE_SCHEMA, MODEL_SCHEMA_VERSION
from epidemic_network.simulation.initializer import InitializedModel


def agent_columns(model: InitializedModel) -> dict[str, list[int | float | str | None]]:
    """Column-oriented agent rows matching ``AGENT_SCHEMA``."""
    columns: dict[str, list[int | float | str | None]] = {
        field.name: [] for field in AGENT_SCHEMA
    }
    for agent in model.population:
        params = agent.params
        x, y = model.positions[agent.agent_id]
        grid_x, grid_y = model.grid_cells[agent.agent_id]
        columns["agent_id"].append(agent.agent_id)
        columns["kind"].append(agent.kind.value)
        columns["beta"].append(params.beta if isinstance(params, InfectedParams) else None)
        columns["gamma"].append(params.gamma if isinstance(params, InfectedParams) else None)
        columns["energy"].append(params.energy if isinstance(params, SusceptibleParams) else None)
        columns["x"].append(x)
        columns["y"].append(y)
        columns["grid_x"].append(grid_x)
        columns["grid_y"].append(grid_y)
    return columns


def edge_columns(graph: nx.Graph) -> dict[str, list[int]]:
    """Sorted edge list matching ``EDGE_SCHEMA``."""
    edges = sorted((min(u, v), max(u, v)) for u, v in graph.edges())
    return {
        "source": [u for u, _ in edges],
        "target": [v for _, v in edges],
    }


def write_initialized_model(
    model: InitializedModel, config: ModelConfig, out_dir: Path
) -> dict[str, Path]:
    """Persist agents, edges and run parameters under ``out_dir``.

    Returns the written paths keyed by artifact name.
    """
    out_dir = Path(out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    agent_table = pa.Table.from_pydict(agent_columns(model), schema=AGENT_SCHEMA)
    pq.write_table(agent_table, agents_path(out_dir))

    edge_table = pa.Table.from_pydict(edge_columns(model.graph), schema=EDGE_SCHEMA)
    pq.write_table(edge_table, edges_path(out_dir))

    payload = {
        "schema_version": MODEL_SCHEMA_VERSION,
        "parameters": config.to_parameters(),
        "summary": model.summary(),
    }
    config_path(out_dir).write_text(json.dumps(payload, ensure_ascii=False, indent=2))

    return {
        "agents": agents_path(out_dir),
        "edges": edges_path(out_dir),
        "config": config_path(out_dir),
    }


def load_edges(path: Path) -> nx.Graph:
    """Read an edge-list Parquet file back into a graph.

    Isolated agents are not stored in the edge list and therefore absent.
    """
    table = pq.read_table(path)
    graph = nx.Graph()
    sources = table.column("source").to_pylist()
    targets = table.column("target").to_pylist()
    graph.add_edges_from(zip(sources, targets, strict=True))
    return graph
