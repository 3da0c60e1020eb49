"""Path construction helpers for initialization output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def agents_path(out_dir: Path) -> Path:
    """Return path to the agents Parquet file."""
    return logs_dir(out_dir) / "agents.parquet"


def edges_path(out_dir: Path) -> Path:
    """Return path to the edge-list Parquet file."""
    return logs_dir(out_dir) / "edges.parquet"


def config_path(out_dir: Path) -> Path:
    """Return path to the run-parameter JSON file."""
    return out_dir / "config.json"
