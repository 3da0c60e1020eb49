"""Parquet schema definitions for initialized-model artifacts.

All Arrow schemas used for persisting the population and the interaction
network are centralised here so that writers and readers work against the
same column contracts.
"""

from __future__ import annotations

import pyarrow as pa

MODEL_SCHEMA_VERSION = 1

AGENT_SCHEMA = pa.schema(
    [
        ("agent_id", pa.int64()),
        ("kind", pa.string()),
        ("beta", pa.float64()),
        ("gamma", pa.float64()),
        ("energy", pa.int64()),
        ("x", pa.float64()),
        ("y", pa.float64()),
        ("grid_x", pa.int64()),
        ("grid_y", pa.int64()),
    ]
)
"""One row per agent; ``beta``/``gamma`` are null unless infected, ``energy`` unless susceptible."""

EDGE_SCHEMA = pa.schema(
    [
        ("source", pa.int64()),
        ("target", pa.int64()),
    ]
)
"""One row per undirected edge, stored with ``source < target``."""
