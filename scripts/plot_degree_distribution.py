#!/usr/bin/env python3
"""Standalone figure generator for the interaction-network degree distribution.

Reads the artifacts written by ``epidemic-network --out-dir`` and produces:
  - degree_distribution.pdf — degree histogram (left) and log-log CCDF (right)

Usage:
    uv run python scripts/plot_degree_distribution.py \\
        --in-dir data/run0 \\
        --out-dir figures/
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pyarrow.parquet as pq  # noqa: E402

from epidemic_network.io.paths import agents_path, edges_path  # noqa: E402
from epidemic_network.io.persistence import load_edges  # noqa: E402

# ---------------------------------------------------------------------------
# Data loading
# ---------------------------------------------------------------------------


def load_degrees(in_dir: Path) -> np.ndarray:
    """Degree of every agent, isolated agents included, in agent-id order."""
    agent_ids = pq.read_table(agents_path(in_dir), columns=["agent_id"]).column("agent_id")
    graph = load_edges(edges_path(in_dir))
    graph.add_nodes_from(agent_ids.to_pylist())
    return np.array([graph.degree(n) for n in sorted(graph.nodes())], dtype=np.int64)


def degree_ccdf(degrees: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(k, P(K >= k))`` over the distinct positive degrees."""
    positive = np.sort(degrees[degrees > 0])
    if positive.size == 0:
        return np.zeros(0, dtype=np.int64), np.zeros(0)
    ks, first_index = np.unique(positive, return_index=True)
    ccdf = 1.0 - first_index / positive.size
    return ks, ccdf


# ---------------------------------------------------------------------------
# Figure
# ---------------------------------------------------------------------------


def plot_degree_distribution(
    degrees: np.ndarray,
    out_path: Path,
    title: str | None = None,
    return_fig: bool = False,
) -> plt.Figure | None:
    """Histogram and complementary CDF of agent degrees."""
    fig, (ax_hist, ax_ccdf) = plt.subplots(1, 2, figsize=(10, 4))

    counts = np.bincount(degrees) if degrees.size else np.zeros(1, dtype=np.int64)
    ax_hist.bar(np.arange(counts.size), counts, width=0.9, color="#4C72B0")
    ax_hist.set_xlabel("Degree $k$")
    ax_hist.set_ylabel("Agents")

    ks, ccdf = degree_ccdf(degrees)
    if ks.size:
        ax_ccdf.loglog(ks, ccdf, marker="o", linestyle="none", markersize=4, color="#C44E52")
    ax_ccdf.set_xlabel("Degree $k$")
    ax_ccdf.set_ylabel("$P(K \\geq k)$")

    fig.suptitle(title or f"Degree distribution ($N={degrees.size:,}$ agents)")
    fig.tight_layout()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, bbox_inches="tight")
    print(f"Saved degree distribution: {out_path}")
    if return_fig:
        return fig
    plt.close(fig)
    return None


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Plot the degree distribution of an initialized model")
    p.add_argument(
        "--in-dir",
        type=Path,
        required=True,
        help="Output directory of an epidemic-network run",
    )
    p.add_argument(
        "--out-dir",
        type=Path,
        default=Path("figures"),
        help="Output directory for PDFs (default: figures/)",
    )
    p.add_argument("--title", type=str, default=None)
    return p.parse_args()


def main() -> None:
    args = parse_args()

    if not edges_path(args.in_dir).exists():
        sys.exit(f"error: edge list not found under: {args.in_dir}")

    degrees = load_degrees(args.in_dir)
    print(f"  {degrees.size:,} agents loaded")
    plot_degree_distribution(degrees, args.out_dir / "degree_distribution.pdf", args.title)
    print("Done.")


if __name__ == "__main__":
    main()
