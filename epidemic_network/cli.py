"""CLI entrypoint for model initialization.

This module owns CLI argument parsing and output. All domain logic lives in
the extracted modules:

- ``epidemic_network.config``                 – configuration dataclasses
- ``epidemic_network.simulation.initializer`` – ``initialize_model``
- ``epidemic_network.io.persistence``         – Parquet/JSON artifacts
- ``epidemic_network.metrics.network``        – network summary
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from epidemic_network.config.types import ModelConfig, NetworkModel
from epidemic_network.domain.errors import InvalidConfigurationError
from epidemic_network.io.persistence import write_initialized_model
from epidemic_network.metrics.network import summarize_network
from epidemic_network.simulation.initializer import initialize_model

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------

_PARAMETER_ARGS: tuple[str, ...] = (
    "beta",
    "gamma",
    "infected_count",
    "susceptible_count",
    "recovered_count",
    "arena_width",
    "arena_height",
    "network_model",
    "seed_size",
    "edges_per_new_node",
    "neighbors_k",
    "rewiring_probability",
    "seed",
)
"""Arguments forwarded to ``ModelConfig.from_parameters`` under the same key."""


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _resolve_parameters(args: argparse.Namespace, file_cfg: dict[str, object]) -> dict[str, object]:
    """Merge CLI values over config-file values; absent keys stay absent."""
    parameters: dict[str, object] = {}
    for key in _PARAMETER_ARGS:
        value = _get_val(getattr(args, key), key, file_cfg, None)
        if value is not None:
            parameters[key] = value
    return parameters


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Initialize agents, positions and interaction network for an SIR model"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON parameter file (CLI args override file values)",
    )
    parser.add_argument("--beta", type=float, default=None)
    parser.add_argument("--gamma", type=float, default=None)
    parser.add_argument("--infected-count", type=int, default=None)
    parser.add_argument("--susceptible-count", type=int, default=None)
    parser.add_argument("--recovered-count", type=int, default=None)
    parser.add_argument("--arena-width", type=int, default=None)
    parser.add_argument("--arena-height", type=int, default=None)
    parser.add_argument(
        "--network-model",
        type=str,
        choices=[model.value for model in NetworkModel],
        default=None,
    )
    parser.add_argument("--seed-size", type=int, default=None)
    parser.add_argument("--edges-per-new-node", type=int, default=None)
    parser.add_argument("--neighbors-k", type=int, default=None)
    parser.add_argument("--rewiring-probability", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Write agents/edges Parquet and config.json here",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for model initialization.

    Supports ``--config path/to/params.json`` for reproducibility. CLI
    arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        config = ModelConfig.from_parameters(_resolve_parameters(args, file_cfg))
    except InvalidConfigurationError as exc:
        parser.error(str(exc))

    model = initialize_model(config)
    summary: dict[str, object] = {
        **model.summary(),
        "network": summarize_network(model.graph).to_dict(),
    }
    out_dir_raw = _get_val(args.out_dir, "out_dir", file_cfg, None)
    if out_dir_raw is not None:
        written = write_initialized_model(model, config, Path(str(out_dir_raw)))
        summary["artifacts"] = {name: str(path) for name, path in written.items()}
        logger.info("wrote artifacts to %s", out_dir_raw)
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
