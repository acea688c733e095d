"""Compare all four Bron-Kerbosch configurations on a batch of graphs.

Run from repo root:
  python scripts/compare_variants.py --config configs/compare_variants.yaml

Outputs:
- reports/variant_runs.csv (or the `output` entry of the config / --output)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure repo root is on sys.path so `import bronkerbosch` works when executing this file directly.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from bronkerbosch.analysis.variants import collect_graphs, compare_variants, disagreements
from bronkerbosch.core.cli_utils import BatchStats, create_base_parser, log_level
from bronkerbosch.core.config import configure_logging, get_paths
from bronkerbosch.io import load_batch_config, write_csv

DEFAULT_CONFIG = "compare_variants.yaml"
DEFAULT_OUTPUT = "variant_runs.csv"

LOGGER = logging.getLogger("compare_variants")


def _parse_args() -> argparse.Namespace:
    paths = get_paths()
    p = create_base_parser("Run every search configuration on a batch of graphs.")
    p.add_argument("--config", type=Path, default=paths.configs / DEFAULT_CONFIG)
    p.add_argument("--output", type=Path, default=None, help="Overrides the config's output.")
    p.add_argument(
        "--verify",
        action="store_true",
        help="Cross-check clique sets against brute force (overrides the config).",
    )
    return p.parse_args()


def _resolve(root: Path, entry: str | Path) -> Path:
    p = Path(entry)
    return p if p.is_absolute() else root / p


def main() -> None:
    args = _parse_args()
    configure_logging(log_level(args))
    paths = get_paths()
    stats = BatchStats()

    LOGGER.info("Loading batch config: %s", args.config)
    cfg = load_batch_config(args.config)
    graphs = collect_graphs(cfg, paths.root)
    for name in graphs:
        stats.add_graph(name)
    if not graphs:
        raise ValueError(f"Batch config {args.config} lists no graphs.")

    verify = bool(args.verify or cfg.get("verify", False))
    df = compare_variants(graphs, verify=verify)

    out = args.output or _resolve(paths.root, cfg.get("output") or paths.reports / DEFAULT_OUTPUT)
    write_csv(df, out)
    LOGGER.info("Wrote %s", out)

    bad = disagreements(df)
    stats.update({"rows": len(df), "disagreements": len(bad)})
    if not bad.empty:
        LOGGER.error("Configurations disagree:\n%s", bad.to_string(index=False))

    summary = stats.get_summary()
    LOGGER.info(
        "Comparison complete. Graphs: %d, rows: %d, disagreements: %d",
        summary["graph_count"],
        summary["rows"],
        summary["disagreements"],
    )
    if not bad.empty:
        sys.exit(1)


if __name__ == "__main__":
    main()
