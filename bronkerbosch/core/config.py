"""Project configuration (paths, constants, deterministic seed)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

# Reproducibility (random graphs in tests and batch configs)
SEED: int = 20250101

# Graph-definition text format
SUPPORTED_EXTENSION: str = "txt"
VERTICES_MARKER: str = "%Vertices%"
CONNECTIONS_MARKER: str = "%Connections%"
COMMENT_PREFIX: str = "##"
EDGE_SEPARATOR: str = "-"

# One indent unit per recursion depth in trace lines
TRACE_INDENT: str = "\t"

# Exhaustive subset search is 2^n; refuse anything larger.
BRUTE_FORCE_MAX_VERTICES: int = 16


def project_root() -> Path:
    """Return repository root assuming this file lives in `<root>/bronkerbosch/core/config.py`."""
    return Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Paths:
    root: Path
    graphs: Path  # bundled graph-definition files
    configs: Path
    reports: Path  # CSV/JSON outputs of CLI and batch runs


def get_paths(root: Path | None = None) -> Paths:
    r = project_root() if root is None else Path(root).resolve()
    return Paths(
        root=r,
        graphs=r / "graphs",
        configs=r / "configs",
        reports=r / "reports",
    )


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
