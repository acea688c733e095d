"""Lightweight I/O helpers.

This module centralises:
- graph-definition loading (`load_graph`) and its error kinds
- simple JSON/CSV helpers used by the CLI and scripts
- YAML batch-config loading used by `scripts/compare_variants.py`
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pandas as pd
import yaml

from bronkerbosch.io.loader import (
    GraphFormatError,
    GraphLoaderError,
    GraphReadError,
    load_graph,
    parse_graph_definition,
)

__all__ = [
    "GraphFormatError",
    "GraphLoaderError",
    "GraphReadError",
    "load_graph",
    "parse_graph_definition",
    "ensure_parent_dir",
    "read_json",
    "write_json",
    "write_csv",
    "load_batch_config",
]


def ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def write_json(obj: Any, path: Path) -> None:
    ensure_parent_dir(path)
    path.write_text(json.dumps(obj, ensure_ascii=False, indent=2), encoding="utf-8")


def write_csv(df: pd.DataFrame, path: Path) -> None:
    ensure_parent_dir(path)
    df.to_csv(path, index=False)


def load_batch_config(path: Path) -> dict[str, Any]:
    """Load a YAML batch config file (empty file -> empty dict)."""
    cfg = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Batch config {path} must be a mapping, got {type(cfg).__name__}")
    return cfg
