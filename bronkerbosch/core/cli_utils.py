"""Common CLI utilities for the clique-search entry points."""

from __future__ import annotations

import argparse
import logging
from typing import Any

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_flag(value: str) -> bool:
    """Parse a boolean positional argument.

    Case-insensitive ``"true"`` is True; every other string is False.
    """
    return str(value).strip().lower() == "true"


def create_base_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level for progress messages (trace lines are not affected).",
    )
    return parser


def add_variant_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "degeneracy",
        type=parse_flag,
        help="'true' to drive the outermost level by a degeneracy ordering.",
    )
    parser.add_argument(
        "pivot",
        type=parse_flag,
        help="'true' to prune every level with a pivot vertex.",
    )


def log_level(args: argparse.Namespace) -> int:
    return getattr(logging, args.log_level, logging.INFO)


class BatchStats:
    """Simple container for collecting statistics across batch steps."""

    def __init__(self) -> None:
        self.stats: dict[str, Any] = {}
        self.completed_graphs: list[str] = []

    def update(self, step_stats: dict[str, Any]) -> None:
        self.stats.update(step_stats)

    def add_graph(self, name: str) -> None:
        self.completed_graphs.append(name)

    def get_summary(self) -> dict[str, Any]:
        return {
            "completed_graphs": self.completed_graphs,
            "graph_count": len(self.completed_graphs),
            **self.stats,
        }
