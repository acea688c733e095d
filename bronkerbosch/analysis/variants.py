"""Run every search configuration on a set of graphs and tabulate the results.

All four (degeneracy, pivot) configurations must find the same maximal
cliques; the table records counts, work done and a fingerprint of the clique
set so disagreements are visible at a glance.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import networkx as nx
import pandas as pd

from bronkerbosch.analysis.report import canonical_cliques
from bronkerbosch.analysis.verify import brute_force_maximal_cliques
from bronkerbosch.core.config import BRUTE_FORCE_MAX_VERTICES, SEED
from bronkerbosch.graph.generate import random_graph
from bronkerbosch.graph.view import NetworkxGraphView
from bronkerbosch.io import load_graph
from bronkerbosch.models.schemas import VARIANT_RUNS
from bronkerbosch.models.validate import validate_frame
from bronkerbosch.output.sinks import MemoryOutputSink
from bronkerbosch.search.engine import BronKerbosch

LOGGER = logging.getLogger(__name__)

# (use_degeneracy_ordering, use_pivot); the plain variant comes first.
VARIANTS: tuple[tuple[bool, bool], ...] = (
    (False, False),
    (False, True),
    (True, False),
    (True, True),
)


def clique_fingerprint(cliques) -> str:
    """Order-independent short hash of a clique collection."""
    payload = "|".join(",".join(c) for c in canonical_cliques(cliques))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]


def run_variant(
    view: NetworkxGraphView, *, use_degeneracy_ordering: bool, use_pivot: bool
) -> BronKerbosch:
    """Run one configuration without keeping trace lines; return the finished engine."""
    engine = BronKerbosch(
        view, use_degeneracy_ordering, use_pivot, MemoryOutputSink(keep_trace=False)
    )
    engine.run()
    return engine


def compare_variants(graphs: Mapping[str, nx.Graph], *, verify: bool = False) -> pd.DataFrame:
    """One validated row per (graph, configuration).

    `agrees` compares each configuration's clique set with the plain variant.
    With `verify=True` each clique set is also checked against brute force;
    graphs too large for brute force get a null `verified`.
    """
    rows: list[dict[str, Any]] = []
    for name, G in graphs.items():
        view = NetworkxGraphView(G)
        expected = None
        if verify and len(view) <= BRUTE_FORCE_MAX_VERTICES:
            expected = brute_force_maximal_cliques(view)
        elif verify:
            LOGGER.warning("Skipping brute-force check of %r: %d vertices", name, len(view))
        baseline: set[frozenset] | None = None

        for degeneracy, pivot in VARIANTS:
            engine = run_variant(view, use_degeneracy_ordering=degeneracy, use_pivot=pivot)
            found = set(engine.maximal_cliques())
            if baseline is None:
                baseline = found
            maximum = engine.maximum_cliques()
            stats = engine.stats
            row: dict[str, Any] = {
                "graph": str(name),
                "degeneracy": degeneracy,
                "pivot": pivot,
                "n_vertices": len(view),
                "n_edges": view.number_of_edges(),
                "n_maximal": len(engine.maximal_cliques()),
                "n_maximum": len(maximum),
                "maximum_size": len(maximum[0]) if maximum else 0,
                "calls": stats.calls,
                "pruned": stats.pruned,
                "fingerprint": clique_fingerprint(found),
                "agrees": found == baseline,
            }
            if verify:
                row["verified"] = None if expected is None else found == expected
            rows.append(row)

        LOGGER.info("Compared %d configurations on graph %r", len(VARIANTS), name)

    df = pd.DataFrame(rows, columns=_columns(verify))
    return validate_frame(df, VARIANT_RUNS)


def _columns(verify: bool) -> list[str]:
    cols = list(VARIANT_RUNS.required_columns)
    if verify:
        cols.append("verified")
    return cols


def disagreements(df: pd.DataFrame) -> pd.DataFrame:
    """Rows whose clique set differs from the plain variant or from brute force."""
    bad = ~df["agrees"].fillna(False).astype(bool)
    if "verified" in df.columns:
        bad |= df["verified"].eq(False).fillna(False).astype(bool)
    return df.loc[bad]


def collect_graphs(cfg: Mapping[str, Any], root: Path) -> dict[str, nx.Graph]:
    """Load the `graphs` files and build the `random` graphs of a batch config.

    File graphs are named by stem, random graphs by `name` (or `gnp_<n>_<p>`).
    Relative paths resolve against `root`. Two entries with the same name are
    rejected rather than one silently replacing the other.
    """
    graphs: dict[str, nx.Graph] = {}

    def add(name: str, G: nx.Graph, origin: str) -> None:
        if name in graphs:
            raise ValueError(f"Duplicate graph name {name!r} in batch config (from {origin}).")
        graphs[name] = G

    for entry in cfg.get("graphs") or []:
        path = Path(entry)
        if not path.is_absolute():
            path = Path(root) / path
        add(path.stem, load_graph(path), str(entry))

    for spec in cfg.get("random") or []:
        name = str(spec.get("name") or f"gnp_{spec['n']}_{spec['p']}")
        seed = int(spec.get("seed", SEED))
        add(name, random_graph(int(spec["n"]), float(spec["p"]), seed=seed), f"random {name}")

    LOGGER.info("Collected %d graph(s) from batch config", len(graphs))
    return graphs
