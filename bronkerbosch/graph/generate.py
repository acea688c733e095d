"""Seeded random graphs for cross-checks and variant comparison."""

from __future__ import annotations

from itertools import combinations

import networkx as nx
import numpy as np

from bronkerbosch.core.config import SEED


def vertex_name(i: int) -> str:
    return f"v{i}"


def random_graph(n: int, p: float, *, seed: int = SEED) -> nx.Graph:
    """G(n, p) graph with vertices `v0..v{n-1}`.

    Each of the n*(n-1)/2 vertex pairs becomes an edge independently with
    probability `p`. Deterministic for a fixed (n, p, seed).
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"p must be within [0, 1], got {p}")

    G = nx.Graph()
    G.add_nodes_from(vertex_name(i) for i in range(n))
    pairs = list(combinations(range(n), 2))
    if not pairs:
        return G

    rng = np.random.default_rng(seed)
    mask = rng.random(len(pairs)) < p
    G.add_edges_from(
        (vertex_name(i), vertex_name(j)) for (i, j), keep in zip(pairs, mask, strict=True) if keep
    )
    return G
