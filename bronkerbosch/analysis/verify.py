"""Independent checks of search results (clique validity, maximality, brute force)."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations

from bronkerbosch.core.config import BRUTE_FORCE_MAX_VERTICES
from bronkerbosch.graph.view import GraphView, V


def is_clique(graph: GraphView[V], vertices: Iterable[V]) -> bool:
    members = list(vertices)
    return all(graph.adjacent(u, v) for u, v in combinations(members, 2))


def is_maximal_clique(graph: GraphView[V], vertices: Iterable[V]) -> bool:
    """True if `vertices` is a non-empty clique no outside vertex can extend."""
    members = set(vertices)
    if not members or not is_clique(graph, members):
        return False
    for w in graph.vertices():
        if w in members:
            continue
        if all(graph.adjacent(w, u) for u in members):
            return False
    return True


def brute_force_maximal_cliques(graph: GraphView[V]) -> set[frozenset[V]]:
    """All maximal cliques by exhaustive subset search (small graphs only)."""
    vertices = list(graph.vertices())
    if len(vertices) > BRUTE_FORCE_MAX_VERTICES:
        raise ValueError(
            f"Brute force refused for {len(vertices)} vertices "
            f"(limit {BRUTE_FORCE_MAX_VERTICES})."
        )

    cliques: set[frozenset[V]] = set()
    for size in range(len(vertices), 0, -1):
        for subset in combinations(vertices, size):
            candidate = frozenset(subset)
            if any(candidate < found for found in cliques):
                continue
            if is_clique(graph, candidate):
                cliques.add(candidate)
    return cliques


def invalid_cliques(graph: GraphView[V], cliques: Iterable[Iterable[V]]) -> list[frozenset[V]]:
    """Cliques from `cliques` that are not maximal cliques of `graph`."""
    return [frozenset(c) for c in cliques if not is_maximal_clique(graph, c)]
