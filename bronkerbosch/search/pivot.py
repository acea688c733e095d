"""Pivot selection for the pivot-pruned search."""

from __future__ import annotations

from collections.abc import Sequence

from bronkerbosch.graph.set_algebra import union
from bronkerbosch.graph.view import GraphView, V, neighbours_within


def select_pivot(graph: GraphView[V], candidates: Sequence[V], excluded: Sequence[V]) -> V | None:
    """Vertex of candidates ∪ excluded with the greatest total degree in the graph.

    The pool is scanned candidates first, then excluded; ties go to the first
    vertex reaching the maximum. Returns None for an empty pool.
    """
    pivot: V | None = None
    best = -1
    for v in union(candidates, excluded):
        d = graph.degree(v)
        if d > best:
            best = d
            pivot = v
    return pivot


def pivot_neighbourhood(
    graph: GraphView[V], candidates: Sequence[V], excluded: Sequence[V]
) -> list[V]:
    """Neighbours of the pivot restricted to `candidates` (empty if there is no pivot)."""
    pivot = select_pivot(graph, candidates, excluded)
    if pivot is None:
        return []
    return neighbours_within(graph, pivot, candidates)
