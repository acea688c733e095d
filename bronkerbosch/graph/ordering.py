"""Degeneracy ordering of a graph's vertices."""

from __future__ import annotations

import logging

from bronkerbosch.graph.view import GraphView, V

LOGGER = logging.getLogger(__name__)


def _eliminate(graph: GraphView[V]) -> tuple[list[V], int]:
    """Repeatedly remove a minimum-degree vertex from the shrinking vertex set.

    Degrees are counted within the remaining set only. Ties go to the vertex
    that comes first in the graph's vertex order.

    Returns (ordering, degeneracy).
    """
    remaining: dict[V, None] = dict.fromkeys(graph.vertices())
    degree: dict[V, int] = {
        v: sum(1 for w in remaining if graph.adjacent(v, w)) for v in remaining
    }

    order: list[V] = []
    d = 0
    while remaining:
        v = min(remaining, key=degree.__getitem__)
        d = max(d, degree[v])
        del remaining[v]
        order.append(v)
        for w in remaining:
            if graph.adjacent(v, w):
                degree[w] -= 1
    return order, d


def degeneracy_ordering(graph: GraphView[V]) -> list[V]:
    """One valid degeneracy ordering of all vertices.

    Every vertex has at most `degeneracy(graph)` neighbours later in the order.
    """
    order, d = _eliminate(graph)
    LOGGER.debug("Degeneracy ordering computed: %d vertices, degeneracy=%d", len(order), d)
    return order


def degeneracy(graph: GraphView[V]) -> int:
    """Largest k such that the graph has a subgraph of minimum degree k (0 if empty)."""
    return _eliminate(graph)[1]


def later_neighbour_counts(graph: GraphView[V], order: list[V]) -> dict[V, int]:
    """For each vertex, the number of its neighbours appearing after it in `order`."""
    position = {v: i for i, v in enumerate(order)}
    return {
        v: sum(1 for w in order[i + 1 :] if graph.adjacent(v, w))
        for v, i in position.items()
    }
