"""Read-only graph capability consumed by the clique search.

The search only needs a finite vertex sequence, an adjacency predicate and the
total degree of a vertex. `NetworkxGraphView` provides these over a frozen copy
of a `networkx.Graph`; tests may substitute any object with the same methods.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from typing import Generic, Protocol, TypeVar

import networkx as nx

V = TypeVar("V", bound=Hashable)


class GraphView(Protocol[V]):
    def vertices(self) -> Sequence[V]: ...

    def adjacent(self, u: V, v: V) -> bool: ...

    def degree(self, v: V) -> int: ...


class NetworkxGraphView(Generic[V]):
    """Immutable view over an undirected simple graph.

    Vertex order is the graph's node insertion order and is stable for the
    lifetime of the view. Self-loops in the source graph are ignored.
    """

    def __init__(self, G: nx.Graph) -> None:
        if G is None:
            raise ValueError("Graph passed can not be None.")
        if G.is_directed():
            raise ValueError("Only undirected graphs are supported.")
        H = nx.Graph(G)
        H.remove_edges_from(list(nx.selfloop_edges(H)))
        self._G = nx.freeze(H)
        self._vertices: tuple[V, ...] = tuple(self._G.nodes)

    @property
    def graph(self) -> nx.Graph:
        return self._G

    def vertices(self) -> Sequence[V]:
        return self._vertices

    def adjacent(self, u: V, v: V) -> bool:
        return u != v and self._G.has_edge(u, v)

    def degree(self, v: V) -> int:
        return int(self._G.degree(v))

    def number_of_edges(self) -> int:
        return int(self._G.number_of_edges())

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"NetworkxGraphView(vertices={len(self)}, edges={self.number_of_edges()})"


def as_graph_view(graph: GraphView[V] | nx.Graph) -> GraphView[V]:
    """Wrap a `networkx.Graph` in a view; pass other graph views through."""
    if isinstance(graph, nx.Graph):
        return NetworkxGraphView(graph)
    return graph


def neighbours_within(graph: GraphView[V], vertex: V, pool: Iterable[V]) -> list[V]:
    """Vertices of `pool` adjacent to `vertex`, in `pool` order."""
    return [w for w in pool if graph.adjacent(vertex, w)]
