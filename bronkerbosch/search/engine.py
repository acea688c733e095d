"""Bron–Kerbosch enumeration of maximal cliques.

Three traversal variants are driven by two independent switches:
- plain: every candidate of a frame is branched on;
- pivot: each frame only branches on candidates not adjacent to a pivot vertex;
- degeneracy: the outermost level walks a degeneracy ordering instead of the
  full candidate set (inner levels are plain or pivoted per the first switch).

All variants return the same set of maximal cliques; they differ in traversal
order and in how much of the search tree is pruned.

Each frame owns its candidate (P) and excluded (X) lists. A frame iterates a
frozen snapshot of its candidates while moving processed vertices from its
own P to its own X; lists held by enclosing frames are never touched. Open
frames are kept on an explicit stack, not the interpreter call stack.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Generic

import networkx as nx

from bronkerbosch.core.config import TRACE_INDENT
from bronkerbosch.graph.ordering import degeneracy_ordering
from bronkerbosch.graph.set_algebra import difference, intersection
from bronkerbosch.graph.view import GraphView, V, as_graph_view, neighbours_within
from bronkerbosch.output.sinks import OutputSink
from bronkerbosch.search.maximum import maximum_cliques
from bronkerbosch.search.pivot import pivot_neighbourhood

LOGGER = logging.getLogger(__name__)

_GRAPH_METHODS = ("vertices", "adjacent", "degree")
_SINK_METHODS = ("emit", "set_maximal_cliques", "set_maximum_cliques")


class ConfigurationError(ValueError):
    """Invalid engine construction arguments (raised before any search work)."""


@dataclass(frozen=True)
class SearchStats:
    calls: int = 0  # search frames entered
    leaves: int = 0  # maximal cliques recorded
    pruned: int = 0  # frames cut by the termination test


# Sentinel for an exhausted branch iterator (vertices may be any hashable).
_DONE = object()


@dataclass
class _Frame(Generic[V]):
    """One level of the search: the clique so far and the lists this level owns."""

    clique: tuple[V, ...]
    candidates: list[V]
    excluded: list[V]
    depth: int
    branches: Iterator[V]


def format_vertices(vertices: Iterable[Hashable]) -> str:
    return "{" + ", ".join(sorted(str(v) for v in vertices)) + "}"


def format_cliques(cliques: Iterable[Iterable[Hashable]]) -> str:
    rendered = sorted(format_vertices(c) for c in cliques)
    return "[" + ", ".join(rendered) + "]"


class BronKerbosch(Generic[V]):
    def __init__(
        self,
        graph: GraphView[V] | nx.Graph,
        use_degeneracy_ordering: bool,
        use_pivot: bool,
        sink: OutputSink[V],
    ) -> None:
        if graph is None:
            raise ConfigurationError("Graph passed can not be None.")
        if sink is None:
            raise ConfigurationError("Output sink passed can not be None.")
        missing = [m for m in _SINK_METHODS if not callable(getattr(sink, m, None))]
        if missing:
            raise ConfigurationError(f"Output sink is missing required methods: {missing}")

        try:
            self._graph: GraphView[V] = as_graph_view(graph)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc
        missing = [m for m in _GRAPH_METHODS if not callable(getattr(self._graph, m, None))]
        if missing:
            raise ConfigurationError(f"Graph is missing required methods: {missing}")

        self.use_degeneracy_ordering = bool(use_degeneracy_ordering)
        self.use_pivot = bool(use_pivot)
        self._sink = sink

        self._maximal: list[frozenset[V]] = []
        self._maximum: list[frozenset[V]] = []
        self._calls = 0
        self._leaves = 0
        self._pruned = 0

    @property
    def graph(self) -> GraphView[V]:
        return self._graph

    @property
    def stats(self) -> SearchStats:
        return SearchStats(calls=self._calls, leaves=self._leaves, pruned=self._pruned)

    def maximal_cliques(self) -> tuple[frozenset[V], ...]:
        return tuple(self._maximal)

    def maximum_cliques(self) -> tuple[frozenset[V], ...]:
        return tuple(self._maximum)

    def run(self) -> None:
        """Enumerate maximal cliques, derive maximum cliques, report both to the sink."""
        self._emit("Bron-Kerbosch algorithm")
        self._emit(f"Utilize degeneracy ordering: {str(self.use_degeneracy_ordering).lower()}")
        self._emit(f"Utilize pivot environment: {str(self.use_pivot).lower()}")

        self._maximal = []
        self._maximum = []
        self._calls = self._leaves = self._pruned = 0

        vertices = list(self._graph.vertices())
        if self.use_degeneracy_ordering:
            self._search_degeneracy(vertices)
        else:
            self._search((), vertices, [], 0)
        self._maximum = maximum_cliques(self._maximal)

        self._sink.set_maximal_cliques(self.maximal_cliques())
        self._sink.set_maximum_cliques(self.maximum_cliques())
        self._emit(f"Maximal cliques: {format_cliques(self._maximal)}")
        self._emit(f"Maximum cliques: {format_cliques(self._maximum)}")

        LOGGER.info(
            "Search finished (degeneracy=%s, pivot=%s): %d vertices, %d maximal, %d maximum, "
            "calls=%d pruned=%d",
            self.use_degeneracy_ordering,
            self.use_pivot,
            len(vertices),
            len(self._maximal),
            len(self._maximum),
            self._calls,
            self._pruned,
        )

    def _search_degeneracy(self, vertices: list[V]) -> None:
        order = degeneracy_ordering(self._graph)
        self._emit(f"Computed degeneracy ordering: [{', '.join(str(v) for v in order)}]", 0)

        candidates = list(vertices)
        excluded: list[V] = []
        for v in order:
            neighbourhood = neighbours_within(self._graph, v, vertices)
            frame = self._descend(
                (v,),
                intersection(candidates, neighbourhood),
                intersection(excluded, neighbourhood),
                1,
            )
            if frame is not None:
                self._drain([frame])
            candidates.remove(v)
            excluded.append(v)

    def _search(
        self,
        clique: tuple[V, ...],
        candidates: Sequence[V],
        excluded: Sequence[V],
        depth: int,
    ) -> None:
        root = self._open(clique, candidates, excluded, depth)
        if root is not None:
            self._drain([root])

    def _drain(self, stack: list[_Frame[V]]) -> None:
        """Depth-first walk over open frames; the innermost frame is always on top."""
        while stack:
            frame = stack[-1]
            v = next(frame.branches, _DONE)
            if v is _DONE:
                stack.pop()
                continue
            frame.candidates.remove(v)
            child = self._descend(
                frame.clique + (v,),
                neighbours_within(self._graph, v, frame.candidates),
                neighbours_within(self._graph, v, frame.excluded),
                frame.depth + 1,
            )
            # The child owns copies of its lists.
            frame.excluded.append(v)
            if child is not None:
                stack.append(child)

    def _descend(
        self, clique: tuple[V, ...], candidates: list[V], excluded: list[V], depth: int
    ) -> _Frame[V] | None:
        """Record `clique` if nothing can extend it, otherwise open a frame below it."""
        if not candidates and not excluded:
            self._record(clique, depth)
            return None
        return self._open(clique, candidates, excluded, depth)

    def _open(
        self,
        clique: tuple[V, ...],
        candidates: Sequence[V],
        excluded: Sequence[V],
        depth: int,
    ) -> _Frame[V] | None:
        self._calls += 1
        self._emit(
            f"Potential clique: {format_vertices(clique)}"
            f" | Candidates: {format_vertices(candidates)}"
            f" | Excluded: {format_vertices(excluded)}",
            depth,
        )
        if self._is_dead_end(candidates, excluded):
            self._pruned += 1
            self._emit(f"End of depth search, output: {format_vertices(clique)}", depth)
            return None

        live_p = list(candidates)
        live_x = list(excluded)
        if self.use_pivot:
            branch_on = difference(live_p, pivot_neighbourhood(self._graph, live_p, live_x))
        else:
            branch_on = list(live_p)
        return _Frame(clique, live_p, live_x, depth, iter(branch_on))

    def _record(self, clique: tuple[V, ...], depth: int) -> None:
        self._leaves += 1
        self._maximal.append(frozenset(clique))
        self._emit(f"End of depth search, output: {format_vertices(clique)}", depth)

    def _is_dead_end(self, candidates: Sequence[V], excluded: Sequence[V]) -> bool:
        # Some excluded vertex extends every candidate: no new maximal clique below.
        return any(all(self._graph.adjacent(f, p) for p in candidates) for f in excluded)

    def _emit(self, step: str, depth: int = 0) -> None:
        self._sink.emit(TRACE_INDENT * depth + step)
