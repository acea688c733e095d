from __future__ import annotations

from collections.abc import Hashable, Iterable

from bronkerbosch.models.schemas import CliqueReport, SearchStatsModel
from bronkerbosch.search.engine import BronKerbosch


def canonical_cliques(cliques: Iterable[Iterable[Hashable]]) -> list[list[str]]:
    """Cliques as sorted lists of vertex names, ordered by (-size, names)."""
    rendered = [sorted(str(v) for v in c) for c in cliques]
    return sorted(rendered, key=lambda c: (-len(c), c))


def build_report(engine: BronKerbosch, *, source: str = "") -> CliqueReport:
    """Summarise a finished search run."""
    graph = engine.graph
    vertices = list(graph.vertices())
    n_edges = sum(
        1 for i, u in enumerate(vertices) for v in vertices[i + 1 :] if graph.adjacent(u, v)
    )
    maximum = engine.maximum_cliques()
    stats = engine.stats
    return CliqueReport(
        source=source,
        use_degeneracy_ordering=engine.use_degeneracy_ordering,
        use_pivot=engine.use_pivot,
        number_of_vertices=len(vertices),
        number_of_edges=n_edges,
        maximal_cliques=canonical_cliques(engine.maximal_cliques()),
        maximum_cliques=canonical_cliques(maximum),
        maximum_size=len(maximum[0]) if maximum else 0,
        stats=SearchStatsModel(calls=stats.calls, leaves=stats.leaves, pruned=stats.pruned),
    )
