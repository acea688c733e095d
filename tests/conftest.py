from __future__ import annotations

import networkx as nx
import pytest

from bronkerbosch.graph.view import NetworkxGraphView


def make_graph(vertices, edges) -> nx.Graph:
    G = nx.Graph()
    G.add_nodes_from(vertices)
    G.add_edges_from(edges)
    return G


@pytest.fixture
def graph01() -> nx.Graph:
    """Six vertices; the only triangle is v1-v2-v5."""
    return make_graph(
        ["v1", "v2", "v3", "v4", "v5", "v6"],
        [
            ("v6", "v4"),
            ("v4", "v5"),
            ("v4", "v3"),
            ("v2", "v3"),
            ("v2", "v5"),
            ("v1", "v5"),
            ("v1", "v2"),
        ],
    )


@pytest.fixture
def graph01_view(graph01) -> NetworkxGraphView:
    return NetworkxGraphView(graph01)


@pytest.fixture
def triangle() -> nx.Graph:
    return make_graph("abc", [("a", "b"), ("b", "c"), ("a", "c")])


@pytest.fixture
def path() -> nx.Graph:
    return make_graph("abc", [("a", "b"), ("b", "c")])


GRAPH01_MAXIMAL = {
    frozenset({"v1", "v2", "v5"}),
    frozenset({"v2", "v3"}),
    frozenset({"v3", "v4"}),
    frozenset({"v4", "v5"}),
    frozenset({"v4", "v6"}),
}
