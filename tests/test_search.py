"""
Tests for the search package: pivot selection, maximum extraction and the
Bron-Kerbosch engine in all four configurations.
"""

import sys

import networkx as nx
import pytest

from bronkerbosch.analysis.verify import brute_force_maximal_cliques, invalid_cliques
from bronkerbosch.graph.generate import random_graph
from bronkerbosch.graph.view import NetworkxGraphView
from bronkerbosch.output.sinks import MemoryOutputSink
from bronkerbosch.search.engine import (
    BronKerbosch,
    ConfigurationError,
    SearchStats,
    format_cliques,
    format_vertices,
)
from bronkerbosch.search.maximum import maximum_cliques
from bronkerbosch.search.pivot import pivot_neighbourhood, select_pivot
from conftest import GRAPH01_MAXIMAL, make_graph

CONFIGURATIONS = [(False, False), (False, True), (True, False), (True, True)]


def run(graph, degeneracy=False, pivot=False):
    sink = MemoryOutputSink()
    engine = BronKerbosch(graph, degeneracy, pivot, sink)
    engine.run()
    return engine, sink


class TestPivotSelection:
    def test_highest_degree_first_encountered(self, graph01_view):
        # v2, v4, v5 all have degree 3; v2 comes first.
        vertices = list(graph01_view.vertices())
        assert select_pivot(graph01_view, vertices, []) == "v2"
        assert pivot_neighbourhood(graph01_view, vertices, []) == ["v1", "v3", "v5"]

    def test_excluded_vertices_can_be_pivots(self, graph01_view):
        assert select_pivot(graph01_view, ["v1", "v6"], ["v4"]) == "v4"
        assert pivot_neighbourhood(graph01_view, ["v1", "v6"], ["v4"]) == ["v6"]

    def test_candidates_scanned_before_excluded(self, graph01_view):
        assert select_pivot(graph01_view, ["v5"], ["v2"]) == "v5"

    def test_empty_pool(self, graph01_view):
        assert select_pivot(graph01_view, [], []) is None
        assert pivot_neighbourhood(graph01_view, [], []) == []

    def test_isolated_pivot(self):
        view = NetworkxGraphView(make_graph("ab", []))
        assert select_pivot(view, ["a", "b"], []) == "a"
        assert pivot_neighbourhood(view, ["a", "b"], []) == []

    def test_inputs_not_mutated(self, graph01_view):
        P, X = ["v1", "v2"], ["v5"]
        pivot_neighbourhood(graph01_view, P, X)
        assert P == ["v1", "v2"] and X == ["v5"]


class TestMaximumExtraction:
    def test_filters_largest(self):
        cliques = [frozenset("ab"), frozenset("cde"), frozenset("fgh"), frozenset("i")]
        assert maximum_cliques(cliques) == [frozenset("cde"), frozenset("fgh")]

    def test_empty(self):
        assert maximum_cliques([]) == []

    def test_accepts_iterators(self):
        assert maximum_cliques(iter([frozenset("ab")])) == [frozenset("ab")]


class TestScenarios:
    @pytest.mark.parametrize("degeneracy, pivot", CONFIGURATIONS)
    def test_triangle(self, triangle, degeneracy, pivot):
        engine, _ = run(triangle, degeneracy, pivot)
        assert set(engine.maximal_cliques()) == {frozenset("abc")}
        assert engine.maximum_cliques() == (frozenset("abc"),)

    @pytest.mark.parametrize("degeneracy, pivot", CONFIGURATIONS)
    def test_path_ties_at_size_two(self, path, degeneracy, pivot):
        engine, _ = run(path, degeneracy, pivot)
        expected = {frozenset("ab"), frozenset("bc")}
        assert set(engine.maximal_cliques()) == expected
        assert set(engine.maximum_cliques()) == expected

    @pytest.mark.parametrize("degeneracy, pivot", CONFIGURATIONS)
    def test_graph01(self, graph01, degeneracy, pivot):
        engine, _ = run(graph01, degeneracy, pivot)
        assert set(engine.maximal_cliques()) == GRAPH01_MAXIMAL
        assert engine.maximum_cliques() == (frozenset({"v1", "v2", "v5"}),)
        assert set(engine.maximal_cliques()) == brute_force_maximal_cliques(engine.graph)

    @pytest.mark.parametrize("degeneracy, pivot", CONFIGURATIONS)
    def test_empty_graph(self, degeneracy, pivot):
        engine, sink = run(nx.Graph(), degeneracy, pivot)
        assert engine.maximal_cliques() == ()
        assert engine.maximum_cliques() == ()
        assert sink.get_maximal_cliques() == ()

    @pytest.mark.parametrize("degeneracy, pivot", CONFIGURATIONS)
    def test_isolated_vertices_are_cliques(self, degeneracy, pivot):
        G = make_graph("abxy", [("a", "b")])
        engine, _ = run(G, degeneracy, pivot)
        expected = {frozenset("ab"), frozenset("x"), frozenset("y")}
        assert set(engine.maximal_cliques()) == expected
        assert engine.maximum_cliques() == (frozenset("ab"),)

    @pytest.mark.parametrize("degeneracy, pivot", CONFIGURATIONS)
    def test_complete_graph(self, degeneracy, pivot):
        engine, _ = run(nx.complete_graph(6), degeneracy, pivot)
        assert engine.maximal_cliques() == (frozenset(range(6)),)


class TestProperties:
    @pytest.mark.parametrize("seed", range(10))
    @pytest.mark.parametrize("n, p", [(6, 0.5), (8, 0.3), (9, 0.6), (10, 0.8)])
    def test_completeness_and_variant_equivalence(self, seed, n, p):
        G = random_graph(n, p, seed=seed)
        expected = None
        for degeneracy, pivot in CONFIGURATIONS:
            engine, _ = run(G, degeneracy, pivot)
            if expected is None:
                expected = brute_force_maximal_cliques(engine.graph)
            found = engine.maximal_cliques()
            assert len(found) == len(set(found)), "duplicate clique reported"
            assert set(found) == expected
            assert invalid_cliques(engine.graph, found) == []

    @pytest.mark.parametrize("seed", range(5))
    def test_maximum_correctness(self, seed):
        G = random_graph(10, 0.5, seed=seed)
        engine, _ = run(G, True, True)
        maximal = engine.maximal_cliques()
        largest = max(len(c) for c in maximal)
        assert all(len(c) == largest for c in engine.maximum_cliques())
        assert set(engine.maximum_cliques()) == {c for c in maximal if len(c) == largest}

    @pytest.mark.parametrize("degeneracy, pivot", CONFIGURATIONS)
    def test_deterministic(self, degeneracy, pivot):
        G = random_graph(12, 0.5, seed=11)
        first, first_sink = run(G, degeneracy, pivot)
        second, second_sink = run(G, degeneracy, pivot)
        assert first.maximal_cliques() == second.maximal_cliques()
        assert first.maximum_cliques() == second.maximum_cliques()
        assert first_sink.lines == second_sink.lines

    def test_matches_networkx_on_larger_graph(self):
        G = random_graph(40, 0.4, seed=5)
        expected = {frozenset(c) for c in nx.find_cliques(G)}
        for degeneracy, pivot in CONFIGURATIONS:
            engine, _ = run(G, degeneracy, pivot)
            assert set(engine.maximal_cliques()) == expected

    def test_graph_is_not_mutated(self, graph01):
        before = (list(graph01.nodes), sorted(map(sorted, graph01.edges)))
        run(graph01, True, True)
        assert (list(graph01.nodes), sorted(map(sorted, graph01.edges))) == before


class TestEngine:
    def test_results_empty_before_run(self, graph01):
        engine = BronKerbosch(graph01, False, False, MemoryOutputSink())
        assert engine.maximal_cliques() == ()
        assert engine.maximum_cliques() == ()
        assert engine.stats == SearchStats()

    def test_rerun_does_not_accumulate(self, graph01):
        engine, _ = run(graph01)
        engine.run()
        assert len(engine.maximal_cliques()) == len(GRAPH01_MAXIMAL)

    def test_results_reported_to_sink(self, graph01):
        engine, sink = run(graph01, False, True)
        assert sink.get_maximal_cliques() == engine.maximal_cliques()
        assert sink.get_maximum_cliques() == engine.maximum_cliques()

    def test_plain_stats_on_triangle(self, triangle):
        engine, _ = run(triangle)
        assert engine.stats == SearchStats(calls=6, leaves=1, pruned=3)

    def test_pivot_prunes_triangle(self, triangle):
        engine, _ = run(triangle, False, True)
        assert engine.stats == SearchStats(calls=3, leaves=1, pruned=0)

    def test_custom_graph_view(self):
        class RingOfFour:
            """Cycle 0-1-2-3-0 over int vertices."""

            def vertices(self):
                return [0, 1, 2, 3]

            def adjacent(self, u, v):
                return (u - v) % 4 in (1, 3)

            def degree(self, v):
                return 2

        for degeneracy, pivot in CONFIGURATIONS:
            engine, _ = run(RingOfFour(), degeneracy, pivot)
            assert set(engine.maximal_cliques()) == {
                frozenset({0, 1}),
                frozenset({1, 2}),
                frozenset({2, 3}),
                frozenset({0, 3}),
            }


class TestDeepCliques:
    @pytest.fixture
    def shallow_stack(self):
        frame, depth = sys._getframe(), 0
        while frame is not None:
            depth += 1
            frame = frame.f_back
        previous = sys.getrecursionlimit()
        sys.setrecursionlimit(depth + 150)
        yield
        sys.setrecursionlimit(previous)

    @pytest.mark.parametrize("degeneracy, pivot", [(False, True), (True, True)])
    def test_complete_graph_of_600(self, degeneracy, pivot):
        engine = BronKerbosch(
            nx.complete_graph(600), degeneracy, pivot, MemoryOutputSink(keep_trace=False)
        )
        engine.run()
        assert engine.maximal_cliques() == (frozenset(range(600)),)
        assert engine.maximum_cliques() == (frozenset(range(600)),)

    @pytest.mark.parametrize("degeneracy, pivot", CONFIGURATIONS)
    def test_clique_deeper_than_call_stack(self, shallow_stack, degeneracy, pivot):
        engine = BronKerbosch(
            nx.complete_graph(200), degeneracy, pivot, MemoryOutputSink(keep_trace=False)
        )
        engine.run()
        assert engine.maximal_cliques() == (frozenset(range(200)),)
        assert engine.stats.leaves == 1


class TestConfigurationErrors:
    def test_missing_graph(self):
        with pytest.raises(ConfigurationError):
            BronKerbosch(None, False, False, MemoryOutputSink())

    def test_missing_sink(self, graph01):
        with pytest.raises(ConfigurationError):
            BronKerbosch(graph01, False, False, None)

    def test_sink_without_interface(self, graph01):
        with pytest.raises(ConfigurationError, match="emit"):
            BronKerbosch(graph01, False, False, object())

    def test_graph_without_interface(self):
        with pytest.raises(ConfigurationError, match="adjacent"):
            BronKerbosch(object(), False, False, MemoryOutputSink())

    def test_directed_graph(self):
        with pytest.raises(ConfigurationError, match="undirected"):
            BronKerbosch(nx.DiGraph([("a", "b")]), False, False, MemoryOutputSink())

    def test_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)


class TestTrace:
    def test_header_and_summary(self, triangle):
        _, sink = run(triangle, True, False)
        assert sink.lines[:3] == [
            "Bron-Kerbosch algorithm",
            "Utilize degeneracy ordering: true",
            "Utilize pivot environment: false",
        ]
        assert sink.lines[-2] == "Maximal cliques: [{a, b, c}]"
        assert sink.lines[-1] == "Maximum cliques: [{a, b, c}]"

    def test_root_frame_line(self, triangle):
        _, sink = run(triangle)
        assert sink.lines[3] == "Potential clique: {} | Candidates: {a, b, c} | Excluded: {}"

    def test_depth_indentation(self, triangle):
        _, sink = run(triangle)
        assert "\t\t\tEnd of depth search, output: {a, b, c}" in sink.lines
        assert "\tPotential clique: {a} | Candidates: {b, c} | Excluded: {}" in sink.lines

    def test_degeneracy_ordering_is_traced(self, path):
        _, sink = run(path, True, True)
        assert "Computed degeneracy ordering: [a, b, c]" in sink.lines

    def test_formatting_helpers(self):
        assert format_vertices(["b", "a"]) == "{a, b}"
        assert format_vertices([]) == "{}"
        assert format_cliques([frozenset("cb"), frozenset("a")]) == "[{a}, {b, c}]"
