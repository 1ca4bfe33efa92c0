"""Tests for connectivity analysis: components, cycles and topological order."""

import pytest

from digraphkit.diagnostics import is_topological_order
from digraphkit.graphs import (
    AdjacencyGraph,
    closure,
    cyclic_vertices,
    has_self_cycle,
    is_acyclic,
    strongly_connected_components,
    topological_sort,
    weakly_connected_components,
)


def as_partition(components):
    return {frozenset(c) for c in components}


def brute_force_sccs(graph):
    """Reference SCCs from pairwise reachability."""
    hulls = {v: closure(graph, [v]) for v in graph}
    return {frozenset(u for u in hulls[v] if v in hulls[u]) for v in graph}


class TestWeaklyConnected:
    """Tests for weakly connected components."""

    def test_two_components(self):
        """Test graph with edges A->B and C->D only."""
        G = AdjacencyGraph([("A", "B"), ("C", "D")])

        components = weakly_connected_components(G)

        assert components == [{"A", "B"}, {"C", "D"}]

    def test_direction_ignored(self):
        """Test that edges pointing into a vertex still connect it."""
        G = AdjacencyGraph([("A", "C"), ("B", "C")])
        assert weakly_connected_components(G) == [{"A", "B", "C"}]

    def test_isolated_vertices(self):
        """Test that isolated vertices form singleton components."""
        G = AdjacencyGraph([("A", "B")])
        G.insert(["C", "D"])
        assert weakly_connected_components(G) == [{"A", "B"}, {"C"}, {"D"}]

    def test_input_not_modified(self):
        """Test that the symmetric closure is taken on a copy."""
        G = AdjacencyGraph([("A", "B")])
        weakly_connected_components(G)
        assert G.edges() == [("A", "B")]

    def test_partition_covers_vertices(self, random_digraph):
        """Test that components are disjoint and cover the graph."""
        G = random_digraph(30, 0.04)
        components = weakly_connected_components(G)
        seen = [v for c in components for v in c]
        assert sorted(seen) == sorted(G)


class TestStronglyConnected:
    """Tests for Kosaraju's strongly connected components."""

    def test_classic_example(self):
        """Test a graph with a 3-cycle, a 2-cycle and an isolated vertex."""
        G = AdjacencyGraph(
            [("a", "b"), ("b", "c"), ("c", "a"), ("b", "d"), ("d", "e"), ("e", "d")]
        )
        G.insert(["f"])

        components = strongly_connected_components(G)

        assert as_partition(components) == {
            frozenset("abc"),
            frozenset("de"),
            frozenset("f"),
        }

    def test_dag_has_singletons(self):
        """Test that every vertex of a DAG is its own component."""
        G = AdjacencyGraph([(1, 2), (2, 3), (1, 3)])
        assert as_partition(strongly_connected_components(G)) == {
            frozenset([1]),
            frozenset([2]),
            frozenset([3]),
        }

    def test_matches_brute_force(self, random_digraph):
        """Test Kosaraju against pairwise reachability on random graphs."""
        for p in (0.03, 0.08, 0.15):
            G = random_digraph(25, p, self_loops=True)
            components = strongly_connected_components(G)

            assert sum(len(c) for c in components) == len(G)
            assert as_partition(components) == brute_force_sccs(G)

    def test_empty_graph(self):
        """Test SCCs of the empty graph."""
        assert strongly_connected_components(AdjacencyGraph()) == []


class TestCycles:
    """Tests for self-cycles and cyclic vertices."""

    def test_self_loop(self):
        """Test that a self-loop makes a singleton cyclic."""
        G = AdjacencyGraph([("A", "A"), ("A", "B")])
        assert has_self_cycle(G, "A")
        assert not has_self_cycle(G, "B")
        assert cyclic_vertices(G) == {"A"}

    def test_cycle_members(self):
        """Test that only vertices on a cycle are reported."""
        G = AdjacencyGraph([("A", "B"), ("B", "C"), ("C", "B"), ("C", "D")])
        assert cyclic_vertices(G) == {"B", "C"}
        assert not is_acyclic(G)

    def test_acyclic(self):
        """Test a chain has no cyclic vertices."""
        G = AdjacencyGraph([("A", "B"), ("B", "C")])
        assert cyclic_vertices(G) == set()
        assert is_acyclic(G)

    def test_singleton_without_loop_iff_acyclic(self, random_digraph):
        """Test that a vertex is acyclic iff its SCC is a loop-free singleton."""
        G = random_digraph(25, 0.07, self_loops=True)
        cyclic = cyclic_vertices(G)
        for component in strongly_connected_components(G):
            for vertex in component:
                plain = len(component) == 1 and vertex not in G.successors(vertex)
                assert plain == (vertex not in cyclic)


class TestTopologicalSort:
    """Tests for topological ordering."""

    def test_simple_order(self):
        """Test ordering of a small DAG."""
        G = AdjacencyGraph([("shirt", "tie"), ("tie", "jacket"), ("shirt", "jacket")])
        assert topological_sort(G) == ["shirt", "tie", "jacket"]

    def test_waits_for_all_predecessors(self):
        """Test that B is not placed before its second predecessor C."""
        G = AdjacencyGraph([("A", "B"), ("A", "C"), ("C", "B")])

        order = topological_sort(G)

        assert order == ["A", "C", "B"]

    def test_multiple_roots(self):
        """Test that every root seeds the ordering."""
        G = AdjacencyGraph([("A", "C"), ("B", "C")])
        G.insert(["D"])
        order = topological_sort(G)
        assert order == ["A", "B", "C", "D"]
        assert is_topological_order(G, order)

    def test_cycle_returns_none(self):
        """Test that a cyclic graph has no ordering."""
        G = AdjacencyGraph([("A", "B"), ("B", "A"), ("B", "C")])
        assert topological_sort(G) is None

    def test_self_loop_returns_none(self):
        """Test that a self-loop prevents ordering."""
        G = AdjacencyGraph([("A", "A")])
        assert topological_sort(G) is None

    def test_empty_graph(self):
        """Test the empty graph orders to an empty list."""
        assert topological_sort(AdjacencyGraph()) == []

    def test_random_dags(self, random_digraph):
        """Test that random DAGs get valid orderings."""
        for _ in range(10):
            G = random_digraph(30, 0.1, acyclic=True)
            order = topological_sort(G)
            assert order is not None
            assert is_topological_order(G, order)

    @pytest.mark.parametrize("p", [0.02, 0.05, 0.1])
    def test_succeeds_iff_acyclic(self, random_digraph, p):
        """Test that sorting succeeds exactly when no vertex is cyclic."""
        for _ in range(10):
            G = random_digraph(15, p, self_loops=True)
            order = topological_sort(G)
            assert (order is not None) == (not cyclic_vertices(G))
            if order is not None:
                assert is_topological_order(G, order)
