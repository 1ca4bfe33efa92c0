"""Tests for the vertex-keyed AdjacencyGraph and growable-graph operations."""

import pytest

from digraphkit.graphs import AdjacencyGraph, Graph


class TestAdjacencyGraph:
    """Tests for building and reading an AdjacencyGraph."""

    def test_connect_inserts_endpoints(self):
        """Test that connecting an edge adds both vertices."""
        G = AdjacencyGraph()
        assert G.connect_edge("A", "B")
        assert list(G) == ["A", "B"]
        assert set(G.successors("A")) == {"B"}
        assert set(G.successors("B")) == set()
        assert "A" in G
        assert "Z" not in G

    def test_connect_reports_new_edges(self):
        """Test the changed flag of connect and insert."""
        G = AdjacencyGraph()
        assert G.insert(["A"])
        assert not G.insert(["A"])
        assert G.connect("A", ["B", "C"])
        assert not G.connect("A", ["B"])
        assert G.connect("A", ["B", "D"])

    def test_successors_insertion_order(self):
        """Test that successors come back in insertion order."""
        G = AdjacencyGraph([("A", "C"), ("A", "B"), ("A", "D")])
        assert list(G.successors("A")) == ["C", "B", "D"]

    def test_successors_unknown_vertex(self):
        """Test successors of a missing vertex."""
        with pytest.raises(KeyError):
            AdjacencyGraph().successors("A")

    def test_edges_and_degrees(self):
        """Test edge listing, predecessors and in-degrees."""
        G = AdjacencyGraph([("A", "B"), ("C", "B"), ("B", "B")])
        assert G.edges() == [("A", "B"), ("B", "B"), ("C", "B")]
        assert G.edge_count() == 3
        assert G.predecessors("B") == ["A", "B", "C"]
        assert G.in_degrees() == {"A": 0, "B": 3, "C": 0}

    def test_equality_and_copy(self):
        """Test structural equality and copying."""
        G = AdjacencyGraph([("A", "B")])
        H = G.copy()
        assert G == H
        H.connect_edge("B", "A")
        assert G != H
        assert G.edges() == [("A", "B")]

    def test_from_graph_view(self):
        """Test copying an index Graph through the view interface."""
        source = Graph()
        a, b = source.add("a"), source.add("b")
        source.connect(a, b)
        G = AdjacencyGraph.from_graph(source)
        assert G.edges() == [(0, 1)]


class TestGrowableOperations:
    """Tests for operations derived from insert/connect."""

    def test_connect_both(self):
        """Test adding an edge in both directions."""
        G = AdjacencyGraph()
        assert G.connect_both("A", "B")
        assert not G.connect_both("B", "A")
        assert sorted(G.edges()) == [("A", "B"), ("B", "A")]

    def test_symmetric_closure(self):
        """Test in-place symmetric closure."""
        G = AdjacencyGraph([("A", "B"), ("B", "C")])
        assert G.symmetric_closure()
        assert sorted(G.edges()) == [("A", "B"), ("B", "A"), ("B", "C"), ("C", "B")]
        assert not G.symmetric_closure()

    def test_reversed_edges(self):
        """Test the transpose keeps all vertices."""
        G = AdjacencyGraph([("A", "B")])
        G.insert(["C"])
        R = G.reversed_edges()
        assert isinstance(R, AdjacencyGraph)
        assert list(R) == ["A", "B", "C"]
        assert R.edges() == [("B", "A")]

    def test_transitive_hull(self):
        """Test in-place transitive closure."""
        G = AdjacencyGraph([(1, 2), (2, 3), (3, 4)])
        assert G.transitive_hull()
        assert set(G.successors(1)) == {2, 3, 4}
        assert set(G.successors(2)) == {3, 4}
        assert set(G.successors(4)) == set()
        assert not G.transitive_hull()

    def test_transitive_hull_cycle(self):
        """Test that a cycle closes into a complete graph with self-loops."""
        G = AdjacencyGraph([(1, 2), (2, 1)])
        G.transitive_hull()
        assert set(G.successors(1)) == {1, 2}
        assert set(G.successors(2)) == {1, 2}
