"""Tests for core diagnostic functions."""

import pytest

from digraphkit.diagnostics import (
    check_heap_invariants,
    check_search_tree,
    is_topological_order,
)
from digraphkit.graphs import (
    AdjacencyGraph,
    Graph,
    SearchTree,
    TreeEntry,
    breadth_first_search_tree,
)
from digraphkit.structures import IndexedHeap


def make_heap(items):
    return IndexedHeap(lambda a, b: a < b, lambda x: x, items)


class TestHeapInvariants:
    """Tests for check_heap_invariants."""

    def test_valid_heap(self):
        """Test that a heap built through its API passes."""
        heap = make_heap([5, 3, 8, 1, 9, 2])
        heap.remove()
        heap.insert(0)
        check_heap_invariants(heap)

    def test_stale_handle_map(self):
        """Test that a handle pointing at the wrong slot is reported."""
        heap = make_heap([1, 2, 3])
        heap._handles[3] = 0
        with pytest.raises(RuntimeError, match="recorded at position"):
            check_heap_invariants(heap)

    def test_handle_map_size(self):
        """Test that extra handle entries are reported."""
        heap = make_heap([1, 2])
        heap._handles[99] = 5
        with pytest.raises(RuntimeError, match="handle map has 3 entries for 2"):
            check_heap_invariants(heap)

    def test_order_violation(self):
        """Test that a child ordered before its parent is reported."""
        heap = make_heap([1, 2])
        heap._nodes.reverse()
        heap._handles = {2: 0, 1: 1}
        with pytest.raises(RuntimeError, match="Heap order violated"):
            check_heap_invariants(heap)


class TestSearchTree:
    """Tests for check_search_tree."""

    def test_valid_tree(self):
        """Test that a BFS tree passes."""
        G = Graph()
        for i in range(3):
            G.add(i)
        G.connect(0, 1)
        G.connect(1, 2)
        check_search_tree(breadth_first_search_tree(G, [0]))

    def test_root_with_cost(self):
        """Test that a root must have cost 0."""
        tree = Graph()
        tree.add(TreeEntry(1.0, 0))
        with pytest.raises(RuntimeError, match="Root 0"):
            check_search_tree(SearchTree(tree, [0]))

    def test_two_parents(self):
        """Test that a tree node has at most one parent."""
        tree = Graph()
        for node in range(3):
            tree.add(TreeEntry(0.0 if node < 2 else 1.0, node))
        tree.connect(2, 0)
        tree.connect(2, 1)
        with pytest.raises(RuntimeError, match="2 parents"):
            check_search_tree(SearchTree(tree, [0, 1, 2]))

    def test_parent_costs_more(self):
        """Test that costs never decrease towards the leaves."""
        tree = Graph()
        tree.add(TreeEntry(0.0, 0))
        tree.add(TreeEntry(5.0, 1))
        tree.add(TreeEntry(2.0, 2))
        tree.connect(1, 0)
        tree.connect(2, 1)
        with pytest.raises(RuntimeError, match="costs more"):
            check_search_tree(SearchTree(tree, [0, 1, 2]))

    def test_relabel_mismatch(self):
        """Test that relabel must agree with the tree entries."""
        tree = Graph()
        tree.add(TreeEntry(0.0, 1))
        with pytest.raises(RuntimeError, match="relabeled"):
            check_search_tree(SearchTree(tree, [0, None]))

    def test_relabel_count(self):
        """Test that relabel must name exactly the tree's nodes."""
        tree = Graph()
        tree.add(TreeEntry(0.0, 0))
        with pytest.raises(RuntimeError, match="2 reached nodes"):
            check_search_tree(SearchTree(tree, [0, 0]))


class TestTopologicalOrder:
    """Tests for is_topological_order."""

    def test_valid_and_invalid(self):
        """Test orders against a small DAG."""
        G = AdjacencyGraph([("A", "B"), ("A", "C"), ("C", "B")])
        assert is_topological_order(G, ["A", "C", "B"])
        assert not is_topological_order(G, ["A", "B", "C"])

    def test_missing_or_repeated(self):
        """Test that every vertex must appear exactly once."""
        G = AdjacencyGraph([("A", "B")])
        assert not is_topological_order(G, ["A"])
        assert not is_topological_order(G, ["A", "A", "B"])
        assert not is_topological_order(G, ["A", "X"])

    def test_self_loop_never_ordered(self):
        """Test that a self-loop cannot be respected."""
        G = AdjacencyGraph([("A", "A")])
        assert not is_topological_order(G, ["A"])
