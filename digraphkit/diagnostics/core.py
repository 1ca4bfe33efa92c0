"""Invariant checks for heaps, search trees and vertex orderings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Hashable, Sequence

if TYPE_CHECKING:
    from ..graphs.shortest import SearchTree
    from ..graphs.view import DirectedGraphView
    from ..structures.heap import IndexedHeap


def check_heap_invariants(heap: "IndexedHeap") -> None:
    """
    Verify heap order and the handle -> position map of an IndexedHeap.

    Parameters
    ----------
    heap:
        The heap to inspect.

    Raises
    ------
    RuntimeError
        If a child is ordered before its parent, or if the handle map does
        not point every handle at the slot holding its element.
    """
    nodes = heap._nodes
    handles = heap._handles

    if len(handles) != len(nodes):
        raise RuntimeError(
            f"Heap handle map has {len(handles)} entries for {len(nodes)} elements."
        )

    for position, element in enumerate(nodes):
        handle = heap._handle_of(element)
        recorded = handles.get(handle)
        if recorded != position:
            raise RuntimeError(
                f"Handle {handle!r} is recorded at position {recorded}, "
                f"but its element sits at position {position}."
            )
        if position > 0:
            parent = (position - 1) // 2
            if heap._before(element, nodes[parent]):
                raise RuntimeError(
                    f"Heap order violated: element at {position} must come "
                    f"before its parent at {parent}."
                )


def check_search_tree(tree: "SearchTree") -> None:
    """
    Verify the structure of a BFS or shortest-path tree.

    Every tree node points to at most one parent, a node without a parent
    has cost 0, parents never cost more than their children, and the
    relabel list is a bijection between reached nodes and tree indices.

    Parameters
    ----------
    tree:
        SearchTree returned by the shortest-path engine.

    Raises
    ------
    RuntimeError
        If any of the above does not hold.
    """
    graph = tree.graph
    relabel = tree.relabel

    reached = [index for index, label in enumerate(relabel) if label is not None]
    if len(reached) != graph.node_count:
        raise RuntimeError(
            f"Relabel list names {len(reached)} reached nodes, "
            f"tree has {graph.node_count}."
        )

    for tree_index in graph.node_indices():
        entry = graph[tree_index]
        if relabel[entry.node] != tree_index:
            raise RuntimeError(
                f"Tree node {tree_index} claims original node {entry.node}, "
                f"which is relabeled to {relabel[entry.node]}."
            )
        parents = graph.successors(tree_index)
        if len(parents) > 1:
            raise RuntimeError(f"Tree node {tree_index} has {len(parents)} parents.")
        if not parents:
            if entry.cost != 0:
                raise RuntimeError(
                    f"Root {entry.node} of the search tree has cost {entry.cost}."
                )
            continue
        parent = next(iter(parents))
        if graph[parent].cost > entry.cost:
            raise RuntimeError(
                f"Parent {graph[parent].node} costs more than child {entry.node}."
            )


def is_topological_order(
    graph: "DirectedGraphView", order: Sequence[Hashable]
) -> bool:
    """
    Check that `order` lists every vertex once and respects every edge.

    Parameters
    ----------
    graph:
        Graph whose edges constrain the order.
    order:
        Candidate ordering of the graph's vertices.

    Returns
    -------
    bool
        True if for every edge (u, v) u appears before v.
    """
    position = {}
    for index, vertex in enumerate(order):
        if vertex in position:
            return False
        position[vertex] = index

    if len(position) != len(graph):
        return False

    if any(vertex not in position for vertex in graph):
        return False

    for u in graph:
        for v in graph.successors(u):
            if position[u] >= position[v]:
                return False
    return True
