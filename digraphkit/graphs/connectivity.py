"""
Connectivity analysis: weakly/strongly connected components, cycle
detection and topological ordering.

Strongly connected components use Kosaraju's algorithm: a DFS over the graph
fixes a finish order, and a second DFS over the transposed graph, started in
reverse finish order, produces one DFS tree per component.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.4 (Topological sort) and 22.5 (Strongly connected components).
"""

from typing import Dict, Hashable, List, Optional, Set

from ..logging import get_logger
from .adjacency import AdjacencyGraph
from .traversal import depth_first_search, dfs_forest
from .view import DirectedGraphView

logger = get_logger(__name__)


def weakly_connected_components(graph: DirectedGraphView) -> List[Set[Hashable]]:
    """
    Partition the vertices by connectivity ignoring edge direction.

    Args:
        graph: Graph to analyse. It is not modified.

    Returns:
        Disjoint vertex sets covering the graph, ordered by the position of
        their first vertex in the graph's vertex order.

    Example:
        >>> G = AdjacencyGraph([('A', 'B'), ('C', 'D')])
        >>> [sorted(c) for c in weakly_connected_components(G)]
        [['A', 'B'], ['C', 'D']]
    """
    return AdjacencyGraph.from_graph(graph).weakly_connected_components()


def strongly_connected_components(graph: DirectedGraphView) -> List[Set[Hashable]]:
    """
    Strongly connected components via Kosaraju's algorithm.

    The second DFS must visit the transposed graph in exactly the reverse of
    the first DFS's finish order; each of its trees is one component.

    Args:
        graph: Graph to analyse.

    Returns:
        Disjoint vertex sets covering the graph.

    Complexity: O(V + E).
    """
    forward = depth_first_search(graph)
    order = [node.vertex for node in reversed(forward)]
    transposed = AdjacencyGraph.from_graph(graph).reversed_edges()
    forest = dfs_forest(depth_first_search(transposed, order))
    components = forest.weakly_connected_components()
    logger.debug("found %d strongly connected components in %d vertices", len(components), len(graph))
    return components


def has_self_cycle(graph: DirectedGraphView, vertex: Hashable) -> bool:
    """Return True if vertex -> vertex is an edge."""
    return vertex in graph.successors(vertex)


def cyclic_vertices(graph: DirectedGraphView) -> Set[Hashable]:
    """
    Return every vertex that lies on a directed cycle.

    A vertex is cyclic if its strongly connected component has more than one
    member, or it has a self-loop.
    """
    cyclic: Set[Hashable] = set()
    for component in strongly_connected_components(graph):
        if len(component) > 1 or has_self_cycle(graph, next(iter(component))):
            cyclic.update(component)
    return cyclic


def is_acyclic(graph: DirectedGraphView) -> bool:
    return not cyclic_vertices(graph)


def topological_sort(graph: DirectedGraphView) -> Optional[List[Hashable]]:
    """
    Order the vertices so that every edge points forward.

    Runs a pre-order DFS from each vertex without predecessors, in vertex
    order. A vertex is appended when it is entered, and the DFS only enters
    a successor once all of that successor's predecessors have been
    appended, so every vertex is visited exactly once.

    Args:
        graph: Graph to order.

    Returns:
        The ordering, or None if the graph has a cycle.

    Example:
        >>> G = AdjacencyGraph([('shirt', 'tie'), ('tie', 'jacket'), ('shirt', 'jacket')])
        >>> topological_sort(G)
        ['shirt', 'tie', 'jacket']
    """
    if cyclic_vertices(graph):
        return None

    remaining: Dict[Hashable, int] = {vertex: 0 for vertex in graph}
    for vertex in graph:
        for successor in graph.successors(vertex):
            remaining[successor] += 1

    roots = [vertex for vertex in graph if remaining[vertex] == 0]
    order: List[Hashable] = []

    for root in roots:
        stack = [root]
        while stack:
            vertex = stack.pop()
            order.append(vertex)
            ready = []
            for successor in graph.successors(vertex):
                remaining[successor] -= 1
                if remaining[successor] == 0:
                    ready.append(successor)
            # Reversed so the first ready successor is entered first.
            stack.extend(reversed(ready))

    return order


__all__ = [
    "weakly_connected_components",
    "strongly_connected_components",
    "has_self_cycle",
    "cyclic_vertices",
    "is_acyclic",
    "topological_sort",
]
