"""
Utility functions for graph algorithms.

Provides set-union over a family, conversion of any graph view into an
index-addressed Graph, and path cost summation.
"""

from typing import Callable, Dict, Hashable, Iterable, Sequence, Set, Tuple, TypeVar

from .core import Graph
from .view import DirectedGraphView

S = TypeVar("S")
T = TypeVar("T")


def collect(items: Iterable[S], family: Callable[[S], Iterable[T]]) -> Set[T]:
    """
    Return the union of family(item) over all items.

    Example:
        >>> collect([1, 2], lambda n: range(n))
        {0, 1}
    """
    result: Set[T] = set()
    for item in items:
        result.update(family(item))
    return result


def index_graph(view: DirectedGraphView) -> Tuple[Graph, Dict[Hashable, int]]:
    """
    Copy a graph view into an index-addressed Graph.

    Node i holds the i-th vertex in the view's vertex order, so the
    shortest-path engine can be run on vertex-keyed graphs.

    Args:
        view: Graph to copy.

    Returns:
        Tuple of (graph, vertex_to_index).

    Example:
        >>> from digraphkit.graphs import AdjacencyGraph
        >>> graph, index = index_graph(AdjacencyGraph([('A', 'B')]))
        >>> index
        {'A': 0, 'B': 1}
        >>> graph.successors(index['A'])
        {1}
    """
    graph: Graph = Graph()
    vertex_to_index: Dict[Hashable, int] = {}
    for vertex in view:
        vertex_to_index[vertex] = graph.add(vertex)
    for vertex, source in vertex_to_index.items():
        for successor in view.successors(vertex):
            graph.connect(source, vertex_to_index[successor])
    return graph, vertex_to_index


def path_cost(path: Sequence[T], distance: Callable[[T, T], float]) -> float:
    """
    Sum the edge costs along a path.

    Returns:
        Total cost; 0.0 for paths with fewer than two nodes.
    """
    return float(sum(distance(u, v) for u, v in zip(path, path[1:])))


__all__ = ["collect", "index_graph", "path_cost"]
