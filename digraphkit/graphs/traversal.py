"""
Graph traversal algorithms: BFS, DFS, closure and path tracing.

All functions accept any DirectedGraphView. Successors are visited in the
order the graph yields them; AdjacencyGraph yields insertion order, so
results are reproducible for a given build sequence.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, List, Optional, Set

from .adjacency import AdjacencyGraph
from .view import DirectedGraphView


@dataclass(frozen=True)
class BFSNode:
    """
    A vertex reached by breadth-first search.

    Attributes:
        vertex: The vertex.
        distance: Number of edges from the nearest root (0 for roots).
        parent: Vertex it was discovered from, None for roots.
    """

    vertex: Hashable
    distance: int
    parent: Optional[Hashable] = None


@dataclass(frozen=True)
class DFSNode:
    """
    A vertex finished by depth-first search.

    Attributes:
        vertex: The vertex.
        discovered: Timestamp when the vertex was entered.
        finished: Timestamp after all its descendants were done.
        parent: Vertex it was entered from, None for tree roots.
    """

    vertex: Hashable
    discovered: int
    finished: int
    parent: Optional[Hashable] = None


def breadth_first_search(graph: DirectedGraphView, roots: Iterable[Hashable]) -> List[BFSNode]:
    """
    Breadth-first search from a set of roots.

    Duplicate roots are collapsed. Every reachable vertex appears once.

    Args:
        graph: Graph to traverse.
        roots: Start vertices, all at distance 0.

    Returns:
        BFSNode list in ascending distance order.

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = AdjacencyGraph([('A', 'B'), ('B', 'C')])
        >>> [(n.vertex, n.distance) for n in breadth_first_search(G, ['A'])]
        [('A', 0), ('B', 1), ('C', 2)]
    """
    discovered: Set[Hashable] = set()
    queue: List[BFSNode] = []

    for root in roots:
        if root not in discovered:
            discovered.add(root)
            queue.append(BFSNode(root, 0, None))

    # Index cursor instead of popping from the front.
    position = 0
    while position < len(queue):
        current = queue[position]
        position += 1
        distance = current.distance + 1
        for vertex in graph.successors(current.vertex):
            if vertex not in discovered:
                discovered.add(vertex)
                queue.append(BFSNode(vertex, distance, current.vertex))

    return queue


def distances(graph: DirectedGraphView, roots: Iterable[Hashable]) -> Dict[Hashable, int]:
    """Return vertex -> BFS distance from the nearest root, for reached vertices."""
    return {node.vertex: node.distance for node in breadth_first_search(graph, roots)}


def depth_first_search(
    graph: DirectedGraphView, vertices: Optional[Iterable[Hashable]] = None
) -> List[DFSNode]:
    """
    Depth-first search (iterative implementation using an explicit stack).

    Each vertex of `vertices` that is still unvisited starts a new tree of
    the DFS forest. A single counter stamps discovery and finish times.

    Args:
        graph: Graph to traverse.
        vertices: Root candidates in order. Defaults to every vertex of the
            graph in its natural order.

    Returns:
        DFSNode list in ascending finish order.

    Complexity: O(V + E) where V is vertices and E is edges.
    """
    if vertices is None:
        vertices = graph

    visited: Set[Hashable] = set()
    finished: List[DFSNode] = []
    time = 0

    for root in vertices:
        if root in visited:
            continue
        visited.add(root)
        time += 1
        # Frame: (vertex, parent, discovered, successor iterator)
        stack = [(root, None, time, iter(graph.successors(root)))]

        while stack:
            vertex, parent, discovered, successors = stack[-1]
            for successor in successors:
                if successor not in visited:
                    visited.add(successor)
                    time += 1
                    stack.append((successor, vertex, time, iter(graph.successors(successor))))
                    break
            else:
                stack.pop()
                time += 1
                finished.append(DFSNode(vertex, discovered, time, parent))

    return finished


def depth_first_search_recursive(
    graph: DirectedGraphView, vertices: Optional[Iterable[Hashable]] = None
) -> List[DFSNode]:
    """
    Depth-first search (recursive implementation).

    Produces exactly the same nodes as depth_first_search. Recursion depth
    grows with the longest DFS path, so prefer the iterative version for
    deep graphs.
    """
    if vertices is None:
        vertices = graph

    visited: Set[Hashable] = set()
    finished: List[DFSNode] = []
    time = 0

    def dfs_visit(vertex: Hashable, parent: Optional[Hashable]) -> None:
        nonlocal time
        if vertex in visited:
            return
        visited.add(vertex)
        time += 1
        discovered = time
        for successor in graph.successors(vertex):
            dfs_visit(successor, vertex)
        time += 1
        finished.append(DFSNode(vertex, discovered, time, parent))

    for root in vertices:
        dfs_visit(root, None)

    return finished


def _forest(nodes: Iterable) -> AdjacencyGraph:
    forest = AdjacencyGraph()
    for node in nodes:
        if node.parent is None:
            forest.insert([node.vertex])
        else:
            forest.connect_edge(node.parent, node.vertex)
    return forest


def bfs_forest(nodes: Iterable[BFSNode]) -> AdjacencyGraph:
    """Build the BFS forest (parent -> child edges) from BFS nodes."""
    return _forest(nodes)


def dfs_forest(nodes: Iterable[DFSNode]) -> AdjacencyGraph:
    """Build the DFS forest (parent -> child edges) from DFS nodes."""
    return _forest(nodes)


def closure(graph: DirectedGraphView, kernel: Iterable[Hashable]) -> Set[Hashable]:
    """
    Return the smallest successor-closed set containing `kernel`.

    Complexity: O(V + E) over the reached part of the graph.
    """
    processing = list(kernel)
    hull = set(processing)
    while processing:
        for successor in graph.successors(processing.pop()):
            if successor not in hull:
                hull.add(successor)
                processing.append(successor)
    return hull


def reachable(graph: DirectedGraphView, kernel: Iterable[Hashable]) -> Set[Hashable]:
    """
    Return every vertex reachable from `kernel` by at least one edge.

    A kernel vertex is included only if some path leads back to it.
    """
    processing = list(kernel)
    hull: Set[Hashable] = set()
    while processing:
        for successor in graph.successors(processing.pop()):
            if successor not in hull:
                hull.add(successor)
                processing.append(successor)
    return hull


def trace_path_while_unique(graph: DirectedGraphView, start: Hashable) -> List[Hashable]:
    """
    Follow single-successor links from `start`.

    Stops at a vertex with zero or several successors, or when the only
    successor is already on the path.

    Returns:
        Path of distinct vertices beginning with `start`.

    Example:
        >>> G = AdjacencyGraph([('A', 'B'), ('B', 'C'), ('C', 'A')])
        >>> trace_path_while_unique(G, 'A')
        ['A', 'B', 'C']
    """
    path = [start]
    seen = {start}
    while True:
        successors = graph.successors(path[-1])
        if len(successors) != 1:
            return path
        successor = next(iter(successors))
        if successor in seen:
            return path
        seen.add(successor)
        path.append(successor)


__all__ = [
    "BFSNode",
    "DFSNode",
    "breadth_first_search",
    "distances",
    "depth_first_search",
    "depth_first_search_recursive",
    "bfs_forest",
    "dfs_forest",
    "closure",
    "reachable",
    "trace_path_while_unique",
]
