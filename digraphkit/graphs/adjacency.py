"""
Vertex-keyed adjacency graph.

AdjacencyGraph is the concrete GrowableDirectedGraph used by the
connectivity engine (symmetric closures, transposes, DFS forests). Vertices
and successors are kept in insertion order, so algorithms that walk a graph
built the same way always visit vertices in the same order.
"""

from typing import AbstractSet, Dict, Hashable, Iterable, Iterator, List, Tuple

from .view import GrowableDirectedGraph


class AdjacencyGraph(GrowableDirectedGraph):
    """
    Directed graph stored as vertex -> insertion-ordered successor set.

    Attributes:
        adj: Mapping vertex -> dict whose keys are the successors. The dict
            values are unused; dict keys give an ordered set.

    Complexity:
        - insert, connect: O(1) amortized per vertex/edge
        - successors: O(1) (returns a live view)
        - predecessors: O(V + E)

    Example:
        >>> G = AdjacencyGraph()
        >>> G.connect_edge('A', 'B')
        True
        >>> list(G)
        ['A', 'B']
        >>> set(G.successors('A'))
        {'B'}
    """

    def __init__(self, edges: Iterable[Tuple[Hashable, Hashable]] = ()):
        """
        Initialize a graph, optionally from (source, target) pairs.

        Args:
            edges: Initial edges. Endpoints are inserted as vertices.
        """
        self.adj: Dict[Hashable, Dict[Hashable, None]] = {}
        for source, target in edges:
            self.connect_edge(source, target)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.adj)

    def __len__(self) -> int:
        return len(self.adj)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.adj

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdjacencyGraph):
            return NotImplemented
        if self.adj.keys() != other.adj.keys():
            return False
        return all(self.adj[v].keys() == other.adj[v].keys() for v in self.adj)

    def __repr__(self) -> str:
        return f"AdjacencyGraph(vertices={len(self.adj)}, edges={self.edge_count()})"

    def successors(self, vertex: Hashable) -> AbstractSet[Hashable]:
        """
        Return the successors of a vertex.

        The returned set is a live view; do not mutate the graph while
        iterating over it.

        Raises:
            KeyError: If vertex is not in the graph.
        """
        if vertex not in self.adj:
            raise KeyError(f"Vertex {vertex!r} not in graph")
        return self.adj[vertex].keys()

    def insert(self, vertices: Iterable[Hashable]) -> bool:
        changed = False
        for vertex in vertices:
            if vertex not in self.adj:
                self.adj[vertex] = {}
                changed = True
        return changed

    def connect(self, source: Hashable, targets: Iterable[Hashable]) -> bool:
        targets = list(targets)
        self.insert([source])
        self.insert(targets)
        out = self.adj[source]
        changed = False
        for target in targets:
            if target not in out:
                out[target] = None
                changed = True
        return changed

    def edges(self) -> List[Tuple[Hashable, Hashable]]:
        """Return all edges as (source, target) pairs in insertion order."""
        return [(u, v) for u, out in self.adj.items() for v in out]

    def edge_count(self) -> int:
        return sum(len(out) for out in self.adj.values())

    def predecessors(self, vertex: Hashable) -> List[Hashable]:
        """Return every u with an edge u -> vertex, in vertex order."""
        return [u for u, out in self.adj.items() if vertex in out]

    def in_degrees(self) -> Dict[Hashable, int]:
        """Return vertex -> number of incoming edges (self-loops included)."""
        degrees = {vertex: 0 for vertex in self.adj}
        for out in self.adj.values():
            for target in out:
                degrees[target] += 1
        return degrees

    def copy(self) -> "AdjacencyGraph":
        return AdjacencyGraph.from_graph(self)


__all__ = ["AdjacencyGraph"]
