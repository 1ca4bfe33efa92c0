"""
Abstract directed-graph capabilities.

Every algorithm in this package is written against DirectedGraphView: a
graph is anything that can enumerate its vertices and report the successor
set of a vertex. GrowableDirectedGraph adds the two mutations needed to build
graphs (insert vertices, connect edges) and the derived operations that only
make sense on a graph one can grow.
"""

from abc import ABC, abstractmethod
from typing import AbstractSet, Hashable, Iterable, Iterator, List, Set, Type, TypeVar

G = TypeVar("G", bound="GrowableDirectedGraph")


class DirectedGraphView(ABC):
    """
    Read-only directed graph.

    Successor sets may contain the vertex itself (self-loop). Every vertex
    that appears in a successor set must also be enumerated by ``__iter__``.
    """

    @abstractmethod
    def successors(self, vertex: Hashable) -> AbstractSet[Hashable]:
        """
        Return the successors of a vertex.

        Args:
            vertex: A vertex of the graph.

        Returns:
            Set of vertices v such that vertex -> v is an edge.
        """
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[Hashable]:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __contains__(self, vertex: object) -> bool:
        return any(v == vertex for v in self)


class GrowableDirectedGraph(DirectedGraphView):
    """
    Directed graph that can be extended with vertices and edges.

    Subclasses must provide a no-argument constructor producing an empty
    graph, plus `insert` and `connect`.
    """

    @abstractmethod
    def insert(self, vertices: Iterable[Hashable]) -> bool:
        """
        Add vertices to the graph.

        Returns:
            True if at least one vertex was new.
        """
        pass

    @abstractmethod
    def connect(self, source: Hashable, targets: Iterable[Hashable]) -> bool:
        """
        Add edges source -> t for every t in targets.

        Endpoints that are not yet vertices are inserted.

        Returns:
            True if at least one edge was new.
        """
        pass

    @classmethod
    def from_graph(cls: Type[G], other: DirectedGraphView) -> G:
        """Copy the vertices and edges of any graph view into a new graph."""
        graph = cls()
        graph.insert(other)
        for vertex in other:
            graph.connect(vertex, other.successors(vertex))
        return graph

    def connect_edge(self, source: Hashable, target: Hashable) -> bool:
        """Add the single edge source -> target."""
        return self.connect(source, [target])

    def connect_both(self, a: Hashable, b: Hashable) -> bool:
        """Add a -> b and b -> a."""
        forward = self.connect_edge(a, b)
        backward = self.connect_edge(b, a)
        return forward or backward

    def symmetric_closure(self) -> bool:
        """
        Add the reverse of every edge, in place.

        Returns:
            True if any edge was added.
        """
        changed = False
        # Snapshot first: connecting while iterating a successor set mutates it.
        edges = [(u, v) for u in self for v in self.successors(u)]
        for u, v in edges:
            if self.connect_edge(v, u):
                changed = True
        return changed

    def reversed_edges(self: G) -> G:
        """Return a new graph with the same vertices and every edge flipped."""
        reversed_graph = type(self)()
        reversed_graph.insert(self)
        for source in self:
            for target in self.successors(source):
                reversed_graph.connect_edge(target, source)
        return reversed_graph

    def transitive_hull(self) -> bool:
        """
        Extend the graph in place to its transitive closure.

        Repeats one round of path-doubling (u -> v -> w adds u -> w) until a
        round adds nothing.

        Returns:
            True if any edge was added.
        """
        changed = False
        while True:
            added = False
            for u in list(self):
                for v in list(self.successors(u)):
                    if self.connect(u, list(self.successors(v))):
                        added = True
            if not added:
                return changed
            changed = True

    def weakly_connected_components(self) -> List[Set[Hashable]]:
        """
        Partition the vertices by connectivity ignoring edge direction.

        Components are listed in the order their first vertex is enumerated.
        """
        from .traversal import closure

        graph = type(self).from_graph(self)
        graph.symmetric_closure()
        visited: Set[Hashable] = set()
        components: List[Set[Hashable]] = []
        for vertex in graph:
            if vertex in visited:
                continue
            component = closure(graph, [vertex])
            visited.update(component)
            components.append(component)
        return components


__all__ = ["DirectedGraphView", "GrowableDirectedGraph"]
