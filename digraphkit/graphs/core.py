"""
Owned, index-addressed directed graph.

Graph is an append-only arena: every node gets the next integer index when it
is added and keeps it for the lifetime of the graph. Nodes are never deleted
in place; `filter` builds a new graph and returns a relabel list mapping old
indices to new ones (or None for dropped nodes).

Indices are dereferenced directly. Passing an index that was never returned
by `add` is a caller error and surfaces as IndexError at best.
"""

from typing import (
    Any,
    Callable,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    NamedTuple,
    Optional,
    Sequence,
    Set,
    Tuple,
    TypeVar,
)

import numpy as np

from .traversal import closure, reachable, trace_path_while_unique
from .view import DirectedGraphView

T = TypeVar("T")


class Relabeled(NamedTuple):
    """A filtered graph and the old index -> new index map."""

    graph: "Graph"
    relabel: List[Optional[int]]


class Graph(DirectedGraphView, Generic[T]):
    """
    Directed graph over integer node indices, each holding an element.

    The graph is a DirectedGraphView whose vertices are the indices
    0..node_count-1, so every traversal and connectivity algorithm applies
    to it directly.

    Complexity:
        - add, connect: O(1) amortized
        - successors, element lookup: O(1)
        - index_of: O(V)
        - filter, reverse_edges, symmetric_closure: O(V + E)

    Example:
        >>> G = Graph()
        >>> a = G.add('a')
        >>> b = G.add('b')
        >>> G.connect(a, b)
        >>> G.successors(a)
        {1}
        >>> G[b]
        'b'
    """

    def __init__(self) -> None:
        self._elements: List[T] = []
        self._successors: List[Set[int]] = []

    @classmethod
    def _from_parts(cls, elements: List[T], successors: List[Set[int]]) -> "Graph[T]":
        graph = cls()
        graph._elements = elements
        graph._successors = successors
        return graph

    def __iter__(self) -> Iterator[int]:
        return iter(range(len(self._elements)))

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and 0 <= index < len(self._elements)

    def __getitem__(self, index: int) -> T:
        return self._elements[index]

    def __repr__(self) -> str:
        edges = sum(len(s) for s in self._successors)
        return f"Graph(nodes={len(self._elements)}, edges={edges})"

    @property
    def node_count(self) -> int:
        return len(self._elements)

    def node_indices(self) -> List[int]:
        return list(range(len(self._elements)))

    def add(self, element: T) -> int:
        """
        Append a node holding `element`.

        Returns:
            Index of the new node.
        """
        self._elements.append(element)
        self._successors.append(set())
        return len(self._elements) - 1

    def connect(self, source: int, target: int) -> None:
        """Add the edge source -> target."""
        self._successors[source].add(target)

    def connect_both(self, a: int, b: int) -> None:
        """Add a -> b and b -> a."""
        self.connect(a, b)
        self.connect(b, a)

    def successors(self, index: int) -> Set[int]:
        return self._successors[index]

    def average_and_max_neighbours(self) -> Tuple[float, int]:
        """
        Return the mean and the maximum out-degree.

        Returns:
            (average, maximum), or (0.0, 0) if the graph has no edges.
        """
        degrees = [len(s) for s in self._successors]
        total = sum(degrees)
        if total == 0:
            return 0.0, 0
        return total / len(degrees), max(degrees)

    def adjacency_matrix(self) -> np.ndarray:
        """
        Return the dense adjacency matrix.

        Returns:
            (n, n) boolean array with entry [u, v] True iff u -> v.
        """
        n = len(self._elements)
        matrix = np.zeros((n, n), dtype=bool)
        for source, targets in enumerate(self._successors):
            if targets:
                matrix[source, sorted(targets)] = True
        return matrix

    def filter(
        self,
        keep: Optional[Sequence[int]] = None,
        remove: Optional[Iterable[int]] = None,
    ) -> Relabeled:
        """
        Build a new graph containing a subset of the nodes.

        Exactly one of `keep` or `remove` must be given. Kept nodes are
        numbered in the order of `keep` (ascending original index when
        `remove` is used). Edges into dropped nodes disappear.

        Args:
            keep: Indices of nodes to keep.
            remove: Indices of nodes to drop.

        Returns:
            Relabeled(graph, relabel) where relabel[old] is the new index or
            None.

        Raises:
            ValueError: If both or neither of keep/remove are given.
        """
        if (keep is None) == (remove is None):
            raise ValueError("filter expects exactly one of keep or remove")
        if keep is None:
            dropped = set(remove)
            keep = [i for i in range(len(self._elements)) if i not in dropped]

        relabel: List[Optional[int]] = [None] * len(self._elements)
        elements: List[T] = []
        for old in keep:
            if relabel[old] is not None:
                continue
            relabel[old] = len(elements)
            elements.append(self._elements[old])

        successors: List[Set[int]] = [set() for _ in elements]
        for old, new in enumerate(relabel):
            if new is None:
                continue
            successors[new] = {
                relabel[s] for s in self._successors[old] if relabel[s] is not None
            }

        return Relabeled(Graph._from_parts(elements, successors), relabel)

    def find_max(self, value_of: Callable[[T], Any]) -> Optional[Tuple[int, Any]]:
        """
        Return (index, value) of the node whose element maximizes value_of.

        Ties go to the lowest index. Returns None on an empty graph.
        """
        best: Optional[Tuple[int, Any]] = None
        for index, element in enumerate(self._elements):
            value = value_of(element)
            if best is None or value > best[1]:
                best = (index, value)
        return best

    def find_min(self, value_of: Callable[[T], Any]) -> Optional[Tuple[int, Any]]:
        """
        Return (index, value) of the node whose element minimizes value_of.

        Ties go to the lowest index. Returns None on an empty graph.
        """
        best: Optional[Tuple[int, Any]] = None
        for index, element in enumerate(self._elements):
            value = value_of(element)
            if best is None or value < best[1]:
                best = (index, value)
        return best

    def trace_path_while_unique(self, start: int) -> List[int]:
        return trace_path_while_unique(self, start)

    def closure(self, kernel: Iterable[int]) -> Set[int]:
        return closure(self, kernel)

    def reachable(self, kernel: Iterable[int]) -> Set[int]:
        return reachable(self, kernel)

    def reverse_edges(self) -> "Graph[T]":
        """Return a new graph with the same elements and every edge flipped."""
        successors: List[Set[int]] = [set() for _ in self._elements]
        for source, targets in enumerate(self._successors):
            for target in targets:
                successors[target].add(source)
        return Graph._from_parts(list(self._elements), successors)

    def symmetric_closure(self) -> "Graph[T]":
        """Return a new graph with the reverse of every edge added."""
        successors = [set(s) for s in self._successors]
        for source, targets in enumerate(self._successors):
            for target in targets:
                successors[target].add(source)
        return Graph._from_parts(list(self._elements), successors)

    def weakly_connected_components(self) -> List[Set[int]]:
        """
        Partition node indices by connectivity ignoring edge direction.

        Components are listed by ascending smallest index.
        """
        graph = self.symmetric_closure()
        visited = [False] * len(self._elements)
        components: List[Set[int]] = []
        for index in range(len(self._elements)):
            if visited[index]:
                continue
            component = closure(graph, [index])
            for member in component:
                visited[member] = True
            components.append(component)
        return components

    # Element-keyed helpers; require hashable, equality-comparable elements.

    def index_of(self, element: Hashable) -> Optional[int]:
        """Return the index of the first node holding `element`, or None."""
        for index, candidate in enumerate(self._elements):
            if candidate == element:
                return index
        return None

    def ensure_vertex(self, element: T) -> int:
        """Return the index holding `element`, adding a node if needed."""
        index = self.index_of(element)
        return self.add(element) if index is None else index

    def connect_elements(self, source: T, target: T) -> None:
        """Add the edge between the nodes holding source and target."""
        self.connect(self.ensure_vertex(source), self.ensure_vertex(target))

    def elements(self, indices: Iterable[int]) -> Set[T]:
        """Return the set of elements held by the given nodes."""
        return {self._elements[i] for i in indices}


__all__ = ["Graph", "Relabeled"]
