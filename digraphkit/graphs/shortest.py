"""
Shortest-path trees over index-addressed graphs.

breadth_first_search_tree is the unweighted case (cost = depth);
shortest_path_tree is Dijkstra's algorithm with an IndexedHeap frontier,
using decrease-key instead of lazy deletion. Both return a SearchTree: a
fresh Graph of (cost, node) entries whose edges point from child to parent,
plus a relabel list from original node index to tree index.

The path queries, farthest-node search, approximate diameter and
approximate loop finder are built on these trees.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS trees) and 24.3 (Dijkstra).
"""

import math
from dataclasses import dataclass
from typing import Callable, Iterable, List, NamedTuple, Optional, Tuple

from ..diagnostics import check_search_tree, is_debug_enabled
from ..logging import get_logger
from ..structures.heap import IndexedHeap
from .core import Graph

logger = get_logger(__name__)

DistanceFn = Callable[[int, int], float]


class TreeEntry(NamedTuple):
    """Element of a search tree: cost from the nearest start, original index."""

    cost: float
    node: int


class SearchTree(NamedTuple):
    """
    BFS or shortest-path tree.

    Attributes:
        graph: Tree with TreeEntry elements and child -> parent edges.
        relabel: relabel[original index] = tree index, or None if unreached.
    """

    graph: Graph
    relabel: List[Optional[int]]

    def cost(self, node: int) -> Optional[float]:
        """Return the cost of an original node, or None if unreached."""
        index = self.relabel[node]
        return None if index is None else self.graph[index].cost

    def path_to_root(self, node: int) -> Optional[List[int]]:
        """
        Return original indices from `node` up to its start node.

        Returns None if `node` was not reached.
        """
        index = self.relabel[node]
        if index is None:
            return None
        return [self.graph[i].node for i in self.graph.trace_path_while_unique(index)]


@dataclass
class LoopConfig:
    """
    Tuning for find_approximate_loop.

    Attributes:
        allowance_divisor: The longest tree path is shortened by
            len(path) // allowance_divisor nodes at each end; the same
            amount is the avoidance radius around its midsection.
    """

    allowance_divisor: int = 20

    def __post_init__(self) -> None:
        if self.allowance_divisor < 1:
            raise ValueError(
                f"allowance_divisor must be >= 1, got {self.allowance_divisor}."
            )


@dataclass(frozen=True)
class LoopResult:
    """
    Outcome of find_approximate_loop.

    Exactly one field is set unless the graph was too small, in which case
    both are None.

    Attributes:
        success: The closed loop, if one was found.
        failure: The half loop that could not be closed.
    """

    success: Optional[List[int]] = None
    failure: Optional[List[int]] = None

    @property
    def found(self) -> bool:
        return self.success is not None


def _build_tree(state: List[Optional[Tuple[float, int]]]) -> SearchTree:
    relabel: List[Optional[int]] = [None] * len(state)
    tree: Graph = Graph()
    for index, entry in enumerate(state):
        if entry is not None:
            relabel[index] = tree.add(TreeEntry(entry[0], index))
    for index, entry in enumerate(state):
        if entry is None:
            continue
        child = relabel[index]
        parent = relabel[entry[1]]
        if child != parent:
            tree.connect(child, parent)

    result = SearchTree(tree, relabel)
    if is_debug_enabled():
        check_search_tree(result)
    return result


def breadth_first_search_tree(graph: Graph, start: Iterable[int]) -> SearchTree:
    """
    Build the BFS tree of every node reachable from `start`.

    Each level is expanded in ascending node index, and successors in
    ascending index, so the parent of every node is deterministic.

    Args:
        graph: Graph to search.
        start: Start node indices (depth 0).

    Returns:
        SearchTree whose entry costs are depths.

    Complexity: O(V log V + E log E) due to per-level sorting.

    Example:
        >>> G = Graph()
        >>> a, b, c = G.add('a'), G.add('b'), G.add('c')
        >>> G.connect(a, b); G.connect(b, c)
        >>> tree = breadth_first_search_tree(G, [a])
        >>> tree.cost(c)
        2
    """
    state: List[Optional[Tuple[int, int]]] = [None] * graph.node_count
    current = sorted(set(start))
    for s in current:
        state[s] = (0, s)

    depth = 1
    while current:
        following: List[int] = []
        for node in current:
            for successor in sorted(graph.successors(node)):
                if state[successor] is None:
                    state[successor] = (depth, node)
                    following.append(successor)
        depth += 1
        current = sorted(following)

    tree = _build_tree(state)
    logger.debug("BFS tree reached %d of %d nodes", tree.graph.node_count, graph.node_count)
    return tree


def shortest_path_tree(graph: Graph, start: Iterable[int], distance: DistanceFn) -> SearchTree:
    """
    Dijkstra's algorithm from a set of start nodes.

    An edge whose cost is infinite (or NaN) is treated as absent. A tentative
    cost is only replaced by a strictly smaller one.

    Args:
        graph: Graph to search.
        start: Start node indices, all at cost 0.
        distance: distance(u, v) -> cost of the edge u -> v.

    Returns:
        SearchTree whose entry costs are shortest distances.

    Raises:
        ValueError: If a relaxed edge has negative cost.

    Complexity: O((V + E) log V) with the indexed binary heap.

    Example:
        >>> G = Graph()
        >>> a, b, c = G.add('A'), G.add('B'), G.add('C')
        >>> G.connect(a, b); G.connect(b, c); G.connect(a, c)
        >>> cost = {(a, b): 1.0, (b, c): 1.0, (a, c): 5.0}
        >>> shortest_path_tree(G, [a], lambda u, v: cost[u, v]).cost(c)
        2.0
    """
    state: List[Optional[Tuple[float, int]]] = [None] * graph.node_count
    starts = list(dict.fromkeys(start))
    for s in starts:
        state[s] = (0.0, s)

    frontier: IndexedHeap = IndexedHeap(
        lambda x, y: x.cost < y.cost,
        lambda x: x.node,
        [TreeEntry(0.0, s) for s in starts],
    )

    while frontier:
        current = frontier.remove()
        for successor in graph.successors(current.node):
            delta = distance(current.node, successor)
            if not delta < math.inf:
                continue
            if delta < 0:
                raise ValueError(
                    f"Shortest path trees require non-negative costs. "
                    f"Found cost {delta} on edge ({current.node}, {successor})"
                )
            cost = current.cost + delta
            known = state[successor]
            if known is None or cost < known[0]:
                state[successor] = (cost, current.node)
                frontier.replace(TreeEntry(cost, successor))

    tree = _build_tree(state)
    logger.debug(
        "shortest path tree reached %d of %d nodes", tree.graph.node_count, graph.node_count
    )
    return tree


def find_shortest_path(
    graph: Graph,
    source: int,
    target: int,
    distance: Optional[DistanceFn] = None,
    max_depth: Optional[int] = None,
    max_distance: Optional[float] = None,
) -> Optional[List[int]]:
    """
    Find a shortest path from source to target.

    Without `distance` every edge counts 1 and a BFS tree is used; with it,
    a shortest-path tree.

    Args:
        graph: Graph to search.
        source: Start node index.
        target: Goal node index.
        distance: Optional edge cost function.
        max_depth: Reject paths with more edges (unweighted only).
        max_distance: Reject paths costing more (weighted only).

    Returns:
        Node indices from source to target inclusive, or None if target is
        unreachable or beyond the bound.

    Raises:
        ValueError: If max_depth is combined with distance, or max_distance
            is given without it.

    Example:
        >>> G = Graph()
        >>> a, b, c = G.add('A'), G.add('B'), G.add('C')
        >>> G.connect(a, b); G.connect(b, c)
        >>> find_shortest_path(G, a, c)
        [0, 1, 2]
    """
    if distance is None:
        if max_distance is not None:
            raise ValueError("max_distance requires a distance function")
        tree = breadth_first_search_tree(graph, [source])
        bound = max_depth
    else:
        if max_depth is not None:
            raise ValueError("max_depth applies to unweighted searches; use max_distance")
        tree = shortest_path_tree(graph, [source], distance)
        bound = max_distance

    cost = tree.cost(target)
    if cost is None:
        return None
    if bound is not None and cost > bound:
        return None
    path = tree.path_to_root(target)
    path.reverse()
    return path


def _farthest_tree_node(graph: Graph, source: int) -> Tuple[Graph, int]:
    tree = breadth_first_search_tree(graph, [source]).graph
    index, _ = tree.find_max(lambda entry: entry.cost)
    return tree, index


def find_farthest(graph: Graph, source: int) -> int:
    """
    Return a node at maximal BFS depth from `source`.

    Among equally deep nodes the lowest index wins.
    """
    tree, index = _farthest_tree_node(graph, source)
    return tree[index].node


def find_farthest_path_reversed(graph: Graph, source: int) -> List[int]:
    """
    Return a shortest path from `source` to its farthest node, reversed.

    The farthest node comes first and `source` last.
    """
    tree, index = _farthest_tree_node(graph, source)
    return [tree[i].node for i in tree.trace_path_while_unique(index)]


def approximate_diameter(graph: Graph, node_in_component: int) -> List[int]:
    """
    Approximate a longest shortest path with two BFS passes.

    The first pass finds the node farthest from `node_in_component`; the
    second returns the path to the node farthest from that one. This is a
    heuristic lower bound on the diameter, exact on trees.

    Returns:
        Path from the far end back to the first pass's farthest node.
    """
    return find_farthest_path_reversed(graph, find_farthest(graph, node_in_component))


def find_approximate_loop(
    graph: Graph,
    distance: DistanceFn,
    starting_node: Optional[int] = None,
    config: Optional[LoopConfig] = None,
) -> LoopResult:
    """
    Heuristically find a long loop through `starting_node`'s region.

    The longest path of the shortest-path tree is trimmed at both ends to
    give a half loop. Nodes near the half loop's midsection are marked to
    avoid, and a second shortest-path search tries to connect the half
    loop's ends around them. No optimality is implied.

    Args:
        graph: Graph to search.
        distance: Edge cost function.
        starting_node: Root of the first tree. Defaults to node 0.
        config: Trimming parameters.

    Returns:
        LoopResult with the loop as `success`, or the unclosed half loop as
        `failure`. Both are None for graphs with fewer than two nodes.
    """
    if config is None:
        config = LoopConfig()
    if graph.node_count < 2:
        return LoopResult()
    if starting_node is None:
        starting_node = 0

    tree = shortest_path_tree(graph, [starting_node], distance).graph
    farthest, _ = tree.find_max(lambda entry: entry.cost)
    path = [tree[i].node for i in tree.trace_path_while_unique(farthest)]

    allowance = len(path) // config.allowance_divisor
    half_loop = path[allowance:len(path) - allowance]
    if len(half_loop) < 2:
        logger.debug("no loop: longest path from %d has %d nodes", starting_node, len(path))
        return LoopResult(failure=half_loop[::-1])

    radius = allowance
    middle = half_loop[2 * radius:len(half_loop) - 2 * radius]
    around_middle = breadth_first_search_tree(graph, middle).graph
    avoid = {
        around_middle[i].node
        for i in around_middle.node_indices()
        if around_middle[i].cost <= radius
    }

    def avoiding_distance(x: int, y: int) -> float:
        if x in avoid or y in avoid:
            return math.inf
        return distance(x, y)

    closing = find_shortest_path(graph, half_loop[-1], half_loop[0], avoiding_distance)
    if closing is None:
        logger.debug("no loop: half loop of %d nodes could not be closed", len(half_loop))
        return LoopResult(failure=half_loop[::-1])

    loop = half_loop[1:-1] + closing
    logger.debug("found loop of %d nodes", len(loop))
    return LoopResult(success=loop[::-1])


__all__ = [
    "TreeEntry",
    "SearchTree",
    "LoopConfig",
    "LoopResult",
    "breadth_first_search_tree",
    "shortest_path_tree",
    "find_shortest_path",
    "find_farthest",
    "find_farthest_path_reversed",
    "approximate_diameter",
    "find_approximate_loop",
]
