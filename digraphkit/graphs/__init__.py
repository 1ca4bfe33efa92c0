"""
Directed graph algorithms for digraphkit.

This package provides:
- Graph abstractions (DirectedGraphView, GrowableDirectedGraph)
- Graph storage (AdjacencyGraph keyed by vertex, Graph addressed by index)
- Traversal (BFS, DFS, closure, reachability, unique-path tracing)
- Connectivity (weakly/strongly connected components, cycles, topological sort)
- Shortest paths (BFS trees, Dijkstra trees, path queries, approximate
  diameter and loops)

Algorithms follow the vertex order of the graph they are given and never
sort opaque vertices.
"""

from .adjacency import AdjacencyGraph
from .connectivity import (
    cyclic_vertices,
    has_self_cycle,
    is_acyclic,
    strongly_connected_components,
    topological_sort,
    weakly_connected_components,
)
from .core import Graph, Relabeled
from .shortest import (
    LoopConfig,
    LoopResult,
    SearchTree,
    TreeEntry,
    approximate_diameter,
    breadth_first_search_tree,
    find_approximate_loop,
    find_farthest,
    find_farthest_path_reversed,
    find_shortest_path,
    shortest_path_tree,
)
from .traversal import (
    BFSNode,
    DFSNode,
    bfs_forest,
    breadth_first_search,
    closure,
    depth_first_search,
    depth_first_search_recursive,
    dfs_forest,
    distances,
    reachable,
    trace_path_while_unique,
)
from .utils import collect, index_graph, path_cost
from .view import DirectedGraphView, GrowableDirectedGraph

__all__ = [
    "DirectedGraphView",
    "GrowableDirectedGraph",
    "AdjacencyGraph",
    "Graph",
    "Relabeled",
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
    "weakly_connected_components",
    "strongly_connected_components",
    "has_self_cycle",
    "cyclic_vertices",
    "is_acyclic",
    "topological_sort",
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
    "collect",
    "index_graph",
    "path_cost",
]

# Example usage:
# from digraphkit.graphs import AdjacencyGraph, index_graph, find_shortest_path
#
# G = AdjacencyGraph([('A', 'B'), ('B', 'C'), ('A', 'C')])
# graph, index = index_graph(G)
# cost = {('A', 'B'): 1.0, ('B', 'C'): 1.0, ('A', 'C'): 5.0}
# path = find_shortest_path(graph, index['A'], index['C'],
#                           lambda u, v: cost[graph[u], graph[v]])
# [graph[i] for i in path]  # ['A', 'B', 'C']
