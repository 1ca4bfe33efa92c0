"""digraphkit - directed graph algorithms on a handle-indexed heap."""

__version__ = "0.1.0"

from .diagnostics import (
    check_heap_invariants,
    check_search_tree,
    debug_context,
    is_debug_enabled,
    is_topological_order,
    set_debug_enabled,
)
from .graphs import (
    AdjacencyGraph,
    BFSNode,
    DFSNode,
    DirectedGraphView,
    Graph,
    GrowableDirectedGraph,
    LoopConfig,
    LoopResult,
    Relabeled,
    SearchTree,
    TreeEntry,
    approximate_diameter,
    bfs_forest,
    breadth_first_search,
    breadth_first_search_tree,
    closure,
    collect,
    cyclic_vertices,
    depth_first_search,
    depth_first_search_recursive,
    dfs_forest,
    distances,
    find_approximate_loop,
    find_farthest,
    find_farthest_path_reversed,
    find_shortest_path,
    has_self_cycle,
    index_graph,
    is_acyclic,
    path_cost,
    reachable,
    shortest_path_tree,
    strongly_connected_components,
    topological_sort,
    trace_path_while_unique,
    weakly_connected_components,
)
from .logging import configure_logging, get_logger, set_log_level
from .structures import IndexedHeap

__all__ = [
    "__version__",
    # Structures
    "IndexedHeap",
    # Graph storage
    "DirectedGraphView",
    "GrowableDirectedGraph",
    "AdjacencyGraph",
    "Graph",
    "Relabeled",
    # Traversal
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
    # Connectivity
    "weakly_connected_components",
    "strongly_connected_components",
    "has_self_cycle",
    "cyclic_vertices",
    "is_acyclic",
    "topological_sort",
    # Shortest paths
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
    # Utilities
    "collect",
    "index_graph",
    "path_cost",
    # Diagnostics
    "check_heap_invariants",
    "check_search_tree",
    "is_topological_order",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
