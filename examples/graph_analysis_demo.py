"""
Example: Directed Graph Analysis with digraphkit

This example builds a small package dependency graph and a weighted road
grid, then walks through the main entry points: build ordering, cycle
reporting with strongly connected components, weighted shortest paths,
approximate diameter, and the approximate loop finder.
"""

import numpy as np

from digraphkit import (
    AdjacencyGraph,
    Graph,
    approximate_diameter,
    cyclic_vertices,
    find_approximate_loop,
    find_shortest_path,
    index_graph,
    path_cost,
    strongly_connected_components,
    topological_sort,
)


def example_build_order():
    """Example: Ordering and breaking a dependency graph."""
    print("=" * 60)
    print("Example 1: Build Order and Cycles")
    print("=" * 60)

    deps = AdjacencyGraph(
        [
            ("logging", "heap"),
            ("logging", "graphs"),
            ("heap", "shortest"),
            ("graphs", "shortest"),
            ("shortest", "app"),
        ]
    )
    print(f"Build order: {topological_sort(deps)}")

    deps.connect_edge("app", "graphs")
    print(f"After adding app -> graphs: {topological_sort(deps)}")
    print(f"Cyclic packages: {sorted(cyclic_vertices(deps))}")
    components = [sorted(c) for c in strongly_connected_components(deps)]
    print(f"Strongly connected components: {sorted(components)}")
    print()


def example_shortest_paths():
    """Example: Weighted routes on a grid with random costs."""
    print("=" * 60)
    print("Example 2: Shortest Paths on a Grid")
    print("=" * 60)

    rng = np.random.default_rng(7)
    size = 6
    grid = AdjacencyGraph()
    for r in range(size):
        for c in range(size):
            if r + 1 < size:
                grid.connect_both((r, c), (r + 1, c))
            if c + 1 < size:
                grid.connect_both((r, c), (r, c + 1))

    graph, index = index_graph(grid)
    costs = rng.uniform(1.0, 5.0, size=(graph.node_count, graph.node_count))

    def distance(u, v):
        return float(costs[u, v])

    source, target = index[(0, 0)], index[(size - 1, size - 1)]
    path = find_shortest_path(graph, source, target, distance)
    print(f"Cheapest route: {[graph[i] for i in path]}")
    print(f"Route cost: {path_cost(path, distance):.2f}")

    hops = find_shortest_path(graph, source, target)
    print(f"Fewest hops: {len(hops) - 1}")

    ends = approximate_diameter(graph, source)
    print(f"Approximate diameter ends: {graph[ends[0]]} .. {graph[ends[-1]]}")
    print()


def example_ring_loop():
    """Example: Recovering a loop from a ring."""
    print("=" * 60)
    print("Example 3: Approximate Loop")
    print("=" * 60)

    ring = Graph()
    n = 40
    for i in range(n):
        ring.add(f"station-{i}")
    for i in range(n):
        ring.connect_both(i, (i + 1) % n)

    result = find_approximate_loop(ring, lambda u, v: 1.0)
    if result.found:
        print(f"Loop through {len(result.success)} of {n} stations")
    else:
        print(f"No loop; half loop has {len(result.failure)} stations")
    print()


if __name__ == "__main__":
    example_build_order()
    example_shortest_paths()
    example_ring_loop()
    print("All examples completed.")
