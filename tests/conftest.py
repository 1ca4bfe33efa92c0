"""Pytest configuration and shared fixtures for digraphkit tests.

This module provides:
- A deterministic numpy RNG fixture
- A random digraph factory for property-style tests
"""

import os
from typing import Callable

import numpy as np
import pytest

from digraphkit.diagnostics import set_debug_enabled
from digraphkit.graphs import AdjacencyGraph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_mode_enabled():
    """Run every test with invariant checking switched on."""
    set_debug_enabled(True)
    yield
    set_debug_enabled(False)


@pytest.fixture(scope="function")
def random_digraph(rng: np.random.Generator) -> Callable[..., AdjacencyGraph]:
    """Factory for random AdjacencyGraphs over vertices 0..n-1.

    Each ordered pair (u, v) becomes an edge with probability p. With
    acyclic=True only pairs u < v are considered.
    """

    def make(n: int, p: float, self_loops: bool = False, acyclic: bool = False) -> AdjacencyGraph:
        graph = AdjacencyGraph()
        graph.insert(range(n))
        for u in range(n):
            for v in range(n):
                if u == v and not self_loops:
                    continue
                if acyclic and u >= v:
                    continue
                if rng.random() < p:
                    graph.connect_edge(u, v)
        return graph

    return make
