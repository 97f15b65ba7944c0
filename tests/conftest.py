"""Pytest configuration and shared fixtures for wgraph tests.

This module provides:
- A deterministic numpy RNG fixture for randomized graph checks
- Graph builders shared across test modules
- Reset of global strict-mode state around every test
"""

import os
from typing import Callable

import numpy as np
import pytest

from wgraph import WeightedGraph
from wgraph.config import set_strict_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This keeps randomized tests reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def reset_strict_mode():
    """Run every test with strict mode off, whatever the previous test did."""
    set_strict_enabled(False)
    yield
    set_strict_enabled(False)


@pytest.fixture
def diamond_graph() -> WeightedGraph:
    """Undirected graph A-B=1, B-C=2, A-C=4, C-D=1."""
    G = WeightedGraph()
    G.add_edge("A", "B", 1)
    G.add_edge("B", "C", 2)
    G.add_edge("A", "C", 4)
    G.add_edge("C", "D", 1)
    return G


@pytest.fixture
def random_graph(rng: np.random.Generator) -> Callable[..., WeightedGraph]:
    """Factory for random graphs with integer weights.

    The factory takes the vertex count, the edge probability, the weight
    range and whether to add a spanning chain 0-1-...-(n-1) so the graph is
    connected.
    """

    def build(
        n: int,
        p: float = 0.4,
        low: int = 1,
        high: int = 10,
        connected: bool = True,
        directed: bool = False,
    ) -> WeightedGraph:
        G = WeightedGraph(directed=directed)
        for v in range(n):
            G.add_vertex(v)
        if connected:
            for v in range(n - 1):
                G.add_edge(v, v + 1, int(rng.integers(low, high)))
        for u in range(n):
            for v in range(n):
                if u == v or (not directed and v < u):
                    continue
                if rng.random() < p:
                    G.add_edge(u, v, int(rng.integers(low, high)))
        return G

    return build
