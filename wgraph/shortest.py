"""
Shortest path algorithms: Dijkstra and Bellman-Ford.

Dijkstra's algorithm for non-negative edge weights.
Bellman-Ford algorithm for graphs with negative weights (detects negative cycles).

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.3 (Dijkstra) and 24.1 (Bellman-Ford).
"""

import math
from typing import Dict, Hashable, Optional, Tuple

from .config import is_strict_enabled
from .core import WeightedGraph
from .exceptions import NegativeCycleError
from .frontier import PriorityFrontier
from .logging import get_logger
from .utils import require_vertex

logger = get_logger(__name__)

DistanceTable = Dict[Hashable, float]
PredecessorTable = Dict[Hashable, Optional[Hashable]]


def _initial_tables(graph: WeightedGraph) -> Tuple[DistanceTable, PredecessorTable]:
    dist: DistanceTable = {node: math.inf for node in graph.nodes()}
    parent: PredecessorTable = {node: None for node in graph.nodes()}
    return dist, parent


def dijkstra(graph: WeightedGraph, source: Hashable) -> Tuple[DistanceTable, PredecessorTable]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Computes shortest paths from source to all reachable vertices. Edge
    weights must be non-negative; with negative weights the result is
    undefined. Strict mode checks this and raises instead.

    A source that is not in the graph is treated as isolated: every distance
    is infinite and every predecessor is None.

    Args:
        graph: WeightedGraph with non-negative edge weights.
        source: Source vertex.

    Returns:
        Tuple of:
        - dist: Dictionary mapping vertex -> shortest distance from source (float or inf)
        - parent: Dictionary mapping vertex -> previous vertex on shortest path
          (None for the source and unreachable vertices)

    Raises:
        MissingVertexError: In strict mode, if source is not in graph.
        ValueError: In strict mode, if graph contains negative edge weights.

    Complexity: O(E log V) using binary heap priority queue.

    Example:
        >>> G = WeightedGraph()
        >>> G.add_edge('A', 'B', 1.0)
        >>> G.add_edge('B', 'C', 2.0)
        >>> dist, parent = dijkstra(G, 'A')
        >>> dist['C']
        3.0
    """
    dist, parent = _initial_tables(graph)
    if not require_vertex(graph, source, "dijkstra"):
        return dist, parent

    if is_strict_enabled():
        for u, v, weight in graph.arcs():
            if weight < 0:
                raise ValueError(
                    f"Dijkstra requires non-negative weights. "
                    f"Found negative weight {weight} on edge ({u!r}, {v!r})"
                )

    dist[source] = 0.0
    frontier = PriorityFrontier()
    frontier.push(source, 0.0)
    visited: set = set()

    while not frontier.is_empty():
        u, d = frontier.pop_min()

        # Stale entry superseded by a later, shorter push
        if u in visited:
            continue
        visited.add(u)

        for v, weight in graph.vertices[u].edges.items():
            if v in visited:
                continue

            candidate = d + weight
            if candidate < dist[v]:
                dist[v] = candidate
                parent[v] = u
                frontier.push(v, candidate)

    logger.debug("dijkstra from %r settled %d of %d vertices", source, len(visited), len(dist))
    return dist, parent


def bellman_ford(graph: WeightedGraph, source: Hashable) -> Tuple[DistanceTable, PredecessorTable]:
    """
    Bellman-Ford algorithm for single-source shortest paths.

    Computes shortest paths from source to all reachable vertices, allowing
    negative edge weights. Every stored arc is relaxed ``|V|-1`` times in
    registry order; a final pass that can still improve a distance means a
    negative cycle is reachable from the source.

    On an undirected graph every negative edge is itself a negative cycle
    (u -> v -> u), so use a directed graph for negative weights.

    Args:
        graph: WeightedGraph (may have negative weights).
        source: Source vertex.

    Returns:
        Tuple of:
        - dist: Dictionary mapping vertex -> shortest distance from source (float or inf)
        - parent: Dictionary mapping vertex -> previous vertex on shortest path

    Raises:
        NegativeCycleError: If a negative cycle is reachable from source.
        MissingVertexError: In strict mode, if source is not in graph.

    Complexity: O(VE) where V is vertices and E is edges.

    Example:
        >>> G = WeightedGraph(directed=True)
        >>> G.add_edge('A', 'B', 1.0)
        >>> G.add_edge('B', 'C', -2.0)
        >>> dist, parent = bellman_ford(G, 'A')
        >>> dist['C']
        -1.0
    """
    dist, parent = _initial_tables(graph)
    if not require_vertex(graph, source, "bellman_ford"):
        return dist, parent

    dist[source] = 0.0
    arcs = list(graph.arcs())
    n = len(graph)

    passes = 0
    for _ in range(n - 1):
        passes += 1
        changed = False
        for u, v, weight in arcs:
            if dist[u] != math.inf and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                parent[v] = u
                changed = True
        if not changed:
            break

    for u, v, weight in arcs:
        if dist[u] != math.inf and dist[u] + weight < dist[v]:
            logger.debug("bellman_ford from %r found a negative cycle through %r -> %r", source, u, v)
            raise NegativeCycleError(u, v, weight)

    logger.debug("bellman_ford from %r converged after %d passes", source, passes)
    return dist, parent
