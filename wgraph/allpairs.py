"""
All-pairs shortest path algorithms: Floyd-Warshall.

Computes shortest paths between all pairs of vertices, either from a
WeightedGraph or from a raw adjacency matrix.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Tuple, Union

import numpy as np

from .core import WeightedGraph
from .logging import get_logger
from .utils import node_index_map

logger = get_logger(__name__)


@dataclass(eq=False)
class AllPairsResult:
    """
    Result of Floyd-Warshall on a WeightedGraph.

    Attributes:
        nodes: Vertex enumeration; row/column i of the matrices is nodes[i].
        matrix: (n, n) array of shortest distances, ``inf`` where no path exists.
        next_hop: (n, n) integer array; next_hop[i, j] is the index of the
            vertex following i on a shortest i -> j path, or -1 if none.
        has_negative_cycle: True if some diagonal entry went negative. This is
            advisory; distances touching the cycle are not meaningful.
    """

    nodes: List[Hashable]
    matrix: np.ndarray
    next_hop: np.ndarray
    has_negative_cycle: bool
    _positions: Dict[Hashable, int] = field(init=False, repr=False)

    def __post_init__(self):
        self._positions = {node: idx for idx, node in enumerate(self.nodes)}

    def index(self, vertex: Hashable) -> int:
        if vertex not in self._positions:
            raise KeyError(f"Vertex {vertex!r} not in result")
        return self._positions[vertex]

    def distance(self, u: Hashable, v: Hashable) -> float:
        """Return the shortest distance from u to v (``inf`` if unreachable)."""
        return float(self.matrix[self.index(u), self.index(v)])

    def path(self, u: Hashable, v: Hashable) -> Optional[List[Hashable]]:
        """
        Reconstruct a shortest path from u to v using the next-hop matrix.

        Returns:
            List of vertices from u to v inclusive, or None if v is
            unreachable from u or the walk runs into a negative cycle.
        """
        i, j = self.index(u), self.index(v)
        if np.isinf(self.matrix[i, j]) or self.next_hop[i, j] < 0:
            return None

        path = [self.nodes[i]]
        current = i
        while current != j:
            current = int(self.next_hop[current, j])
            if current < 0 or len(path) > len(self.nodes):
                return None
            path.append(self.nodes[current])
        return path

    def as_dict(self) -> dict:
        """Return distances as a {(u, v): distance} dictionary."""
        return {
            (u, v): float(self.matrix[i, j])
            for i, u in enumerate(self.nodes)
            for j, v in enumerate(self.nodes)
        }


def _relax_all_pairs(dist: np.ndarray, next_hop: Optional[np.ndarray] = None) -> None:
    """
    Run the Floyd-Warshall triple loop in place.

    k must stay the outermost loop; the (i, j) loops are vectorized for each k.
    """
    n = dist.shape[0]
    for k in range(n):
        candidate = dist[:, k, None] + dist[None, k, :]
        improved = candidate < dist
        if not improved.any():
            continue
        dist[improved] = candidate[improved]
        if next_hop is not None:
            next_hop[:] = np.where(improved, next_hop[:, k, None], next_hop)


def floyd_warshall(graph: WeightedGraph) -> AllPairsResult:
    """
    Floyd-Warshall algorithm for all-pairs shortest paths.

    Vertices are indexed in the graph's insertion order. Negative edge
    weights are allowed; a negative cycle is reported through
    ``has_negative_cycle`` rather than raised.

    Args:
        graph: WeightedGraph instance.

    Returns:
        AllPairsResult with the distance matrix, next-hop matrix and the
        negative-cycle flag.

    Complexity: O(n^3) where n is number of vertices.

    Example:
        >>> G = WeightedGraph()
        >>> G.add_edge('A', 'B', 1.0)
        >>> G.add_edge('B', 'C', 2.0)
        >>> result = floyd_warshall(G)
        >>> result.distance('A', 'C')
        3.0
        >>> result.path('A', 'C')
        ['A', 'B', 'C']
    """
    node_to_idx, idx_to_node = node_index_map(graph.nodes())
    n = len(idx_to_node)

    dist = np.full((n, n), np.inf)
    next_hop = np.full((n, n), -1, dtype=np.int64)

    for i in range(n):
        dist[i, i] = 0.0
        next_hop[i, i] = i

    for u, v, weight in graph.arcs():
        i, j = node_to_idx[u], node_to_idx[v]
        # Self-loops only replace the zero diagonal when negative
        if weight < dist[i, j]:
            dist[i, j] = weight
            next_hop[i, j] = j

    _relax_all_pairs(dist, next_hop)

    has_negative_cycle = bool(n and (np.diag(dist) < 0).any())
    if has_negative_cycle:
        logger.warning("floyd_warshall: graph contains a negative-weight cycle")

    return AllPairsResult(
        nodes=idx_to_node,
        matrix=dist,
        next_hop=next_hop,
        has_negative_cycle=has_negative_cycle,
    )


def floyd_warshall_matrix(
    weights, no_edge: float = -1, detect_negative_cycle: bool = False
) -> Union[np.ndarray, Tuple[np.ndarray, bool]]:
    """
    Floyd-Warshall on a square adjacency matrix.

    Entries equal to ``no_edge`` (default -1) mean "no edge" and unreachable
    pairs are reported back with the same sentinel. Use ``no_edge=np.inf``
    to allow -1 as a real edge weight.

    Args:
        weights: Square array-like of edge weights.
        no_edge: Sentinel marking a missing edge.
        detect_negative_cycle: If True, also return the negative-cycle flag.

    Returns:
        The shortest-distance matrix, or ``(matrix, has_negative_cycle)``
        when ``detect_negative_cycle`` is True.

    Raises:
        ValueError: If weights is not a square 2-D matrix.

    Example:
        >>> floyd_warshall_matrix([[0, 4, -1], [4, 0, 1], [-1, 1, 0]])
        array([[0., 4., 5.],
               [4., 0., 1.],
               [5., 1., 0.]])
    """
    dist = np.array(weights, dtype=float)
    if dist.ndim != 2 or dist.shape[0] != dist.shape[1]:
        raise ValueError(f"weights must be a square matrix, got shape {dist.shape}")

    if not np.isinf(no_edge):
        dist[dist == no_edge] = np.inf

    _relax_all_pairs(dist)

    has_negative_cycle = bool(dist.size and (np.diag(dist) < 0).any())

    result = dist.copy()
    result[np.isinf(dist)] = no_edge

    if detect_negative_cycle:
        return result, has_negative_cycle
    return result
