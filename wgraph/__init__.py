"""
wgraph - a weighted-graph engine.

This package provides a mutable weighted graph and the classical algorithms
that run over it:
- Graph data structure (WeightedGraph, AdjacencyRecord)
- Priority frontier (binary heap with lazy deletion)
- Shortest path algorithms (Dijkstra, Bellman-Ford)
- All-pairs shortest paths (Floyd-Warshall)
- Minimum spanning trees (Prim, Kruskal)
- Path reconstruction

Vertices are enumerated in insertion order, so every algorithm is
deterministic for a given sequence of mutations.
"""

__version__ = "0.1.0"

from .allpairs import AllPairsResult, floyd_warshall, floyd_warshall_matrix
from .config import is_strict_enabled, set_strict_enabled, strict_context
from .core import AdjacencyRecord, WeightedGraph
from .exceptions import EmptyFrontierError, GraphError, MissingVertexError, NegativeCycleError
from .frontier import PriorityFrontier
from .logging import configure_logging, get_logger, set_log_level
from .mst import UnionFind, kruskal_mst, prim_mst, total_weight
from .paths import predecessors_from_distances, reconstruct_path, shortest_path
from .shortest import bellman_ford, dijkstra
from .utils import edges_from_weighted_graph, node_index_map

__all__ = [
    "__version__",
    "AdjacencyRecord",
    "WeightedGraph",
    "PriorityFrontier",
    "dijkstra",
    "bellman_ford",
    "floyd_warshall",
    "floyd_warshall_matrix",
    "AllPairsResult",
    "prim_mst",
    "kruskal_mst",
    "UnionFind",
    "total_weight",
    "reconstruct_path",
    "shortest_path",
    "predecessors_from_distances",
    "node_index_map",
    "edges_from_weighted_graph",
    "GraphError",
    "NegativeCycleError",
    "MissingVertexError",
    "EmptyFrontierError",
    "is_strict_enabled",
    "set_strict_enabled",
    "strict_context",
    "get_logger",
    "set_log_level",
    "configure_logging",
]

# Example usage:
# from wgraph import WeightedGraph, dijkstra, reconstruct_path
#
# G = WeightedGraph()
# G.add_edge('A', 'B', 1.0)
# G.add_edge('B', 'C', 2.0)
# dist, parent = dijkstra(G, 'A')
# path = reconstruct_path(parent, 'C')  # ['A', 'B', 'C']
