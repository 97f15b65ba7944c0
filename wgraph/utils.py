"""
Utility functions for graph algorithms.

Provides helpers for vertex indexing, edge iteration, and the shared
missing-vertex policy.
"""

from typing import Dict, Hashable, Iterable, Iterator, List, Tuple

from .config import is_strict_enabled
from .core import WeightedGraph
from .exceptions import MissingVertexError
from .logging import get_logger

logger = get_logger(__name__)


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create deterministic mapping from vertices to indices 0..n-1.

    Vertices keep their first-occurrence order; duplicates are dropped.

    Args:
        nodes: Iterable of hashable vertices.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'c', 'b'])
        >>> node_to_idx
        {'c': 0, 'a': 1, 'b': 2}
        >>> idx_to_node
        ['c', 'a', 'b']
    """
    index_to_node = list(dict.fromkeys(nodes))
    node_to_index = {node: idx for idx, node in enumerate(index_to_node)}
    return node_to_index, index_to_node


def edges_from_weighted_graph(graph: WeightedGraph) -> Iterator[Tuple[Hashable, Hashable, float]]:
    """
    Yield (u, v, weight) edges sorted by weight.

    Ties keep the graph's registry order, so the sequence is reproducible.

    Args:
        graph: WeightedGraph instance.
    """
    yield from sorted(graph.edges(), key=lambda edge: edge[2])


def require_vertex(graph: WeightedGraph, vertex: Hashable, algorithm: str) -> bool:
    """
    Apply the missing-vertex policy for an algorithm's starting vertex.

    Returns True when the vertex exists. Otherwise raises MissingVertexError
    in strict mode, or logs a warning and returns False.
    """
    if vertex in graph:
        return True
    if is_strict_enabled():
        raise MissingVertexError(vertex)
    logger.warning("%s: vertex %r not in graph; treating it as isolated", algorithm, vertex)
    return False
