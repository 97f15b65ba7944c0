"""
Path reconstruction from shortest-path tables.
"""

import math
from collections import deque
from typing import Dict, Hashable, List, Optional

from .core import WeightedGraph
from .shortest import DistanceTable, PredecessorTable, dijkstra


def reconstruct_path(
    parent: Dict[Hashable, Optional[Hashable]],
    target: Hashable,
    source: Optional[Hashable] = None,
) -> Optional[List[Hashable]]:
    """
    Reconstruct path from source to target using parent map.

    The parent map should come from a shortest-path algorithm (Dijkstra,
    Bellman-Ford) where parent[node] is the previous node on the shortest
    path, or None if node is unreachable or is the source.

    Args:
        parent: Dictionary mapping node -> parent node (or None).
        target: Target node to reconstruct path to.
        source: If given, the walk must end at this node.

    Returns:
        List of nodes from source to target (inclusive), or None if target
        is unknown, the walk does not end at source, or the parent map
        loops. Without source, a target whose parent is None comes back as
        [target]; it is either the source itself or unreached, so check the
        distance table first.

    Example:
        >>> parent = {'A': None, 'B': 'A', 'C': 'B'}
        >>> reconstruct_path(parent, 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path(parent, 'D') is None
        True
    """
    if target not in parent:
        return None

    path = []
    visited = set()
    current: Optional[Hashable] = target
    while current is not None:
        # A cycle means the parent map was not produced by one shortest-path run
        if current in visited:
            return None
        visited.add(current)
        path.append(current)
        current = parent.get(current)

    path.reverse()
    if source is not None and path[0] != source:
        return None
    return path


def predecessors_from_distances(
    graph: WeightedGraph, dist: DistanceTable, source: Hashable
) -> PredecessorTable:
    """
    Derive a predecessor table from a distance table alone.

    Walks breadth-first from source over tight edges only, those with
    dist[u] + w(u, v) == dist[v], and records u as the parent of v when v is
    first reached. The parents therefore form a tree rooted at source, even
    when zero-weight edges tie. The source and vertices not reached this
    way get None.
    """
    parent: PredecessorTable = {v: None for v in graph.nodes()}
    if source not in graph or dist.get(source, math.inf) == math.inf:
        return parent

    visited = {source}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        d_u = dist[u]
        for v, weight in graph.vertices[u].edges.items():
            if v in visited or d_u + weight != dist.get(v, math.inf):
                continue
            visited.add(v)
            parent[v] = u
            queue.append(v)
    return parent


def shortest_path(
    graph: WeightedGraph,
    source: Hashable,
    target: Hashable,
    distances: Optional[DistanceTable] = None,
    predecessors: Optional[PredecessorTable] = None,
) -> Optional[List[Hashable]]:
    """
    Return a shortest path from source to target, or None if there is none.

    Without precomputed tables, Dijkstra is run from source. A distance table
    supplied without its predecessor table is turned into one with
    predecessors_from_distances().

    Args:
        graph: WeightedGraph instance.
        source: Start vertex.
        target: End vertex.
        distances: Optional distance table from a run starting at source.
        predecessors: Optional predecessor table from the same run.

    Returns:
        List of vertices from source to target inclusive, or None.

    Example:
        >>> G = WeightedGraph()
        >>> G.add_edge('A', 'B', 1)
        >>> G.add_edge('B', 'C', 2)
        >>> G.add_edge('A', 'C', 4)
        >>> shortest_path(G, 'A', 'C')
        ['A', 'B', 'C']
    """
    if distances is None:
        distances, predecessors = dijkstra(graph, source)
    elif predecessors is None:
        predecessors = predecessors_from_distances(graph, distances, source)

    if distances.get(target, math.inf) == math.inf:
        return None

    return reconstruct_path(predecessors, target, source)
