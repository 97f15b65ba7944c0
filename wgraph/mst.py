"""
Minimum spanning tree algorithms: Prim and Kruskal.

Prim grows a single tree from a start vertex using the priority frontier.
Kruskal uses a union-find structure and covers every component.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal), 23.2 (Prim).
"""

from typing import Dict, Hashable, Iterable, List, Optional, Tuple

from .core import WeightedGraph
from .frontier import PriorityFrontier
from .logging import get_logger
from .utils import edges_from_weighted_graph, require_vertex

logger = get_logger(__name__)

Edge = Tuple[Hashable, Hashable, float]


class UnionFind:
    """
    Union-Find (Disjoint Set) data structure with path compression and union by rank.

    Used by Kruskal's algorithm for efficient cycle detection.
    """

    def __init__(self, nodes: Iterable[Hashable]):
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}

        for node in nodes:
            self.parent[node] = node
            self.rank[node] = 0

    def find(self, x: Hashable) -> Hashable:
        """
        Find root of x with path compression.

        Args:
            x: Node to find root for.

        Returns:
            Root node.
        """
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """
        Union sets containing x and y using union by rank.

        Returns:
            True if union was performed (x and y were in different sets),
            False if they were already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        return True


def total_weight(edges: Iterable[Edge]) -> float:
    """Sum the weights of an edge list."""
    return sum(weight for _, _, weight in edges)


def prim_mst(graph: WeightedGraph, start: Optional[Hashable] = None) -> List[Edge]:
    """
    Prim's algorithm for minimum spanning tree.

    Grows a tree from ``start``. An edge is emitted only when its endpoint is
    first taken from the frontier as the minimum, so the result holds exactly
    one edge per vertex reached besides the start: ``|component| - 1`` edges,
    no cycles, minimal total weight. On a disconnected graph only the start
    vertex's component is spanned.

    Args:
        graph: WeightedGraph (undirected).
        start: Starting vertex (defaults to the first vertex in insertion order).

    Returns:
        List of (u, v, weight) edges in the order they joined the tree, with
        u already in the tree and v the newly added vertex. An absent start
        vertex yields an empty list.

    Raises:
        MissingVertexError: In strict mode, if an explicit start is not in graph.

    Complexity: O(E log V) using binary heap.

    Example:
        >>> G = WeightedGraph()
        >>> G.add_edge('A', 'B', 1.0)
        >>> G.add_edge('B', 'C', 2.0)
        >>> G.add_edge('A', 'C', 3.0)
        >>> prim_mst(G)
        [('A', 'B', 1.0), ('B', 'C', 2.0)]
    """
    if start is None:
        if not graph.vertices:
            return []
        start = next(iter(graph.vertices))
    elif not require_vertex(graph, start, "prim_mst"):
        return []

    mst_edges: List[Edge] = []
    in_tree: set = set()
    # Frontier entries carry the tree edge that would attach the vertex
    frontier = PriorityFrontier()
    frontier.push((None, start), 0.0)

    while not frontier.is_empty():
        (via, u), weight = frontier.pop_min()

        if u in in_tree:
            continue
        in_tree.add(u)
        if via is not None:
            mst_edges.append((via, u, weight))

        for v, edge_weight in graph.vertices[u].edges.items():
            if v not in in_tree:
                frontier.push((u, v), edge_weight)

    logger.debug("prim_mst from %r spanned %d vertices", start, len(in_tree))
    return mst_edges


def kruskal_mst(graph: WeightedGraph) -> List[Edge]:
    """
    Kruskal's algorithm for minimum spanning forest.

    Args:
        graph: WeightedGraph (undirected).

    Returns:
        List of (u, v, weight) edges sorted by weight (ties in registry
        order). For disconnected graphs, one tree per component.

    Complexity: O(E log E) = O(E log V) for sorting and union-find operations.

    Example:
        >>> G = WeightedGraph()
        >>> G.add_edge('A', 'B', 1.0)
        >>> G.add_edge('B', 'C', 2.0)
        >>> G.add_edge('A', 'C', 3.0)
        >>> len(kruskal_mst(G))
        2
    """
    uf = UnionFind(graph.nodes())
    mst_edges: List[Edge] = []

    for u, v, weight in edges_from_weighted_graph(graph):
        if uf.union(u, v):
            mst_edges.append((u, v, weight))

    return mst_edges
