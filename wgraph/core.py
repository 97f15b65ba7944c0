"""
Core graph data structures.

Provides AdjacencyRecord and WeightedGraph with an adjacency-map
representation. Vertices are kept in insertion order, and that order is the
enumeration every algorithm in the package relies on for reproducible output.
"""

import sys
from collections import deque
from typing import Dict, Hashable, Iterator, List, Optional, Set, TextIO, Tuple


class AdjacencyRecord:
    """
    Per-vertex adjacency map.

    Attributes:
        value: The vertex identifier this record represents.
        edges: Mapping neighbor -> edge weight, in insertion order.
    """

    __slots__ = ("value", "edges")

    def __init__(self, value: Hashable):
        self.value = value
        self.edges: Dict[Hashable, float] = {}

    def add_edge(self, destination: Hashable, weight: float) -> None:
        self.edges[destination] = weight

    def remove_edge(self, destination: Hashable) -> None:
        self.edges.pop(destination, None)

    def __repr__(self) -> str:
        return f"AdjacencyRecord({self.value!r}, edges={self.edges!r})"


class WeightedGraph:
    """
    Weighted graph with adjacency-map representation.

    Undirected by default: every edge is stored as two mirrored entries, one
    in each endpoint's AdjacencyRecord, and every mutation keeps both in
    sync. A directed graph stores only the ``u -> v`` entry.

    Attributes:
        directed: If True, graph is directed; otherwise undirected.
        vertices: Vertex registry mapping vertex -> AdjacencyRecord.

    Complexity:
        - add_vertex: O(1)
        - add_edge: O(1)
        - remove_edge: O(1)
        - remove_vertex: O(V)
        - neighbors: O(deg(v))
        - edges: O(E)

    Example:
        >>> G = WeightedGraph()
        >>> G.add_edge("A", "B", 1.0)
        >>> G.weight("B", "A")
        1.0
    """

    def __init__(self, directed: bool = False):
        """
        Initialize an empty weighted graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
        """
        self.directed = directed
        self.vertices: Dict[Hashable, AdjacencyRecord] = {}

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, vertex: Hashable) -> None:
        """
        Add a vertex to the graph. Adding an existing vertex is a no-op.

        Args:
            vertex: Hashable vertex identifier.
        """
        if vertex not in self.vertices:
            self.vertices[vertex] = AdjacencyRecord(vertex)

    def add_edge(self, u: Hashable, v: Hashable, weight: float = 1.0) -> None:
        """
        Add a weighted edge between u and v, creating missing endpoints.

        Re-adding an existing edge overwrites its weight; for undirected
        graphs both directions are overwritten.

        Args:
            u: Source vertex.
            v: Target vertex.
            weight: Edge weight (default 1.0).
        """
        self.add_vertex(u)
        self.add_vertex(v)

        self.vertices[u].add_edge(v, weight)
        if not self.directed:
            self.vertices[v].add_edge(u, weight)

    def remove_vertex(self, vertex: Hashable) -> None:
        """
        Remove a vertex and every edge referencing it. No-op if absent.

        Args:
            vertex: Vertex to remove.
        """
        if vertex not in self.vertices:
            return

        del self.vertices[vertex]
        for record in self.vertices.values():
            record.remove_edge(vertex)

    def remove_edge(self, u: Hashable, v: Hashable) -> None:
        """
        Remove the edge between u and v.

        Each direction is removed independently and a missing side is not an
        error. For directed graphs only ``u -> v`` is removed.

        Args:
            u: Source vertex.
            v: Target vertex.
        """
        if u in self.vertices:
            self.vertices[u].remove_edge(v)
        if not self.directed and v in self.vertices:
            self.vertices[v].remove_edge(u)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_vertex(self, vertex: Hashable) -> bool:
        return vertex in self.vertices

    def __contains__(self, vertex: Hashable) -> bool:
        return vertex in self.vertices

    def __len__(self) -> int:
        return len(self.vertices)

    def nodes(self) -> List[Hashable]:
        """
        Return list of all vertices in insertion order.

        Returns:
            List of vertices.
        """
        return list(self.vertices)

    def neighbors(self, vertex: Hashable) -> List[Tuple[Hashable, float]]:
        """
        Return neighbors of a vertex with weights, in insertion order.

        Args:
            vertex: Vertex to get neighbors for.

        Returns:
            List of (neighbor, weight) tuples.

        Raises:
            KeyError: If vertex is not in graph.
        """
        if vertex not in self.vertices:
            raise KeyError(f"Vertex {vertex!r} not in graph")
        return list(self.vertices[vertex].edges.items())

    def weight(self, u: Hashable, v: Hashable) -> Optional[float]:
        """Return the weight of edge ``u -> v``, or None if there is no such edge."""
        record = self.vertices.get(u)
        if record is None:
            return None
        return record.edges.get(v)

    def arcs(self) -> Iterator[Tuple[Hashable, Hashable, float]]:
        """
        Yield every stored directed entry (u, v, weight).

        For undirected graphs each edge is yielded twice, once per direction.
        Order follows the vertex registry, then each record's edge order.
        """
        for u, record in self.vertices.items():
            for v, weight in record.edges.items():
                yield u, v, weight

    def edges(self) -> List[Tuple[Hashable, Hashable, float]]:
        """
        Return list of all edges with weights.

        For undirected graphs each edge appears once, oriented from the
        endpoint that was registered first.

        Returns:
            List of (u, v, weight) tuples.
        """
        if self.directed:
            return list(self.arcs())

        edges_list = []
        seen: Set[Hashable] = set()
        for u, record in self.vertices.items():
            for v, weight in record.edges.items():
                if v not in seen:
                    edges_list.append((u, v, weight))
            seen.add(u)

        return edges_list

    def is_connected(self) -> bool:
        """
        Return True if every vertex is reachable from the first vertex.

        Edges are followed in their stored direction. The empty graph is
        considered connected.
        """
        if not self.vertices:
            return True

        start = next(iter(self.vertices))
        visited = {start}
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in self.vertices[u].edges:
                if v not in visited:
                    visited.add(v)
                    queue.append(v)

        return len(visited) == len(self.vertices)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def format_adjacency(self) -> str:
        """
        Render the adjacency list, one line per vertex.

        Each line reads ``vertex -> neighbor1 (weight1), neighbor2 (weight2)``.
        """
        lines = []
        for vertex, record in self.vertices.items():
            rendered = ", ".join(f"{neighbor} ({weight})" for neighbor, weight in record.edges.items())
            lines.append(f"{vertex} -> {rendered}")
        return "\n".join(lines)

    def print_graph(self, file: Optional[TextIO] = None) -> None:
        """Write format_adjacency() to ``file`` (stdout by default)."""
        text = self.format_adjacency()
        if text:
            print(text, file=file if file is not None else sys.stdout)

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"WeightedGraph({kind}, vertices={len(self.vertices)})"
