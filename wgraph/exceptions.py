"""Exception types raised by :mod:`wgraph`."""

from __future__ import annotations

from typing import Hashable


class GraphError(Exception):
    """Base class for all package-specific errors."""


class NegativeCycleError(GraphError, ValueError):
    """Raised by Bellman-Ford when a negative-weight cycle is reachable.

    Attributes:
        u, v, weight: An arc that still admitted relaxation after ``|V|-1``
            passes.
    """

    def __init__(self, u: Hashable, v: Hashable, weight: float):
        super().__init__(
            f"Graph contains a negative-weight cycle (edge {u!r} -> {v!r} "
            f"with weight {weight} can still be relaxed)"
        )
        self.u = u
        self.v = v
        self.weight = weight


class MissingVertexError(GraphError, KeyError):
    """Raised in strict mode when an algorithm starts from an absent vertex."""

    def __init__(self, vertex: Hashable):
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"Vertex {self.vertex!r} not in graph"


class EmptyFrontierError(GraphError, IndexError):
    """Raised when popping or peeking an empty priority frontier."""


__all__ = [
    "GraphError",
    "NegativeCycleError",
    "MissingVertexError",
    "EmptyFrontierError",
]
