"""
Min-priority frontier used by Dijkstra and Prim.

A binary heap of (priority, sequence, vertex) entries. The sequence number
orders equal priorities by insertion so vertices never have to be mutually
comparable. Decreasing a vertex's priority is just another push; callers skip
superseded entries when they pop a vertex they have already finalized.
"""

import heapq
from typing import Hashable, List, Tuple

from .exceptions import EmptyFrontierError


class PriorityFrontier:
    """
    Heap-backed priority queue keyed on numeric priority.

    Complexity:
        - push: O(log n)
        - pop_min: O(log n)
        - peek, is_empty: O(1)

    Example:
        >>> frontier = PriorityFrontier()
        >>> frontier.push("B", 2.0)
        >>> frontier.push("A", 1.0)
        >>> frontier.pop_min()
        ('A', 1.0)
    """

    def __init__(self):
        self._heap: List[Tuple[float, int, Hashable]] = []
        self._counter = 0

    def push(self, vertex: Hashable, priority: float) -> None:
        heapq.heappush(self._heap, (priority, self._counter, vertex))
        self._counter += 1

    def pop_min(self) -> Tuple[Hashable, float]:
        """
        Remove and return the entry with the smallest priority.

        Returns:
            (vertex, priority) tuple.

        Raises:
            EmptyFrontierError: If the frontier is empty.
        """
        if not self._heap:
            raise EmptyFrontierError("Priority frontier is empty")
        priority, _, vertex = heapq.heappop(self._heap)
        return vertex, priority

    def peek(self) -> Tuple[Hashable, float]:
        """Return the minimum entry without removing it."""
        if not self._heap:
            raise EmptyFrontierError("Priority frontier is empty")
        priority, _, vertex = self._heap[0]
        return vertex, priority

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
