"""Strict-mode configuration for wgraph.

By default the algorithms are permissive: a missing source vertex is treated
as isolated and Dijkstra trusts the caller to supply non-negative weights.
Strict mode turns those preconditions into errors. The initial value comes
from the WGRAPH_STRICT environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Union

STRICT_ENV_VAR = "WGRAPH_STRICT"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _parse_flag(value: Union[bool, int, str, None]) -> bool:
    """Interpret a bool, an int, or an environment-style string as a flag."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


_strict_enabled: bool = _parse_flag(os.getenv(STRICT_ENV_VAR))


def is_strict_enabled() -> bool:
    """
    Return whether strict mode is currently enabled.

    While enabled:

    - ``dijkstra``, ``bellman_ford`` and ``prim_mst`` raise
      ``MissingVertexError`` for an absent start vertex instead of logging
      a warning and returning empty or all-infinite results;
    - ``dijkstra`` raises ``ValueError`` on any negative edge weight.

    Floyd-Warshall's negative-cycle flag and Bellman-Ford's
    ``NegativeCycleError`` do not depend on this setting.
    """
    return _strict_enabled


def set_strict_enabled(enabled: Union[bool, int, str, None]) -> None:
    """
    Globally enable or disable strict mode.

    Parameters
    ----------
    enabled:
        A bool, or a string parsed the same way as WGRAPH_STRICT
        (``"1"``, ``"true"``, ``"yes"`` and ``"on"`` enable it).
    """
    global _strict_enabled
    _strict_enabled = _parse_flag(enabled)


def reset_strict_from_env() -> bool:
    """Re-read WGRAPH_STRICT and return the resulting setting."""
    set_strict_enabled(os.getenv(STRICT_ENV_VAR))
    return _strict_enabled


@contextmanager
def strict_context(enabled: Union[bool, int, str] = True) -> Iterator[None]:
    """
    Temporarily switch strict mode, restoring the previous value on exit.

    Example
    -------
    >>> with strict_context():
    ...     dijkstra(graph, "missing")  # raises MissingVertexError
    """
    previous = is_strict_enabled()
    set_strict_enabled(enabled)
    try:
        yield
    finally:
        set_strict_enabled(previous)
