"""Logging utilities for wgraph.

Provides per-module loggers under the ``wgraph`` namespace with a shared
configuration.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
_DEFAULT_STREAM: Optional[TextIO] = None

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _make_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(_DEFAULT_STREAM if _DEFAULT_STREAM is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached to avoid duplicate handlers. The logger name should
    typically be ``__name__`` from the calling module.

    Args:
        name: Logger name (typically ``__name__``). If None, returns the
            package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from wgraph.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("relaxing edges")
    """
    if name is None:
        name = "wgraph"

    logger_name = name if name == "wgraph" or name.startswith("wgraph.") else f"wgraph.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    # Only configure if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        logger.addHandler(_make_handler(_DEFAULT_LEVEL))
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for all wgraph loggers.

    Args:
        level: Logging level (``logging.DEBUG`` etc.) or its name as a string.

    Example:
        >>> import logging
        >>> from wgraph.logging import set_log_level
        >>> set_log_level(logging.DEBUG)
    """
    level = _resolve_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure logging for wgraph.

    Replaces the handlers of every existing wgraph logger and sets the
    defaults used for loggers created afterwards.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses the default.
        stream: Output stream (default: ``sys.stderr``).

    Example:
        >>> import logging
        >>> from wgraph.logging import configure_logging
        >>> configure_logging(level=logging.INFO)
    """
    global _DEFAULT_LEVEL, _DEFAULT_FORMAT, _DEFAULT_STREAM

    _DEFAULT_LEVEL = _resolve_level(level)
    _DEFAULT_FORMAT = format_string or "[%(levelname)s] %(name)s: %(message)s"
    _DEFAULT_STREAM = stream

    for logger in _loggers.values():
        logger.setLevel(_DEFAULT_LEVEL)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_make_handler(_DEFAULT_LEVEL))
