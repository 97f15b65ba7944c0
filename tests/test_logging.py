"""Tests for logging utilities."""

import logging
from io import StringIO

from wgraph import WeightedGraph, dijkstra
from wgraph.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger instance."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "wgraph.test_module"


def test_get_logger_keeps_package_prefix():
    assert get_logger("wgraph.shortest").name == "wgraph.shortest"
    assert get_logger().name == "wgraph"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    logger1 = get_logger("test_module")
    logger2 = get_logger("test_module")
    assert logger1 is logger2
    assert len(logger1.handlers) == 1


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level():
    """Test that set_log_level updates logger levels."""
    logger = get_logger("test_module")

    try:
        set_log_level(logging.INFO)
        assert logger.level == logging.INFO
        assert all(h.level == logging.INFO for h in logger.handlers)
    finally:
        set_log_level(logging.WARNING)
    assert logger.level == logging.WARNING


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")

    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG

        set_log_level("ERROR")
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging():
    """Test configure_logging function."""
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        logger = get_logger("test_module")
        logger.debug("Debug message")
    finally:
        configure_logging(level=logging.WARNING)

    output = stream.getvalue()
    assert "[DEBUG] wgraph.test_module: Debug message" in output


def test_configure_logging_applies_to_new_loggers():
    stream = StringIO()
    try:
        configure_logging(level=logging.INFO, format_string="%(levelname)s|%(message)s", stream=stream)
        get_logger("created_after_configure").info("hello")
    finally:
        configure_logging(level=logging.WARNING)

    assert stream.getvalue() == "INFO|hello\n"


def test_algorithms_log_at_debug():
    G = WeightedGraph()
    G.add_edge("A", "B", 1)

    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        dijkstra(G, "A")
    finally:
        configure_logging(level=logging.WARNING)

    assert "wgraph.shortest" in stream.getvalue()
    assert "settled 2 of 2 vertices" in stream.getvalue()


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    logger = get_logger("test_module")
    assert logger.propagate is False
