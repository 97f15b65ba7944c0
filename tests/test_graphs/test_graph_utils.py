"""Tests for graph utility functions."""

import io
import logging

import pytest

from wgraph import MissingVertexError, WeightedGraph, edges_from_weighted_graph, node_index_map, strict_context
from wgraph.logging import configure_logging
from wgraph.utils import require_vertex


class TestNodeIndexMap:
    """Tests for node_index_map function."""

    def test_node_index_map_keeps_order(self):
        node_to_idx, idx_to_node = node_index_map(["C", "A", "B"])

        assert node_to_idx == {"C": 0, "A": 1, "B": 2}
        assert idx_to_node == ["C", "A", "B"]

    def test_node_index_map_duplicates(self):
        node_to_idx, idx_to_node = node_index_map(["A", "B", "A", "C"])

        assert idx_to_node == ["A", "B", "C"]
        assert len(node_to_idx) == 3


class TestEdgesFromWeightedGraph:
    """Tests for edges_from_weighted_graph function."""

    def test_sorted_by_weight(self, diamond_graph):
        edges = list(edges_from_weighted_graph(diamond_graph))
        assert edges == [
            ("A", "B", 1),
            ("C", "D", 1),
            ("B", "C", 2),
            ("A", "C", 4),
        ]

    def test_empty(self):
        assert list(edges_from_weighted_graph(WeightedGraph())) == []


class TestRequireVertex:
    """Tests for the missing-vertex policy."""

    def test_present(self, diamond_graph):
        assert require_vertex(diamond_graph, "A", "test") is True

    def test_missing_logs_warning(self, diamond_graph):
        stream = io.StringIO()
        configure_logging(level=logging.WARNING, stream=stream)
        try:
            assert require_vertex(diamond_graph, "Z", "dijkstra") is False
        finally:
            configure_logging(level=logging.WARNING)

        output = stream.getvalue()
        assert "[WARNING]" in output
        assert "dijkstra" in output
        assert "'Z'" in output

    def test_missing_strict(self, diamond_graph):
        with strict_context():
            with pytest.raises(MissingVertexError) as excinfo:
                require_vertex(diamond_graph, "Z", "dijkstra")
        assert excinfo.value.vertex == "Z"
        assert str(excinfo.value) == "Vertex 'Z' not in graph"
        assert isinstance(excinfo.value, KeyError)
