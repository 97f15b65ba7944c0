"""Tests for the priority frontier."""

import pytest

from wgraph import EmptyFrontierError, PriorityFrontier


class TestPriorityFrontier:
    """Tests for PriorityFrontier."""

    def test_pop_returns_minimum(self):
        frontier = PriorityFrontier()
        frontier.push("C", 3.0)
        frontier.push("A", 1.0)
        frontier.push("B", 2.0)

        assert frontier.pop_min() == ("A", 1.0)
        assert frontier.pop_min() == ("B", 2.0)
        assert frontier.pop_min() == ("C", 3.0)
        assert frontier.is_empty()

    def test_peek_does_not_remove(self):
        frontier = PriorityFrontier()
        frontier.push("A", 5)
        frontier.push("B", 1)

        assert frontier.peek() == ("B", 1)
        assert len(frontier) == 2

    def test_len_and_bool(self):
        frontier = PriorityFrontier()
        assert len(frontier) == 0
        assert not frontier

        frontier.push("A", 0)
        assert len(frontier) == 1
        assert frontier

    def test_decrease_priority_keeps_stale_entry(self):
        """A repeated push leaves the old entry in place for lazy skipping."""
        frontier = PriorityFrontier()
        frontier.push("A", 5)
        frontier.push("A", 2)

        assert len(frontier) == 2
        assert frontier.pop_min() == ("A", 2)
        assert frontier.pop_min() == ("A", 5)

    def test_equal_priorities_do_not_compare_vertices(self):
        frontier = PriorityFrontier()
        first, second = object(), object()
        frontier.push(first, 1)
        frontier.push(second, 1)

        popped = {frontier.pop_min()[0], frontier.pop_min()[0]}
        assert popped == {first, second}

    def test_pop_empty_raises(self):
        frontier = PriorityFrontier()
        with pytest.raises(EmptyFrontierError):
            frontier.pop_min()

    def test_peek_empty_raises_index_error(self):
        frontier = PriorityFrontier()
        with pytest.raises(IndexError):
            frontier.peek()
