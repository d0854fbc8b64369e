"""
Tests for ranked entries and preference queues.

Validates:
- Lower rank is served first
- Insertion order breaks rank ties
- Removal of a goal rebuilds the queue without touching other entries
"""

from __future__ import annotations

from catallaxy.preferences.ranking import PreferenceQueue, RankedEntry
from catallaxy.preferences.schema import OneShotGoal


def _entry(goal: str, rank: int, units_required: int = 1) -> RankedEntry:
    return RankedEntry(record=OneShotGoal(goal=goal, units_required=units_required), rank=rank)


class TestRankedEntry:
    """Test entry ordering and equality."""

    def test_lower_rank_sorts_first(self):
        assert _entry("a", 0) < _entry("b", 1)
        assert not _entry("b", 1) < _entry("a", 0)

    def test_equal_rank_uses_insertion_order(self):
        first = _entry("a", 3)
        second = _entry("b", 3)
        assert first < second
        assert not second < first

    def test_ordering_is_transitive_across_ranks(self):
        low = _entry("a", 1)
        mid = _entry("b", 0)
        high = _entry("c", 0)
        assert mid < high < low
        assert mid < low
        assert sorted([low, high, mid]) == [mid, high, low]

    def test_equality_on_record_not_rank(self):
        record = OneShotGoal(goal="a", units_required=1)
        assert RankedEntry(record=record, rank=0) == RankedEntry(record=record, rank=5)
        assert _entry("a", 0) != _entry("a", 0)


class TestPreferenceQueue:
    """Test the per-item queue."""

    def setup_method(self):
        self.queue = PreferenceQueue()
        for goal, rank in [("c", 2), ("a", 0), ("d", 3), ("b", 1)]:
            self.queue.push(_entry(goal, rank))

    def test_peek_returns_best(self):
        assert self.queue.peek().goal == "a"
        assert len(self.queue) == 4

    def test_empty_peek(self):
        assert PreferenceQueue().peek() is None
        assert not PreferenceQueue()

    def test_iteration_best_first(self):
        assert self.queue.goals() == ["a", "b", "c", "d"]

    def test_discard_goal_counts_removed(self):
        self.queue.push(_entry("b", 1))
        assert self.queue.discard_goal("b") == 2
        assert self.queue.goals() == ["a", "c", "d"]
        assert "b" not in self.queue

    def test_discard_top_promotes_next(self):
        self.queue.discard_goal("a")
        assert self.queue.peek().goal == "b"

    def test_discard_unknown_goal_is_noop(self):
        assert self.queue.discard_goal("zzz") == 0
        assert len(self.queue) == 4
