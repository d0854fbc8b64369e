"""
Ranking — Ordered storage of goal records inside a per-item queue.

Each queued entry carries the rank its goal held in the actor's goal
hierarchy at the moment the entry was inserted. The rank is copied by
value: changing the hierarchy afterwards never re-ranks entries already
queued, only entries inserted after the change see the new rank.

Lower rank means more preferred, so a queue is a binary min-heap whose
root is always the most valued goal the item is earmarked for. Entries
of equal rank are served in insertion order.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, Iterator

from catallaxy.preferences.schema import GoalRecord

_sequence = itertools.count()


@dataclass(eq=False)
class RankedEntry:
    """A goal record bound to the rank resolved when it was queued."""

    record: GoalRecord
    rank: int
    sequence: int = field(default_factory=lambda: next(_sequence))

    @property
    def goal(self) -> Any:
        return self.record.get_goal()

    def __lt__(self, other: RankedEntry) -> bool:
        return (self.rank, self.sequence) < (other.rank, other.sequence)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RankedEntry):
            return NotImplemented
        return self.record == other.record

    __hash__ = None  # type: ignore[assignment]


class PreferenceQueue:
    """
    Max-preference queue of RankedEntry for a single item.

    ``peek`` is O(1) and ``push`` is O(log n). Removing a goal from the
    middle of the queue rebuilds the whole heap in O(n); it should only
    be reached when a goal is retired or satisfied.
    """

    def __init__(self, entries: list[RankedEntry] | None = None) -> None:
        self._heap: list[RankedEntry] = list(entries or [])
        heapq.heapify(self._heap)

    def push(self, entry: RankedEntry) -> None:
        heapq.heappush(self._heap, entry)

    def peek(self) -> RankedEntry | None:
        """Return the most preferred entry without removing it."""
        return self._heap[0] if self._heap else None

    def discard_goal(self, goal: Any) -> int:
        """
        Rebuild the queue without any entry for ``goal``.

        Returns:
            Number of entries removed.
        """
        kept = [entry for entry in self._heap if entry.goal != goal]
        removed = len(self._heap) - len(kept)
        if removed:
            heapq.heapify(kept)
            self._heap = kept
        return removed

    def goals(self) -> list[Any]:
        """Queued goals, most preferred first."""
        return [entry.goal for entry in self]

    def __iter__(self) -> Iterator[RankedEntry]:
        return iter(sorted(self._heap))

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, goal: object) -> bool:
        return any(entry.goal == goal for entry in self._heap)

    def __repr__(self) -> str:
        return f"PreferenceQueue({self.goals()!r})"
