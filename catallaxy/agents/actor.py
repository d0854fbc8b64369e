"""
Actor — A single valuing, acting economic agent.

The actor owns four structures and keeps them consistent:

1. Goal hierarchy: goal → ordinal rank (lower is more valued)
2. Satisfaction index: goal → items able to satisfy it
3. Preference list: item → queue of goals the item is earmarked for
4. Recurrence cache: goal → periodic record, for an external time driver

Using an item always serves the most valued goal at the top of that
item's queue. A goal that becomes satisfied, or that is retired, is
purged from every queue that held it and not only from the queue of the
item that was used.

Calls against one actor must be serialized by the caller.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any

from catallaxy.config import settings
from catallaxy.preferences.indexes import (
    GoalHierarchy,
    PreferenceList,
    RecurrenceCache,
    SatisfactionIndex,
    build_satisfaction_index,
    distinct_items,
)
from catallaxy.preferences.ranking import PreferenceQueue, RankedEntry
from catallaxy.preferences.schema import ActorScenario, GoalRecord, Ordering

logger = logging.getLogger(__name__)


class Actor:
    """
    Individual acting, valuing, satisfying economic actor.

    The preference list is the structure consulted when using or valuing
    an item, and both operations only ever look at the root of a queue.
    """

    def __init__(
        self,
        name: str,
        hierarchy: list[GoalRecord],
        satisfactions: list[tuple[Any, list[Any]]],
        *,
        persist_progress: bool | None = None,
    ) -> None:
        """
        Construct an actor and populate its preference list.

        Args:
            name: Actor's name, for reports and log lines.
            hierarchy: Goal records ordered from most to least valued. Each
                record's position becomes its rank.
            satisfactions: ``(goal, items)`` pairs. Later pairs for the same
                goal append to the items already registered.
            persist_progress: Whether a non-satisfying use writes its unit
                increment back to the record. Defaults to settings.
        """
        self.name = name
        self.persist_progress = (
            settings.persist_progress if persist_progress is None else persist_progress
        )
        self.recurring_goals: RecurrenceCache = {}
        self.preference_list: PreferenceList = {}
        self.satisfactions: SatisfactionIndex = build_satisfaction_index(satisfactions)
        self.goal_hierarchy: GoalHierarchy = {}
        self._rank_counts: Counter[int] = Counter()

        for rank, record in enumerate(hierarchy):
            self.add_goal(record, rank)

        logger.info(
            "Actor constructed: name=%s goals=%d items=%d",
            name, len(self.goal_hierarchy), len(self.preference_list),
        )

    @classmethod
    def from_scenario(cls, scenario: ActorScenario, **kwargs: Any) -> Actor:
        """Build an actor from a validated scenario description."""
        return cls(
            scenario.name,
            list(scenario.hierarchy),
            [(goal, list(items)) for goal, items in scenario.satisfactions],
            **kwargs,
        )

    # ── Mutation ───────────────────────────────────────────────

    def add_goal(self, record: GoalRecord, rank: int) -> None:
        """
        Queue a goal record under every item that can satisfy it.

        The actor queues its own copy of ``record``, shared by every queue
        this call touches; the caller's object is never mutated. The queued
        entries carry ``rank`` by value. Entries already queued for other
        goals keep the rank they were inserted with.

        A record that is already satisfied is not indexed.

        Args:
            record: The goal record to add.
            rank: Position of the goal in the hierarchy of values.
        """
        goal = record.get_goal()

        if record.is_satisfied():
            logger.warning(
                "Refusing satisfied goal record: actor=%s goal=%r units=%d/%d",
                self.name, goal, record.units, record.units_required,
            )
            return

        record = record.model_copy()
        previous = self.goal_hierarchy.get(goal)
        if previous != rank:
            if previous is not None:
                self._release_rank(previous)
            if self._rank_counts[rank]:
                logger.warning(
                    "Goal hierarchy no longer strictly ordinal: %r shares rank %d",
                    goal, rank,
                )
            self._rank_counts[rank] += 1

        for item in distinct_items(self.satisfactions.get(goal, [])):
            queue = self.preference_list.setdefault(item, PreferenceQueue())
            queue.push(RankedEntry(record=record, rank=rank))

        if record.is_recurring():
            self.recurring_goals[goal] = record
        self.goal_hierarchy[goal] = rank

        logger.debug("Goal added: actor=%s goal=%r rank=%d", self.name, goal, rank)

    def remove_goal(self, goal: Any) -> None:
        """
        Remove a goal from every queue, the recurrence cache and the hierarchy.

        Each affected queue is rebuilt in full, so this is the expensive
        path and should only be taken when a goal is satisfied or retired.
        A goal removed here needs a fresh rank if it is ever added again.
        """
        removed = 0
        for item in distinct_items(self.satisfactions.get(goal, [])):
            queue = self.preference_list.get(item)
            if queue is not None:
                removed += queue.discard_goal(goal)

        self.recurring_goals.pop(goal, None)
        rank = self.goal_hierarchy.pop(goal, None)
        if rank is not None:
            self._release_rank(rank)

        logger.debug(
            "Goal removed: actor=%s goal=%r entries=%d", self.name, goal, removed
        )

    def _release_rank(self, rank: int) -> None:
        self._rank_counts[rank] -= 1
        if self._rank_counts[rank] <= 0:
            del self._rank_counts[rank]

    def use_item(self, item: Any) -> GoalRecord | None:
        """
        Use an item toward the most valued goal it can satisfy.

        Does not advance recurrence timers; that is the time driver's job.

        Args:
            item: The item to use.

        Returns:
            A snapshot of the goal record as it stood before this use, if
            this use satisfied the goal. None if the item has no queued
            goal or the goal still needs more units.
        """
        queue = self.preference_list.get(item)
        if not queue:
            return None

        entry = queue.peek()
        record = entry.record
        snapshot = record.model_copy()
        units = record.units + 1

        if units >= record.units_required:
            logger.info(
                "Goal satisfied: actor=%s item=%r goal=%r",
                self.name, item, record.get_goal(),
            )
            self.remove_goal(record.get_goal())
            return snapshot

        if self.persist_progress:
            record.units = units
        logger.debug(
            "Goal progressed: actor=%s item=%r goal=%r units=%d/%d",
            self.name, item, record.get_goal(), units, record.units_required,
        )
        return None

    def add_satisfaction_entry(self, goal: Any, item: Any) -> None:
        """
        Register an item as able to satisfy a goal.

        Queues are not touched. A goal already known must be added again
        before it shows up in the item's queue.
        """
        self.satisfactions.setdefault(goal, []).append(item)

    # ── Queries ────────────────────────────────────────────────

    def get_best_goal(self, item: Any) -> Any | None:
        """Return the most valued goal this item can satisfy, if any."""
        queue = self.preference_list.get(item)
        if not queue:
            return None
        return queue.peek().goal

    def compare_item_values(self, a: Any, b: Any) -> Ordering | None:
        """
        Compare two items by the best goal each can satisfy.

        Goals are compared by their own intrinsic ordering, not by rank.
        Returns None if either item has no queued goal.
        """
        a_goal = self.get_best_goal(a)
        if a_goal is None:
            return None
        b_goal = self.get_best_goal(b)
        if b_goal is None:
            return None
        return Ordering.between(a_goal, b_goal)

    def queued_goals(self, item: Any) -> list[Any]:
        """Goals queued for an item, most valued first."""
        queue = self.preference_list.get(item)
        return queue.goals() if queue is not None else []

    def rank_of(self, goal: Any) -> int | None:
        return self.goal_hierarchy.get(goal)

    def is_strictly_ordinal(self) -> bool:
        """Whether no two goals share a rank."""
        ranks = list(self.goal_hierarchy.values())
        return len(ranks) == len(set(ranks))

    def __repr__(self) -> str:
        return (
            f"Actor(name={self.name!r}, goals={len(self.goal_hierarchy)}, "
            f"items={len(self.preference_list)})"
        )
