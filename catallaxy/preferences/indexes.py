"""
Index structures owned by an actor.

These are passive associative stores. All mutation is mediated by
``catallaxy.agents.actor.Actor``, which keeps them mutually consistent.
"""

from __future__ import annotations

from typing import Any, Dict, List

from catallaxy.preferences.ranking import PreferenceQueue
from catallaxy.preferences.schema import PeriodicGoal

# Goal → ordinal rank. Lower rank is more preferred.
GoalHierarchy = Dict[Any, int]

# Goal → items able to satisfy it. Items may repeat.
SatisfactionIndex = Dict[Any, List[Any]]

# Goal → periodic record, read and updated by an external time driver.
RecurrenceCache = Dict[Any, PeriodicGoal]

# Item → queue of goals the item is earmarked for.
PreferenceList = Dict[Any, PreferenceQueue]


def build_satisfaction_index(pairs: list[tuple[Any, list[Any]]]) -> SatisfactionIndex:
    """Collect ``(goal, items)`` pairs; later pairs for a goal append to it."""
    index: SatisfactionIndex = {}
    for goal, items in pairs:
        index.setdefault(goal, []).extend(items)
    return index


def distinct_items(items: list[Any]) -> list[Any]:
    """Items in first-seen order with repeats dropped."""
    return list(dict.fromkeys(items))
