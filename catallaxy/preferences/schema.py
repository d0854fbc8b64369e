"""
Preference Schema — Pydantic models for goal records and actor scenarios.

A goal record is a pending claim an actor holds on one of its ends. It
carries how many units of some means are required to satisfy the end and
how many have been diverted to it so far. Periodic records additionally
carry the recurrence interval consulted by an external time driver.

The goal and item tokens themselves are opaque to this package: any
hashable value works, and goals must also be totally orderable.
"""

from __future__ import annotations

import enum
from typing import Annotated, Any, Literal, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


# ════════════════════════════════════════════════════════════════
# Enumerations
# ════════════════════════════════════════════════════════════════


class Ordering(int, enum.Enum):
    """Three-way comparison outcome."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def between(cls, a: Any, b: Any) -> Ordering:
        if a < b:
            return cls.LESS
        if b < a:
            return cls.GREATER
        return cls.EQUAL


# ════════════════════════════════════════════════════════════════
# Goal Records
# ════════════════════════════════════════════════════════════════


class GoalRecord(BaseModel):
    """
    Metadata required to satisfy a goal.

    Stored only in the actor's preference queues and, for periodic goals,
    in its recurrence cache. A record whose ``units`` has reached
    ``units_required`` is satisfied and is purged from every index.
    """

    goal: Any = Field(description="Opaque, hashable goal token this record may satisfy")
    units_required: int = Field(gt=0, description="Units needed to satisfy the goal")
    units: int = Field(default=0, ge=0, description="Units diverted to the goal so far")
    id: UUID = Field(default_factory=uuid4)

    def get_goal(self) -> Any:
        """Return the goal this record may satisfy."""
        return self.goal

    def is_recurring(self) -> bool:
        """Whether this record belongs in the recurrence cache."""
        return False

    def is_satisfied(self) -> bool:
        return self.units >= self.units_required

    def remaining_units(self) -> int:
        return max(self.units_required - self.units, 0)


class OneShotGoal(GoalRecord):
    """A goal that occurs once or at irregular times."""

    kind: Literal["one_shot"] = "one_shot"


class PeriodicGoal(GoalRecord):
    """
    A regularly recurring goal.

    ``time`` is advanced by an external time driver; once it reaches
    ``time_required`` the driver re-adds the goal to its actor.
    """

    kind: Literal["periodic"] = "periodic"
    time_required: int = Field(gt=0, description="Interval before the goal recurs")
    time: int = Field(default=0, ge=0, description="Time elapsed since the goal was dismissed")

    def is_recurring(self) -> bool:
        return True

    def is_due(self) -> bool:
        """Whether enough time has elapsed for the goal to recur."""
        return self.time >= self.time_required


AnyGoalRecord = Annotated[Union[OneShotGoal, PeriodicGoal], Field(discriminator="kind")]


# ════════════════════════════════════════════════════════════════
# Scenarios
# ════════════════════════════════════════════════════════════════


class ActorScenario(BaseModel):
    """
    Serializable description of an actor at construction time.

    ``hierarchy`` is ordered from most to least valued. ``satisfactions``
    pairs each goal with the items able to satisfy it; repeated goals
    append to the same entry.
    """

    name: str
    hierarchy: list[AnyGoalRecord] = Field(default_factory=list)
    satisfactions: list[tuple[Any, list[Any]]] = Field(default_factory=list)
