"""Intermediate planning models for workplanner.

These exist only for the duration of one optimize call.
"""

from datetime import date, datetime
from enum import Enum
from typing import List
from pydantic import Field

from workplanner.models.base import CamelModel
from workplanner.models.plan_request import TimeOfDay
from workplanner.models.work_item import WorkItemInput, WorkItemType


class BlockMode(str, Enum):
    """What a study block is for."""
    PREP = "prep"
    EXECUTION = "execution"
    SPACED_REPETITION = "spaced_repetition"
    REVIEW = "review"


class RankedItem(CamelModel):
    """A work item with its rank score and time-adjusted estimate."""

    item: WorkItemInput
    adjusted_minutes: int = Field(..., ge=20)
    rank_score: float
    days_until_due: int = Field(..., ge=1)
    due_instant: datetime = Field(..., exclude=True, description="Parsed due instant")


class PlannedBlock(CamelModel):
    """An atomic chunk of study time derived from a work item."""

    block_id: str
    work_item_id: str
    title: str
    type: WorkItemType
    mode: BlockMode
    minutes: int = Field(..., gt=0)
    due_at: str
    priority_rank: int = Field(..., ge=1)
    reason: str
    due_instant: datetime = Field(..., exclude=True, description="Parsed due instant")


class PlacedTask(CamelModel):
    """A block as it appears in the daily plan."""

    block_id: str
    work_item_id: str
    title: str
    type: WorkItemType
    mode: BlockMode
    minutes: int
    due_at: str
    priority_rank: int
    is_late_placement: bool
    reason: str


class DaySlot(CamelModel):
    """One calendar day of capacity, filled in place by the placer."""

    date: date
    day_key: str
    capacity_minutes: int = Field(..., ge=0)
    remaining_minutes: int
    focus_window: TimeOfDay
    tasks: List[PlacedTask] = Field(default_factory=list)
