"""Data models for workplanner."""

from workplanner.models.work_item import WorkItemInput, WorkItemType
from workplanner.models.plan_request import (
    Availability,
    Pace,
    Priorities,
    Behavior,
    Recompute,
    WorkPlanOptimizeRequest,
    ProductivityProfile,
    TimeOfDay,
    RecomputeTrigger,
)
from workplanner.models.plan_blocks import BlockMode, RankedItem, PlannedBlock, PlacedTask, DaySlot
from workplanner.models.plan_response import (
    AdjustmentKind,
    Adjustment,
    DayPlan,
    NextBestAction,
    PlanSummary,
    WorkPlanOptimizeResponse,
)

__all__ = [
    "WorkItemInput",
    "WorkItemType",
    "Availability",
    "Pace",
    "Priorities",
    "Behavior",
    "Recompute",
    "WorkPlanOptimizeRequest",
    "ProductivityProfile",
    "TimeOfDay",
    "RecomputeTrigger",
    "BlockMode",
    "RankedItem",
    "PlannedBlock",
    "PlacedTask",
    "DaySlot",
    "AdjustmentKind",
    "Adjustment",
    "DayPlan",
    "NextBestAction",
    "PlanSummary",
    "WorkPlanOptimizeResponse",
]
