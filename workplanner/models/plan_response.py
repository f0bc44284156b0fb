"""Work-plan optimize response models for workplanner."""

from datetime import datetime
from enum import Enum
from typing import List
from pydantic import Field

from workplanner.models.base import CamelModel
from workplanner.models.constants import PLAN_TYPE
from workplanner.models.plan_blocks import PlacedTask
from workplanner.models.plan_request import TimeOfDay


class AdjustmentKind(str, Enum):
    """Category of an adjustment notice."""
    BEHAVIOR = "behavior"
    WORKLOAD = "workload"
    RISK = "risk"
    CAPACITY = "capacity"


class PlanSummary(CamelModel):
    """Plan-level totals."""

    total_work_items: int
    total_estimated_hours: float
    total_scheduled_hours: float
    days_planned: int
    recomputed: bool
    spaced_repetition_blocks: int


class NextBestAction(CamelModel):
    """The single recommended thing to start on now."""

    work_item_id: str
    title: str
    action: str
    reason: str
    recommended_today_minutes: int


class Adjustment(CamelModel):
    """Informational notice about how the plan was adapted."""

    kind: AdjustmentKind
    title: str
    description: str


class DayPlan(CamelModel):
    """A non-empty day of the rendered plan."""

    date: str = Field(..., description="Local calendar date (YYYY-MM-DD)")
    total_minutes: int
    focus_window: TimeOfDay
    tasks: List[PlacedTask] = Field(default_factory=list)


class WorkPlanOptimizeResponse(CamelModel):
    """Full output of the work-plan optimizer."""

    plan_type: str = Field(PLAN_TYPE, description="Constant plan type discriminator")
    generated_at: datetime
    summary: PlanSummary
    next_best_action: NextBestAction
    adjustments: List[Adjustment]
    explanations: List[str]
    daily_plan: List[DayPlan]
