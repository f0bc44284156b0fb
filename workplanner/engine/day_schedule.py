"""Day capacity calendar for workplanner."""

from datetime import datetime
from typing import List

from workplanner.engine.config import DEFAULT_PLANNER_CONFIG, PlannerConfig
from workplanner.engine.dates import add_days, clamp, day_key, local_date
from workplanner.models.constants import WEEKEND_DAY_KEYS
from workplanner.models.plan_blocks import DaySlot, RankedItem
from workplanner.models.plan_request import Availability


def compute_planning_days(
    ranked_items: List[RankedItem],
    config: PlannerConfig = DEFAULT_PLANNER_CONFIG,
) -> int:
    """Number of days to plan: one past the furthest due date, within 7-14 days."""
    if not ranked_items:
        return config.min_planning_days
    furthest = max(ranked.days_until_due for ranked in ranked_items)
    days = max(furthest + 1, config.min_planning_days)
    return int(clamp(days, config.min_planning_days, config.max_planning_days))


def build_day_schedule(
    now: datetime,
    planning_days: int,
    availability: Availability,
    focus_window: str,
) -> List[DaySlot]:
    """Build empty day slots starting on the local date of `now`.

    Args:
        now: Planning instant
        planning_days: Number of consecutive days to create
        availability: Weekday/weekend capacity, per-day overrides, and time zone
        focus_window: Preferred time of day, applied to every day

    Returns:
        Day slots in calendar order, each with full remaining capacity
    """
    today = local_date(now, availability.timezone)
    schedule = []
    for index in range(planning_days):
        day = add_days(today, index)
        key = day_key(day)
        default_minutes = (
            availability.weekend_minutes if key in WEEKEND_DAY_KEYS else availability.weekday_minutes
        )
        capacity = max(0, availability.overrides.get(key, default_minutes))
        schedule.append(
            DaySlot(
                date=day,
                day_key=key,
                capacity_minutes=capacity,
                remaining_minutes=capacity,
                focus_window=focus_window,
            )
        )
    return schedule
