"""Block placement for workplanner.

Greedy capacity-constrained placement of planned blocks into day slots.

Each block goes on the first day that has room and is on or before its due
day. The last day of the horizon accepts anything that fits. When nothing
fits, the block is forced onto the day with the most remaining capacity. No
block is ever dropped.
"""

import logging
from datetime import datetime
from typing import List, Optional

from workplanner.engine.dates import days_between, local_date
from workplanner.models.plan_blocks import DaySlot, PlacedTask, PlannedBlock
from workplanner.models.plan_response import DayPlan

logger = logging.getLogger(__name__)

FORCED_PLACEMENT_SUFFIX = " (forced placement due to capacity limit)"


class PlacementResult:
    """Result of placing blocks into the calendar."""

    def __init__(self):
        self.daily_plan: List[DayPlan] = []
        self.late_count: int = 0


def place_blocks(
    schedule: List[DaySlot],
    blocks: List[PlannedBlock],
    now: datetime,
    time_zone: str,
) -> PlacementResult:
    """Place blocks into the schedule, mutating its day slots.

    Args:
        schedule: Day slots in calendar order (must not be empty)
        blocks: Blocks in placement order
        now: Planning instant; day 0 of the schedule is its local date
        time_zone: IANA time zone for due-day indexing

    Returns:
        PlacementResult with the rendered non-empty days and the late count
    """
    result = PlacementResult()
    today = local_date(now, time_zone)
    last_index = len(schedule) - 1

    for block in blocks:
        due_index = max(0, days_between(today, local_date(block.due_instant, time_zone)))
        day_index = _first_fit(schedule, block, due_index)

        if day_index is not None:
            is_late = day_index > due_index
            day = schedule[day_index]
            day.tasks.append(_to_task(block, is_late, block.reason))
            day.remaining_minutes -= block.minutes
            if is_late:
                result.late_count += 1
            logger.debug(f"Placed {block.block_id} on day {day_index} (due day {due_index}, late={is_late})")
            continue

        day = _most_remaining(schedule)
        day.tasks.append(_to_task(block, True, block.reason + FORCED_PLACEMENT_SUFFIX))
        day.remaining_minutes = max(0, day.remaining_minutes - block.minutes)
        result.late_count += 1
        logger.info(
            f"Forced {block.block_id} ({block.minutes} min) onto {day.date.isoformat()}; "
            f"no day up to index {last_index} had room"
        )

    result.daily_plan = [_render_day(day) for day in schedule if day.tasks]
    return result


def _first_fit(schedule: List[DaySlot], block: PlannedBlock, due_index: int) -> Optional[int]:
    last_index = len(schedule) - 1
    for index, day in enumerate(schedule):
        if day.remaining_minutes < block.minutes:
            continue
        if index <= due_index or index == last_index or due_index >= last_index:
            return index
    return None


def _most_remaining(schedule: List[DaySlot]) -> DaySlot:
    # Strict comparison keeps the earliest day on ties
    best = schedule[0]
    for day in schedule[1:]:
        if day.remaining_minutes > best.remaining_minutes:
            best = day
    return best


def _to_task(block: PlannedBlock, is_late: bool, reason: str) -> PlacedTask:
    return PlacedTask(
        block_id=block.block_id,
        work_item_id=block.work_item_id,
        title=block.title,
        type=block.type,
        mode=block.mode,
        minutes=block.minutes,
        due_at=block.due_at,
        priority_rank=block.priority_rank,
        is_late_placement=is_late,
        reason=reason,
    )


def _render_day(day: DaySlot) -> DayPlan:
    tasks = sorted(day.tasks, key=lambda task: task.priority_rank)
    return DayPlan(
        date=day.date.isoformat(),
        total_minutes=sum(task.minutes for task in tasks),
        focus_window=day.focus_window,
        tasks=tasks,
    )
