"""Work-plan optimizer for workplanner.

Runs ranking, block decomposition, calendar construction, placement, and
explanation in sequence and assembles the response. The whole pipeline is a
pure function of the request and the injected `now`.
"""

import logging
from datetime import datetime
from typing import List, Optional

from workplanner.engine.blocks import build_blocks
from workplanner.engine.config import DEFAULT_PLANNER_CONFIG, PlannerConfig
from workplanner.engine.dates import ensure_aware, format_number, round2
from workplanner.engine.day_schedule import build_day_schedule, compute_planning_days
from workplanner.engine.explain import build_adjustments, build_explanations
from workplanner.engine.placement import place_blocks
from workplanner.engine.ranking import rank_work_items
from workplanner.models.plan_blocks import BlockMode, RankedItem
from workplanner.models.plan_request import RecomputeTrigger, WorkPlanOptimizeRequest
from workplanner.models.plan_response import NextBestAction, PlanSummary, WorkPlanOptimizeResponse

logger = logging.getLogger(__name__)


def optimize_work_plan(
    request: WorkPlanOptimizeRequest,
    now: datetime,
    generated_at: Optional[datetime] = None,
    config: PlannerConfig = DEFAULT_PLANNER_CONFIG,
) -> WorkPlanOptimizeResponse:
    """Build a complete work plan.

    Args:
        request: Full optimize request
        now: Planning instant (naive values are treated as UTC)
        generated_at: Wall-clock stamp for the response; defaults to `now`
        config: Scoring weights and block sizing

    Returns:
        WorkPlanOptimizeResponse
    """
    now = ensure_aware(now)
    time_zone = request.availability.timezone

    ranked_items = rank_work_items(request, now, config)
    blocks = build_blocks(ranked_items, request, config)
    planning_days = compute_planning_days(ranked_items, config)
    schedule = build_day_schedule(
        now,
        planning_days,
        request.availability,
        request.behavior.preferred_time_of_day,
    )
    placement = place_blocks(schedule, blocks, now, time_zone)

    total_estimated_minutes = sum(ranked.adjusted_minutes for ranked in ranked_items)
    total_scheduled_minutes = sum(day.total_minutes for day in placement.daily_plan)
    spaced_repetition_blocks = sum(1 for block in blocks if block.mode == BlockMode.SPACED_REPETITION)

    logger.info(
        f"Planned {len(request.work_items)} work items as {len(blocks)} blocks over "
        f"{planning_days} days ({placement.late_count} late)"
    )

    return WorkPlanOptimizeResponse(
        generated_at=generated_at or now,
        summary=PlanSummary(
            total_work_items=len(request.work_items),
            total_estimated_hours=round2(total_estimated_minutes / 60),
            total_scheduled_hours=round2(total_scheduled_minutes / 60),
            days_planned=planning_days,
            recomputed=request.recompute.trigger != RecomputeTrigger.INITIAL,
            spaced_repetition_blocks=spaced_repetition_blocks,
        ),
        next_best_action=build_next_best_action(ranked_items, request, config),
        adjustments=build_adjustments(request, placement.late_count, config),
        explanations=build_explanations(ranked_items, request, placement.late_count, config),
        daily_plan=placement.daily_plan,
    )


def build_next_best_action(
    ranked_items: List[RankedItem],
    request: WorkPlanOptimizeRequest,
    config: PlannerConfig = DEFAULT_PLANNER_CONFIG,
) -> NextBestAction:
    """Recommend a first focused block on the top-ranked item."""
    if not ranked_items:
        return NextBestAction(
            work_item_id="none",
            title="No work items",
            action="Add work items to generate your next action.",
            reason="Planner requires at least one active work item.",
            recommended_today_minutes=0,
        )

    top = ranked_items[0]
    minutes = min(
        max(request.pace.focus_minutes_per_session, config.min_recommended_minutes),
        top.adjusted_minutes,
    )
    return NextBestAction(
        work_item_id=top.item.id,
        title=top.item.title,
        action=f"Start with a {minutes}-minute focused block on {top.item.title}.",
        reason=(
            f"Highest rank from risk ({format_number(top.item.risk_score)}), "
            f"priority ({format_number(top.item.priority_score)}), and due urgency ({top.days_until_due} day window)."
        ),
        recommended_today_minutes=minutes,
    )
