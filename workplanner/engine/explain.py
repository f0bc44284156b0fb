"""Adjustment notices and plain-language explanations for a work plan."""

import math
from typing import List

from workplanner.engine.config import DEFAULT_PLANNER_CONFIG, PlannerConfig
from workplanner.engine.dates import format_number
from workplanner.models.plan_blocks import RankedItem
from workplanner.models.plan_request import RecomputeTrigger, WorkPlanOptimizeRequest
from workplanner.models.plan_response import Adjustment, AdjustmentKind


def build_adjustments(
    request: WorkPlanOptimizeRequest,
    late_count: int,
    config: PlannerConfig = DEFAULT_PLANNER_CONFIG,
) -> List[Adjustment]:
    """Build the adjustment notices for a plan.

    Always returns at least one notice; a "plan stable" notice stands in when
    nothing else applies.
    """
    adjustments: List[Adjustment] = []
    trigger = request.recompute.trigger

    if trigger == RecomputeTrigger.SESSION_SKIPPED:
        adjustments.append(
            Adjustment(
                kind=AdjustmentKind.BEHAVIOR,
                title="Recovery rebalance applied",
                description=(
                    "Skipped sessions triggered an automatic recovery block and reallocation "
                    "of high-priority work to earlier slots."
                ),
            )
        )

    if trigger == RecomputeTrigger.WORKLOAD_CHANGED or request.recompute.new_assessments_added > 0:
        adjustments.append(
            Adjustment(
                kind=AdjustmentKind.WORKLOAD,
                title="Workload change absorbed",
                description=(
                    "New or changed workload caused re-ranking and redistributed blocks with "
                    "extra buffer on highest-risk items."
                ),
            )
        )

    drift = request.behavior.avg_completion_drift_pct
    if drift > config.drift_notice_threshold_pct:
        adjustments.append(
            Adjustment(
                kind=AdjustmentKind.RISK,
                title="Effort buffer increased",
                description=(
                    f"Historical overrun of {format_number(drift)}% increased planned minutes "
                    "to reduce deadline miss probability."
                ),
            )
        )

    if late_count > 0:
        adjustments.append(
            Adjustment(
                kind=AdjustmentKind.CAPACITY,
                title="Capacity warning",
                description=(
                    f"{late_count} block(s) required late placement; increase daily availability "
                    "or reduce low-impact tasks."
                ),
            )
        )

    if not adjustments:
        adjustments.append(
            Adjustment(
                kind=AdjustmentKind.BEHAVIOR,
                title="Plan stable",
                description=(
                    "No major disruptions detected; current schedule aligns with workload "
                    "and behavior profile."
                ),
            )
        )

    return adjustments


def build_explanations(
    ranked_items: List[RankedItem],
    request: WorkPlanOptimizeRequest,
    late_count: int,
    config: PlannerConfig = DEFAULT_PLANNER_CONFIG,
) -> List[str]:
    """Explain the top of the ranking and any pressure on the plan."""
    lines: List[str] = []

    if ranked_items:
        top = ranked_items[0]
        plural = "" if top.days_until_due == 1 else "s"
        lines.append(
            f'Top priority is "{top.item.title}" due to combined high risk '
            f"({format_number(top.item.risk_score)}), priority ({format_number(top.item.priority_score)}), "
            f"and due window ({top.days_until_due} day{plural})."
        )

    if len(ranked_items) > 1:
        lines.append(
            f'Second priority is "{ranked_items[1].item.title}" to avoid overlap-driven '
            "bottlenecks with other high-effort work."
        )

    skipped = request.behavior.sessions_skipped_last_7d
    if skipped > 0:
        lines.append(
            f"Recent skipped sessions ({skipped}) increased early-block allocation to lower slippage risk."
        )

    if late_count > 0:
        extra_minutes = math.ceil(late_count * config.extra_minutes_per_late_block)
        lines.append(
            f"Capacity constraints caused {late_count} late placement block(s); consider adding "
            f"{extra_minutes} extra minutes/day this week."
        )

    if not lines:
        lines.append("Plan generated successfully with balanced workload and no major risk amplifiers.")

    return lines
