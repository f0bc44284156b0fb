"""Work item ranking for workplanner.

Scores each work item on priority, risk, complexity, grade weight, and due-date
urgency, and time-adjusts its estimate for pace, completion drift, and the
recompute trigger. Ordering is deterministic for a given `now`.
"""

import logging
import math
from datetime import datetime
from typing import List

from workplanner.engine.config import DEFAULT_PLANNER_CONFIG, PlannerConfig
from workplanner.engine.dates import clamp, days_until, parse_due_at, round2
from workplanner.models.plan_blocks import RankedItem
from workplanner.models.plan_request import WorkPlanOptimizeRequest
from workplanner.models.work_item import WorkItemInput

logger = logging.getLogger(__name__)


def rank_work_items(
    request: WorkPlanOptimizeRequest,
    now: datetime,
    config: PlannerConfig = DEFAULT_PLANNER_CONFIG,
) -> List[RankedItem]:
    """Rank every work item in the request.

    Items are sorted by rank score, highest first. Equal scores keep their
    input order.

    Args:
        request: Full optimize request
        now: Planning instant
        config: Scoring weights and multipliers

    Returns:
        Ranked items, highest priority first
    """
    ranked = [_rank_item(item, request, now, config) for item in request.work_items]
    return sorted(ranked, key=lambda ranked_item: -ranked_item.rank_score)


def urgency_score(days_until_due: int, config: PlannerConfig = DEFAULT_PLANNER_CONFIG) -> float:
    """Urgency on a 0-100 scale; closer due dates score higher."""
    return clamp(config.urgency_numerator / days_until_due, 0, config.urgency_cap)


def adjusted_minutes(
    estimated_minutes: int,
    request: WorkPlanOptimizeRequest,
    config: PlannerConfig = DEFAULT_PLANNER_CONFIG,
) -> int:
    """Time-adjust an estimate for pace, historical drift, and recompute trigger."""
    pace = config.pace_multipliers[request.pace.productivity_profile]
    drift = 1 + request.behavior.avg_completion_drift_pct / 100
    recompute = config.recompute_multipliers[request.recompute.trigger]
    return max(
        config.min_adjusted_minutes,
        math.ceil(estimated_minutes * pace * drift * recompute),
    )


def _rank_item(
    item: WorkItemInput,
    request: WorkPlanOptimizeRequest,
    now: datetime,
    config: PlannerConfig,
) -> RankedItem:
    due = parse_due_at(item.due_at, now)
    days_until_due = days_until(due, now)
    urgency = urgency_score(days_until_due, config)

    score = (
        item.priority_score * config.priority_weight
        + item.risk_score * config.risk_weight
        + item.complexity_score * config.complexity_weight
        + item.grade_weight * config.grade_weight_weight
        + urgency * config.urgency_weight
    )

    priorities = request.priorities
    if priorities.prefer_high_risk:
        score += item.risk_score * config.high_risk_boost
    if priorities.prefer_high_weight:
        score += item.grade_weight * config.high_weight_boost
    if priorities.prefer_near_deadline:
        score += urgency * config.near_deadline_boost

    ranked = RankedItem(
        item=item,
        adjusted_minutes=adjusted_minutes(item.estimated_minutes, request, config),
        rank_score=round2(score),
        days_until_due=days_until_due,
        due_instant=due,
    )
    logger.debug(
        f"Ranked {item.id} score={ranked.rank_score} "
        f"minutes={ranked.adjusted_minutes} days_until_due={days_until_due}"
    )
    return ranked
