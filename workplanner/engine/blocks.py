"""Block decomposition for workplanner.

Turns each ranked work item into typed study blocks: one prep block, focus-sized
execution chunks, spaced repetition for quizzes and tests, and a review block
for discussions. A skipped session adds one recovery block ahead of everything
else.
"""

from typing import List

from workplanner.engine.config import DEFAULT_PLANNER_CONFIG, PlannerConfig
from workplanner.engine.dates import clamp, round_half_up
from workplanner.models.plan_blocks import BlockMode, PlannedBlock, RankedItem
from workplanner.models.plan_request import RecomputeTrigger, WorkPlanOptimizeRequest

PREP_REASON = "Preparation block to remove startup friction and gather required materials."
EXECUTION_REASON = "Core execution block for deliverable progress."
SPACED_REPETITION_REASON = "Spaced repetition to strengthen recall before assessment."
REVIEW_REASON = "Review block to refine responses and satisfy participation quality criteria."
RECOVERY_REASON = "Recovery block inserted after skipped sessions to reduce immediate slippage risk."


def build_blocks(
    ranked_items: List[RankedItem],
    request: WorkPlanOptimizeRequest,
    config: PlannerConfig = DEFAULT_PLANNER_CONFIG,
) -> List[PlannedBlock]:
    """Decompose ranked items into planned blocks.

    Block ids are numbered in emission order (`block-1`, `block-2`, ...). The
    returned list is ordered by priority rank, then by due date.

    Args:
        ranked_items: Items in rank order (highest first)
        request: Full optimize request (pace and recompute trigger are used)
        config: Block sizing constants

    Returns:
        Ordered list of planned blocks
    """
    item_blocks: List[PlannedBlock] = []
    focus_minutes = max(config.min_focus_chunk_minutes, request.pace.focus_minutes_per_session)

    def emit(ranked: RankedItem, priority_rank: int, mode: BlockMode, minutes: int, reason: str) -> PlannedBlock:
        return PlannedBlock(
            block_id=f"block-{len(item_blocks) + 1}",
            work_item_id=ranked.item.id,
            title=ranked.item.title,
            type=ranked.item.type,
            mode=mode,
            minutes=minutes,
            due_at=ranked.item.due_at,
            priority_rank=priority_rank,
            reason=reason,
            due_instant=ranked.due_instant,
        )

    for index, ranked in enumerate(ranked_items):
        priority_rank = index + 1
        prep_minutes = prep_minutes_for(ranked.adjusted_minutes, config)
        item_blocks.append(emit(ranked, priority_rank, BlockMode.PREP, prep_minutes, PREP_REASON))

        remaining = max(config.min_execution_minutes, ranked.adjusted_minutes - prep_minutes)
        while remaining > 0:
            chunk = min(remaining, focus_minutes)
            item_blocks.append(emit(ranked, priority_rank, BlockMode.EXECUTION, chunk, EXECUTION_REASON))
            remaining -= chunk

        for _ in range(spaced_repetition_count(ranked, config)):
            item_blocks.append(
                emit(
                    ranked,
                    priority_rank,
                    BlockMode.SPACED_REPETITION,
                    config.spaced_repetition_minutes,
                    SPACED_REPETITION_REASON,
                )
            )

        if ranked.item.type in config.review_types:
            item_blocks.append(emit(ranked, priority_rank, BlockMode.REVIEW, config.review_minutes, REVIEW_REASON))

    recovery_blocks: List[PlannedBlock] = []
    if request.recompute.trigger == RecomputeTrigger.SESSION_SKIPPED and ranked_items:
        recovery_blocks.append(
            emit(ranked_items[0], 1, BlockMode.REVIEW, config.recovery_minutes, RECOVERY_REASON)
        )

    blocks = recovery_blocks + item_blocks
    return sorted(blocks, key=lambda block: (block.priority_rank, block.due_instant))


def prep_minutes_for(adjusted_minutes: int, config: PlannerConfig = DEFAULT_PLANNER_CONFIG) -> int:
    """Length of the prep block for an item."""
    return int(clamp(round_half_up(adjusted_minutes * config.prep_ratio), config.prep_min_minutes, config.prep_max_minutes))


def spaced_repetition_count(ranked: RankedItem, config: PlannerConfig = DEFAULT_PLANNER_CONFIG) -> int:
    """Number of spaced repetition blocks; zero for non-assessment types."""
    if ranked.item.type not in config.retention_types:
        return 0
    if ranked.days_until_due >= config.spaced_repetition_lead_days:
        return config.spaced_repetition_full_count
    return config.spaced_repetition_short_count
