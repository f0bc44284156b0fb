"""Work-plan engine for workplanner."""

from workplanner.engine.config import PlannerConfig, DEFAULT_PLANNER_CONFIG
from workplanner.engine.ranking import rank_work_items
from workplanner.engine.blocks import build_blocks
from workplanner.engine.day_schedule import build_day_schedule, compute_planning_days
from workplanner.engine.placement import place_blocks, PlacementResult
from workplanner.engine.explain import build_adjustments, build_explanations
from workplanner.engine.optimizer import optimize_work_plan, build_next_best_action

__all__ = [
    "PlannerConfig",
    "DEFAULT_PLANNER_CONFIG",
    "rank_work_items",
    "build_blocks",
    "build_day_schedule",
    "compute_planning_days",
    "place_blocks",
    "PlacementResult",
    "build_adjustments",
    "build_explanations",
    "optimize_work_plan",
    "build_next_best_action",
]
