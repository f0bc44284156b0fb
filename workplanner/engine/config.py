"""Scoring weights and block sizing for the work-plan engine.

Every tunable number the ranking, block-building, and placement code reads
is a field of `PlannerConfig`.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class PlannerConfig:
    """Tunable constants for ranking, decomposition, and placement."""

    # Rank score weights
    priority_weight: float = 0.30
    risk_weight: float = 0.25
    complexity_weight: float = 0.15
    grade_weight_weight: float = 0.15
    urgency_weight: float = 0.15

    # Extra weight applied when the matching preference toggle is on
    high_risk_boost: float = 0.06
    high_weight_boost: float = 0.06
    near_deadline_boost: float = 0.06

    # urgency = clamp(urgency_numerator / days_until_due, 0, urgency_cap)
    urgency_numerator: float = 120.0
    urgency_cap: float = 100.0

    pace_multipliers: Dict[str, float] = field(
        default_factory=lambda: {"slow": 1.2, "steady": 1.0, "fast": 0.86}
    )
    recompute_multipliers: Dict[str, float] = field(
        default_factory=lambda: {"initial": 1.0, "session_skipped": 1.1, "workload_changed": 1.06}
    )
    min_adjusted_minutes: int = 20

    # Block decomposition
    prep_ratio: float = 0.18
    prep_min_minutes: int = 15
    prep_max_minutes: int = 40
    min_execution_minutes: int = 20
    min_focus_chunk_minutes: int = 25
    retention_types: Tuple[str, ...] = ("quiz", "test")
    spaced_repetition_minutes: int = 25
    spaced_repetition_lead_days: int = 4
    spaced_repetition_full_count: int = 2
    spaced_repetition_short_count: int = 1
    review_types: Tuple[str, ...] = ("discussion",)
    review_minutes: int = 20
    recovery_minutes: int = 30

    # Planning horizon, in days
    min_planning_days: int = 7
    max_planning_days: int = 14

    # Notices
    drift_notice_threshold_pct: float = 10.0

    # Orchestrator
    min_recommended_minutes: int = 30
    extra_minutes_per_late_block: int = 30


DEFAULT_PLANNER_CONFIG = PlannerConfig()
