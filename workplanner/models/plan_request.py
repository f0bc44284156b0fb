"""Work-plan optimize request models for workplanner.

Every sub-object is optional; omitted sections fall back to the defaults below.
"""

from enum import Enum
from typing import Dict, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from pydantic import Field, field_validator

from workplanner.models.base import CamelModel
from workplanner.models.constants import (
    DAY_KEYS,
    DEFAULT_BREAK_MINUTES,
    DEFAULT_FOCUS_MINUTES_PER_SESSION,
    DEFAULT_TIMEZONE,
    DEFAULT_WEEKDAY_MINUTES,
    DEFAULT_WEEKEND_MINUTES,
    MINUTES_PER_DAY,
)
from workplanner.models.work_item import WorkItemInput


class ProductivityProfile(str, Enum):
    """How fast the student usually works relative to estimates."""
    SLOW = "slow"
    STEADY = "steady"
    FAST = "fast"


class TimeOfDay(str, Enum):
    """Preferred focus window."""
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


class RecomputeTrigger(str, Enum):
    """Why a plan is being (re)generated."""
    INITIAL = "initial"
    SESSION_SKIPPED = "session_skipped"
    WORKLOAD_CHANGED = "workload_changed"


class Availability(CamelModel):
    """Daily study capacity."""

    timezone: str = Field(DEFAULT_TIMEZONE, description="IANA time zone used for day boundaries")
    weekday_minutes: int = Field(DEFAULT_WEEKDAY_MINUTES, ge=0, le=MINUTES_PER_DAY)
    weekend_minutes: int = Field(DEFAULT_WEEKEND_MINUTES, ge=0, le=MINUTES_PER_DAY)
    overrides: Dict[str, Optional[int]] = Field(
        default_factory=dict,
        description="Per-weekday capacity overrides keyed by lowercase day name; null keeps the default",
    )

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown time zone: {value!r}")
        return value

    @field_validator("overrides")
    @classmethod
    def _known_day_keys(cls, value: Dict[str, Optional[int]]) -> Dict[str, int]:
        normalized = {}
        for key, minutes in value.items():
            day_key = key.strip().lower()
            if day_key not in DAY_KEYS:
                raise ValueError(f"Unknown day in overrides: {key!r}")
            if minutes is None:
                continue
            if minutes > MINUTES_PER_DAY:
                raise ValueError(f"Override for {day_key} exceeds {MINUTES_PER_DAY} minutes")
            normalized[day_key] = minutes
        return normalized


class Pace(CamelModel):
    """Working pace and session length."""

    productivity_profile: ProductivityProfile = Field(ProductivityProfile.STEADY)
    focus_minutes_per_session: int = Field(DEFAULT_FOCUS_MINUTES_PER_SESSION, gt=0, le=MINUTES_PER_DAY)
    break_minutes: int = Field(DEFAULT_BREAK_MINUTES, ge=0, le=MINUTES_PER_DAY)


class Priorities(CamelModel):
    """Ranking preference toggles."""

    prefer_high_risk: bool = False
    prefer_high_weight: bool = False
    prefer_near_deadline: bool = False


class Behavior(CamelModel):
    """Recent behavioral signals."""

    sessions_skipped_last_7d: int = Field(0, ge=0, alias="sessionsSkippedLast7d")
    recent_snooze_rate: float = Field(0, ge=0, le=1)
    avg_completion_drift_pct: float = Field(0, ge=-90, le=500, description="Average overrun versus estimate, in percent")
    preferred_time_of_day: TimeOfDay = Field(TimeOfDay.EVENING)


class Recompute(CamelModel):
    """Recompute metadata."""

    trigger: RecomputeTrigger = Field(RecomputeTrigger.INITIAL)
    workload_change_note: str = ""
    new_assessments_added: int = Field(0, ge=0)


class WorkPlanOptimizeRequest(CamelModel):
    """Full input to the work-plan optimizer."""

    availability: Availability = Field(default_factory=Availability)
    pace: Pace = Field(default_factory=Pace)
    priorities: Priorities = Field(default_factory=Priorities)
    behavior: Behavior = Field(default_factory=Behavior)
    recompute: Recompute = Field(default_factory=Recompute)
    work_items: List[WorkItemInput] = Field(default_factory=list)
