"""Constants for workplanner.

Request defaults and calendar vocabulary. Scoring weights and block sizing live
in `workplanner.engine.config.PlannerConfig`.
"""

from workplanner.config import DEFAULT_TIMEZONE

MINUTES_PER_DAY = 1440

# Day keys indexed Sunday=0 ... Saturday=6
DAY_KEYS = (
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
)
WEEKEND_DAY_KEYS = ("saturday", "sunday")

# Availability defaults
DEFAULT_WEEKDAY_MINUTES = 120
DEFAULT_WEEKEND_MINUTES = 180

# Pace defaults
DEFAULT_FOCUS_MINUTES_PER_SESSION = 50
DEFAULT_BREAK_MINUTES = 10

PLAN_TYPE = "student_work_plan_optimizer"

__all__ = [
    "DEFAULT_TIMEZONE",
    "MINUTES_PER_DAY",
    "DAY_KEYS",
    "WEEKEND_DAY_KEYS",
    "DEFAULT_WEEKDAY_MINUTES",
    "DEFAULT_WEEKEND_MINUTES",
    "DEFAULT_FOCUS_MINUTES_PER_SESSION",
    "DEFAULT_BREAK_MINUTES",
    "PLAN_TYPE",
]
