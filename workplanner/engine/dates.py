"""Date and number helpers for the work-plan engine.

All day arithmetic happens on local calendar dates in the request's time zone.
Naive datetimes are treated as UTC.
"""

import logging
import math
from datetime import MAXYEAR, date, datetime, timedelta, timezone
from typing import Union
from zoneinfo import ZoneInfo

from dateutil import parser as date_parser

from workplanner.models.constants import DAY_KEYS

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


def ensure_aware(dt: datetime) -> datetime:
    """Attach UTC to a naive datetime; leave aware datetimes alone."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def parse_due_at(value: Union[str, datetime], fallback: datetime) -> datetime:
    """Parse an ISO-8601 due timestamp.

    Unparseable values resolve to `fallback`, the planning "now".

    Args:
        value: ISO-8601 string or datetime
        fallback: Instant used when `value` cannot be parsed

    Returns:
        Timezone-aware datetime
    """
    if isinstance(value, datetime):
        return ensure_aware(value)
    try:
        return ensure_aware(date_parser.isoparse(value))
    except (ValueError, OverflowError, TypeError):
        logger.warning(f"Unparseable due date {value!r}; treating it as due now")
        return ensure_aware(fallback)


def days_until(due: datetime, now: datetime) -> int:
    """Whole days from `now` to `due`, rounded up, never less than 1."""
    seconds = (ensure_aware(due) - ensure_aware(now)).total_seconds()
    return max(1, math.ceil(seconds / SECONDS_PER_DAY))


def local_date(dt: datetime, time_zone: str) -> date:
    """Calendar date of `dt` in `time_zone`.

    Instants whose local time falls outside the datetime range resolve to
    `date.min` or `date.max`.
    """
    aware = ensure_aware(dt)
    try:
        return aware.astimezone(ZoneInfo(time_zone)).date()
    except OverflowError:
        logger.warning(f"{aware.isoformat()} is out of range in {time_zone}; clamping its local date")
        return date.max if aware.year == MAXYEAR else date.min


def days_between(start: date, end: date) -> int:
    """Signed number of calendar days from `start` to `end`."""
    return (end - start).days


def add_days(day: date, days: int) -> date:
    return day + timedelta(days=days)


def day_key(day: date) -> str:
    """Lowercase weekday name; Sunday is index 0."""
    return DAY_KEYS[(day.weekday() + 1) % 7]


def clamp(value: float, lower: float, upper: float) -> float:
    return min(upper, max(lower, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return math.floor(value + 0.5)


def round2(value: float) -> float:
    """Round half-up to two decimals."""
    return math.floor(value * 100 + 0.5) / 100


def format_number(value: float) -> str:
    """Render a number without a trailing `.0` when it is integral."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
