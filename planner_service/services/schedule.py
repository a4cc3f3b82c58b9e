"""Weekday placement of the training days of a week (0=Monday ... 6=Sunday)."""

from collections.abc import Iterable
from datetime import date, timedelta

MIN_DAYS_PER_WEEK = 2
MAX_DAYS_PER_WEEK = 6


def clamp_days_per_week(days_per_week: int) -> int:
    return min(max(days_per_week, MIN_DAYS_PER_WEEK), MAX_DAYS_PER_WEEK)


def normalize_training_days(days_per_week: int, training_days: Iterable[int] | None = None) -> list[int]:
    """Return exactly ``clamp(days_per_week)`` distinct sorted weekdays.

    Valid user choices are kept (lowest first); missing days are filled with
    the earliest weekdays not already chosen.
    """
    safe_days = clamp_days_per_week(days_per_week)
    unique = sorted({day for day in (training_days or []) if 0 <= day <= 6})
    if len(unique) >= safe_days:
        return unique[:safe_days]

    fallback = [day for day in range(7) if day not in unique]
    return sorted(unique + fallback[: safe_days - len(unique)])


def get_week_start(value: date) -> date:
    return value - timedelta(days=value.weekday())


def get_scheduled_date(
    week_start: date,
    day_index: int,
    days_per_week: int,
    training_days: Iterable[int] | None = None,
) -> date:
    offsets = normalize_training_days(days_per_week, training_days)
    offset = offsets[min(day_index, len(offsets) - 1)]
    return week_start + timedelta(days=offset)
