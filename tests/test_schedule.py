from datetime import date

import pytest

from planner_service.services.age_band import calculate_age, calculate_age_band
from planner_service.schemas.enums import AgeBand
from planner_service.services.schedule import get_scheduled_date, get_week_start, normalize_training_days


@pytest.mark.parametrize(
    "days_per_week,training_days,expected",
    [
        (3, [0, 2, 4], [0, 2, 4]),
        (3, [4, 2, 0, 2], [0, 2, 4]),
        (3, [6, 5, 4, 3], [3, 4, 5]),
        (3, [], [0, 1, 2]),
        (4, [5], [0, 1, 2, 5]),
        (2, [9, -1, 3], [0, 3]),
        (1, None, [0, 1]),
        (9, None, [0, 1, 2, 3, 4, 5]),
    ],
)
def test_normalize_training_days(days_per_week, training_days, expected):
    assert normalize_training_days(days_per_week, training_days) == expected


def test_week_start_is_monday():
    assert get_week_start(date(2026, 10, 21)) == date(2026, 10, 19)
    assert get_week_start(date(2026, 10, 19)) == date(2026, 10, 19)
    assert get_week_start(date(2026, 10, 25)) == date(2026, 10, 19)


def test_scheduled_dates_follow_training_days():
    week_start = date(2026, 10, 19)
    dates = [get_scheduled_date(week_start, i, 3, [1, 3, 5]) for i in range(3)]

    assert dates == [date(2026, 10, 20), date(2026, 10, 22), date(2026, 10, 24)]


def test_scheduled_date_overrun_uses_last_day():
    assert get_scheduled_date(date(2026, 10, 19), 5, 2, [0, 3]) == date(2026, 10, 22)


@pytest.mark.parametrize(
    "birth_date,expected",
    [
        (date(2010, 1, 1), AgeBand.TEEN),
        (date(2008, 10, 20), AgeBand.TEEN),  # turns 18 tomorrow
        (date(2008, 10, 19), AgeBand.PRIME),
        (date(1997, 1, 1), AgeBand.PRIME),
        (date(1996, 10, 19), AgeBand.BUILD),
        (date(1980, 5, 5), AgeBand.REBUILD),
        (date(1970, 5, 5), AgeBand.STRONG50),
        (date(1950, 5, 5), AgeBand.ACTIVE60),
    ],
)
def test_age_band_boundaries(birth_date, expected):
    assert calculate_age_band(birth_date, date(2026, 10, 19)) is expected


def test_age_counts_completed_years():
    assert calculate_age(date(2000, 12, 31), date(2026, 12, 30)) == 25
    assert calculate_age(date(2000, 12, 31), date(2026, 12, 31)) == 26
