"""
Tests for Gregorian helpers and Julian Day conversions.
"""

from __future__ import annotations

import pytest

from CalendarUtilities import (
    day_of_week,
    gregorian_to_julian_day,
    julian_day_to_gregorian,
)


@pytest.mark.parametrize(
    "date, jd",
    [
        ((2000, 1, 1), 2451544.5),
        ((2023, 3, 23), 2460026.5),
        ((1582, 10, 15), 2299160.5),
        ((1582, 10, 4), 2299159.5),
        ((-4713, 1, 1), -0.5),
    ],
)
def test_gregorian_to_julian_day(date, jd) -> None:
    assert gregorian_to_julian_day(*date) == jd


def test_julian_calendar_days_before_reform() -> None:
    """4 October 1582 (Julian) is followed directly by 15 October 1582 (Gregorian)."""
    assert gregorian_to_julian_day(1582, 10, 15) - gregorian_to_julian_day(1582, 10, 4) == 1


@pytest.mark.parametrize(
    "jd, date",
    [
        (2451544.5, (2000, 1, 1)),
        (2460041, (2023, 4, 6)),
        (1948440, (622, 7, 16)),
        (2299160.5, (1582, 10, 15)),
        (-0.5, (-4713, 1, 1)),
    ],
)
def test_julian_day_to_gregorian(jd, date) -> None:
    assert julian_day_to_gregorian(jd) == date


def test_noon_and_midnight_resolve_to_same_day() -> None:
    assert julian_day_to_gregorian(2460026.5) == julian_day_to_gregorian(2460027) == (2023, 3, 23)
    assert julian_day_to_gregorian(2460027.49) == (2023, 3, 23)


@pytest.mark.parametrize(
    "date",
    [(2024, 2, 29), (1900, 3, 1), (1583, 1, 1), (1000, 6, 15), (1, 1, 1), (-1, 12, 31), (-44, 3, 15)],
)
def test_gregorian_round_trip(date) -> None:
    assert julian_day_to_gregorian(gregorian_to_julian_day(*date)) == date


def test_no_year_zero() -> None:
    with pytest.raises(ValueError, match="no year 0"):
        gregorian_to_julian_day(0, 1, 1)
    assert gregorian_to_julian_day(-1, 12, 31) + 1 == gregorian_to_julian_day(1, 1, 1)


def test_day_of_week() -> None:
    assert day_of_week(2460026.5) == 4  # Thursday 23 March 2023
    assert day_of_week(2451544.5) == 6  # Saturday 1 January 2000
    assert day_of_week(2460027) == 4

