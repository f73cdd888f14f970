#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tabular Hijri calendar: 30-year cycle of 10631 days with 11 leap years.
Conversions go through the Julian Day; month lengths can be overridden by
registered adjustments (local moon-sighting decisions).
"""
import logging
from collections import namedtuple
from collections.abc import Mapping
from enum import IntEnum

import numpy as np

logger = logging.getLogger(__name__)

# positions in the 30-year cycle whose year has 355 days
LEAP_POSITIONS = {2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29}

CYCLE_YEARS = 30
CYCLE_DAYS = 10631

# Julian Day of 1 Muharram 1 AH is HIJRI_EPOCH + 1 (16 July 622, Julian calendar)
HIJRI_EPOCH = 1948439


class HijriMonth(IntEnum):
    MUHARRAM = 0
    SAFAR = 1
    RABI_AL_AWWAL = 2
    RABI_AL_THANI = 3
    JUMADA_AL_AWWAL = 4
    JUMADA_AL_THANI = 5
    RAJAB = 6
    SHABAN = 7
    RAMADAN = 8
    SHAWWAL = 9
    DHU_AL_QIDAH = 10
    DHU_AL_HIJJAH = 11


MONTH_NAMES_AR = ["محرم", "صفر", "ربيع الأول", "ربيع الثاني", "جمادى الأولى", "جمادى الآخرة",
                  "رجب", "شعبان", "رمضان", "شوال", "ذو القعدة", "ذو الحجة"]

MONTH_NAMES_EN = ["Muharram", "Safar", "Rabi' al-Awwal", "Rabi' al-Thani", "Jumada al-Awwal",
                  "Jumada al-Thani", "Rajab", "Sha'ban", "Ramadan", "Shawwal", "Dhu al-Qi'dah",
                  "Dhu al-Hijjah"]


# Returns the 1-based position of the year in its 30-year cycle (0 is mapped to 30).
# Python's % never returns a negative remainder, so years <= 0 stay on the same cycle.
def effective_position(year):
    position = (year + 2) % CYCLE_YEARS
    return CYCLE_YEARS if position == 0 else position


# Returns True if the given Hijri year is a leap year (Dhu al-Hijjah has 30 days)
def is_leap_year(year):
    return effective_position(year) in LEAP_POSITIONS


# Returns number of days in the given Hijri year, ignoring adjustments
def year_length(year):
    return 355 if is_leap_year(year) else 354


# index i holds the length of year 30k + i + 1
YEAR_LENGTHS = np.array([year_length(i + 1) for i in range(CYCLE_YEARS)])

# days from the start of the cycle to the start of each year (last entry = CYCLE_DAYS)
YEAR_OFFSETS = np.concatenate(([0], np.cumsum(YEAR_LENGTHS)))

# even months have 30 days, odd months 29 (Muharram = 0)
MONTH_LENGTHS = np.array([30, 29] * 6)
LEAP_MONTH_LENGTHS = np.concatenate((MONTH_LENGTHS[:11], [30]))

MONTH_OFFSETS = np.concatenate(([0], np.cumsum(MONTH_LENGTHS)))
LEAP_MONTH_OFFSETS = np.concatenate(([0], np.cumsum(LEAP_MONTH_LENGTHS)))


# days: offset added to the month length; month/year: None matches any
AdjustmentRule = namedtuple("AdjustmentRule", ["days", "month", "year"], defaults=(None, None, None))


def _as_rule(rule):
    if isinstance(rule, AdjustmentRule):
        pass
    elif isinstance(rule, Mapping):
        rule = AdjustmentRule(**rule)
    else:
        rule = AdjustmentRule(*rule)

    if rule.month is not None and not 0 <= rule.month <= 11:
        raise ValueError(f"Adjustment month must be between 0 and 11, got {rule.month}")

    return rule


class AdjustmentRegistry:
    """Ordered, immutable collection of adjustment rules."""

    def __init__(self, rules=None):
        self._rules = tuple(_as_rule(rule) for rule in (rules or ()))

    @property
    def rules(self):
        return self._rules

    def __len__(self):
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)

    def __repr__(self):
        return f"AdjustmentRegistry({list(self._rules)!r})"

    # Returns the first rule (in registration order) matching the year and month, or None
    def lookup(self, year, month):
        for rule in self._rules:
            if (rule.year is None or rule.year == year) and (rule.month is None or rule.month == month):
                return rule
        return None

    # Returns the day offset registered for the year and month (0 if none)
    def offset(self, year, month):
        rule = self.lookup(year, month)
        if rule is None or rule.days is None:
            return 0
        return rule.days


class HijriCalendar:
    """
    Conversion context for the tabular Hijri calendar.

    Holds its own adjustment registry. Registering replaces the registry in a
    single assignment; there is no locking, so a calendar shared between threads
    must be configured before use or guarded by the caller.
    """

    def __init__(self, adjustments=None):
        if isinstance(adjustments, AdjustmentRegistry):
            self._registry = adjustments
        else:
            self._registry = AdjustmentRegistry(adjustments)

    @property
    def registry(self):
        return self._registry

    def register(self, rules):
        self._registry = AdjustmentRegistry(rules)
        logger.debug("Registered %d adjustment rule(s)", len(self._registry))

    # Returns a calendar bound to the current registry; later registrations do not reach it
    def snapshot(self):
        return HijriCalendar(self._registry)

    is_leap_year = staticmethod(is_leap_year)

    # Returns length of given hijri month (0-based), including any adjustment
    def days_in_month(self, year, month):

        # Dhu al-Hijjah of a leap year is fixed at 30 days; adjustments are not consulted
        if month == 11 and is_leap_year(year):
            return 30

        return int(MONTH_LENGTHS[month]) + self._registry.offset(year, month)

    def hijri_to_julian_day(self, year, month, day):

        # complete 30-year cycles and the complete years left over
        cycles, remaining_years = divmod(year - 1, CYCLE_YEARS)
        total = cycles * CYCLE_DAYS + int(YEAR_OFFSETS[remaining_years])

        # complete months of the current year
        for m in range(month):
            total += self.days_in_month(year, m)

        total += day + self._registry.offset(year, month)

        jd = total + HIJRI_EPOCH
        logger.debug("Hijri %s-%s-%s -> JD %s (%d cycles, %d years)", year, month, day, jd, cycles,
                     remaining_years)
        return jd

    # Returns (year, month, day) for the given Julian Day; adjustments are not applied
    def julian_day_to_hijri(self, jd):

        # days since 1 Muharram 1 AH, using the same civil-day rounding as the Gregorian inverse
        days = int(np.floor(jd + 0.5)) - (HIJRI_EPOCH + 1)

        cycles, remainder = divmod(days, CYCLE_DAYS)

        # complete years inside the current cycle
        years = int(np.searchsorted(YEAR_OFFSETS, remainder, side="right")) - 1
        day_of_year = remainder - int(YEAR_OFFSETS[years])
        year = cycles * CYCLE_YEARS + years + 1

        offsets = LEAP_MONTH_OFFSETS if is_leap_year(year) else MONTH_OFFSETS
        month = int(np.searchsorted(offsets, day_of_year, side="right")) - 1
        day = day_of_year - int(offsets[month]) + 1

        logger.debug("JD %s -> Hijri %s-%s-%s (%d cycles, %d years, day %d of year)", jd, year, month,
                     day, cycles, years, day_of_year)
        return year, month, day


# process-wide calendar used when no calendar is passed explicitly
DEFAULT_CALENDAR = HijriCalendar()


def default_calendar():
    return DEFAULT_CALENDAR


# Replaces the default calendar's adjustments (an empty list clears them)
def register_adjustments(rules):
    DEFAULT_CALENDAR.register(rules)
