#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Immutable Hijri date value with conversion, arithmetic, comparison,
formatting and parsing.
"""
import datetime
import re

from CalendarUtilities import DAYS, DAYS_AR, day_of_week, gregorian_to_julian_day, julian_day_to_gregorian
from HijriCalendar import MONTH_NAMES_AR, MONTH_NAMES_EN, default_calendar

FORMAT_TOKENS = re.compile(r"yyyy|yy|MM|M|dd|d")
PARSE_PATTERN = re.compile(r"(\d{1,4})-(\d{1,2})-(\d{1,2})", re.ASCII)


class HijriRangeError(ValueError):
    """Month or day outside the valid range."""


class HijriFormatError(ValueError):
    """Text that is not a yyyy-MM-dd Hijri date."""


class HijriDate:
    """
    A date in the tabular Hijri calendar.

    Months are 0-based (Muharram = 0). The date keeps a snapshot of the
    calendar it was validated against, so its Julian Day does not change when
    adjustments are registered later.
    """

    __slots__ = ("_year", "_month", "_day", "_calendar")

    def __init__(self, year, month, day, calendar=None):
        calendar = (calendar or default_calendar()).snapshot()
        month = int(month)

        if month < 0 or month > 11:
            raise HijriRangeError("Month must be between 0 and 11")

        days_in_month = calendar.days_in_month(year, month)
        if day < 1 or day > days_in_month:
            raise HijriRangeError(f"Day must be between 1 and {days_in_month} for month {month} in year {year}")

        self._year = year
        self._month = month
        self._day = day
        self._calendar = calendar

    ## Construction

    @classmethod
    def now(cls, calendar=None):
        return cls.from_gregorian(datetime.date.today(), calendar)

    @classmethod
    def from_gregorian(cls, date, calendar=None):
        jd = gregorian_to_julian_day(date.year, date.month, date.day)
        return cls.from_julian_day(jd, calendar)

    @classmethod
    def from_julian_day(cls, jd, calendar=None):
        calendar = calendar or default_calendar()
        year, month, day = calendar.julian_day_to_hijri(jd)
        return cls(year, month, day, calendar)

    @classmethod
    def parse(cls, text, calendar=None):
        match = PARSE_PATTERN.fullmatch(text)
        if not match:
            raise HijriFormatError("Invalid date format. Expected yyyy-MM-dd")

        year, month, day = (int(group) for group in match.groups())

        # input months are 1-based
        month -= 1
        if month < 0 or month > 11:
            raise HijriFormatError("Month must be between 1 and 12 in the input string")

        return cls(year, month, day, calendar)

    ## Accessors

    @property
    def year(self):
        return self._year

    @property
    def month(self):
        return self._month

    @property
    def day(self):
        return self._day

    @property
    def calendar(self):
        return self._calendar

    def get_full_year(self):
        return self._year

    def get_month(self):
        return self._month

    def get_date(self):
        return self._day

    # day of the week, 0 = Sunday
    def get_day(self):
        return day_of_week(self.to_julian_day())

    def get_month_name(self):
        return MONTH_NAMES_AR[self._month]

    def get_month_name_en(self):
        return MONTH_NAMES_EN[self._month]

    def get_day_name(self):
        return DAYS_AR[self.get_day()]

    def get_day_name_en(self):
        return DAYS[self.get_day()]

    def is_leap_year(self):
        return self._calendar.is_leap_year(self._year)

    def length_of_month(self):
        return self._calendar.days_in_month(self._year, self._month)

    ## Conversion

    def to_julian_day(self):
        return self._calendar.hijri_to_julian_day(self._year, self._month, self._day)

    # (year, month, day) with 1-based month; years before 1 CE are negative
    def to_gregorian_tuple(self):
        return julian_day_to_gregorian(self.to_julian_day())

    def to_gregorian(self):
        return datetime.date(*self.to_gregorian_tuple())

    ## Arithmetic

    def plus_days(self, days):
        # civil days, so the result follows the Gregorian day count rather than Hijri months
        return HijriDate.from_julian_day(self.to_julian_day() + days, self._calendar)

    def plus_months(self, months):
        years, month = divmod(self._month + months, 12)
        year = self._year + years

        # clamp rather than overflow into the next month
        day = min(self._day, self._calendar.days_in_month(year, month))

        return HijriDate(year, month, day, self._calendar)

    def plus_years(self, years):
        year = self._year + years
        day = min(self._day, self._calendar.days_in_month(year, self._month))

        return HijriDate(year, self._month, day, self._calendar)

    def start_of_month(self):
        return HijriDate(self._year, self._month, 1, self._calendar)

    def end_of_month(self):
        return HijriDate(self._year, self._month, self.length_of_month(), self._calendar)

    @staticmethod
    def days_between(start, end):
        return abs(end.to_julian_day() - start.to_julian_day())

    ## Comparison

    def _key(self):
        return self._year, self._month, self._day

    # Returns -1, 0 or 1
    def compare_to(self, other):
        if self._key() < other._key():
            return -1
        if self._key() > other._key():
            return 1
        return 0

    def equals(self, other):
        return self.compare_to(other) == 0

    def is_before(self, other):
        return self.compare_to(other) < 0

    def is_after(self, other):
        return self.compare_to(other) > 0

    def __eq__(self, other):
        if not isinstance(other, HijriDate):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, HijriDate):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other):
        if not isinstance(other, HijriDate):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other):
        if not isinstance(other, HijriDate):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other):
        if not isinstance(other, HijriDate):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self):
        return hash(self._key())

    ## Text

    def format(self, pattern=None):
        if not pattern:
            return f"{self._year}-{self._month + 1}-{self._day}"

        values = {
            "yyyy": str(self._year).zfill(4),
            "yy": str(self._year % 100).zfill(2),
            "MM": str(self._month + 1).zfill(2),
            "M": str(self._month + 1),
            "dd": str(self._day).zfill(2),
            "d": str(self._day),
        }

        return FORMAT_TOKENS.sub(lambda match: values[match.group()], pattern)

    def __str__(self):
        return self.format()

    def __repr__(self):
        return f"HijriDate({self._year}, {self._month}, {self._day})"
