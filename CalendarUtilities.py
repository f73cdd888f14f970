## Calendar Utility Functions
# Gregorian calendar helpers and Julian Day conversions

import logging
import math

logger = logging.getLogger(__name__)

# global array storing days of the week (index 0 = Sunday)
DAYS = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

DAYS_AR = ["الأحد", "الإثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت"]

MONTHS = ["January", "February", "March", "April", "May", "June", "July", "August", "September",
          "October", "November", "December"]

# first day of the Gregorian calendar: 15 October 1582
GREGORIAN_REFORM = (1582, 10, 15)

# day number (floor(jd + 0.5)) of 15 October 1582
GREGORIAN_REFORM_DAY = 2299161


# Returns the Julian Day (midnight-based, always ends in .5) for the given calendar date.
# Years use historical numbering: there is no year 0 and -1 is 1 BCE.
# Dates before 15 October 1582 are read as Julian calendar dates.
def gregorian_to_julian_day(year, month, day):

    if year == 0:
        raise ValueError("There is no year 0 in the Gregorian calendar")

    # checked against the unshifted date
    gregorian = (year, month, day) >= GREGORIAN_REFORM

    # switch to astronomical numbering (1 BCE = 0)
    if year < 0:
        year += 1

    # January and February count as months 13 and 14 of the previous year
    if month < 3:
        year -= 1
        month += 12

    # century correction only applies once the Gregorian calendar is in force
    a = math.floor(year / 100)
    b = 2 - a + math.floor(a / 4) if gregorian else 0

    jd = math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day + b - 1524.5
    logger.debug("Gregorian %s-%s-%s -> JD %s", year, month, day, jd)

    return jd


# Returns (year, month, day) for the given Julian Day; month is 1-based.
# Day numbers before 2299161 fall in the Julian calendar.
def julian_day_to_gregorian(jd):

    z = math.floor(jd + 0.5)

    if z < GREGORIAN_REFORM_DAY:
        a = z
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e)
    month = e - 13 if e > 13 else e - 1
    year = c - 4716 if month > 2 else c - 4715

    # no year zero
    if year <= 0:
        year -= 1

    logger.debug("JD %s -> Gregorian %s-%s-%s", jd, year, month, day)

    return year, month, day


# Returns the day of the week for the given Julian Day (0 = Sunday ... 6 = Saturday)
def day_of_week(jd):
    return (math.floor(jd + 0.5) + 1) % 7
