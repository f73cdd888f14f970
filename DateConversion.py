import logging

from CalendarUtilities import DAYS, MONTHS, day_of_week, gregorian_to_julian_day, julian_day_to_gregorian
from HijriCalendar import register_adjustments
from HijriDate import HijriDate
import Logger
import Settings

logger = logging.getLogger(__name__)


# Given a Hijri date (1-based month), returns (day of week, day, Gregorian month name, year)
def hijri_to_greg(day, month, year):

    # raises HijriRangeError for an invalid month or day
    date = HijriDate(year, month - 1, day)

    greg_year, greg_month, greg_day = date.to_gregorian_tuple()

    return date.get_day_name_en(), greg_day, MONTHS[greg_month - 1], greg_year


# Given a Gregorian date (dates before 15 October 1582 are Julian), returns (day of week, day, Hijri month name, year)
def greg_to_hijri(day, month, year):

    # Check for invalid month entries
    if month < 1 or month > 12:
        raise ValueError("Invalid month entered")

    jd = gregorian_to_julian_day(year, month, day)

    # a day that does not exist (e.g. 30 February, or 10 October 1582) comes back as a different date
    if julian_day_to_gregorian(jd) != (year, month, day):
        raise ValueError("Invalid day entered")

    date = HijriDate.from_julian_day(jd)

    return DAYS[day_of_week(jd)], date.day, date.get_month_name_en(), date.year


# Asks for a Hijri or Gregorian date and returns it converted to the other calendar
def convert():

    # get calendar type from user
    date_type = (input("Is this a Hijri or Gregorian date? (Enter 'h' or 'g') ")).strip().lower()

    if date_type != 'h' and date_type != 'g':
        return "Error: invalid input."

    try:
        # get year, month and day from user
        year = int(input("Enter year number: "))
        month = int(input("Enter month number: "))
        day = int(input("Enter day number: "))

        if date_type == 'h':
            day_of_week_name, day_cur, month_cur, year_cur = hijri_to_greg(day, month, year)
        else:
            day_of_week_name, day_cur, month_cur, year_cur = greg_to_hijri(day, month, year)

    except ValueError as e:
        logger.info("Conversion rejected: %s", e)
        return f"Error: {e}"

    return day_of_week_name + ", " + str(day_cur) + " " + month_cur + ", " + str(year_cur)


def main():
    Logger.setup_logger(level=Settings.log_level(), log_file=Settings.log_file())

    path = Settings.adjustments_file()
    if path:
        rules = Settings.load_adjustments(path)
        register_adjustments(rules)
        logger.info("Loaded %d adjustment(s) from %s", len(rules), path)

    print(convert())


if __name__ == "__main__":
    main()
