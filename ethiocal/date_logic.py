"""
Ethiocal - Date Logic Module.

This module provides the leap-year rules of both calendars and the civil
day count (proleptic Julian Day Number) used as the common intermediate
representation for all date arithmetic.

The day count is pure integer arithmetic, so it has no year limits and no
timezone behaviour, unlike ``time.mktime`` or ``datetime.date``.

Classes:
    LeapYearRule: Leap-year and month-length rules for both calendars.

Functions:
    gregorian_to_jdn: Gregorian (year, month, day) to day count.
    jdn_to_gregorian: Day count to Gregorian (year, month, day).
    weekday_of_jdn: Weekday of a day count.
"""

from typing import Tuple

from ethiocal.schema import Weekday


GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

ETHIOPIAN_MONTH_DAYS = 30
PAGUME = 13


class LeapYearRule:
    """
    Decides leap-year status and month lengths.

    Example:
        >>> rule = LeapYearRule()
        >>> rule.is_ethiopian_leap(2015)
        True
        >>> rule.days_in_ethiopian_month(2016, 13)
        5
    """

    def is_ethiopian_leap(self, year: int) -> bool:
        """
        Determines if an Ethiopian year is a leap year.

        The leap day is the sixth day of Pagume, added every fourth
        year without exception.

        Args:
            year: Ethiopian year.

        Returns:
            True if year % 4 == 3.
        """
        return year % 4 == 3

    def is_gregorian_leap(self, year: int) -> bool:
        """
        Determines if a Gregorian year is a leap year.

        A year is a leap year if it is divisible by 4, except for
        century years which must be divisible by 400.

        Args:
            year: Gregorian year.

        Returns:
            True if the year is a leap year, False otherwise.
        """
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

    def days_in_ethiopian_month(self, year: int, month: int) -> int:
        """
        Returns the number of days in an Ethiopian month.

        Args:
            year: Ethiopian year.
            month: Month number (1-13).

        Returns:
            30 for months 1-12; 6 for Pagume in a leap year, else 5.

        Raises:
            ValueError: If month is not in range 1-13.
        """
        if not 1 <= month <= PAGUME:
            raise ValueError(f"Month must be between 1 and 13, got {month}")
        if month == PAGUME:
            return 6 if self.is_ethiopian_leap(year) else 5
        return ETHIOPIAN_MONTH_DAYS

    def days_in_gregorian_month(self, year: int, month: int) -> int:
        """
        Returns the number of days in a Gregorian month.

        Args:
            year: Gregorian year.
            month: Month number (1-12).

        Returns:
            Number of days in the month, 29 for February in a leap year.

        Raises:
            ValueError: If month is not in range 1-12.
        """
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {month}")
        if month == 2 and self.is_gregorian_leap(year):
            return 29
        return GREGORIAN_MONTH_DAYS[month - 1]


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """
    Returns the Julian Day Number of a proleptic Gregorian date.

    Fliegel & Van Flandern's closed form, shifted so that the year
    starts in March and February's length only affects the next year.

    Args:
        year: Gregorian year.
        month: Month number (1-12).
        day: Day of the month.

    Returns:
        Julian Day Number (2000-01-01 is 2451545).
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return (
        day
        + (153 * m + 2) // 5
        + 365 * y
        + y // 4
        - y // 100
        + y // 400
        - 32045
    )


def jdn_to_gregorian(jdn: int) -> Tuple[int, int, int]:
    """
    Returns the proleptic Gregorian (year, month, day) of a day count.

    Inverse of ``gregorian_to_jdn``.

    Args:
        jdn: Julian Day Number.

    Returns:
        Tuple of (year, month, day).
    """
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - 146097 * b // 4
    d = (4 * c + 3) // 1461
    e = c - 1461 * d // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return year, month, day


def weekday_of_jdn(jdn: int) -> Weekday:
    """Returns the weekday of a day count; JDN 0 was a Monday."""
    return Weekday(jdn % 7)
