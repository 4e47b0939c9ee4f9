"""
Ethiocal - Data Schema Module.

This module defines the value types shared by every part of the system
and the static calendar tables (month names, weekday names, holiday
rules) that are built once at import and never mutated.

Ethiopian Calendar Context:
    - 12 months of 30 days followed by Pagume (5 days, 6 in a leap year)
    - A year is leap when year % 4 == 3
    - 1 Meskerem (New Year) falls on 11 or 12 September in the modern era

Classes:
    Weekday: Monday-first enumeration of the days of the week.
    Evangelist: Four-year evangelist cycle labels.
    EthiopianDate: A date in the Ethiopian calendar.
    GregorianDate: A date in the proleptic Gregorian calendar.
    InvalidDate: Failure value describing a rejected date.
    InvalidDateError: Exception form of InvalidDate.
    HolidayEntry: One fixed holiday rule.
    CalendarTables: Immutable bundle of names and holiday rules.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


ETHIOPIAN = "Ethiopian"
GREGORIAN = "Gregorian"


class Weekday(Enum):
    """
    Day of the week, Monday first.

    The ordinal matches ``datetime.date.weekday()`` and the Julian Day
    Number modulo 7, so index 0 is Monday and index 6 is Sunday.
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def sunday_first_index(self) -> int:
        """Column of this weekday in a Sunday-first grid."""
        return (self.value + 1) % 7


class Evangelist(Enum):
    """
    Evangelist cycle label for an Ethiopian year.

    Selected by Amete Alem modulo 4. The Lukas year is always the
    Ethiopian leap year.
    """

    YOHANNES = 0
    MATHEWOS = 1
    MARKOS = 2
    LUKAS = 3

    @property
    def display_name(self) -> str:
        """Returns the transliterated name, e.g. 'Mathewos'."""
        return self.name.capitalize()


@dataclass(frozen=True)
class InvalidDate:
    """
    Describes why a date was rejected.

    Returned, never raised, by conversion and validation functions so
    that callers can present the failure and ask again.

    Attributes:
        calendar: Calendar the rejected value belongs to.
        field_name: Offending field ("year", "month", "day" or "input").
        value: The value as received.
        message: A client-facing explanation.
    """

    calendar: str
    field_name: str
    value: str
    message: str

    def __str__(self) -> str:
        """Returns a formatted error message for client display."""
        return f"Invalid {self.calendar} date: '{self.field_name}' - {self.message}"


class InvalidDateError(ValueError):
    """Raised by the ``create`` constructors when given an invalid date."""

    def __init__(self, invalid: InvalidDate):
        super().__init__(str(invalid))
        self.invalid = invalid


@dataclass(frozen=True, order=True)
class EthiopianDate:
    """
    A date in the Ethiopian calendar.

    Instances are plain values. Build them through ``DateValidator`` or
    ``EthiopianDate.create`` when the fields come from user input.

    Attributes:
        year: Ethiopian year (Amete Mihret), 1 or later.
        month: 1 (Meskerem) to 13 (Pagume).
        day: 1 to 30, or 1 to 5/6 in Pagume.
    """

    year: int
    month: int
    day: int

    @classmethod
    def create(cls, year: int, month: int, day: int) -> "EthiopianDate":
        """
        Builds a validated EthiopianDate.

        Raises:
            InvalidDateError: If the fields do not form a valid date.
        """
        from ethiocal.validator import DateValidator

        invalid = DateValidator().validate_ethiopian(year, month, day)
        if invalid is not None:
            raise InvalidDateError(invalid)
        return cls(year, month, day)

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.year, self.month, self.day

    def __str__(self) -> str:
        return f"{self.year}-{self.month}-{self.day}"


@dataclass(frozen=True, order=True)
class GregorianDate:
    """
    A date in the proleptic Gregorian calendar.

    Unlike ``datetime.date`` this type has no upper year bound.

    Attributes:
        year: Gregorian year, 1 or later.
        month: 1 to 12.
        day: 1 to 28/29/30/31 depending on month and leap year.
    """

    year: int
    month: int
    day: int

    @classmethod
    def create(cls, year: int, month: int, day: int) -> "GregorianDate":
        """
        Builds a validated GregorianDate.

        Raises:
            InvalidDateError: If the fields do not form a valid date.
        """
        from ethiocal.validator import DateValidator

        invalid = DateValidator().validate_gregorian(year, month, day)
        if invalid is not None:
            raise InvalidDateError(invalid)
        return cls(year, month, day)

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.year, self.month, self.day

    def __str__(self) -> str:
        return f"{self.year}-{self.month}-{self.day}"


@dataclass(frozen=True)
class HolidayEntry:
    """
    A fixed Ethiopian holiday rule.

    Attributes:
        month: Ethiopian month of the holiday.
        day: Day of the month in a common year.
        name: Display name.
        leap_day: Day used instead of ``day`` in an Ethiopian leap year,
            or None when the holiday does not move.
    """

    month: int
    day: int
    name: str
    leap_day: Optional[int] = None

    def day_in(self, is_leap: bool) -> int:
        """Returns the day of the month on which the holiday falls."""
        if is_leap and self.leap_day is not None:
            return self.leap_day
        return self.day


@dataclass(frozen=True)
class CalendarTables:
    """
    Static calendar configuration.

    Attributes:
        ethiopian_months: Names of the 13 Ethiopian months, Meskerem first.
        gregorian_months: Names of the 12 Gregorian months, January first.
        weekdays: Short weekday names, Monday first.
        holidays: Holiday rules in calendar order.
    """

    ethiopian_months: Tuple[str, ...]
    gregorian_months: Tuple[str, ...]
    weekdays: Tuple[str, ...]
    holidays: Tuple[HolidayEntry, ...]

    def ethiopian_month_name(self, month: int) -> str:
        return self.ethiopian_months[month - 1]

    def gregorian_month_name(self, month: int) -> str:
        return self.gregorian_months[month - 1]

    def weekday_name(self, weekday: Weekday) -> str:
        return self.weekdays[weekday.value]


ETHIOPIAN_MONTH_NAMES = (
    "Meskerem", "Tikimt", "Hidar", "Tahisas", "Tir", "Yekatit",
    "Megabit", "Miyazia", "Ginbot", "Sene", "Hamle", "Nehase", "Pagume",
)

GREGORIAN_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

HOLIDAYS = (
    HolidayEntry(1, 1, "Enkutatash (New Year)"),
    HolidayEntry(1, 17, "Meskel"),
    HolidayEntry(4, 29, "Gena (Christmas)", leap_day=28),
    HolidayEntry(5, 11, "Timket (Epiphany)"),
    HolidayEntry(6, 23, "Adwa (Adwa Victory Day)"),
    HolidayEntry(8, 23, "Ye labaderoch Ken (Labour Day)"),
    HolidayEntry(8, 27, "Ye Arbegnoch Ken (Patriots' Victory Day)"),
)

DEFAULT_TABLES = CalendarTables(
    ethiopian_months=ETHIOPIAN_MONTH_NAMES,
    gregorian_months=GREGORIAN_MONTH_NAMES,
    weekdays=WEEKDAY_NAMES,
    holidays=HOLIDAYS,
)
