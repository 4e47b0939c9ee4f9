"""
Ethiocal - Calendar Service Module.

The public entry point used by the command line, the renderer and the
workbook export. CalendarService wires the converter, epoch aligner and
holiday table around one set of calendar tables; the module-level
functions delegate to a default instance for callers that just need an
answer.

Classes:
    CalendarService: Facade over conversion, leap rules and holidays.
"""

from typing import Optional, Union

from ethiocal.converter import DateConverter
from ethiocal.date_logic import LeapYearRule
from ethiocal.epoch import EpochAligner
from ethiocal.holidays import HolidayTable
from ethiocal.schema import (
    DEFAULT_TABLES,
    CalendarTables,
    Evangelist,
    EthiopianDate,
    GregorianDate,
    InvalidDate,
    Weekday,
)
from ethiocal.validator import DateValidator


class CalendarService:
    """
    Facade over the calendar core.

    Attributes:
        tables: Calendar tables shared by all components.

    Example:
        >>> service = CalendarService()
        >>> service.convert_ethiopian_to_gregorian(2016, 1, 1)
        GregorianDate(year=2023, month=9, day=12)
        >>> service.holiday_name(2016, 1, 17)
        'Meskel'
    """

    def __init__(self, tables: Optional[CalendarTables] = None):
        """
        Initialises the CalendarService.

        Args:
            tables: Calendar tables. Defaults to DEFAULT_TABLES.
        """
        self.tables = tables if tables is not None else DEFAULT_TABLES
        self.leap_rule = LeapYearRule()
        self.epoch_aligner = EpochAligner(self.leap_rule)
        self.validator = DateValidator(self.leap_rule, self.tables)
        self.converter = DateConverter(
            self.epoch_aligner, self.leap_rule, self.validator
        )
        self.holiday_table = HolidayTable(self.tables, self.leap_rule)

    def convert_ethiopian_to_gregorian(
        self,
        year: int,
        month: int,
        day: int
    ) -> Union[GregorianDate, InvalidDate]:
        return self.converter.ethiopian_to_gregorian(
            EthiopianDate(year, month, day)
        )

    def convert_gregorian_to_ethiopian(
        self,
        year: int,
        month: int,
        day: int
    ) -> Union[EthiopianDate, InvalidDate]:
        return self.converter.gregorian_to_ethiopian(
            GregorianDate(year, month, day)
        )

    def is_ethiopian_leap_year(self, year: int) -> bool:
        return self.leap_rule.is_ethiopian_leap(year)

    def new_year_weekday(self, year: int) -> Weekday:
        """Returns the weekday of 1 Meskerem of an Ethiopian year."""
        return self.epoch_aligner.new_year_weekday(year)

    def days_in_ethiopian_month(self, year: int, month: int) -> int:
        return self.leap_rule.days_in_ethiopian_month(year, month)

    def holiday_name(self, year: int, month: int, day: int) -> Optional[str]:
        return self.holiday_table.lookup(year, month, day)

    def evangelist(self, year: int) -> Evangelist:
        return self.epoch_aligner.evangelist(self.epoch_aligner.amete_alem(year))

    def evangelist_name(self, year: int) -> str:
        """Returns the evangelist of an Ethiopian year, e.g. 'Yohannes'."""
        return self.evangelist(year).display_name

    def weekday_of(self, ethiopian: EthiopianDate) -> Weekday:
        """Returns the weekday of an Ethiopian date, counted from 1 Meskerem."""
        start = self.epoch_aligner.era_weekday_index(ethiopian.year)
        offset = (ethiopian.month - 1) * 30 + (ethiopian.day - 1)
        return Weekday((start + offset) % 7)

    def month_start_weekday(self, year: int, month: int) -> Weekday:
        """
        Returns the weekday of the first day of an Ethiopian month.

        Every month before Pagume has 30 days, so each month starts two
        weekdays after the previous one.
        """
        return self.weekday_of(EthiopianDate(year, month, 1))


_default_service = CalendarService()


def convert_ethiopian_to_gregorian(
    year: int,
    month: int,
    day: int
) -> Union[GregorianDate, InvalidDate]:
    """Converts an Ethiopian date; returns InvalidDate on bad input."""
    return _default_service.convert_ethiopian_to_gregorian(year, month, day)


def convert_gregorian_to_ethiopian(
    year: int,
    month: int,
    day: int
) -> Union[EthiopianDate, InvalidDate]:
    """Converts a Gregorian date; returns InvalidDate on bad input."""
    return _default_service.convert_gregorian_to_ethiopian(year, month, day)


def is_ethiopian_leap_year(year: int) -> bool:
    return _default_service.is_ethiopian_leap_year(year)


def new_year_weekday(year: int) -> Weekday:
    return _default_service.new_year_weekday(year)


def days_in_ethiopian_month(year: int, month: int) -> int:
    return _default_service.days_in_ethiopian_month(year, month)


def holiday_name(year: int, month: int, day: int) -> Optional[str]:
    return _default_service.holiday_name(year, month, day)


def evangelist_name(year: int) -> str:
    return _default_service.evangelist_name(year)
