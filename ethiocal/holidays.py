"""
Ethiocal - Holiday Table Module.

Maps Ethiopian dates to the fixed national and religious holidays.
Every rule is a fixed month/day pair except Gena (Christmas), which
moves one day earlier in an Ethiopian leap year.

Classes:
    HolidayTable: Read-only lookup over the holiday rules.
"""

from typing import List, Optional, Tuple

from ethiocal.date_logic import LeapYearRule
from ethiocal.schema import DEFAULT_TABLES, CalendarTables, EthiopianDate


class HolidayTable:
    """
    Looks up holidays by Ethiopian date.

    Example:
        >>> table = HolidayTable()
        >>> table.lookup(2016, 4, 29)
        'Gena (Christmas)'
        >>> table.lookup(2015, 4, 29) is None
        True
    """

    def __init__(
        self,
        tables: Optional[CalendarTables] = None,
        leap_rule: Optional[LeapYearRule] = None
    ):
        """
        Initialises the HolidayTable.

        Args:
            tables: Calendar tables holding the holiday rules.
                    Defaults to DEFAULT_TABLES.
            leap_rule: Leap-year rules. Defaults to a new LeapYearRule.
        """
        self._tables = tables if tables is not None else DEFAULT_TABLES
        self._leap_rule = leap_rule or LeapYearRule()

    def lookup(self, ethiopian_year: int, month: int, day: int) -> Optional[str]:
        """
        Returns the holiday falling on an Ethiopian date.

        Args:
            ethiopian_year: Ethiopian year, decides where Gena falls.
            month: Ethiopian month (1-13).
            day: Day of the month.

        Returns:
            Holiday name, or None if the date is not a holiday.
        """
        is_leap = self._leap_rule.is_ethiopian_leap(ethiopian_year)
        for entry in self._tables.holidays:
            if entry.month == month and entry.day_in(is_leap) == day:
                return entry.name
        return None

    def holidays_in_month(
        self,
        ethiopian_year: int,
        month: int
    ) -> List[Tuple[int, str]]:
        """
        Lists the holidays of one Ethiopian month.

        Returns:
            (day, name) pairs sorted by day.
        """
        is_leap = self._leap_rule.is_ethiopian_leap(ethiopian_year)
        found = [
            (entry.day_in(is_leap), entry.name)
            for entry in self._tables.holidays
            if entry.month == month
        ]
        return sorted(found)

    def holidays_in_year(
        self,
        ethiopian_year: int
    ) -> List[Tuple[EthiopianDate, str]]:
        """
        Lists every holiday of an Ethiopian year in calendar order.

        Returns:
            (EthiopianDate, name) pairs.
        """
        is_leap = self._leap_rule.is_ethiopian_leap(ethiopian_year)
        found = [
            (
                EthiopianDate(ethiopian_year, entry.month, entry.day_in(is_leap)),
                entry.name,
            )
            for entry in self._tables.holidays
        ]
        return sorted(found, key=lambda item: item[0])
