"""
Ethiocal - Calendar Grid Rendering Module.

Formats month and year grids as plain text for the console. Ethiopian
grids are Monday first and mark holidays with '*' followed by a legend;
Gregorian grids use the conventional Sunday-first layout.

Classes:
    CalendarRenderer: Text grids for both calendars.
"""

from typing import Iterable, List, Optional

from ethiocal.date_logic import PAGUME, gregorian_to_jdn, weekday_of_jdn
from ethiocal.service import CalendarService


class CalendarRenderer:
    """
    Renders calendar grids as text.

    Each day occupies a four-character cell: the right-aligned day number
    and a trailing space, or the day number followed by '*' on a holiday.

    Example:
        >>> renderer = CalendarRenderer()
        >>> print(renderer.render_ethiopian_month(2016, 13))
        Pagume 2016
        Mon Tue Wed Thu Fri Sat Sun
                          1   2   3
          4   5
    """

    CELL_WIDTH = 4
    HOLIDAY_MARK = "*"

    def __init__(self, service: Optional[CalendarService] = None):
        """
        Initialises the CalendarRenderer.

        Args:
            service: Calendar service supplying dates, holidays and
                     names. Defaults to a new CalendarService.
        """
        self._service = service or CalendarService()
        self._tables = self._service.tables

    def render_ethiopian_year(self, year: int) -> str:
        """
        Renders all 13 months of an Ethiopian year.

        Args:
            year: Ethiopian year.

        Returns:
            Year header followed by each month grid.
        """
        first_weekday = self._service.new_year_weekday(year)
        lines = [
            f"Year: {year}",
            f"Amete Alem: {self._service.epoch_aligner.amete_alem(year)}",
            f"Evangelist: {self._service.evangelist_name(year)}",
            f"First day of Meskerem: {self._tables.weekday_name(first_weekday)}",
        ]
        for month in range(1, PAGUME + 1):
            lines.append("")
            lines.append(self.render_ethiopian_month(year, month))
        return "\n".join(lines)

    def render_ethiopian_month(self, year: int, month: int) -> str:
        """
        Renders one Ethiopian month with its holiday legend.

        Args:
            year: Ethiopian year.
            month: Ethiopian month (1-13).

        Returns:
            Title, Monday-first header, week rows and, when the month
            has holidays, a "Holidays this month:" legend.
        """
        num_days = self._service.days_in_ethiopian_month(year, month)
        start = self._service.month_start_weekday(year, month)
        holidays = self._service.holiday_table.holidays_in_month(year, month)

        lines = [
            f"{self._tables.ethiopian_month_name(month)} {year}",
            " ".join(self._tables.weekdays),
        ]
        lines.extend(self._grid_rows(
            start.value,
            num_days,
            marked_days=[day for day, _ in holidays]
        ))

        if holidays:
            lines.append("Holidays this month:")
            for day, name in holidays:
                lines.append(f"{day} - {name}")

        return "\n".join(lines)

    def render_gregorian_year(self, year: int) -> str:
        """
        Renders the 12 months of a Gregorian year.

        Args:
            year: Gregorian year.

        Returns:
            Title followed by each month grid.
        """
        lines = [f"Gregorian Calendar for {year}"]
        for month in range(1, 13):
            lines.append("")
            lines.append(self.render_gregorian_month(year, month))
        return "\n".join(lines)

    def render_gregorian_month(self, year: int, month: int) -> str:
        """
        Renders one Gregorian month, Sunday first.

        Args:
            year: Gregorian year.
            month: Month number (1-12).

        Returns:
            Title, Sunday-first header and week rows.
        """
        num_days = self._service.leap_rule.days_in_gregorian_month(year, month)
        first = weekday_of_jdn(gregorian_to_jdn(year, month, 1))
        weekdays = self._tables.weekdays

        lines = [
            f"  {self._tables.gregorian_month_name(month)} {year}",
            " ".join(weekdays[-1:] + weekdays[:-1]),
        ]
        lines.extend(self._grid_rows(first.sunday_first_index, num_days))
        return "\n".join(lines)

    def _grid_rows(
        self,
        start_column: int,
        num_days: int,
        marked_days: Iterable[int] = ()
    ) -> List[str]:
        """
        Lays out day cells in rows of seven.

        Args:
            start_column: Column (0-6) of the first day.
            num_days: Number of days in the month.
            marked_days: Days to flag with the holiday mark.

        Returns:
            One string per week, trailing spaces removed.
        """
        marked = set(marked_days)
        cells = [" " * self.CELL_WIDTH] * start_column
        for day in range(1, num_days + 1):
            if day in marked:
                cells.append(f"{day:>2}{self.HOLIDAY_MARK} ")
            else:
                cells.append(f"{day:>3} ")

        rows = []
        for index in range(0, len(cells), 7):
            rows.append("".join(cells[index:index + 7]).rstrip())
        return rows
