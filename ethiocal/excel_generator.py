"""
Ethiocal - Excel Calendar Export Module.

This module exports an Ethiopian year as an Excel workbook: a Year
Summary sheet with the year facts, the Gregorian start of every month
and the holiday list, followed by one Monday-first grid per month.

Classes:
    CalendarWorkbook: Generates Excel workbooks for an Ethiopian year.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from openpyxl import Workbook
from openpyxl.styles import (
    Alignment,
    Border,
    Font,
    PatternFill,
    Side,
)
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from ethiocal.date_logic import PAGUME
from ethiocal.schema import EthiopianDate, GregorianDate
from ethiocal.service import CalendarService

logger = logging.getLogger(__name__)


class CalendarWorkbook:
    """
    Generates Excel workbooks for an Ethiopian year.

    Creates a "Year Summary" sheet followed by one sheet per month,
    named after the month, with holiday cells highlighted.

    Example:
        >>> exporter = CalendarWorkbook()
        >>> exporter.generate_workbook(2016, "ethiopian_calendar_2016.xlsx")
    """

    SUMMARY_SHEET = "Year Summary"

    HOLIDAY_FILL = PatternFill(
        start_color="FFEB9C",
        end_color="FFEB9C",
        fill_type="solid"
    )
    LEAP_FILL = PatternFill(
        start_color="C6EFCE",
        end_color="C6EFCE",
        fill_type="solid"
    )

    # Header styling
    HEADER_FONT = Font(bold=True, color="FFFFFF")
    HEADER_FILL = PatternFill(
        start_color="2F5496",
        end_color="2F5496",
        fill_type="solid"
    )
    HEADER_ALIGNMENT = Alignment(horizontal="center", vertical="center")

    THIN_BORDER = Border(
        left=Side(style="thin"),
        right=Side(style="thin"),
        top=Side(style="thin"),
        bottom=Side(style="thin")
    )

    def __init__(self, service: Optional[CalendarService] = None):
        """
        Initialises the CalendarWorkbook.

        Args:
            service: Calendar service. Defaults to a new CalendarService.
        """
        self._service = service or CalendarService()
        self._tables = self._service.tables

    def generate_workbook(
        self,
        year: int,
        output_path: Union[str, Path]
    ) -> Path:
        """
        Writes the workbook for an Ethiopian year.

        Args:
            year: Ethiopian year, 1 or later.
            output_path: Path for the output .xlsx file.

        Returns:
            The path written.

        Raises:
            ValueError: If year is before year 1.
        """
        if year < 1:
            raise ValueError(f"Ethiopian year must be 1 or later, got {year}")

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        workbook = Workbook()

        # Remove default sheet
        workbook.remove(workbook.active)

        self._create_summary_sheet(workbook, year)
        for month in range(1, PAGUME + 1):
            self._create_month_sheet(workbook, year, month)

        workbook.save(output_path)
        logger.info("Wrote calendar workbook for %s to %s", year, output_path)
        return output_path

    def _create_summary_sheet(self, workbook: Workbook, year: int) -> None:
        """
        Creates the Year Summary sheet.

        Args:
            workbook: Target workbook.
            year: Ethiopian year.
        """
        ws = workbook.create_sheet(self.SUMMARY_SHEET)
        service = self._service
        aligner = service.epoch_aligner

        ws["A1"] = f"Ethiopian Calendar {year}"
        ws["A1"].font = Font(bold=True, size=16)
        ws.merge_cells("A1:D1")

        new_year = aligner.new_year_gregorian(year)
        facts = [
            ("Amete Alem", aligner.amete_alem(year)),
            ("Evangelist", service.evangelist_name(year)),
            ("Leap Year", "Yes" if service.is_ethiopian_leap_year(year) else "No"),
            ("New Year (Gregorian)", self._format_gregorian(new_year)),
            ("First day of Meskerem",
             self._tables.weekday_name(service.new_year_weekday(year))),
        ]

        row = 3
        for label, value in facts:
            ws[f"A{row}"] = label
            ws[f"A{row}"].font = Font(bold=True)
            ws[f"B{row}"] = value
            row += 1

        if service.is_ethiopian_leap_year(year):
            ws["B5"].fill = self.LEAP_FILL

        # Month table
        row += 1
        ws[f"A{row}"] = "MONTHS"
        ws[f"A{row}"].font = Font(bold=True, size=14)
        row += 1
        self._write_header(ws, row, ["Month", "Days", "Starts (Gregorian)", "Starts On"])

        for month in range(1, PAGUME + 1):
            row += 1
            first_day = self._to_gregorian(EthiopianDate(year, month, 1))
            start = service.month_start_weekday(year, month)
            values = [
                self._tables.ethiopian_month_name(month),
                service.days_in_ethiopian_month(year, month),
                self._format_gregorian(first_day),
                self._tables.weekday_name(start),
            ]
            for col, value in enumerate(values, start=1):
                cell = ws.cell(row=row, column=col, value=value)
                cell.border = self.THIN_BORDER

        # Holiday table
        row += 2
        ws[f"A{row}"] = "HOLIDAYS"
        ws[f"A{row}"].font = Font(bold=True, size=14)
        row += 1
        self._write_header(ws, row, ["Holiday", "Ethiopian Date", "Gregorian Date", "Weekday"])

        for ethiopian, name in service.holiday_table.holidays_in_year(year):
            row += 1
            gregorian = self._to_gregorian(ethiopian)
            values = [
                name,
                f"{ethiopian.day} {self._tables.ethiopian_month_name(ethiopian.month)}",
                self._format_gregorian(gregorian),
                self._tables.weekday_name(service.weekday_of(ethiopian)),
            ]
            for col, value in enumerate(values, start=1):
                cell = ws.cell(row=row, column=col, value=value)
                cell.border = self.THIN_BORDER
                cell.fill = self.HOLIDAY_FILL

        self._auto_adjust_columns(ws)

    def _create_month_sheet(
        self,
        workbook: Workbook,
        year: int,
        month: int
    ) -> None:
        """
        Creates a Monday-first grid sheet for one month.

        Args:
            workbook: Target workbook.
            year: Ethiopian year.
            month: Ethiopian month (1-13).
        """
        month_name = self._tables.ethiopian_month_name(month)
        ws = workbook.create_sheet(month_name)

        ws["A1"] = f"{month_name} {year}"
        ws["A1"].font = Font(bold=True, size=14)
        ws.merge_cells("A1:G1")

        self._write_header(ws, 2, list(self._tables.weekdays))

        holidays = dict(self._service.holiday_table.holidays_in_month(year, month))
        column = self._service.month_start_weekday(year, month).value
        row = 3
        num_days = self._service.days_in_ethiopian_month(year, month)

        for day in range(1, num_days + 1):
            cell = ws.cell(row=row, column=column + 1, value=day)
            cell.border = self.THIN_BORDER
            cell.alignment = Alignment(horizontal="center")
            if day in holidays:
                cell.fill = self.HOLIDAY_FILL

            column += 1
            if column == 7:
                column = 0
                row += 1

        if holidays:
            row += 2
            ws[f"A{row}"] = "Holidays this month:"
            ws[f"A{row}"].font = Font(bold=True)
            for day, name in sorted(holidays.items()):
                row += 1
                ws[f"A{row}"] = day
                ws[f"B{row}"] = name

        for col_idx in range(1, 8):
            ws.column_dimensions[get_column_letter(col_idx)].width = 8

    def _write_header(self, ws: Worksheet, row: int, headers: list) -> None:
        for col, header in enumerate(headers, start=1):
            cell = ws.cell(row=row, column=col, value=header)
            cell.font = self.HEADER_FONT
            cell.fill = self.HEADER_FILL
            cell.alignment = self.HEADER_ALIGNMENT
            cell.border = self.THIN_BORDER

    def _to_gregorian(self, ethiopian: EthiopianDate) -> GregorianDate:
        result = self._service.converter.ethiopian_to_gregorian(ethiopian)
        if not isinstance(result, GregorianDate):
            raise ValueError(str(result))
        return result

    def _format_gregorian(self, value: GregorianDate) -> str:
        """Formats as '12 September 2023'."""
        month_name = self._tables.gregorian_month_name(value.month)
        return f"{value.day} {month_name} {value.year}"

    def _auto_adjust_columns(self, worksheet: Worksheet) -> None:
        """
        Auto-adjusts column widths based on content.

        Args:
            worksheet: Target worksheet.
        """
        for col_idx in range(1, worksheet.max_column + 1):
            max_length = 0
            column_letter = get_column_letter(col_idx)

            for row_idx in range(1, worksheet.max_row + 1):
                cell = worksheet.cell(row=row_idx, column=col_idx)
                if cell.value is not None:
                    max_length = max(max_length, len(str(cell.value)))

            # Add padding and set minimum width
            worksheet.column_dimensions[column_letter].width = max(max_length + 2, 10)

    def generate_filename(self, year: int, prefix: str = "ethiopian_calendar") -> str:
        """
        Generates a filename for a year's workbook.

        Args:
            year: Ethiopian year.
            prefix: Filename prefix. Defaults to "ethiopian_calendar".

        Returns:
            Filename like "ethiopian_calendar_2016.xlsx".
        """
        return f"{prefix}_{year}.xlsx"
