"""
Ethiocal - Date Validation Module.

This module checks Ethiopian and Gregorian date fields and parses the
whitespace-separated integers typed at the command line. Failures are
returned as InvalidDate values with a client-facing message; nothing in
this module raises for bad input.

Classes:
    DateValidator: Validation and parsing of date input.
"""

import logging
import re
from typing import Optional, Tuple

from ethiocal.date_logic import PAGUME, LeapYearRule
from ethiocal.schema import (
    DEFAULT_TABLES,
    ETHIOPIAN,
    GREGORIAN,
    CalendarTables,
    InvalidDate,
)

logger = logging.getLogger(__name__)


class DateValidator:
    """
    Validates date fields and converts raw input to date values.

    Attributes:
        INTEGER_PATTERN: Accepted form of a single integer token.
        MAX_INTEGER_DIGITS: Longest accepted integer token.

    Example:
        >>> validator = DateValidator()
        >>> validator.validate_ethiopian(2016, 13, 6)
        InvalidDate(calendar='Ethiopian', field_name='day', value='6', ...)
        >>> validator.parse_date_triple("2023 9 12")
        ((2023, 9, 12), None)
    """

    INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")

    # Default limit of int() on str since Python 3.11
    MAX_INTEGER_DIGITS = 4300

    def __init__(
        self,
        leap_rule: Optional[LeapYearRule] = None,
        tables: Optional[CalendarTables] = None
    ):
        """
        Initialises the DateValidator.

        Args:
            leap_rule: Leap-year rules. Defaults to a new LeapYearRule.
            tables: Month names used in messages.
                    Defaults to DEFAULT_TABLES.
        """
        self._leap_rule = leap_rule or LeapYearRule()
        self._tables = tables if tables is not None else DEFAULT_TABLES

    def validate_ethiopian(
        self,
        year: int,
        month: int,
        day: int
    ) -> Optional[InvalidDate]:
        """
        Checks Ethiopian date fields.

        Args:
            year: Ethiopian year, must be 1 or later.
            month: Month number, 1-13.
            day: Day number, 1-30 (1-5 or 1-6 in Pagume).

        Returns:
            None if the date is valid, otherwise an InvalidDate.
        """
        if year < 1:
            return self._reject(
                ETHIOPIAN, "year", year,
                "year must be 1 or later"
            )
        if not 1 <= month <= PAGUME:
            return self._reject(
                ETHIOPIAN, "month", month,
                "month must be between 1 and 13"
            )

        max_day = self._leap_rule.days_in_ethiopian_month(year, month)
        if not 1 <= day <= max_day:
            month_name = self._tables.ethiopian_month_name(month)
            return self._reject(
                ETHIOPIAN, "day", day,
                f"{month_name} {year} has {max_day} days"
            )
        return None

    def validate_gregorian(
        self,
        year: int,
        month: int,
        day: int
    ) -> Optional[InvalidDate]:
        """
        Checks proleptic Gregorian date fields.

        Args:
            year: Gregorian year, must be 1 or later.
            month: Month number, 1-12.
            day: Day number within the month.

        Returns:
            None if the date is valid, otherwise an InvalidDate.
        """
        if year < 1:
            return self._reject(
                GREGORIAN, "year", year,
                "year must be 1 or later"
            )
        if not 1 <= month <= 12:
            return self._reject(
                GREGORIAN, "month", month,
                "month must be between 1 and 12"
            )

        max_day = self._leap_rule.days_in_gregorian_month(year, month)
        if not 1 <= day <= max_day:
            month_name = self._tables.gregorian_month_name(month)
            return self._reject(
                GREGORIAN, "day", day,
                f"{month_name} {year} has {max_day} days"
            )
        return None

    def parse_date_triple(
        self,
        text: str,
        calendar: str = GREGORIAN
    ) -> Tuple[Optional[Tuple[int, int, int]], Optional[InvalidDate]]:
        """
        Parses "YYYY MM DD" typed at the prompt.

        Only checks that there are exactly three integers; range checks
        are left to the validate methods.

        Args:
            text: Raw input line.
            calendar: Calendar name used in the error message.

        Returns:
            Tuple of ((year, month, day) or None, InvalidDate or None).
        """
        if text is None:
            text = ""

        tokens = text.split()
        if len(tokens) != 3:
            return None, self._reject(
                calendar, "input", text.strip(),
                "enter three numbers separated by spaces (YYYY MM DD)"
            )

        for token in tokens:
            if not self.INTEGER_PATTERN.match(token):
                return None, self._reject(
                    calendar, "input", text.strip(),
                    f"'{token}' is not a whole number"
                )
            if self._too_long(token):
                return None, self._reject(
                    calendar, "input", text.strip(),
                    "number is too large"
                )

        year, month, day = (int(token) for token in tokens)
        return (year, month, day), None

    def parse_year(
        self,
        text: str,
        calendar: str = ETHIOPIAN
    ) -> Tuple[Optional[int], Optional[InvalidDate]]:
        """
        Parses a year typed at the prompt.

        Args:
            text: Raw input line.
            calendar: Calendar name used in the error message.

        Returns:
            Tuple of (year or None, InvalidDate or None).
        """
        value = (text or "").strip()
        if not self.INTEGER_PATTERN.match(value):
            return None, self._reject(
                calendar, "year", value,
                "year must be a whole number"
            )

        if self._too_long(value):
            return None, self._reject(
                calendar, "year", value,
                "number is too large"
            )

        year = int(value)
        if year < 1:
            return None, self._reject(
                calendar, "year", value,
                "year must be 1 or later"
            )
        return year, None

    def _too_long(self, token: str) -> bool:
        return len(token.lstrip("+-")) > self.MAX_INTEGER_DIGITS

    def _reject(
        self,
        calendar: str,
        field_name: str,
        value: object,
        message: str
    ) -> InvalidDate:
        invalid = InvalidDate(
            calendar=calendar,
            field_name=field_name,
            value=str(value),
            message=message
        )
        logger.debug("Rejected input: %s", invalid)
        return invalid
