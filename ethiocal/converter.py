"""
Ethiocal - Date Conversion Module.

This module provides the bidirectional conversion between Ethiopian and
proleptic Gregorian dates. Both directions go through the civil day
count, so a conversion is a handful of integer operations with no year
limits and no day-by-day stepping.

Classes:
    DateConverter: Ethiopian <-> Gregorian conversion.
"""

import logging
from typing import Optional, Union

from ethiocal.date_logic import (
    ETHIOPIAN_MONTH_DAYS,
    LeapYearRule,
    gregorian_to_jdn,
    jdn_to_gregorian,
)
from ethiocal.epoch import EpochAligner
from ethiocal.schema import (
    ETHIOPIAN,
    EthiopianDate,
    GregorianDate,
    InvalidDate,
)
from ethiocal.validator import DateValidator

logger = logging.getLogger(__name__)


class DateConverter:
    """
    Converts dates between the Ethiopian and Gregorian calendars.

    Invalid input is returned as an InvalidDate rather than raised, and
    no partially-built date is ever returned.

    Attributes:
        epoch_aligner: EpochAligner locating each Ethiopian new year.

    Example:
        >>> converter = DateConverter()
        >>> converter.ethiopian_to_gregorian(EthiopianDate(2016, 1, 1))
        GregorianDate(year=2023, month=9, day=12)
        >>> converter.gregorian_to_ethiopian(GregorianDate(2024, 12, 25))
        EthiopianDate(year=2017, month=4, day=16)
    """

    def __init__(
        self,
        epoch_aligner: Optional[EpochAligner] = None,
        leap_rule: Optional[LeapYearRule] = None,
        validator: Optional[DateValidator] = None
    ):
        """
        Initialises the DateConverter.

        Args:
            epoch_aligner: New-year alignment. Defaults to a new EpochAligner.
            leap_rule: Leap-year rules. Defaults to a new LeapYearRule.
            validator: Date validation. Defaults to a new DateValidator.
        """
        self._leap_rule = leap_rule or LeapYearRule()
        self._epoch_aligner = epoch_aligner or EpochAligner(self._leap_rule)
        self._validator = validator or DateValidator(self._leap_rule)

    def ethiopian_to_gregorian(
        self,
        ethiopian: EthiopianDate
    ) -> Union[GregorianDate, InvalidDate]:
        """
        Converts an Ethiopian date to its Gregorian equivalent.

        The date's offset from 1 Meskerem, (month - 1) * 30 + (day - 1),
        is added to the new year's day count, so 1 Meskerem maps onto the
        new year itself.

        Args:
            ethiopian: Date to convert.

        Returns:
            The GregorianDate, or InvalidDate if the input is not a valid
            Ethiopian date.
        """
        invalid = self._validator.validate_ethiopian(*ethiopian.as_tuple())
        if invalid is not None:
            return invalid

        offset = (ethiopian.month - 1) * ETHIOPIAN_MONTH_DAYS + (ethiopian.day - 1)
        jdn = self._epoch_aligner.new_year_jdn(ethiopian.year) + offset

        year, month, day = jdn_to_gregorian(jdn)
        result = GregorianDate(year, month, day)
        logger.debug("Ethiopian %s -> Gregorian %s", ethiopian, result)
        return result

    def gregorian_to_ethiopian(
        self,
        gregorian: GregorianDate
    ) -> Union[EthiopianDate, InvalidDate]:
        """
        Converts a Gregorian date to its Ethiopian equivalent.

        The Ethiopian year is read off the day count in closed form, and
        the offset is taken directly against that year's new year, so the
        month and day are always in range.

        Args:
            gregorian: Date to convert.

        Returns:
            The EthiopianDate, or InvalidDate if the input is not a valid
            Gregorian date or precedes 1 Meskerem of year 1.
        """
        invalid = self._validator.validate_gregorian(*gregorian.as_tuple())
        if invalid is not None:
            return invalid

        jdn = gregorian_to_jdn(*gregorian.as_tuple())
        ethiopian_year = self._epoch_aligner.year_of_jdn(jdn)

        if ethiopian_year < 1:
            return InvalidDate(
                calendar=ETHIOPIAN,
                field_name="year",
                value=str(ethiopian_year),
                message=f"Gregorian {gregorian} precedes 1 Meskerem of year 1"
            )

        offset = jdn - self._epoch_aligner.new_year_jdn(ethiopian_year)

        month = offset // ETHIOPIAN_MONTH_DAYS + 1
        day = offset % ETHIOPIAN_MONTH_DAYS + 1
        result = EthiopianDate(ethiopian_year, month, day)
        logger.debug("Gregorian %s -> Ethiopian %s", gregorian, result)
        return result
