"""
Ethiocal - Epoch Alignment Module.

Locates 1 Meskerem (Ethiopian New Year) of any Ethiopian year on the
civil day count, together with the weekday it falls on and the cycle
markers derived from Amete Alem ("year of the world").

Classes:
    EpochAligner: New-year alignment between the two calendars.
"""

from typing import Optional

from ethiocal.date_logic import (
    LeapYearRule,
    jdn_to_gregorian,
)
from ethiocal.schema import Evangelist, GregorianDate, Weekday


# Day count of 1 Meskerem, year 1 (proleptic Gregorian 0008-08-27)
ETHIOPIC_EPOCH_JDN = 1724221

AMETE_ALEM_OFFSET = 5500


class EpochAligner:
    """
    Aligns Ethiopian new years with the Gregorian calendar.

    Attributes:
        leap_rule: LeapYearRule used for the September 11/12 rule.

    Example:
        >>> aligner = EpochAligner()
        >>> aligner.new_year_gregorian(2016)
        GregorianDate(year=2023, month=9, day=12)
        >>> aligner.new_year_weekday(2016)
        <Weekday.TUESDAY: 1>
    """

    def __init__(self, leap_rule: Optional[LeapYearRule] = None):
        """
        Initialises the EpochAligner.

        Args:
            leap_rule: Leap-year rules. Defaults to a new LeapYearRule.
        """
        self._leap_rule = leap_rule or LeapYearRule()

    def amete_alem(self, ethiopian_year: int) -> int:
        """Returns the year since creation, 5500 + ethiopian_year."""
        return AMETE_ALEM_OFFSET + ethiopian_year

    def era_weekday_index(self, ethiopian_year: int) -> int:
        """
        Returns the weekday index of 1 Meskerem, 0 = Monday.

        Amete Alem counts one weekday shift per common year, and
        Amete Alem // 4 (Metene Rabiet) adds the accumulated leap days.

        Args:
            ethiopian_year: Ethiopian year.

        Returns:
            Weekday index 0..6.
        """
        amete_alem = self.amete_alem(ethiopian_year)
        metene_rabiet = amete_alem // 4
        return (amete_alem + metene_rabiet) % 7

    def new_year_weekday(self, ethiopian_year: int) -> Weekday:
        return Weekday(self.era_weekday_index(ethiopian_year))

    def gregorian_new_year_day(self, gregorian_year: int) -> int:
        """
        Returns the day of September on which the Ethiopian new year falls.

        Pass the Gregorian year that follows the new year: when it is a
        leap year, the preceding Ethiopian year ended with a sixth Pagume
        day and 1 Meskerem moves to 12 September.

        Args:
            gregorian_year: Gregorian year following the new year.

        Returns:
            12 if gregorian_year is a Gregorian leap year, else 11.
        """
        return 12 if self._leap_rule.is_gregorian_leap(gregorian_year) else 11

    def evangelist(self, amete_alem: int) -> Evangelist:
        """Returns the evangelist of the year, selected by amete_alem % 4."""
        return Evangelist(amete_alem % 4)

    def new_year_jdn(self, ethiopian_year: int) -> int:
        """
        Returns the day count of 1 Meskerem of an Ethiopian year.

        For new years in Gregorian 1900 through 2098 this is September
        ``gregorian_new_year_day(ethiopian_year + 8)`` of Gregorian year
        ``ethiopian_year + 7``. Counting from the epoch also stays exact
        across Gregorian century years, where the September rule drifts.

        Args:
            ethiopian_year: Ethiopian year.

        Returns:
            Julian Day Number of the new year.
        """
        return (
            ETHIOPIC_EPOCH_JDN
            + 365 * (ethiopian_year - 1)
            + ethiopian_year // 4
        )

    def new_year_gregorian(self, ethiopian_year: int) -> GregorianDate:
        """Returns the Gregorian date of 1 Meskerem of an Ethiopian year."""
        year, month, day = jdn_to_gregorian(self.new_year_jdn(ethiopian_year))
        return GregorianDate(year, month, day)

    def year_of_jdn(self, jdn: int) -> int:
        """
        Returns the Ethiopian year containing a day count.

        Every fourth year has 366 days, so a 1461-day cycle starts at
        the epoch. Days before the epoch give a year below 1.

        Args:
            jdn: Julian Day Number.

        Returns:
            Ethiopian year whose new year is the last one on or before jdn.
        """
        return (4 * (jdn - ETHIOPIC_EPOCH_JDN) + 1463) // 1461

