"""
Ethiocal - Date Converter Tests.

Property-based and unit tests for DateConverter. Tests ensure known
calendar correspondences, rejection of invalid input, the epoch
boundary and the round-trip law in both directions.
"""

import logging
from datetime import date

from hypothesis import given, settings
from hypothesis.strategies import composite, dates, integers

from ethiocal.converter import DateConverter
from ethiocal.date_logic import LeapYearRule, gregorian_to_jdn
from ethiocal.schema import EthiopianDate, GregorianDate, InvalidDate
from ethiocal.validator import DateValidator


@composite
def ethiopian_dates(draw, min_year: int = 1, max_year: int = 3000):
    """Generate valid EthiopianDate objects."""
    year = draw(integers(min_value=min_year, max_value=max_year))
    month = draw(integers(min_value=1, max_value=13))
    max_day = LeapYearRule().days_in_ethiopian_month(year, month)
    day = draw(integers(min_value=1, max_value=max_day))
    return EthiopianDate(year, month, day)


@composite
def gregorian_dates(draw, min_year: int = 9, max_year: int = 10**6):
    """Generate valid GregorianDate objects without datetime's year limit."""
    year = draw(integers(min_value=min_year, max_value=max_year))
    month = draw(integers(min_value=1, max_value=12))
    max_day = LeapYearRule().days_in_gregorian_month(year, month)
    day = draw(integers(min_value=1, max_value=max_day))
    return GregorianDate(year, month, day)


def next_ethiopian_day(value: EthiopianDate) -> EthiopianDate:
    """Returns the following Ethiopian date."""
    max_day = LeapYearRule().days_in_ethiopian_month(value.year, value.month)
    if value.day < max_day:
        return EthiopianDate(value.year, value.month, value.day + 1)
    if value.month < 13:
        return EthiopianDate(value.year, value.month + 1, 1)
    return EthiopianDate(value.year + 1, 1, 1)


class TestDateConverterUnit:
    """Unit tests for DateConverter."""

    def setup_method(self) -> None:
        """Initialise DateConverter for each test."""
        self.converter = DateConverter()

    def test_ethiopian_new_year_2016(self) -> None:
        """Verify 1 Meskerem 2016 is 12 September 2023."""
        result = self.converter.ethiopian_to_gregorian(EthiopianDate(2016, 1, 1))
        assert result == GregorianDate(2023, 9, 12)

    def test_gregorian_2023_09_12_is_new_year_2016(self) -> None:
        result = self.converter.gregorian_to_ethiopian(GregorianDate(2023, 9, 12))
        assert result == EthiopianDate(2016, 1, 1)

    def test_leap_pagume_before_new_year(self) -> None:
        """Verify 11 September 2023 is Pagume 6, 2015 (leap year)."""
        result = self.converter.gregorian_to_ethiopian(GregorianDate(2023, 9, 11))
        assert result == EthiopianDate(2015, 13, 6)

        back = self.converter.ethiopian_to_gregorian(EthiopianDate(2015, 13, 6))
        assert back == GregorianDate(2023, 9, 11)

    def test_christmas_2024(self) -> None:
        """Verify 25 December 2024 is 16 Tahisas 2017."""
        result = self.converter.gregorian_to_ethiopian(GregorianDate(2024, 12, 25))
        assert result == EthiopianDate(2017, 4, 16)

        back = self.converter.ethiopian_to_gregorian(EthiopianDate(2017, 4, 16))
        assert back == GregorianDate(2024, 12, 25)

    def test_pagume_2017(self) -> None:
        """Verify 7 September 2025 falls in Pagume 2017."""
        result = self.converter.gregorian_to_ethiopian(GregorianDate(2025, 9, 7))
        assert result == EthiopianDate(2017, 13, 2)

    def test_gregorian_leap_day(self) -> None:
        """Verify 29 February 2024 is 21 Yekatit 2016."""
        result = self.converter.gregorian_to_ethiopian(GregorianDate(2024, 2, 29))
        assert result == EthiopianDate(2016, 6, 21)

    def test_first_ethiopian_date(self) -> None:
        """Verify 1 Meskerem 1 is 27 August 8 (proleptic Gregorian)."""
        result = self.converter.ethiopian_to_gregorian(EthiopianDate(1, 1, 1))
        assert result == GregorianDate(8, 8, 27)

        back = self.converter.gregorian_to_ethiopian(GregorianDate(8, 8, 27))
        assert back == EthiopianDate(1, 1, 1)

    def test_gregorian_date_before_epoch_is_invalid(self) -> None:
        """Verify a date before 1 Meskerem 1 is rejected, not year 0."""
        result = self.converter.gregorian_to_ethiopian(GregorianDate(8, 8, 26))
        assert isinstance(result, InvalidDate)
        assert result.field_name == "year"

    def test_invalid_pagume_day(self) -> None:
        """Verify Pagume 7 is rejected (2016 Pagume has 5 days)."""
        result = self.converter.ethiopian_to_gregorian(EthiopianDate(2016, 13, 7))
        assert isinstance(result, InvalidDate)
        assert result.field_name == "day"

    def test_pagume_6_rejected_in_common_year(self) -> None:
        result = self.converter.ethiopian_to_gregorian(EthiopianDate(2016, 13, 6))
        assert isinstance(result, InvalidDate)

    def test_invalid_gregorian_february_30(self) -> None:
        result = self.converter.gregorian_to_ethiopian(GregorianDate(2023, 2, 30))
        assert isinstance(result, InvalidDate)
        assert result.calendar == "Gregorian"

    def test_non_positive_years_rejected(self) -> None:
        assert isinstance(
            self.converter.ethiopian_to_gregorian(EthiopianDate(0, 1, 1)),
            InvalidDate
        )
        assert isinstance(
            self.converter.gregorian_to_ethiopian(GregorianDate(-1, 1, 1)),
            InvalidDate
        )

    def test_year_beyond_datetime_range(self) -> None:
        """Verify conversion is not limited by datetime's year range."""
        ethiopian = EthiopianDate(20000, 5, 11)
        gregorian = self.converter.ethiopian_to_gregorian(ethiopian)
        assert isinstance(gregorian, GregorianDate)
        assert gregorian.year > 9999
        assert self.converter.gregorian_to_ethiopian(gregorian) == ethiopian

    def test_distant_gregorian_years(self) -> None:
        """Verify dates where the calendars have drifted apart by years."""
        validator = DateValidator()
        for year in (50000, 100000, 200000, 10**6):
            gregorian = GregorianDate(year, 1, 1)
            ethiopian = self.converter.gregorian_to_ethiopian(gregorian)
            assert isinstance(ethiopian, EthiopianDate)
            assert validator.validate_ethiopian(*ethiopian.as_tuple()) is None
            assert self.converter.ethiopian_to_gregorian(ethiopian) == gregorian

    def test_conversion_logged_at_debug(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="ethiocal.converter")
        self.converter.ethiopian_to_gregorian(EthiopianDate(2016, 1, 1))
        assert "Ethiopian 2016-1-1 -> Gregorian 2023-9-12" in caplog.text


class TestDateConverterProperty:
    """
    Property-based tests for DateConverter.

    The conversion must be a bijection between valid dates of the two
    calendars.
    """

    def setup_method(self) -> None:
        """Initialise DateConverter for each test."""
        self.converter = DateConverter()

    @given(ethiopian_dates())
    @settings(max_examples=500)
    def test_ethiopian_round_trip(self, ethiopian: EthiopianDate) -> None:
        """
        Property: gregorian_to_ethiopian(ethiopian_to_gregorian(d)) == d
        for Ethiopian years 1..3000.
        """
        gregorian = self.converter.ethiopian_to_gregorian(ethiopian)
        assert isinstance(gregorian, GregorianDate)
        assert self.converter.gregorian_to_ethiopian(gregorian) == ethiopian

    @given(dates(min_value=date(8, 8, 27), max_value=date(3008, 12, 31)))
    @settings(max_examples=500)
    def test_gregorian_round_trip(self, test_date: date) -> None:
        """
        Property: ethiopian_to_gregorian(gregorian_to_ethiopian(g)) == g
        from the Ethiopian epoch to 3008.
        """
        gregorian = GregorianDate(test_date.year, test_date.month, test_date.day)
        ethiopian = self.converter.gregorian_to_ethiopian(gregorian)
        assert isinstance(ethiopian, EthiopianDate)
        assert self.converter.ethiopian_to_gregorian(ethiopian) == gregorian

    @given(ethiopian_dates())
    @settings(max_examples=300)
    def test_consecutive_days_stay_consecutive(self, ethiopian: EthiopianDate) -> None:
        """
        Property: The day after an Ethiopian date converts to the day
        after its Gregorian equivalent.
        """
        today = self.converter.ethiopian_to_gregorian(ethiopian)
        tomorrow = self.converter.ethiopian_to_gregorian(next_ethiopian_day(ethiopian))
        assert (
            gregorian_to_jdn(*tomorrow.as_tuple())
            - gregorian_to_jdn(*today.as_tuple())
        ) == 1

    @given(integers(min_value=1, max_value=3000))
    @settings(max_examples=200)
    def test_every_pagume_day_converts(self, year: int) -> None:
        """Property: Each valid Pagume day maps into September."""
        days = LeapYearRule().days_in_ethiopian_month(year, 13)
        for day in range(1, days + 1):
            gregorian = self.converter.ethiopian_to_gregorian(EthiopianDate(year, 13, day))
            assert isinstance(gregorian, GregorianDate)
            assert gregorian.month in (8, 9, 10)

    @given(gregorian_dates())
    @settings(max_examples=500)
    def test_gregorian_round_trip_distant_years(self, gregorian: GregorianDate) -> None:
        """
        Property: Round trip holds for Gregorian years up to 1,000,000,
        far past the point where the September new-year rule drifts.
        """
        ethiopian = self.converter.gregorian_to_ethiopian(gregorian)
        assert isinstance(ethiopian, EthiopianDate)
        assert 1 <= ethiopian.month <= 13
        assert 1 <= ethiopian.day <= LeapYearRule().days_in_ethiopian_month(
            ethiopian.year, ethiopian.month
        )
        assert self.converter.ethiopian_to_gregorian(ethiopian) == gregorian
