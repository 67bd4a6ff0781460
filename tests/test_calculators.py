"""
Test cases for calculator building blocks.
"""

from datetime import date

import pytest

from holiday_rules.calculators import (
    RuleConfigurationError,
    Weekday,
    first_weekday_in_window,
    fixed,
    from_primitive,
    is_active,
    weekday_in_window,
)
from holiday_rules.models import CalculationContext, HolidayType

NAMES = {"en_US": "Test Day"}


def ctx(year: int) -> CalculationContext:
    return CalculationContext(year=year, timezone="Europe/Helsinki")


class TestIsActive:

    def test_open_bounds(self):
        assert is_active(-500)
        assert is_active(3000)

    def test_since(self):
        assert not is_active(1916, since=1917)
        assert is_active(1917, since=1917)

    def test_until(self):
        assert is_active(1990, until=1990)
        assert not is_active(1991, until=1990)

    def test_range(self):
        assert not is_active(1959, since=1960, until=1970)
        assert is_active(1965, since=1960, until=1970)
        assert not is_active(1971, since=1960, until=1970)


class TestWeekday:

    def test_matches_isoweekday(self):
        assert Weekday(date(1956, 6, 23).isoweekday()) is Weekday.SAT
        assert Weekday(date(2024, 6, 24).isoweekday()) is Weekday.MON


class TestFirstWeekdayInWindow:

    def test_finds_saturday(self):
        assert first_weekday_in_window(1956, 6, 20, 26, Weekday.SAT) == date(1956, 6, 23)

    @pytest.mark.parametrize("weekday", list(Weekday))
    def test_every_weekday_occurs_once_in_a_week(self, weekday):
        d = first_weekday_in_window(2024, 6, 20, 26, weekday)

        assert 20 <= d.day <= 26
        assert d.isoweekday() == weekday

    def test_no_match_is_a_configuration_error(self):
        # June 24-25, 2024 are Monday and Tuesday
        with pytest.raises(RuleConfigurationError, match="No Sat"):
            first_weekday_in_window(2024, 6, 24, 25, Weekday.SAT)


class TestFixed:

    def test_every_year(self):
        calculate = fixed("testDay", NAMES, 5, 2)

        assert calculate(ctx(1808)).date == date(1808, 5, 2)
        assert calculate(ctx(2024)).date == date(2024, 5, 2)

    def test_absent_before_introduction(self):
        calculate = fixed("testDay", NAMES, 12, 6, since=1917)

        assert calculate(ctx(1916)) is None
        assert calculate(ctx(1917)).date == date(1917, 12, 6)

    def test_absent_after_abolition(self):
        calculate = fixed("testDay", NAMES, 5, 16, since=1919, until=1938)

        assert calculate(ctx(1918)) is None
        assert calculate(ctx(1919)) is not None
        assert calculate(ctx(1938)) is not None
        assert calculate(ctx(1939)) is None

    def test_type(self):
        calculate = fixed("testDay", NAMES, 1, 1, holiday_type=HolidayType.BANK)

        assert calculate(ctx(2024)).type == HolidayType.BANK

    def test_invalid_day_propagates(self):
        calculate = fixed("testDay", NAMES, 2, 30)

        with pytest.raises(ValueError):
            calculate(ctx(2024))


class TestWeekdayInWindow:

    def make(self):
        return weekday_in_window(
            "midsummer", NAMES, 6, 20, 26, Weekday.SAT, since=1955, fallback_day=24
        )

    def test_fallback_before_threshold(self):
        holiday = self.make()(ctx(1954))

        assert holiday.date == date(1954, 6, 24)
        assert holiday.date.isoweekday() != 6

    def test_search_from_threshold(self):
        assert self.make()(ctx(1955)).date == date(1955, 6, 25)
        assert self.make()(ctx(2024)).date == date(2024, 6, 22)

    def test_window_longer_than_a_week_rejected(self):
        with pytest.raises(RuleConfigurationError, match="more than one week"):
            weekday_in_window("x", NAMES, 6, 20, 27, Weekday.SAT, since=1955, fallback_day=24)

    def test_reversed_window_rejected(self):
        with pytest.raises(RuleConfigurationError, match="ends before"):
            weekday_in_window("x", NAMES, 6, 26, 20, Weekday.SAT, since=1955, fallback_day=24)

    def test_short_window_fails_when_evaluated(self):
        calculate = weekday_in_window(
            "x", NAMES, 6, 24, 25, Weekday.SAT, since=1955, fallback_day=24
        )

        assert calculate(ctx(1954)).date == date(1954, 6, 24)
        with pytest.raises(RuleConfigurationError):
            calculate(ctx(2024))


class TestFromPrimitive:

    def test_keeps_primitive_type(self, primitives):
        calculate = from_primitive(primitives.valentines_day)

        assert calculate(ctx(2024)).type == HolidayType.OTHER

    def test_overrides_type(self, primitives):
        calculate = from_primitive(primitives.corpus_christi, HolidayType.OBSERVANCE)

        assert calculate(ctx(2024)).type == HolidayType.OBSERVANCE

    def test_year_gated(self, primitives):
        calculate = from_primitive(primitives.epiphany, since=2000, until=2010)

        assert calculate(ctx(1999)) is None
        assert calculate(ctx(2005)).date == date(2005, 1, 6)
        assert calculate(ctx(2011)) is None
