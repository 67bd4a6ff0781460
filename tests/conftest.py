"""
Pytest fixtures for rule set tests.
"""

from datetime import date
from typing import Optional

import pytest

from holiday_rules.calculators import fixed
from holiday_rules.models import CalculationContext, Holiday, HolidayType
from holiday_rules.primitives import StandardHolidays
from holiday_rules.providers import finland, spain
from holiday_rules.providers.spain import community_of_madrid
from holiday_rules.rulesets import CountryRuleSet


class RecordingPrimitives(StandardHolidays):
    """StandardHolidays that remembers which primitives were asked for."""

    def __init__(self):
        self.calls: list[tuple[str, int]] = []

    def _fixed(self, ctx, key, month, day, holiday_type):
        self.calls.append((key, ctx.year))
        return super()._fixed(ctx, key, month, day, holiday_type)

    def _easter_relative(self, ctx, key, holiday_type):
        self.calls.append((key, ctx.year))
        return super()._easter_relative(ctx, key, holiday_type)


def exploding(ctx: CalculationContext) -> Optional[Holiday]:
    """Calculator that always fails."""
    raise ZeroDivisionError("broken rule")


@pytest.fixture
def primitives() -> StandardHolidays:
    """Fixture providing the default primitives."""
    return StandardHolidays()


@pytest.fixture
def recording_primitives() -> RecordingPrimitives:
    """Fixture providing primitives that record their calls."""
    return RecordingPrimitives()


@pytest.fixture
def finland_rules(primitives):
    """Fixture providing a fresh Finland rule set."""
    return finland.build(primitives)


@pytest.fixture
def spain_rules(primitives):
    """Fixture providing a fresh Spain rule set."""
    return spain.build(primitives)


@pytest.fixture
def madrid_rules(spain_rules, primitives):
    """Fixture providing the Community of Madrid on top of ``spain_rules``."""
    return community_of_madrid.build(spain_rules, primitives)


@pytest.fixture
def tiny_country() -> CountryRuleSet:
    """Fixture providing a two-holiday country in Europe/Berlin.

    ``foundingDay`` (March 1) is observed from 2000 on, ``harvestDay``
    (October 1) every year as an observance.
    """
    return CountryRuleSet(
        "Tinyland",
        "Europe/Berlin",
        [
            fixed("foundingDay", {"en_US": "Founding Day"}, 3, 1, since=2000),
            fixed(
                "harvestDay",
                {"en_US": "Harvest Day", "de_DE": "Erntetag"},
                10,
                1,
                holiday_type=HolidayType.OBSERVANCE,
            ),
        ],
    )


@pytest.fixture
def sample_holiday() -> Holiday:
    """Fixture providing a single Finnish holiday."""
    return Holiday(
        key="independenceDay",
        names={"fi_FI": "Itsenäisyyspäivä", "en_US": "Independence Day"},
        date=date(2024, 12, 6),
        timezone="Europe/Helsinki",
        locale="fi_FI",
    )
