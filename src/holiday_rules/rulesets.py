"""
Country and region rule sets.
A rule set turns (year, timezone, locale) into the holidays of one jurisdiction.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Protocol

from . import config
from .calculators import Calculator, RuleConfigurationError
from .models import CalculationContext, Holiday, HolidayList

logger = logging.getLogger(__name__)


class JurisdictionRuleSet(Protocol):
    """Protocol for anything that computes a jurisdiction's holidays."""

    name: str

    @property
    def timezone(self) -> str: ...

    def compute(
        self,
        year: int,
        timezone: Optional[str] = None,
        locale: Optional[str] = None,
        executor: Optional[ThreadPoolExecutor] = None,
    ) -> HolidayList: ...


def run_calculators(
    calculators: Sequence[Calculator],
    ctx: CalculationContext,
    executor: Optional[ThreadPoolExecutor] = None,
) -> list[Holiday]:
    """Evaluates calculators against one context, in declaration order.

    With a thread pool the calculators run concurrently; results keep the
    declaration order either way. Calculators are closures, so process pools
    cannot run them. Calculator errors propagate.

    Raises:
        TypeError: if ``executor`` is not a ThreadPoolExecutor.
    """
    if executor is not None and not isinstance(executor, ThreadPoolExecutor):
        raise TypeError(
            f"Calculators need a ThreadPoolExecutor, got {type(executor).__name__}"
        )
    if executor is None:
        results = [calculate(ctx) for calculate in calculators]
    else:
        results = list(executor.map(lambda calculate: calculate(ctx), calculators))
    return [holiday for holiday in results if holiday is not None]


def _unique(name: str, records: list[Holiday]) -> list[Holiday]:
    seen: set[str] = set()
    for holiday in records:
        if holiday.key in seen:
            raise RuleConfigurationError(f"{name}: holiday key {holiday.key!r} emitted twice")
        seen.add(holiday.key)
    return records


def merge_holidays(parent: HolidayList, holidays: Iterable[Holiday]) -> HolidayList:
    """Overlays holidays on a parent's output.

    A holiday whose key already exists replaces the parent's entry in place;
    other holidays are appended. Parent holidays are never removed.
    """
    return parent.with_holidays(holidays)


class CountryRuleSet:
    """Holidays of a country, from an ordered list of calculators."""

    def __init__(self, name: str, timezone: str, calculators: Sequence[Calculator]):
        self.name = name
        self._timezone = timezone
        self.calculators = tuple(calculators)

    @property
    def timezone(self) -> str:
        """Default timezone."""
        return self._timezone

    def __repr__(self) -> str:
        return f"CountryRuleSet({self.name!r})"

    def compute(
        self,
        year: int,
        timezone: Optional[str] = None,
        locale: Optional[str] = None,
        executor: Optional[ThreadPoolExecutor] = None,
    ) -> HolidayList:
        """Compute the holidays of ``year``.

        Raises:
            ValueError: if ``timezone`` is not a valid IANA identifier.
        """
        ctx = CalculationContext(
            year=year,
            timezone=timezone or self.timezone,
            locale=locale or config.DEFAULT_LOCALE,
        )
        records = _unique(self.name, run_calculators(self.calculators, ctx, executor))
        logger.debug("Computed %d holidays for %s in %d", len(records), self.name, year)
        return HolidayList(records)


class RegionRuleSet:
    """Holidays of a region: its parent's holidays plus its own.

    The parent is computed on every call, with the region's timezone, and
    the region's calculators are overlaid afterwards.
    """

    def __init__(
        self,
        name: str,
        parent: JurisdictionRuleSet,
        calculators: Sequence[Calculator],
        timezone: Optional[str] = None,
    ):
        self.name = name
        self.parent = parent
        self.calculators = tuple(calculators)
        self._timezone = timezone

    @property
    def timezone(self) -> str:
        """Default timezone, the parent's unless the region has its own."""
        return self._timezone or self.parent.timezone

    def __repr__(self) -> str:
        return f"RegionRuleSet({self.name!r}, parent={self.parent.name!r})"

    def compute(
        self,
        year: int,
        timezone: Optional[str] = None,
        locale: Optional[str] = None,
        executor: Optional[ThreadPoolExecutor] = None,
    ) -> HolidayList:
        """Compute the holidays of ``year``, parent holidays included.

        Raises:
            ValueError: if ``timezone`` is not a valid IANA identifier.
        """
        ctx = CalculationContext(
            year=year,
            timezone=timezone or self.timezone,
            locale=locale or config.DEFAULT_LOCALE,
        )
        parent_holidays = self.parent.compute(
            year, timezone=ctx.timezone, locale=ctx.locale, executor=executor
        )
        records = _unique(self.name, run_calculators(self.calculators, ctx, executor))
        overridden = [h.key for h in records if h.key in parent_holidays]
        if overridden:
            logger.debug("%s overrides %s from %s", self.name, overridden, self.parent.name)

        holidays = merge_holidays(parent_holidays, records)
        logger.debug("Computed %d holidays for %s in %d", len(holidays), self.name, year)
        return holidays
