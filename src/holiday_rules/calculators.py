"""
Calculator building blocks for rule sets.

A calculator maps a CalculationContext to zero or one Holiday. Calculators
are independent of each other and hold no state, so a rule set may evaluate
them in any order.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from enum import IntEnum
from typing import Optional

from .models import CalculationContext, Holiday, HolidayType

Calculator = Callable[[CalculationContext], Optional[Holiday]]


class RuleConfigurationError(RuntimeError):
    """A rule is configured in a way that can never yield a valid date."""


class Weekday(IntEnum):
    """Weekdays, valued as ``date.isoweekday()``."""
    MON = 1
    TUE = 2
    WED = 3
    THU = 4
    FRI = 5
    SAT = 6
    SUN = 7


def is_active(year: int, since: Optional[int] = None, until: Optional[int] = None) -> bool:
    """True if *year* lies within [since, until]; missing bounds are open."""
    if since is not None and year < since:
        return False
    if until is not None and year > until:
        return False
    return True


def first_weekday_in_window(
    year: int, month: int, start_day: int, end_day: int, weekday: Weekday
) -> date:
    """First date in ``month`` between ``start_day`` and ``end_day`` (inclusive) on ``weekday``.

    Raises:
        RuleConfigurationError: if no day of the window matches.
    """
    for day in range(start_day, end_day + 1):
        d = date(year, month, day)
        if d.isoweekday() == weekday:
            return d

    raise RuleConfigurationError(
        f"No {weekday.name.title()} between {month}/{start_day} and {month}/{end_day} in {year}"
    )


def fixed(
    key: str,
    names: dict[str, str],
    month: int,
    day: int,
    since: Optional[int] = None,
    until: Optional[int] = None,
    holiday_type: HolidayType = HolidayType.NATIONAL,
) -> Calculator:
    """Holiday on the same date every year it is observed.

    ``since`` is the year the holiday was introduced and ``until`` the last
    year it was observed. Outside that range no holiday is produced.
    """

    def calculate(ctx: CalculationContext) -> Optional[Holiday]:
        if not is_active(ctx.year, since, until):
            return None
        return ctx.holiday(key, names, ctx.make_date(month, day), holiday_type)

    calculate.__name__ = key
    return calculate


def weekday_in_window(
    key: str,
    names: dict[str, str],
    month: int,
    start_day: int,
    end_day: int,
    weekday: Weekday,
    since: int,
    fallback_day: int,
    holiday_type: HolidayType = HolidayType.NATIONAL,
) -> Calculator:
    """Holiday on a weekday inside a window of days from ``since`` on.

    Before ``since`` the holiday is on ``fallback_day`` of ``month``
    whatever the weekday.
    """
    if end_day < start_day:
        raise RuleConfigurationError(f"{key}: window ends before it starts")
    if end_day - start_day + 1 > 7:
        raise RuleConfigurationError(f"{key}: window spans more than one week")

    def calculate(ctx: CalculationContext) -> Optional[Holiday]:
        if ctx.year < since:
            d = ctx.make_date(month, fallback_day)
        else:
            d = first_weekday_in_window(ctx.year, month, start_day, end_day, weekday)
        return ctx.holiday(key, names, d, holiday_type)

    calculate.__name__ = key
    return calculate


def from_primitive(
    primitive: Callable[..., Holiday],
    holiday_type: Optional[HolidayType] = None,
    since: Optional[int] = None,
    until: Optional[int] = None,
) -> Calculator:
    """Wraps a primitive holiday method as a (optionally year-gated) calculator.

    Without ``holiday_type`` the primitive's own default type is kept.
    """

    def calculate(ctx: CalculationContext) -> Optional[Holiday]:
        if not is_active(ctx.year, since, until):
            return None
        if holiday_type is None:
            return primitive(ctx)
        return primitive(ctx, holiday_type)

    calculate.__name__ = getattr(primitive, "__name__", "primitive")
    return calculate
