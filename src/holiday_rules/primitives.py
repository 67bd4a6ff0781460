"""
Primitive holiday functions.
Fixed-date commons and Easter-relative feasts shared by all rule sets.
"""

from __future__ import annotations

from datetime import date, timedelta
from functools import cache
from typing import Protocol

from .models import CalculationContext, Holiday, HolidayType

# Day offsets from Easter Sunday
EASTER_OFFSETS: dict[str, int] = {
    "maundyThursday": -3,
    "goodFriday": -2,
    "easter": 0,
    "easterMonday": 1,
    "ascensionDay": 39,
    "pentecost": 49,
    "pentecostMonday": 50,
    "corpusChristi": 60,
}

TRANSLATIONS: dict[str, dict[str, str]] = {
    "newYearsDay": {
        "en_US": "New Year's Day",
        "fi_FI": "Uudenvuodenpäivä",
        "es_ES": "Año Nuevo",
    },
    "internationalWorkersDay": {
        "en_US": "International Workers' Day",
        "fi_FI": "Vappu",
        "es_ES": "Día del Trabajador",
    },
    "valentinesDay": {
        "en_US": "Valentine's Day",
        "fi_FI": "Ystävänpäivä",
        "es_ES": "San Valentín",
    },
    "epiphany": {
        "en_US": "Epiphany",
        "fi_FI": "Loppiainen",
        "es_ES": "Día de Reyes",
    },
    "stJosephsDay": {
        "en_US": "St. Joseph's Day",
        "es_ES": "San José",
    },
    "maundyThursday": {
        "en_US": "Maundy Thursday",
        "fi_FI": "Kiirastorstai",
        "es_ES": "Jueves Santo",
    },
    "goodFriday": {
        "en_US": "Good Friday",
        "fi_FI": "Pitkäperjantai",
        "es_ES": "Viernes Santo",
    },
    "easter": {
        "en_US": "Easter Sunday",
        "fi_FI": "Pääsiäispäivä",
        "es_ES": "Domingo de Resurrección",
    },
    "easterMonday": {
        "en_US": "Easter Monday",
        "fi_FI": "2. pääsiäispäivä",
        "es_ES": "Lunes de Pascua",
    },
    "ascensionDay": {
        "en_US": "Ascension Day",
        "fi_FI": "Helatorstai",
        "es_ES": "Ascensión del Señor",
    },
    "pentecost": {
        "en_US": "Pentecost",
        "fi_FI": "Helluntaipäivä",
        "es_ES": "Pentecostés",
    },
    "pentecostMonday": {
        "en_US": "Whit Monday",
        "es_ES": "Lunes de Pentecostés",
    },
    "corpusChristi": {
        "en_US": "Corpus Christi",
        "es_ES": "Corpus Christi",
    },
    "stJohnsDay": {
        "en_US": "St. John's Day",
        "fi_FI": "Juhannuspäivä",
        "es_ES": "Sant Joan",
    },
    "assumptionOfMary": {
        "en_US": "Assumption of Mary",
        "es_ES": "Asunción de la Virgen",
    },
    "allSaintsDay": {
        "en_US": "All Saints' Day",
        "fi_FI": "Pyhäinpäivä",
        "es_ES": "Día de todos los Santos",
    },
    "immaculateConception": {
        "en_US": "Immaculate Conception",
        "es_ES": "Inmaculada Concepción",
    },
    "christmasDay": {
        "en_US": "Christmas",
        "fi_FI": "Joulupäivä",
        "es_ES": "Navidad",
    },
    "secondChristmasDay": {
        "en_US": "Second Christmas Day",
        "fi_FI": "Tapaninpäivä",
    },
    "stStephensDay": {
        "en_US": "St. Stephen's Day",
        "es_ES": "San Esteban",
    },
}


def computus(year: int) -> tuple[int, int]:
    """Month and day of Gregorian Easter Sunday (anonymous algorithm).

    Plain integer arithmetic, defined for every integer year.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return month, day


@cache
def easter_date(year: int) -> date:
    """Gregorian Easter Sunday of *year*."""
    month, day = computus(year)
    return date(year, month, day)


def easter_offset_date(year: int, key: str) -> date:
    """Date of an Easter-relative feast, e.g. ``easter_offset_date(2024, "goodFriday")``."""
    return easter_date(year) + timedelta(days=EASTER_OFFSETS[key])


class HolidayPrimitives(Protocol):
    """Protocol for providers of the well-known holidays.

    Every method returns the holiday for the context year, typed as
    requested (national unless stated otherwise).
    """

    def new_years_day(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def international_workers_day(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def valentines_day(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def epiphany(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def st_josephs_day(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def maundy_thursday(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def good_friday(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def easter(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def easter_monday(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def ascension_day(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def pentecost(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def pentecost_monday(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def corpus_christi(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def st_johns_day(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def assumption_of_mary(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def all_saints_day(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def immaculate_conception(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def christmas_day(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def second_christmas_day(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...

    def st_stephens_day(self, ctx: CalculationContext, holiday_type: HolidayType = ...) -> Holiday: ...


class StandardHolidays:
    """Default implementation of HolidayPrimitives for Western calendars."""

    def _fixed(
        self, ctx: CalculationContext, key: str, month: int, day: int, holiday_type: HolidayType
    ) -> Holiday:
        return ctx.holiday(key, TRANSLATIONS[key], ctx.make_date(month, day), holiday_type)

    def _easter_relative(
        self, ctx: CalculationContext, key: str, holiday_type: HolidayType
    ) -> Holiday:
        d = easter_offset_date(ctx.year, key)
        return ctx.holiday(key, TRANSLATIONS[key], d, holiday_type)

    # Fixed dates

    def new_years_day(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._fixed(ctx, "newYearsDay", 1, 1, holiday_type)

    def epiphany(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._fixed(ctx, "epiphany", 1, 6, holiday_type)

    def valentines_day(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.OTHER
    ) -> Holiday:
        return self._fixed(ctx, "valentinesDay", 2, 14, holiday_type)

    def st_josephs_day(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._fixed(ctx, "stJosephsDay", 3, 19, holiday_type)

    def international_workers_day(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._fixed(ctx, "internationalWorkersDay", 5, 1, holiday_type)

    def st_johns_day(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._fixed(ctx, "stJohnsDay", 6, 24, holiday_type)

    def assumption_of_mary(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._fixed(ctx, "assumptionOfMary", 8, 15, holiday_type)

    def all_saints_day(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._fixed(ctx, "allSaintsDay", 11, 1, holiday_type)

    def immaculate_conception(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._fixed(ctx, "immaculateConception", 12, 8, holiday_type)

    def christmas_day(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._fixed(ctx, "christmasDay", 12, 25, holiday_type)

    def second_christmas_day(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._fixed(ctx, "secondChristmasDay", 12, 26, holiday_type)

    def st_stephens_day(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._fixed(ctx, "stStephensDay", 12, 26, holiday_type)

    # Movable feasts

    def maundy_thursday(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._easter_relative(ctx, "maundyThursday", holiday_type)

    def good_friday(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._easter_relative(ctx, "goodFriday", holiday_type)

    def easter(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._easter_relative(ctx, "easter", holiday_type)

    def easter_monday(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._easter_relative(ctx, "easterMonday", holiday_type)

    def ascension_day(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._easter_relative(ctx, "ascensionDay", holiday_type)

    def pentecost(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._easter_relative(ctx, "pentecost", holiday_type)

    def pentecost_monday(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._easter_relative(ctx, "pentecostMonday", holiday_type)

    def corpus_christi(
        self, ctx: CalculationContext, holiday_type: HolidayType = HolidayType.NATIONAL
    ) -> Holiday:
        return self._easter_relative(ctx, "corpusChristi", holiday_type)
