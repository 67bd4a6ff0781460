"""
Holiday lookups by date, for schedulers and reports.
"""

import logging
from datetime import date
from typing import Iterable, Optional, Union

import pandas as pd

from .models import Holiday, HolidayList, HolidayType
from .registry import PROVIDERS, compute

logger = logging.getLogger(__name__)

DateLike = Union[date, pd.Timestamp, str]

# Days off by default; observances and other days are not
DAY_OFF_TYPES = (HolidayType.NATIONAL, HolidayType.BANK)


def _to_date(value: DateLike) -> date:
    return pd.Timestamp(value).date()


def to_frame(holidays: HolidayList) -> pd.DataFrame:
    """Holidays as a DataFrame with one row per holiday, in list order."""
    return pd.DataFrame(
        {
            "key": [h.key for h in holidays.values()],
            "name": [h.name for h in holidays.values()],
            "date": pd.to_datetime([h.date for h in holidays.values()]),
            "type": [h.type.value for h in holidays.values()],
            "timezone": [h.timezone for h in holidays.values()],
        },
        columns=["key", "name", "date", "type", "timezone"],
    )


class HolidayChecker:
    """Checks if a date is a holiday in a region."""

    def __init__(
        self,
        region: Optional[str] = None,
        locale: Optional[str] = None,
        types: Iterable[HolidayType] = DAY_OFF_TYPES,
    ):
        self.region = region
        self.locale = locale
        self.types = frozenset(types)
        self._holidays: dict[int, HolidayList] = {}

        if region and region not in PROVIDERS:
            logger.error("No holiday rules for region %s", region)
        elif region:
            # Cache holidays from last year to next year
            current_year = date.today().year
            for year in range(current_year - 1, current_year + 2):
                self._holidays[year] = compute(region, year, locale=locale)

    @property
    def cached_years(self) -> list[int]:
        """Years computed so far."""
        return sorted(self._holidays)

    def _enabled(self) -> bool:
        return bool(self.region) and self.region in PROVIDERS

    def holidays_for_year(self, year: int) -> HolidayList:
        """All holidays of a year, whatever their type."""
        if not self._enabled():
            return HolidayList()
        if year not in self._holidays:
            self._holidays[year] = compute(self.region, year, locale=self.locale)
        return self._holidays[year]

    def _matching(self, d: date) -> list[Holiday]:
        return [h for h in self.holidays_for_year(d.year).on(d) if h.type in self.types]

    def is_holiday(self, d: DateLike) -> bool:
        """Checks if date is a holiday."""
        return bool(self._matching(_to_date(d)))

    def get_holiday_name(self, d: DateLike) -> Optional[str]:
        """Returns holiday name or None."""
        matches = self._matching(_to_date(d))
        return matches[0].name if matches else None

    def holidays(self, start: DateLike, end: DateLike) -> pd.DatetimeIndex:
        """Holiday dates within [start, end], sorted."""
        first, last = _to_date(start), _to_date(end)
        dates: set[date] = set()
        for year in range(first.year, last.year + 1):
            for h in self.holidays_for_year(year).between(first, last).values():
                if h.type in self.types:
                    dates.add(h.date)
        return pd.DatetimeIndex(
            [pd.Timestamp(d) for d in sorted(dates)], dtype="datetime64[ns]", name=self.region
        )
