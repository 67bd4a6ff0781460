"""
Data model for computed holidays.
Holds the holiday record, the calculation context and the ordered output set.
"""

import datetime
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Optional
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from . import config


def validate_timezone(v: str) -> str:
    """Rejects identifiers unknown to the tz database."""
    try:
        ZoneInfo(v)
    except (KeyError, ValueError):
        raise ValueError(f"Invalid timezone: {v}")
    return v


class HolidayType(str, Enum):
    """Holiday classifications."""
    NATIONAL = "national"
    OBSERVANCE = "observance"
    SEASON = "season"
    BANK = "bank"
    OTHER = "other"


class Holiday(BaseModel):
    """A single dated holiday of one jurisdiction."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1)
    names: Mapping[str, str]
    date: datetime.date
    timezone: str
    type: HolidayType = HolidayType.NATIONAL
    locale: str = config.DEFAULT_LOCALE

    @field_validator("names")
    @classmethod
    def validate_names(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        if not v:
            raise ValueError("names must contain at least one translation")
        # Read-only copy; holidays are shared through the registry cache
        return MappingProxyType(dict(v))

    @field_serializer("names")
    def serialize_names(self, v: Mapping[str, str]) -> dict[str, str]:
        return dict(v)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        return validate_timezone(v)

    @property
    def name(self) -> str:
        """Display name in the holiday's locale.

        Falls back to the base locale and then to the first translation,
        so a holiday always has a name.
        """
        if self.locale in self.names:
            return self.names[self.locale]
        if config.BASE_LOCALE in self.names:
            return self.names[config.BASE_LOCALE]
        return next(iter(self.names.values()))

    @property
    def start(self) -> datetime.datetime:
        """Local midnight of the holiday."""
        return datetime.datetime.combine(
            self.date, datetime.time(0, 0), tzinfo=ZoneInfo(self.timezone)
        )

    def with_type(self, holiday_type: HolidayType) -> "Holiday":
        """Returns a copy with another classification."""
        return self.model_copy(update={"type": holiday_type})

    def __str__(self) -> str:
        return f"{self.date.isoformat()} {self.name} ({self.type.value})"


class CalculationContext(BaseModel):
    """Inputs shared by every calculator of one computation."""

    model_config = ConfigDict(frozen=True)

    year: int
    timezone: str
    locale: str = config.DEFAULT_LOCALE

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        return validate_timezone(v)

    def get_tz(self) -> ZoneInfo:
        """Returns ZoneInfo."""
        return ZoneInfo(self.timezone)

    def make_date(self, month: int, day: int) -> datetime.date:
        """Date in the context year."""
        return datetime.date(self.year, month, day)

    def holiday(
        self,
        key: str,
        names: dict[str, str],
        d: datetime.date,
        holiday_type: HolidayType = HolidayType.NATIONAL,
    ) -> Holiday:
        """Builds a holiday carrying this context's timezone and locale."""
        return Holiday(
            key=key,
            names=names,
            date=d,
            timezone=self.timezone,
            type=holiday_type,
            locale=self.locale,
        )


class HolidayList(Mapping[str, Holiday]):
    """Immutable holidays keyed by holiday key, in insertion order.

    Building a list from records with a repeated key keeps the position of
    the first record and the value of the last one.
    """

    __slots__ = ("_items",)

    def __init__(self, holidays: Iterable[Holiday] = ()):
        items: dict[str, Holiday] = {}
        for holiday in holidays:
            items[holiday.key] = holiday
        self._items = items

    def __getitem__(self, key: str) -> Holiday:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"HolidayList({list(self._items.values())!r})"

    def with_holidays(self, holidays: Iterable[Holiday]) -> "HolidayList":
        """New list with holidays appended; an existing key is overwritten."""
        return HolidayList([*self._items.values(), *holidays])

    def by_type(self, holiday_type: HolidayType) -> "HolidayList":
        """Holidays of one classification."""
        return HolidayList(h for h in self._items.values() if h.type == holiday_type)

    def dates(self) -> list[datetime.date]:
        """Dates of all holidays, in insertion order."""
        return [h.date for h in self._items.values()]

    def between(self, start: datetime.date, end: datetime.date) -> "HolidayList":
        """Holidays within [start, end]."""
        return HolidayList(h for h in self._items.values() if start <= h.date <= end)

    def on(self, d: datetime.date) -> list[Holiday]:
        """Holidays falling on a date."""
        return [h for h in self._items.values() if h.date == d]

    def first_on(self, d: datetime.date) -> Optional[Holiday]:
        """First holiday falling on a date, if any."""
        matches = self.on(d)
        return matches[0] if matches else None
