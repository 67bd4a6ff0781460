"""
YAML snapshots of computed holidays.
Keeps holiday lists in insertion order so dumps are reproducible.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from . import config
from .models import Holiday, HolidayList
from .registry import compute, get_provider

logger = logging.getLogger(__name__)


class HolidaySnapshot(BaseModel):
    """Root model for a holidays YAML file."""
    region: str
    year: int
    timezone: str
    locale: str
    holidays: list[Holiday] = Field(default_factory=list)

    @field_validator("holidays")
    @classmethod
    def validate_unique_keys(cls, v: list[Holiday]) -> list[Holiday]:
        keys = [h.key for h in v]
        duplicates = sorted({k for k in keys if keys.count(k) > 1})
        if duplicates:
            raise ValueError(f"Duplicate holiday keys: {', '.join(duplicates)}")
        return v

    def to_holiday_list(self) -> HolidayList:
        """Holidays as a HolidayList."""
        return HolidayList(self.holidays)


def take_snapshot(
    region: str,
    year: int,
    timezone: Optional[str] = None,
    locale: Optional[str] = None,
) -> HolidaySnapshot:
    """Compute a region's holidays and wrap them in a snapshot."""
    provider = get_provider(region)
    holidays = compute(region, year, timezone, locale)
    return HolidaySnapshot(
        region=region,
        year=year,
        timezone=timezone or provider.timezone,
        locale=locale or config.DEFAULT_LOCALE,
        holidays=list(holidays.values()),
    )


def dump_yaml(snapshot: HolidaySnapshot) -> str:
    """Serialize a snapshot as YAML."""
    data = snapshot.model_dump(mode="json")
    return yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)


class HolidayStore:
    """Loads and saves holiday snapshots."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> HolidaySnapshot:
        """Load snapshot from YAML."""
        with open(self.path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return HolidaySnapshot.model_validate(data)

    def save(self, snapshot: HolidaySnapshot) -> None:
        """Save snapshot as YAML."""
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(dump_yaml(snapshot))
        logger.debug(
            "Saved %d holidays of %s %d to %s",
            len(snapshot.holidays), snapshot.region, snapshot.year, self.path,
        )
