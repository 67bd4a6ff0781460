"""
Holiday rules package initialization.
Computes the public holidays of a country or region for a given year.
"""

from .calculators import RuleConfigurationError, Weekday
from .holidays import HolidayChecker, to_frame
from .models import CalculationContext, Holiday, HolidayList, HolidayType
from .primitives import HolidayPrimitives, StandardHolidays, easter_date
from .registry import PROVIDERS, UnknownRegionError, compute, get_provider
from .rulesets import CountryRuleSet, RegionRuleSet, merge_holidays
from .store import HolidaySnapshot, HolidayStore, take_snapshot

__all__ = [
    "PROVIDERS",
    "CalculationContext",
    "CountryRuleSet",
    "Holiday",
    "HolidayChecker",
    "HolidayList",
    "HolidayPrimitives",
    "HolidaySnapshot",
    "HolidayStore",
    "HolidayType",
    "RegionRuleSet",
    "RuleConfigurationError",
    "StandardHolidays",
    "UnknownRegionError",
    "Weekday",
    "compute",
    "easter_date",
    "get_provider",
    "merge_holidays",
    "take_snapshot",
    "to_frame",
]
