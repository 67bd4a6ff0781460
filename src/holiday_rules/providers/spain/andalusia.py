"""
Holidays in Andalusia (Spain).
"""

from typing import Optional

from ...calculators import fixed
from ...primitives import HolidayPrimitives, StandardHolidays
from ...rulesets import JurisdictionRuleSet, RegionRuleSet
from . import build as build_spain

# Referendum on Andalusian autonomy of February 28, 1980.
ANDALUSIA_DAY = fixed(
    "andalusiaDay",
    {"es_ES": "Día de Andalucía", "en_US": "Andalusia Day"},
    month=2,
    day=28,
    since=1980,
)


def build(
    parent: Optional[JurisdictionRuleSet] = None,
    primitives: Optional[HolidayPrimitives] = None,
) -> RegionRuleSet:
    """Rule set for Andalusia on top of Spain."""
    return RegionRuleSet(
        "Spain/Andalusia",
        parent or build_spain(primitives or StandardHolidays()),
        [ANDALUSIA_DAY],
    )
