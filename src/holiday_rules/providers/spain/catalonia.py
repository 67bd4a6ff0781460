"""
Holidays in Catalonia (Spain).
"""

from typing import Optional

from ...calculators import fixed, from_primitive
from ...primitives import HolidayPrimitives, StandardHolidays
from ...rulesets import JurisdictionRuleSet, RegionRuleSet
from . import build as build_spain

# La Diada, commemorating the fall of Barcelona in 1714, observed since 1886.
NATIONAL_CATALONIA_DAY = fixed(
    "nationalCataloniaDay",
    {"ca_ES": "Diada Nacional de Catalunya", "en_US": "National Day of Catalonia"},
    month=9,
    day=11,
    since=1886,
)


def build(
    parent: Optional[JurisdictionRuleSet] = None,
    primitives: Optional[HolidayPrimitives] = None,
) -> RegionRuleSet:
    """Rule set for Catalonia on top of Spain."""
    p = primitives or StandardHolidays()
    return RegionRuleSet(
        "Spain/Catalonia",
        parent or build_spain(p),
        [
            from_primitive(p.easter_monday),
            from_primitive(p.st_johns_day),
            NATIONAL_CATALONIA_DAY,
            from_primitive(p.st_stephens_day),
        ],
    )
