"""
Holidays in the Community of Madrid (Spain).
"""

from typing import Optional

from ...calculators import fixed, from_primitive
from ...models import HolidayType
from ...primitives import HolidayPrimitives, StandardHolidays
from ...rulesets import JurisdictionRuleSet, RegionRuleSet
from . import build as build_spain

# Uprising of the people of Madrid against the French occupation in 1808.
DOS_DE_MAYO_UPRISING_DAY = fixed(
    "dosdeMayoUprisingDay",
    {"es_ES": "Fiesta de la Comunidad de Madrid", "en_US": "Dos de Mayo Uprising"},
    month=5,
    day=2,
)


def build(
    parent: Optional[JurisdictionRuleSet] = None,
    primitives: Optional[HolidayPrimitives] = None,
) -> RegionRuleSet:
    """Rule set for the Community of Madrid on top of Spain."""
    p = primitives or StandardHolidays()
    return RegionRuleSet(
        "Spain/CommunityOfMadrid",
        parent or build_spain(p),
        [
            from_primitive(p.st_josephs_day, HolidayType.OBSERVANCE),
            from_primitive(p.maundy_thursday, HolidayType.OBSERVANCE),
            from_primitive(p.corpus_christi, HolidayType.OBSERVANCE),
            DOS_DE_MAYO_UPRISING_DAY,
        ],
    )
