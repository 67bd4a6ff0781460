"""
Holidays in Spain.
Regions (autonomous communities) live in the submodules of this package.
"""

from typing import Optional

from ...calculators import fixed, from_primitive
from ...models import HolidayType
from ...primitives import HolidayPrimitives, StandardHolidays
from ...rulesets import CountryRuleSet

TIMEZONE = "Europe/Madrid"

# Fiesta Nacional de España, October 12 under its current name since 1981.
NATIONAL_DAY = fixed(
    "nationalDay",
    {"es_ES": "Fiesta Nacional de España", "en_US": "National Day"},
    month=10,
    day=12,
    since=1981,
)

# Referendum on the Spanish Constitution of 1978.
CONSTITUTION_DAY = fixed(
    "constitutionDay",
    {"es_ES": "Día de la Constitución", "en_US": "Constitution Day"},
    month=12,
    day=6,
    since=1978,
)


def build(primitives: Optional[HolidayPrimitives] = None) -> CountryRuleSet:
    """Rule set for Spain."""
    p = primitives or StandardHolidays()
    return CountryRuleSet(
        "Spain",
        TIMEZONE,
        [
            from_primitive(p.new_years_day),
            from_primitive(p.international_workers_day),
            # Not among the national holidays Spain publishes each year in the BOE
            from_primitive(p.valentines_day, HolidayType.OTHER),
            from_primitive(p.epiphany),
            from_primitive(p.good_friday),
            from_primitive(p.easter),
            from_primitive(p.assumption_of_mary),
            from_primitive(p.all_saints_day),
            from_primitive(p.immaculate_conception),
            from_primitive(p.christmas_day),
            NATIONAL_DAY,
            CONSTITUTION_DAY,
        ],
    )
