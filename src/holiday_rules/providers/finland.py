"""
Holidays in Finland.
"""

from typing import Optional

from ..calculators import Weekday, fixed, from_primitive, weekday_in_window
from ..primitives import HolidayPrimitives, StandardHolidays
from ..rulesets import CountryRuleSet

TIMEZONE = "Europe/Helsinki"

# Midsummer. Since 1955 always the Saturday between June 20 and 26,
# before that always June 24.
ST_JOHNS_DAY = weekday_in_window(
    "stJohnsDay",
    {"fi_FI": "Juhannuspäivä", "en_US": "St. John's Day"},
    month=6,
    start_day=20,
    end_day=26,
    weekday=Weekday.SAT,
    since=1955,
    fallback_day=24,
)

# Declaration of independence from Russia, first celebrated in 1917.
INDEPENDENCE_DAY = fixed(
    "independenceDay",
    {"fi_FI": "Itsenäisyyspäivä", "en_US": "Independence Day"},
    month=12,
    day=6,
    since=1917,
)


def build(primitives: Optional[HolidayPrimitives] = None) -> CountryRuleSet:
    """Rule set for Finland."""
    p = primitives or StandardHolidays()
    return CountryRuleSet(
        "Finland",
        TIMEZONE,
        [
            from_primitive(p.new_years_day),
            from_primitive(p.international_workers_day),
            from_primitive(p.epiphany),
            from_primitive(p.good_friday),
            from_primitive(p.easter),
            from_primitive(p.easter_monday),
            from_primitive(p.ascension_day),
            from_primitive(p.pentecost),
            ST_JOHNS_DAY,
            from_primitive(p.all_saints_day),
            from_primitive(p.christmas_day),
            from_primitive(p.second_christmas_day),
            INDEPENDENCE_DAY,
        ],
    )
