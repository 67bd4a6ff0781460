"""
Lookup of rule sets by region identifier.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from .models import HolidayList
from .primitives import StandardHolidays
from .providers import finland, spain
from .providers.spain import andalusia, catalonia, community_of_madrid
from .rulesets import JurisdictionRuleSet

logger = logging.getLogger(__name__)

_primitives = StandardHolidays()
_spain = spain.build(_primitives)

PROVIDERS: dict[str, JurisdictionRuleSet] = {
    "Finland": finland.build(_primitives),
    "Spain": _spain,
    "Spain/Andalusia": andalusia.build(_spain, _primitives),
    "Spain/Catalonia": catalonia.build(_spain, _primitives),
    "Spain/CommunityOfMadrid": community_of_madrid.build(_spain, _primitives),
}


class UnknownRegionError(KeyError):
    """No rule set is registered for a region identifier."""


def get_provider(region: str) -> JurisdictionRuleSet:
    """Return the rule set registered for *region* (e.g. ``"Spain/CommunityOfMadrid"``).

    Raises ``UnknownRegionError`` if the region is not supported.
    """
    provider = PROVIDERS.get(region)
    if provider is None:
        supported = ", ".join(sorted(PROVIDERS))
        msg = f"Unknown region {region!r}. Supported: {supported}"
        raise UnknownRegionError(msg)
    return provider


@lru_cache(maxsize=256)
def compute(
    region: str,
    year: int,
    timezone: Optional[str] = None,
    locale: Optional[str] = None,
) -> HolidayList:
    """Holidays of *region* in *year*.

    Results are cached per (region, year, timezone, locale); rule sets are
    pure, so cached lists never go stale.
    """
    provider = get_provider(region)
    logger.debug("Computing holidays for %s in %d", region, year)
    return provider.compute(year, timezone=timezone, locale=locale)
