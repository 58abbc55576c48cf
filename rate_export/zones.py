"""
Zone Ranges

Ordered zone columns for a locale, derived from the configured bounds.
"""

from typing import NamedTuple

from .data.reference.tiers import LOCALE_DOMESTIC, LOCALE_INTERNATIONAL


class Zone(NamedTuple):
    heading: str    # Column heading, e.g. "Zone 3"
    key: str        # Bracket row key, e.g. "zone3"


def zone_key(code) -> str:
    """Bracket row key for a raw zone code ("c" -> "zoneC")."""
    return f"zone{str(code).upper()}"


def domestic_zones(max_zone: int) -> list[Zone]:
    """Zones 1..max_zone. Empty if max_zone < 1."""
    return [Zone(f"Zone {i}", zone_key(i)) for i in range(1, max_zone + 1)]


def international_zones(max_letter: str) -> list[Zone]:
    """Zones A..max_letter inclusive. Empty if max_letter sorts before "A"."""
    return [
        Zone(f"Zone {chr(c)}", zone_key(chr(c)))
        for c in range(ord("A"), ord(max_letter) + 1)
    ]


def resolve_zone_range(
    locale: str,
    domestic_bound: int,
    international_bound: str,
) -> list[Zone]:
    """
    Resolve the ordered zone columns for a locale.

    Args:
        locale: "domestic" or "international"
        domestic_bound: Highest numbered domestic zone
        international_bound: Highest lettered international zone

    Returns:
        List of Zone(heading, key); empty for an unknown locale
    """
    if locale == LOCALE_DOMESTIC:
        return domestic_zones(domestic_bound)

    if locale == LOCALE_INTERNATIONAL:
        return international_zones(international_bound)

    return []
