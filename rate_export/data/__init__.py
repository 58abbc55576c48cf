"""
Rate Export Data

Reference configuration and loaders for rate records.

Structure:
    - reference/: Static configuration (tiers, zone bounds, output file)
    - loaders/: Database loaders (rates table)
"""

from .reference.tiers import (
    CLIENT_ID,
    TIERS,
    HEADINGS,
    LOCALE_DOMESTIC,
    LOCALE_INTERNATIONAL,
)
from .reference.zones import MAX_DOMESTIC_ZONE, MAX_INTERNATIONAL_ZONE
from .reference.export import FILE_NAME, DEFAULT_COLUMN_WIDTH

from .loaders import fetch_rates

__all__ = [
    # Tiers
    "CLIENT_ID",
    "TIERS",
    "HEADINGS",
    "LOCALE_DOMESTIC",
    "LOCALE_INTERNATIONAL",
    # Zone bounds
    "MAX_DOMESTIC_ZONE",
    "MAX_INTERNATIONAL_ZONE",
    # Output
    "FILE_NAME",
    "DEFAULT_COLUMN_WIDTH",
    # Loaders
    "fetch_rates",
]
