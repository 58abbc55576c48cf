"""
Zone Bounds

Number of zone columns per locale. Overridable from the environment.

DOMESTIC
--------
Numbered zones 1..MAX_DOMESTIC_ZONE (8 = Zones 1 - 8).

INTERNATIONAL
-------------
Lettered zones A..MAX_INTERNATIONAL_ZONE (O = Zones A - O).

Bounds are not validated. A record whose zone falls outside the range is
grouped but never written, so keep these in sync with the rates table.
"""

import os

MAX_DOMESTIC_ZONE = int(os.environ.get("MAX_DOMESTIC_ZONE", "8"))
MAX_INTERNATIONAL_ZONE = os.environ.get("MAX_INTERNATIONAL_ZONE", "O")
