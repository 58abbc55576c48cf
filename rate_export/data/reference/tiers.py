"""
Export Tiers

One sheet is produced per tier, in the order listed here.
Client ID is fixed for the export and not read from the environment.
"""

CLIENT_ID = 1240              # Client whose rates are exported

LOCALE_DOMESTIC = "domestic"
LOCALE_INTERNATIONAL = "international"

# (shipping_speed, locale) pairs, one output sheet each
TIERS = [
    ("standard", LOCALE_DOMESTIC),
    ("expedited", LOCALE_DOMESTIC),
    ("nextDay", LOCALE_DOMESTIC),
    ("intlEconomy", LOCALE_INTERNATIONAL),
    ("intlExpedited", LOCALE_INTERNATIONAL),
]

# Leading headings on every sheet, followed by the locale's zone headings
HEADINGS = ["Start Weight", "End Weight"]
