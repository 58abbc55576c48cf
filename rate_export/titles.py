"""
Sheet Titles

"{Locale} {Shipping Speed} Rates", e.g. "Domestic Standard Rates".
"""

# Speeds whose display name is not their capitalized identifier
SPEED_DISPLAY_NAMES = {
    "nextDay": "Next Day",
    "intlExpedited": "Expedited",
    "intlEconomy": "Economy",
}


def _capitalize_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def speed_display_name(shipping_speed: str) -> str:
    """Display name for a shipping speed ("standard" -> "Standard")."""
    if shipping_speed in SPEED_DISPLAY_NAMES:
        return SPEED_DISPLAY_NAMES[shipping_speed]
    return _capitalize_first(shipping_speed)


def format_sheet_title(shipping_speed: str, locale: str) -> str:
    """Sheet title for a tier."""
    return f"{_capitalize_first(locale)} {speed_display_name(shipping_speed)} Rates"
