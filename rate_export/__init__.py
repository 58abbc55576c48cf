"""
Rate Export

Exports client shipping rates from the database to a multi-sheet Excel file,
one sheet per (shipping speed, locale) tier.
"""

from .export_rates import export_rates, build_workbook
from .sheets import create_sheet, group_brackets, new_workbook
from .titles import format_sheet_title
from .zones import Zone, resolve_zone_range

__all__ = [
    "export_rates",
    "build_workbook",
    "create_sheet",
    "group_brackets",
    "new_workbook",
    "format_sheet_title",
    "Zone",
    "resolve_zone_range",
]
