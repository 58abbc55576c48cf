"""
Rate Sheets

Reshapes one tier of rate records into a worksheet.

Records arrive long, one row per (weight bracket, zone):

    start_weight  end_weight  zone  rate
    0             10          1     5.00
    0             10          2     6.50
    10            20          1     5.50

and are written wide, one row per weight bracket, one column per zone:

    Start Weight  End Weight  Zone 1  Zone 2
    0             10          5.00    6.50
    10            20          5.50

Row order is the order brackets first appear in the records, so records must
be sorted by start_weight, end_weight (fetch_rates does this in SQL).
Columns come from the resolved zone range only: a zone missing from a
bracket is a blank cell, and a zone outside the range is not written.
"""

from typing import Iterable, Mapping

import polars as pl
from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from .data.reference.tiers import HEADINGS
from .data.reference.export import DEFAULT_COLUMN_WIDTH
from .titles import format_sheet_title
from .zones import Zone, zone_key


# =============================================================================
# GROUPING
# =============================================================================

def group_brackets(records: pl.DataFrame | Iterable[Mapping]) -> list[dict]:
    """
    Fold rate records into one dict per weight bracket.

    Each bracket dict holds start_weight, end_weight and one zone key per
    zone seen for that bracket (e.g. {"start_weight": 0, "end_weight": 10,
    "zone1": 5.0, "zone2": 6.5}).

    Args:
        records: DataFrame or iterable of mappings with start_weight,
            end_weight, zone, rate

    Returns:
        Bracket dicts in first-seen order
    """
    if isinstance(records, pl.DataFrame):
        records = records.iter_rows(named=True)

    order: list[tuple] = []
    brackets: dict[tuple, dict] = {}

    for record in records:
        bracket_key = (record["start_weight"], record["end_weight"])

        bracket = brackets.get(bracket_key)
        if bracket is None:
            bracket = {
                "start_weight": record["start_weight"],
                "end_weight": record["end_weight"],
            }
            brackets[bracket_key] = bracket
            order.append(bracket_key)

        bracket[zone_key(record["zone"])] = record["rate"]

    return [brackets[key] for key in order]


def bracket_to_row(bracket: Mapping, zones: list[Zone]) -> list:
    """Flatten a bracket into sheet cells; None for zones without a rate."""
    return [bracket["start_weight"], bracket["end_weight"]] + [
        bracket.get(zone.key) for zone in zones
    ]


def header_row(zones: list[Zone]) -> list[str]:
    return HEADINGS + [zone.heading for zone in zones]


# =============================================================================
# WORKBOOK
# =============================================================================

def new_workbook() -> Workbook:
    """Empty workbook (openpyxl's default sheet removed)."""
    workbook = Workbook()
    workbook.remove(workbook.active)
    return workbook


def create_sheet(
    workbook: Workbook,
    records: pl.DataFrame | Iterable[Mapping],
    shipping_speed: str,
    locale: str,
    zones: list[Zone],
) -> Worksheet:
    """
    Add a worksheet for one tier to the workbook.

    Args:
        workbook: Workbook the sheet is appended to
        records: Rate records for the tier, sorted by start_weight, end_weight
        shipping_speed: Tier shipping speed (used for the title)
        locale: Tier locale (used for the title)
        zones: Resolved zone range for the locale

    Returns:
        The new worksheet
    """
    sheet = workbook.create_sheet(title=format_sheet_title(shipping_speed, locale))
    sheet.sheet_format.defaultColWidth = DEFAULT_COLUMN_WIDTH

    sheet.append(header_row(zones))
    for bracket in group_brackets(records):
        sheet.append(bracket_to_row(bracket, zones))

    return sheet
