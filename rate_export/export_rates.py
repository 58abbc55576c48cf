"""
Rate Export

Connection in, .xlsx file out. For each tier: fetch the tier's rates, build
its sheet into one shared workbook. The workbook is saved once, after the
last tier; any failure before that aborts the export without writing.

Tiers run sequentially in list order. There is no per-tier error isolation
and no retry: one failed query fails the whole export.

USAGE
-----
    from shared.database import open_connection
    from rate_export.export_rates import export_rates

    with open_connection() as conn:
        export_rates(conn, "uploads/Whitebox-Export.xlsx")
"""

from pathlib import Path

from openpyxl import Workbook

from .data import (
    CLIENT_ID,
    TIERS,
    MAX_DOMESTIC_ZONE,
    MAX_INTERNATIONAL_ZONE,
    fetch_rates,
)
from .sheets import create_sheet, new_workbook
from .zones import resolve_zone_range


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def export_rates(
    connection,
    file_name: str | Path,
    tiers: list[tuple[str, str]] | None = None,
    client_id: int = CLIENT_ID,
    domestic_bound: int = MAX_DOMESTIC_ZONE,
    international_bound: str = MAX_INTERNATIONAL_ZONE,
) -> Workbook:
    """
    Export rates for every tier to a single workbook file.

    Args:
        connection: Open database connection, used for every tier
        file_name: Output .xlsx path (parent directories are created)
        tiers: (shipping_speed, locale) pairs, one sheet each (default: TIERS)
        client_id: Client whose rates are exported
        domestic_bound: Highest numbered domestic zone
        international_bound: Highest lettered international zone

    Returns:
        The saved workbook
    """
    if tiers is None:
        tiers = TIERS

    workbook = build_workbook(
        connection,
        tiers=tiers,
        client_id=client_id,
        domestic_bound=domestic_bound,
        international_bound=international_bound,
    )

    path = Path(file_name)
    path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(path)

    return workbook


def build_workbook(
    connection,
    tiers: list[tuple[str, str]],
    client_id: int,
    domestic_bound: int,
    international_bound: str,
) -> Workbook:
    """Fetch and build every tier's sheet, without saving."""
    workbook = new_workbook()

    for shipping_speed, locale in tiers:
        print(f"Exporting Rates for {locale} {shipping_speed}")

        records = fetch_rates(connection, client_id, shipping_speed, locale)

        print(f"Found {len(records):,} Records for {locale} {shipping_speed}")

        zones = resolve_zone_range(locale, domestic_bound, international_bound)
        create_sheet(workbook, records, shipping_speed, locale, zones)

    return workbook
