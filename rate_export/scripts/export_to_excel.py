"""
Export Rates to Excel
=====================

Pulls every tier's rates for the configured client and writes them to
uploads/Whitebox-Export.xlsx, one sheet per tier.

Usage:
    python -m rate_export.scripts.export_to_excel
"""

import argparse
import sys

from shared.database import open_connection, HOST, PORT, DBNAME
from rate_export.data import (
    CLIENT_ID,
    TIERS,
    FILE_NAME,
    MAX_DOMESTIC_ZONE,
    MAX_INTERNATIONAL_ZONE,
)
from rate_export.export_rates import export_rates


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Export client shipping rates to an Excel workbook",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  DATABASE_HOST, DATABASE_PORT, DATABASE_USER, DATABASE_PASS, DATABASE_NAME
                          Database connection parameters
  MAX_DOMESTIC_ZONE       Highest domestic zone number (default: 8)
  MAX_INTERNATIONAL_ZONE  Highest international zone letter (default: O)

Examples:
  python -m rate_export.scripts.export_to_excel
  MAX_INTERNATIONAL_ZONE=H python -m rate_export.scripts.export_to_excel
        """
    )
    parser.parse_args(argv)

    print("=" * 60)
    print("RATE EXPORT")
    print("=" * 60)
    print(f"Client: {CLIENT_ID}")
    print(f"Database: {DBNAME} at {HOST}:{PORT}")
    print(f"Domestic zones: 1-{MAX_DOMESTIC_ZONE}")
    print(f"International zones: A-{MAX_INTERNATIONAL_ZONE}")
    print(f"Sheets: {len(TIERS)}")
    print()

    try:
        with open_connection() as conn:
            export_rates(conn, FILE_NAME)
    except KeyboardInterrupt:
        print("\n\nCancelled.", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 60)
    print(f"Done. Uploaded to {FILE_NAME}")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
