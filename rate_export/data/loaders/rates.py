"""
Load Rates

Pulls one tier of rate records from the rates table.
"""

import polars as pl

from shared.database import pull_data


# Sort order is load-bearing: sheet rows follow first-seen bracket order
RATES_QUERY = """
    SELECT *
    FROM rates
    WHERE client_id = %s
      AND shipping_speed = %s
      AND locale = %s
    ORDER BY start_weight, end_weight, zone
"""


def fetch_rates(
    connection,
    client_id: int,
    shipping_speed: str,
    locale: str,
) -> pl.DataFrame:
    """
    Fetch rates for the given client, shipping speed and locale.

    Args:
        connection: Open database connection
        client_id: Client whose rates to export
        shipping_speed: e.g. "standard", "nextDay", "intlEconomy"
        locale: "domestic" or "international"

    Returns:
        DataFrame ordered by start_weight, end_weight, zone with at least:
            - start_weight: Lower bound of weight bracket (inclusive)
            - end_weight: Upper bound of weight bracket (inclusive)
            - zone: Zone code as text ("1", "c", ...)
            - rate: Rate for this bracket/zone pair
    """
    df = pull_data(connection, RATES_QUERY, [client_id, shipping_speed, locale])

    # Driver returns Decimal for numeric columns
    return df.with_columns(
        pl.col("start_weight").cast(pl.Float64),
        pl.col("end_weight").cast(pl.Float64),
        pl.col("zone").cast(pl.Utf8),
        pl.col("rate").cast(pl.Float64),
    )
