"""
Shared Fixtures

FakeConnection stands in for the rates database: it filters rows by the
query's (client_id, shipping_speed, locale) parameters and returns them in
ORDER BY start_weight, end_weight, zone order.
"""

import pytest


RATE_COLUMNS = [
    "id", "client_id", "shipping_speed", "locale",
    "start_weight", "end_weight", "zone", "rate",
]


class FakeCursor:
    def __init__(self, connection):
        self.connection = connection
        self.description = None
        self._rows = []

    def execute(self, query, params=None):
        self.connection.executed.append((query, params))
        if self.connection.error is not None:
            raise self.connection.error

        rows = self.connection.rows
        if params is not None:
            client_id, shipping_speed, locale = params
            rows = [
                r for r in rows
                if r["client_id"] == client_id
                and r["shipping_speed"] == shipping_speed
                and r["locale"] == locale
            ]
        rows = sorted(rows, key=lambda r: (r["start_weight"], r["end_weight"], r["zone"]))

        self.description = [(col,) for col in RATE_COLUMNS]
        self._rows = [[r[col] for col in RATE_COLUMNS] for r in rows]

    def fetchall(self):
        return self._rows

    def close(self):
        pass


class FakeConnection:
    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.executed = []
        self.closed = False

    def cursor(self):
        return FakeCursor(self)

    def close(self):
        self.closed = True


def rate(shipping_speed, locale, start_weight, end_weight, zone, value, client_id=1240):
    """Build one rates-table row."""
    return {
        "id": None,
        "client_id": client_id,
        "shipping_speed": shipping_speed,
        "locale": locale,
        "start_weight": start_weight,
        "end_weight": end_weight,
        "zone": zone,
        "rate": value,
    }


@pytest.fixture
def rate_rows():
    """Rates for two tiers plus noise for another client."""
    rows = [
        # Domestic standard, deliberately out of order
        rate("standard", "domestic", 10, 20, "1", 5.50),
        rate("standard", "domestic", 0, 10, "2", 6.50),
        rate("standard", "domestic", 0, 10, "1", 5.00),
        # International economy, lowercase zone codes
        rate("intlEconomy", "international", 0, 1, "b", 12.00),
        rate("intlEconomy", "international", 0, 1, "a", 10.00),
        rate("intlEconomy", "international", 1, 2, "o", 30.00),
        # Other client, same tier
        rate("standard", "domestic", 0, 10, "1", 99.00, client_id=7),
    ]
    for i, row in enumerate(rows):
        row["id"] = i + 1
    return rows


@pytest.fixture
def connection(rate_rows):
    return FakeConnection(rate_rows)
