"""
Rate Export Data Loaders

Loaders for rate records held in the database.
"""

from .rates import fetch_rates, RATES_QUERY

__all__ = [
    "fetch_rates",
    "RATES_QUERY",
]
