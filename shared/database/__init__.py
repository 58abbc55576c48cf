"""
Database Connection and Operations

Handles connection to the rates database and read queries.
Connections are passed explicitly; nothing is cached at module level.
"""

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

import pandas as pd
import polars as pl
import redshift_connector


# Database connection parameters (each overridable from the environment)
HOST = os.environ.get("DATABASE_HOST", "127.0.0.1")
PORT = int(os.environ.get("DATABASE_PORT", "5439"))
DBNAME = os.environ.get("DATABASE_NAME", "whitebox")
USER = os.environ.get("DATABASE_USER", "root")
DEFAULT_PASSWORD = "secret"


# ============================================================================
# CONNECTION MANAGEMENT
# ============================================================================

def _read_password() -> str:
    """
    Resolve the database password.

    Order: DATABASE_PASS env var, first non-empty line of pass.txt in the
    database directory, then the built-in default.

    Returns:
        str: The database password
    """
    env_password = os.environ.get("DATABASE_PASS")
    if env_password:
        return env_password

    path = Path(__file__).parent / "pass.txt"

    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                val = line.strip()
                if val:
                    return val

    return DEFAULT_PASSWORD


def connect(
    host: Optional[str] = None,
    port: Optional[int] = None,
    database: Optional[str] = None,
    user: Optional[str] = None,
    password: Optional[str] = None,
) -> redshift_connector.Connection:
    """
    Create a new database connection.

    Arguments left as None fall back to the module-level parameters.

    Returns:
        redshift_connector.Connection: Active database connection

    Raises:
        RuntimeError: If connection cannot be established
    """
    try:
        return redshift_connector.connect(
            host=host or HOST,
            database=database or DBNAME,
            port=port or PORT,
            user=user or USER,
            password=password or _read_password(),
        )
    except Exception as e:
        raise RuntimeError(f"Failed to create database connection: {e}") from e


@contextmanager
def open_connection(**kwargs) -> Iterator[redshift_connector.Connection]:
    """
    Open a connection for the duration of a with-block.

    The connection is closed exactly once when the block exits, whether it
    finished normally or raised.

    Example:
        with open_connection() as conn:
            df = pull_data(conn, "SELECT 1 AS one")
    """
    conn = connect(**kwargs)
    try:
        yield conn
    finally:
        conn.close()


# ============================================================================
# DATA OPERATIONS
# ============================================================================

def pull_data(
    connection,
    query: str,
    params: Optional[Sequence] = None,
    as_polars: bool = True,
) -> Union[pl.DataFrame, pd.DataFrame]:
    """
    Execute a SQL query and return results as a DataFrame.

    Args:
        connection: Open DB-API connection
        query: SQL query string, with %s placeholders for params
        params: Values bound to the placeholders by the driver
        as_polars: If True, return Polars DataFrame; if False, return Pandas DataFrame

    Returns:
        pl.DataFrame or pd.DataFrame: Query results (empty frame with the
        query's columns when no rows match)

    Raises:
        RuntimeError: If query execution fails

    Example:
        df = pull_data(conn, "SELECT * FROM rates WHERE client_id = %s", [1240])
    """
    try:
        cursor = connection.cursor()
        if params is None:
            cursor.execute(query)
        else:
            cursor.execute(query, params)

        columns = [desc[0] for desc in cursor.description]
        rows = [tuple(row) for row in cursor.fetchall()]
        cursor.close()
    except Exception as e:
        raise RuntimeError(f"Error executing query: {e}") from e

    if as_polars:
        if not rows:
            return pl.DataFrame(schema=columns)
        return pl.DataFrame(rows, schema=columns, orient="row")
    else:
        return pd.DataFrame(rows, columns=columns)
