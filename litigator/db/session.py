"""
PostgreSQL connection utilities.
"""

from __future__ import annotations

from contextlib import contextmanager

from psycopg_pool import ConnectionPool

from litigator.config import Settings

_POOL: ConnectionPool | None = None


def get_connection_pool(settings: Settings) -> ConnectionPool:
    """Return a global ConnectionPool instance."""
    global _POOL
    if _POOL is None:
        _POOL = ConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            open=True,
        )
    return _POOL


def close_connection_pool() -> None:
    global _POOL
    if _POOL is not None:
        _POOL.close()
        _POOL = None


@contextmanager
def get_connection(settings: Settings):
    """Context manager that yields a psycopg connection."""
    pool = get_connection_pool(settings)
    with pool.connection() as conn:
        yield conn
