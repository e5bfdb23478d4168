"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool


def create_pool(
    conninfo: str,
    *,
    min_size: int = 1,
    max_size: int = 10,
    timeout: float = 30.0,
) -> AsyncConnectionPool:
    """Build the advising pool unopened; PoolLifespanMiddleware opens it on startup.

    ``timeout`` bounds how long a request waits for a free connection.
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        timeout=timeout,
        name="advising",
        open=False,
    )
