"""Opens the database pool with the ASGI lifespan and closes it on shutdown."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


class PoolLifespanMiddleware:
    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        # Fails startup when the database is unreachable.
        await self._pool.open(wait=True)
        logger.info(
            "Database pool %s opened (min=%d, max=%d)",
            self._pool.name,
            self._pool.min_size,
            self._pool.max_size,
        )

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        await self._pool.close()
        logger.info("Database pool %s closed", self._pool.name)
