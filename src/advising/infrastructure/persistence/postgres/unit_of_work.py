"""PostgreSQL Unit of Work."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool

from advising.infrastructure.persistence.postgres.integration_repository import (
    PostgresIntegrationStatusRepository,
)
from advising.infrastructure.persistence.postgres.interaction_repository import (
    PostgresInteractionRepository,
)
from advising.infrastructure.persistence.postgres.settings_repository import (
    PostgresSystemSettingsRepository,
)
from advising.infrastructure.persistence.postgres.staff_repository import (
    PostgresStaffRepository,
)
from advising.infrastructure.persistence.postgres.student_repository import (
    PostgresStudentRepository,
)

logger = logging.getLogger(__name__)


class PostgresUnitOfWork:
    """Advising repositories bound to one pooled connection and its transaction."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn
        self.students = PostgresStudentRepository(conn)
        self.staff = PostgresStaffRepository(conn)
        self.interactions = PostgresInteractionRepository(conn)
        self.settings = PostgresSystemSettingsRepository(conn)
        self.integrations = PostgresIntegrationStatusRepository(conn)

    async def ping(self) -> None:
        """Round-trip a trivial query to prove the database answers."""
        await self._conn.execute("SELECT 1")

    async def commit(self) -> None:
        await self._conn.commit()

    async def rollback(self) -> None:
        await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool):
    """Factory yielding a PostgresUnitOfWork that commits on success, rolls back on error."""

    @asynccontextmanager
    async def unit_of_work() -> AsyncIterator[PostgresUnitOfWork]:
        async with pool.connection() as conn:
            uow = PostgresUnitOfWork(conn)
            try:
                yield uow
            except BaseException:
                logger.debug("Rolling back unit of work", exc_info=True)
                await uow.rollback()
                raise
            await uow.commit()

    return unit_of_work
