"""PostgreSQL integration status repository implementation."""

from psycopg import AsyncConnection

from advising.domain.entities import IntegrationStatus


class PostgresIntegrationStatusRepository:
    """Integration status repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_all(self) -> list[IntegrationStatus]:
        """List integration statuses ordered by name."""
        cur = await self._conn.execute(
            "SELECT name, status, last_sync, updated_at FROM integration_status ORDER BY name"
        )
        rows = await cur.fetchall()
        return [
            IntegrationStatus(name=r[0], status=r[1], last_sync=r[2], updated_at=r[3])
            for r in rows
        ]
