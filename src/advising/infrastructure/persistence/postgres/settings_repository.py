"""PostgreSQL system settings repository implementation."""

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from advising.domain.entities import SystemSettings

_COLUMNS = (
    "cohort_phase_map, foundations_interaction_days, liftoff_interaction_days, "
    "lightspeed_interaction_days, program101_interaction_days, "
    "default_interaction_days, updated_at"
)


def _row_to_settings(r: tuple) -> SystemSettings:
    # jsonb may hold something other than an object; treat that as unmapped
    cohort_phase_map = r[0] if isinstance(r[0], dict) else {}
    return SystemSettings(
        cohort_phase_map=cohort_phase_map,
        foundations_interaction_days=r[1],
        liftoff_interaction_days=r[2],
        lightspeed_interaction_days=r[3],
        program101_interaction_days=r[4],
        default_interaction_days=r[5],
        updated_at=r[6],
    )


def _params(s: SystemSettings) -> tuple:
    return (
        Jsonb(s.cohort_phase_map),
        s.foundations_interaction_days,
        s.liftoff_interaction_days,
        s.lightspeed_interaction_days,
        s.program101_interaction_days,
        s.default_interaction_days,
        s.updated_at,
    )


class PostgresSystemSettingsRepository:
    """System settings repository. The most recently updated row wins."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_latest(self) -> SystemSettings | None:
        """Get latest settings row."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM system_settings ORDER BY updated_at DESC LIMIT 1"
        )
        r = await cur.fetchone()
        return _row_to_settings(r) if r else None

    async def upsert(self, settings: SystemSettings) -> SystemSettings:
        """Overwrite the latest row, inserting one when the table is empty."""
        cur = await self._conn.execute(
            "UPDATE system_settings SET cohort_phase_map = %s, "
            "foundations_interaction_days = %s, liftoff_interaction_days = %s, "
            "lightspeed_interaction_days = %s, program101_interaction_days = %s, "
            "default_interaction_days = %s, updated_at = COALESCE(%s, now()) "
            "WHERE id = (SELECT id FROM system_settings ORDER BY updated_at DESC LIMIT 1) "
            f"RETURNING {_COLUMNS}",
            _params(settings),
        )
        r = await cur.fetchone()
        if r is None:
            cur = await self._conn.execute(
                f"INSERT INTO system_settings ({_COLUMNS}) "
                "VALUES (%s, %s, %s, %s, %s, %s, COALESCE(%s, now())) "
                f"RETURNING {_COLUMNS}",
                _params(settings),
            )
            r = await cur.fetchone()
        return _row_to_settings(r)
