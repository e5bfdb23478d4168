"""PostgreSQL staff repository implementation."""

from psycopg import AsyncConnection

from advising.domain.entities import StaffMember

_COLUMNS = (
    "id, email, first_name, last_name, role, status, permissions, last_login, created_at"
)


def _row_to_staff(r: tuple) -> StaffMember:
    return StaffMember(
        id=r[0],
        email=r[1],
        first_name=r[2],
        last_name=r[3],
        role=r[4] or "",
        status=r[5],
        permissions=list(r[6] or []),
        last_login=r[7],
        created_at=r[8],
    )


class PostgresStaffRepository:
    """Staff repository implementation over the app_user table."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, staff_id: int) -> StaffMember | None:
        """Get staff member by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE id = %s",
            (staff_id,),
        )
        r = await cur.fetchone()
        return _row_to_staff(r) if r else None

    async def get_by_email(self, email: str) -> StaffMember | None:
        """Get staff member by email."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE email = %s",
            (email,),
        )
        r = await cur.fetchone()
        return _row_to_staff(r) if r else None

    async def list_active(self) -> list[StaffMember]:
        """List active staff ordered by first name."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE status = 'active' ORDER BY first_name"
        )
        rows = await cur.fetchall()
        return [_row_to_staff(r) for r in rows]

    async def update(self, staff: StaffMember) -> StaffMember:
        """Update profile, status and permissions."""
        await self._conn.execute(
            "UPDATE app_user SET email=%s, first_name=%s, last_name=%s, role=%s, "
            "status=%s, permissions=%s, updated_at=NOW() WHERE id=%s",
            (
                staff.email,
                staff.first_name,
                staff.last_name,
                staff.role,
                staff.status,
                staff.permissions,
                staff.id,
            ),
        )
        return staff

    async def delete_all(self) -> int:
        """Delete every staff account, return count."""
        cur = await self._conn.execute("DELETE FROM app_user")
        return cur.rowcount
