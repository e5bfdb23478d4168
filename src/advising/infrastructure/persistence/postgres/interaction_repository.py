"""PostgreSQL interaction repository implementation."""

from psycopg import AsyncConnection

from advising.domain.entities import FollowUp, Interaction

_COLUMNS = (
    "i.id, i.student_id, i.student_first_name, i.student_last_name, i.type, i.reason, "
    "i.staff_member, i.staff_member_id, i.program, i.notes, i.date, i.time, i.status, "
    "i.ai_summary, i.follow_up_required, i.follow_up_date, i.follow_up_overdue, "
    "i.follow_up_sent, i.follow_up_student_email, i.follow_up_staff_email, "
    "i.is_archived, s.cohort, i.created_at, i.updated_at"
)
_FROM = "FROM interaction i LEFT JOIN student s ON s.id = i.student_id"


def _row_to_interaction(r: tuple) -> Interaction:
    return Interaction(
        id=r[0],
        student_id=r[1],
        student_first_name=r[2],
        student_last_name=r[3],
        type=r[4],
        reason=r[5],
        staff_member=r[6],
        staff_member_id=r[7],
        program=r[8],
        notes=r[9] or "",
        date=r[10] or "",
        time=r[11] or "",
        status=r[12],
        ai_summary=r[13],
        follow_up=FollowUp(
            required=r[14],
            date=r[15],
            overdue=r[16],
            sent=r[17],
            student_email=r[18],
            staff_email=r[19],
        ),
        is_archived=r[20],
        cohort=r[21],
        created_at=r[22],
        updated_at=r[23],
    )


class PostgresInteractionRepository:
    """Interaction repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, interaction_id: int) -> Interaction | None:
        """Get interaction by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} {_FROM} WHERE i.id = %s",
            (interaction_id,),
        )
        r = await cur.fetchone()
        return _row_to_interaction(r) if r else None

    async def list(
        self,
        *,
        cohort: int | None = None,
        follow_up_pending: bool = False,
    ) -> list[Interaction]:
        """List interactions newest first.

        follow_up_pending keeps only unarchived interactions whose follow-up
        is required and not yet sent.
        """
        conditions = []
        params: list[object] = []
        if cohort is not None:
            conditions.append("s.cohort = %s")
            params.append(cohort)
        if follow_up_pending:
            conditions.append(
                "i.follow_up_required AND NOT i.follow_up_sent AND NOT i.is_archived"
            )
        where = (" WHERE " + " AND ".join(conditions)) if conditions else ""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} {_FROM}{where} ORDER BY i.created_at DESC",
            tuple(params),
        )
        rows = await cur.fetchall()
        return [_row_to_interaction(r) for r in rows]

    async def create(self, interaction: Interaction) -> Interaction:
        """Create interaction, return it with the generated id."""
        f = interaction.follow_up
        cur = await self._conn.execute(
            "INSERT INTO interaction (student_id, student_first_name, student_last_name, "
            "type, reason, staff_member, staff_member_id, program, notes, date, time, "
            "status, ai_summary, follow_up_required, follow_up_date, follow_up_overdue, "
            "follow_up_sent, follow_up_student_email, follow_up_staff_email, is_archived, "
            "created_at, updated_at) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, "
            "%s, %s, %s, %s, %s, %s) RETURNING id",
            (
                interaction.student_id,
                interaction.student_first_name,
                interaction.student_last_name,
                interaction.type,
                interaction.reason,
                interaction.staff_member,
                interaction.staff_member_id,
                interaction.program,
                interaction.notes,
                interaction.date,
                interaction.time,
                interaction.status,
                interaction.ai_summary,
                f.required,
                f.date,
                f.overdue,
                f.sent,
                f.student_email,
                f.staff_email,
                interaction.is_archived,
                interaction.created_at,
                interaction.updated_at,
            ),
        )
        r = await cur.fetchone()
        interaction.id = r[0]
        return interaction

    async def update(self, interaction: Interaction) -> Interaction:
        """Update interaction."""
        f = interaction.follow_up
        await self._conn.execute(
            "UPDATE interaction SET student_id=%s, student_first_name=%s, "
            "student_last_name=%s, type=%s, reason=%s, staff_member=%s, program=%s, "
            "notes=%s, date=%s, time=%s, ai_summary=%s, follow_up_required=%s, "
            "follow_up_date=%s, follow_up_overdue=%s, updated_at=%s WHERE id=%s",
            (
                interaction.student_id,
                interaction.student_first_name,
                interaction.student_last_name,
                interaction.type,
                interaction.reason,
                interaction.staff_member,
                interaction.program,
                interaction.notes,
                interaction.date,
                interaction.time,
                interaction.ai_summary,
                f.required,
                f.date,
                f.overdue,
                interaction.updated_at,
                interaction.id,
            ),
        )
        return interaction

    async def set_archived(self, interaction_id: int, archived: bool) -> None:
        """Archive or unarchive interaction."""
        await self._conn.execute(
            "UPDATE interaction SET is_archived = %s, updated_at = NOW() WHERE id = %s",
            (archived, interaction_id),
        )

    async def delete(self, interaction_id: int) -> None:
        """Delete interaction."""
        await self._conn.execute("DELETE FROM interaction WHERE id = %s", (interaction_id,))

    async def delete_all(self) -> int:
        """Delete every interaction, return count."""
        cur = await self._conn.execute("DELETE FROM interaction")
        return cur.rowcount
