"""PostgreSQL student repository implementation."""

from psycopg import AsyncConnection

from advising.domain.entities import Student

_COLUMNS = "id, first_name, last_name, program, email, cohort, created_at, updated_at"


def _row_to_student(r: tuple) -> Student:
    return Student(
        id=r[0],
        first_name=r[1],
        last_name=r[2],
        program=r[3],
        email=r[4],
        cohort=r[5],
        created_at=r[6],
        updated_at=r[7],
    )


class PostgresStudentRepository:
    """Student repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, student_id: str) -> Student | None:
        """Get student by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM student WHERE id = %s",
            (student_id,),
        )
        r = await cur.fetchone()
        return _row_to_student(r) if r else None

    async def list_all(self) -> list[Student]:
        """List students ordered by first name."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM student ORDER BY first_name, last_name"
        )
        rows = await cur.fetchall()
        return [_row_to_student(r) for r in rows]

    async def create(self, student: Student) -> Student:
        """Create student."""
        await self._conn.execute(
            f"INSERT INTO student ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                student.id,
                student.first_name,
                student.last_name,
                student.program,
                student.email,
                student.cohort,
                student.created_at,
                student.updated_at,
            ),
        )
        return student

    async def update(self, student: Student) -> Student:
        """Update student."""
        await self._conn.execute(
            "UPDATE student SET first_name=%s, last_name=%s, program=%s, email=%s, "
            "cohort=%s, updated_at=%s WHERE id=%s",
            (
                student.first_name,
                student.last_name,
                student.program,
                student.email,
                student.cohort,
                student.updated_at,
                student.id,
            ),
        )
        return student

    async def delete(self, student_id: str) -> None:
        """Delete student. Interactions cascade."""
        await self._conn.execute("DELETE FROM student WHERE id = %s", (student_id,))

    async def delete_all(self) -> int:
        """Delete every student, return count."""
        cur = await self._conn.execute("DELETE FROM student")
        return cur.rowcount
