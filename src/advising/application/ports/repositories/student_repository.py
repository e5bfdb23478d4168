"""Student repository port."""

from typing import Protocol

from advising.domain.entities import Student


class StudentRepository(Protocol):
    """Port for student persistence."""

    async def get_by_id(self, student_id: str) -> Student | None: ...

    async def list_all(self) -> list[Student]: ...

    async def create(self, student: Student) -> Student: ...

    async def update(self, student: Student) -> Student: ...

    async def delete(self, student_id: str) -> None: ...

    async def delete_all(self) -> int: ...
