"""Pytest fixtures for advising API tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime, timedelta

import pytest

from advising.domain.entities import (
    IntegrationStatus,
    Interaction,
    StaffMember,
    Student,
    SystemSettings,
)


# --- Fake repositories ---


class FakeStudentRepository:
    """In-memory student repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Student] = {}

    async def get_by_id(self, student_id: str) -> Student | None:
        return self._by_id.get(student_id)

    async def list_all(self) -> list[Student]:
        return sorted(self._by_id.values(), key=lambda s: (s.first_name, s.last_name))

    async def create(self, student: Student) -> Student:
        self._by_id[student.id] = student
        return student

    async def update(self, student: Student) -> Student:
        self._by_id[student.id] = student
        return student

    async def delete(self, student_id: str) -> None:
        self._by_id.pop(student_id, None)

    async def delete_all(self) -> int:
        count = len(self._by_id)
        self._by_id.clear()
        return count

    def add(self, student: Student) -> Student:
        """Helper to seed a student for tests."""
        self._by_id[student.id] = student
        return student


class FakeStaffRepository:
    """In-memory staff repository."""

    def __init__(self) -> None:
        self._by_id: dict[int, StaffMember] = {}

    async def get_by_id(self, staff_id: int) -> StaffMember | None:
        return self._by_id.get(staff_id)

    async def get_by_email(self, email: str) -> StaffMember | None:
        for s in self._by_id.values():
            if s.email == email:
                return s
        return None

    async def list_active(self) -> list[StaffMember]:
        return sorted(
            (s for s in self._by_id.values() if s.is_active),
            key=lambda s: s.first_name,
        )

    async def update(self, staff: StaffMember) -> StaffMember:
        self._by_id[staff.id] = staff
        return staff

    async def delete_all(self) -> int:
        count = len(self._by_id)
        self._by_id.clear()
        return count

    def add(self, staff: StaffMember) -> StaffMember:
        """Helper to seed a staff member for tests."""
        self._by_id[staff.id] = staff
        return staff


class FakeInteractionRepository:
    """In-memory interaction repository. Cohort is joined from the student store."""

    def __init__(self, students: FakeStudentRepository) -> None:
        self._by_id: dict[int, Interaction] = {}
        self._students = students
        self._next_id = 1

    async def _with_cohort(self, interaction: Interaction) -> Interaction:
        student = await self._students.get_by_id(interaction.student_id)
        return replace(interaction, cohort=student.cohort if student else None)

    async def get_by_id(self, interaction_id: int) -> Interaction | None:
        interaction = self._by_id.get(interaction_id)
        return await self._with_cohort(interaction) if interaction else None

    async def list(
        self,
        *,
        cohort: int | None = None,
        follow_up_pending: bool = False,
    ) -> list[Interaction]:
        items = [await self._with_cohort(i) for i in self._by_id.values()]
        if cohort is not None:
            items = [i for i in items if i.cohort == cohort]
        if follow_up_pending:
            items = [
                i
                for i in items
                if i.follow_up.required and not i.follow_up.sent and not i.is_archived
            ]
        items.sort(key=lambda i: i.created_at, reverse=True)
        return items

    async def create(self, interaction: Interaction) -> Interaction:
        interaction.id = self._next_id
        self._next_id += 1
        self._by_id[interaction.id] = interaction
        return interaction

    async def update(self, interaction: Interaction) -> Interaction:
        self._by_id[interaction.id] = interaction
        return interaction

    async def set_archived(self, interaction_id: int, archived: bool) -> None:
        interaction = self._by_id.get(interaction_id)
        if interaction:
            self._by_id[interaction_id] = replace(interaction, is_archived=archived)

    async def delete(self, interaction_id: int) -> None:
        self._by_id.pop(interaction_id, None)

    async def delete_all(self) -> int:
        count = len(self._by_id)
        self._by_id.clear()
        return count

    def add(self, interaction: Interaction) -> Interaction:
        """Helper to seed an interaction, assigning id and created_at."""
        if interaction.id is None:
            interaction.id = self._next_id
        self._next_id = max(self._next_id, interaction.id) + 1
        if interaction.created_at is None:
            interaction.created_at = datetime.now(UTC) + timedelta(seconds=interaction.id)
        self._by_id[interaction.id] = interaction
        return interaction


class FakeSystemSettingsRepository:
    """In-memory settings repository holding at most one row."""

    def __init__(self) -> None:
        self.current: SystemSettings | None = None

    async def get_latest(self) -> SystemSettings | None:
        return self.current

    async def upsert(self, settings: SystemSettings) -> SystemSettings:
        self.current = settings
        return settings


class FakeIntegrationStatusRepository:
    """In-memory integration status repository."""

    def __init__(self) -> None:
        self._items: list[IntegrationStatus] = []

    async def list_all(self) -> list[IntegrationStatus]:
        return sorted(self._items, key=lambda s: s.name)

    def add(self, status: IntegrationStatus) -> None:
        self._items.append(status)


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.students = FakeStudentRepository()
        self.staff = FakeStaffRepository()
        self.interactions = FakeInteractionRepository(self.students)
        self.settings = FakeSystemSettingsRepository()
        self.integrations = FakeIntegrationStatusRepository()
        self.ping_error: Exception | None = None
        self.commits = 0

    async def ping(self) -> None:
        if self.ping_error:
            raise self.ping_error

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory that yields the same FakeUnitOfWork for every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Builders ---


def make_student(student_id: str = "0001", **kwargs) -> Student:
    defaults = {
        "first_name": "Micheal",
        "last_name": "Newman",
        "program": "foundations",
    }
    defaults.update(kwargs)
    return Student(id=student_id, **defaults)


def make_staff(staff_id: int = 1, **kwargs) -> StaffMember:
    defaults = {
        "email": f"staff{staff_id}@launchpad.org",
        "first_name": "Tahir",
        "last_name": "Lee",
        "role": "Workforce Coordinator",
    }
    defaults.update(kwargs)
    return StaffMember(id=staff_id, **defaults)


def make_interaction(student: Student, **kwargs) -> Interaction:
    defaults = {
        "id": None,
        "student_id": student.id,
        "student_first_name": student.first_name,
        "student_last_name": student.last_name,
        "type": "Coaching",
        "reason": "Interview preparation",
        "staff_member": "Tahir Lee",
        "staff_member_id": 1,
        "date": "2024-12-12",
        "time": "10:30 AM",
    }
    defaults.update(kwargs)
    return Interaction(**defaults)


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)
