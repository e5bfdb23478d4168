"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from advising.application.ports.repositories import (
    IntegrationStatusRepository,
    InteractionRepository,
    StaffRepository,
    StudentRepository,
    SystemSettingsRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def students(self) -> StudentRepository: ...

    @property
    def staff(self) -> StaffRepository: ...

    @property
    def interactions(self) -> InteractionRepository: ...

    @property
    def settings(self) -> SystemSettingsRepository: ...

    @property
    def integrations(self) -> IntegrationStatusRepository: ...

    async def ping(self) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
