"""Integration status repository port."""

from typing import Protocol

from advising.domain.entities import IntegrationStatus


class IntegrationStatusRepository(Protocol):
    """Port for integration status persistence."""

    async def list_all(self) -> list[IntegrationStatus]: ...
