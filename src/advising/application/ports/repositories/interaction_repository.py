"""Interaction repository port."""

from typing import Protocol

from advising.domain.entities import Interaction


class InteractionRepository(Protocol):
    """Port for interaction persistence."""

    async def get_by_id(self, interaction_id: int) -> Interaction | None: ...

    async def list(
        self,
        *,
        cohort: int | None = None,
        follow_up_pending: bool = False,
    ) -> list[Interaction]: ...

    async def create(self, interaction: Interaction) -> Interaction: ...

    async def update(self, interaction: Interaction) -> Interaction: ...

    async def set_archived(self, interaction_id: int, archived: bool) -> None: ...

    async def delete(self, interaction_id: int) -> None: ...

    async def delete_all(self) -> int: ...
