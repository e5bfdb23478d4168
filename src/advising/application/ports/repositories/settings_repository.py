"""System settings repository port."""

from typing import Protocol

from advising.domain.entities import SystemSettings


class SystemSettingsRepository(Protocol):
    """Port for system settings. A single logical row; the newest one wins."""

    async def get_latest(self) -> SystemSettings | None: ...

    async def upsert(self, settings: SystemSettings) -> SystemSettings: ...
