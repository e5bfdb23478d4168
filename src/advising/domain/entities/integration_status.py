"""Integration status entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class IntegrationStatus:
    """Last known sync state of an external integration."""

    name: str
    status: str
    last_sync: datetime | None = None
    updated_at: datetime | None = None
