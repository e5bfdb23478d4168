"""Staff member entity."""

from dataclasses import dataclass, field
from datetime import datetime

ADMIN_PERMISSION = "admin"
DEFAULT_PERMISSIONS = ["read", "write"]


@dataclass
class StaffMember:
    """Advising staff account. Deactivated members keep their history."""

    id: int
    email: str
    first_name: str
    last_name: str
    role: str = ""
    status: str = "active"
    permissions: list[str] = field(default_factory=lambda: list(DEFAULT_PERMISSIONS))
    last_login: datetime | None = None
    created_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        return self.status == "active"

    @property
    def is_admin(self) -> bool:
        return ADMIN_PERMISSION in self.permissions
