"""Staff input DTOs."""

from dataclasses import dataclass


@dataclass
class StaffUpdateInput:
    """Partial update of a staff member.

    ``name`` is only used when neither ``first_name`` nor ``last_name`` is
    given; it is split on the first space. ``permissions`` replaces the whole
    list, otherwise ``is_admin`` adds or removes the admin permission.
    """

    first_name: str | None = None
    last_name: str | None = None
    name: str | None = None
    email: str | None = None
    role: str | None = None
    permissions: list[str] | None = None
    is_admin: bool | None = None
