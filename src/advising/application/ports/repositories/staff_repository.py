"""Staff repository port."""

from typing import Protocol

from advising.domain.entities import StaffMember


class StaffRepository(Protocol):
    """Port for staff member persistence."""

    async def get_by_id(self, staff_id: int) -> StaffMember | None: ...

    async def get_by_email(self, email: str) -> StaffMember | None: ...

    async def list_active(self) -> list[StaffMember]: ...

    async def update(self, staff: StaffMember) -> StaffMember: ...

    async def delete_all(self) -> int: ...
