"""Update staff member use case."""

from dataclasses import replace

from advising.application.dto.staff_dto import StaffUpdateInput
from advising.domain.entities import StaffMember
from advising.domain.entities.staff_member import ADMIN_PERMISSION, DEFAULT_PERMISSIONS
from advising.domain.exceptions import Conflict, NotFound


class UpdateStaffUseCase:
    """Edit a staff member's profile and permissions."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, staff_id: int, data: StaffUpdateInput) -> StaffMember:
        """Apply the given fields. Email must stay unique across staff."""
        first_name, last_name = data.first_name, data.last_name
        if data.name and not first_name and not last_name:
            parts = data.name.strip().split(" ")
            first_name = parts[0]
            last_name = " ".join(parts[1:])

        async with self._uow_factory() as uow:
            existing = await uow.staff.get_by_id(staff_id)
            if not existing:
                raise NotFound("Staff member", staff_id)

            if data.email and data.email != existing.email:
                if await uow.staff.get_by_email(data.email):
                    raise Conflict("Email already exists")

            changes: dict = {}
            if first_name:
                changes["first_name"] = first_name
            if last_name:
                changes["last_name"] = last_name
            if data.email:
                changes["email"] = data.email
            if data.role is not None:
                changes["role"] = data.role

            if data.permissions is not None:
                changes["permissions"] = list(data.permissions)
            elif data.is_admin is not None:
                current = existing.permissions or list(DEFAULT_PERMISSIONS)
                permissions = [p for p in current if p != ADMIN_PERMISSION]
                if data.is_admin:
                    permissions.append(ADMIN_PERMISSION)
                changes["permissions"] = permissions

            return await uow.staff.update(replace(existing, **changes))
