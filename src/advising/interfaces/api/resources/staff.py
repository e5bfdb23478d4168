"""Staff API resources."""

import falcon.asgi

from advising.application.dto.staff_dto import StaffUpdateInput
from advising.application.use_cases.staff.deactivate_staff import DeactivateStaffUseCase
from advising.application.use_cases.staff.update_staff import UpdateStaffUseCase
from advising.domain.entities import StaffMember
from advising.domain.exceptions import ValidationError
from advising.interfaces.api.envelope import respond
from advising.interfaces.api.params import (
    isoformat,
    optional_bool,
    optional_str,
    parse_int_id,
    read_object,
)

ALL_STAFF = {
    "id": "all",
    "firstName": "All",
    "lastName": "Staff",
    "email": "",
    "role": "",
    "status": "",
    "permissions": [],
    "lastLogin": None,
}


def staff_to_media(s: StaffMember) -> dict:
    return {
        "id": s.id,
        "firstName": s.first_name,
        "lastName": s.last_name,
        "email": s.email,
        "role": s.role,
        "status": s.status,
        "permissions": s.permissions,
        "lastLogin": isoformat(s.last_login),
    }


class StaffListResource:
    """GET /api/staff - active staff, ordered by first name."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        async with self._uow_factory() as uow:
            staff = await uow.staff.list_active()
        respond(req, resp, [ALL_STAFF] + [staff_to_media(s) for s in staff])


class StaffMemberResource:
    """PUT/DELETE /api/staff/{staff_id} - edit or deactivate a staff member."""

    def __init__(
        self,
        update_staff: UpdateStaffUseCase,
        deactivate_staff: DeactivateStaffUseCase,
    ) -> None:
        self._update_staff = update_staff
        self._deactivate_staff = deactivate_staff

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, staff_id: str
    ) -> None:
        sid = parse_int_id(staff_id, "staff")
        body = await read_object(req)
        permissions = body.get("permissions")
        if permissions is not None and not isinstance(permissions, list):
            permissions = [permissions]
        if permissions and not all(isinstance(p, str) for p in permissions):
            raise ValidationError("permissions must be strings")
        data = StaffUpdateInput(
            first_name=optional_str(body, "firstName"),
            last_name=optional_str(body, "lastName"),
            name=optional_str(body, "name"),
            email=optional_str(body, "email"),
            role=optional_str(body, "role"),
            permissions=permissions or None,
            is_admin=optional_bool(body, "isAdmin"),
        )
        staff = await self._update_staff.execute(sid, data)
        media = staff_to_media(staff)
        media["createdAt"] = isoformat(staff.created_at)
        respond(req, resp, media)

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, staff_id: str
    ) -> None:
        await self._deactivate_staff.execute(parse_int_id(staff_id, "staff"))
        respond(req, resp, {"message": "Staff member deactivated successfully"})
