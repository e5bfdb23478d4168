"""Interaction API resources."""

import falcon
import falcon.asgi

from advising.application.dto.interaction_dto import (
    FollowUpInput,
    InteractionCreateInput,
    InteractionUpdateInput,
    InteractionView,
)
from advising.application.use_cases.interaction.create_interaction import (
    CreateInteractionUseCase,
)
from advising.application.use_cases.interaction.list_interactions import (
    ListInteractionsUseCase,
)
from advising.application.use_cases.interaction.update_interaction import (
    UpdateInteractionUseCase,
)
from advising.domain.entities import Interaction
from advising.domain.exceptions import NotFound, ValidationError
from advising.interfaces.api.envelope import respond
from advising.interfaces.api.params import (
    isoformat,
    optional_bool,
    optional_str,
    parse_cohort,
    parse_int_id,
    read_object,
)


def _follow_up_input(value) -> FollowUpInput | None:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValidationError("followUp must be an object")
    return FollowUpInput(
        required=bool(value.get("required")),
        date=optional_str(value, "date") or None,
        overdue=bool(value.get("overdue")),
        student_email=optional_str(value, "studentEmail") or None,
        staff_email=optional_str(value, "staffEmail") or None,
    )


def interaction_to_media(i: Interaction) -> dict:
    return {
        "id": i.id,
        "studentName": i.student_name,
        "studentId": i.student_id,
        "program": i.program,
        "type": i.type,
        "reason": i.reason,
        "notes": i.notes,
        "date": i.date,
        "time": i.time,
        "staffMember": i.staff_member,
        "status": i.status,
        "aiSummary": i.ai_summary,
        "isArchived": i.is_archived,
        "followUp": {
            "required": i.follow_up.required,
            "date": i.follow_up.date,
            "overdue": i.follow_up.overdue,
        },
    }


def view_to_media(view: InteractionView) -> dict:
    i = view.interaction
    media = interaction_to_media(i)
    media.update(
        {
            "studentFirstName": i.student_first_name,
            "studentLastName": i.student_last_name,
            "cohort": i.cohort,
            "followUpDate": i.follow_up.date,
            "isOverdue": view.is_overdue,
            "daysSinceLastInteraction": view.days_since_last_interaction,
            "phase": view.phase.value,
            "frequency": view.frequency,
            "createdAt": isoformat(i.created_at),
            "updatedAt": isoformat(i.updated_at),
        }
    )
    media["followUp"].update(
        {
            "studentEmail": i.follow_up.student_email,
            "staffEmail": i.follow_up.staff_email,
        }
    )
    return media


class InteractionsResource:
    """GET/POST /api/interactions - list and log interactions."""

    def __init__(
        self,
        list_interactions: ListInteractionsUseCase,
        create_interaction: CreateInteractionUseCase,
    ) -> None:
        self._list = list_interactions
        self._create = create_interaction

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List interactions. ?cohort=<n|all>&followUpRequired=true filter the list."""
        cohort_param = req.get_param("cohort")
        cohort = None if cohort_param in (None, "all") else parse_cohort(cohort_param)
        views = await self._list.execute(
            cohort=cohort,
            follow_up_required=req.get_param("followUpRequired") == "true",
        )
        respond(req, resp, [view_to_media(v) for v in views])

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Log interaction."""
        body = await read_object(req)
        staff_member_id = body.get("staffMemberId")
        if isinstance(staff_member_id, bool) or not isinstance(staff_member_id, str | int | None):
            raise ValidationError("Invalid staff member ID")
        data = InteractionCreateInput(
            student_name=optional_str(body, "studentName"),
            student_id=optional_str(body, "studentId"),
            type=optional_str(body, "type"),
            reason=optional_str(body, "reason"),
            staff_member=optional_str(body, "staffMember"),
            staff_member_id=staff_member_id,
            notes=optional_str(body, "notes"),
            date=optional_str(body, "date"),
            time=optional_str(body, "time"),
            ai_summary=optional_str(body, "aiSummary"),
            follow_up=_follow_up_input(body.get("followUp")),
        )
        interaction = await self._create.execute(data)
        respond(req, resp, interaction_to_media(interaction), falcon.HTTP_201)


class InteractionResource:
    """GET/PUT/DELETE /api/interactions/{interaction_id}."""

    def __init__(
        self,
        unit_of_work_factory: type,
        update_interaction: UpdateInteractionUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._update = update_interaction

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, interaction_id: str
    ) -> None:
        iid = parse_int_id(interaction_id, "interaction")
        async with self._uow_factory() as uow:
            interaction = await uow.interactions.get_by_id(iid)
        if not interaction:
            raise NotFound("Interaction", iid)
        respond(req, resp, interaction_to_media(interaction))

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, interaction_id: str
    ) -> None:
        iid = parse_int_id(interaction_id, "interaction")
        body = await read_object(req)
        data = InteractionUpdateInput(
            student_name=optional_str(body, "studentName"),
            student_id=optional_str(body, "studentId"),
            program=optional_str(body, "program"),
            type=optional_str(body, "type"),
            reason=optional_str(body, "reason"),
            notes=optional_str(body, "notes"),
            date=optional_str(body, "date"),
            time=optional_str(body, "time"),
            staff_member=optional_str(body, "staffMember"),
            ai_summary=optional_str(body, "aiSummary"),
            follow_up=_follow_up_input(body.get("followUp")),
        )
        interaction = await self._update.execute(iid, data)
        respond(req, resp, interaction_to_media(interaction))

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, interaction_id: str
    ) -> None:
        iid = parse_int_id(interaction_id, "interaction")
        async with self._uow_factory() as uow:
            if not await uow.interactions.get_by_id(iid):
                raise NotFound("Interaction", iid)
            await uow.interactions.delete(iid)
        respond(req, resp, {"message": "Interaction deleted successfully"})


class InteractionArchiveResource:
    """PUT /api/interactions/{interaction_id}/archive - set ``isArchived``."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, interaction_id: str
    ) -> None:
        iid = parse_int_id(interaction_id, "interaction")
        body = await read_object(req)
        archived = optional_bool(body, "isArchived")
        if archived is None:
            raise ValidationError("isArchived must be a boolean")

        async with self._uow_factory() as uow:
            if not await uow.interactions.get_by_id(iid):
                raise NotFound("Interaction", iid)
            await uow.interactions.set_archived(iid, archived)
            interaction = await uow.interactions.get_by_id(iid)
        respond(req, resp, interaction_to_media(interaction))
