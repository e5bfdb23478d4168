"""Update interaction use case."""

from dataclasses import replace
from datetime import UTC, datetime

from advising.application.dto.interaction_dto import InteractionUpdateInput
from advising.domain.entities import Interaction
from advising.domain.entities.interaction import split_student_name
from advising.domain.exceptions import NotFound


class UpdateInteractionUseCase:
    """Edit a logged interaction."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, interaction_id: int, data: InteractionUpdateInput) -> Interaction:
        async with self._uow_factory() as uow:
            existing = await uow.interactions.get_by_id(interaction_id)
            if not existing:
                raise NotFound("Interaction", interaction_id)

            changes: dict = {
                key: value
                for key, value in (
                    ("student_id", data.student_id),
                    ("program", data.program),
                    ("type", data.type),
                    ("reason", data.reason),
                    ("notes", data.notes),
                    ("date", data.date),
                    ("time", data.time),
                    ("staff_member", data.staff_member),
                    ("ai_summary", data.ai_summary),
                )
                if value is not None
            }
            if data.student_name:
                first_name, last_name = split_student_name(data.student_name)
                changes["student_first_name"] = first_name
                changes["student_last_name"] = last_name
            if data.follow_up is not None:
                changes["follow_up"] = replace(
                    existing.follow_up,
                    required=data.follow_up.required,
                    date=data.follow_up.date,
                    overdue=data.follow_up.overdue,
                )

            interaction = replace(existing, **changes, updated_at=datetime.now(UTC))
            return await uow.interactions.update(interaction)
