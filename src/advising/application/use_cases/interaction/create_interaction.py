"""Create interaction use case."""

import logging
from datetime import UTC, datetime

from advising.application.dto.interaction_dto import InteractionCreateInput
from advising.domain.entities import FollowUp, Interaction, SystemSettings
from advising.domain.entities.interaction import split_student_name
from advising.domain.exceptions import ValidationError
from advising.domain.value_objects import Phase

logger = logging.getLogger(__name__)


class CreateInteractionUseCase:
    """Log an interaction. Program is derived from the student's cohort phase."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, data: InteractionCreateInput) -> Interaction:
        if not (
            data.student_name
            and data.student_id
            and data.type
            and data.reason
            and data.staff_member
            and data.staff_member_id
        ):
            raise ValidationError("Missing required fields")
        try:
            staff_member_id = int(data.staff_member_id)
        except (TypeError, ValueError):
            raise ValidationError("Invalid staff member ID") from None

        first_name, last_name = split_student_name(data.student_name)
        follow_up = data.follow_up
        now = datetime.now(UTC)

        async with self._uow_factory() as uow:
            program = Phase.DEFAULT.value
            student = await uow.students.get_by_id(data.student_id)
            if student and student.cohort:
                settings = await uow.settings.get_latest() or SystemSettings()
                program = settings.cohort_phase_map.get(str(student.cohort), Phase.DEFAULT.value)

            interaction = Interaction(
                id=None,
                student_id=data.student_id,
                student_first_name=first_name,
                student_last_name=last_name,
                type=data.type,
                reason=data.reason,
                staff_member=data.staff_member,
                staff_member_id=staff_member_id,
                program=program,
                notes=data.notes or "",
                date=data.date or now.date().isoformat(),
                time=data.time or now.strftime("%I:%M %p"),
                status="completed",
                ai_summary=data.ai_summary or None,
                follow_up=FollowUp(
                    required=bool(follow_up and follow_up.required),
                    date=follow_up.date if follow_up else None,
                    overdue=bool(follow_up and follow_up.overdue),
                    student_email=follow_up.student_email if follow_up else None,
                    staff_email=follow_up.staff_email if follow_up else None,
                ),
                is_archived=False,
                created_at=now,
                updated_at=now,
            )
            interaction = await uow.interactions.create(interaction)

        logger.info(
            "Logged %s interaction %s for student %s",
            interaction.type,
            interaction.id,
            interaction.student_id,
        )
        return interaction
