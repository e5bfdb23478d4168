"""Update student use case."""

from dataclasses import replace
from datetime import UTC, datetime

from advising.application.dto.student_dto import StudentUpdateInput
from advising.domain.entities import Student
from advising.domain.exceptions import NotFound, ValidationError


class UpdateStudentUseCase:
    """Edit a student's name, email and cohort."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, student_id: str, data: StudentUpdateInput) -> Student:
        if not (data.first_name and data.last_name):
            raise ValidationError("First name and last name are required")

        async with self._uow_factory() as uow:
            existing = await uow.students.get_by_id(student_id)
            if not existing:
                raise NotFound("Student", student_id)

            student = replace(
                existing,
                first_name=data.first_name,
                last_name=data.last_name,
                email=data.email or None,
                cohort=data.cohort or None,
                updated_at=datetime.now(UTC),
            )
            return await uow.students.update(student)
