"""Create student use case."""

import logging
from datetime import UTC, datetime

from advising.application.dto.student_dto import StudentCreateInput
from advising.domain.entities import Student
from advising.domain.exceptions import Conflict, ValidationError

logger = logging.getLogger(__name__)


class CreateStudentUseCase:
    """Register a student under a caller-assigned id."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, data: StudentCreateInput) -> Student:
        """Create student. Id must be unused."""
        if not (data.id and data.first_name and data.last_name and data.program):
            raise ValidationError(
                "Student ID, first name, last name, and program are required"
            )

        async with self._uow_factory() as uow:
            if await uow.students.get_by_id(data.id):
                raise Conflict("Student ID already exists")

            now = datetime.now(UTC)
            student = Student(
                id=data.id,
                first_name=data.first_name,
                last_name=data.last_name,
                program=data.program,
                email=data.email or None,
                cohort=data.cohort,
                created_at=now,
                updated_at=now,
            )
            await uow.students.create(student)

        logger.info("Created student %s", student.id)
        return student
