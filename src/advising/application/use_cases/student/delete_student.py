"""Delete student use case."""

import logging

from advising.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class DeleteStudentUseCase:
    """Remove a student and, through the schema cascade, their interactions."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, student_id: str) -> None:
        async with self._uow_factory() as uow:
            if not await uow.students.get_by_id(student_id):
                raise NotFound("Student", student_id)
            await uow.students.delete(student_id)

        logger.info("Deleted student %s", student_id)
