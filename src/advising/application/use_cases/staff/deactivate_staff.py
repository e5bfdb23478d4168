"""Deactivate staff member use case."""

import logging
from dataclasses import replace

from advising.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class DeactivateStaffUseCase:
    """Mark a staff member inactive. Rows are kept so interaction history stays intact."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, staff_id: int) -> None:
        async with self._uow_factory() as uow:
            existing = await uow.staff.get_by_id(staff_id)
            if not existing:
                raise NotFound("Staff member", staff_id)
            await uow.staff.update(replace(existing, status="inactive"))

        logger.info("Deactivated staff member %s", staff_id)
