"""Flush database use case.

Irreversible: removes every interaction, student and staff account. Only
privileged callers may run it.
"""

import logging
from dataclasses import dataclass

from advising.application.ports import Authorizer
from advising.domain.exceptions import AuthenticationRequired, PermissionDenied

logger = logging.getLogger(__name__)


@dataclass
class FlushResult:
    """Number of rows removed per table."""

    interactions: int
    students: int
    staff: int


class FlushDatabaseUseCase:
    """Delete all advising data in dependency order, in one transaction."""

    def __init__(self, unit_of_work_factory: type, authorizer: Authorizer) -> None:
        self._uow_factory = unit_of_work_factory
        self._authorizer = authorizer

    async def execute(self, user) -> FlushResult:
        if user is None or getattr(user, "is_anonymous", False):
            raise AuthenticationRequired("Authentication required")
        if not self._authorizer.is_privileged(user):
            logger.warning("Refused database flush for %s", user.user_id)
            raise PermissionDenied("Only administrators can flush the database")

        async with self._uow_factory() as uow:
            # Interactions reference students and staff, so they go first.
            result = FlushResult(
                interactions=await uow.interactions.delete_all(),
                students=await uow.students.delete_all(),
                staff=await uow.staff.delete_all(),
            )

        logger.warning(
            "Database flushed by %s: %d interactions, %d students, %d staff",
            user.user_id,
            result.interactions,
            result.students,
            result.staff,
        )
        return result
