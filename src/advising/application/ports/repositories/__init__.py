"""Repository ports."""

from advising.application.ports.repositories.integration_repository import (
    IntegrationStatusRepository,
)
from advising.application.ports.repositories.interaction_repository import (
    InteractionRepository,
)
from advising.application.ports.repositories.settings_repository import (
    SystemSettingsRepository,
)
from advising.application.ports.repositories.staff_repository import StaffRepository
from advising.application.ports.repositories.student_repository import StudentRepository

__all__ = [
    "IntegrationStatusRepository",
    "InteractionRepository",
    "StaffRepository",
    "StudentRepository",
    "SystemSettingsRepository",
]
