"""Domain entities."""

from advising.domain.entities.integration_status import IntegrationStatus
from advising.domain.entities.interaction import FollowUp, Interaction
from advising.domain.entities.staff_member import StaffMember
from advising.domain.entities.student import Student
from advising.domain.entities.system_settings import SystemSettings

__all__ = [
    "FollowUp",
    "IntegrationStatus",
    "Interaction",
    "StaffMember",
    "Student",
    "SystemSettings",
]
