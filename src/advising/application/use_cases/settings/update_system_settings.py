"""Update system settings use case."""

import logging
from dataclasses import fields, replace
from datetime import UTC, datetime

from advising.application.dto.settings_dto import SystemSettingsUpdateInput
from advising.domain.entities import SystemSettings
from advising.domain.exceptions import ValidationError
from advising.domain.value_objects import Phase

logger = logging.getLogger(__name__)


class UpdateSystemSettingsUseCase:
    """Change the cohort phase map and per-phase interaction frequencies."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, data: SystemSettingsUpdateInput) -> SystemSettings:
        changes = {
            f.name: getattr(data, f.name)
            for f in fields(data)
            if getattr(data, f.name) is not None
        }
        for name, value in changes.items():
            if name.endswith("_interaction_days") and value < 1:
                raise ValidationError(f"{name} must be a positive integer")
        if data.cohort_phase_map is not None:
            for cohort, phase in data.cohort_phase_map.items():
                if not cohort.isdigit() or phase not in {p.value for p in Phase}:
                    raise ValidationError(
                        "cohortPhaseMap must map cohort numbers to phase names"
                    )

        async with self._uow_factory() as uow:
            current = await uow.settings.get_latest() or SystemSettings()
            settings = await uow.settings.upsert(
                replace(current, **changes, updated_at=datetime.now(UTC))
            )

        logger.info("Updated system settings: %s", ", ".join(sorted(changes)) or "none")
        return settings
