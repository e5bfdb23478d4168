"""System settings resource."""

import falcon.asgi

from advising.application.dto.settings_dto import SystemSettingsUpdateInput
from advising.application.use_cases.settings.update_system_settings import (
    UpdateSystemSettingsUseCase,
)
from advising.domain.entities import SystemSettings
from advising.domain.exceptions import ValidationError
from advising.domain.value_objects import Phase
from advising.interfaces.api.envelope import respond
from advising.interfaces.api.params import isoformat, parse_positive_int, read_object

# Body field -> SystemSettings attribute, and the phase it configures.
DAY_FIELDS = {
    "foundationsInteractionDays": ("foundations_interaction_days", Phase.FOUNDATIONS),
    "liftoffInteractionDays": ("liftoff_interaction_days", Phase.LIFTOFF),
    "lightspeedInteractionDays": ("lightspeed_interaction_days", Phase.LIGHTSPEED),
    "program101InteractionDays": ("program101_interaction_days", Phase.PROGRAM_101),
    "defaultInteractionDays": ("default_interaction_days", Phase.DEFAULT),
}


def settings_to_media(s: SystemSettings) -> dict:
    """Settings with unset frequencies filled from the phase defaults."""
    media = {"cohortPhaseMap": s.cohort_phase_map}
    for key, (_, phase) in DAY_FIELDS.items():
        media[key] = s.frequency_for_phase(phase)
    media["updatedAt"] = isoformat(s.updated_at)
    return media


def _cohort_phase_map(value) -> dict[str, str] | None:
    if value is None:
        return None
    if not isinstance(value, dict) or not all(isinstance(v, str) for v in value.values()):
        raise ValidationError("cohortPhaseMap must map cohort numbers to phase names")
    return {str(k): v for k, v in value.items()}


class SystemSettingsResource:
    """GET/PUT /api/settings/system - phase map and interaction frequencies."""

    def __init__(
        self,
        unit_of_work_factory: type,
        update_settings: UpdateSystemSettingsUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._update_settings = update_settings

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        async with self._uow_factory() as uow:
            settings = await uow.settings.get_latest()
        respond(req, resp, settings_to_media(settings or SystemSettings()))

    async def on_put(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Partial update. Each *InteractionDays field must be a positive integer."""
        body = await read_object(req)
        days = {
            attr: parse_positive_int(body[key], key)
            for key, (attr, _) in DAY_FIELDS.items()
            if body.get(key) is not None
        }
        data = SystemSettingsUpdateInput(
            cohort_phase_map=_cohort_phase_map(body.get("cohortPhaseMap")),
            **days,
        )
        settings = await self._update_settings.execute(data)
        respond(req, resp, settings_to_media(settings))
