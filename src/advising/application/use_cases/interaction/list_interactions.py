"""List interactions use case."""

from datetime import date

from advising.application.dto.interaction_dto import InteractionView
from advising.domain.entities import Interaction, SystemSettings


def days_between(start: str, today: date) -> int | None:
    """Whole days from an ISO date string to today, None if the string is not a date."""
    try:
        last = date.fromisoformat(start[:10])
    except (TypeError, ValueError):
        return None
    return (today - last).days


class ListInteractionsUseCase:
    """List interactions, newest first, flagging students overdue for contact.

    The required cadence depends on the phase the student's cohort is in,
    taken from the latest system settings.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        *,
        cohort: int | None = None,
        follow_up_required: bool = False,
        today: date | None = None,
    ) -> list[InteractionView]:
        today = today or date.today()
        async with self._uow_factory() as uow:
            settings = await uow.settings.get_latest() or SystemSettings()
            interactions = await uow.interactions.list(
                cohort=cohort,
                follow_up_pending=follow_up_required,
            )
        return [self._annotate(i, settings, today) for i in interactions]

    @staticmethod
    def _annotate(
        interaction: Interaction, settings: SystemSettings, today: date
    ) -> InteractionView:
        phase = settings.phase_for_cohort(interaction.cohort)
        frequency = settings.frequency_for_phase(phase)
        days_since = days_between(interaction.date, today) if interaction.date else None
        return InteractionView(
            interaction=interaction,
            phase=phase,
            frequency=frequency,
            days_since_last_interaction=days_since,
            is_overdue=days_since is not None and days_since > frequency,
        )
