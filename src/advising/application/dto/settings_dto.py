"""System settings input DTO."""

from dataclasses import dataclass


@dataclass
class SystemSettingsUpdateInput:
    """Partial update; None leaves the stored value as it is."""

    cohort_phase_map: dict[str, str] | None = None
    foundations_interaction_days: int | None = None
    liftoff_interaction_days: int | None = None
    lightspeed_interaction_days: int | None = None
    program101_interaction_days: int | None = None
    default_interaction_days: int | None = None
