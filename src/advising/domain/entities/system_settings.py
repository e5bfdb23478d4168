"""System settings entity."""

from dataclasses import dataclass, field
from datetime import datetime

from advising.domain.value_objects import DEFAULT_FREQUENCY_DAYS, Phase


@dataclass
class SystemSettings:
    """Cohort-to-phase mapping and per-phase interaction frequencies (days)."""

    cohort_phase_map: dict[str, str] = field(default_factory=dict)
    foundations_interaction_days: int | None = None
    liftoff_interaction_days: int | None = None
    lightspeed_interaction_days: int | None = None
    program101_interaction_days: int | None = None
    default_interaction_days: int | None = None
    updated_at: datetime | None = None

    def phase_for_cohort(self, cohort: int | None) -> Phase:
        """Phase the cohort is mapped to, DEFAULT when unmapped or no cohort."""
        if not cohort:
            return Phase.DEFAULT
        return Phase.parse(self.cohort_phase_map.get(str(cohort)))

    def frequency_for_phase(self, phase: Phase) -> int:
        """Required days between interactions for a phase."""
        configured = {
            Phase.FOUNDATIONS: self.foundations_interaction_days,
            Phase.LIFTOFF: self.liftoff_interaction_days,
            Phase.LIGHTSPEED: self.lightspeed_interaction_days,
            Phase.PROGRAM_101: self.program101_interaction_days,
            Phase.DEFAULT: self.default_interaction_days,
        }[phase]
        return configured or DEFAULT_FREQUENCY_DAYS[phase]
