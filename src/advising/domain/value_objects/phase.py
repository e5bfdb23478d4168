"""Program phases and their interaction frequencies."""

from enum import StrEnum


class Phase(StrEnum):
    """Program phase a cohort is currently in."""

    FOUNDATIONS = "foundations"
    LIFTOFF = "liftoff"
    LIGHTSPEED = "lightspeed"
    PROGRAM_101 = "101"
    DEFAULT = "default"

    @classmethod
    def parse(cls, value: str | None) -> "Phase":
        """Map a stored phase name to a Phase, unknown names become DEFAULT."""
        try:
            return cls(value)
        except ValueError:
            return cls.DEFAULT


# Days between required interactions when settings leave a phase unset.
DEFAULT_FREQUENCY_DAYS: dict[Phase, int] = {
    Phase.FOUNDATIONS: 14,
    Phase.LIFTOFF: 21,
    Phase.LIGHTSPEED: 7,
    Phase.PROGRAM_101: 30,
    Phase.DEFAULT: 30,
}
