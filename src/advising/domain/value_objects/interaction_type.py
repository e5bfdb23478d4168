"""Interaction types offered to the dashboard filters."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class InteractionType:
    """Selectable interaction type - value stored on interactions, label shown to staff."""

    value: str
    label: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


INTERACTION_TYPES: tuple[InteractionType, ...] = (
    InteractionType("all", "All Types"),
    InteractionType("coaching", "Coaching"),
    InteractionType("academic", "Academic Support"),
    InteractionType("career", "Career Counseling"),
    InteractionType("performance", "Performance Improvement"),
    InteractionType("behavioral", "Behavioral Intervention"),
)
