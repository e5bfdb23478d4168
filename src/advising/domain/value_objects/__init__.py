"""Domain value objects."""

from advising.domain.value_objects.interaction_type import INTERACTION_TYPES, InteractionType
from advising.domain.value_objects.phase import DEFAULT_FREQUENCY_DAYS, Phase

__all__ = [
    "DEFAULT_FREQUENCY_DAYS",
    "INTERACTION_TYPES",
    "InteractionType",
    "Phase",
]
