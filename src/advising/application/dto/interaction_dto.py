"""Interaction DTOs."""

from dataclasses import dataclass

from advising.domain.entities import Interaction
from advising.domain.value_objects import Phase


@dataclass
class FollowUpInput:
    required: bool = False
    date: str | None = None
    overdue: bool = False
    student_email: str | None = None
    staff_email: str | None = None


@dataclass
class InteractionCreateInput:
    """Fields accepted when logging an interaction."""

    student_name: str | None
    student_id: str | None
    type: str | None
    reason: str | None
    staff_member: str | None
    staff_member_id: str | int | None
    notes: str | None = None
    date: str | None = None
    time: str | None = None
    ai_summary: str | None = None
    follow_up: FollowUpInput | None = None


@dataclass
class InteractionUpdateInput:
    """Fields accepted when editing an interaction. None leaves a field unchanged."""

    student_name: str | None = None
    student_id: str | None = None
    program: str | None = None
    type: str | None = None
    reason: str | None = None
    notes: str | None = None
    date: str | None = None
    time: str | None = None
    staff_member: str | None = None
    ai_summary: str | None = None
    follow_up: FollowUpInput | None = None


@dataclass
class InteractionView:
    """Interaction annotated with its phase cadence and overdue state."""

    interaction: Interaction
    phase: Phase
    frequency: int
    days_since_last_interaction: int | None
    is_overdue: bool
