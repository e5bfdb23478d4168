"""Interaction entity."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class FollowUp:
    """Follow-up attached to an interaction."""

    required: bool = False
    date: str | None = None
    overdue: bool = False
    sent: bool = False
    student_email: str | None = None
    staff_email: str | None = None


@dataclass
class Interaction:
    """A logged contact between a staff member and a student."""

    id: int | None
    student_id: str
    student_first_name: str
    student_last_name: str
    type: str
    reason: str
    staff_member: str
    staff_member_id: int
    program: str = "default"
    notes: str = ""
    date: str = ""
    time: str = ""
    status: str = "completed"
    ai_summary: str | None = None
    follow_up: FollowUp = field(default_factory=FollowUp)
    is_archived: bool = False
    # Joined from the student on reads, never written.
    cohort: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def student_name(self) -> str:
        return f"{self.student_first_name} {self.student_last_name}"


def split_student_name(student_name: str | None) -> tuple[str, str]:
    """Split 'First Rest Of Name' into first name and the remainder."""
    parts = (student_name or "").split(" ")
    return parts[0], " ".join(parts[1:])
