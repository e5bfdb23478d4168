"""Student input DTOs."""

from dataclasses import dataclass


@dataclass
class StudentCreateInput:
    """Fields accepted when registering a student."""

    id: str | None
    first_name: str | None
    last_name: str | None
    program: str | None
    email: str | None = None
    cohort: int | None = None


@dataclass
class StudentUpdateInput:
    """Fields accepted when editing a student."""

    first_name: str | None
    last_name: str | None
    email: str | None = None
    cohort: int | None = None
