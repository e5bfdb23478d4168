"""Student entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Student:
    """Student enrolled in a program, identified by a caller-assigned id."""

    id: str
    first_name: str
    last_name: str
    program: str
    email: str | None = None
    cohort: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
