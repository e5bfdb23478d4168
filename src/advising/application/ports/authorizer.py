"""Authorizer port - decides whether a caller may run privileged operations."""

from typing import Protocol


class Authorizer(Protocol):
    """Port for privileged-caller checks."""

    def is_privileged(self, user) -> bool: ...
