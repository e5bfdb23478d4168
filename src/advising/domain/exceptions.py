"""Domain exceptions."""


class AdvisingError(Exception):
    """Base exception for the advising service."""

    pass


class NotFound(AdvisingError):
    """Requested resource was not found."""

    def __init__(self, entity: str, identifier: str | int | None = None) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.identifier = identifier


class ValidationError(AdvisingError):
    """Validation failed for input data."""

    pass


class Conflict(AdvisingError):
    """Resource conflicts with an existing one (duplicate id, email in use)."""

    pass


class AuthenticationRequired(AdvisingError):
    """Caller could not be identified."""

    pass


class PermissionDenied(AdvisingError):
    """Caller does not have permission for the requested action."""

    pass
