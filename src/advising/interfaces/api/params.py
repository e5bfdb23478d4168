"""Helpers for parsing path and body values."""

import falcon.asgi

from advising.domain.exceptions import ValidationError


async def read_object(req: falcon.asgi.Request) -> dict:
    """JSON request body, which must be an object. An empty body reads as {}."""
    body = await req.get_media(default_when_empty={})
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def optional_str(body: dict, key: str) -> str | None:
    """String field of a JSON object; null or absent gives None."""
    value = body.get(key)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{key} must be a string")
    return value


def optional_bool(body: dict, key: str) -> bool | None:
    value = body.get(key)
    if value is not None and not isinstance(value, bool):
        raise ValidationError(f"{key} must be a boolean")
    return value


def parse_int_id(value: str, label: str) -> int:
    """Parse a numeric path id, raising ValidationError("Invalid <label> ID")."""
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {label} ID") from None


def parse_cohort(value) -> int | None:
    """Cohort arrives as a number or a numeric string; empty means none."""
    if value is None or value == "" or value == 0:
        return None
    if isinstance(value, bool):
        raise ValidationError("Cohort must be a number")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError("Cohort must be a number")
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError("Cohort must be a number") from None


def parse_positive_int(value, field: str) -> int:
    """Whole number >= 1, given as a JSON number or a numeric string."""
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(f"{field} must be a positive integer")
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field} must be a positive integer") from None
    if number < 1:
        raise ValidationError(f"{field} must be a positive integer")
    return number


def isoformat(value) -> str | None:
    return value.isoformat() if value else None
