"""Role-based authorizer - privileged callers carry the admin realm role."""


class RoleAuthorizer:
    """Grants privileged operations to callers holding ``admin_role``."""

    def __init__(self, admin_role: str = "admin") -> None:
        self._admin_role = admin_role

    def is_privileged(self, user) -> bool:
        """Check if user holds the admin role."""
        return user is not None and self._admin_role in getattr(user, "roles", ())
