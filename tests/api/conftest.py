"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from advising.infrastructure.auth.keycloak_provider import OIDCUser
from advising.infrastructure.permission.role_authorizer import RoleAuthorizer
from advising.interfaces.api.app import create_app

ADMIN_TOKEN = "admin-token"
STAFF_TOKEN = "staff-token"


class FakeKeycloakProvider:
    """Token decoder that knows two fixed tokens."""

    def decode_token(self, token: str) -> OIDCUser | None:
        if token == ADMIN_TOKEN:
            return OIDCUser(
                user_id="admin-1",
                email="barbara@launchpad.org",
                username="barbara",
                realm_roles=["admin"],
            )
        if token == STAFF_TOKEN:
            return OIDCUser(
                user_id="staff-1",
                email="charles@launchpad.org",
                username="charles",
                realm_roles=["staff"],
            )
        return None


@pytest.fixture
def app(uow_factory):
    """Falcon ASGI app wired to in-memory repositories."""
    return create_app(
        uow_factory,
        RoleAuthorizer("admin"),
        keycloak_provider=FakeKeycloakProvider(),
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
