"""Auth middleware - resolves the calling staff member from a bearer token."""

from dataclasses import dataclass, field

import falcon.asgi

ANONYMOUS = "anonymous"
BEARER_PREFIX = "Bearer "


@dataclass
class RequestUser:
    """Caller attached to req.context.user."""

    user_id: str
    email: str | None = None
    username: str | None = None
    roles: list[str] = field(default_factory=list)

    @property
    def is_anonymous(self) -> bool:
        return self.user_id == ANONYMOUS


def bearer_token(req: falcon.asgi.Request) -> str | None:
    header = req.get_header("Authorization")
    if not header or not header.startswith(BEARER_PREFIX):
        return None
    return header[len(BEARER_PREFIX):].strip() or None


class AuthMiddleware:
    """Sets req.context.user for every request.

    Without a bearer token the caller is anonymous. A token the identity
    provider rejects, or any token when no provider is configured, yields
    None so privileged operations answer 401.
    """

    def __init__(self, keycloak_provider=None) -> None:
        self._keycloak = keycloak_provider

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        token = bearer_token(req)
        if token is None:
            req.context.user = RequestUser(user_id=ANONYMOUS)
            return

        oidc_user = self._keycloak.decode_token(token) if self._keycloak else None
        req.context.user = (
            RequestUser(
                user_id=oidc_user.user_id,
                email=oidc_user.email,
                username=oidc_user.username,
                roles=list(oidc_user.roles),
            )
            if oidc_user
            else None
        )
