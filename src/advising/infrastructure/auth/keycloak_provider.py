"""Keycloak token introspection for staff callers."""

import logging
from dataclasses import dataclass, field

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

logger = logging.getLogger(__name__)


@dataclass
class OIDCUser:
    """Staff member identified by an active access token."""

    user_id: str
    email: str | None
    username: str | None
    realm_roles: list[str] = field(default_factory=list)
    client_roles: list[str] = field(default_factory=list)

    @property
    def roles(self) -> list[str]:
        return self.realm_roles + [r for r in self.client_roles if r not in self.realm_roles]


class KeycloakProvider:
    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._client_id = client_id
        self._openid = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect an access token.

        Returns None for inactive tokens and when Keycloak refuses the call.
        Roles granted on this API's own client are merged with realm roles.
        """
        try:
            claims = self._openid.introspect(token)
        except KeycloakError as e:
            logger.warning("Token introspection failed: %s", e)
            return None
        if not claims.get("active"):
            logger.debug("Rejected inactive token")
            return None

        client_access = claims.get("resource_access", {}).get(self._client_id, {})
        return OIDCUser(
            user_id=claims.get("sub", ""),
            email=claims.get("email"),
            username=claims.get("preferred_username"),
            realm_roles=list(claims.get("realm_access", {}).get("roles", [])),
            client_roles=list(client_access.get("roles", [])),
        )
