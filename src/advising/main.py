"""Application entry point and composition root."""

import logging

from advising import __version__
from advising.config import Settings, get_settings
from advising.infrastructure.auth.keycloak_provider import KeycloakProvider
from advising.infrastructure.permission.role_authorizer import RoleAuthorizer
from advising.infrastructure.persistence.postgres.connection import create_pool
from advising.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from advising.interfaces.api.app import create_app
from advising.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_advising_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)
    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        timeout=settings.db_pool_timeout,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("Keycloak client secret not set; bearer tokens will be rejected")

    return create_app(
        uow_factory,
        RoleAuthorizer(settings.admin_role),
        cors_origins=settings.cors_origin_list,
        keycloak_provider=keycloak,
        secure_cookies=settings.secure_cookies,
        middleware=[PoolLifespanMiddleware(pool)],
    )


def main() -> None:
    """CLI entry point - run uvicorn server."""
    import uvicorn

    settings = get_settings()
    app = create_advising_app()
    logger.info("Student advising API v%s", __version__)
    uvicorn.run(app, host=settings.host, port=settings.port)
