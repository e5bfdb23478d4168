"""Error handlers - convert every exception into the error envelope."""

import logging

import falcon
import falcon.asgi

from advising.domain.exceptions import (
    AdvisingError,
    AuthenticationRequired,
    Conflict,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from advising.interfaces.api.envelope import error_message, respond_error

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[AdvisingError], str] = {
    ValidationError: falcon.HTTP_400,
    AuthenticationRequired: falcon.HTTP_401,
    PermissionDenied: falcon.HTTP_403,
    NotFound: falcon.HTTP_404,
    Conflict: falcon.HTTP_409,
}


def status_for(ex: AdvisingError) -> str:
    """HTTP status for a domain error, 500 for unmapped ones."""
    for cls in type(ex).__mro__:
        if cls in _STATUS_BY_ERROR:
            return _STATUS_BY_ERROR[cls]
    return falcon.HTTP_500


async def handle_domain_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: AdvisingError, params
) -> None:
    status = status_for(ex)
    logger.info("%s %s failed with %s: %s", req.method, req.path, status, ex)
    respond_error(req, resp, error_message(ex), status)


async def handle_http_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: falcon.HTTPError, params
) -> None:
    if ex.headers:
        resp.set_headers(ex.headers)
    respond_error(req, resp, ex.description or ex.title or error_message(ex), ex.status)


async def handle_unexpected_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params
) -> None:
    logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    respond_error(req, resp, error_message(ex), falcon.HTTP_500)


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Most specific handler wins, so registration order does not matter."""
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_error_handler(falcon.HTTPError, handle_http_error)
    app.add_error_handler(AdvisingError, handle_domain_error)
