"""Response envelope - JSON success and error bodies, always with CORS headers."""

import falcon
import falcon.asgi

from advising.interfaces.api.middleware.cors import apply_cors_headers

UNKNOWN_ERROR = "Unknown error"


def respond(
    req: falcon.asgi.Request,
    resp: falcon.asgi.Response,
    data,
    status: str | int = falcon.HTTP_200,
) -> None:
    """Serialize data as the JSON body with the given status."""
    resp.media = data
    resp.status = status
    apply_cors_headers(req, resp)


def respond_error(
    req: falcon.asgi.Request,
    resp: falcon.asgi.Response,
    message: str,
    status: str | int = falcon.HTTP_500,
) -> None:
    """Write ``{"error": message}`` with the given status."""
    resp.media = {"error": message}
    resp.status = status
    apply_cors_headers(req, resp)


def error_message(ex: BaseException) -> str:
    """Human-readable message carried by an exception."""
    return str(ex) or UNKNOWN_ERROR
