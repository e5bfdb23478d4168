"""CORS middleware - adds Access-Control-* headers and answers preflight."""

from collections.abc import Sequence

import falcon.asgi

ALLOW_METHODS = "GET,POST,PUT,DELETE,OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization"


def build_cors_headers(
    origin: str | None, allowed_origins: Sequence[str] = ()
) -> dict[str, str]:
    """Compute the CORS header set for a request origin.

    With no allow-list the origin is echoed back. With an allow-list, an
    unlisted origin gets the first allowed origin, which the browser then
    refuses. Without an origin the wildcard is used and credentials are
    disabled, since browsers reject ``*`` together with credentials.
    """
    if not origin:
        return {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": ALLOW_METHODS,
            "Access-Control-Allow-Headers": ALLOW_HEADERS,
            "Access-Control-Allow-Credentials": "false",
        }
    if allowed_origins and origin not in allowed_origins:
        origin = allowed_origins[0]
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
        "Access-Control-Allow-Credentials": "true",
    }


def apply_cors_headers(req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
    """Set CORS headers for req on resp, honouring the allow-list stored by the middleware."""
    allowed = getattr(req.context, "cors_origins", ())
    resp.set_headers(build_cors_headers(req.get_header("Origin"), allowed))
    resp.vary = ("Origin",)


class CORSMiddleware:
    """Middleware that adds CORS headers and handles OPTIONS preflight."""

    def __init__(self, origins: Sequence[str] = ()) -> None:
        self._origins = tuple(origins)

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Answer OPTIONS preflight with 204 and no body; nothing else runs."""
        req.context.cors_origins = self._origins
        apply_cors_headers(req, resp)
        if req.method == "OPTIONS":
            resp.status = falcon.HTTP_204
            resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        """Ensure CORS headers on every response, error and unrouted paths included."""
        apply_cors_headers(req, resp)
