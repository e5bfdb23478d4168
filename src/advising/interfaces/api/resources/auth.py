"""Auth endpoints."""

from http.cookies import SimpleCookie

import falcon.asgi

from advising.interfaces.api.envelope import respond

AUTH_COOKIE = "auth-token"


def expired_cookie(name: str, secure: bool = False) -> str:
    """Set-Cookie value that makes the browser drop the cookie immediately."""
    cookie = SimpleCookie()
    cookie[name] = ""
    morsel = cookie[name]
    morsel["max-age"] = 0
    morsel["path"] = "/"
    morsel["httponly"] = True
    morsel["samesite"] = "Lax"
    if secure:
        morsel["secure"] = True
    return morsel.OutputString()


class LogoutResource:
    """POST /api/auth/logout - clear the auth cookie."""

    def __init__(self, secure_cookies: bool = False) -> None:
        self._secure_cookies = secure_cookies

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        # Response.set_cookie() drops a zero max_age and unset_cookie() sends neither
        # Max-Age nor HttpOnly, so the expired cookie is written as a raw header.
        resp.append_header("Set-Cookie", expired_cookie(AUTH_COOKIE, self._secure_cookies))
        respond(req, resp, {"message": "Logout successful"})
