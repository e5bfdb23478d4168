"""Health check endpoints."""

import falcon.asgi

from advising.interfaces.api.envelope import respond


class HealthResource:
    """Liveness and database connectivity endpoints."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /api/health - liveness."""
        respond(req, resp, {"status": "ok"})

    async def on_get_db(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /api/health/db - database round trip."""
        async with self._uow_factory() as uow:
            await uow.ping()
        respond(req, resp, {"status": "ok", "db": True})
