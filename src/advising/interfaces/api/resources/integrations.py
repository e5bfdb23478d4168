"""Integration status endpoint."""

import falcon.asgi

from advising.interfaces.api.envelope import respond
from advising.interfaces.api.params import isoformat


class IntegrationStatusResource:
    """GET /api/integrations/status - latest sync state per integration."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        async with self._uow_factory() as uow:
            statuses = await uow.integrations.list_all()
        respond(
            req,
            resp,
            {
                "ok": True,
                "statuses": [
                    {
                        "name": s.name,
                        "status": s.status,
                        "lastSync": isoformat(s.last_sync),
                        "updatedAt": isoformat(s.updated_at),
                    }
                    for s in statuses
                ],
            },
        )
