"""Admin endpoints."""

import falcon.asgi

from advising.application.use_cases.admin.flush_database import FlushDatabaseUseCase
from advising.interfaces.api.envelope import respond


class FlushDatabaseResource:
    """POST /api/admin/flush-db - irreversibly delete all advising data.

    Admin callers only. Afterwards a new admin account has to be created.
    """

    def __init__(self, flush_database: FlushDatabaseUseCase) -> None:
        self._flush = flush_database

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        result = await self._flush.execute(user)
        respond(
            req,
            resp,
            {
                "success": True,
                "message": "Database flushed successfully. You can now create a new admin account.",
                "deleted": {
                    "interactions": result.interactions,
                    "students": result.students,
                    "staff": result.staff,
                },
            },
        )
