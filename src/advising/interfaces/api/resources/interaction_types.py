"""Interaction types endpoint."""

import falcon.asgi

from advising.domain.value_objects import INTERACTION_TYPES
from advising.interfaces.api.envelope import respond


class InteractionTypesResource:
    """GET /api/interaction-types - static list used by dashboard filters."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        respond(req, resp, [t.to_dict() for t in INTERACTION_TYPES])
