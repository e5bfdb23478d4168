"""Falcon ASGI application."""

from collections.abc import Sequence

import falcon.asgi
from falcon.asgi import App

from advising.application.ports import Authorizer
from advising.application.use_cases.admin.flush_database import FlushDatabaseUseCase
from advising.application.use_cases.interaction.create_interaction import (
    CreateInteractionUseCase,
)
from advising.application.use_cases.interaction.list_interactions import (
    ListInteractionsUseCase,
)
from advising.application.use_cases.interaction.update_interaction import (
    UpdateInteractionUseCase,
)
from advising.application.use_cases.settings.update_system_settings import (
    UpdateSystemSettingsUseCase,
)
from advising.application.use_cases.staff.deactivate_staff import DeactivateStaffUseCase
from advising.application.use_cases.staff.update_staff import UpdateStaffUseCase
from advising.application.use_cases.student.create_student import CreateStudentUseCase
from advising.application.use_cases.student.delete_student import DeleteStudentUseCase
from advising.application.use_cases.student.update_student import UpdateStudentUseCase
from advising.interfaces.api.errors import register_error_handlers
from advising.interfaces.api.middleware.auth import AuthMiddleware
from advising.interfaces.api.middleware.cors import CORSMiddleware
from advising.interfaces.api.resources.admin import FlushDatabaseResource
from advising.interfaces.api.resources.auth import LogoutResource
from advising.interfaces.api.resources.health import HealthResource
from advising.interfaces.api.resources.integrations import IntegrationStatusResource
from advising.interfaces.api.resources.interaction_types import InteractionTypesResource
from advising.interfaces.api.resources.interactions import (
    InteractionArchiveResource,
    InteractionResource,
    InteractionsResource,
)
from advising.interfaces.api.resources.settings import SystemSettingsResource
from advising.interfaces.api.resources.staff import StaffListResource, StaffMemberResource
from advising.interfaces.api.resources.students import StudentResource, StudentsResource


def create_app(
    unit_of_work_factory: type,
    authorizer: Authorizer,
    *,
    cors_origins: Sequence[str] = (),
    keycloak_provider=None,
    secure_cookies: bool = False,
    middleware: Sequence[object] = (),
) -> App:
    """Create Falcon ASGI app with routes.

    CORS middleware runs first so preflight never reaches auth or a
    responder; ``middleware`` is inserted between CORS and auth.
    """
    uow_factory = unit_of_work_factory
    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(cors_origins),
            *middleware,
            AuthMiddleware(keycloak_provider),
        ],
    )
    register_error_handlers(app)

    health = HealthResource(uow_factory)
    app.add_route("/api/health", health)
    app.add_route("/api/health/db", health, suffix="db")
    app.add_route("/api/interaction-types", InteractionTypesResource())
    app.add_route("/api/auth/logout", LogoutResource(secure_cookies))
    app.add_route(
        "/api/students",
        StudentsResource(uow_factory, CreateStudentUseCase(uow_factory)),
    )
    app.add_route(
        "/api/students/{student_id}",
        StudentResource(
            uow_factory,
            UpdateStudentUseCase(uow_factory),
            DeleteStudentUseCase(uow_factory),
        ),
    )
    app.add_route("/api/staff", StaffListResource(uow_factory))
    app.add_route(
        "/api/staff/{staff_id}",
        StaffMemberResource(
            UpdateStaffUseCase(uow_factory),
            DeactivateStaffUseCase(uow_factory),
        ),
    )
    app.add_route(
        "/api/interactions",
        InteractionsResource(
            ListInteractionsUseCase(uow_factory),
            CreateInteractionUseCase(uow_factory),
        ),
    )
    app.add_route(
        "/api/interactions/{interaction_id}",
        InteractionResource(uow_factory, UpdateInteractionUseCase(uow_factory)),
    )
    app.add_route(
        "/api/interactions/{interaction_id}/archive",
        InteractionArchiveResource(uow_factory),
    )
    app.add_route(
        "/api/settings/system",
        SystemSettingsResource(uow_factory, UpdateSystemSettingsUseCase(uow_factory)),
    )
    app.add_route("/api/integrations/status", IntegrationStatusResource(uow_factory))
    app.add_route(
        "/api/admin/flush-db",
        FlushDatabaseResource(FlushDatabaseUseCase(uow_factory, authorizer)),
    )
    return app
