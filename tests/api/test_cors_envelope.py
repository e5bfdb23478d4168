"""CORS headers, preflight and error envelope across the whole API."""

import pytest
from falcon.testing import TestClient

from advising.interfaces.api.app import create_app
from advising.infrastructure.permission.role_authorizer import RoleAuthorizer

from tests.conftest import FakeUnitOfWork, make_uow_factory

CORS_HEADERS = (
    "Access-Control-Allow-Origin",
    "Access-Control-Allow-Methods",
    "Access-Control-Allow-Headers",
    "Access-Control-Allow-Credentials",
)

ROUTES = [
    ("GET", "/api/interaction-types"),
    ("GET", "/api/students"),
    ("POST", "/api/students"),
    ("GET", "/api/students/missing"),
    ("DELETE", "/api/staff/abc"),
    ("PUT", "/api/interactions/1"),
    ("POST", "/api/auth/logout"),
    ("POST", "/api/admin/flush-db"),
    ("DELETE", "/api/interaction-types"),
    ("GET", "/api/does-not-exist"),
]


class TestHeaderTotality:
    @pytest.mark.parametrize("method,path", ROUTES)
    @pytest.mark.parametrize("origin", [None, "https://example.com"])
    def test_every_response_carries_cors_headers(
        self, client: TestClient, method: str, path: str, origin: str | None
    ) -> None:
        headers = {"Origin": origin} if origin else {}
        r = client.simulate_request(method, path, headers=headers, json={})
        for name in CORS_HEADERS:
            assert name in r.headers, f"{name} missing on {method} {path} -> {r.status_code}"

    def test_origin_is_echoed(self, client: TestClient) -> None:
        r = client.simulate_get(
            "/api/interaction-types", headers={"Origin": "https://example.com"}
        )
        assert r.headers["Access-Control-Allow-Origin"] == "https://example.com"
        assert r.headers["Access-Control-Allow-Credentials"] == "true"
        assert r.headers["Access-Control-Allow-Methods"] == "GET,POST,PUT,DELETE,OPTIONS"
        assert r.headers["Access-Control-Allow-Headers"] == "Content-Type, Authorization"

    def test_missing_origin_uses_wildcard_without_credentials(self, client: TestClient) -> None:
        r = client.simulate_get("/api/interaction-types")
        assert r.headers["Access-Control-Allow-Origin"] == "*"
        assert r.headers["Access-Control-Allow-Credentials"] == "false"


class TestAllowList:
    @pytest.fixture
    def client(self, uow_factory) -> TestClient:
        app = create_app(
            uow_factory,
            RoleAuthorizer(),
            cors_origins=["https://advising.example.org", "http://localhost:3000"],
        )
        return TestClient(app)

    def test_listed_origin_is_echoed(self, client: TestClient) -> None:
        r = client.simulate_get(
            "/api/health", headers={"Origin": "http://localhost:3000"}
        )
        assert r.headers["Access-Control-Allow-Origin"] == "http://localhost:3000"

    def test_unlisted_origin_gets_first_allowed(self, client: TestClient) -> None:
        r = client.simulate_get("/api/health", headers={"Origin": "https://evil.example"})
        assert r.headers["Access-Control-Allow-Origin"] == "https://advising.example.org"


class TestPreflight:
    @pytest.mark.parametrize(
        "path",
        ["/api/auth/logout", "/api/students", "/api/students/0001", "/api/admin/flush-db"],
    )
    def test_options_is_204_with_empty_body(self, client: TestClient, path: str) -> None:
        r = client.simulate_options(path, headers={"Origin": "http://localhost:3000"})
        assert r.status_code == 204
        assert r.content == b""
        for name in CORS_HEADERS:
            assert name in r.headers

    def test_logout_preflight_echoes_origin(self, client: TestClient) -> None:
        r = client.simulate_options(
            "/api/auth/logout", headers={"Origin": "http://localhost:3000"}
        )
        assert r.status_code == 204
        assert r.headers["Access-Control-Allow-Origin"] == "http://localhost:3000"

    def test_preflight_runs_no_business_logic(self, client: TestClient, fake_uow) -> None:
        r = client.simulate_options("/api/admin/flush-db")
        assert r.status_code == 204
        assert fake_uow.commits == 0


class FailingStudentRepository:
    """Student store whose every call fails like a dropped connection."""

    async def list_all(self):
        raise RuntimeError("connection to server was lost")

    async def get_by_id(self, student_id):
        raise RuntimeError("connection to server was lost")


class SilentFailure(Exception):
    pass


class TestErrorEnvelope:
    @pytest.fixture
    def failing_client(self) -> TestClient:
        uow = FakeUnitOfWork()
        uow.students = FailingStudentRepository()
        app = create_app(make_uow_factory(uow), RoleAuthorizer())
        return TestClient(app)

    def test_store_failure_is_500_with_message(self, failing_client: TestClient) -> None:
        r = failing_client.simulate_get(
            "/api/students", headers={"Origin": "https://example.com"}
        )
        assert r.status_code == 500
        assert r.json == {"error": "connection to server was lost"}
        assert r.headers["Access-Control-Allow-Origin"] == "https://example.com"

    def test_store_failure_inside_use_case(self, failing_client: TestClient) -> None:
        r = failing_client.simulate_post(
            "/api/students",
            json={"id": "0009", "firstName": "A", "lastName": "B", "program": "101"},
        )
        assert r.status_code == 500
        assert r.json == {"error": "connection to server was lost"}

    def test_exception_without_message_uses_unknown_error(self, fake_uow) -> None:
        fake_uow.ping_error = SilentFailure()
        client = TestClient(create_app(make_uow_factory(fake_uow), RoleAuthorizer()))
        r = client.simulate_get("/api/health/db")
        assert r.status_code == 500
        assert r.json == {"error": "Unknown error"}

    @pytest.mark.parametrize(
        "method,path,status",
        [
            ("GET", "/api/students/missing", 404),
            ("DELETE", "/api/staff/abc", 400),
            ("POST", "/api/students", 400),
            ("GET", "/api/nowhere", 404),
            ("DELETE", "/api/interaction-types", 405),
        ],
    )
    def test_error_body_shape(
        self, client: TestClient, method: str, path: str, status: int
    ) -> None:
        r = client.simulate_request(method, path, json={})
        assert r.status_code == status
        assert set(r.json) == {"error"}
        assert isinstance(r.json["error"], str)

    def test_malformed_json_is_400(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/api/students",
            body="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert r.status_code == 400
        assert set(r.json) == {"error"}
