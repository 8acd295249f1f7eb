"""Integration tests for the HTTP application."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from bookshelf.api.http.app import create_app
from bookshelf.core.services.database.db_session import DbSessionService
from bookshelf.runtime.config.config_data import ConfigData


@pytest.fixture
def client(test_config: ConfigData) -> Generator[TestClient]:
    """Client running the application lifespan against an in-memory database."""
    with TestClient(create_app(test_config)) as test_client:
        yield test_client


class TestHealthEndpoints:
    """Test liveness and readiness probes."""

    def test_health(self, client):
        """Should report the process as healthy."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_ready(self, client):
        """Should report readiness when the database answers."""
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["checks"]["database"] == {"status": "healthy", "type": "sqlite"}

    def test_not_ready(self, client, monkeypatch):
        """Should answer 503 when the database is unreachable."""

        async def unhealthy(self) -> bool:
            return False

        monkeypatch.setattr(DbSessionService, "health_check", unhealthy)

        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"


class TestMiddleware:
    """Test request logging and security headers."""

    def test_request_id_is_echoed(self, client):
        """Should echo a caller supplied request id."""
        response = client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_is_generated(self, client):
        """Should generate a request id when none is sent."""
        response = client.get("/health")

        assert response.headers["X-Request-ID"]

    def test_security_headers(self, client):
        """Should set the standard security headers."""
        response = client.get("/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "Strict-Transport-Security" not in response.headers


class TestGraphQLEndpoint:
    """Test GraphQL over HTTP."""

    def test_domain_errors_travel_as_data(self, client):
        """Should answer 200 with the error envelope in data."""
        response = client.post(
            "/graphql",
            json={
                "query": "mutation { addAuthor(data: {country: \"US\"}) "
                "{ __typename ... on ErrorResponse { errors { code attrName } } } }"
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert "errors" not in body
        assert body["data"]["addAuthor"] == {
            "__typename": "ErrorResponse",
            "errors": [{"code": "E_BAD_INPUT", "attrName": "name"}],
        }

    def test_create_and_fetch_author(self, client):
        """Should persist through the endpoint and read it back."""
        created = client.post(
            "/graphql",
            json={
                "query": "mutation($data: AuthorInput!) { addAuthor(data: $data) "
                "{ ... on Author { id name country } } }",
                "variables": {"data": {"name": "Ursula", "country": "US"}},
            },
        ).json()["data"]["addAuthor"]

        fetched = client.post(
            "/graphql",
            json={
                "query": "query($id: Int!) { getAuthor(id: $id) { ... on Author { name country } } }",
                "variables": {"id": created["id"]},
            },
        ).json()["data"]["getAuthor"]

        assert fetched == {"name": "Ursula", "country": "US"}

    def test_graphiql_disabled_by_default(self, client):
        """Should not serve the IDE unless configured."""
        response = client.get("/graphql", headers={"Accept": "text/html"})

        assert response.status_code == 404
