"""
Integration tests for OpenAPI documentation.

Verifies OpenAPI schema is correctly generated for all endpoints.
"""

from fastapi.testclient import TestClient


class TestOpenAPISchema:
    """Tests for OpenAPI schema generation."""

    def test_openapi_schema_accessible(self, client: TestClient) -> None:
        response = client.get("/openapi.json")
        assert response.status_code == 200
        schema = response.json()
        assert "openapi" in schema
        assert "paths" in schema

    def test_openapi_title_and_version(self, client: TestClient) -> None:
        schema = client.get("/openapi.json").json()
        assert schema["info"]["title"] == "passgate"
        assert schema["info"]["version"] == "0.1.0"

    def test_v1_register_endpoint_in_schema(self, client: TestClient) -> None:
        schema = client.get("/openapi.json").json()
        register = schema["paths"]["/v1/register"]
        assert set(register) == {"post"}
        assert register["post"]["summary"] == "Register a new account"
        assert {"200", "400", "409"} <= set(register["post"]["responses"])

    def test_v1_login_endpoint_in_schema(self, client: TestClient) -> None:
        schema = client.get("/openapi.json").json()
        login = schema["paths"]["/v1/login"]
        assert set(login) == {"post"}
        assert {"200", "400", "401"} <= set(login["post"]["responses"])

    def test_login_credentials_not_query_parameters(self, client: TestClient) -> None:
        """Credentials are only accepted in the request body."""
        schema = client.get("/openapi.json").json()
        for path in ("/v1/register", "/v1/login"):
            operation = schema["paths"][path]["post"]
            assert "parameters" not in operation or not operation["parameters"]
            assert "requestBody" in operation
