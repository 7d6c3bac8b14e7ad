"""Integration tests for JWT authentication.

Validates:
  - /health is public (plain Django view, no DRF).
  - Product endpoints return 401 without a valid token.
  - A token issued by /api/v1/auth/token/ grants access.
"""

import pytest

from django.contrib.auth import get_user_model

pytestmark = pytest.mark.integration

User = get_user_model()


class TestPublicEndpoints:
    def test_health_is_public(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestProtectedEndpoints:
    """All DRF endpoints require a valid JWT by default (Fail Closed)."""

    def test_no_token_returns_401(self, api_client):
        response = api_client.get("/api/v1/products/")
        assert response.status_code == 401

    def test_invalid_token_returns_401(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer invalid.token.here")
        response = api_client.get("/api/v1/products/")
        assert response.status_code == 401

    def test_malformed_auth_header_returns_401(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Token some-token")
        response = api_client.get("/api/v1/products/")
        assert response.status_code == 401

    def test_401_includes_www_authenticate_header(self, api_client):
        response = api_client.get("/api/v1/products/")
        assert response.status_code == 401
        assert "Bearer" in response.get("WWW-Authenticate", "")


class TestTokenFlow:
    def test_issued_token_grants_access(self, api_client):
        User.objects.create_user(username="operador", password="s3nha-forte")

        token = api_client.post(
            "/api/v1/auth/token/",
            {"username": "operador", "password": "s3nha-forte"},
            format="json",
        )
        assert token.status_code == 200

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.data['access']}")
        response = api_client.get("/api/v1/products/")
        assert response.status_code == 200

    def test_wrong_password_returns_401(self, api_client):
        User.objects.create_user(username="operador", password="s3nha-forte")
        response = api_client.post(
            "/api/v1/auth/token/",
            {"username": "operador", "password": "errada"},
            format="json",
        )
        assert response.status_code == 401
