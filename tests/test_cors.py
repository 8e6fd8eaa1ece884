#!/usr/bin/env python3
"""
Pytest tests for CORS configuration
Tests that the FastAPI application handles CORS requests from the configured frontend
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import app


class TestCORSConfiguration:
    """Test CORS middleware configuration"""

    def setup_method(self):
        """Set up test fixtures"""
        self.client = TestClient(app)
        self.frontend_origin = "http://localhost:3000"

    def test_cors_preflight_request(self):
        """Test CORS preflight OPTIONS request"""
        response = self.client.options(
            "/",
            headers={
                "Origin": self.frontend_origin,
                "Access-Control-Request-Method": "GET",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == self.frontend_origin
        assert "access-control-allow-methods" in response.headers
        assert "access-control-allow-headers" in response.headers

    def test_cors_simple_get_request(self):
        """Test simple GET request with CORS headers"""
        response = self.client.get("/", headers={"Origin": self.frontend_origin})

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == self.frontend_origin
        assert response.json() == {"message": "Quiz backend is running"}

    def test_cors_allows_credentials(self):
        """Test that credentials are allowed"""
        response = self.client.get("/", headers={"Origin": self.frontend_origin})

        assert response.headers["access-control-allow-credentials"] == "true"

    def test_cors_preflight_attempt_submission(self):
        """Test preflight for submitting an attempt with the identity header"""
        response = self.client.options(
            "/quizzes/1/attempt",
            headers={
                "Origin": self.frontend_origin,
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": f"Content-Type,{settings.AUTH_USER_HEADER}",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == self.frontend_origin
        assert "POST" in response.headers.get("access-control-allow-methods", "").upper()

    def test_cors_preflight_result_lookup(self):
        """Test preflight for reading an attempt result"""
        response = self.client.options(
            "/results/1",
            headers={
                "Origin": self.frontend_origin,
                "Access-Control-Request-Method": "GET",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == self.frontend_origin


class TestCORSSecurityScenarios:
    """Test CORS security scenarios"""

    def setup_method(self):
        """Set up test fixtures"""
        self.client = TestClient(app)

    @pytest.mark.parametrize(
        "origin", ["http://evil-site.com", "http://localhost:4000", "http://127.0.0.1:3000"]
    )
    def test_unlisted_origin_not_echoed(self, origin):
        """Test that origins outside the allow list are not echoed back"""
        response = self.client.get("/", headers={"Origin": origin})

        # CORS is enforced by the browser, so the request itself succeeds
        assert response.status_code == 200
        assert response.headers.get("access-control-allow-origin") != origin


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
