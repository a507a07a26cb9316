# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from fastapi.testclient import TestClient
from typing import Generator

from skills_enhance.core.config import Settings
from skills_enhance.main import create_app
from skills_enhance.models.permission import PermissionSet
from skills_enhance.state.session import build_store


@pytest.fixture
def settings() -> Settings:
    """Seeded demo state with the admin (user "1") logged in."""
    return Settings(
        SEED_DEMO_USERS=True,
        DEFAULT_ACTOR_EMAIL="karan@skillsenhance.com",
    )


@pytest.fixture
def store(settings):
    """A fresh authorization store per test."""
    return build_store(settings)


@pytest.fixture
def logged_out_store(settings):
    settings.DEFAULT_ACTOR_EMAIL = ""
    return build_store(settings)


@pytest.fixture(scope="function")
def app(settings):
    """Create a test FastAPI application instance."""
    return create_app(settings)


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def login_as(client):
    """Switch the server-side current actor by email."""
    def _login(email: str):
        response = client.post("/api/auth/login", json={"email": email, "password": "x"})
        assert response.status_code == 200, response.text
        return response.json()
    return _login


@pytest.fixture
def reviewer_permissions() -> PermissionSet:
    return PermissionSet(read=True, approve=True, view_analytics=True)
