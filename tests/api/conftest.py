"""
Fixtures for router tests.

Routers are exercised through TestClient with services replaced via
dependency_overrides; no database is touched.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from backend.api.deps.dependencies import (
    CurrentUser,
    get_current_user,
    get_identity_service,
    get_optional_current_user,
)
from backend.api.main import create_app


@pytest.fixture
def app():
    app = create_app()
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def current_user() -> CurrentUser:
    return CurrentUser(id=1, username="alice")


@pytest.fixture
def authed(app, current_user) -> CurrentUser:
    """Treat every request as coming from alice."""
    app.dependency_overrides[get_current_user] = lambda: current_user
    app.dependency_overrides[get_optional_current_user] = lambda: current_user
    return current_user


@pytest.fixture
def anonymous(app) -> None:
    """Requests carry no token; identity lookups never reach a database."""
    app.dependency_overrides[get_identity_service] = lambda: AsyncMock()
