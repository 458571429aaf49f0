"""Fixtures for API tests: app client and authenticated user override."""

import pytest
from fastapi.testclient import TestClient

from quest_api.api.deps.auth import get_current_user_id
from quest_api.api.main import create_app


@pytest.fixture
def client():
    app = create_app()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def current_user_id() -> str:
    return "user-1"


@pytest.fixture
def authed_client(client, current_user_id):
    """Client whose requests resolve to ``current_user_id``."""
    client.app.dependency_overrides[get_current_user_id] = lambda: current_user_id
    return client
