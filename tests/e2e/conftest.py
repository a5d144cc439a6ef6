"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from diu.config import AuthSettings
from diu.interface.api.app import create_app
from diu.util.jwt import create_token
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    app_instance = create_app(build_test_container())
    return TestClient(app_instance)


@pytest.fixture
def auth_headers():
    """Build bearer headers for a user, signed with the default secret."""

    def _headers(user_id: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_token(user_id, AuthSettings())}"}

    return _headers
