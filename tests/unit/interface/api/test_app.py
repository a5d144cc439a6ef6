"""Unit tests for application startup checks."""

import pytest

from diu.interface.api.app import create_app
from diu.util.error import ConfigurationError
from tests.di import build_test_container


class TestCreateApp:
    """Tests for create_app."""

    def test_production_requires_private_secret(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")

        with pytest.raises(ConfigurationError) as exc_info:
            create_app(build_test_container())

        assert exc_info.value.setting == "AUTH__JWT_SECRET"

    def test_production_with_secret(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("AUTH__JWT_SECRET", "a-private-secret-of-32-bytes-min!")

        app = create_app(build_test_container())

        assert app.title == "DIU API"
