"""Unit tests for JWT helpers."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from diu.config import AuthSettings
from diu.domain.service import JWTService
from diu.util.jwt import JWTError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="test-secret-that-is-long-enough-32b")


def _encode(payload: dict, secret: str = SETTINGS.jwt_secret) -> str:
    return jwt.encode(payload, secret, algorithm="HS256")


class TestVerifyToken:
    """Tests for verify_token."""

    def test_round_trip(self):
        token = create_token("user-1", SETTINGS)

        assert verify_token(token, SETTINGS).user_id == "user-1"

    def test_user_id_claim_is_accepted(self):
        token = _encode({"user_id": "user-2"})

        assert verify_token(token, SETTINGS).user_id == "user-2"

    def test_expired_token(self):
        expired = datetime.now(timezone.utc) - timedelta(minutes=1)
        token = _encode({"sub": "user-1", "exp": expired})

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_wrong_secret(self):
        token = _encode({"sub": "user-1"}, secret="another-secret-that-is-32-bytes!!")

        with pytest.raises(JWTError, match="Invalid"):
            verify_token(token, SETTINGS)

    def test_missing_subject(self):
        with pytest.raises(JWTError):
            verify_token(_encode({"role": "user"}), SETTINGS)

    def test_audience_is_checked_when_configured(self):
        settings = SETTINGS.model_copy(update={"jwt_audience": "diu"})
        good = create_token("user-1", settings)
        wrong = _encode({"sub": "user-1", "aud": "other"})

        assert verify_token(good, settings).user_id == "user-1"
        with pytest.raises(JWTError):
            verify_token(wrong, settings)


class TestJWTService:
    """Tests for optional authentication."""

    def test_get_user_id_from_token(self):
        service = JWTService(SETTINGS)
        token = service.create_token("user-1")

        assert service.get_user_id_from_token(token) == "user-1"
        assert service.get_user_id_from_token(None) is None
        assert service.get_user_id_from_token("garbage") is None
