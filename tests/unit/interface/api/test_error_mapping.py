"""Unit tests for domain error translation."""

from diu.domain.error import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from diu.interface.api.dependencies import get_auth_token
from diu.interface.error import to_http_exception


class TestToHttpException:
    """Tests for to_http_exception."""

    def test_not_found(self):
        error = to_http_exception(NotFoundError("Post", "123"))

        assert error.status_code == 404
        assert error.detail == "Post not found"

    def test_not_authorized(self):
        error = to_http_exception(NotAuthorizedError("comment", "1", "user-2"))

        assert error.status_code == 403

    def test_conflict(self):
        error = to_http_exception(ConflictError("Username already taken"))

        assert error.status_code == 409
        assert error.detail == "Username already taken"

    def test_validation(self):
        error = to_http_exception(ValidationError("Comment content is required"))

        assert error.status_code == 400
        assert error.detail == "Comment content is required"


class TestGetAuthToken:
    """Tests for reading the bearer token."""

    def test_header_wins_over_cookie(self):
        assert get_auth_token("Bearer header-token", "cookie-token") == "header-token"

    def test_cookie_fallback(self):
        assert get_auth_token(None, "cookie-token") == "cookie-token"

    def test_non_bearer_header_is_ignored(self):
        assert get_auth_token("Basic abc", None) is None
