"""Request-level helpers shared by the routes."""

from fastapi import Cookie, Header, HTTPException, status

from diu.domain.service import JWTService


def get_auth_token(
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> str | None:
    """Read the bearer token from the Authorization header or the auth cookie.

    The header wins when both are sent.
    """
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return auth_token


def require_user_id(jwt_service: JWTService, token: str | None, action: str) -> str:
    """Resolve the authenticated user or fail with 401.

    Args:
        jwt_service: JWT service for token verification
        token: Bearer token, if any
        action: What the caller tried to do, for the error message

    Returns:
        Authenticated user ID
    """
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id
