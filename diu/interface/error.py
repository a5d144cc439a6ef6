"""Translation of domain errors into HTTP errors."""

from fastapi import HTTPException, status

from diu.domain.error import (
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTP error the client sees.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{error.resource} not found",
        )
    if isinstance(error, NotAuthorizedError):
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not authorized to modify this {error.resource}",
        )
    if isinstance(error, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    # ValidationError and any other broken domain rule
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
