"""Base model and clock helper for domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Immutable entity; changes go through the repositories as new copies."""

    model_config = ConfigDict(frozen=True)
