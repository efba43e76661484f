"""Base model for all domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def utcnow() -> datetime:
    """Timezone-aware current time used for every timestamp."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Base class for all domain models.

    Models are frozen; changes go through ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
