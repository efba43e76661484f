"""User profile as seen by the engine.

Accounts are owned by the authentication collaborator; the engine only
reads the display name to label participants.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from trip.domain.model.common import DomainModel, utcnow
from trip.domain.value import UserId


class User(DomainModel):
    id: UserId
    display_name: Optional[str] = None
    email: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
