"""Participant entity.

A participant is either linked to a real user or is a placeholder standing
in for someone who has not joined yet. The participant id is the stable key
for votes and gear assignments and never changes, including when a
placeholder is claimed.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from trip.domain.model.common import DomainModel, utcnow
from trip.domain.value import ParticipantId, TripId, UserId


class Participant(DomainModel):
    """Trip participant.

    Business rules:
    - At most one participant per (trip, user) for linked users
    - A placeholder has no user; claiming links one and never reverts
    """

    id: ParticipantId
    trip_id: TripId
    user_id: Optional[UserId] = None
    display_name: str
    is_placeholder: bool = False
    claimed_at: Optional[datetime] = None
    created_by: Optional[UserId] = None
    created_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def validate_link(self) -> "Participant":
        """A placeholder has no user and a real participant has one."""
        if self.is_placeholder and self.user_id is not None:
            raise ValueError("Placeholder participants cannot be linked to a user")
        if not self.is_placeholder and self.user_id is None:
            raise ValueError("Real participants must be linked to a user")
        return self

    def claimed_by(
        self, user_id: UserId, display_name: str, claimed_at: datetime
    ) -> "Participant":
        """Return this placeholder converted to the given user, keeping its id."""
        return self.model_copy(
            update={
                "user_id": user_id,
                "is_placeholder": False,
                "claimed_at": claimed_at,
                "display_name": display_name,
            }
        )
