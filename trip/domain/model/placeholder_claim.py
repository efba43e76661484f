"""Placeholder claim entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from trip.domain.model.common import DomainModel, utcnow
from trip.domain.value import ClaimId, ParticipantId, TripId, UserId


class PlaceholderClaim(DomainModel):
    """One-time code bound to a single placeholder participant.

    The code is revoked on the first redemption attempt, whether or not the
    claim itself goes through.
    """

    id: ClaimId
    trip_id: TripId
    participant_id: Optional[ParticipantId] = None
    code_hash: str
    expires_at: datetime
    created_by: UserId
    created_at: datetime = Field(default_factory=utcnow)
    revoked_at: Optional[datetime] = None

    def is_usable(self, now: datetime) -> bool:
        return self.revoked_at is None and now < self.expires_at
