"""Trip invite entity.

Invites are multi-use join codes scoped to one trip. Only the SHA-256 hash
of the code is stored.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from trip.domain.model.common import DomainModel, utcnow
from trip.domain.value import InviteId, TripId, UserId


class TripInvite(DomainModel):
    """Invite entity.

    Business rules:
    - Usable iff not revoked, not expired and under quota
    - Each redemption increments uses; reaching max_uses revokes it
    - Revocation is logical, rows are never removed
    """

    id: InviteId
    trip_id: TripId
    code_hash: str
    expires_at: datetime
    max_uses: int = Field(ge=1)
    uses: int = Field(default=0, ge=0)
    created_by: UserId
    created_at: datetime = Field(default_factory=utcnow)
    revoked_at: Optional[datetime] = None

    def is_usable(self, now: datetime) -> bool:
        return (
            self.revoked_at is None
            and now < self.expires_at
            and self.uses < self.max_uses
        )
