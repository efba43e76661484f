"""In-memory invite repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from trip.domain.model import TripInvite
from trip.domain.repository import InviteRepository
from trip.domain.value import InviteId, TripId

from .store import InMemoryStore


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, invite_id: InviteId) -> Optional[TripInvite]:
        return self.store.invites.get(invite_id)

    async def list_by_trip(self, trip_id: TripId) -> list[TripInvite]:
        return [i for i in self.store.invites.values() if i.trip_id == trip_id]

    async def save(self, invite: TripInvite) -> TripInvite:
        """Save an invite.

        Raises:
            IntegrityError: If another invite has the same code hash
        """
        for other in self.store.invites.values():
            if other.code_hash == invite.code_hash and other.id != invite.id:
                raise IntegrityError("Duplicate invite code", None, Exception())
        self.store.invites[invite.id] = invite
        return invite

    async def redeem(self, code_hash: str, now: datetime) -> Optional[TripInvite]:
        # No await between check and write, so this step is atomic
        for invite in self.store.invites.values():
            if invite.code_hash == code_hash and invite.is_usable(now):
                uses = invite.uses + 1
                updated = invite.model_copy(
                    update={
                        "uses": uses,
                        "revoked_at": now if uses >= invite.max_uses else invite.revoked_at,
                    }
                )
                self.store.invites[invite.id] = updated
                return updated
        return None

    async def revoke(self, invite_id: InviteId, now: datetime) -> Optional[TripInvite]:
        invite = self.store.invites.get(invite_id)
        if invite is None:
            return None
        if invite.revoked_at is None:
            invite = invite.model_copy(update={"revoked_at": now})
            self.store.invites[invite_id] = invite
        return invite
