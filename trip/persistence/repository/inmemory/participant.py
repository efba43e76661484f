"""In-memory participant repository for testing."""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError

from trip.domain.model import Participant
from trip.domain.model.common import utcnow
from trip.domain.repository import ParticipantRepository
from trip.domain.value import ParticipantId, TripId, UserId

from .store import InMemoryStore


class InMemoryParticipantRepository(ParticipantRepository):
    """In-memory implementation of ParticipantRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, participant_id: ParticipantId) -> Optional[Participant]:
        return self.store.participants.get(participant_id)

    async def find_by_trip_and_user(
        self, trip_id: TripId, user_id: UserId
    ) -> Optional[Participant]:
        for participant in self.store.participants.values():
            if participant.trip_id == trip_id and participant.user_id == user_id:
                return participant
        return None

    async def list_by_trip(self, trip_id: TripId) -> list[Participant]:
        participants = [
            p for p in self.store.participants.values() if p.trip_id == trip_id
        ]
        return sorted(participants, key=lambda p: (p.display_name, p.created_at))

    async def add_if_absent(self, participant: Participant) -> tuple[Participant, bool]:
        if participant.user_id is not None:
            existing = await self.find_by_trip_and_user(
                participant.trip_id, participant.user_id
            )
            if existing is not None:
                return existing, False
        self.store.participants[participant.id] = participant
        return participant, True

    async def lock_placeholder(
        self, participant_id: ParticipantId
    ) -> Optional[Participant]:
        # Transactions already run one at a time
        return await self.find_by_id(participant_id)

    async def claim_placeholder(
        self,
        participant_id: ParticipantId,
        user_id: UserId,
        display_name: str,
        claimed_at: datetime,
    ) -> Optional[Participant]:
        """Convert the placeholder only if it is still unclaimed.

        Raises:
            IntegrityError: If the user already has a participant in the trip
        """
        placeholder = self.store.participants.get(participant_id)
        if (
            placeholder is None
            or not placeholder.is_placeholder
            or placeholder.user_id is not None
        ):
            return None
        if await self.find_by_trip_and_user(placeholder.trip_id, user_id) is not None:
            raise IntegrityError("Duplicate trip participant", None, Exception())
        claimed = placeholder.claimed_by(user_id, display_name, claimed_at)
        self.store.participants[participant_id] = claimed
        return claimed

    async def save(self, participant: Participant) -> Participant:
        """Save a participant.

        Raises:
            IntegrityError: If another participant links the same user in the trip
        """
        if participant.user_id is not None:
            existing = await self.find_by_trip_and_user(
                participant.trip_id, participant.user_id
            )
            if existing is not None and existing.id != participant.id:
                raise IntegrityError("Duplicate trip participant", None, Exception())
        self.store.participants[participant.id] = participant
        return participant

    async def delete(self, participant_id: ParticipantId) -> bool:
        """Delete a participant and cascade to rows that reference it.

        Claim codes are kept: open ones are revoked and all of them lose
        their participant reference.
        """
        if self.store.participants.pop(participant_id, None) is None:
            return False
        for table in ("votes", "gear_assignments"):
            rows = getattr(self.store, table)
            for key in [k for k, row in rows.items() if row.participant_id == participant_id]:
                del rows[key]

        now = utcnow()
        for key, claim in list(self.store.claims.items()):
            if claim.participant_id != participant_id:
                continue
            changes: dict[str, Any] = {"participant_id": None}
            if claim.revoked_at is None:
                changes["revoked_at"] = now
            self.store.claims[key] = claim.model_copy(update=changes)
        return True
