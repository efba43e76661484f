"""PostgreSQL implementation of Participant repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from trip.domain.model import Participant
from trip.domain.repository import ParticipantRepository
from trip.domain.value import ParticipantId, TripId, UserId
from trip.persistence.mappers import participant_to_dict, row_to_participant
from trip.persistence.tables import participants_table, placeholder_claims_table


class PostgresParticipantRepository(ParticipantRepository):
    """PostgreSQL implementation of ParticipantRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, participant_id: ParticipantId) -> Optional[Participant]:
        stmt = select(participants_table).where(participants_table.c.id == participant_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_participant(row._asdict()) if row else None

    async def find_by_trip_and_user(
        self, trip_id: TripId, user_id: UserId
    ) -> Optional[Participant]:
        stmt = select(participants_table).where(
            participants_table.c.trip_id == trip_id,
            participants_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_participant(row._asdict()) if row else None

    async def list_by_trip(self, trip_id: TripId) -> list[Participant]:
        stmt = (
            select(participants_table)
            .where(participants_table.c.trip_id == trip_id)
            .order_by(participants_table.c.display_name, participants_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_participant(row._asdict()) for row in result.fetchall()]

    async def add_if_absent(self, participant: Participant) -> tuple[Participant, bool]:
        """Insert unless (trip, user) is taken; ON CONFLICT keeps the transaction usable."""
        stmt = (
            insert(participants_table)
            .values(**participant_to_dict(participant))
            .on_conflict_do_nothing(constraint="uq_participants_trip_user")
            .returning(participants_table)
        )
        while True:
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            if row is not None:
                return row_to_participant(row._asdict()), True

            existing = await self.find_by_trip_and_user(
                participant.trip_id, participant.user_id
            )
            if existing is not None:
                return existing, False
            # The conflicting row was deleted and committed, so the next insert lands

    async def lock_placeholder(
        self, participant_id: ParticipantId
    ) -> Optional[Participant]:
        stmt = (
            select(participants_table)
            .where(participants_table.c.id == participant_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_participant(row._asdict()) if row else None

    async def claim_placeholder(
        self,
        participant_id: ParticipantId,
        user_id: UserId,
        display_name: str,
        claimed_at: datetime,
    ) -> Optional[Participant]:
        """Convert the placeholder only if it is still unclaimed.

        Runs in a savepoint so a (trip, user) conflict rolls back this
        statement alone.
        """
        t = participants_table
        stmt = (
            update(t)
            .where(
                t.c.id == participant_id,
                t.c.is_placeholder.is_(True),
                t.c.user_id.is_(None),
            )
            .values(
                user_id=user_id,
                is_placeholder=False,
                display_name=display_name,
                claimed_at=claimed_at,
            )
            .returning(t)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_participant(row._asdict()) if row else None

    async def save(self, participant: Participant) -> Participant:
        participant_dict = participant_to_dict(participant)
        if await self.find_by_id(participant.id):
            stmt = (
                update(participants_table)
                .where(participants_table.c.id == participant.id)
                .values(**participant_dict)
            )
        else:
            stmt = insert(participants_table).values(**participant_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return participant

    async def delete(self, participant_id: ParticipantId) -> bool:
        """Delete a participant, revoking claim codes still open for it.

        The foreign key then clears the claims' participant reference.
        """
        claims = placeholder_claims_table
        await self.session.execute(
            update(claims)
            .where(
                claims.c.participant_id == participant_id,
                claims.c.revoked_at.is_(None),
            )
            .values(revoked_at=func.now())
        )
        stmt = delete(participants_table).where(participants_table.c.id == participant_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
