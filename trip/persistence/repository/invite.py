"""PostgreSQL implementation of Invite repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import case, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from trip.domain.model import TripInvite
from trip.domain.repository import InviteRepository
from trip.domain.value import InviteId, TripId
from trip.persistence.mappers import invite_to_dict, row_to_invite
from trip.persistence.tables import trip_invites_table


class PostgresInviteRepository(InviteRepository):
    """PostgreSQL implementation of InviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, invite_id: InviteId) -> Optional[TripInvite]:
        stmt = select(trip_invites_table).where(trip_invites_table.c.id == invite_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_invite(row._asdict()) if row else None

    async def list_by_trip(self, trip_id: TripId) -> list[TripInvite]:
        stmt = select(trip_invites_table).where(trip_invites_table.c.trip_id == trip_id)
        result = await self.session.execute(stmt)
        return [row_to_invite(row._asdict()) for row in result.fetchall()]

    async def save(self, invite: TripInvite) -> TripInvite:
        invite_dict = invite_to_dict(invite)
        if await self.find_by_id(invite.id):
            stmt = (
                update(trip_invites_table)
                .where(trip_invites_table.c.id == invite.id)
                .values(**invite_dict)
            )
        else:
            stmt = insert(trip_invites_table).values(**invite_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return invite

    async def redeem(self, code_hash: str, now: datetime) -> Optional[TripInvite]:
        """Conditional increment; a concurrent loser re-checks the WHERE and matches nothing."""
        t = trip_invites_table
        stmt = (
            update(t)
            .where(
                t.c.code_hash == code_hash,
                t.c.revoked_at.is_(None),
                t.c.expires_at > now,
                t.c.uses < t.c.max_uses,
            )
            .values(
                uses=t.c.uses + 1,
                revoked_at=case((t.c.uses + 1 >= t.c.max_uses, now), else_=t.c.revoked_at),
            )
            .returning(t)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_invite(row._asdict()) if row else None

    async def revoke(self, invite_id: InviteId, now: datetime) -> Optional[TripInvite]:
        t = trip_invites_table
        stmt = (
            update(t)
            .where(t.c.id == invite_id, t.c.revoked_at.is_(None))
            .values(revoked_at=now)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(invite_id)
