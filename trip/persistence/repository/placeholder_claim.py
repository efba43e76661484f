"""PostgreSQL implementation of PlaceholderClaim repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from trip.domain.model import PlaceholderClaim
from trip.domain.repository import PlaceholderClaimRepository
from trip.domain.value import ClaimId
from trip.persistence.mappers import claim_to_dict, row_to_claim
from trip.persistence.tables import placeholder_claims_table


class PostgresPlaceholderClaimRepository(PlaceholderClaimRepository):
    """PostgreSQL implementation of PlaceholderClaimRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, claim_id: ClaimId) -> Optional[PlaceholderClaim]:
        stmt = select(placeholder_claims_table).where(
            placeholder_claims_table.c.id == claim_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_claim(row._asdict()) if row else None

    async def save(self, claim: PlaceholderClaim) -> PlaceholderClaim:
        claim_dict = claim_to_dict(claim)
        if await self.find_by_id(claim.id):
            stmt = (
                update(placeholder_claims_table)
                .where(placeholder_claims_table.c.id == claim.id)
                .values(**claim_dict)
            )
        else:
            stmt = insert(placeholder_claims_table).values(**claim_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return claim

    async def consume(self, code_hash: str, now: datetime) -> Optional[PlaceholderClaim]:
        t = placeholder_claims_table
        stmt = (
            update(t)
            .where(
                t.c.code_hash == code_hash,
                t.c.revoked_at.is_(None),
                t.c.expires_at > now,
            )
            .values(revoked_at=now)
            .returning(t)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_claim(row._asdict()) if row else None

    async def revoke(self, claim_id: ClaimId, now: datetime) -> Optional[PlaceholderClaim]:
        t = placeholder_claims_table
        stmt = update(t).where(t.c.id == claim_id, t.c.revoked_at.is_(None)).values(
            revoked_at=now
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(claim_id)
