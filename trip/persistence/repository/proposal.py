"""PostgreSQL implementation of Proposal repository."""

from datetime import date
from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from trip.domain.model import Proposal
from trip.domain.repository import ProposalRepository
from trip.domain.value import ProposalId, ProposalKind, TripId
from trip.persistence.mappers import proposal_to_dict, row_to_proposal
from trip.persistence.tables import proposals_table, trips_table


class PostgresProposalRepository(ProposalRepository):
    """PostgreSQL implementation of ProposalRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, proposal_id: ProposalId) -> Optional[Proposal]:
        stmt = select(proposals_table).where(proposals_table.c.id == proposal_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_proposal(row._asdict()) if row else None

    async def find_date_option(self, trip_id: TripId, day: date) -> Optional[Proposal]:
        stmt = select(proposals_table).where(
            proposals_table.c.trip_id == trip_id,
            proposals_table.c.kind == ProposalKind.DATE.value,
            proposals_table.c.starts_on == day,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_proposal(row._asdict()) if row else None

    async def list_by_trip(self, trip_id: TripId, kind: ProposalKind) -> list[Proposal]:
        stmt = (
            select(proposals_table)
            .where(
                proposals_table.c.trip_id == trip_id,
                proposals_table.c.kind == kind.value,
            )
            .order_by(proposals_table.c.starts_on, proposals_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_proposal(row._asdict()) for row in result.fetchall()]

    async def save(self, proposal: Proposal) -> Proposal:
        proposal_dict = proposal_to_dict(proposal)
        if await self.find_by_id(proposal.id):
            stmt = (
                update(proposals_table)
                .where(proposals_table.c.id == proposal.id)
                .values(**proposal_dict)
            )
        else:
            stmt = insert(proposals_table).values(**proposal_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return proposal

    async def add_date_option(self, proposal: Proposal) -> tuple[Proposal, bool]:
        stmt = (
            pg_insert(proposals_table)
            .values(**proposal_to_dict(proposal))
            .on_conflict_do_nothing(
                index_elements=[proposals_table.c.trip_id, proposals_table.c.starts_on],
                index_where=proposals_table.c.kind == ProposalKind.DATE.value,
            )
            .returning(proposals_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        if row is not None:
            return row_to_proposal(row._asdict()), True

        existing = await self.find_date_option(proposal.trip_id, proposal.starts_on)
        if existing is None:
            raise RuntimeError("Date option conflict without a surviving row")
        return existing, False

    async def set_chosen(
        self, trip_id: TripId, kind: ProposalKind, proposal_id: ProposalId
    ) -> int:
        """Serialize choices per trip, then unset siblings before setting the target.

        The trip row lock makes a concurrent choose wait and then see this
        one's result. Siblings are cleared first because the partial unique
        index is checked row by row.
        """
        await self.session.execute(
            select(trips_table.c.id).where(trips_table.c.id == trip_id).with_for_update()
        )

        unset = await self.session.execute(
            update(proposals_table)
            .where(
                proposals_table.c.trip_id == trip_id,
                proposals_table.c.kind == kind.value,
                proposals_table.c.is_chosen.is_(True),
                proposals_table.c.id != proposal_id,
            )
            .values(is_chosen=False)
        )
        chosen = await self.session.execute(
            update(proposals_table)
            .where(
                proposals_table.c.id == proposal_id,
                proposals_table.c.trip_id == trip_id,
                proposals_table.c.kind == kind.value,
            )
            .values(is_chosen=True)
        )
        await self.session.flush()
        return unset.rowcount + chosen.rowcount  # type: ignore[attr-defined]
