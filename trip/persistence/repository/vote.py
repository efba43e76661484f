"""PostgreSQL implementation of Vote repository."""

from typing import Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from trip.domain.model import Vote
from trip.domain.repository import VoteRepository
from trip.domain.value import ParticipantId, ProposalId, ProposalKind
from trip.persistence.mappers import row_to_vote, vote_to_dict
from trip.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add_if_absent(self, vote: Vote) -> bool:
        stmt = (
            insert(votes_table)
            .values(**vote_to_dict(vote))
            .on_conflict_do_nothing(constraint="uq_votes_option_participant")
            .returning(votes_table.c.id)
        )
        result = await self.session.execute(stmt)
        inserted = result.fetchone() is not None
        await self.session.flush()
        return inserted

    async def delete(
        self, kind: ProposalKind, option_id: ProposalId, participant_id: ParticipantId
    ) -> bool:
        stmt = delete(votes_table).where(
            votes_table.c.kind == kind.value,
            votes_table.c.option_id == option_id,
            votes_table.c.participant_id == participant_id,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_by_participant(self, participant_id: ParticipantId) -> list[Vote]:
        stmt = select(votes_table).where(votes_table.c.participant_id == participant_id)
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_options(self, option_ids: Sequence[ProposalId]) -> list[Vote]:
        if not option_ids:
            return []
        stmt = select(votes_table).where(votes_table.c.option_id.in_(option_ids))
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def reassign_participant(
        self, source: ParticipantId, target: ParticipantId
    ) -> int:
        """Drop the source's duplicates, then re-point the rest in one UPDATE."""
        target_options = select(votes_table.c.option_id).where(
            votes_table.c.participant_id == target
        )
        await self.session.execute(
            delete(votes_table).where(
                votes_table.c.participant_id == source,
                votes_table.c.option_id.in_(target_options),
            )
        )
        result = await self.session.execute(
            update(votes_table)
            .where(votes_table.c.participant_id == source)
            .values(participant_id=target)
        )
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
