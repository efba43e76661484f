"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from trip.config import Settings
from trip.domain.repository import (
    GearRepository,
    InviteRepository,
    ParticipantRepository,
    PlaceholderClaimRepository,
    ProposalRepository,
    TripRepository,
    UnitOfWork,
    UserRepository,
    VoteRepository,
)
from trip.persistence.database import create_engine, create_session_factory
from trip.persistence.repository import (
    PostgresGearRepository,
    PostgresInviteRepository,
    PostgresParticipantRepository,
    PostgresPlaceholderClaimRepository,
    PostgresProposalRepository,
    PostgresTripRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
    SqlAlchemyUnitOfWork,
)
from trip.util.di.base import ProviderBase
from trip.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Commits happen through the unit of work. Anything still pending when
        the request scope closes was never committed and is discarded.
        """
        async with session_factory() as session:
            yield session
            if session.in_transaction():
                logfire.warn("Discarding uncommitted session work")
                await session.rollback()

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide unit of work over the request session."""
        return SqlAlchemyUnitOfWork(session)

    @provide(scope=Scope.REQUEST)
    def get_trip_repository(self, session: AsyncSession) -> TripRepository:
        """Provide Trip repository."""
        return PostgresTripRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_participant_repository(
        self, session: AsyncSession
    ) -> ParticipantRepository:
        """Provide Participant repository."""
        return PostgresParticipantRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invite_repository(self, session: AsyncSession) -> InviteRepository:
        """Provide Invite repository."""
        return PostgresInviteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_claim_repository(
        self, session: AsyncSession
    ) -> PlaceholderClaimRepository:
        """Provide PlaceholderClaim repository."""
        return PostgresPlaceholderClaimRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_proposal_repository(self, session: AsyncSession) -> ProposalRepository:
        """Provide Proposal repository."""
        return PostgresProposalRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_gear_repository(self, session: AsyncSession) -> GearRepository:
        """Provide Gear repository."""
        return PostgresGearRepository(session)
