"""PostgreSQL repository implementations."""

from trip.persistence.repository.gear import PostgresGearRepository
from trip.persistence.repository.invite import PostgresInviteRepository
from trip.persistence.repository.participant import PostgresParticipantRepository
from trip.persistence.repository.placeholder_claim import (
    PostgresPlaceholderClaimRepository,
)
from trip.persistence.repository.proposal import PostgresProposalRepository
from trip.persistence.repository.trip import PostgresTripRepository
from trip.persistence.repository.unit_of_work import SqlAlchemyUnitOfWork
from trip.persistence.repository.user import PostgresUserRepository
from trip.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresGearRepository",
    "PostgresInviteRepository",
    "PostgresParticipantRepository",
    "PostgresPlaceholderClaimRepository",
    "PostgresProposalRepository",
    "PostgresTripRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
    "SqlAlchemyUnitOfWork",
]
