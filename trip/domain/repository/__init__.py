"""Repository interfaces for the trip domain.

Interfaces live in the domain layer; PostgreSQL and in-memory
implementations live in the persistence layer.
"""

from trip.domain.repository.gear import GearRepository
from trip.domain.repository.invite import InviteRepository
from trip.domain.repository.participant import ParticipantRepository
from trip.domain.repository.placeholder_claim import PlaceholderClaimRepository
from trip.domain.repository.proposal import ProposalRepository
from trip.domain.repository.trip import TripRepository
from trip.domain.repository.unit_of_work import UnitOfWork
from trip.domain.repository.user import UserRepository
from trip.domain.repository.vote import VoteRepository

__all__ = [
    "GearRepository",
    "InviteRepository",
    "ParticipantRepository",
    "PlaceholderClaimRepository",
    "ProposalRepository",
    "TripRepository",
    "UnitOfWork",
    "UserRepository",
    "VoteRepository",
]
