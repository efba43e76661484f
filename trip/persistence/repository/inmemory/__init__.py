"""In-memory repository implementations for testing."""

from .gear import InMemoryGearRepository
from .invite import InMemoryInviteRepository
from .participant import InMemoryParticipantRepository
from .placeholder_claim import InMemoryPlaceholderClaimRepository
from .proposal import InMemoryProposalRepository
from .store import InMemoryStore
from .trip import InMemoryTripRepository, InMemoryUserRepository
from .unit_of_work import InMemoryUnitOfWork
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryGearRepository",
    "InMemoryInviteRepository",
    "InMemoryParticipantRepository",
    "InMemoryPlaceholderClaimRepository",
    "InMemoryProposalRepository",
    "InMemoryStore",
    "InMemoryTripRepository",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
