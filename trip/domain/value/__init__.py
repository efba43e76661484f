"""Domain value objects for trip planning."""

from trip.domain.value.identifiers import (
    ClaimId,
    GearAssignmentId,
    GearItemId,
    InviteId,
    ParticipantId,
    ProposalId,
    TripId,
    UserId,
    VoteId,
)
from trip.domain.value.types import DisplayName, ErrorKind, ProposalKind, TripRole

__all__ = [
    # Identifiers
    "TripId",
    "UserId",
    "ParticipantId",
    "InviteId",
    "ClaimId",
    "ProposalId",
    "VoteId",
    "GearItemId",
    "GearAssignmentId",
    # Types
    "DisplayName",
    "ErrorKind",
    "ProposalKind",
    "TripRole",
]
