"""Domain services."""

from .access_service import TripAccessService
from .base import Service
from .claim_service import ClaimService
from .gear_service import GearService
from .invite_service import InviteService
from .participant_migrator import (
    GearAssignmentMigrator,
    ParticipantMigrator,
    VoteMigrator,
)
from .participant_service import ParticipantService
from .proposal_service import ProposalService
from .selection_service import SelectionService
from .trip_service import TripService
from .vote_service import VoteService, VoteTally

__all__ = [
    "ClaimService",
    "GearAssignmentMigrator",
    "GearService",
    "InviteService",
    "ParticipantMigrator",
    "ParticipantService",
    "ProposalService",
    "SelectionService",
    "Service",
    "TripAccessService",
    "TripService",
    "VoteMigrator",
    "VoteService",
    "VoteTally",
]
