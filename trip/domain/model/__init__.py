"""Domain model entities for trip planning."""

from trip.domain.model.gear import GearAssignment, GearItem
from trip.domain.model.invite import TripInvite
from trip.domain.model.participant import Participant
from trip.domain.model.placeholder_claim import PlaceholderClaim
from trip.domain.model.proposal import Proposal
from trip.domain.model.trip import Trip
from trip.domain.model.user import User
from trip.domain.model.vote import Vote

__all__ = [
    "Trip",
    "User",
    "Participant",
    "TripInvite",
    "PlaceholderClaim",
    "Proposal",
    "Vote",
    "GearItem",
    "GearAssignment",
]
