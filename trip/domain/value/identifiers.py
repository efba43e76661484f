"""Strongly typed identifiers for trip entities.

NewType keeps a participant id from being passed where a user id is
expected; the two are deliberately distinct.
"""

from typing import NewType
from uuid import UUID

TripId = NewType("TripId", UUID)
UserId = NewType("UserId", UUID)
ParticipantId = NewType("ParticipantId", UUID)
InviteId = NewType("InviteId", UUID)
ClaimId = NewType("ClaimId", UUID)
ProposalId = NewType("ProposalId", UUID)
VoteId = NewType("VoteId", UUID)
GearItemId = NewType("GearItemId", UUID)
GearAssignmentId = NewType("GearAssignmentId", UUID)
