"""Vote entity.

One vote per (option, participant). Votes reference the participant id, so
they follow a placeholder through a claim.
"""

from datetime import datetime

from pydantic import Field

from trip.domain.model.common import DomainModel, utcnow
from trip.domain.value import ParticipantId, ProposalId, ProposalKind, VoteId


class Vote(DomainModel):
    id: VoteId
    kind: ProposalKind
    option_id: ProposalId
    participant_id: ParticipantId
    created_at: datetime = Field(default_factory=utcnow)
