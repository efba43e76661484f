"""Read models returned by use cases."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from trip.domain.model import GearAssignment, GearItem, Participant, Proposal
from trip.domain.value import ProposalKind


class ParticipantView(BaseModel):
    """A trip participant as seen by callers."""

    participant_id: str
    display_name: str
    is_placeholder: bool
    user_id: Optional[str] = None
    claimed_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, participant: Participant) -> "ParticipantView":
        return cls(
            participant_id=str(participant.id),
            display_name=participant.display_name,
            is_placeholder=participant.is_placeholder,
            user_id=str(participant.user_id) if participant.user_id else None,
            claimed_at=participant.claimed_at,
        )


class ProposalView(BaseModel):
    """A date option, destination, term or transportation."""

    proposal_id: str
    kind: ProposalKind
    title: Optional[str] = None
    starts_on: Optional[date] = None
    ends_on: Optional[date] = None
    is_chosen: bool = False

    @classmethod
    def from_model(cls, proposal: Proposal) -> "ProposalView":
        return cls(
            proposal_id=str(proposal.id),
            kind=proposal.kind,
            title=proposal.title,
            starts_on=proposal.starts_on,
            ends_on=proposal.ends_on,
            is_chosen=proposal.is_chosen,
        )


class GearItemView(BaseModel):
    gear_id: str
    name: str

    @classmethod
    def from_model(cls, item: GearItem) -> "GearItemView":
        return cls(gear_id=str(item.id), name=item.name)


class GearAssignmentView(BaseModel):
    gear_id: str
    participant_id: str
    quantity: int

    @classmethod
    def from_model(cls, assignment: GearAssignment) -> "GearAssignmentView":
        return cls(
            gear_id=str(assignment.gear_id),
            participant_id=str(assignment.participant_id),
            quantity=assignment.quantity,
        )
