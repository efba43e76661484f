"""Vote ledger domain service.

Casting is insert-or-no-op and retracting is delete-or-no-op: repeated
toggles caused by client retries are never reported as failures.
"""

from uuid import uuid4

import logfire
from pydantic import Field

from trip.domain.error import ForbiddenError, ValidationError
from trip.domain.model import Participant, Proposal, Vote
from trip.domain.repository import VoteRepository
from trip.domain.value import (
    ParticipantId,
    ProposalId,
    ProposalKind,
    TripId,
    UserId,
    VoteId,
)
from trip.domain.value.common import ValueObject

from .access_service import TripAccessService
from .base import Service
from .participant_service import ParticipantService
from .proposal_service import ProposalService


class VoteTally(ValueObject):
    """Vote counts for one proposal kind in a trip."""

    kind: ProposalKind
    counts: dict[ProposalId, int] = Field(default_factory=dict)
    voted_by_caller: frozenset[ProposalId] = frozenset()


class VoteService(Service):
    """Domain service for date, destination and term votes."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        proposal_service: ProposalService,
        participant_service: ParticipantService,
        access_service: TripAccessService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            proposal_service: Proposal domain service
            participant_service: Participant domain service
            access_service: Trip access service
        """
        self.vote_repository = vote_repository
        self.proposal_service = proposal_service
        self.participant_service = participant_service
        self.access_service = access_service

    async def cast_self(
        self, trip_id: TripId, kind: ProposalKind, option_id: ProposalId, caller: UserId
    ) -> bool:
        """Vote for an option as the caller's own participant.

        Returns:
            True if a vote was recorded, False if it already existed

        Raises:
            NotFoundError: If the trip or option does not exist
            ForbiddenError: If the caller has no participant in the trip
            ValidationError: If the kind cannot be voted on
        """
        with logfire.span(
            "cast_vote", trip_id=str(trip_id), kind=kind.value, option_id=str(option_id)
        ):
            voter = await self._own_participant(trip_id, caller, "vote")
            await self._votable_option(trip_id, kind, option_id)
            return await self._record(kind, option_id, voter.id)

    async def cast_proxy(
        self,
        trip_id: TripId,
        kind: ProposalKind,
        option_id: ProposalId,
        participant_id: ParticipantId,
        caller: UserId,
    ) -> bool:
        """Vote for an option on behalf of a placeholder.

        Raises:
            NotFoundError: If the trip, option or participant does not exist
            ForbiddenError: If the caller is neither organizer nor member
            ValidationError: If the target is not a placeholder
        """
        with logfire.span(
            "cast_proxy_vote",
            trip_id=str(trip_id),
            kind=kind.value,
            option_id=str(option_id),
            participant_id=str(participant_id),
        ):
            placeholder = await self._proxy_target(trip_id, participant_id, caller)
            await self._votable_option(trip_id, kind, option_id)
            return await self._record(kind, option_id, placeholder.id)

    async def retract_self(
        self, trip_id: TripId, kind: ProposalKind, option_id: ProposalId, caller: UserId
    ) -> bool:
        """Remove the caller's vote. Returns False if there was none."""
        with logfire.span(
            "retract_vote", trip_id=str(trip_id), kind=kind.value, option_id=str(option_id)
        ):
            voter = await self._own_participant(trip_id, caller, "retract votes")
            await self._votable_option(trip_id, kind, option_id)
            return await self.vote_repository.delete(kind, option_id, voter.id)

    async def retract_proxy(
        self,
        trip_id: TripId,
        kind: ProposalKind,
        option_id: ProposalId,
        participant_id: ParticipantId,
        caller: UserId,
    ) -> bool:
        """Remove a placeholder's vote. Returns False if there was none."""
        with logfire.span(
            "retract_proxy_vote",
            trip_id=str(trip_id),
            option_id=str(option_id),
            participant_id=str(participant_id),
        ):
            placeholder = await self._proxy_target(trip_id, participant_id, caller)
            await self._votable_option(trip_id, kind, option_id)
            return await self.vote_repository.delete(kind, option_id, placeholder.id)

    async def tally(
        self, trip_id: TripId, kind: ProposalKind, caller: UserId
    ) -> VoteTally:
        """Count votes per option of one kind, marking the caller's own votes."""
        self._require_votable(kind)
        options = await self.proposal_service.list_proposals(trip_id, kind, caller)
        votes = await self.vote_repository.find_by_options([o.id for o in options])
        own = await self.participant_service.find_own(trip_id, caller)

        counts: dict[ProposalId, int] = {option.id: 0 for option in options}
        for vote in votes:
            counts[vote.option_id] = counts.get(vote.option_id, 0) + 1
        mine = frozenset(
            vote.option_id
            for vote in votes
            if own is not None and vote.participant_id == own.id
        )
        return VoteTally(kind=kind, counts=counts, voted_by_caller=mine)

    async def _record(
        self, kind: ProposalKind, option_id: ProposalId, participant_id: ParticipantId
    ) -> bool:
        vote = Vote(
            id=VoteId(uuid4()),
            kind=kind,
            option_id=option_id,
            participant_id=participant_id,
        )
        created = await self.vote_repository.add_if_absent(vote)
        if created:
            logfire.info(
                "Vote recorded",
                kind=kind.value,
                option_id=str(option_id),
                participant_id=str(participant_id),
            )
        else:
            logfire.info("Duplicate vote ignored", participant_id=str(participant_id))
        return created

    async def _own_participant(
        self, trip_id: TripId, caller: UserId, action: str
    ) -> Participant:
        await self.access_service.get_trip(trip_id)
        participant = await self.participant_service.find_own(trip_id, caller)
        if participant is None:
            raise ForbiddenError(action, str(trip_id), str(caller))
        return participant

    async def _proxy_target(
        self, trip_id: TripId, participant_id: ParticipantId, caller: UserId
    ) -> Participant:
        await self.access_service.require_member(trip_id, caller, "vote by proxy")
        target = await self.participant_service.get_in_trip(trip_id, participant_id)
        if not target.is_placeholder:
            logfire.warn(
                "Proxy vote for non-placeholder refused", participant_id=str(participant_id)
            )
            raise ValidationError("Proxy votes can only be cast for placeholders")
        return target

    async def _votable_option(
        self, trip_id: TripId, kind: ProposalKind, option_id: ProposalId
    ) -> Proposal:
        self._require_votable(kind)
        return await self.proposal_service.get_in_trip(trip_id, option_id, kind)

    @staticmethod
    def _require_votable(kind: ProposalKind) -> None:
        if not kind.votable:
            raise ValidationError(f"{kind.value.capitalize()} proposals cannot be voted on")
