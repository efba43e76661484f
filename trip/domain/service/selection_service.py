"""Exclusive selection domain service."""

import logfire

from trip.domain.error import ValidationError
from trip.domain.model import Proposal
from trip.domain.repository import ProposalRepository
from trip.domain.value import ProposalId, ProposalKind, TripId, UserId

from .access_service import TripAccessService
from .base import Service
from .proposal_service import ProposalService


class SelectionService(Service):
    """Chooses one proposal of a kind and unchooses its siblings."""

    def __init__(
        self,
        proposal_repository: ProposalRepository,
        proposal_service: ProposalService,
        access_service: TripAccessService,
    ) -> None:
        self.proposal_repository = proposal_repository
        self.proposal_service = proposal_service
        self.access_service = access_service

    async def choose(
        self, trip_id: TripId, kind: ProposalKind, proposal_id: ProposalId, caller: UserId
    ) -> Proposal:
        """Mark a proposal as the trip's choice for its kind.

        All siblings of the same kind are unchosen by the same write, so the
        trip never has zero or two chosen proposals once one was picked.

        Raises:
            NotFoundError: If the trip or proposal does not exist
            ForbiddenError: If the caller is not the organizer
            ValidationError: If the kind is not chosen exclusively
        """
        with logfire.span(
            "choose_proposal",
            trip_id=str(trip_id),
            kind=kind.value,
            proposal_id=str(proposal_id),
        ):
            if not kind.exclusive:
                raise ValidationError(f"{kind.value.capitalize()} proposals cannot be chosen")

            await self.access_service.require_organizer(
                trip_id, caller, f"choose a {kind.value}"
            )
            proposal = await self.proposal_service.get_in_trip(trip_id, proposal_id, kind)

            updated = await self.proposal_repository.set_chosen(trip_id, kind, proposal_id)
            logfire.info(
                "Proposal chosen",
                trip_id=str(trip_id),
                kind=kind.value,
                proposal_id=str(proposal_id),
                updated=updated,
            )
            return proposal.model_copy(update={"is_chosen": True})
