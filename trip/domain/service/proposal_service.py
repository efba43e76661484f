"""Proposal domain service."""

from datetime import date
from typing import Optional
from uuid import uuid4

import logfire

from trip.domain.error import NotFoundError, ValidationError
from trip.domain.model import Proposal
from trip.domain.repository import ProposalRepository
from trip.domain.value import ProposalId, ProposalKind, TripId, UserId

from .access_service import TripAccessService
from .base import Service


class ProposalService(Service):
    """Domain service for date options, destinations, terms and transportations."""

    def __init__(
        self,
        proposal_repository: ProposalRepository,
        access_service: TripAccessService,
    ) -> None:
        self.proposal_repository = proposal_repository
        self.access_service = access_service

    async def get_in_trip(
        self, trip_id: TripId, proposal_id: ProposalId, kind: ProposalKind
    ) -> Proposal:
        """Get a proposal of the given kind that belongs to the trip.

        Raises:
            NotFoundError: If no such proposal exists in the trip
        """
        proposal = await self.proposal_repository.find_by_id(proposal_id)
        if proposal is None or proposal.trip_id != trip_id or proposal.kind != kind:
            raise NotFoundError(f"{kind.value.capitalize()} proposal", str(proposal_id))
        return proposal

    async def propose_date(
        self, trip_id: TripId, day: date, caller: UserId
    ) -> tuple[Proposal, bool]:
        """Find or create the trip's date option for a day.

        Returns:
            Tuple of (date option, whether it was created by this call)
        """
        with logfire.span("propose_date", trip_id=str(trip_id), day=day.isoformat()):
            await self.access_service.require_member(trip_id, caller, "propose dates")

            existing = await self.proposal_repository.find_date_option(trip_id, day)
            if existing is not None:
                return existing, False

            option = Proposal(
                id=ProposalId(uuid4()),
                trip_id=trip_id,
                kind=ProposalKind.DATE,
                starts_on=day,
                created_by=caller,
            )
            return await self.proposal_repository.add_date_option(option)

    async def propose(
        self,
        trip_id: TripId,
        kind: ProposalKind,
        caller: UserId,
        title: Optional[str] = None,
        starts_on: Optional[date] = None,
        ends_on: Optional[date] = None,
    ) -> Proposal:
        """Create a destination, term or transportation proposal.

        Date options go through ``propose_date`` so each day exists once.

        Raises:
            NotFoundError: If the trip does not exist
            ForbiddenError: If the caller is neither organizer nor member
            ValidationError: If fields required by the kind are missing or invalid
        """
        with logfire.span("propose", trip_id=str(trip_id), kind=kind.value):
            await self.access_service.require_member(
                trip_id, caller, f"propose {kind.value}s"
            )
            if kind == ProposalKind.DATE:
                if starts_on is None:
                    raise ValidationError("Date options require a date")
                proposal, _ = await self.propose_date(trip_id, starts_on, caller)
                return proposal

            proposal = self._validated(
                lambda: Proposal(
                    id=ProposalId(uuid4()),
                    trip_id=trip_id,
                    kind=kind,
                    title=title.strip() if title else None,
                    starts_on=starts_on,
                    ends_on=ends_on,
                    created_by=caller,
                )
            )
            saved = await self.proposal_repository.save(proposal)
            logfire.info("Proposal created", proposal_id=str(saved.id), kind=kind.value)
            return saved

    async def list_proposals(
        self, trip_id: TripId, kind: ProposalKind, caller: UserId
    ) -> list[Proposal]:
        await self.access_service.require_member(
            trip_id, caller, f"list {kind.value}s"
        )
        return await self.proposal_repository.list_by_trip(trip_id, kind)

    async def find_date_option(
        self, trip_id: TripId, day: date, caller: UserId
    ) -> Optional[Proposal]:
        """Find the trip's date option for a day without creating it."""
        await self.access_service.require_member(trip_id, caller, "list dates")
        return await self.proposal_repository.find_date_option(trip_id, day)
