"""Propose use case."""

from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.application.usecase.views import ProposalView
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import ProposalService
from trip.domain.value import ProposalKind, TripId, UserId


class ProposeRequest(BaseModel):
    """Proposal request.

    Dates need ``starts_on``, terms need ``starts_on`` and ``ends_on``,
    destinations and transportations need ``title``.
    """

    trip_id: UUID
    caller_id: UUID
    kind: ProposalKind
    title: Optional[str] = None
    starts_on: Optional[date] = None
    ends_on: Optional[date] = None


class ProposeResponse(UseCaseResponse):
    proposal: Optional[ProposalView] = None


class ProposeUseCase(BaseUseCase[ProposeRequest, ProposeResponse]):
    """Use case for any member putting an option up for the trip."""

    name = "propose"
    response_type = ProposeResponse

    def __init__(
        self,
        proposal_service: ProposalService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.proposal_service = proposal_service

    async def _execute(self, request: ProposeRequest) -> ProposeResponse:
        async with self.unit_of_work.transaction():
            proposal = await self.proposal_service.propose(
                TripId(request.trip_id),
                request.kind,
                UserId(request.caller_id),
                title=request.title,
                starts_on=request.starts_on,
                ends_on=request.ends_on,
            )
        return ProposeResponse(proposal=ProposalView.from_model(proposal))
