"""Choose proposal use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.application.usecase.views import ProposalView
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import SelectionService
from trip.domain.value import ProposalId, ProposalKind, TripId, UserId


class ChooseProposalRequest(BaseModel):
    trip_id: UUID
    caller_id: UUID
    kind: ProposalKind
    proposal_id: UUID


class ChooseProposalResponse(UseCaseResponse):
    proposal: Optional[ProposalView] = None


class ChooseProposalUseCase(BaseUseCase[ChooseProposalRequest, ChooseProposalResponse]):
    """Use case for the organizer settling a destination, term or transportation."""

    name = "choose_proposal"
    response_type = ChooseProposalResponse

    def __init__(
        self,
        selection_service: SelectionService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.selection_service = selection_service

    async def _execute(self, request: ChooseProposalRequest) -> ChooseProposalResponse:
        async with self.unit_of_work.transaction():
            proposal = await self.selection_service.choose(
                TripId(request.trip_id),
                request.kind,
                ProposalId(request.proposal_id),
                UserId(request.caller_id),
            )
        return ChooseProposalResponse(proposal=ProposalView.from_model(proposal))
