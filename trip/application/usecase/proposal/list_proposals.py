"""List proposals use case."""

from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.application.usecase.views import ProposalView
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import ProposalService
from trip.domain.value import ProposalKind, TripId, UserId


class ListProposalsRequest(BaseModel):
    trip_id: UUID
    caller_id: UUID
    kind: ProposalKind


class ListProposalsResponse(UseCaseResponse):
    proposals: list[ProposalView] = []


class ListProposalsUseCase(BaseUseCase[ListProposalsRequest, ListProposalsResponse]):
    name = "list_proposals"
    response_type = ListProposalsResponse

    def __init__(
        self,
        proposal_service: ProposalService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.proposal_service = proposal_service

    async def _execute(self, request: ListProposalsRequest) -> ListProposalsResponse:
        async with self.unit_of_work.transaction():
            proposals = await self.proposal_service.list_proposals(
                TripId(request.trip_id), request.kind, UserId(request.caller_id)
            )
        return ListProposalsResponse(
            proposals=[ProposalView.from_model(p) for p in proposals]
        )
