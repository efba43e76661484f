"""Claim by selection use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.application.usecase.views import ParticipantView
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import ClaimService
from trip.domain.value import ParticipantId, TripId, UserId


class ClaimBySelectionRequest(BaseModel):
    trip_id: UUID
    caller_id: UUID
    participant_id: UUID
    display_name: Optional[str] = None


class ClaimBySelectionResponse(UseCaseResponse):
    participant: Optional[ParticipantView] = None


class ClaimBySelectionUseCase(
    BaseUseCase[ClaimBySelectionRequest, ClaimBySelectionResponse]
):
    """Use case for picking "that's me" from the placeholder list."""

    name = "claim_by_selection"
    response_type = ClaimBySelectionResponse

    def __init__(
        self,
        claim_service: ClaimService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.claim_service = claim_service

    async def _execute(
        self, request: ClaimBySelectionRequest
    ) -> ClaimBySelectionResponse:
        async with self.unit_of_work.transaction():
            participant = await self.claim_service.claim_by_selection(
                TripId(request.trip_id),
                ParticipantId(request.participant_id),
                UserId(request.caller_id),
                request.display_name,
            )
        return ClaimBySelectionResponse(participant=ParticipantView.from_model(participant))
