"""List participants use case."""

from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.application.usecase.views import ParticipantView
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import ParticipantService
from trip.domain.value import TripId, UserId


class ListParticipantsRequest(BaseModel):
    trip_id: UUID
    caller_id: UUID


class ListParticipantsResponse(UseCaseResponse):
    participants: list[ParticipantView] = []


class ListParticipantsUseCase(
    BaseUseCase[ListParticipantsRequest, ListParticipantsResponse]
):
    """Use case for listing a trip's participants."""

    name = "list_participants"
    response_type = ListParticipantsResponse

    def __init__(
        self,
        participant_service: ParticipantService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.participant_service = participant_service

    async def _execute(
        self, request: ListParticipantsRequest
    ) -> ListParticipantsResponse:
        async with self.unit_of_work.transaction():
            participants = await self.participant_service.list_participants(
                TripId(request.trip_id), UserId(request.caller_id)
            )
        return ListParticipantsResponse(
            participants=[ParticipantView.from_model(p) for p in participants]
        )
