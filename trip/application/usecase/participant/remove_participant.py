"""Remove participant use case."""

from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import ParticipantService
from trip.domain.value import ParticipantId, TripId, UserId


class RemoveParticipantRequest(BaseModel):
    trip_id: UUID
    caller_id: UUID
    participant_id: UUID


class RemoveParticipantResponse(UseCaseResponse):
    removed: bool = False


class RemoveParticipantUseCase(
    BaseUseCase[RemoveParticipantRequest, RemoveParticipantResponse]
):
    """Use case for the organizer removing a participant."""

    name = "remove_participant"
    response_type = RemoveParticipantResponse

    def __init__(
        self,
        participant_service: ParticipantService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.participant_service = participant_service

    async def _execute(
        self, request: RemoveParticipantRequest
    ) -> RemoveParticipantResponse:
        async with self.unit_of_work.transaction():
            removed = await self.participant_service.remove(
                TripId(request.trip_id),
                ParticipantId(request.participant_id),
                UserId(request.caller_id),
            )
        return RemoveParticipantResponse(removed=removed)
