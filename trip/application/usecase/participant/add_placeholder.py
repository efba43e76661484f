"""Add placeholder use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.application.usecase.views import ParticipantView
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import ParticipantService
from trip.domain.value import TripId, UserId


class AddPlaceholderRequest(BaseModel):
    """Add placeholder request. A blank name falls back to the default label."""

    trip_id: UUID
    caller_id: UUID
    display_name: Optional[str] = None


class AddPlaceholderResponse(UseCaseResponse):
    participant: Optional[ParticipantView] = None


class AddPlaceholderUseCase(BaseUseCase[AddPlaceholderRequest, AddPlaceholderResponse]):
    """Use case for adding someone who has not joined yet."""

    name = "add_placeholder"
    response_type = AddPlaceholderResponse

    def __init__(
        self,
        participant_service: ParticipantService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.participant_service = participant_service

    async def _execute(self, request: AddPlaceholderRequest) -> AddPlaceholderResponse:
        async with self.unit_of_work.transaction():
            placeholder = await self.participant_service.add_placeholder(
                TripId(request.trip_id), request.display_name, UserId(request.caller_id)
            )
        return AddPlaceholderResponse(participant=ParticipantView.from_model(placeholder))
