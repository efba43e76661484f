"""Create trip use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import TripService
from trip.domain.value import UserId


class CreateTripRequest(BaseModel):
    """Create trip request."""

    name: str
    organizer_id: UUID


class CreateTripResponse(UseCaseResponse):
    """Create trip response."""

    trip_id: Optional[str] = None
    organizer_participant_id: Optional[str] = None


class CreateTripUseCase(BaseUseCase[CreateTripRequest, CreateTripResponse]):
    """Use case for creating a trip with its organizer as first participant."""

    name = "create_trip"
    response_type = CreateTripResponse

    def __init__(
        self,
        trip_service: TripService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.trip_service = trip_service

    async def _execute(self, request: CreateTripRequest) -> CreateTripResponse:
        async with self.unit_of_work.transaction():
            trip, participant = await self.trip_service.create_trip(
                request.name, UserId(request.organizer_id)
            )
        return CreateTripResponse(
            trip_id=str(trip.id), organizer_participant_id=str(participant.id)
        )
