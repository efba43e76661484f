"""Get trip use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import TripService
from trip.domain.value import TripId, TripRole, UserId


class GetTripRequest(BaseModel):
    trip_id: UUID
    caller_id: UUID


class GetTripResponse(UseCaseResponse):
    trip_id: Optional[str] = None
    name: Optional[str] = None
    organizer_id: Optional[str] = None
    role: Optional[TripRole] = None


class GetTripUseCase(BaseUseCase[GetTripRequest, GetTripResponse]):
    """Use case for reading a trip and the caller's role in it."""

    name = "get_trip"
    response_type = GetTripResponse

    def __init__(
        self,
        trip_service: TripService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.trip_service = trip_service

    async def _execute(self, request: GetTripRequest) -> GetTripResponse:
        async with self.unit_of_work.transaction():
            trip, role = await self.trip_service.get_trip(
                TripId(request.trip_id), UserId(request.caller_id)
            )
        return GetTripResponse(
            trip_id=str(trip.id),
            name=trip.name,
            organizer_id=str(trip.organizer_id),
            role=role,
        )
