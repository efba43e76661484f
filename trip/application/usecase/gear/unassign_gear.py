"""Unassign gear use case."""

from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import GearService
from trip.domain.value import GearItemId, ParticipantId, TripId, UserId


class UnassignGearRequest(BaseModel):
    trip_id: UUID
    caller_id: UUID
    gear_id: UUID
    participant_id: UUID


class UnassignGearResponse(UseCaseResponse):
    removed: bool = False


class UnassignGearUseCase(BaseUseCase[UnassignGearRequest, UnassignGearResponse]):
    name = "unassign_gear"
    response_type = UnassignGearResponse

    def __init__(
        self,
        gear_service: GearService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.gear_service = gear_service

    async def _execute(self, request: UnassignGearRequest) -> UnassignGearResponse:
        async with self.unit_of_work.transaction():
            removed = await self.gear_service.unassign(
                TripId(request.trip_id),
                GearItemId(request.gear_id),
                ParticipantId(request.participant_id),
                UserId(request.caller_id),
            )
        return UnassignGearResponse(removed=removed)
