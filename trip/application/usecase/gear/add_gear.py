"""Add gear use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.application.usecase.views import GearItemView
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import GearService
from trip.domain.value import TripId, UserId


class AddGearRequest(BaseModel):
    trip_id: UUID
    caller_id: UUID
    name: str


class AddGearResponse(UseCaseResponse):
    item: Optional[GearItemView] = None


class AddGearUseCase(BaseUseCase[AddGearRequest, AddGearResponse]):
    name = "add_gear"
    response_type = AddGearResponse

    def __init__(
        self,
        gear_service: GearService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.gear_service = gear_service

    async def _execute(self, request: AddGearRequest) -> AddGearResponse:
        async with self.unit_of_work.transaction():
            item = await self.gear_service.add_item(
                TripId(request.trip_id), request.name, UserId(request.caller_id)
            )
        return AddGearResponse(item=GearItemView.from_model(item))
