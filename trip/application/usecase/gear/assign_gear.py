"""Assign gear use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.application.usecase.views import GearAssignmentView
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import GearService
from trip.domain.value import GearItemId, ParticipantId, TripId, UserId


class AssignGearRequest(BaseModel):
    """Assign request. Assigning again updates the quantity."""

    trip_id: UUID
    caller_id: UUID
    gear_id: UUID
    participant_id: UUID
    quantity: int = 1


class AssignGearResponse(UseCaseResponse):
    assignment: Optional[GearAssignmentView] = None


class AssignGearUseCase(BaseUseCase[AssignGearRequest, AssignGearResponse]):
    """Use case for recording who brings a gear item."""

    name = "assign_gear"
    response_type = AssignGearResponse

    def __init__(
        self,
        gear_service: GearService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.gear_service = gear_service

    async def _execute(self, request: AssignGearRequest) -> AssignGearResponse:
        async with self.unit_of_work.transaction():
            assignment = await self.gear_service.assign(
                TripId(request.trip_id),
                GearItemId(request.gear_id),
                ParticipantId(request.participant_id),
                request.quantity,
                UserId(request.caller_id),
            )
        return AssignGearResponse(assignment=GearAssignmentView.from_model(assignment))
