"""Join trip use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.application.usecase.views import ParticipantView
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import InviteService
from trip.domain.value import UserId


class JoinTripRequest(BaseModel):
    """Join request. The code may be typed with any casing, spaces or hyphens."""

    code: str
    caller_id: UUID


class JoinTripResponse(UseCaseResponse):
    """Join response. Already being a member is reported the same as joining."""

    trip_id: Optional[str] = None
    participant: Optional[ParticipantView] = None


class JoinTripUseCase(BaseUseCase[JoinTripRequest, JoinTripResponse]):
    """Use case for redeeming an invite code."""

    name = "join_trip"
    response_type = JoinTripResponse

    def __init__(
        self,
        invite_service: InviteService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.invite_service = invite_service

    async def _execute(self, request: JoinTripRequest) -> JoinTripResponse:
        async with self.unit_of_work.transaction():
            participant, invite = await self.invite_service.redeem(
                request.code, UserId(request.caller_id)
            )
        return JoinTripResponse(
            trip_id=str(invite.trip_id),
            participant=ParticipantView.from_model(participant),
        )
