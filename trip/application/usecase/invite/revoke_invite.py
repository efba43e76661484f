"""Revoke invite use case."""

from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import InviteService
from trip.domain.value import InviteId, TripId, UserId


class RevokeInviteRequest(BaseModel):
    trip_id: UUID
    caller_id: UUID
    invite_id: UUID


class RevokeInviteResponse(UseCaseResponse):
    pass


class RevokeInviteUseCase(BaseUseCase[RevokeInviteRequest, RevokeInviteResponse]):
    """Use case for revoking an invite. Repeated revocations succeed."""

    name = "revoke_invite"
    response_type = RevokeInviteResponse

    def __init__(
        self,
        invite_service: InviteService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.invite_service = invite_service

    async def _execute(self, request: RevokeInviteRequest) -> RevokeInviteResponse:
        async with self.unit_of_work.transaction():
            await self.invite_service.revoke(
                TripId(request.trip_id),
                InviteId(request.invite_id),
                UserId(request.caller_id),
            )
        return RevokeInviteResponse()
