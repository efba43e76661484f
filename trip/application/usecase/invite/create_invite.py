"""Create invite use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.config import CodeSettings, EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import InviteService
from trip.domain.value import TripId, UserId


class CreateInviteRequest(BaseModel):
    """Create invite request. Omitted limits use the configured defaults."""

    trip_id: UUID
    caller_id: UUID
    ttl_minutes: Optional[int] = None
    max_uses: Optional[int] = None


class CreateInviteResponse(UseCaseResponse):
    """The plaintext code appears here once and is not stored anywhere."""

    invite_id: Optional[str] = None
    code: Optional[str] = None
    invite_url: Optional[str] = None
    expires_at: Optional[datetime] = None
    max_uses: Optional[int] = None


class CreateInviteUseCase(BaseUseCase[CreateInviteRequest, CreateInviteResponse]):
    """Use case for the organizer issuing a multi-use join code."""

    name = "create_invite"
    response_type = CreateInviteResponse

    def __init__(
        self,
        invite_service: InviteService,
        code_settings: CodeSettings,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.invite_service = invite_service
        self.code_settings = code_settings

    async def _execute(self, request: CreateInviteRequest) -> CreateInviteResponse:
        async with self.unit_of_work.transaction():
            invite, code = await self.invite_service.create_invite(
                TripId(request.trip_id),
                UserId(request.caller_id),
                ttl_minutes=request.ttl_minutes,
                max_uses=request.max_uses,
            )
        return CreateInviteResponse(
            invite_id=str(invite.id),
            code=code,
            invite_url=f"{self.code_settings.invite_url_prefix}{code}",
            expires_at=invite.expires_at,
            max_uses=invite.max_uses,
        )
