"""List invites use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.config import EngineSettings
from trip.domain.model.common import utcnow
from trip.domain.repository import UnitOfWork
from trip.domain.service import InviteService
from trip.domain.value import TripId, UserId


class ListInvitesRequest(BaseModel):
    trip_id: UUID
    caller_id: UUID


class InviteItem(BaseModel):
    """Invite summary. Codes are not recoverable, so none is included."""

    invite_id: str
    uses: int
    max_uses: int
    expires_at: datetime
    revoked_at: Optional[datetime] = None
    usable: bool


class ListInvitesResponse(UseCaseResponse):
    invites: list[InviteItem] = []


class ListInvitesUseCase(BaseUseCase[ListInvitesRequest, ListInvitesResponse]):
    """Use case for the organizer reviewing a trip's invites."""

    name = "list_invites"
    response_type = ListInvitesResponse

    def __init__(
        self,
        invite_service: InviteService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.invite_service = invite_service

    async def _execute(self, request: ListInvitesRequest) -> ListInvitesResponse:
        async with self.unit_of_work.transaction():
            invites = await self.invite_service.list_invites(
                TripId(request.trip_id), UserId(request.caller_id)
            )
        now = utcnow()
        return ListInvitesResponse(
            invites=[
                InviteItem(
                    invite_id=str(invite.id),
                    uses=invite.uses,
                    max_uses=invite.max_uses,
                    expires_at=invite.expires_at,
                    revoked_at=invite.revoked_at,
                    usable=invite.is_usable(now),
                )
                for invite in invites
            ]
        )
