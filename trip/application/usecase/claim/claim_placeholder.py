"""Claim placeholder use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.application.usecase.views import ParticipantView
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import ClaimService
from trip.domain.value import UserId


class ClaimPlaceholderRequest(BaseModel):
    """Claim request. ``display_name`` overrides the caller's profile name."""

    code: str
    caller_id: UUID
    display_name: Optional[str] = None


class ClaimPlaceholderResponse(UseCaseResponse):
    """Claim response. ``merged`` is True when the caller's old participant was folded in."""

    trip_id: Optional[str] = None
    participant: Optional[ParticipantView] = None
    merged: bool = False


class ClaimPlaceholderUseCase(
    BaseUseCase[ClaimPlaceholderRequest, ClaimPlaceholderResponse]
):
    """Use case for redeeming a one-time claim code.

    The code is revoked and committed first. The claim itself runs in a
    second transaction, so a failed claim rolls back completely while the
    code stays used.
    """

    name = "claim_placeholder"
    response_type = ClaimPlaceholderResponse

    def __init__(
        self,
        claim_service: ClaimService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.claim_service = claim_service

    async def _execute(self, request: ClaimPlaceholderRequest) -> ClaimPlaceholderResponse:
        caller = UserId(request.caller_id)

        async with self.unit_of_work.transaction():
            claim = await self.claim_service.consume(request.code)

        async with self.unit_of_work.transaction():
            participant, merged = await self.claim_service.claim(
                claim, caller, request.display_name
            )

        return ClaimPlaceholderResponse(
            trip_id=str(claim.trip_id),
            participant=ParticipantView.from_model(participant),
            merged=merged,
        )
