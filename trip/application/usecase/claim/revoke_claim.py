"""Revoke claim use case."""

from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import ClaimService
from trip.domain.value import ClaimId, TripId, UserId


class RevokeClaimRequest(BaseModel):
    trip_id: UUID
    caller_id: UUID
    claim_id: UUID


class RevokeClaimResponse(UseCaseResponse):
    pass


class RevokeClaimUseCase(BaseUseCase[RevokeClaimRequest, RevokeClaimResponse]):
    """Use case for withdrawing an unused claim code."""

    name = "revoke_claim"
    response_type = RevokeClaimResponse

    def __init__(
        self,
        claim_service: ClaimService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.claim_service = claim_service

    async def _execute(self, request: RevokeClaimRequest) -> RevokeClaimResponse:
        async with self.unit_of_work.transaction():
            await self.claim_service.revoke(
                TripId(request.trip_id),
                ClaimId(request.claim_id),
                UserId(request.caller_id),
            )
        return RevokeClaimResponse()
