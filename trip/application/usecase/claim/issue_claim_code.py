"""Issue claim code use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.config import CodeSettings, EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import ClaimService
from trip.domain.value import ParticipantId, TripId, UserId


class IssueClaimCodeRequest(BaseModel):
    trip_id: UUID
    caller_id: UUID
    participant_id: UUID
    ttl_minutes: Optional[int] = None


class IssueClaimCodeResponse(UseCaseResponse):
    """The plaintext code appears here once and is not stored anywhere."""

    claim_id: Optional[str] = None
    code: Optional[str] = None
    claim_url: Optional[str] = None
    expires_at: Optional[datetime] = None


class IssueClaimCodeUseCase(BaseUseCase[IssueClaimCodeRequest, IssueClaimCodeResponse]):
    """Use case for the organizer issuing a one-time code for a placeholder."""

    name = "issue_claim_code"
    response_type = IssueClaimCodeResponse

    def __init__(
        self,
        claim_service: ClaimService,
        code_settings: CodeSettings,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.claim_service = claim_service
        self.code_settings = code_settings

    async def _execute(self, request: IssueClaimCodeRequest) -> IssueClaimCodeResponse:
        async with self.unit_of_work.transaction():
            claim, code = await self.claim_service.issue_claim(
                TripId(request.trip_id),
                ParticipantId(request.participant_id),
                UserId(request.caller_id),
                ttl_minutes=request.ttl_minutes,
            )
        return IssueClaimCodeResponse(
            claim_id=str(claim.id),
            code=code,
            claim_url=f"{self.code_settings.claim_url_prefix}{code}",
            expires_at=claim.expires_at,
        )
