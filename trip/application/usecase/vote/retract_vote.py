"""Retract vote use case."""

from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, model_validator

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import ProposalService, VoteService
from trip.domain.value import ParticipantId, ProposalId, ProposalKind, TripId, UserId


class RetractVoteRequest(BaseModel):
    """Retract request, addressed like ``CastVoteRequest``."""

    trip_id: UUID
    caller_id: UUID
    kind: ProposalKind
    option_id: Optional[UUID] = None
    day: Optional[date] = None
    participant_id: Optional[UUID] = None

    @model_validator(mode="after")
    def check_option(self) -> "RetractVoteRequest":
        if self.option_id is None and (self.kind != ProposalKind.DATE or self.day is None):
            raise ValueError("option_id is required unless retracting a date by day")
        return self


class RetractVoteResponse(UseCaseResponse):
    """Retract response. ``removed`` is False when there was no vote."""

    removed: bool = False


class RetractVoteUseCase(BaseUseCase[RetractVoteRequest, RetractVoteResponse]):
    """Use case for withdrawing a vote. Missing votes are not an error."""

    name = "retract_vote"
    response_type = RetractVoteResponse

    def __init__(
        self,
        vote_service: VoteService,
        proposal_service: ProposalService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.vote_service = vote_service
        self.proposal_service = proposal_service

    async def _execute(self, request: RetractVoteRequest) -> RetractVoteResponse:
        trip_id = TripId(request.trip_id)
        caller = UserId(request.caller_id)

        async with self.unit_of_work.transaction():
            if request.option_id is not None:
                option_id = ProposalId(request.option_id)
            else:
                option = await self.proposal_service.find_date_option(
                    trip_id, request.day, caller  # type: ignore[arg-type]
                )
                if option is None:
                    # Nobody proposed that day, so nobody voted for it
                    return RetractVoteResponse(removed=False)
                option_id = option.id

            if request.participant_id is None:
                removed = await self.vote_service.retract_self(
                    trip_id, request.kind, option_id, caller
                )
            else:
                removed = await self.vote_service.retract_proxy(
                    trip_id,
                    request.kind,
                    option_id,
                    ParticipantId(request.participant_id),
                    caller,
                )

        return RetractVoteResponse(removed=removed)
