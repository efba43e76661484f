"""Cast vote use case."""

from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, model_validator

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import ProposalService, VoteService
from trip.domain.value import ParticipantId, ProposalId, ProposalKind, TripId, UserId


class CastVoteRequest(BaseModel):
    """Vote request.

    The option is named by ``option_id``, or for dates by ``day``, in which
    case the date option is created on first vote. With ``participant_id``
    the vote is cast on behalf of that placeholder.
    """

    trip_id: UUID
    caller_id: UUID
    kind: ProposalKind
    option_id: Optional[UUID] = None
    day: Optional[date] = None
    participant_id: Optional[UUID] = None

    @model_validator(mode="after")
    def check_option(self) -> "CastVoteRequest":
        if self.option_id is None and (self.kind != ProposalKind.DATE or self.day is None):
            raise ValueError("option_id is required unless voting on a date by day")
        return self


class CastVoteResponse(UseCaseResponse):
    """Vote response. ``recorded`` is False when the vote already existed."""

    option_id: Optional[str] = None
    recorded: bool = False


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for voting as oneself or for a placeholder."""

    name = "cast_vote"
    response_type = CastVoteResponse

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

    async def _execute(self, request: CastVoteRequest) -> CastVoteResponse:
        trip_id = TripId(request.trip_id)
        caller = UserId(request.caller_id)

        async with self.unit_of_work.transaction():
            if request.option_id is not None:
                option_id = ProposalId(request.option_id)
            else:
                option, _ = await self.proposal_service.propose_date(
                    trip_id, request.day, caller  # type: ignore[arg-type]
                )
                option_id = option.id

            if request.participant_id is None:
                recorded = await self.vote_service.cast_self(
                    trip_id, request.kind, option_id, caller
                )
            else:
                recorded = await self.vote_service.cast_proxy(
                    trip_id,
                    request.kind,
                    option_id,
                    ParticipantId(request.participant_id),
                    caller,
                )

        return CastVoteResponse(option_id=str(option_id), recorded=recorded)
