"""Tally votes use case."""

from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import VoteService
from trip.domain.value import ProposalKind, TripId, UserId


class TallyVotesRequest(BaseModel):
    trip_id: UUID
    caller_id: UUID
    kind: ProposalKind


class OptionTally(BaseModel):
    option_id: str
    votes: int
    voted_by_caller: bool


class TallyVotesResponse(UseCaseResponse):
    options: list[OptionTally] = []


class TallyVotesUseCase(BaseUseCase[TallyVotesRequest, TallyVotesResponse]):
    """Use case for counting votes per option of one kind."""

    name = "tally_votes"
    response_type = TallyVotesResponse

    def __init__(
        self,
        vote_service: VoteService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.vote_service = vote_service

    async def _execute(self, request: TallyVotesRequest) -> TallyVotesResponse:
        async with self.unit_of_work.transaction():
            tally = await self.vote_service.tally(
                TripId(request.trip_id), request.kind, UserId(request.caller_id)
            )
        return TallyVotesResponse(
            options=[
                OptionTally(
                    option_id=str(option_id),
                    votes=count,
                    voted_by_caller=option_id in tally.voted_by_caller,
                )
                for option_id, count in tally.counts.items()
            ]
        )
