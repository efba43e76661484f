"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .retract_vote import RetractVoteRequest, RetractVoteResponse, RetractVoteUseCase
from .tally_votes import (
    OptionTally,
    TallyVotesRequest,
    TallyVotesResponse,
    TallyVotesUseCase,
)

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "OptionTally",
    "RetractVoteRequest",
    "RetractVoteResponse",
    "RetractVoteUseCase",
    "TallyVotesRequest",
    "TallyVotesResponse",
    "TallyVotesUseCase",
]
