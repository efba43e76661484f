"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from trip.domain.model import Vote
from trip.domain.value import ParticipantId, ProposalId, ProposalKind


class VoteRepository(ABC):
    """Repository for Vote entity.

    Implementations must enforce one vote per (option, participant) at the
    storage level.
    """

    @abstractmethod
    async def add_if_absent(self, vote: Vote) -> bool:
        """Insert a vote unless the participant already voted for the option.

        Returns:
            True if a row was inserted, False if an equivalent vote existed
        """
        pass

    @abstractmethod
    async def delete(
        self, kind: ProposalKind, option_id: ProposalId, participant_id: ParticipantId
    ) -> bool:
        """Delete a participant's vote on an option.

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def find_by_participant(self, participant_id: ParticipantId) -> list[Vote]:
        pass

    @abstractmethod
    async def find_by_options(self, option_ids: Sequence[ProposalId]) -> list[Vote]:
        """Find all votes on the given options (batch query)."""
        pass

    @abstractmethod
    async def reassign_participant(
        self, source: ParticipantId, target: ParticipantId
    ) -> int:
        """Move votes from one participant to another.

        Votes the source holds on options the target already voted for are
        dropped instead of moved.

        Args:
            source: Participant whose votes are moved
            target: Participant that receives the votes

        Returns:
            Number of votes moved
        """
        pass
