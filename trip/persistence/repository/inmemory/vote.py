"""In-memory vote repository for testing."""

from typing import Sequence

from trip.domain.model import Vote
from trip.domain.repository import VoteRepository
from trip.domain.value import ParticipantId, ProposalId, ProposalKind

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _find(self, option_id: ProposalId, participant_id: ParticipantId):
        for vote in self.store.votes.values():
            if vote.option_id == option_id and vote.participant_id == participant_id:
                return vote
        return None

    async def add_if_absent(self, vote: Vote) -> bool:
        if self._find(vote.option_id, vote.participant_id) is not None:
            return False
        self.store.votes[vote.id] = vote
        return True

    async def delete(
        self, kind: ProposalKind, option_id: ProposalId, participant_id: ParticipantId
    ) -> bool:
        vote = self._find(option_id, participant_id)
        if vote is None or vote.kind != kind:
            return False
        del self.store.votes[vote.id]
        return True

    async def find_by_participant(self, participant_id: ParticipantId) -> list[Vote]:
        return [v for v in self.store.votes.values() if v.participant_id == participant_id]

    async def find_by_options(self, option_ids: Sequence[ProposalId]) -> list[Vote]:
        wanted = set(option_ids)
        return [v for v in self.store.votes.values() if v.option_id in wanted]

    async def reassign_participant(
        self, source: ParticipantId, target: ParticipantId
    ) -> int:
        target_options = {
            v.option_id for v in self.store.votes.values() if v.participant_id == target
        }
        moved = 0
        for vote in await self.find_by_participant(source):
            if vote.option_id in target_options:
                del self.store.votes[vote.id]
            else:
                self.store.votes[vote.id] = vote.model_copy(
                    update={"participant_id": target}
                )
                moved += 1
        return moved
