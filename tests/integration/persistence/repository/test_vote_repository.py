"""Integration tests for PostgresVoteRepository."""

from uuid import uuid4

import pytest

from trip.domain.model import Vote
from trip.domain.repository import VoteRepository
from trip.domain.service import ProposalService
from trip.domain.value import ProposalKind, VoteId
from tests.conftest import make_placeholder, make_trip
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real PostgreSQL, assumes migrations have run
integration_env = create_env_fixture(unmock={"persistence"})


def _vote(option, participant):
    return Vote(
        id=VoteId(uuid4()),
        kind=option.kind,
        option_id=option.id,
        participant_id=participant.id,
    )


class TestVoteRepositoryIntegration:
    """Integration tests for insert-or-ignore votes and participant merges."""

    @pytest.mark.asyncio
    async def test_duplicate_vote_is_ignored(self, integration_env):
        repo = await integration_env.get(VoteRepository)
        proposal_service = await integration_env.get(ProposalService)
        trip, organizer = await make_trip(integration_env)
        lake = await proposal_service.propose(
            trip.id, ProposalKind.DESTINATION, trip.organizer_id, title="Lake"
        )

        assert await repo.add_if_absent(_vote(lake, organizer)) is True
        assert await repo.add_if_absent(_vote(lake, organizer)) is False
        assert len(await repo.find_by_options([lake.id])) == 1

    @pytest.mark.asyncio
    async def test_reassign_drops_overlapping_votes(self, integration_env):
        # Arrange
        repo = await integration_env.get(VoteRepository)
        proposal_service = await integration_env.get(ProposalService)
        trip, organizer = await make_trip(integration_env)
        placeholder = await make_placeholder(integration_env, trip)
        x, y, z = [
            await proposal_service.propose(
                trip.id, ProposalKind.DESTINATION, trip.organizer_id, title=title
            )
            for title in ("X", "Y", "Z")
        ]
        for option in (x, y):
            await repo.add_if_absent(_vote(option, organizer))
        for option in (y, z):
            await repo.add_if_absent(_vote(option, placeholder))

        # Act
        moved = await repo.reassign_participant(organizer.id, placeholder.id)

        # Assert
        assert moved == 1
        assert await repo.find_by_participant(organizer.id) == []
        votes = await repo.find_by_participant(placeholder.id)
        assert {v.option_id for v in votes} == {x.id, y.id, z.id}
