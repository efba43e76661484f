"""Unit tests for VoteService."""

from datetime import date
from uuid import uuid4

import pytest

from trip.domain.error import ForbiddenError, NotFoundError, ValidationError
from trip.domain.repository import VoteRepository
from trip.domain.service import ClaimService, ProposalService, VoteService
from trip.domain.value import ParticipantId, ProposalId, ProposalKind
from tests.conftest import make_member, make_placeholder, make_trip, make_user, new_user_id
from tests.harness import create_env_fixture

# Unit test fixture - in-memory store, no database needed
unit_env = create_env_fixture()

DESTINATION = ProposalKind.DESTINATION


async def _destination(env, trip, title="Lake"):
    proposal_service = await env.get(ProposalService)
    return await proposal_service.propose(
        trip.id, DESTINATION, trip.organizer_id, title=title
    )


class TestCastSelf:
    """Tests for cast_self and retract_self."""

    @pytest.mark.asyncio
    async def test_duplicate_cast_is_a_no_op(self, unit_env):
        """Repeated casts never fail and never double-count."""
        # Arrange
        service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        trip, _ = await make_trip(unit_env)
        member_id, _ = await make_member(unit_env, trip.id)
        lake = await _destination(unit_env, trip)

        # Act
        first = await service.cast_self(trip.id, DESTINATION, lake.id, member_id)
        second = await service.cast_self(trip.id, DESTINATION, lake.id, member_id)

        # Assert
        assert first is True
        assert second is False
        assert len(await vote_repo.find_by_options([lake.id])) == 1

    @pytest.mark.asyncio
    async def test_retract_missing_vote_is_a_success(self, unit_env):
        service = await unit_env.get(VoteService)
        trip, _ = await make_trip(unit_env)
        member_id, _ = await make_member(unit_env, trip.id)
        lake = await _destination(unit_env, trip)

        assert await service.retract_self(trip.id, DESTINATION, lake.id, member_id) is False
        await service.cast_self(trip.id, DESTINATION, lake.id, member_id)
        assert await service.retract_self(trip.id, DESTINATION, lake.id, member_id) is True

    @pytest.mark.asyncio
    async def test_non_member_cannot_vote(self, unit_env):
        service = await unit_env.get(VoteService)
        trip, _ = await make_trip(unit_env)
        lake = await _destination(unit_env, trip)

        with pytest.raises(ForbiddenError):
            await service.cast_self(trip.id, DESTINATION, lake.id, new_user_id())

    @pytest.mark.asyncio
    async def test_option_must_belong_to_trip_and_kind(self, unit_env):
        service = await unit_env.get(VoteService)
        trip, _ = await make_trip(unit_env)
        other_trip, _ = await make_trip(unit_env)
        foreign = await _destination(unit_env, other_trip)
        lake = await _destination(unit_env, trip)

        with pytest.raises(NotFoundError):
            await service.cast_self(trip.id, DESTINATION, foreign.id, trip.organizer_id)
        with pytest.raises(NotFoundError):
            await service.cast_self(trip.id, ProposalKind.TERM, lake.id, trip.organizer_id)
        with pytest.raises(NotFoundError):
            await service.cast_self(
                trip.id, DESTINATION, ProposalId(uuid4()), trip.organizer_id
            )

    @pytest.mark.asyncio
    async def test_transportation_is_not_votable(self, unit_env):
        service = await unit_env.get(VoteService)
        proposal_service = await unit_env.get(ProposalService)
        trip, _ = await make_trip(unit_env)
        car = await proposal_service.propose(
            trip.id, ProposalKind.TRANSPORTATION, trip.organizer_id, title="Car"
        )

        with pytest.raises(ValidationError):
            await service.cast_self(
                trip.id, ProposalKind.TRANSPORTATION, car.id, trip.organizer_id
            )


class TestCastProxy:
    """Tests for cast_proxy."""

    @pytest.mark.asyncio
    async def test_member_votes_for_placeholder(self, unit_env):
        service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        trip, _ = await make_trip(unit_env)
        member_id, _ = await make_member(unit_env, trip.id)
        placeholder = await make_placeholder(unit_env, trip)
        lake = await _destination(unit_env, trip)

        recorded = await service.cast_proxy(
            trip.id, DESTINATION, lake.id, placeholder.id, member_id
        )

        assert recorded is True
        votes = await vote_repo.find_by_participant(placeholder.id)
        assert [v.option_id for v in votes] == [lake.id]

    @pytest.mark.asyncio
    async def test_real_participant_is_rejected(self, unit_env):
        service = await unit_env.get(VoteService)
        trip, _ = await make_trip(unit_env)
        _, member = await make_member(unit_env, trip.id)
        lake = await _destination(unit_env, trip)

        with pytest.raises(ValidationError):
            await service.cast_proxy(
                trip.id, DESTINATION, lake.id, member.id, trip.organizer_id
            )

    @pytest.mark.asyncio
    async def test_claimed_placeholder_is_rejected(self, unit_env):
        service = await unit_env.get(VoteService)
        claim_service = await unit_env.get(ClaimService)
        trip, _ = await make_trip(unit_env)
        placeholder = await make_placeholder(unit_env, trip)
        await claim_service.claim_by_selection(
            trip.id, placeholder.id, await make_user(unit_env)
        )
        lake = await _destination(unit_env, trip)

        with pytest.raises(ValidationError):
            await service.cast_proxy(
                trip.id, DESTINATION, lake.id, placeholder.id, trip.organizer_id
            )

    @pytest.mark.asyncio
    async def test_stranger_cannot_proxy(self, unit_env):
        service = await unit_env.get(VoteService)
        trip, _ = await make_trip(unit_env)
        placeholder = await make_placeholder(unit_env, trip)
        lake = await _destination(unit_env, trip)

        with pytest.raises(ForbiddenError):
            await service.cast_proxy(
                trip.id, DESTINATION, lake.id, placeholder.id, new_user_id()
            )

    @pytest.mark.asyncio
    async def test_unknown_participant(self, unit_env):
        service = await unit_env.get(VoteService)
        trip, _ = await make_trip(unit_env)
        lake = await _destination(unit_env, trip)

        with pytest.raises(NotFoundError):
            await service.cast_proxy(
                trip.id, DESTINATION, lake.id, ParticipantId(uuid4()), trip.organizer_id
            )


class TestTally:
    """Tests for tally."""

    @pytest.mark.asyncio
    async def test_counts_and_own_votes(self, unit_env):
        # Arrange
        service = await unit_env.get(VoteService)
        proposal_service = await unit_env.get(ProposalService)
        trip, _ = await make_trip(unit_env)
        member_id, _ = await make_member(unit_env, trip.id)
        placeholder = await make_placeholder(unit_env, trip)
        first, _ = await proposal_service.propose_date(trip.id, date(2026, 7, 1), member_id)
        second, _ = await proposal_service.propose_date(trip.id, date(2026, 7, 2), member_id)
        kind = ProposalKind.DATE
        await service.cast_self(trip.id, kind, first.id, member_id)
        await service.cast_self(trip.id, kind, first.id, trip.organizer_id)
        await service.cast_proxy(trip.id, kind, second.id, placeholder.id, member_id)

        # Act
        tally = await service.tally(trip.id, kind, member_id)

        # Assert
        assert tally.counts == {first.id: 2, second.id: 1}
        assert tally.voted_by_caller == frozenset({first.id})
