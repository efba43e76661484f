"""Unit tests for the vote use cases."""

from datetime import date

import pytest

from trip.application.usecase.vote import (
    CastVoteUseCase,
    RetractVoteUseCase,
    TallyVotesUseCase,
)
from trip.application.usecase.vote.cast_vote import CastVoteRequest
from trip.application.usecase.vote.retract_vote import RetractVoteRequest
from trip.application.usecase.vote.tally_votes import TallyVotesRequest
from trip.domain.value import ErrorKind, ProposalKind
from tests.conftest import make_member, make_placeholder, make_trip
from tests.harness import create_env_fixture

# Unit test fixture - in-memory store, no database needed
unit_env = create_env_fixture()

DATE = ProposalKind.DATE
DAY = date(2026, 9, 12)


class TestCastVote:
    """Tests for casting votes."""

    @pytest.mark.asyncio
    async def test_voting_by_day_shares_one_option(self, unit_env):
        # Arrange
        trip, _ = await make_trip(unit_env)
        member_id, _ = await make_member(unit_env, trip.id)
        cast = await unit_env.get(CastVoteUseCase)
        tally = await unit_env.get(TallyVotesUseCase)

        # Act
        first = await cast.execute(
            CastVoteRequest(trip_id=trip.id, caller_id=member_id, kind=DATE, day=DAY)
        )
        second = await cast.execute(
            CastVoteRequest(trip_id=trip.id, caller_id=trip.organizer_id, kind=DATE, day=DAY)
        )
        counts = await tally.execute(
            TallyVotesRequest(trip_id=trip.id, caller_id=member_id, kind=DATE)
        )

        # Assert
        assert first.recorded is True
        assert second.option_id == first.option_id
        assert len(counts.options) == 1
        assert counts.options[0].votes == 2
        assert counts.options[0].voted_by_caller is True

    @pytest.mark.asyncio
    async def test_repeat_vote_is_reported_not_failed(self, unit_env):
        trip, _ = await make_trip(unit_env)
        cast = await unit_env.get(CastVoteUseCase)
        request = CastVoteRequest(
            trip_id=trip.id, caller_id=trip.organizer_id, kind=DATE, day=DAY
        )

        await cast.execute(request)
        again = await cast.execute(request)

        assert again.success is True
        assert again.recorded is False

    @pytest.mark.asyncio
    async def test_proxy_vote_for_placeholder(self, unit_env):
        trip, _ = await make_trip(unit_env)
        member_id, member = await make_member(unit_env, trip.id)
        placeholder = await make_placeholder(unit_env, trip)
        cast = await unit_env.get(CastVoteUseCase)

        proxied = await cast.execute(
            CastVoteRequest(
                trip_id=trip.id,
                caller_id=member_id,
                kind=DATE,
                day=DAY,
                participant_id=placeholder.id,
            )
        )
        refused = await cast.execute(
            CastVoteRequest(
                trip_id=trip.id,
                caller_id=trip.organizer_id,
                kind=DATE,
                day=DAY,
                participant_id=member.id,
            )
        )

        assert proxied.recorded is True
        assert refused.error == ErrorKind.VALIDATION

    @pytest.mark.asyncio
    async def test_unvotable_kind_and_missing_option(self, unit_env):
        trip, _ = await make_trip(unit_env)
        tally = await unit_env.get(TallyVotesUseCase)

        with pytest.raises(ValueError):
            CastVoteRequest(
                trip_id=trip.id, caller_id=trip.organizer_id, kind=ProposalKind.TERM, day=DAY
            )
        response = await tally.execute(
            TallyVotesRequest(
                trip_id=trip.id,
                caller_id=trip.organizer_id,
                kind=ProposalKind.TRANSPORTATION,
            )
        )

        assert response.error == ErrorKind.VALIDATION


class TestRetractVote:
    """Tests for retracting votes."""

    @pytest.mark.asyncio
    async def test_retract_by_day(self, unit_env):
        trip, _ = await make_trip(unit_env)
        cast = await unit_env.get(CastVoteUseCase)
        retract = await unit_env.get(RetractVoteUseCase)
        await cast.execute(
            CastVoteRequest(trip_id=trip.id, caller_id=trip.organizer_id, kind=DATE, day=DAY)
        )
        request = RetractVoteRequest(
            trip_id=trip.id, caller_id=trip.organizer_id, kind=DATE, day=DAY
        )

        removed = await retract.execute(request)
        again = await retract.execute(request)

        assert removed.removed is True
        assert again.success is True
        assert again.removed is False

    @pytest.mark.asyncio
    async def test_retract_day_nobody_proposed(self, unit_env):
        trip, _ = await make_trip(unit_env)
        retract = await unit_env.get(RetractVoteUseCase)

        response = await retract.execute(
            RetractVoteRequest(
                trip_id=trip.id, caller_id=trip.organizer_id, kind=DATE, day=DAY
            )
        )

        assert response.success is True
        assert response.removed is False
