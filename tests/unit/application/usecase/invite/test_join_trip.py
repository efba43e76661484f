"""Unit tests for CreateInviteUseCase and JoinTripUseCase."""

import asyncio

import pytest

from trip.application.usecase.invite import (
    CreateInviteUseCase,
    JoinTripUseCase,
    RevokeInviteUseCase,
)
from trip.application.usecase.invite.create_invite import CreateInviteRequest
from trip.application.usecase.invite.join_trip import JoinTripRequest
from trip.application.usecase.invite.revoke_invite import RevokeInviteRequest
from trip.domain.value import ErrorKind
from tests.conftest import make_trip, make_user
from tests.harness import create_app_env_fixture, create_env_fixture

# Unit test fixtures - in-memory store, no database needed
unit_env = create_env_fixture()
app_env = create_app_env_fixture()


async def _invite(env, trip, **limits):
    create = await env.get(CreateInviteUseCase)
    response = await create.execute(
        CreateInviteRequest(trip_id=trip.id, caller_id=trip.organizer_id, **limits)
    )
    assert response.success is True
    return response


class TestJoinTrip:
    """Tests for joining with an invite code."""

    @pytest.mark.asyncio
    async def test_code_is_typed_loosely(self, unit_env):
        # Arrange
        trip, _ = await make_trip(unit_env)
        invite = await _invite(unit_env, trip)
        join = await unit_env.get(JoinTripUseCase)
        user_id = await make_user(unit_env, "Max")
        typed = "-".join([invite.code[:5].lower(), f" {invite.code[5:]} "])

        # Act
        response = await join.execute(JoinTripRequest(code=typed, caller_id=user_id))

        # Assert
        assert response.success is True
        assert response.trip_id == str(trip.id)
        assert response.participant.display_name == "Max"
        assert response.participant.is_placeholder is False
        assert invite.invite_url.endswith(invite.code)

    @pytest.mark.asyncio
    async def test_joining_twice_returns_same_participant(self, unit_env):
        trip, _ = await make_trip(unit_env)
        invite = await _invite(unit_env, trip)
        join = await unit_env.get(JoinTripUseCase)
        user_id = await make_user(unit_env)

        first = await join.execute(JoinTripRequest(code=invite.code, caller_id=user_id))
        second = await join.execute(JoinTripRequest(code=invite.code, caller_id=user_id))

        assert second.success is True
        assert second.participant.participant_id == first.participant.participant_id

    @pytest.mark.asyncio
    async def test_exhausted_code(self, unit_env):
        trip, _ = await make_trip(unit_env)
        invite = await _invite(unit_env, trip, max_uses=1)
        join = await unit_env.get(JoinTripUseCase)

        first = await join.execute(
            JoinTripRequest(code=invite.code, caller_id=await make_user(unit_env))
        )
        second = await join.execute(
            JoinTripRequest(code=invite.code, caller_id=await make_user(unit_env))
        )

        assert first.success is True
        assert second.success is False
        assert second.error == ErrorKind.INVALID_OR_EXPIRED_CODE

    @pytest.mark.asyncio
    async def test_revoked_and_unknown_codes_look_alike(self, unit_env):
        trip, _ = await make_trip(unit_env)
        invite = await _invite(unit_env, trip)
        revoke = await unit_env.get(RevokeInviteUseCase)
        join = await unit_env.get(JoinTripUseCase)
        user_id = await make_user(unit_env)

        revoked = await revoke.execute(
            RevokeInviteRequest(
                trip_id=trip.id, caller_id=trip.organizer_id, invite_id=invite.invite_id
            )
        )
        refused = await join.execute(JoinTripRequest(code=invite.code, caller_id=user_id))
        unknown = await join.execute(JoinTripRequest(code="ZZZZZZZZZZ", caller_id=user_id))

        assert revoked.success is True
        assert refused.error == ErrorKind.INVALID_OR_EXPIRED_CODE
        assert unknown.error == ErrorKind.INVALID_OR_EXPIRED_CODE
        assert refused.message == unknown.message

    @pytest.mark.asyncio
    async def test_member_cannot_create_invites(self, unit_env):
        trip, _ = await make_trip(unit_env)
        invite = await _invite(unit_env, trip)
        join = await unit_env.get(JoinTripUseCase)
        create = await unit_env.get(CreateInviteUseCase)
        member_id = await make_user(unit_env)
        await join.execute(JoinTripRequest(code=invite.code, caller_id=member_id))

        response = await create.execute(
            CreateInviteRequest(trip_id=trip.id, caller_id=member_id)
        )

        assert response.error == ErrorKind.FORBIDDEN
        assert response.code is None


class TestConcurrentJoin:
    """Concurrent redemptions of the same code."""

    @pytest.mark.asyncio
    async def test_last_use_goes_to_one_caller(self, app_env):
        # Arrange
        async with app_env() as setup:
            trip, _ = await make_trip(setup)
            invite = await _invite(setup, trip, max_uses=1)
            users = [await make_user(setup) for _ in range(2)]

        # Act
        async with app_env() as first, app_env() as second:
            joins = [await env.get(JoinTripUseCase) for env in (first, second)]
            responses = await asyncio.gather(
                *(
                    join.execute(JoinTripRequest(code=invite.code, caller_id=user_id))
                    for join, user_id in zip(joins, users)
                )
            )

        # Assert
        assert sorted(r.success for r in responses) == [False, True]
        failed = next(r for r in responses if not r.success)
        assert failed.error == ErrorKind.INVALID_OR_EXPIRED_CODE
