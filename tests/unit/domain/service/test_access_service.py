"""Unit tests for TripAccessService."""

from uuid import uuid4

import pytest

from trip.domain.error import ForbiddenError, NotFoundError
from trip.domain.service import TripAccessService
from trip.domain.value import TripId, TripRole
from tests.conftest import make_member, make_placeholder, make_trip, new_user_id
from tests.harness import create_env_fixture

# Unit test fixture - in-memory store, no database needed
unit_env = create_env_fixture()


class TestResolveRole:
    """Tests for resolve_role."""

    @pytest.mark.asyncio
    async def test_roles(self, unit_env):
        # Arrange
        access = await unit_env.get(TripAccessService)
        trip, _ = await make_trip(unit_env)
        member_id, _ = await make_member(unit_env, trip.id)

        # Act & Assert
        assert await access.resolve_role(trip, trip.organizer_id) == TripRole.ORGANIZER
        assert await access.resolve_role(trip, member_id) == TripRole.MEMBER
        assert await access.resolve_role(trip, new_user_id()) == TripRole.NONE
        assert await access.resolve_role(trip, None) == TripRole.NONE

    @pytest.mark.asyncio
    async def test_placeholder_does_not_make_anyone_a_member(self, unit_env):
        access = await unit_env.get(TripAccessService)
        trip, _ = await make_trip(unit_env)
        await make_placeholder(unit_env, trip)

        assert await access.resolve_role(trip, new_user_id()) == TripRole.NONE


class TestRequire:
    """Tests for require_organizer and require_member."""

    @pytest.mark.asyncio
    async def test_unknown_trip_is_not_found(self, unit_env):
        access = await unit_env.get(TripAccessService)

        with pytest.raises(NotFoundError):
            await access.require_member(TripId(uuid4()), new_user_id(), "look")

    @pytest.mark.asyncio
    async def test_member_is_not_organizer(self, unit_env):
        # Arrange
        access = await unit_env.get(TripAccessService)
        trip, _ = await make_trip(unit_env)
        member_id, _ = await make_member(unit_env, trip.id)

        # Act
        _, role = await access.require_member(trip.id, member_id, "look")

        # Assert
        assert role == TripRole.MEMBER
        with pytest.raises(ForbiddenError):
            await access.require_organizer(trip.id, member_id, "manage")

    @pytest.mark.asyncio
    async def test_stranger_is_forbidden(self, unit_env):
        access = await unit_env.get(TripAccessService)
        trip, _ = await make_trip(unit_env)

        with pytest.raises(ForbiddenError):
            await access.require_member(trip.id, new_user_id(), "look")
