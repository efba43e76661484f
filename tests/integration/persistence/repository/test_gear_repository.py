"""Integration tests for PostgresGearRepository."""

from uuid import uuid4

import pytest

from trip.domain.model import GearAssignment
from trip.domain.repository import GearRepository
from trip.domain.service import GearService
from trip.domain.value import GearAssignmentId
from tests.conftest import make_member, make_placeholder, make_trip
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real PostgreSQL, assumes migrations have run
integration_env = create_env_fixture(unmock={"persistence"})


def _assignment(item, participant, quantity=1):
    return GearAssignment(
        id=GearAssignmentId(uuid4()),
        gear_id=item.id,
        participant_id=participant.id,
        quantity=quantity,
    )


class TestGearRepositoryIntegration:
    """Integration tests for assignment upserts and participant merges."""

    @pytest.mark.asyncio
    async def test_second_insert_for_pair_updates_quantity(self, integration_env):
        # Arrange
        repo = await integration_env.get(GearRepository)
        gear_service = await integration_env.get(GearService)
        trip, organizer = await make_trip(integration_env)
        tent = await gear_service.add_item(trip.id, "Tent", trip.organizer_id)

        # Act
        first = await repo.save_assignment(_assignment(tent, organizer, 1))
        second = await repo.save_assignment(_assignment(tent, organizer, 3))

        # Assert
        assert second.id == first.id
        assert second.quantity == 3
        assert await repo.find_assignments_by_participant(organizer.id) == [second]

    @pytest.mark.asyncio
    async def test_reassign_drops_gear_target_already_holds(self, integration_env):
        # Arrange
        repo = await integration_env.get(GearRepository)
        gear_service = await integration_env.get(GearService)
        trip, _ = await make_trip(integration_env)
        _, member = await make_member(integration_env, trip.id)
        placeholder = await make_placeholder(integration_env, trip)
        tent = await gear_service.add_item(trip.id, "Tent", trip.organizer_id)
        stove = await gear_service.add_item(trip.id, "Stove", trip.organizer_id)
        await repo.save_assignment(_assignment(tent, member, 2))
        await repo.save_assignment(_assignment(stove, member, 1))
        await repo.save_assignment(_assignment(tent, placeholder, 1))

        # Act
        moved = await repo.reassign_participant(member.id, placeholder.id)

        # Assert
        assert moved == 1
        held = await repo.find_assignments_by_participant(placeholder.id)
        assert {a.gear_id: a.quantity for a in held} == {tent.id: 1, stove.id: 1}
        assert await repo.find_assignments_by_participant(member.id) == []
