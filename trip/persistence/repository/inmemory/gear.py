"""In-memory gear repository for testing."""

from typing import Optional

from trip.domain.model import GearAssignment, GearItem
from trip.domain.repository import GearRepository
from trip.domain.value import GearItemId, ParticipantId

from .store import InMemoryStore


class InMemoryGearRepository(GearRepository):
    """In-memory implementation of GearRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_item(self, gear_id: GearItemId) -> Optional[GearItem]:
        return self.store.gear_items.get(gear_id)

    async def save_item(self, item: GearItem) -> GearItem:
        self.store.gear_items[item.id] = item
        return item

    async def find_assignment(
        self, gear_id: GearItemId, participant_id: ParticipantId
    ) -> Optional[GearAssignment]:
        for assignment in self.store.gear_assignments.values():
            if assignment.gear_id == gear_id and assignment.participant_id == participant_id:
                return assignment
        return None

    async def find_assignments_by_participant(
        self, participant_id: ParticipantId
    ) -> list[GearAssignment]:
        return [
            a
            for a in self.store.gear_assignments.values()
            if a.participant_id == participant_id
        ]

    async def save_assignment(self, assignment: GearAssignment) -> GearAssignment:
        """Upsert on (gear, participant), keeping the stored assignment's id."""
        existing = await self.find_assignment(assignment.gear_id, assignment.participant_id)
        if existing is not None:
            assignment = existing.model_copy(update={"quantity": assignment.quantity})
        self.store.gear_assignments[assignment.id] = assignment
        return assignment

    async def delete_assignment(
        self, gear_id: GearItemId, participant_id: ParticipantId
    ) -> bool:
        assignment = await self.find_assignment(gear_id, participant_id)
        if assignment is None:
            return False
        del self.store.gear_assignments[assignment.id]
        return True

    async def reassign_participant(
        self, source: ParticipantId, target: ParticipantId
    ) -> int:
        held = {
            a.gear_id
            for a in self.store.gear_assignments.values()
            if a.participant_id == target
        }
        moved = 0
        for assignment in await self.find_assignments_by_participant(source):
            if assignment.gear_id in held:
                del self.store.gear_assignments[assignment.id]
            else:
                self.store.gear_assignments[assignment.id] = assignment.model_copy(
                    update={"participant_id": target}
                )
                moved += 1
        return moved
